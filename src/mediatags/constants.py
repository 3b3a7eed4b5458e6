# APIC picture type byte -> description (ID3v2 section 4.14)
PICTURE_TYPES = [
    "Other",
    "32x32 pixels 'file icon' (PNG only)",
    "Other file icon",
    "Cover (front)",
    "Cover (back)",
    "Leaflet page",
    "Media (e.g. label side of CD)",
    "Lead artist/lead performer/soloist",
    "Artist/performer",
    "Conductor",
    "Band/Orchestra",
    "Composer",
    "Lyricist/text writer",
    "Recording Location",
    "During recording",
    "During performance",
    "Movie/video screen capture",
    "A bright coloured fish",
    "Illustration",
    "Band/artist logotype",
    "Publisher/Studio logotype",
]

# Friendly field names and the frame ids they can come from, newest first.
# v2.2 uses three letter ids, v2.3 and v2.4 four letter ones.
SHORTCUTS = {
    "title": ["TIT2", "TT2"],
    "artist": ["TPE1", "TP1"],
    "album": ["TALB", "TAL"],
    "year": ["TYER", "TDRC", "TYE"],
    "comment": ["COMM", "COM"],
    "track": ["TRCK", "TRK"],
    "genre": ["TCON", "TCO"],
    "picture": ["APIC", "PIC"],
    "lyrics": ["USLT", "ULT"],
}

FRAME_DESCRIPTIONS = {
    # v2.2
    "BUF": "Recommended buffer size",
    "CNT": "Play counter",
    "COM": "Comments",
    "CRA": "Audio encryption",
    "EQU": "Equalization",
    "GEO": "General encapsulated object",
    "PIC": "Attached picture",
    "POP": "Popularimeter",
    "TAL": "Album/Movie/Show title",
    "TBP": "BPM (Beats Per Minute)",
    "TCM": "Composer",
    "TCO": "Content type",
    "TCR": "Copyright message",
    "TEN": "Encoded by",
    "TP1": "Lead artist(s)/Lead performer(s)/Soloist(s)/Performing group",
    "TP2": "Band/Orchestra/Accompaniment",
    "TPA": "Part of a set",
    "TRK": "Track number/Position in set",
    "TT2": "Title/Songname/Content description",
    "TXX": "User defined text information frame",
    "TYE": "Year",
    "ULT": "Unsychronized lyric/text transcription",
    "WAR": "Official artist/performer webpage",
    "WXX": "User defined URL link frame",
    # v2.3 and v2.4
    "APIC": "Attached picture",
    "COMM": "Comments",
    "GEOB": "General encapsulated object",
    "PCNT": "Play counter",
    "POPM": "Popularimeter",
    "PRIV": "Private frame",
    "TALB": "Album/Movie/Show title",
    "TBPM": "BPM (beats per minute)",
    "TCOM": "Composer",
    "TCON": "Content type",
    "TCOP": "Copyright message",
    "TDRC": "Recording time",
    "TENC": "Encoded by",
    "TIT1": "Content group description",
    "TIT2": "Title/songname/content description",
    "TIT3": "Subtitle/Description refinement",
    "TLEN": "Length",
    "TPE1": "Lead performer(s)/Soloist(s)",
    "TPE2": "Band/orchestra/accompaniment",
    "TPOS": "Part of a set",
    "TRCK": "Track number/Position in set",
    "TSSE": "Software/Hardware and settings used for encoding",
    "TXXX": "User defined text information frame",
    "TYER": "Year",
    "UFID": "Unique file identifier",
    "USLT": "Unsychronized lyric/text transcription",
    "WCOM": "Commercial information",
    "WOAR": "Official artist/performer webpage",
    "WOAS": "Official audio source webpage",
    "WXXX": "User defined URL link frame",
}

# ID3v2 header flags by major version: flag name -> bit mask in header byte 5
HEADER_FLAGS = {
    2: {"unsynchronisation": 0x80, "compression": 0x40},
    3: {"unsynchronisation": 0x80, "extended_header": 0x40, "experimental_indicator": 0x20},
    4: {
        "unsynchronisation": 0x80,
        "extended_header": 0x40,
        "experimental_indicator": 0x20,
        "footer_present": 0x10,
    },
}

ID3V2_HEADER_SIZE = 10
ID3V1_SIZE = 128
