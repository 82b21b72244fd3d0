"""MIDI and Kronos constants."""

from enum import IntEnum

KORG_MANUFACTURER_ID = 0x42
KRONOS_DEVICE_ID = 0x68

SET_LIST_INTERNAL_LEN = 69416
SET_NAME_INTERNAL_LEN = 24
SET_COMMENT_INTERNAL_LEN = 512


class FunctionCode(IntEnum):
    """Kronos system exclusive function codes."""

    OBJ_DUMP_REQ = 0x72
    OBJ_DUMP = 0x73
    STORE_BANK_REQ = 0x76
    DUMP_BANK_REQ = 0x77
    CURR_OBJ_DUMP_REQ = 0x74
    CURR_OBJ_DUMP = 0x75
    BANK_DIGEST_REQ = 0x37
    BANK_DIGEST = 0x38
    BANK_DIGEST_COLLECTION_REQ = 0x39
    BANK_DIGEST_COLLECTION = 0x3A
    CURR_SAMPLE_INFO_REQ = 0x30
    CURR_SAMPLE_INFO = 0x31
    CURR_PERF_ID_REQ = 0x32
    CURR_PERF_ID = 0x33
    CURR_PIANO_TYPES_REQ = 0x34
    CURR_PIANO_TYPES = 0x35
    NOTIFY_PIANO_TYPES_CHANGED = 0x36
    SMF_DATA_DUMP_REQ = 0x79
    SMF_DATA_DUMP = 0x7A
    PARAM_CHANGE_INT = 0x43
    PARAM_CHANGE_BINARY = 0x44
    SEQ_PARAM_CHANGE = 0x41
    KARMA_PARAM_CHANGE = 0x6D
    DRUM_TRACK_PARAM_CHANGE = 0x6E
    SET_CURR_OBJ = 0x71
    DRUM_KIT_PARAM_CHANGE_INT = 0x53
    DRUM_KIT_PARAM_CHANGE_BINARY = 0x54
    WAVE_SEQ_PARAM_CHANGE_INT = 0x55
    WAVE_SEQ_PARAM_CHANGE_BINARY = 0x56
    MODE_REQ = 0x12
    MODE_DATA = 0x42
    MODE_CHANGE = 0x4E
    PROG_BANK_TYPES_REQ = 0x60
    PROG_BANK_TYPES = 0x61
    CHANGE_PROG_BANK_TYPE = 0x7C
    QUERY_PROG_BANK_TYPE = 0x7D
    QUERY_PROG_BANK_TYPE_REPLY = 0x7E
    RESET_CONTROLLER = 0x78
    KARMA_CONTROL = 0x7F
    SONG_SELECT = 0x13
    REPLY = 0x24


class ObjectType(IntEnum):
    """Kronos object types used in dump requests."""

    PROGRAM = 0x00
    COMBINATION = 0x01
    SONG_TIMBRE_SET = 0x02
    GLOBAL = 0x03
    DRUM_KIT = 0x04
    WAVE_SEQ = 0x05
    KARMA_GE = 0x06
    KARMA_TEMPLATE = 0x07
    SONG_CONTROL = 0x08
    SONG_EVENT = 0x09
    SONG_REGION = 0x0A
    RESERVED = 0x0B
    KARMA_GE_RTP_INFO = 0x0C
    SET_LIST = 0x0D
    DRUM_TRACK_PATTERN = 0x0E
    DRUM_TRACK_PATTERN_EVENT = 0x0F
    SET_LIST_SLOT_COMMENTS = 0x10
    SET_LIST_SLOT_NAME = 0x11
    COMBI_NAME = 0x12
    PROGRAM_NAME = 0x13
    SONG_NAME = 0x14
    WAVE_SEQ_NAME = 0x15
    DRUM_KIT_NAME = 0x16
    SET_LIST_NAME = 0x17
    SONG = 0x18


class KronosMode(IntEnum):
    """Kronos operating modes."""

    COMBINATION = 0
    PROGRAM = 2
    SEQUENCER = 4
    SAMPLING = 6
    GLOBAL = 7
    DISK = 8
    SET_LIST = 9


MIDI_CHANNELS = 16
NOTES_PER_CHANNEL = 128

# Channel messages
NOTE_OFF = 0x80
NOTE_ON = 0x90
POLY_PRESSURE = 0xA0
CONTROLLER = 0xB0
PROGRAM_CHANGE = 0xC0
CHANNEL_PRESSURE = 0xD0
PITCH_BEND = 0xE0

# System common messages
SYSEX = 0xF0
SONG_POINTER = 0xF2
SONG_SELECT = 0xF3
TUNE_REQUEST = 0xF6
EOX = 0xF7

# System realtime messages
CLOCK = 0xF8
START = 0xFA
CONTINUE = 0xFB
STOP = 0xFC
ACTIVE_SENSE = 0xFE
SYSTEM_RESET = 0xFF

# Standard MIDI File meta events
META_EVENT = 0xFF
META_SEQ_NUM = 0x00
META_TEXT = 0x01
META_COPYRIGHT = 0x02
META_SEQ_NAME = 0x03
META_INSTRUMENT = 0x04
META_LYRIC = 0x05
META_MARKER = 0x06
META_CUE = 0x07
META_MIDI_CHAN_PREFIX = 0x20
META_TRACK_END = 0x2F
META_SET_TEMPO = 0x51
META_SMPTE = 0x54
META_TIME_SIG = 0x58
META_PATCH_SIG = 0x59
META_SEQ_SPECIF = 0x7F

# Controller numbers
CC_BANK_SELECT_MSB = 0
CC_BANK_SELECT = CC_BANK_SELECT_MSB
CC_MOD_WHEEL_MSB = 1
CC_MOD_WHEEL = CC_MOD_WHEEL_MSB
CC_BREATH_CONTROLLER_MSB = 2
CC_BREATH_CONTROLLER = CC_BREATH_CONTROLLER_MSB
CC_FOOT_CONTROLLER_MSB = 4
CC_FOOT_CONTROLLER = CC_FOOT_CONTROLLER_MSB
CC_PORTAMENTO_TIME_MSB = 5
CC_PORTAMENTO_TIME = CC_PORTAMENTO_TIME_MSB
CC_DATA_ENTRY_MSB = 6
CC_DATA_ENTRY = CC_DATA_ENTRY_MSB
CC_VOLUME_MSB = 7
CC_VOLUME = CC_VOLUME_MSB
CC_BALANCE_MSB = 8
CC_BALANCE = CC_BALANCE_MSB
CC_PAN_MSB = 10
CC_PAN = CC_PAN_MSB
CC_EXPRESSION_CONTROLLER_MSB = 11
CC_EXPRESSION_CONTROLLER = CC_EXPRESSION_CONTROLLER_MSB
CC_GEN_PURPOSE_1_MSB = 16
CC_GEN_PURPOSE_1 = CC_GEN_PURPOSE_1_MSB
CC_GEN_PURPOSE_2_MSB = 17
CC_GEN_PURPOSE_2 = CC_GEN_PURPOSE_2_MSB
CC_GEN_PURPOSE_3_MSB = 18
CC_GEN_PURPOSE_3 = CC_GEN_PURPOSE_3_MSB
CC_GEN_PURPOSE_4_MSB = 19
CC_GEN_PURPOSE_4 = CC_GEN_PURPOSE_4_MSB

# [32 - 63] are LSB for [0 - 31]
CC_BANK_SELECT_LSB = CC_BANK_SELECT_MSB + 32
CC_MOD_WHEEL_LSB = CC_MOD_WHEEL_MSB + 32
CC_BREATH_CONTROLLER_LSB = CC_BREATH_CONTROLLER_MSB + 32
CC_FOOT_CONTROLLER_LSB = CC_FOOT_CONTROLLER_MSB + 32
CC_PORTAMENTO_TIME_LSB = CC_PORTAMENTO_TIME_MSB + 32
CC_DATA_ENTRY_LSB = CC_DATA_ENTRY_MSB + 32
CC_VOLUME_LSB = CC_VOLUME_MSB + 32
CC_BALANCE_LSB = CC_BALANCE_MSB + 32
CC_PAN_LSB = CC_PAN_MSB + 32
CC_EXPRESSION_CONTROLLER_LSB = CC_EXPRESSION_CONTROLLER_MSB + 32
CC_GEN_PURPOSE_1_LSB = CC_GEN_PURPOSE_1_MSB + 32
CC_GEN_PURPOSE_2_LSB = CC_GEN_PURPOSE_2_MSB + 32
CC_GEN_PURPOSE_3_LSB = CC_GEN_PURPOSE_3_MSB + 32
CC_GEN_PURPOSE_4_LSB = CC_GEN_PURPOSE_4_MSB + 32

# Momentary switches and other controllers
CC_SUSTAIN = 64
CC_PORTAMENTO = 65
CC_SUSTENUTO = 66
CC_SOFT_PEDAL = 67
CC_HOLD_2 = 69
CC_GEN_PURPOSE_5 = 50
CC_GEN_PURPOSE_6 = 51
CC_GEN_PURPOSE_7 = 52
CC_GEN_PURPOSE_8 = 53
CC_EXT_EFFECTS_DEPTH = 91
CC_TREMELO_DEPTH = 92
CC_CHORUS_DEPTH = 93
CC_DETUNE_DEPTH = 94
CC_PHASER_DEPTH = 95
CC_DATA_INCREMENT = 96
CC_DATA_DECREMENT = 97
CC_NREG_PARAM_LSB = 98
CC_NREG_PARAM_MSB = 99
CC_REG_PARAM_LSB = 100
CC_REG_PARAM_MSB = 101

# Channel mode message values
CM_RESET_ALL_CONTROLLERS = 0x79
CM_LOCAL_CONTROL = 0x7A
CM_ALL_NOTES_OFF = 0x7B
CM_OMNI_MODE_OFF = 0x7C
CM_OMNI_MODE_ON = 0x7D
CM_MONO_MODE_ON = 0x7E
CM_POLY_MODE_ON = 0x7F