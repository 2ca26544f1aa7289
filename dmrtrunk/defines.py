"""Protocol constants and enumerations shared across the package."""

from enum import IntEnum


class DMRCommand(IntEnum):
    """Trunking commands sent to a repeater channel."""

    NO_COMMAND = 0
    CHANNEL_ENABLE_DISABLE = 1
    CEASE_TRANSMISSION = 2
    REQUEST_CEASE_TRANSMISSION = 3
    POWER_INCREASE_ONE_STEP = 4
    POWER_DECREASE_ONE_STEP = 5
    MAXIMUM_POWER = 6
    MINIMUM_POWER = 7


class StandardAddress(IntEnum):
    """Gateway addresses reserved by the Tier III standard."""

    ALLMSI = 0xFFFED4
    REGI = 0xFFFEC6
    TSI = 0xFFFECA
    ALLMSIDL = 0xFFFFFD
    ALLMSID = 0xFFFFFF
    SDMI = 0xFFFEC5
    TATTSI = 0xFFFED7
    DGNAI = 0xFFFED6
    DIVERTI = 0xFFFEC9
    MSI = 0xFFFEC7
    GPI = 0xFFFECE
    AUTHI = 0xFFFECD
    SUPLI = 0xFFFEC4
    DISPATI = 0xFFFECB
    LINEI = 0xFFFEC2
    IPI = 0xFFFEC3
    HDATA_GW = 0xFFFD02


class ServiceKind(IntEnum):
    """Service kind carried in AHOY and request CSBKs."""

    INDIV_VOICE_CALL = 0
    GROUP_VOICE_CALL = 1
    INDIV_PACKET_DATA_CALL = 2
    GROUP_PACKET_DATA_CALL = 3
    INDIV_UDT_DATA_CALL = 4
    GROUP_UDT_DATA_CALL = 5
    UDT_DATA_POLLING = 6
    STATUS_TRANSPORT = 7
    CALL_DIVERSION = 8
    CALL_ANSWER = 9
    FULL_DUPLEX_VOICE_CALL = 10
    FULL_DUPLEX_DATA_CALL = 11
    SUPPLEMENTARY_SERV = 13
    REGI_AUTH_MS_CHECK = 14
    CANCEL_CALL = 15


class PollFormat(IntEnum):
    """Format requested when polling a radio for UDT data."""

    BINARY = 0
    ADDRESS = 1
    BCD4 = 2
    ISO7 = 3
    ISO8 = 4
    NMEA = 5
    IP = 6
    UTF16 = 7
    STATUS = 10


class UDTFormat(IntEnum):
    """Payload format of a unified data transport message."""

    BINARY = 0
    ADDRESS = 1
    BCD4 = 2
    ISO7 = 3
    ISO8 = 4
    NMEA = 5
    IP = 6
    UTF16 = 7
    MIXED = 10
    LIP = 11


class FLCO(IntEnum):
    """Full link control opcode."""

    GROUP = 0
    USER_USER = 3
    TALKER_ALIAS_HEADER = 4
    TALKER_ALIAS_BLOCK1 = 5
    TALKER_ALIAS_BLOCK2 = 6
    TALKER_ALIAS_BLOCK3 = 7
    GPS_INFO = 8


class DataType(IntEnum):
    """Slot data type; the voice values are local markers, not air values."""

    VOICE_PI_HEADER = 0x00
    VOICE_LC_HEADER = 0x01
    TERMINATOR_WITH_LC = 0x02
    CSBK = 0x03
    MBC_HEADER = 0x04
    MBC_CONTINUATION = 0x05
    DATA_HEADER = 0x06
    RATE_12_DATA = 0x07
    RATE_34_DATA = 0x08
    IDLE = 0x09
    RATE_1_DATA = 0x0A
    VOICE_SYNC = 0xF0
    VOICE = 0xF1


class HardwareType(IntEnum):
    """Modem hardware families."""

    MMDVM = 0
    DVMEGA = 1
    MMDVM_ZUMSPOT = 2
    MMDVM_HS_HAT = 3
    MMDVM_HS_DUAL_HAT = 4
    NANO_HOTSPOT = 5
    NANO_DV = 6
    D2RG_MMDVM_HS = 7
    MMDVM_HS = 8
    OPENGD77_HS = 9
    SKYBRIDGE = 10
    UNKNOWN = 11


MODE_IDLE = 0
MODE_DSTAR = 1
MODE_DMR = 2
MODE_YSF = 3
MODE_P25 = 4
MODE_NXDN = 5
MODE_POCSAG = 6
MODE_M17 = 7
MODE_FM = 10
MODE_CW = 98
MODE_LOCKOUT = 99
MODE_ERROR = 100
MODE_QUIT = 110

TAG_HEADER = 0x00
TAG_DATA = 0x01
TAG_LOST = 0x02
TAG_EOT = 0x03

DSTAR_MODEM_DATA_LEN = 220

DMR_FRAME_LENGTH_BITS = 264
DMR_FRAME_LENGTH_BYTES = 33
DMR_SYNC_LENGTH_BITS = 48
DMR_SYNC_LENGTH_BYTES = 6
DMR_EMB_LENGTH_BITS = 8
DMR_EMB_LENGTH_BYTES = 1
DMR_SLOT_TYPE_LENGTH_BITS = 8
DMR_SLOT_TYPE_LENGTH_BYTES = 1
DMR_EMBEDDED_SIGNALLING_LENGTH_BITS = 32
DMR_EMBEDDED_SIGNALLING_LENGTH_BYTES = 4
DMR_AMBE_LENGTH_BITS = 108 * 2
DMR_AMBE_LENGTH_BYTES = 27

BS_SOURCED_AUDIO_SYNC = bytes((0x07, 0x55, 0xFD, 0x7D, 0xF7, 0x5F, 0x70))
BS_SOURCED_DATA_SYNC = bytes((0x0D, 0xFF, 0x57, 0xD7, 0x5D, 0xF5, 0xD0))
MS_SOURCED_AUDIO_SYNC = bytes((0x07, 0xF7, 0xD5, 0xDD, 0x57, 0xDF, 0xD0))
MS_SOURCED_DATA_SYNC = bytes((0x0D, 0x5D, 0x7F, 0x77, 0xFD, 0x75, 0x70))
DIRECT_SLOT1_AUDIO_SYNC = bytes((0x05, 0xD5, 0x77, 0xF7, 0x75, 0x7F, 0xF0))
DIRECT_SLOT1_DATA_SYNC = bytes((0x0F, 0x7F, 0xDD, 0x5D, 0xDF, 0xD5, 0x50))
DIRECT_SLOT2_AUDIO_SYNC = bytes((0x07, 0xDF, 0xFD, 0x5F, 0x55, 0xD5, 0xF0))
DIRECT_SLOT2_DATA_SYNC = bytes((0x0D, 0x75, 0x57, 0xF5, 0xFF, 0x7F, 0x50))
SYNC_MASK = bytes((0x0F, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xF0))

# Tag byte, control byte, then a PR FILL frame carrying the data sync.
DMR_IDLE_DATA = bytes((
    TAG_DATA, 0x00,
    0x53, 0xC2, 0x5E, 0xAB, 0xA8, 0x67, 0x1D, 0xC7, 0x38, 0x3B, 0xD9,
    0x36, 0x00, 0x0D, 0xFF, 0x57, 0xD7, 0x5D, 0xF5, 0xD0, 0x03, 0xF6,
    0xE4, 0x65, 0x17, 0x1B, 0x48, 0xCA, 0x6D, 0x4F, 0xC6, 0x10, 0xB4,
))

# Tag byte, control byte, then a silence frame.
DMR_SILENCE_DATA = bytes((
    TAG_DATA, 0x00,
    0xB9, 0xE8, 0x81, 0x52, 0x61, 0x73, 0x00, 0x2A, 0x6B, 0xB9, 0xE8,
    0x81, 0x52, 0x60, 0x00, 0x00, 0x00, 0x00, 0x00, 0x01, 0x73, 0x00,
    0x2A, 0x6B, 0xB9, 0xE8, 0x81, 0x52, 0x61, 0x73, 0x00, 0x2A, 0x6B,
))

PAYLOAD_LEFT_MASK = bytes([0xFF] * 13 + [0xF0])
PAYLOAD_RIGHT_MASK = bytes([0x0F] + [0xFF] * 13)

VOICE_LC_HEADER_CRC_MASK = bytes((0x96, 0x96, 0x96))
TERMINATOR_WITH_LC_CRC_MASK = bytes((0x99, 0x99, 0x99))
PI_HEADER_CRC_MASK = bytes((0x69, 0x69))
DATA_HEADER_CRC_MASK = bytes((0xCC, 0xCC))
DATA_CONTINUATION_CRC_MASK = bytes((0xF0, 0xF0))
CSBK_CRC_MASK = bytes((0xA5, 0xA5))
MBC_CRC_MASK = bytes((0xAA, 0xAA))

DMR_SLOT_TIME = 60
AMBE_PER_SLOT = 3

DT_MASK = 0x0F

DMR_IDLE_RX = 0x80
DMR_SYNC_DATA = 0x40
DMR_SYNC_AUDIO = 0x20

DMR_SLOT1 = 0x00
DMR_SLOT2 = 0x80

DPF_UDT = 0x00
DPF_RESPONSE = 0x01
DPF_UNCONFIRMED_DATA = 0x02
DPF_CONFIRMED_DATA = 0x03
DPF_DEFINED_SHORT = 0x0D
DPF_DEFINED_RAW = 0x0E
DPF_PROPRIETARY = 0x0F

FID_ETSI = 0
FID_DMRA = 16

EXTERNAL_NETWORK_CHANNEL = 1000