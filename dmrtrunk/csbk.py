"""Control signalling block model and the settings that shape it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from dmrtrunk.defines import DataType

_BYTE = 0xFF
_ID = 0xFFFFFF


class Csbko(IntEnum):
    """CSBK opcodes used by the trunking controller."""

    C_ALOHA = 0x19
    C_UDTHD = 0x1A
    C_UDTHU = 0x1B
    C_AHOY = 0x1C
    C_ACKVIT = 0x1E
    C_RAND = 0x1F
    C_ACKD = 0x20
    C_ACKU = 0x21
    C_BCAST = 0x28
    P_MAINT = 0x2A
    P_CLEAR = 0x2E
    P_PROTECT = 0x2F
    PV_GRANT = 0x30
    TV_GRANT = 0x31
    BTV_GRANT = 0x32
    PD_GRANT = 0x33
    TD_GRANT = 0x34
    PV_GRANT_DX = 0x35
    PD_GRANT_DX = 0x36
    PD_GRANT_MI = 0x37
    TD_GRANT_MI = 0x38
    C_MOVE = 0x39


class CallType(IntEnum):
    """Kind of call carried by a logical channel."""

    NONE = 0
    GROUP = 1
    MS = 2
    INDIV_PACKET = 3
    GROUP_PACKET = 4


@dataclass
class Csbk:
    """A control signalling block; field values are clipped to their wire width."""

    csbko: int = 0
    lb: bool = True
    pf: bool = False
    fid: int = 0
    data1: int = 0
    cbf: int = 0
    dst_id: int = 0
    src_id: int = 0
    data_type: DataType = DataType.CSBK

    def __post_init__(self) -> None:
        self.fid &= _BYTE
        self.data1 &= _BYTE
        self.cbf &= _BYTE
        self.dst_id &= _ID
        self.src_id &= _ID

    def service_options(self) -> int:
        """Service options carried in the upper seven bits of the first data byte."""
        return self.data1 >> 1

    def service_kind(self) -> int:
        """Service kind carried in the low nibble of the CBF byte."""
        return self.cbf & 0x0F


@dataclass
class ChannelInfo:
    """State of a logical channel that signalling refers to."""

    logical_channel: int
    slot: int = 1
    call_type: CallType = CallType.NONE
    destination: int = 0
    source: int = 0
    channel_params: int | None = None
    colour_code: int = 1

    def __post_init__(self) -> None:
        if self.slot not in (1, 2):
            raise ValueError(f"slot must be 1 or 2, not {self.slot}")


@dataclass
class SignallingSettings:
    """Site settings consulted when building broadcast signalling."""

    system_identity_code: int = 0
    use_absolute_channel_grants: bool = False
    use_fixed_channel_plan: bool = False
    freq_base: int = 0
    freq_separation: int = 12500

    def __post_init__(self) -> None:
        if self.freq_separation <= 0:
            raise ValueError("freq_separation must be positive")