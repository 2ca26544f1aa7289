"""Broadcast and parameter signalling built from site settings."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from datetime import datetime

from dmrtrunk.csbk import ChannelInfo, Csbk, Csbko, SignallingSettings
from dmrtrunk.defines import DataType

_UINT64 = 0xFFFFFFFFFFFFFFFF

_UAB = (
    (1,) * 10 + (2,) * 12 + (3,) * 12 + (4,) * 12
)
_PAD_NIBBLE = (
    (18, 16, 14, 12, 10, 8, 6, 4, 2, 0)
    + (22, 20, 18, 16, 14, 12, 10, 8, 6, 4, 2, 0) * 3
)

_BACKOFF = 2 << 16
_REG = 1 << 20


def get_uab_pad_nibble(msg_size: int) -> tuple[int, int]:
    """Return (appended blocks, pad nibble) for a message of 1..46 bytes."""
    if not 1 <= msg_size <= len(_UAB):
        raise ValueError(f"message size must be between 1 and {len(_UAB)}")
    return _UAB[msg_size - 1], _PAD_NIBBLE[msg_size - 1]


class Signalling:
    """Builds site-level CSBKs according to the given settings."""

    def __init__(self, settings: SignallingSettings) -> None:
        self.settings = settings

    @property
    def _system_id(self) -> int:
        return ((self.settings.system_identity_code << 2) & 0xFFFF) | 0x03

    def _channel_number(self, channel: Mapping[str, int]) -> int:
        if not self.settings.use_fixed_channel_plan:
            return channel.get("logical_channel", 0)
        offset = (channel.get("tx_freq", 0) - self.settings.freq_base) & _UINT64
        return (offset // self.settings.freq_separation + 1) & _UINT64

    def create_absolute_parameters(
        self, csbk: Csbk, channel: ChannelInfo | None
    ) -> tuple[Csbk, Csbk] | None:
        """Turn a grant into an MBC header plus absolute-parameter continuation.

        Returns None when absolute grants are off or the channel has no parameters.
        """
        if not self.settings.use_absolute_channel_grants or channel is None:
            return None
        if channel.channel_params is None:
            return None
        params = channel.channel_params & _UINT64
        continuation = Csbk(
            csbko=csbk.csbko,
            fid=channel.colour_code & 0x0F,
            data1=params >> 56,
            cbf=params >> 48,
            dst_id=params >> 24,
            src_id=params,
            data_type=DataType.MBC_CONTINUATION,
        )
        header = replace(
            csbk,
            lb=False,
            data1=0xFF,
            cbf=csbk.cbf | 0xF0,
            data_type=DataType.MBC_HEADER,
        )
        return header, continuation

    def create_registration_request(self) -> Csbk:
        """Mass registration broadcast."""
        announcement_type = 0x04 << 3
        reg_window = 8 << 2
        dst = ((1 << 4) << 16) | (8 << 16) | self._system_id
        return Csbk(
            csbko=Csbko.C_BCAST,
            fid=0x00,
            data1=announcement_type,
            cbf=reg_window,
            dst_id=dst,
            src_id=0,
        )

    def create_logical_physical_channels_announcement(
        self, channel: Mapping[str, int]
    ) -> tuple[Csbk, Csbk]:
        """Announce a channel number with its absolute frequencies."""
        lcn = self._channel_number(channel)
        header = Csbk(
            csbko=Csbko.C_BCAST,
            lb=False,
            pf=False,
            fid=0x00,
            data1=0x05 << 3,
            cbf=0x00,
            dst_id=self._system_id | _BACKOFF | _REG,
            src_id=lcn & 0xFFFFFFFF,
            data_type=DataType.MBC_HEADER,
        )
        tx_freq = channel.get("tx_freq", 0)
        rx_freq = channel.get("rx_freq", 0)
        params = (
            (rx_freq % 1_000_000 // 125)
            | ((rx_freq // 1_000_000) << 13)
            | ((tx_freq % 1_000_000 // 125) << 23)
            | ((tx_freq // 1_000_000) << 36)
            | (lcn << 46)
        ) & _UINT64
        continuation = Csbk(
            csbko=Csbko.C_BCAST,
            fid=0x00,
            data1=params >> 56,
            cbf=params >> 48,
            dst_id=params >> 24,
            src_id=params,
            data_type=DataType.MBC_CONTINUATION,
        )
        return header, continuation

    def create_adjacent_site_announcement(self, site: Mapping[str, int]) -> Csbk:
        """Announce a neighbouring site and the channel it can be found on."""
        site_id = site.get("system_id", 0) & 0xFFFFFFFF
        parms2 = self._channel_number(site) & 0xFFFFFFFF
        active_connection = 3
        confirmed_priority = 1
        adjacent_priority = 1
        parms2 |= active_connection << 22
        parms2 |= confirmed_priority << 19
        parms2 |= adjacent_priority << 16
        data1 = (0x06 << 3) | ((site_id >> 11) & 0x03)
        dst = ((site_id & 0x03) << 21) | self._system_id | _BACKOFF | _REG
        return Csbk(
            csbko=Csbko.C_BCAST,
            fid=0x00,
            data1=data1,
            cbf=(site_id >> 3) & 0xFF,
            dst_id=dst,
            src_id=parms2,
        )

    def create_local_time_announcement(self, date_time: datetime) -> Csbk:
        """Broadcast the date and time; naive values are taken as local time."""
        aware = date_time if date_time.tzinfo is not None else date_time.astimezone()
        delta = aware.utcoffset()
        offset = int(delta.total_seconds()) if delta is not None else 0
        parms1 = (
            ((date_time.day & 0x1F) << 9)
            | ((date_time.month & 0x0F) << 5)
            | ((offset & 0x0F) << 1)
            | int(offset < 0)
        )
        parms2 = (
            ((date_time.hour & 0x1F) << 19)
            | ((date_time.minute & 0x3F) << 13)
            | ((date_time.second & 0x3F) << 7)
            | ((date_time.isoweekday() & 0x07) << 4)
        )
        data1 = (0x03 << 3) | ((parms1 >> 11) & 0x07)
        dst = (
            (((parms1 << 5) & 0xFF) << 21) | self._system_id | _BACKOFF | _REG
        )
        return Csbk(
            csbko=Csbko.C_BCAST,
            fid=0x00,
            data1=data1,
            cbf=(parms1 >> 3) & 0xFF,
            dst_id=dst,
            src_id=parms2,
        )