"""Channel grants, late entry announcements and channel clear-down CSBKs."""

from __future__ import annotations

from dmrtrunk.csbk import CallType, ChannelInfo, Csbk, Csbko
from dmrtrunk.defines import StandardAddress
from dmrtrunk.utils import convert_base10_to_base11_group_number

_LATE_ENTRY_OPCODES = {
    CallType.GROUP: Csbko.TV_GRANT,
    CallType.MS: Csbko.PV_GRANT,
    CallType.INDIV_PACKET: Csbko.PD_GRANT,
    CallType.GROUP_PACKET: Csbko.TD_GRANT,
}

_GROUP_CALL_TYPES = (CallType.GROUP, CallType.GROUP_PACKET)


def _channel_bytes(
    channel: ChannelInfo, flag: int = 0, emergency: bool = False
) -> tuple[int, int]:
    """Pack the 12-bit channel number, slot and flags into data1 and CBF."""
    phys_chan = channel.logical_channel & 0xFFFF
    data1 = (phys_chan >> 4) & 0xFF
    cbf = ((phys_chan & 0xFF) << 4) & 0xFF
    cbf |= ((channel.slot - 1) << 3) & 0x08
    cbf |= (int(flag) << 2) & 0x04
    cbf |= (int(emergency) << 1) & 0x02
    return data1, cbf


def create_late_entry_announcement(channel: ChannelInfo) -> Csbk:
    """Repeat the grant of a call in progress so late radios can join it."""
    try:
        csbko = _LATE_ENTRY_OPCODES[channel.call_type]
    except KeyError:
        raise ValueError(
            f"no grant exists for call type {channel.call_type!r}"
        ) from None
    data1, cbf = _channel_bytes(channel, flag=1)
    if channel.call_type in _GROUP_CALL_TYPES:
        dst_id = convert_base10_to_base11_group_number(channel.destination)
    else:
        dst_id = channel.destination
    return Csbk(
        csbko=csbko,
        data1=data1,
        cbf=cbf,
        dst_id=dst_id,
        src_id=channel.source,
    )


def _voice_grant(
    csbko: Csbko, channel: ChannelInfo, src_id: int, dst_id: int
) -> Csbk:
    data1, cbf = _channel_bytes(channel)
    return Csbk(
        csbko=csbko, fid=0x00, data1=data1, cbf=cbf, dst_id=dst_id, src_id=src_id
    )


def create_private_voice_grant(
    channel: ChannelInfo, src_id: int, dst_id: int
) -> Csbk:
    """Grant a channel to an individual voice call."""
    return _voice_grant(Csbko.PV_GRANT, channel, src_id, dst_id)


def create_group_voice_grant(
    channel: ChannelInfo, src_id: int, dst_id: int
) -> Csbk:
    """Grant a channel to a talkgroup voice call."""
    return _voice_grant(Csbko.TV_GRANT, channel, src_id, dst_id)


def _packet_grant_fields(
    request: Csbk, channel: ChannelInfo
) -> tuple[bool, int, int]:
    options = request.service_options()
    multi_item = (options >> 2) != 0
    hi_rate = (options >> 3) != 0
    data1, cbf = _channel_bytes(channel, flag=int(hi_rate))
    return multi_item, data1, cbf


def create_private_packet_data_grant(
    request: Csbk, channel: ChannelInfo, src_id: int, dst_id: int
) -> Csbk:
    """Grant a channel to an individual packet data call requested by request.

    The grant is addressed back to the requester, so source and destination
    swap places on the air.
    """
    multi_item, data1, cbf = _packet_grant_fields(request, channel)
    return Csbk(
        csbko=Csbko.PD_GRANT_MI if multi_item else Csbko.PD_GRANT,
        fid=0x00,
        data1=data1,
        cbf=cbf,
        dst_id=src_id,
        src_id=dst_id,
    )


def create_group_packet_data_grant(
    request: Csbk, channel: ChannelInfo, src_id: int, dst_id: int
) -> Csbk:
    """Grant a channel to a talkgroup packet data call requested by request."""
    multi_item, data1, cbf = _packet_grant_fields(request, channel)
    return Csbk(
        csbko=Csbko.TD_GRANT_MI if multi_item else Csbko.TD_GRANT,
        fid=0x00,
        data1=data1,
        cbf=cbf,
        dst_id=dst_id,
        src_id=src_id,
    )


def _clear(cbf_low: int, dst_id: int) -> Csbk:
    return Csbk(
        csbko=Csbko.P_CLEAR,
        fid=0x00,
        data1=0x00,
        cbf=int(cbf_low) & 0xFF,
        dst_id=dst_id,
        src_id=StandardAddress.TSI,
    )


def create_clear_channel_user_initiated(
    channel: ChannelInfo, group_call: bool
) -> Csbk:
    """Send the radios of a call back to the control channel after a user hang-up."""
    return _clear(int(group_call), channel.destination)


def create_channel_idle_deallocation(call_type: int) -> Csbk:
    """Clear an idle payload channel, addressed to all radios."""
    return _clear(call_type, StandardAddress.ALLMSI)


def create_call_disconnect(dst_id: int, group_call: bool) -> Csbk:
    """Clear down the call addressed to dst_id."""
    return _clear(int(group_call), dst_id)


def create_clear_channel_all(call_type: int) -> Csbk:
    """Send every radio on a payload channel back to the control channel."""
    return _clear(call_type, StandardAddress.ALLMSI)