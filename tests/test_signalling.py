from datetime import datetime, timezone

import pytest

from dmrtrunk.csbk import ChannelInfo, Csbk, Csbko, SignallingSettings
from dmrtrunk.defines import DataType
from dmrtrunk.signalling import Signalling, get_uab_pad_nibble


def _params(csbk):
    return (csbk.data1 << 56) | (csbk.cbf << 48) | (csbk.dst_id << 24) | csbk.src_id


def _system_code(csbk):
    return (csbk.dst_id >> 2) & 0x3FFF


@pytest.mark.parametrize(
    "size, expected",
    [(1, (1, 18)), (10, (1, 0)), (11, (2, 22)), (23, (3, 22)), (46, (4, 0))],
)
def test_uab_pad_nibble_table(size, expected):
    assert get_uab_pad_nibble(size) == expected


@pytest.mark.parametrize("size", [0, 47, -3])
def test_uab_pad_nibble_out_of_range(size):
    with pytest.raises(ValueError):
        get_uab_pad_nibble(size)


def test_pad_nibble_is_even_everywhere():
    assert all(get_uab_pad_nibble(n)[1] % 2 == 0 for n in range(1, 47))


def test_registration_request_fields():
    sig = Signalling(SignallingSettings(system_identity_code=0x1234))
    csbk = sig.create_registration_request()
    assert csbk.csbko == Csbko.C_BCAST
    assert csbk.data1 >> 3 == 0x04
    assert _system_code(csbk) == 0x1234
    assert csbk.dst_id & 0x03 == 0x03
    assert csbk.src_id == 0


def test_absolute_parameters_disabled():
    sig = Signalling(SignallingSettings(use_absolute_channel_grants=False))
    channel = ChannelInfo(logical_channel=3, channel_params=0x1122334455667788)
    assert sig.create_absolute_parameters(Csbk(csbko=Csbko.TV_GRANT), channel) is None


def test_absolute_parameters_missing_params():
    sig = Signalling(SignallingSettings(use_absolute_channel_grants=True))
    assert sig.create_absolute_parameters(Csbk(), ChannelInfo(logical_channel=3)) is None
    assert sig.create_absolute_parameters(Csbk(), None) is None


def test_absolute_parameters_round_trip():
    sig = Signalling(SignallingSettings(use_absolute_channel_grants=True))
    params = 0x1122334455667788
    channel = ChannelInfo(logical_channel=3, channel_params=params, colour_code=7)
    grant = Csbk(csbko=Csbko.TV_GRANT, data1=0x00, cbf=0x38, dst_id=9, src_id=8)
    header, cont = sig.create_absolute_parameters(grant, channel)
    assert _params(cont) == params
    assert cont.fid == 7
    assert cont.csbko == Csbko.TV_GRANT
    assert cont.data_type == DataType.MBC_CONTINUATION
    assert header.lb is False
    assert header.data1 == 0xFF
    assert header.cbf & 0x0F == grant.cbf & 0x0F
    assert header.cbf & 0xF0 == 0xF0
    assert header.data_type == DataType.MBC_HEADER
    assert (header.dst_id, header.src_id) == (grant.dst_id, grant.src_id)
    assert grant.data_type == DataType.CSBK


def _decode_channel(cont):
    params = _params(cont)
    rx = ((params >> 13) & 0x3FF) * 1_000_000 + (params & 0x1FFF) * 125
    tx = ((params >> 36) & 0x3FF) * 1_000_000 + ((params >> 23) & 0x1FFF) * 125
    return (params >> 46) & 0xFFF, tx, rx


def test_channel_announcement_round_trip_logical():
    sig = Signalling(SignallingSettings(system_identity_code=0x0ABC))
    channel = {"logical_channel": 17, "tx_freq": 439_812_500, "rx_freq": 430_412_500}
    header, cont = sig.create_logical_physical_channels_announcement(channel)
    assert _decode_channel(cont) == (17, 439_812_500, 430_412_500)
    assert header.src_id == 17
    assert header.lb is False
    assert header.data_type == DataType.MBC_HEADER
    assert cont.data_type == DataType.MBC_CONTINUATION
    assert _system_code(header) == 0x0ABC


def test_channel_announcement_fixed_plan():
    settings = SignallingSettings(
        use_fixed_channel_plan=True, freq_base=439_000_000, freq_separation=12_500
    )
    sig = Signalling(settings)
    channel = {"logical_channel": 5, "tx_freq": 439_812_500, "rx_freq": 430_412_500}
    header, cont = sig.create_logical_physical_channels_announcement(channel)
    lcn, _, _ = _decode_channel(cont)
    assert lcn == header.src_id == 66


def test_adjacent_site_announcement():
    sig = Signalling(SignallingSettings(system_identity_code=0x0ABC))
    site = {"system_id": 0x1A3, "logical_channel": 42}
    csbk = sig.create_adjacent_site_announcement(site)
    decoded = ((csbk.data1 & 0x03) << 11) | (csbk.cbf << 3) | ((csbk.dst_id >> 21) & 0x03)
    assert decoded == 0x1A3
    assert csbk.data1 >> 3 == 0x06
    assert csbk.src_id & 0xFFFF == 42
    assert (csbk.src_id >> 22) & 0x03 == 3
    assert (csbk.src_id >> 19) & 0x01 == 1
    assert (csbk.src_id >> 16) & 0x07 == 1


def test_local_time_announcement():
    sig = Signalling(SignallingSettings(system_identity_code=0x0ABC))
    moment = datetime(2024, 11, 29, 17, 45, 33, tzinfo=timezone.utc)
    csbk = sig.create_local_time_announcement(moment)
    day = ((csbk.data1 & 0x07) << 2) | (csbk.cbf >> 6)
    month = (csbk.cbf >> 2) & 0x0F
    assert (day, month) == (moment.day, moment.month)
    assert (csbk.src_id >> 19) & 0x1F == moment.hour
    assert (csbk.src_id >> 13) & 0x3F == moment.minute
    assert (csbk.src_id >> 7) & 0x3F == moment.second
    assert (csbk.src_id >> 4) & 0x07 == moment.isoweekday()
    assert csbk.data1 >> 3 == 0x03
    assert csbk.csbko == Csbko.C_BCAST
    assert _system_code(csbk) == 0x0ABC