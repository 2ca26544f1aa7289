# dmrtrunk

Building blocks for a DMR Tier III trunking controller. The package is pure
Python and needs nothing outside the standard library.

## Modules

- `dmrtrunk.defines`: protocol constants and enums. The enums are
  `DMRCommand`, `StandardAddress`, `ServiceKind`, `PollFormat`, `UDTFormat`,
  `FLCO`, `DataType` and `HardwareType`. The module also has sync patterns,
  CRC masks, frame lengths and data packet format values.
- `dmrtrunk.utils`: talkgroup number conversions
  (`convert_base10_to_base11_group_number`,
  `convert_base11_group_number_to_base10`, `convert_p3_group_number_to_cai`,
  `base11`) and text decoding for short data messages. `parse_utf16` decodes
  big-endian UTF-16. `parse_iso7bit_to_iso8bit` unpacks packed 7-bit
  characters.
- `dmrtrunk.csbk`:
  - `Csbk`, a dataclass with the fields `csbko`, `lb`, `pf`, `fid`, `data1`,
    `cbf`, `dst_id`, `src_id` and `data_type`. Each field is clipped to its
    wire width. The block has the helpers `service_options()` and
    `service_kind()`.
  - The opcodes (`Csbko`) and call types (`CallType`).
  - `ChannelInfo`, which describes a logical channel. The slot must be 1 or 2.
  - `SignallingSettings`, which holds the system identity code, absolute grant
    and fixed channel plan switches, and the frequency base and separation.
- `dmrtrunk.signalling`:
  - The `Signalling` class builds site broadcasts from `SignallingSettings`.
    Its methods are `create_registration_request`,
    `create_logical_physical_channels_announcement` (which returns an MBC
    header and its continuation), `create_adjacent_site_announcement` and
    `create_local_time_announcement`.
  - `create_absolute_parameters` turns a grant into an MBC header and an
    absolute-parameter continuation. It returns `None` when absolute grants
    are off or the channel has no parameters.
  - `get_uab_pad_nibble(msg_size)` gives the appended block count and pad
    nibble for a message of 1 to 46 bytes. Any other size raises `ValueError`.
- `dmrtrunk.grants`:
  - Voice and packet data grants: `create_private_voice_grant`,
    `create_group_voice_grant`, `create_private_packet_data_grant` and
    `create_group_packet_data_grant`.
  - `create_late_entry_announcement`. It raises `ValueError` for a channel
    with no call type.
  - Clear-down messages: `create_clear_channel_user_initiated`,
    `create_channel_idle_deallocation`, `create_call_disconnect` and
    `create_clear_channel_all`.
- `dmrtrunk.replies`: AHOY requests and `C_ACKD` replies.
  - Registration replies: accepted, refused, denied and deregistration
    accepted.
  - Call replies: queued, denied, rejected, not registered and wait for
    signalling.
  - Checks: presence and authentication checks.
  - Status: status transport and status poll.
  - Uploads: requests to upload a message, divert information, talkgroup
    attachments or polled UDT data.
  - `create_request_to_upload_message` and
    `create_request_to_upload_divert_info` return the AHOY together with the
    number of appended blocks.
- `dmrtrunk.network`: UDP framing and a client.
  - `DMRData` describes one burst with its metadata. Its frame must be
    33 bytes.
  - `encode_dmr_data` builds a 55 byte `DMRD` packet.
  - `encode_dmr_config` builds a `DMRC` packet of `len(config) + 7` bytes, so
    the last configuration byte is not carried. It raises `ValueError` when
    the configuration is under 8 bytes.
  - `encode_trunking_params` builds an 8 byte `DMRT` packet.
  - `parse_network_data` classifies a received datagram as a `PacketKind`, or
    returns `None`.
  - `UDPClient` binds a non-blocking UDP socket and can be used as a context
    manager. `read_pending_datagrams()` reads what has arrived and hands each
    packet to the `on_dmr_data` or `on_config` callback. `write_dmr_data`,
    `write_dmr_config` and `write_trunking_params` send packets. Writes made
    while the client is stopped are dropped. A bind failure is logged and
    leaves the client stopped.

## Example

```python
from dmrtrunk.csbk import ChannelInfo, SignallingSettings
from dmrtrunk.grants import create_group_voice_grant
from dmrtrunk.replies import create_reply_registration_accepted
from dmrtrunk.signalling import Signalling
from dmrtrunk.utils import convert_base10_to_base11_group_number

group = convert_base10_to_base11_group_number(9)
reply = create_reply_registration_accepted(2260001)

channel = ChannelInfo(logical_channel=3, slot=2)
grant = create_group_voice_grant(channel, src_id=2260001, dst_id=group)

signalling = Signalling(SignallingSettings(system_identity_code=0x123))
broadcast = signalling.create_registration_request()
```

## What it does not do

- It has no controller that runs a site. It keeps no registrations, assigns no
  channels and has no command to start.
- It builds CSBKs only as field values. It does not encode them into air
  bursts (CRC, BPTC, slot type and sync).
- It does not build data headers or data blocks.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```