"""AHOY requests and acknowledgement replies sent on the control channel."""

from __future__ import annotations

from dmrtrunk.csbk import Csbk, Csbko
from dmrtrunk.defines import ServiceKind, StandardAddress


def _ack(reason: int, dst_id: int, src_id: int, response_info: int = 0) -> Csbk:
    """Build a C_ACKD carrying an eight-bit reason code split over two bytes."""
    return Csbk(
        csbko=Csbko.C_ACKD,
        fid=0x00,
        data1=((response_info << 1) | (reason >> 7)) & 0xFF,
        cbf=(reason << 1) & 0xFF,
        dst_id=dst_id,
        src_id=src_id,
    )


def _ahoy(data1: int, cbf: int, dst_id: int, src_id: int) -> Csbk:
    return Csbk(
        csbko=Csbko.C_AHOY,
        fid=0x00,
        data1=data1 & 0xFF,
        cbf=cbf & 0xFF,
        dst_id=dst_id,
        src_id=src_id,
    )


def create_presence_check_ahoy(target_id: int, group: bool) -> Csbk:
    """Ask a radio or group to confirm it is still present."""
    cbf = ServiceKind.REGI_AUTH_MS_CHECK | (int(group) << 6)
    return _ahoy(0x00, cbf, target_id & 0xFFFFFF, StandardAddress.TSI)


def create_auth_check_ahoy(target_id: int, challenge: int, options: int = 0) -> Csbk:
    """Challenge a radio to authenticate itself."""
    return _ahoy(
        options << 1,
        ServiceKind.REGI_AUTH_MS_CHECK,
        target_id & 0xFFFFFF,
        challenge & 0xFFFFFF,
    )


def create_reply_message_accepted(
    dst_id: int, src_id: int = StandardAddress.SDMI, from_ts: bool = True
) -> Csbk:
    """Acknowledge a message; the reason depends on whether the site sends it."""
    reason = 0x60 if from_ts else 0x44
    return _ack(reason, dst_id, src_id)


def create_reply_registration_accepted(dst_id: int) -> Csbk:
    """Accept a registration for every registration kind."""
    return Csbk(
        csbko=Csbko.C_ACKD,
        data1=0xFE,
        cbf=0xC4,
        dst_id=dst_id,
        src_id=StandardAddress.REGI,
    )


def create_reply_registration_refused(dst_id: int) -> Csbk:
    """Refuse a registration."""
    return _ack(0x2A, dst_id, StandardAddress.REGI)


def create_reply_registration_denied(dst_id: int) -> Csbk:
    """Deny a registration."""
    return _ack(0x2B, dst_id, StandardAddress.REGI)


def create_reply_deregistration_accepted(dst_id: int) -> Csbk:
    """Accept a deregistration."""
    return _ack(98, dst_id, StandardAddress.REGI)


def create_reply_call_divert_accepted(dst_id: int) -> Csbk:
    """Accept a call diversion request."""
    return Csbk(
        csbko=Csbko.C_ACKD,
        data1=0x00,
        cbf=0xC0,
        dst_id=dst_id,
        src_id=StandardAddress.DIVERTI,
    )


def create_private_voice_call_request(local: bool, src_id: int, dst_id: int) -> Csbk:
    """Ask the called radio to accept a private voice call (FOACSU when local)."""
    return _ahoy(int(local), 0x00, dst_id, src_id)


def create_private_packet_call_ahoy(request: Csbk, src_id: int, dst_id: int) -> Csbk:
    """Ask the requesting radio for the details of an individual packet call."""
    return _ahoy(
        request.service_options() << 1,
        ServiceKind.INDIV_PACKET_DATA_CALL,
        src_id,
        StandardAddress.TSI,
    )


def create_request_to_upload_tg_attachments(
    request: Csbk, dst_id: int, uab: int
) -> Csbk:
    """Ask a radio to upload uab blocks of talkgroup attachments."""
    data1 = (request.service_options() << 1) | 1
    cbf = (uab << 4) | request.service_kind()
    return _ahoy(data1, cbf, dst_id, StandardAddress.TATTSI)


def create_reply_call_rejected(src_id: int, dst_id: int) -> Csbk:
    """Report that the called party refused the call."""
    return _ack(0x14, dst_id, src_id)


def create_cancel_private_call_ahoy(dst_id: int) -> Csbk:
    """Cancel a pending private call towards dst_id."""
    return _ahoy(0x00, ServiceKind.CANCEL_CALL, dst_id, StandardAddress.TSI)


def _upload_request(request: Csbk, dst_id: int, src_id: int) -> tuple[Csbk, int]:
    blocks = (request.cbf >> 4) & 0x03
    cbf = (blocks << 4) | request.service_kind()
    return _ahoy(0x00, cbf, dst_id, src_id), blocks


def create_request_to_upload_message(request: Csbk, dst_id: int) -> tuple[Csbk, int]:
    """Ask a radio to upload its short data message.

    Returns the AHOY and the number of appended blocks it announced.
    """
    return _upload_request(request, dst_id, StandardAddress.SDMI)


def create_request_to_upload_divert_info(
    request: Csbk, dst_id: int
) -> tuple[Csbk, int]:
    """Ask a radio to upload its call diversion target.

    Returns the AHOY and the number of appended blocks it announced.
    """
    return _upload_request(request, dst_id, StandardAddress.DIVERTI)


def create_request_to_upload_udt_polled_data(
    src_id: int, dst_id: int, fmt: int, num_blocks: int
) -> Csbk:
    """Poll a radio for UDT data in the given format."""
    cbf = (num_blocks << 4) | ServiceKind.UDT_DATA_POLLING
    return _ahoy(fmt << 1, cbf, dst_id, src_id)


def create_request_to_send_group_call_supplementary_data(
    request: Csbk, dst_id: int
) -> Csbk:
    """Ask a radio for the supplementary data of a group call."""
    return _ahoy(
        request.service_options() << 1,
        request.service_kind(),
        dst_id,
        StandardAddress.TSI,
    )


def create_request_to_send_packet_extended_address_info(
    request: Csbk, src_id: int, dst_id: int, gi: int, uab: int
) -> Csbk:
    """Ask a radio for the extended addressing of a packet data call."""
    cbf = ServiceKind.INDIV_PACKET_DATA_CALL | ((uab & 0x03) << 4) | ((gi & 0x01) << 6)
    return _ahoy(request.service_options() << 1, cbf, dst_id, src_id)


def create_status_transport_ahoy(
    request: Csbk, src_id: int, dst_id: int, group: bool
) -> Csbk:
    """Forward a status message to its destination."""
    status2 = ((request.cbf >> 4) & 0x03) | (0x04 if group else 0)
    cbf = (status2 << 4) | ServiceKind.STATUS_TRANSPORT
    data1 = (request.data1 >> 1) << 1
    return _ahoy(data1, cbf, dst_id, src_id)


def create_status_poll_ahoy(src_id: int, dst_id: int, group: bool) -> Csbk:
    """Poll a radio or group for its status."""
    status2 = 0x03 | (0x04 if group else 0)
    cbf = (status2 << 4) | ServiceKind.STATUS_TRANSPORT
    data1 = 0x3E | (0x80 if group else 0)
    return _ahoy(data1, cbf, dst_id, src_id)


def create_reply_wait_for_signalling(dst_id: int) -> Csbk:
    """Tell a radio to wait for further signalling."""
    return Csbk(
        csbko=Csbko.C_ACKD,
        fid=0x00,
        data1=0x01,
        cbf=0x40,
        dst_id=dst_id,
        src_id=StandardAddress.TSI,
    )


def create_reply_call_queued(dst_id: int) -> Csbk:
    """Tell a radio its call has been queued."""
    return _ack(160, dst_id, StandardAddress.TSI)


def create_reply_call_denied(dst_id: int) -> Csbk:
    """Tell a radio its call was denied because the system is busy."""
    return _ack(39, dst_id, StandardAddress.TSI)


def create_reply_not_registered(dst_id: int) -> Csbk:
    """Tell a radio it must register first."""
    return _ack(45, dst_id, StandardAddress.TSI)


def create_reply_udt_crc_error(dst_id: int) -> Csbk:
    """Tell a radio its UDT upload failed its CRC."""
    return _ack(48, dst_id, StandardAddress.TSI)