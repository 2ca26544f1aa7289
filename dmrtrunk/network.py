"""Homebrew-style UDP framing and the client that exchanges it with a modem host."""

from __future__ import annotations

import logging
import socket
import struct
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from dmrtrunk.defines import (
    DMR_FRAME_LENGTH_BYTES,
    FLCO,
    DataType,
    DMRCommand,
)

logger = logging.getLogger(__name__)

HOMEBREW_DATA_PACKET_LENGTH = 55
TRUNKING_PARAMS_PACKET_LENGTH = 8
_CONFIG_HEADER_LENGTH = 8
_MIN_CONFIG_LENGTH = 8
_MIN_CONFIG_PACKET_LENGTH = 12
_REPEATER_ID = 1234567
_MAX_DATAGRAM = 65535

DmrDataCallback = Callable[[bytes, int, bool], None]
ConfigCallback = Callable[[bytes], None]


@dataclass
class DMRData:
    """One DMR burst with the addressing and metadata carried beside it."""

    seq_no: int = 0
    src_id: int = 0
    dst_id: int = 0
    slot_no: int = 1
    flco: FLCO = FLCO.GROUP
    data_type: int = DataType.VOICE_LC_HEADER
    n: int = 0
    stream_id: int = 0
    data: bytes = field(default_factory=lambda: bytes(DMR_FRAME_LENGTH_BYTES))
    ber: int = 0
    rssi: int = 0
    command: DMRCommand = DMRCommand.NO_COMMAND
    channel_enable: bool = False

    def __post_init__(self) -> None:
        if self.slot_no not in (1, 2):
            raise ValueError(f"slot must be 1 or 2, not {self.slot_no}")
        self.data = bytes(self.data)
        if len(self.data) != DMR_FRAME_LENGTH_BYTES:
            raise ValueError(
                f"a DMR frame is {DMR_FRAME_LENGTH_BYTES} bytes, not {len(self.data)}"
            )


class PacketKind(Enum):
    """Kinds of packet accepted from the network."""

    DMR_DATA = "DMRD"
    CONFIG = "DMRC"


def _slot_bit(slot_no: int) -> int:
    return 0x00 if slot_no == 1 else 0x80


def encode_dmr_data(data: DMRData) -> bytes:
    """Frame a burst as a 55 byte DMRD packet."""
    flags = _slot_bit(data.slot_no)
    flags |= 0x00 if data.flco == FLCO.GROUP else 0x40
    if data.data_type == DataType.VOICE_SYNC:
        flags |= 0x10
    elif data.data_type == DataType.VOICE:
        flags |= data.n & 0xFF
    else:
        flags |= 0x20 | (int(data.data_type) & 0xFF)
    packet = b"".join(
        (
            b"DMRD",
            bytes((data.seq_no & 0xFF,)),
            (data.src_id & 0xFFFFFF).to_bytes(3, "big"),
            (data.dst_id & 0xFFFFFF).to_bytes(3, "big"),
            struct.pack("<I", _REPEATER_ID),
            bytes((flags & 0xFF,)),
            struct.pack("<I", data.stream_id & 0xFFFFFFFF),
            data.data,
            bytes((data.ber & 0xFF, data.rssi & 0xFF)),
        )
    )
    return packet


def encode_dmr_config(config: bytes) -> bytes:
    """Frame modem configuration as a DMRC packet.

    The packet is len(config) + 7 bytes long, so the last configuration byte
    does not travel with it.
    """
    config = bytes(config)
    if len(config) < _MIN_CONFIG_LENGTH:
        raise ValueError(
            f"configuration must be at least {_MIN_CONFIG_LENGTH} bytes"
        )
    header = b"DMRC" + b"\x00" + _REPEATER_ID.to_bytes(3, "big")
    assert len(header) == _CONFIG_HEADER_LENGTH
    return (header + config)[: len(config) + 7]


def encode_trunking_params(data: DMRData) -> bytes:
    """Frame a trunking command for one slot as an 8 byte DMRT packet."""
    flags = _slot_bit(data.slot_no) | (0x01 if data.channel_enable else 0x00)
    packet = b"DMRT" + bytes((int(data.command) & 0xFF, flags))
    return packet.ljust(TRUNKING_PARAMS_PACKET_LENGTH, b"\x00")


def parse_network_data(payload: bytes) -> PacketKind | None:
    """Classify a received datagram; None when it is not one we handle."""
    if len(payload) < 4:
        return None
    magic = bytes(payload[:4])
    if magic == b"DMRD":
        return PacketKind.DMR_DATA
    if magic == b"DMRC":
        if len(payload) < _MIN_CONFIG_PACKET_LENGTH:
            return None
        return PacketKind.CONFIG
    return None


class UDPClient:
    """Exchanges DMR packets with a modem host over UDP for one channel."""

    def __init__(
        self,
        channel_id: int,
        listen_port: int,
        send_port: int,
        remote_address: str = "127.0.0.1",
        local_address: str = "0.0.0.0",
        gateway: bool = False,
        on_dmr_data: DmrDataCallback | None = None,
        on_config: ConfigCallback | None = None,
    ) -> None:
        self.channel_id = channel_id
        self.listen_port = listen_port
        self.send_port = send_port
        self.remote_address = remote_address
        self.local_address = local_address
        self.gateway = gateway
        self.on_dmr_data = on_dmr_data
        self.on_config = on_config
        self._socket: socket.socket | None = None

    @property
    def started(self) -> bool:
        """Whether the client is bound and exchanging data."""
        return self._socket is not None

    def is_gateway_connection(self) -> bool:
        """Whether this client talks to a network gateway rather than a modem."""
        return self.gateway

    def fileno(self) -> int:
        """File descriptor of the bound socket, for use with select."""
        if self._socket is None:
            raise OSError("client is not started")
        return self._socket.fileno()

    def start(self) -> None:
        """Bind the listening port; failures are logged and leave the client stopped."""
        if self._socket is not None:
            return
        if self.listen_port == 0:
            self._log_bind_failure()
            return
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            sock.bind((self.local_address, self.listen_port))
        except OSError:
            sock.close()
            self._log_bind_failure()
            return
        sock.setblocking(False)
        self._socket = sock
        logger.info(
            "Listening for data on %s port %d", self.local_address, self.listen_port
        )
        logger.info("Sending data to %s port %d", self.remote_address, self.send_port)

    def _log_bind_failure(self) -> None:
        logger.critical(
            "Server could not bind to port %d, another instance is probably "
            "listening already",
            self.listen_port,
        )

    def stop(self) -> None:
        """Close the socket if the client is running."""
        if self._socket is None:
            return
        self._socket.close()
        self._socket = None
        logger.info("Stopped listening for data on port %d", self.listen_port)
        logger.info("Stopped sending data on port %d", self.send_port)

    def enable(self, value: bool) -> None:
        """Start or stop the client."""
        if value:
            self.start()
        else:
            self.stop()

    def __enter__(self) -> UDPClient:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def read_pending_datagrams(self) -> int:
        """Handle every datagram waiting on the socket; return how many were recognised."""
        if self._socket is None:
            return 0
        handled = 0
        while True:
            try:
                payload, _ = self._socket.recvfrom(_MAX_DATAGRAM)
            except (BlockingIOError, InterruptedError):
                break
            except OSError as error:
                logger.info(
                    "Socket error for %s port %d: %s",
                    self.remote_address,
                    self.send_port,
                    error,
                )
                break
            if self._dispatch(payload):
                handled += 1
        return handled

    def _dispatch(self, payload: bytes) -> bool:
        kind = parse_network_data(payload)
        if kind is PacketKind.DMR_DATA:
            if self.on_dmr_data is not None:
                self.on_dmr_data(payload, self.channel_id, self.gateway)
            return True
        if kind is PacketKind.CONFIG:
            if self.on_config is not None:
                self.on_config(payload)
            return True
        return False

    def write_data_to_network(self, data: bytes) -> None:
        """Send raw bytes to the remote end; ignored while stopped."""
        if self._socket is None:
            return
        self._socket.sendto(bytes(data), (self.remote_address, self.send_port))

    def write_dmr_data(self, data: DMRData) -> None:
        """Send a burst as a DMRD packet."""
        self.write_data_to_network(encode_dmr_data(data))

    def write_dmr_config(self, config: bytes) -> None:
        """Send modem configuration; too short a configuration is not sent."""
        if len(config) < _MIN_CONFIG_LENGTH:
            return
        self.write_data_to_network(encode_dmr_config(config))

    def write_trunking_params(self, data: DMRData) -> None:
        """Send a trunking command as a DMRT packet."""
        self.write_data_to_network(encode_trunking_params(data))