"""Message types and the binary packet used on the wire."""

from __future__ import annotations

import enum
import struct
from typing import Union


class MsgType(enum.IntEnum):
    """Kind of a network message, sent as an unsigned 16-bit number."""

    EMPTY = 0  # no message
    ERROR = 1  # something went wrong
    CONFIRM = 2  # receipt confirmation
    CONNECT = 3  # client -> server
    DISCONNECT = 4  # client <-> server
    INIT = 5  # server -> client
    SERVER_UPDATE = 6  # server -> client
    CLIENT_UPDATE = 7  # client -> server
    NEW_CLIENT = 8  # server -> client
    CUSTOM = 9  # for higher-level clients and servers


class PacketError(Exception):
    """Raised when a packet cannot be read as requested."""


_UINT16 = struct.Struct(">H")
_UINT32 = struct.Struct(">I")
_UINT8 = struct.Struct(">B")


class Packet:
    """Growable byte buffer with big-endian writers and a read cursor."""

    __slots__ = ("_buffer", "_read_pos")

    def __init__(self, data: Union[bytes, bytearray, memoryview] = b"") -> None:
        self._buffer = bytearray(data)
        self._read_pos = 0

    def data(self) -> bytes:
        """The packet contents."""
        return bytes(self._buffer)

    def __bytes__(self) -> bytes:
        return self.data()

    def __len__(self) -> int:
        return len(self._buffer)

    def __repr__(self) -> str:
        return f"Packet({bytes(self._buffer)!r})"

    def append(self, data: Union["Packet", bytes, bytearray, memoryview]) -> "Packet":
        """Append raw bytes or another packet's contents."""
        if isinstance(data, Packet):
            data = data.data()
        self._buffer.extend(data)
        return self

    def clear(self) -> None:
        """Empty the packet and rewind the read cursor."""
        self._buffer.clear()
        self._read_pos = 0

    def end_of_packet(self) -> bool:
        """True when everything has been read."""
        return self._read_pos >= len(self._buffer)

    def _write(self, fmt: struct.Struct, value: int, limit: int) -> "Packet":
        if not 0 <= value <= limit:
            raise ValueError(f"value {value} does not fit in {fmt.size} bytes")
        self._buffer.extend(fmt.pack(value))
        return self

    def _read(self, fmt: struct.Struct) -> int:
        end = self._read_pos + fmt.size
        if end > len(self._buffer):
            raise PacketError("not enough data left in packet")
        (value,) = fmt.unpack_from(self._buffer, self._read_pos)
        self._read_pos = end
        return value

    def write_uint16(self, value: int) -> "Packet":
        """Append an unsigned 16-bit number."""
        return self._write(_UINT16, int(value), 0xFFFF)

    def write_uint32(self, value: int) -> "Packet":
        """Append an unsigned 32-bit number."""
        return self._write(_UINT32, int(value), 0xFFFFFFFF)

    def write_bool(self, value: bool) -> "Packet":
        """Append a boolean as one byte."""
        return self._write(_UINT8, 1 if value else 0, 0xFF)

    def write_msg_type(self, value: MsgType) -> "Packet":
        """Append a message type."""
        return self.write_uint16(int(value))

    def read_uint16(self) -> int:
        """Read an unsigned 16-bit number."""
        return self._read(_UINT16)

    def read_uint32(self) -> int:
        """Read an unsigned 32-bit number."""
        return self._read(_UINT32)

    def read_bool(self) -> bool:
        """Read a one-byte boolean."""
        return self._read(_UINT8) != 0

    def read_msg_type(self) -> MsgType:
        """Read a message type; unknown values raise PacketError."""
        value = self.read_uint16()
        try:
            return MsgType(value)
        except ValueError:
            raise PacketError(f"unknown message type {value}") from None