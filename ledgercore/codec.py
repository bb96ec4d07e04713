"""Length-prefixed, checksummed framing of protobuf messages over a byte stream.

Wire layout of one frame (all integers are big-endian 32-bit)::

    len | nameLen | typeName + NUL | protobuf payload | adler32 checksum

``len`` counts everything after itself.  The checksum covers ``nameLen``,
the type name and the payload.
"""

from __future__ import annotations

import logging
import struct
import time
import zlib
from enum import IntEnum
from typing import Any, Callable, Optional

from google.protobuf import descriptor_pool, message_factory
from google.protobuf.message import DecodeError, Message

from ledgercore.errors import LedgerError

logger = logging.getLogger(__name__)

HEADER_LEN = 4
MIN_MESSAGE_LEN = 2 * HEADER_LEN + 2  # nameLen + typeName + checkSum
MAX_MESSAGE_LEN = 64 * 1024 * 1024

_INT32 = struct.Struct(">i")
_UINT32 = struct.Struct(">I")


class CodecErrorCode(IntEnum):
    """Reasons a frame could not be decoded."""

    NO_ERROR = 0
    INVALID_LENGTH = 1
    CHECKSUM_ERROR = 2
    INVALID_NAME_LEN = 3
    UNKNOWN_MESSAGE_TYPE = 4
    PARSE_ERROR = 5

    @property
    def description(self) -> str:
        """The short name used in log output."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    CodecErrorCode.NO_ERROR: "NoError",
    CodecErrorCode.INVALID_LENGTH: "InvalidLength",
    CodecErrorCode.CHECKSUM_ERROR: "CheckSumError",
    CodecErrorCode.INVALID_NAME_LEN: "InvalidNameLen",
    CodecErrorCode.UNKNOWN_MESSAGE_TYPE: "UnknownMessageType",
    CodecErrorCode.PARSE_ERROR: "ParseError",
}


class CodecError(LedgerError):
    """A frame failed to decode; ``code`` tells why."""

    def __init__(self, code: CodecErrorCode) -> None:
        super().__init__(code.description)
        self.code = code


def _initialization_error_message(action: str, message: Message) -> str:
    missing = ", ".join(message.FindInitializationErrors())
    return (
        f"Can't {action} message of type \"{message.DESCRIPTOR.full_name}\" "
        f"because it is missing required fields: {missing}"
    )


def encode_message(message: Message) -> bytes:
    """Return the complete frame for ``message``, length prefix included."""
    if not message.IsInitialized():
        raise ValueError(_initialization_error_message("serialize", message))
    name = message.DESCRIPTOR.full_name.encode("utf-8") + b"\0"
    body = _INT32.pack(len(name)) + name + message.SerializeToString()
    body += _UINT32.pack(zlib.adler32(body) & 0xFFFFFFFF)
    return _INT32.pack(len(body)) + body


def _message_class(descriptor: Any) -> type:
    get_class = getattr(message_factory, "GetMessageClass", None)
    if get_class is not None:
        return get_class(descriptor)
    return message_factory.MessageFactory(descriptor.file.pool).GetPrototype(descriptor)


def create_message(type_name: str) -> Optional[Message]:
    """Return a new empty message of the named type, or None if it is unknown."""
    try:
        descriptor = descriptor_pool.Default().FindMessageTypeByName(type_name)
    except KeyError:
        return None
    return _message_class(descriptor)()


def parse_frame(data: bytes) -> Message:
    """Decode one frame body (everything after the length prefix).

    Raises CodecError with the matching code when the body is malformed.
    """
    length = len(data)
    if length < MIN_MESSAGE_LEN:
        raise CodecError(CodecErrorCode.INVALID_LENGTH)
    (expected,) = _UINT32.unpack_from(data, length - HEADER_LEN)
    if zlib.adler32(data[: length - HEADER_LEN]) & 0xFFFFFFFF != expected:
        raise CodecError(CodecErrorCode.CHECKSUM_ERROR)
    (name_len,) = _INT32.unpack_from(data, 0)
    if not 2 <= name_len <= length - 2 * HEADER_LEN:
        raise CodecError(CodecErrorCode.INVALID_NAME_LEN)
    type_name = data[HEADER_LEN : HEADER_LEN + name_len - 1].decode("utf-8", errors="replace")
    message = create_message(type_name)
    if message is None:
        raise CodecError(CodecErrorCode.UNKNOWN_MESSAGE_TYPE)
    payload = data[HEADER_LEN + name_len : length - HEADER_LEN]
    try:
        message.ParseFromString(payload)
    except DecodeError as exc:
        raise CodecError(CodecErrorCode.PARSE_ERROR) from exc
    return message


MessageCallback = Callable[[Any, Message, float], None]
ErrorCallback = Callable[[Any, bytes, float, CodecErrorCode], None]


def _is_connected(conn: Any) -> bool:
    connected = getattr(conn, "connected", False)
    return bool(connected() if callable(connected) else connected)


def _default_error_callback(conn: Any, buffered: bytes, receive_time: float,
                            code: CodecErrorCode) -> None:
    logger.error("ProtobufCodec error - %s", code.description)
    if conn is not None and _is_connected(conn):
        conn.shutdown()


class ProtobufCodec:
    """Reassembles frames from stream chunks and hands out decoded messages.

    ``on_message(conn, message, receive_time)`` is called per decoded frame.
    ``on_error(conn, buffered_bytes, receive_time, code)`` is called on a bad
    frame, after which decoding of the current chunk stops; the default logs
    and shuts down a connected ``conn``.
    """

    def __init__(self, on_message: MessageCallback,
                 on_error: Optional[ErrorCallback] = None) -> None:
        self._on_message = on_message
        self._on_error = on_error if on_error is not None else _default_error_callback
        self._buffer = bytearray()

    def feed(self, conn: Any, data: bytes, receive_time: Optional[float] = None) -> None:
        """Append received bytes and dispatch every complete frame."""
        if receive_time is None:
            receive_time = time.time()
        self._buffer += data
        while len(self._buffer) >= MIN_MESSAGE_LEN + HEADER_LEN:
            (length,) = _INT32.unpack_from(self._buffer, 0)
            if length > MAX_MESSAGE_LEN or length < MIN_MESSAGE_LEN:
                self._on_error(conn, bytes(self._buffer), receive_time,
                               CodecErrorCode.INVALID_LENGTH)
                break
            if len(self._buffer) < length + HEADER_LEN:
                break
            try:
                message = parse_frame(bytes(self._buffer[HEADER_LEN : HEADER_LEN + length]))
            except CodecError as exc:
                self._on_error(conn, bytes(self._buffer), receive_time, exc.code)
                break
            self._on_message(conn, message, receive_time)
            del self._buffer[: HEADER_LEN + length]

    def pending(self) -> int:
        """Number of received bytes not yet consumed as frames."""
        return len(self._buffer)