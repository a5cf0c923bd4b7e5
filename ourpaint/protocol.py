"""Wire format for the collaborative session: framed strings and messages."""

from __future__ import annotations

import struct
from dataclasses import dataclass

CHAT_PREFIX = "CHAT|"
SERVER_SHUTDOWN = "SERVER_SHUTDOWN"
STOP_MESSAGE = "STOP|"

_NULL_LENGTH = 0xFFFFFFFF
_HEADER = struct.Struct(">I")


@dataclass(frozen=True)
class ChatMessage:
    """A chat line from a named user."""

    name: str
    message: str


@dataclass(frozen=True)
class ShutdownNotice:
    """The server announced that it is shutting down."""


@dataclass(frozen=True)
class StateUpdate:
    """A serialized drawing state sent by the server."""

    state: str


@dataclass(frozen=True)
class Command:
    """A console command sent by a client."""

    text: str


def encode_qstring(text: str | None) -> bytes:
    """Frame a string as a big-endian byte length followed by UTF-16BE data.

    ``None`` encodes the null string.
    """
    if text is None:
        return _HEADER.pack(_NULL_LENGTH)
    data = text.encode("utf-16-be", "surrogatepass")
    if len(data) >= _NULL_LENGTH:
        raise ValueError("string too long to frame")
    return _HEADER.pack(len(data)) + data


def format_chat(name: str, message: str) -> str:
    return f"{CHAT_PREFIX}{name}|{message}"


def _split_chat(text: str) -> ChatMessage:
    parts = text[len(CHAT_PREFIX):].split("|")
    if len(parts) < 2:
        raise ValueError(f"malformed chat message: {text!r}")
    return ChatMessage(name=parts[0], message=parts[1])


def parse_client_message(text: str) -> ChatMessage | ShutdownNotice | StateUpdate:
    """Classify a message received by a client."""
    if text.startswith(CHAT_PREFIX):
        return _split_chat(text)
    if text == SERVER_SHUTDOWN:
        return ShutdownNotice()
    return StateUpdate(text)


def parse_server_message(text: str) -> ChatMessage | Command:
    """Classify a message received by the server."""
    if text.startswith(CHAT_PREFIX):
        return _split_chat(text)
    return Command(text)


class StreamDecoder:
    """Reassembles framed strings from a byte stream."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    @property
    def pending(self) -> int:
        """Number of buffered bytes not yet decoded."""
        return len(self._buffer)

    def feed(self, data: bytes) -> list[str]:
        """Add bytes and return every string now complete."""
        self._buffer.extend(data)
        decoded: list[str] = []
        while len(self._buffer) >= _HEADER.size:
            (length,) = _HEADER.unpack_from(self._buffer)
            if length == _NULL_LENGTH:
                del self._buffer[:_HEADER.size]
                decoded.append("")
                continue
            if length % 2:
                self._buffer.clear()
                raise ValueError("corrupt frame: odd UTF-16 byte length")
            end = _HEADER.size + length
            if len(self._buffer) < end:
                break
            payload = bytes(self._buffer[_HEADER.size:end])
            del self._buffer[:end]
            decoded.append(payload.decode("utf-16-be", "surrogatepass"))
        return decoded