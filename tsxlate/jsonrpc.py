"""Reading and writing of ``Content-Length`` framed JSON-RPC messages."""

from __future__ import annotations

import re
from typing import Protocol

_HEADER_PREFIX = "Content-Length: "
_LENGTH_RE = re.compile(r"\+?[0-9]+")


class _Reader(Protocol):
    async def readline(self) -> bytes: ...

    async def readexactly(self, n: int) -> bytes: ...


class _Writer(Protocol):
    def write(self, data: bytes) -> object: ...

    async def drain(self) -> None: ...


async def read_message(reader: _Reader) -> bytes | None:
    """Read one framed message body, or return None at end of input.

    Raises ValueError when the headers are malformed or lack a
    ``Content-Length``, and ``asyncio.IncompleteReadError`` when the body
    is cut short.
    """
    content_length: int | None = None
    while True:
        raw = await reader.readline()
        if not raw:
            return None
        line = raw.decode("utf-8").strip()
        if not line:
            break
        if line.startswith(_HEADER_PREFIX):
            value = line[len(_HEADER_PREFIX):]
            if not _LENGTH_RE.fullmatch(value):
                raise ValueError(f"invalid Content-Length: {value!r}")
            content_length = int(value)

    if content_length is None:
        raise ValueError("Missing Content-Length")
    return await reader.readexactly(content_length)


async def write_message(writer: _Writer, body: bytes) -> None:
    """Write ``body`` preceded by its ``Content-Length`` header and flush."""
    writer.write(f"Content-Length: {len(body)}\r\n\r\n".encode("ascii"))
    writer.write(bytes(body))
    await writer.drain()