import asyncio

import pytest

from tsxlate.jsonrpc import read_message, write_message


class _Sink:
    def __init__(self):
        self.data = bytearray()
        self.drained = 0

    def write(self, chunk):
        self.data += chunk

    async def drain(self):
        self.drained += 1


def _reader(data: bytes) -> asyncio.StreamReader:
    reader = asyncio.StreamReader()
    reader.feed_data(data)
    reader.feed_eof()
    return reader


@pytest.mark.asyncio
async def test_roundtrip():
    original = b'{"jsonrpc":"2.0","id":1}'
    sink = _Sink()
    await write_message(sink, original)

    decoded = await read_message(_reader(bytes(sink.data)))
    assert decoded == original


@pytest.mark.asyncio
async def test_eof_returns_none():
    assert await read_message(_reader(b"")) is None


@pytest.mark.asyncio
async def test_write_produces_header_then_body():
    body = b'{"jsonrpc":"2.0","id":1}'
    sink = _Sink()
    await write_message(sink, body)
    header = f"Content-Length: {len(body)}\r\n\r\n".encode()
    assert bytes(sink.data) == header + body
    assert sink.drained == 1


@pytest.mark.asyncio
async def test_reads_consecutive_messages():
    sink = _Sink()
    await write_message(sink, b'{"a":1}')
    await write_message(sink, b'{"b":2}')
    reader = _reader(bytes(sink.data))
    assert await read_message(reader) == b'{"a":1}'
    assert await read_message(reader) == b'{"b":2}'
    assert await read_message(reader) is None


@pytest.mark.asyncio
async def test_other_headers_are_ignored():
    data = (
        b"Content-Type: application/vscode-jsonrpc; charset=utf-8\r\n"
        b"Content-Length: 2\r\n\r\n{}"
    )
    assert await read_message(_reader(data)) == b"{}"


@pytest.mark.asyncio
async def test_missing_content_length_raises():
    with pytest.raises(ValueError, match="Missing Content-Length"):
        await read_message(_reader(b"Content-Type: text\r\n\r\n{}"))


@pytest.mark.asyncio
async def test_invalid_content_length_raises():
    with pytest.raises(ValueError):
        await read_message(_reader(b"Content-Length: abc\r\n\r\n{}"))


@pytest.mark.asyncio
async def test_truncated_body_raises():
    with pytest.raises(asyncio.IncompleteReadError):
        await read_message(_reader(b"Content-Length: 10\r\n\r\n{}"))


@pytest.mark.asyncio
async def test_eof_inside_headers_returns_none():
    assert await read_message(_reader(b"Content-Length: 2\r\n")) is None