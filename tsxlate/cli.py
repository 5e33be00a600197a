"""Command line entry point: run a language server behind the translating proxy."""

from __future__ import annotations

import asyncio
import sys
import threading
from typing import BinaryIO, Sequence

from tsxlate.proxy import run_proxy
from tsxlate.translator import TranslationMode

DEFAULT_COMMAND = ("vtsls", "--stdio")

_USAGE = """\
Usage: tsxlate [OPTIONS] [LSP_COMMAND] [LSP_ARGS...]

Options:
  --append     Append translation to original message instead of replacing
  --help       Show this help

Default LSP: vtsls --stdio"""


def parse_args(argv: Sequence[str]) -> tuple[TranslationMode, list[str]] | None:
    """Return the translation mode and server command, or None if help was asked for."""
    mode = TranslationMode.REPLACE
    command: list[str] = []
    for arg in argv:
        if arg in ("--help", "-h"):
            return None
        if arg == "--append":
            mode = TranslationMode.APPEND
        else:
            command.append(arg)
    return mode, command or list(DEFAULT_COMMAND)


class _OutputWriter:
    """Minimal asynchronous writer over a blocking binary stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def write(self, data: bytes) -> None:
        self._stream.write(data)

    async def drain(self) -> None:
        self._stream.flush()


def _input_reader(stream: BinaryIO, loop: asyncio.AbstractEventLoop) -> asyncio.StreamReader:
    """Feed a blocking binary stream into a StreamReader from a background thread."""
    reader = asyncio.StreamReader()

    def pump() -> None:
        try:
            while chunk := stream.read1(65536):
                loop.call_soon_threadsafe(reader.feed_data, chunk)
        except (OSError, ValueError, RuntimeError):
            pass
        finally:
            try:
                loop.call_soon_threadsafe(reader.feed_eof)
            except RuntimeError:
                pass

    threading.Thread(target=pump, name="stdin-pump", daemon=True).start()
    return reader


async def _serve(command: list[str], mode: TranslationMode) -> None:
    process = await asyncio.create_subprocess_exec(
        *command,
        stdin=asyncio.subprocess.PIPE,
        stdout=asyncio.subprocess.PIPE,
    )
    assert process.stdin is not None and process.stdout is not None

    loop = asyncio.get_running_loop()
    editor_reader = _input_reader(sys.stdin.buffer, loop)
    editor_writer = _OutputWriter(sys.stdout.buffer)
    try:
        await run_proxy(editor_reader, editor_writer, process.stdout, process.stdin, mode)
    finally:
        process.stdin.close()
    await process.wait()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the language server and relay between it and the editor."""
    args = sys.argv[1:] if argv is None else list(argv)
    parsed = parse_args(args)
    if parsed is None:
        print(_USAGE, file=sys.stderr)
        return 0

    mode, command = parsed
    try:
        asyncio.run(_serve(command, mode))
    except (OSError, ValueError, EOFError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())