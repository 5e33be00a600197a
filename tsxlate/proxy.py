"""Bidirectional message relay between an editor and a language server."""

from __future__ import annotations

import asyncio
import json
from typing import Any

from tsxlate.jsonrpc import read_message, write_message
from tsxlate.translator import TranslationMode, translate_message

_PUBLISH_DIAGNOSTICS = "textDocument/publishDiagnostics"
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")


async def run_proxy(editor_reader, editor_writer, lsp_reader, lsp_writer,
                    mode: TranslationMode) -> None:
    """Relay messages both ways until either side reaches end of input.

    Diagnostics sent from the server to the editor are translated on the way.
    An error on either side is raised once the relay has stopped.
    """

    async def editor_to_lsp() -> None:
        while (msg := await read_message(editor_reader)) is not None:
            await write_message(lsp_writer, msg)

    async def lsp_to_editor() -> None:
        while (msg := await read_message(lsp_reader)) is not None:
            await write_message(editor_writer, transform_if_diagnostics(msg, mode))

    tasks = [
        asyncio.ensure_future(editor_to_lsp()),
        asyncio.ensure_future(lsp_to_editor()),
    ]
    try:
        done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    for task in tasks:
        if task in done:
            task.result()


def is_publish_diagnostics(json: Any) -> bool:
    """Tell whether a decoded message is a ``publishDiagnostics`` notification."""
    return isinstance(json, dict) and json.get("method") == _PUBLISH_DIAGNOSTICS


def transform_if_diagnostics(msg: bytes, mode: TranslationMode) -> bytes:
    """Translate the diagnostics in ``msg``; return any other message unchanged."""
    try:
        document = json.loads(msg, parse_constant=_reject_constant)
    except ValueError:
        return msg

    if not is_publish_diagnostics(document):
        return msg

    params = document.get("params")
    diagnostics = params.get("diagnostics") if isinstance(params, dict) else None
    if not isinstance(diagnostics, list):
        return msg

    for diagnostic in diagnostics:
        transform_diagnostic(diagnostic, mode)

    try:
        return json.dumps(
            document, ensure_ascii=False, separators=(",", ":"), sort_keys=True
        ).encode("utf-8")
    except (TypeError, ValueError):
        return msg


def transform_diagnostic(diagnostic: Any, mode: TranslationMode) -> None:
    """Rewrite the ``message`` of one diagnostic in place."""
    if not isinstance(diagnostic, dict):
        return
    message = diagnostic.get("message")
    if not isinstance(message, str):
        return

    code = diagnostic.get("code")
    if isinstance(code, bool) or not isinstance(code, int) or not _I64_MIN <= code <= _I64_MAX:
        code = None

    diagnostic["message"] = translate_message(message, code, mode)