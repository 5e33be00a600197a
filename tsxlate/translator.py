"""Translate TypeScript diagnostic messages into plain-language explanations."""

from __future__ import annotations

import enum
import re

from tsxlate.errors import ERRORS, extract_params, substitute_params

_TS_CODE_REGEX = re.compile(r"\bts(\d+)\b", re.IGNORECASE)
_U32_MAX = 0xFFFFFFFF


class TranslationMode(enum.Enum):
    """How a translation is combined with the original message."""

    APPEND = "append"
    REPLACE = "replace"


def extract_error_code(message: str) -> int | None:
    """Find a ``TS1234``-style code in ``message`` and return its number."""
    match = _TS_CODE_REGEX.search(message)
    if match is None:
        return None
    try:
        value = int(match.group(1))
    except ValueError:
        return None
    return value if value <= _U32_MAX else None


def translate_message(original: str, code: int | None, mode: TranslationMode) -> str:
    """Return ``original`` with its explanation, or unchanged if the code is unknown."""
    error_code = (code & _U32_MAX) if code is not None else extract_error_code(original)
    if error_code is None:
        return original

    info = ERRORS.get(error_code)
    if info is None:
        return original

    params = extract_params(info.pattern, original)
    translation = info.message if params is None else substitute_params(info.message, params)

    if mode is TranslationMode.APPEND:
        return f"{original}  ● {translation}"
    return f"● {translation}"