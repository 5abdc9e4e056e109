# ============================================================================
# src/prescription_reader/utils/text_normalizer.py
# ============================================================================
"""
Text Normalization Utilities

Cleans up OCR text before and after extraction:
- Splits raw text into trimmed, non-empty lines
- Collapses whitespace runs left by the OCR engine
- Normalizes captured person names
"""

import re
import logging
from typing import Any, List

from .exceptions import InvalidInputError

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r'\s+')
_TRAILING_PUNCT = re.compile(r'[,.\-]+$')
_WORD_START = re.compile(r'\b\w')


def coerce_text(text: Any) -> str:
    """
    Accept whatever the OCR collaborator handed over and return a str.

    None becomes empty text and bytes are decoded as UTF-8 with
    replacement characters. Anything else is a caller error.
    """
    if text is None:
        return ""
    if isinstance(text, str):
        return text
    if isinstance(text, (bytes, bytearray)):
        return bytes(text).decode("utf-8", errors="replace")

    raise InvalidInputError(
        f"Expected OCR text as str or bytes, got {type(text).__name__}",
        received_type=type(text).__name__
    )


def split_lines(text: str) -> List[str]:
    """Split text into trimmed, non-empty lines."""
    lines = [line.strip() for line in text.split("\n")]
    return [line for line in lines if line]


def collapse_whitespace(value: str) -> str:
    return _WHITESPACE_RUN.sub(" ", value).strip()


def clean_name(name: str) -> str:
    """
    Normalize a captured person name.

    "  jane   smith.," -> "Jane Smith"

    Only the first letter of each word is touched, so "McDONALD" keeps
    its inner capitals.
    """
    name = _WHITESPACE_RUN.sub(" ", name).strip()
    name = _TRAILING_PUNCT.sub("", name).strip()
    return _WORD_START.sub(lambda m: m.group(0).upper(), name)
