"""Codepoint classification against a translation environment."""

from __future__ import annotations

import unicodedata
from functools import lru_cache

from .constants import ACCENTS, ASCII_ESCAPES, ASCII_WHITESPACE, DOTLESS_ACCENTS, SYMBOLS
from .models import Environment, Token, TokenKind

_INVALID = Token(TokenKind.INVALID)
_UNSUPPORTED = Token(TokenKind.UNSUPPORTED)
_ASCII = Token(TokenKind.ASCII)


def is_invalid_codepoint(codepoint: int) -> bool:
    """Determine whether a codepoint is not a legal text character.

    Control characters (other than tab, newline and carriage return),
    surrogates, and Unicode noncharacters are illegal.

    Examples:
        is_invalid_codepoint(0x07)  # True
        is_invalid_codepoint(0x41)  # False
    """
    if codepoint < 0x20:
        return chr(codepoint) not in ASCII_WHITESPACE
    if 0x7F <= codepoint <= 0x9F:
        return True
    if 0xD800 <= codepoint <= 0xDFFF:
        return True
    if 0xFDD0 <= codepoint <= 0xFDEF:
        return True
    if codepoint & 0xFFFE == 0xFFFE:
        return True
    return codepoint > 0x10FFFF


def needs_dotless_base(base: str, modifier: str) -> bool:
    """Check whether an accent requires a dotless i or j beneath it.

    Older LaTeX versions do not drop the overhead dot of ``i`` or ``j``
    when an accent is placed on top, so the letter must be written as
    ``\\i`` or ``\\j``.

    Args:
        base: Output text the accent will wrap.
        modifier: Accent template, such as ``{\\'``.

    Returns:
        bool: True when `base` starts with ``i`` or ``j`` and `modifier` is a
            text-mode accent that sits above the letter.

    Examples:
        needs_dotless_base("i", "{\\\\^")  # True
        needs_dotless_base("i", "{\\\\d ")  # False, the accent sits below
    """
    return (
        base[:1] in ("i", "j")
        and modifier.startswith("{\\")
        and modifier[2:3] in DOTLESS_ACCENTS
    )


def apply_accent(base: str, modifier: str) -> str:
    """Wrap `base` with an accent template, closing it with ``}``."""
    prefix = "\\" if needs_dotless_base(base, modifier) else ""
    return f"{modifier}{prefix}{base}}}"


def _compose(codepoint: int, environment: Environment) -> str | None:
    decomposed = unicodedata.normalize("NFD", chr(codepoint))
    if len(decomposed) < 2:
        return None

    base, marks = decomposed[0], decomposed[1:]
    if not (base.isascii() and base.isalpha()):
        return None

    accents = ACCENTS[environment]
    text = base
    for mark in marks:
        modifier = accents.get(ord(mark))
        if modifier is None:
            return None
        text = apply_accent(text, modifier)
    return text


@lru_cache(maxsize=4096)
def classify(codepoint: int, environment: Environment) -> Token:
    """Classify a codepoint for output in a TeX environment.

    Args:
        codepoint: Unicode scalar value to classify.
        environment: Environment selecting the translation tables.

    Returns:
        Token: ``ASCII`` for characters emitted unchanged, ``SEQUENCE`` with
            the replacement text, ``MODIFIER`` with an accent template for
            combining marks, otherwise ``UNSUPPORTED`` or ``INVALID``.

    Examples:
        classify(ord("a"), Environment.TEXT)  # Token(ASCII)
        classify(0xE9, Environment.TEXT)  # Token(SEQUENCE, "{\\\\'e}")
        classify(0x0301, Environment.TEXT)  # Token(MODIFIER, "{\\\\'")
    """
    if is_invalid_codepoint(codepoint):
        return _INVALID

    if codepoint < 0x80:
        escaped = ASCII_ESCAPES[environment].get(chr(codepoint))
        if escaped is not None:
            return Token(TokenKind.SEQUENCE, escaped)
        return _ASCII

    modifier = ACCENTS[environment].get(codepoint)
    if modifier is not None:
        return Token(TokenKind.MODIFIER, modifier)

    symbol = SYMBOLS[environment].get(codepoint)
    if symbol is not None:
        return Token(TokenKind.SEQUENCE, symbol)

    composed = _compose(codepoint, environment)
    if composed is not None:
        return Token(TokenKind.SEQUENCE, composed)

    return _UNSUPPORTED
