"""Data models for utf8totex."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    """Classification verdicts for a single codepoint.

    Attributes:
        ASCII: The codepoint is an ASCII character emitted as-is.
        SEQUENCE: A fixed TeX string fully represents the codepoint.
        MODIFIER: A combining accent template that wraps the preceding token.
        UNSUPPORTED: The environment has no translation for the codepoint.
        INVALID: The codepoint is not a legal character.
    """

    ASCII = auto()
    SEQUENCE = auto()
    MODIFIER = auto()
    UNSUPPORTED = auto()
    INVALID = auto()


@dataclass(frozen=True)
class Token:
    """Classifier result for one codepoint.

    Attributes:
        kind: Verdict for the codepoint.
        text: TeX output for `SEQUENCE` and `MODIFIER` tokens, otherwise None.
    """

    kind: TokenKind
    text: str | None = None


class Environment(Enum):
    """Translation environments selecting a classification table."""

    TEXT = "text"
    MATH = "math"


class PassthroughState(Enum):
    """Fuzzy-mode states used while streaming input.

    Attributes:
        IDLE: Codepoints are classified and translated.
        IN_MACRO_NAME: After a ``\\``; ASCII is copied until a ``{`` opens an argument.
        IN_BRACE_GROUP: Inside ``{...}``; ASCII is copied until the group closes.
        IN_MATH_REGION: Inside ``$...$``; ASCII is copied until the closing ``$``.
    """

    IDLE = auto()
    IN_MACRO_NAME = auto()
    IN_BRACE_GROUP = auto()
    IN_MATH_REGION = auto()


@dataclass
class TranslatorContext:
    """Cross-codepoint state for one translation call.

    Attributes:
        state: Current passthrough state.
        brace_depth: Nesting depth; non-zero only in `IN_BRACE_GROUP`.
        lookahead: Pending output (one ASCII character or a sequence), or None.
    """

    state: PassthroughState = PassthroughState.IDLE
    brace_depth: int = 0
    lookahead: str | None = None
