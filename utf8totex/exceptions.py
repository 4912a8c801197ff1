"""Package-specific exception types."""

from __future__ import annotations

from enum import Enum, auto

from .models import Environment


class ErrorKind(Enum):
    """Closed set of translation failure kinds."""

    INVALID_INPUT = auto()
    BAD_MODIFIER = auto()
    BAD_LITERAL = auto()
    UNSUPPORTED = auto()
    INVALID = auto()
    WRITE_FAILURE = auto()


class TranslationError(ValueError):
    """Base class for translation errors.

    Every translation error is fatal to the call that raised it. Output
    already written to the sink is left in place.

    Args:
        offset: Byte offset into the input (or output, for write failures)
            where the failure occurred.
    """

    kind: ErrorKind

    def __init__(self, offset: int, message: str | None = None):
        self.offset = offset
        super().__init__(message or self._build_message())

    def _build_message(self) -> str:
        return f"{self.kind.name.lower().replace('_', ' ')} at byte {self.offset}"


class InvalidInputError(TranslationError):
    """Raised when the input is not decodable as UTF-8."""

    kind = ErrorKind.INVALID_INPUT

    def _build_message(self) -> str:
        return f"Invalid UTF-8 sequence at byte {self.offset}"


class BadModifierError(TranslationError):
    """Raised when a combining accent has no preceding character to attach to."""

    kind = ErrorKind.BAD_MODIFIER

    def __init__(self, offset: int, codepoint: int):
        self.codepoint = codepoint
        super().__init__(offset)

    def _build_message(self) -> str:
        return f"Combining character U+{self.codepoint:04X} at byte {self.offset} has no base"


class BadLiteralError(TranslationError):
    """Raised when a fuzzy passthrough region contains a non-ASCII character."""

    kind = ErrorKind.BAD_LITERAL

    def __init__(self, offset: int, codepoint: int):
        self.codepoint = codepoint
        super().__init__(offset)

    def _build_message(self) -> str:
        return (
            f"Non-ASCII character U+{self.codepoint:04X} at byte {self.offset} "
            "inside a TeX macro, group or math region"
        )


class UnsupportedCharacterError(TranslationError):
    """Raised when the environment has no translation for a codepoint.

    Args:
        offset: Byte offset of the codepoint.
        codepoint: The untranslatable codepoint.
        environment: Environment that was consulted.
    """

    kind = ErrorKind.UNSUPPORTED

    def __init__(self, offset: int, codepoint: int, environment: Environment | None = None):
        self.codepoint = codepoint
        self.environment = environment
        super().__init__(offset)

    def _build_message(self) -> str:
        where = f" in {self.environment.value} mode" if self.environment is not None else ""
        return f"No TeX translation for U+{self.codepoint:04X}{where} (byte {self.offset})"


class InvalidCharacterError(TranslationError):
    """Raised when a codepoint is not a legal character."""

    kind = ErrorKind.INVALID

    def __init__(self, offset: int, codepoint: int):
        self.codepoint = codepoint
        super().__init__(offset)

    def _build_message(self) -> str:
        return f"Invalid character U+{self.codepoint:04X} at byte {self.offset}"


class WriteFailureError(TranslationError):
    """Raised when the output sink rejects a write."""

    kind = ErrorKind.WRITE_FAILURE

    def _build_message(self) -> str:
        return f"Failed to write output after {self.offset} bytes"
