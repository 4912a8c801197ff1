"""
utf8totex: stream UTF-8 text into TeX source.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    utf8totex --fuzzy chapter.txt -o chapter.tex

Library Usage:
    import sys
    from utf8totex import Environment, translate, translate_text

    translate_text("café")  # "caf{\\'e}"
    translate("naïve".encode(), fuzzy=True, sink=sys.stdout.buffer)
"""

__version__ = "0.1.0"

from .classifier import classify
from .decoder import DecodeError, decode_char
from .exceptions import (
    BadLiteralError,
    BadModifierError,
    ErrorKind,
    InvalidCharacterError,
    InvalidInputError,
    TranslationError,
    UnsupportedCharacterError,
    WriteFailureError,
)
from .models import Environment, PassthroughState, Token, TokenKind, TranslatorContext
from .translator import translate, translate_char, translate_text

__all__ = [
    # Core functionality
    "translate",
    "translate_text",
    "translate_char",
    # Collaborators
    "classify",
    "decode_char",
    # Data models
    "Environment",
    "PassthroughState",
    "Token",
    "TokenKind",
    "TranslatorContext",
    # Exceptions
    "DecodeError",
    "ErrorKind",
    "TranslationError",
    "InvalidInputError",
    "BadModifierError",
    "BadLiteralError",
    "UnsupportedCharacterError",
    "InvalidCharacterError",
    "WriteFailureError",
    # Version
    "__version__",
]
