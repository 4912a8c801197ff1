"""Streaming translation of UTF-8 text into TeX source."""

from __future__ import annotations

import io
import logging
from collections.abc import Callable
from typing import BinaryIO

from .classifier import classify, needs_dotless_base
from .constants import DEFAULT_ENVIRONMENT, GROUP_CLOSE, GROUP_OPEN, MACRO_START, MATH_SHIFT
from .decoder import DecodeError, decode_char
from .exceptions import (
    BadLiteralError,
    BadModifierError,
    InvalidCharacterError,
    InvalidInputError,
    TranslationError,
    UnsupportedCharacterError,
    WriteFailureError,
)
from .models import Environment, PassthroughState, Token, TokenKind, TranslatorContext

logger = logging.getLogger(__name__)

Decoder = Callable[[bytes, int], tuple[int, int]]
Classifier = Callable[[int, Environment], Token]
InputData = bytes | bytearray | memoryview | str

_PASSTHROUGH_TRIGGERS = {
    MACRO_START: PassthroughState.IN_MACRO_NAME,
    GROUP_OPEN: PassthroughState.IN_BRACE_GROUP,
    MATH_SHIFT: PassthroughState.IN_MATH_REGION,
}


def _open_group(ctx: TranslatorContext) -> None:
    ctx.state = PassthroughState.IN_BRACE_GROUP
    ctx.brace_depth = 1


def _step_macro_name(ctx: TranslatorContext, char: str) -> None:
    if char == GROUP_OPEN:
        _open_group(ctx)


def _step_brace_group(ctx: TranslatorContext, char: str) -> None:
    if char == GROUP_OPEN:
        ctx.brace_depth += 1
    elif char == GROUP_CLOSE:
        ctx.brace_depth -= 1
        if ctx.brace_depth == 0:
            ctx.state = PassthroughState.IDLE


def _step_math_region(ctx: TranslatorContext, char: str) -> None:
    if char == MATH_SHIFT:
        ctx.state = PassthroughState.IDLE


_TRANSITIONS = {
    PassthroughState.IN_MACRO_NAME: _step_macro_name,
    PassthroughState.IN_BRACE_GROUP: _step_brace_group,
    PassthroughState.IN_MATH_REGION: _step_math_region,
}


def try_enter_passthrough(ctx: TranslatorContext, char: str) -> bool:
    """Enter a passthrough region when `char` opens one.

    Args:
        ctx: Translator context to update.
        char: Character read while idle.

    Returns:
        bool: True when `char` is ``\\``, ``{`` or ``$`` and the context now
            copies input literally; False when idle or not a trigger.

    Examples:
        ctx = TranslatorContext()
        try_enter_passthrough(ctx, "{")  # True, ctx.brace_depth == 1
    """
    if ctx.state is not PassthroughState.IDLE:
        return False

    state = _PASSTHROUGH_TRIGGERS.get(char)
    if state is None:
        return False

    if state is PassthroughState.IN_BRACE_GROUP:
        _open_group(ctx)
    else:
        ctx.state = state
    return True


def advance_passthrough(ctx: TranslatorContext, char: str) -> None:
    """Apply one literal character to an open passthrough region.

    A ``{`` after a macro name opens its argument group. Inside a group,
    braces adjust the depth and the matching ``}`` returns to idle. A ``$``
    closes a math region. Idle contexts are left untouched.

    Examples:
        ctx = TranslatorContext(state=PassthroughState.IN_MATH_REGION)
        advance_passthrough(ctx, "$")  # ctx.state is PassthroughState.IDLE
    """
    step = _TRANSITIONS.get(ctx.state)
    if step is not None:
        step(ctx, char)


class _SinkWriter:
    """Write text to a binary sink, counting bytes and mapping failures."""

    def __init__(self, sink: BinaryIO):
        self.sink = sink
        self.written = 0

    def write(self, text: str) -> None:
        data = text.encode("utf-8")
        try:
            count = self.sink.write(data)
        except (OSError, TypeError, ValueError) as error:
            raise WriteFailureError(self.written) from error
        if count is not None and count != len(data):
            raise WriteFailureError(self.written + max(count, 0))
        self.written += len(data)


def _flush_lookahead(ctx: TranslatorContext, writer: _SinkWriter) -> None:
    if ctx.lookahead is not None:
        writer.write(ctx.lookahead)
        ctx.lookahead = None


def _emit_token(
    ctx: TranslatorContext,
    writer: _SinkWriter,
    token: Token,
    codepoint: int,
    offset: int,
    environment: Environment,
) -> None:
    """Feed one classified codepoint through the lookahead slot.

    ASCII characters and sequences are held back one step so that a
    following combining mark can wrap them. A modifier writes its accent
    template, then the held token, then the closing brace.
    """
    if token.kind is TokenKind.ASCII:
        _flush_lookahead(ctx, writer)
        ctx.lookahead = chr(codepoint)
    elif token.kind is TokenKind.SEQUENCE:
        _flush_lookahead(ctx, writer)
        ctx.lookahead = token.text or ""
    elif token.kind is TokenKind.MODIFIER:
        if ctx.lookahead is None:
            raise BadModifierError(offset, codepoint)
        modifier = token.text or ""
        writer.write(modifier)
        if needs_dotless_base(ctx.lookahead, modifier):
            writer.write("\\")
        _flush_lookahead(ctx, writer)
        writer.write(GROUP_CLOSE)
    elif token.kind is TokenKind.UNSUPPORTED:
        raise UnsupportedCharacterError(offset, codepoint, environment)
    else:
        raise InvalidCharacterError(offset, codepoint)


def translate(
    data: InputData,
    fuzzy: bool = False,
    environment: Environment = DEFAULT_ENVIRONMENT,
    sink: BinaryIO | None = None,
    *,
    decoder: Decoder = decode_char,
    classifier: Classifier = classify,
) -> int:
    """Translate UTF-8 input into TeX, writing the result to `sink`.

    Each codepoint is classified against `environment`. With `fuzzy`
    enabled, existing TeX macros, brace groups and ``$...$`` math are
    copied through literally; their content must be ASCII. Input stops at
    the end of `data` or at the first NUL byte. Regions still open at the
    end of input are accepted.

    Output is not transactional: on failure, everything written before the
    failing codepoint stays in `sink`.

    Args:
        data: UTF-8 encoded input. A `str` is encoded to UTF-8 first.
        fuzzy: Pass pre-existing TeX markup through untouched.
        environment: Translation environment selecting the tables.
        sink: Binary file-like object receiving the output.
        decoder: Function decoding one codepoint at a byte offset.
        classifier: Function mapping a codepoint to a `Token`.

    Returns:
        int: Number of bytes written to `sink`.

    Raises:
        TypeError: If no sink is given.
        InvalidInputError: If the input is not valid UTF-8, or a `str` holds
            a lone surrogate.
        BadModifierError: If a combining mark has nothing to attach to.
        BadLiteralError: If a passthrough region contains non-ASCII text.
        UnsupportedCharacterError: If the environment cannot translate a codepoint.
        InvalidCharacterError: If a codepoint is not a legal character.
        WriteFailureError: If the sink rejects a write, including a text-mode
            sink refusing bytes.

    Examples:
        translate("café".encode(), sink=sys.stdout.buffer)
        translate(b"\\\\textbf{x}", fuzzy=True, sink=buffer)
    """
    if sink is None:
        raise TypeError("translate() requires a writable binary sink")
    if isinstance(data, str):
        try:
            data = data.encode("utf-8")
        except UnicodeEncodeError as error:
            # Offset in bytes of the first unencodable character
            raise InvalidInputError(len(data[: error.start].encode("utf-8"))) from error
    data = bytes(data)

    ctx = TranslatorContext()
    writer = _SinkWriter(sink)
    pos = 0

    try:
        while True:
            try:
                codepoint, length = decoder(data, pos)
            except DecodeError as error:
                raise InvalidInputError(pos) from error
            if length == 0:
                break

            if ctx.state is not PassthroughState.IDLE:
                # Passthrough regions are ASCII only
                if length != 1 or codepoint > 0x7F:
                    raise BadLiteralError(pos, codepoint)
                char = chr(codepoint)
                writer.write(char)
                advance_passthrough(ctx, char)
            elif fuzzy and codepoint <= 0x7F and try_enter_passthrough(ctx, chr(codepoint)):
                _flush_lookahead(ctx, writer)
                writer.write(chr(codepoint))
            else:
                token = classifier(codepoint, environment)
                _emit_token(ctx, writer, token, codepoint, pos, environment)

            pos += length

        if ctx.state is not PassthroughState.IDLE:
            logger.debug("Input ended inside %s (depth %d)", ctx.state.name, ctx.brace_depth)
        _flush_lookahead(ctx, writer)
    except TranslationError as error:
        logger.debug("Translation stopped after %d bytes written: %s", writer.written, error)
        raise

    return writer.written


def translate_text(
    text: InputData, fuzzy: bool = False, environment: Environment = DEFAULT_ENVIRONMENT
) -> str:
    """Translate text and return the TeX output as a string.

    The output is buffered, so nothing is returned when translation fails.

    Examples:
        translate_text("café")  # "caf{\\\\'e}"
        translate_text("\\\\emph{naïve}", fuzzy=True)  # raises BadLiteralError
    """
    buffer = io.BytesIO()
    translate(text, fuzzy, environment, buffer)
    return buffer.getvalue().decode("utf-8")


def translate_char(codepoint: int, environment: Environment = DEFAULT_ENVIRONMENT) -> str:
    """Render a single codepoint on its own.

    Raises:
        BadModifierError: If the codepoint is a combining mark.
        UnsupportedCharacterError: If the environment cannot translate it.
        InvalidCharacterError: If it is not a legal character.
    """
    token = classify(codepoint, environment)
    if token.kind is TokenKind.ASCII:
        return chr(codepoint)
    if token.kind is TokenKind.SEQUENCE:
        return token.text or ""
    if token.kind is TokenKind.MODIFIER:
        raise BadModifierError(0, codepoint)
    if token.kind is TokenKind.UNSUPPORTED:
        raise UnsupportedCharacterError(0, codepoint, environment)
    raise InvalidCharacterError(0, codepoint)
