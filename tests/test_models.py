from dataclasses import FrozenInstanceError

import pytest

from utf8totex.models import Environment, PassthroughState, Token, TokenKind, TranslatorContext


def test_passthrough_state_members():
    assert list(PassthroughState) == [
        PassthroughState.IDLE,
        PassthroughState.IN_MACRO_NAME,
        PassthroughState.IN_BRACE_GROUP,
        PassthroughState.IN_MATH_REGION,
    ]


def test_token_kind_members():
    assert [kind.name for kind in TokenKind] == [
        "ASCII",
        "SEQUENCE",
        "MODIFIER",
        "UNSUPPORTED",
        "INVALID",
    ]


def test_environment_values():
    assert Environment("text") is Environment.TEXT
    assert Environment("math") is Environment.MATH


def test_translator_context_defaults():
    ctx = TranslatorContext()

    assert ctx.state is PassthroughState.IDLE
    assert ctx.brace_depth == 0
    assert ctx.lookahead is None


def test_token_is_immutable():
    token = Token(TokenKind.SEQUENCE, "{\\ss}")

    with pytest.raises(FrozenInstanceError):
        token.text = "ss"


def test_token_defaults_to_no_text():
    assert Token(TokenKind.ASCII).text is None
