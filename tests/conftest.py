import pytest
from click.testing import CliRunner

from utf8totex.models import Environment, Token, TokenKind

# Deterministic classification covering every token kind.
STAND_IN_TOKENS = {
    0x0007: Token(TokenKind.INVALID),
    0x00DF: Token(TokenKind.SEQUENCE, "{\\ss}"),
    0x00E9: Token(TokenKind.SEQUENCE, "{\\'e}"),
    0x0301: Token(TokenKind.MODIFIER, "{\\'"),
    0x0302: Token(TokenKind.MODIFIER, "{\\^"),
    0x0323: Token(TokenKind.MODIFIER, "{\\d "),
    0x2603: Token(TokenKind.UNSUPPORTED),
}


def stand_in_classifier(codepoint: int, environment: Environment) -> Token:
    token = STAND_IN_TOKENS.get(codepoint)
    if token is not None:
        return token
    if codepoint < 0x80:
        return Token(TokenKind.ASCII)
    return Token(TokenKind.UNSUPPORTED)


@pytest.fixture()
def cli_runner() -> CliRunner:
    """Provides a reusable Click CLI runner."""
    return CliRunner()


@pytest.fixture()
def classifier():
    """Provides a classifier that needs no translation tables."""
    return stand_in_classifier
