from __future__ import annotations

import io
import os

import pytest

from utf8totex.exceptions import TranslationError
from utf8totex.models import Environment
from utf8totex.translator import translate

atheris = pytest.importorskip("atheris")


def test_translate_with_fuzzed_bytes():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)
    attempts = 0

    while provider.remaining_bytes() > 0 and attempts < 128:
        chunk = provider.ConsumeBytes(32)
        fuzzy = provider.ConsumeBool()
        buffer = io.BytesIO()
        try:
            written = translate(chunk, fuzzy, Environment.TEXT, buffer)
        except TranslationError as error:
            assert error.offset <= len(chunk)
        else:
            assert written == len(buffer.getvalue())
        attempts += 1

    assert attempts  # ensure we exercised the loop


def test_translate_with_fuzzed_text():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)

    for _ in range(64):
        if provider.remaining_bytes() == 0:
            break
        text = provider.ConsumeUnicodeNoSurrogates(32)
        buffer = io.BytesIO()
        try:
            translate(text, provider.ConsumeBool(), Environment.MATH, buffer)
        except TranslationError:
            continue
        buffer.getvalue().decode("ascii")
