# --------------------------------------------------------------
# File: test_encoding.py
# Description: Pruebas de las conversiones entre bytes, UTF-8 y Base64.
# --------------------------------------------------------------

import os

import pytest

from filecrypt.encoding import base64_to_bytes, bytes_to_base64, bytes_to_text, text_to_bytes
from filecrypt.errors import CharacterDecodingError, DecodingError


def test_base64_roundtrip_binary():
    """Comprueba que cualquier secuencia de bytes sobreviva a Base64.

    Returns:
        None: Las aserciones comparan los bytes originales y los recuperados.
    """
    for size in (0, 1, 2, 3, 255):
        data = os.urandom(size)
        assert base64_to_bytes(bytes_to_base64(data)) == data


def test_base64_uses_standard_alphabet():
    """La salida usa el alfabeto estándar con relleno, como `btoa`."""
    assert bytes_to_base64(b"\xfb\xff") == "+/8="
    assert bytes_to_base64(b"") == ""


@pytest.mark.parametrize("value", ["-_8=", "Zm9v YmFy", "Zm9", "Zm9v\n"])
def test_base64_rejects_invalid_input(value):
    """Caracteres URL-safe, espacios o relleno incorrecto se rechazan."""
    with pytest.raises(DecodingError):
        base64_to_bytes(value)


def test_text_roundtrip():
    """UTF-8 es reversible para textos con caracteres multibyte."""
    text = "asset: ñ € 🌍"
    assert bytes_to_text(text_to_bytes(text)) == text


def test_invalid_utf8_strict_and_lossy():
    """Sin modo permisivo se lanza CharacterDecodingError; con él se sustituye.

    Returns:
        None: Las aserciones revisan ambos modos de decodificación.
    """
    data = b"ok\xc3("
    with pytest.raises(CharacterDecodingError) as info:
        bytes_to_text(data)
    assert isinstance(info.value.__cause__, UnicodeDecodeError)
    assert bytes_to_text(data, lossy=True) == "ok\ufffd("
