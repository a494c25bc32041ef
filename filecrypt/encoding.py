# --------------------------------------------------------------
# File: encoding.py
# Description: Conversión entre bytes, texto UTF-8 y Base64.
# --------------------------------------------------------------
"""Funciones puras de transcodificación binario/texto."""

from __future__ import annotations

import base64
import binascii

from filecrypt.errors import CharacterDecodingError, DecodingError

__all__ = ["base64_to_bytes", "bytes_to_base64", "bytes_to_text", "text_to_bytes"]


def bytes_to_base64(data: bytes) -> str:
    """Codifica datos binarios en Base64 estándar con relleno."""

    return base64.b64encode(data).decode("ascii")


def base64_to_bytes(value: str) -> bytes:
    """Decodifica Base64 estándar rechazando caracteres fuera del alfabeto.

    Args:
        value (str): Cadena Base64 con relleno.

    Returns:
        bytes: Datos originales.

    Raises:
        DecodingError: Si la cadena no es Base64 válido.

    """

    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError, TypeError) as exc:
        raise DecodingError("Base64 malformado", exc) from exc


def text_to_bytes(text: str) -> bytes:
    return text.encode("utf-8")


def bytes_to_text(data: bytes, *, lossy: bool = False) -> str:
    """Decodifica UTF-8; con `lossy=True` sustituye secuencias inválidas por U+FFFD.

    Raises:
        CharacterDecodingError: Si los bytes no son UTF-8 y `lossy` es False.

    """

    if lossy:
        return data.decode("utf-8", errors="replace")
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise CharacterDecodingError("El contenido no es UTF-8 válido", exc) from exc
