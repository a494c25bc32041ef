# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones del códec AEAD con códigos estables.
# --------------------------------------------------------------
"""Tipos de error que distinguen claves, cifrado, integridad y codificación."""

from __future__ import annotations

from typing import Optional

__all__ = [
    "AuthenticationError",
    "CharacterDecodingError",
    "DecodingError",
    "EncryptionError",
    "FileCryptError",
    "FileCryptErrorCodes",
    "KeyGenerationError",
    "KeyUsageError",
]


class FileCryptErrorCodes:
    """Constantes de código para `FileCryptError`."""

    KEY_GENERATION: str = "KEY_GENERATION_ERROR"
    ENCRYPTION: str = "ENCRYPTION_ERROR"
    AUTHENTICATION: str = "AUTHENTICATION_ERROR"
    DECODING: str = "DECODING_ERROR"
    CHARACTER_DECODING: str = "CHARACTER_DECODING_ERROR"
    KEY_USAGE: str = "KEY_USAGE_ERROR"


class FileCryptError(Exception):
    """Error base de filecrypt.

    Args:
        message (str): Descripción legible sin material sensible.
        cause (Optional[Exception]): Excepción original que se encadena.

    """

    default_code: str = "FILECRYPT_ERROR"

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message)
        self.code = self.default_code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class KeyGenerationError(FileCryptError):
    """La fuente aleatoria segura no está disponible (fatal)."""

    default_code = FileCryptErrorCodes.KEY_GENERATION


class EncryptionError(FileCryptError):
    """La primitiva rechazó la clave o la entrada a cifrar."""

    default_code = FileCryptErrorCodes.ENCRYPTION


class AuthenticationError(FileCryptError):
    """El tag GCM no verifica: datos alterados o clave incorrecta."""

    default_code = FileCryptErrorCodes.AUTHENTICATION


class DecodingError(FileCryptError):
    """Base64 malformado o carga útil demasiado corta."""

    default_code = FileCryptErrorCodes.DECODING


class CharacterDecodingError(FileCryptError):
    """El texto recuperado no es UTF-8 válido."""

    default_code = FileCryptErrorCodes.CHARACTER_DECODING


class KeyUsageError(FileCryptError):
    """La clave no autoriza la operación solicitada."""

    default_code = FileCryptErrorCodes.KEY_USAGE
