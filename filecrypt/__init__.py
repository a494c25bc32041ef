# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del códec AES-GCM del paquete filecrypt.
# --------------------------------------------------------------
"""Cifrado autenticado AES-256-GCM de contenido de ficheros en memoria."""

from filecrypt.crypto_sym import decrypt, decrypt_text, encrypt, export_key, generate_key, import_key
from filecrypt.errors import (
    AuthenticationError,
    CharacterDecodingError,
    DecodingError,
    EncryptionError,
    FileCryptError,
    KeyGenerationError,
    KeyUsageError,
)
from filecrypt.models import AesGcmKey, SealedMessage

__all__ = [
    "AesGcmKey",
    "AuthenticationError",
    "CharacterDecodingError",
    "DecodingError",
    "EncryptionError",
    "FileCryptError",
    "KeyGenerationError",
    "KeyUsageError",
    "SealedMessage",
    "decrypt",
    "decrypt_text",
    "encrypt",
    "export_key",
    "generate_key",
    "import_key",
]
