# --------------------------------------------------------------
# File: models.py
# Description: Modelos inmutables para claves AES-GCM y mensajes sellados.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan estructuras de intercambio criptográfico."""

from __future__ import annotations

from typing import Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field, SecretBytes, field_validator

from filecrypt.config import ALGORITHM, KEY_SIZE

KeyUsage = Literal["encrypt", "decrypt"]


class AesGcmKey(BaseModel):
    """Clave simétrica AES-256-GCM opaca e inmutable.

    El material se guarda como `SecretBytes`, de modo que nunca aparece en
    `repr`, `str` ni en `model_dump`.

    Attributes:
        material (SecretBytes): 32 bytes de clave.
        algorithm (str): Algoritmo declarado, siempre "AES-GCM".
        length (int): Tamaño de la clave en bits.
        extractable (bool): Si se permite exportar la clave en base64.
        usages (Tuple[str, ...]): Operaciones autorizadas.

    """

    model_config = ConfigDict(frozen=True)

    material: SecretBytes
    algorithm: Literal["AES-GCM"] = ALGORITHM
    length: Literal[256] = KEY_SIZE * 8
    extractable: bool = True
    usages: Tuple[KeyUsage, ...] = ("encrypt", "decrypt")

    @field_validator("material")
    @classmethod
    def _check_size(cls, value: SecretBytes) -> SecretBytes:
        if len(value.get_secret_value()) != KEY_SIZE:
            raise ValueError(f"la clave AES-256 debe tener {KEY_SIZE} bytes")
        return value

    def allows(self, usage: KeyUsage) -> bool:
        """Indica si la clave admite la operación `usage`."""

        return usage in self.usages


class SealedMessage(BaseModel):
    """Resultado de un cifrado listo para transporte en texto.

    Attributes:
        encrypted_data (str): Base64 de `nonce ‖ ciphertext ‖ tag`.
        iv (str): Base64 del nonce; debe coincidir con los 12 primeros
            bytes de `encrypted_data`.

    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    encrypted_data: str = Field(alias="encryptedData")
    iv: str
