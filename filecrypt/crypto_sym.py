# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-GCM y códec de sellado Base64 para contenido de ficheros.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico autenticado para proteger contenido en memoria.

El formato de transporte es::

    base64( nonce(12) ‖ ciphertext(N) ‖ tag(16) )

acompañado del nonce en Base64 por separado, redundante con la cabecera.
"""

from __future__ import annotations

import hmac
import os
from typing import Optional, Tuple, Union

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from pydantic import SecretBytes, ValidationError

from filecrypt.config import ALGORITHM, KEY_SIZE, MIN_SEALED_SIZE, NONCE_SIZE, TAG_SIZE
from filecrypt.encoding import base64_to_bytes, bytes_to_base64, bytes_to_text, text_to_bytes
from filecrypt.errors import (
    AuthenticationError,
    DecodingError,
    EncryptionError,
    FileCryptError,
    KeyGenerationError,
    KeyUsageError,
)
from filecrypt.logger import get_logger
from filecrypt.models import AesGcmKey, SealedMessage

__all__ = [
    "aes_gcm_decrypt_with_key",
    "aes_gcm_encrypt_with_key",
    "decrypt",
    "decrypt_text",
    "encrypt",
    "export_key",
    "generate_key",
    "import_key",
]


def _logger():
    return get_logger(__name__)


def aes_gcm_encrypt_with_key(
    key: bytes,
    plaintext: bytes,
    aad: Optional[bytes] = None,
    nonce: Optional[bytes] = None,
) -> Tuple[bytes, bytes, bytes]:
    """Cifra datos con AES-GCM utilizando una clave proporcionada.

    Args:
        key (bytes): Clave simétrica de 128, 192 o 256 bits.
        plaintext (bytes): Datos a cifrar.
        aad (Optional[bytes]): Datos autenticados adicionales.
        nonce (Optional[bytes]): Nonce fijo, solo para vectores de prueba.
            Si se omite se genera uno aleatorio de 96 bits.

    Returns:
        Tuple[bytes, bytes, bytes]: Ciphertext sin etiqueta, nonce y tag.

    """

    if nonce is None:
        nonce = os.urandom(NONCE_SIZE)
    aes = AESGCM(key)
    ct_full = aes.encrypt(nonce, plaintext, aad)
    tag = ct_full[-TAG_SIZE:]
    ciphertext = ct_full[:-TAG_SIZE]
    return ciphertext, nonce, tag


def aes_gcm_decrypt_with_key(
    key: bytes, nonce: bytes, ciphertext: bytes, tag: bytes, aad: Optional[bytes] = None
) -> bytes:
    """Descifra datos con AES-GCM utilizando la clave simétrica proporcionada.

    Args:
        key (bytes): Clave simétrica que protege los datos.
        nonce (bytes): Vector de inicialización de 96 bits.
        ciphertext (bytes): Datos cifrados sin etiqueta.
        tag (bytes): Etiqueta de autenticación de 128 bits.
        aad (Optional[bytes]): Datos autenticados adicionales.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        cryptography.exceptions.InvalidTag: Si la etiqueta no verifica.

    """

    aes = AESGCM(key)
    return aes.decrypt(nonce, ciphertext + tag, aad)


def generate_key() -> AesGcmKey:
    """Genera una clave AES-256-GCM aleatoria y exportable.

    Returns:
        AesGcmKey: Clave nueva para cifrar y descifrar.

    Raises:
        KeyGenerationError: Si la fuente aleatoria del sistema no está disponible.

    """

    try:
        material = os.urandom(KEY_SIZE)
    except (OSError, NotImplementedError) as exc:
        _logger().error("key_generation_failed", algorithm=ALGORITHM)
        raise KeyGenerationError("Fuente aleatoria segura no disponible", exc) from exc
    return AesGcmKey(material=SecretBytes(material))


def export_key(key: AesGcmKey) -> str:
    """Exporta el material de una clave exportable en Base64."""

    if not key.extractable:
        raise KeyUsageError("La clave no es exportable")
    return bytes_to_base64(key.material.get_secret_value())


def import_key(encoded: str, *, extractable: bool = True) -> AesGcmKey:
    """Reconstruye una clave a partir de su representación Base64.

    Args:
        encoded (str): Material de la clave en Base64 (32 bytes).
        extractable (bool): Si la clave resultante podrá volver a exportarse.

    Returns:
        AesGcmKey: Clave lista para usar.

    Raises:
        DecodingError: Si el Base64 es inválido o la longitud no es de 256 bits.

    """

    raw = base64_to_bytes(encoded)
    try:
        return AesGcmKey(material=SecretBytes(raw), extractable=extractable)
    except ValidationError:
        # El mensaje de pydantic podría incluir el valor; no se encadena.
        raise DecodingError(f"La clave debe tener {KEY_SIZE} bytes") from None


def encrypt(plaintext: Union[bytes, str], key: AesGcmKey) -> SealedMessage:
    """Cifra contenido con AES-256-GCM usando un nonce aleatorio nuevo.

    Args:
        plaintext (Union[bytes, str]): Contenido en claro; las cadenas se
            codifican en UTF-8.
        key (AesGcmKey): Clave de 256 bits.

    Returns:
        SealedMessage: `encryptedData` con nonce, ciphertext y tag en Base64,
        e `iv` con el nonce en Base64.

    Raises:
        KeyUsageError: Si la clave no admite cifrado.
        EncryptionError: Si la primitiva rechaza la clave o la entrada.

    """

    if not key.allows("encrypt"):
        raise KeyUsageError("La clave no admite cifrado")

    try:
        data = text_to_bytes(plaintext) if isinstance(plaintext, str) else plaintext
        ciphertext, nonce, tag = aes_gcm_encrypt_with_key(key.material.get_secret_value(), data)
    except (TypeError, ValueError, OverflowError, OSError) as exc:
        _logger().warning("encrypt_failed", error=type(exc).__name__)
        raise EncryptionError("No se ha podido cifrar el contenido", exc) from exc

    combined = nonce + ciphertext + tag
    _logger().debug("payload_sealed", algorithm=ALGORITHM, plaintext_size=len(data), sealed_size=len(combined))
    return SealedMessage(encrypted_data=bytes_to_base64(combined), iv=bytes_to_base64(nonce))


def _split_sealed(sealed: SealedMessage) -> Tuple[bytes, bytes, bytes]:
    """Separa nonce, ciphertext y tag comprobando longitud e `iv` emparejado."""

    if not isinstance(sealed, SealedMessage):
        raise DecodingError("Se requiere un mensaje sellado con su iv")

    raw = base64_to_bytes(sealed.encrypted_data)
    if len(raw) < MIN_SEALED_SIZE:
        raise DecodingError(f"Mensaje sellado demasiado corto ({len(raw)} < {MIN_SEALED_SIZE} bytes)")

    iv = base64_to_bytes(sealed.iv)
    if len(iv) != NONCE_SIZE:
        raise DecodingError(f"El iv debe tener {NONCE_SIZE} bytes")
    nonce = raw[:NONCE_SIZE]
    if not hmac.compare_digest(iv, nonce):
        raise AuthenticationError("El iv no coincide con el mensaje sellado")
    return nonce, raw[NONCE_SIZE:-TAG_SIZE], raw[-TAG_SIZE:]


def decrypt(sealed: SealedMessage, key: AesGcmKey) -> bytes:
    """Descifra un mensaje sellado por :func:`encrypt`.

    Args:
        sealed (SealedMessage): `encryptedData` junto con el `iv` que debe
            coincidir con su cabecera.
        key (AesGcmKey): La misma clave usada al cifrar.

    Returns:
        bytes: Contenido original.

    Raises:
        KeyUsageError: Si la clave no admite descifrado.
        DecodingError: Si falta el `iv`, el Base64 es inválido o el mensaje
            mide menos de 28 bytes.
        AuthenticationError: Si el tag no verifica o el `iv` no coincide.

    """

    if not key.allows("decrypt"):
        raise KeyUsageError("La clave no admite descifrado")

    try:
        nonce, ciphertext, tag = _split_sealed(sealed)
        plaintext = aes_gcm_decrypt_with_key(key.material.get_secret_value(), nonce, ciphertext, tag)
    except InvalidTag as exc:
        _logger().warning("decrypt_failed", code=AuthenticationError.default_code)
        raise AuthenticationError("No se ha podido autenticar el mensaje", exc) from exc
    except FileCryptError as exc:
        _logger().warning("decrypt_failed", code=exc.code)
        raise

    _logger().debug("payload_opened", algorithm=ALGORITHM, plaintext_size=len(plaintext))
    return plaintext


def decrypt_text(sealed: SealedMessage, key: AesGcmKey, *, lossy: bool = False) -> str:
    """Descifra y decodifica el contenido como UTF-8.

    Raises:
        CharacterDecodingError: Si el contenido no es UTF-8 y `lossy` es False.

    """

    return bytes_to_text(decrypt(sealed, key), lossy=lossy)
