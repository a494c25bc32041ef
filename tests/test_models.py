# --------------------------------------------------------------
# File: test_models.py
# Description: Pruebas de los modelos de clave y mensaje sellado.
# --------------------------------------------------------------

import pytest
from pydantic import SecretBytes, ValidationError

from filecrypt.models import AesGcmKey, SealedMessage


def test_key_hides_material(key):
    """El material de la clave no aparece en repr, str ni en la serialización.

    Returns:
        None: Las aserciones buscan el secreto en las representaciones.
    """
    raw = key.material.get_secret_value()
    for text in (repr(key), str(key), key.model_dump_json()):
        assert raw.hex() not in text
        assert repr(raw) not in text


def test_key_is_immutable(key):
    """Una clave no puede modificarse tras crearse."""
    with pytest.raises(ValidationError):
        key.extractable = False


@pytest.mark.parametrize("size", [0, 16, 24, 31, 33])
def test_key_requires_256_bits(size):
    """Solo se aceptan claves de 32 bytes."""
    with pytest.raises(ValidationError):
        AesGcmKey(material=SecretBytes(b"k" * size))


def test_key_rejects_unknown_usage():
    """Los usos distintos de cifrar y descifrar no son válidos."""
    with pytest.raises(ValidationError):
        AesGcmKey(material=SecretBytes(bytes(32)), usages=("sign",))


def test_sealed_message_wire_shape():
    """El mensaje se serializa con los nombres `encryptedData` e `iv`.

    Returns:
        None: Las aserciones comprueban alias y reconstrucción.
    """
    sealed = SealedMessage(encrypted_data="AAAA", iv="BBBB")
    wire = sealed.model_dump(by_alias=True)
    assert wire == {"encryptedData": "AAAA", "iv": "BBBB"}
    assert SealedMessage.model_validate(wire) == sealed


def test_sealed_message_requires_iv():
    """Un mensaje sellado sin `iv` emparejado no se puede construir."""
    with pytest.raises(ValidationError):
        SealedMessage.model_validate({"encryptedData": "AAAA"})
    with pytest.raises(ValidationError):
        SealedMessage(encrypted_data="AAAA")
