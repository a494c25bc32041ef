# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas de claves y aislamiento de structlog.
# --------------------------------------------------------------

from typing import Iterator

import pytest
import structlog

from filecrypt.crypto_sym import generate_key
from filecrypt.models import AesGcmKey


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Restaura la configuración de structlog tras cada prueba.

    Returns:
        Iterator[None]: Control del fixture autouse durante cada test.
    """
    yield
    structlog.reset_defaults()


@pytest.fixture
def key() -> AesGcmKey:
    """Clave AES-256-GCM nueva para cada prueba."""
    return generate_key()


@pytest.fixture
def other_key() -> AesGcmKey:
    """Segunda clave independiente para los casos de clave incorrecta."""
    return generate_key()
