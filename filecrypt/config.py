# --------------------------------------------------------------
# File: config.py
# Description: Parámetros de entorno y constantes del cifrado AES-GCM.
# --------------------------------------------------------------
"""Configuración cargada desde el entorno o un fichero `.env`."""

import os

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("FILECRYPT_LOG_LEVEL", "WARNING")
LOG_FORMAT = os.getenv("FILECRYPT_LOG_FORMAT", "json")

# Parámetros fijos de AES-256-GCM (no configurables).
ALGORITHM = "AES-GCM"
KEY_SIZE = 32  # 256 bits
NONCE_SIZE = 12  # 96 bits, recomendado por NIST SP 800-38D
TAG_SIZE = 16  # 128 bits
MIN_SEALED_SIZE = NONCE_SIZE + TAG_SIZE
