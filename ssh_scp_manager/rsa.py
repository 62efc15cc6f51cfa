"""RSA key pair generation for EC2-style key import."""

from __future__ import annotations

import base64
import logging

from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    NoEncryption,
    PrivateFormat,
    PublicFormat,
)

from .errors import KeyGenerationError

logger = logging.getLogger(__name__)

DEFAULT_BITS = 4092
PUBLIC_EXPONENT = 65537


def new_key(bits: int | None = None) -> tuple[str, str]:
    """Generate a new RSA key.

    Args:
        bits: Modulus size. Defaults to :data:`DEFAULT_BITS`.

    Returns:
        ``(private_pem, public_b64)``: the private key in unencrypted
        traditional OpenSSL PEM and the SubjectPublicKeyInfo DER public key
        in standard base64.

    Raises:
        KeyGenerationError: If the key cannot be generated or encoded.
    """

    key_size = DEFAULT_BITS if bits is None else bits
    logger.info("generating %d-bit RSA key", key_size)
    try:
        private_key = rsa.generate_private_key(
            public_exponent=PUBLIC_EXPONENT, key_size=key_size
        )
    except (ValueError, TypeError) as e:
        raise KeyGenerationError(f"failed to rsa generate {e}") from e

    try:
        private_pem = private_key.private_bytes(
            Encoding.PEM, PrivateFormat.TraditionalOpenSSL, NoEncryption()
        ).decode("ascii")
        public_der = private_key.public_key().public_bytes(
            Encoding.DER, PublicFormat.SubjectPublicKeyInfo
        )
    except (ValueError, UnicodeDecodeError) as e:
        raise KeyGenerationError(f"failed to encode rsa key {e}") from e

    # no "ssh-rsa " prefix; EC2 key import rejects it as invalid OpenSSH format
    return private_pem, base64.standard_b64encode(public_der).decode("ascii")
