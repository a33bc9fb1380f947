"""Keyed-hash primitives and the password service."""

from .digest import (
    DEFAULT_ALGORITHM,
    decode_validation_key,
    digest_size,
    ensure_algorithm,
    keyed_digest,
)
from .passwords import CryptoService, PasswordService, encode_digest

__all__ = [
    "CryptoService",
    "DEFAULT_ALGORITHM",
    "PasswordService",
    "decode_validation_key",
    "digest_size",
    "encode_digest",
    "ensure_algorithm",
    "keyed_digest",
]
