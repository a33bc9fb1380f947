"""Keyed digest primitive and validation key helpers."""

from __future__ import annotations

import binascii
import hashlib
import hmac

from ..exceptions import ConfigurationError

DEFAULT_ALGORITHM = "sha1"


def ensure_algorithm(name: str) -> str:
    """Return the normalised ``hashlib`` name or raise :class:`ConfigurationError`."""

    normalised = name.strip().lower() if isinstance(name, str) else ""
    if not normalised:
        raise ConfigurationError("digest algorithm must be a non-empty string")
    try:
        probe = hashlib.new(normalised)
    except (ValueError, TypeError) as exc:
        raise ConfigurationError(f"unsupported digest algorithm: {name!r}") from exc
    # shake_* report digest_size 0 and need an explicit output length
    if probe.digest_size == 0:
        raise ConfigurationError(
            f"digest algorithm {name!r} has no fixed output size"
        )
    return normalised


def digest_size(algorithm: str = DEFAULT_ALGORITHM) -> int:
    """Return the raw output size in bytes of ``algorithm``."""

    return hashlib.new(ensure_algorithm(algorithm)).digest_size


def decode_validation_key(value: str) -> bytes:
    """Decode the hex text form of a validation key into raw bytes."""

    if not isinstance(value, str):
        raise ConfigurationError("validation key must be hex text")
    cleaned = value.strip()
    if not cleaned:
        raise ConfigurationError("validation key is not configured")
    try:
        return binascii.unhexlify(cleaned)
    except (binascii.Error, ValueError) as exc:
        raise ConfigurationError("validation key is not valid hex") from exc


def keyed_digest(
    key: bytes, message: bytes, algorithm: str = DEFAULT_ALGORITHM
) -> bytes:
    """Return ``HMAC(key, message)`` computed with ``algorithm``."""

    return hmac.new(key, message, algorithm).digest()


__all__ = [
    "DEFAULT_ALGORITHM",
    "decode_validation_key",
    "digest_size",
    "ensure_algorithm",
    "keyed_digest",
]
