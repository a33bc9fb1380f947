"""keyhash: keyed-hash password hashing and verification.

``PasswordService`` binds a hex validation key at construction and exposes
``hash(password, salt="")`` and ``check(password, candidate_hash, salt="")``.
Digests are base64 strings of the raw HMAC output and carry no salt, so the
caller stores the salt alongside the digest.
"""

from .security import CryptoService, PasswordService
from .core import KeyHashConfig, load_config
from .exceptions import ConfigurationError, KeyHashError
from .logging import configure_logging

__all__ = [
    "ConfigurationError",
    "CryptoService",
    "KeyHashConfig",
    "KeyHashError",
    "PasswordService",
    "configure_logging",
    "load_config",
]
