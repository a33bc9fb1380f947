"""Keyed-hash password hashing and verification."""

from __future__ import annotations

import base64
import codecs
import hmac
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import structlog
from pydantic import SecretStr

from ..exceptions import ConfigurationError
from .digest import (
    DEFAULT_ALGORITHM,
    decode_validation_key,
    ensure_algorithm,
    keyed_digest,
)

if TYPE_CHECKING:  # pragma: no cover - type-checking only import
    from ..core.config import KeyHashConfig

DEFAULT_ENCODING = "utf-8"
# codecs able to carry every str, lone surrogates included
_SUPPORTED_ENCODINGS = frozenset(
    {"utf-8", "utf-16", "utf-16-le", "utf-16-be", "utf-32", "utf-32-le", "utf-32-be"}
)

logger = structlog.get_logger(__name__)


def encode_digest(raw: bytes) -> str:
    """Return the printable base64 form of ``raw`` digest bytes."""
    return base64.b64encode(raw).decode("ascii")


def _encoded_length(raw_size: int) -> int:
    return 4 * ((raw_size + 2) // 3)


@runtime_checkable
class CryptoService(Protocol):
    """Interface shared by password hashing services."""

    def hash(self, password: str, salt: str = "") -> str:
        ...

    def check(self, password: str, candidate_hash: str, salt: str = "") -> bool:
        ...


class PasswordService:
    """Hash and check passwords with HMAC under a fixed validation key.

    The salt is not stored in the produced digest: callers keep it next to the
    digest and pass the same value back to :meth:`check`.
    """

    __slots__ = ("_key", "_algorithm", "_encoding", "_digest_size")

    def __init__(
        self,
        validation_key: str | SecretStr,
        *,
        algorithm: str = DEFAULT_ALGORITHM,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        if isinstance(validation_key, SecretStr):
            validation_key = validation_key.get_secret_value()
        self._key = decode_validation_key(validation_key)
        self._algorithm = ensure_algorithm(algorithm)
        try:
            self._encoding = codecs.lookup(encoding).name
        except (LookupError, TypeError) as exc:
            raise ConfigurationError(f"unknown text encoding: {encoding!r}") from exc
        if self._encoding not in _SUPPORTED_ENCODINGS:
            raise ConfigurationError(f"unsupported text encoding: {encoding!r}")
        self._digest_size = len(keyed_digest(self._key, b"", self._algorithm))
        logger.info(
            "keyhash.service.created",
            algorithm=self._algorithm,
            encoding=self._encoding,
            digest_size=self._digest_size,
        )

    @classmethod
    def from_config(cls, config: KeyHashConfig | None = None) -> "PasswordService":
        """Build a service from settings, reading the environment when omitted."""

        if config is None:
            from ..core.config import load_config

            config = load_config()
        if config.validation_key is None:
            raise ConfigurationError("KEYHASH_VALIDATION_KEY is not configured")
        return cls(
            config.validation_key,
            algorithm=config.algorithm,
            encoding=config.encoding,
        )

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @property
    def encoding(self) -> str:
        return self._encoding

    @property
    def digest_size(self) -> int:
        return self._digest_size

    @property
    def encoded_length(self) -> int:
        """Length of every string returned by :meth:`hash`."""
        return _encoded_length(self._digest_size)

    def hash(self, password: str, salt: str = "") -> str:
        """Return the base64 HMAC of ``password`` followed by ``salt``."""

        message = (password + salt).encode(self._encoding, "surrogatepass")
        return encode_digest(keyed_digest(self._key, message, self._algorithm))

    def check(self, password: str, candidate_hash: str, salt: str = "") -> bool:
        """Check ``password`` against ``candidate_hash`` using constant time."""

        expected = self.hash(password, salt).encode("ascii")
        candidate = candidate_hash.encode("utf-8", "surrogatepass")
        if len(candidate) != len(expected):
            logger.debug("keyhash.check.mismatch", reason="length")
            return False
        if not hmac.compare_digest(expected, candidate):
            logger.debug("keyhash.check.mismatch", reason="digest")
            return False
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}(algorithm={self._algorithm!r})"


__all__ = [
    "CryptoService",
    "DEFAULT_ENCODING",
    "PasswordService",
    "encode_digest",
]
