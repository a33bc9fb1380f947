"""Smoke-check that the public modules expose the expected symbols."""

from __future__ import annotations

from importlib import import_module
from types import ModuleType

import pytest

MODULES_AND_SYMBOLS = [
    ("keyhash", "PasswordService"),
    ("keyhash", "CryptoService"),
    ("keyhash", "ConfigurationError"),
    ("keyhash", "configure_logging"),
    ("keyhash.core", "KeyHashConfig"),
    ("keyhash.core.config", "load_config"),
    ("keyhash.exceptions", "KeyHashError"),
    ("keyhash.security", "keyed_digest"),
    ("keyhash.security.digest", "decode_validation_key"),
    ("keyhash.security.passwords", "encode_digest"),
]


@pytest.mark.parametrize(("module_name", "symbol"), MODULES_AND_SYMBOLS)
def test_importable_symbols(module_name: str, symbol: str) -> None:
    module: ModuleType = import_module(module_name)
    assert hasattr(module, symbol), f"{module_name} missing {symbol}"
