from __future__ import annotations

import pytest

from keyhash.security.passwords import PasswordService

VALIDATION_KEY = (
    "C7D461D13B86BED2A574C1E57A90DCD613690FA72CF3C9ED37C182222C417C22"
    "D886B7620921A3C730626F6BA42637F8B9D974040DB73BFA9CF8D30A14852581"
)


@pytest.fixture(autouse=True)
def _clear_keyhash_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "KEYHASH_VALIDATION_KEY",
        "KEYHASH_ALGORITHM",
        "KEYHASH_ENCODING",
        "KEYHASH_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def service() -> PasswordService:
    return PasswordService(VALIDATION_KEY)


@pytest.fixture
def validation_key() -> str:
    return VALIDATION_KEY
