from typing import Generator

import pytest

from pushclient import PushClient, get_settings


@pytest.fixture(autouse=True)
def test_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    names = ("EXPO_HOST", "EXPO_API_URL", "EXPO_ACCESS_TOKEN", "EXPO_REQUEST_TIMEOUT", "LOG_LEVEL")
    for name in names:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def client() -> Generator[PushClient, None, None]:
    with PushClient() as push_client:
        yield push_client
