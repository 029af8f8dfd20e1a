import pytest

from signed_uri import SignedUrlCodec

DEFAULT_SECRET = "test"
FROZEN_NOW = 1_700_000_000  # 2023-11-14T22:13:20Z


class FrozenClock:
    def __init__(self, now: int = FROZEN_NOW) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def utc_timezone(monkeypatch):
    monkeypatch.setenv("TIMEZONE", "UTC")


@pytest.fixture()
def clock():
    return FrozenClock()


@pytest.fixture()
def codec(clock):
    return SignedUrlCodec(DEFAULT_SECRET, clock=clock)
