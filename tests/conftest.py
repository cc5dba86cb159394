import pytest

TWEET = "Die @bedcon ist die großartigste #Konferenz des Jahres. http://bedcon.org"


@pytest.fixture
def tweet() -> str:
    return TWEET


@pytest.fixture(autouse=True)
def _clear_tweetnorm_env(monkeypatch) -> None:
    for name in (
        "TWEETNORM_ENV",
        "TWEETNORM_LOG_LEVEL",
        "TWEETNORM_API_HOST",
        "TWEETNORM_API_PORT",
        "TWEETNORM_WORKERS",
        "TWEETNORM_WINDOW_SIZE",
        "TWEETNORM_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
