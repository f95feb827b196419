import pytest

from greatcircle.config.settings import get_logging_config, get_settings
from greatcircle.core.env import load_dotenv_if_present

_ENV_VARS = (
    "GREATCIRCLE_CONFIG_PATH",
    "GREATCIRCLE_ENV_FILE",
    "GREATCIRCLE_LOG_LEVEL",
    "GREATCIRCLE_DISTANCE_FORMULA",
    "GREATCIRCLE_STRICT_UNITS",
)


def _clear_caches() -> None:
    get_settings.cache_clear()
    get_logging_config.cache_clear()
    load_dotenv_if_present.cache_clear()


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    # Settings are lru_cached; every test starts from packaged defaults and a clean env.
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    _clear_caches()
    yield
    _clear_caches()
