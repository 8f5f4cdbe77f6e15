import os

import pytest
import structlog

# Keep the host environment from leaking into settings
for key in ("SUTIL_DEBUG", "SUTIL_MAX_LIMIT"):
    os.environ.pop(key, None)


@pytest.fixture(autouse=True)
def fresh_settings():
    from sutil.core.config import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def letters() -> list[str]:
    return list("ABCDEFGHIJ")
