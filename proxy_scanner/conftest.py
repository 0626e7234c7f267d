import pytest
from loguru import logger

from proxy_scanner.core.constants.chains import CHAIN_ENDPOINT_ENV_VARS


@pytest.fixture(autouse=True)
def clean_endpoint_env(monkeypatch):
    # setenv first so teardown also removes values loaded from .env files
    for env_var in CHAIN_ENDPOINT_ENV_VARS.values():
        monkeypatch.setenv(env_var, "")
        monkeypatch.delenv(env_var)
    yield


@pytest.fixture(autouse=True)
def reset_logger():
    # The CLI swaps loguru sinks; drop any that point at captured streams.
    yield
    logger.remove()
