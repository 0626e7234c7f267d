import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from loguru import logger

from proxy_scanner.core.constants.chains import Chain, endpoint_env_var_for
from proxy_scanner.core.errors import ConfigurationError

_DEFAULT_ENV_FILENAME = ".env"


def resolve_env_path(path: str | Path | None = None) -> Path | None:
    if path is not None:
        return Path(path).expanduser()
    found = find_dotenv(_DEFAULT_ENV_FILENAME, usecwd=True)
    return Path(found) if found else None


def load_env_file(path: str | Path | None = None) -> Path | None:
    """Load endpoint variables from a dotenv file into ``os.environ``.

    Variables already present in the process environment are left untouched.
    An explicit ``path`` must exist; without one the nearest ``.env`` above the
    working directory is used if there is one.
    """
    env_path = resolve_env_path(path)
    if env_path is None:
        logger.debug("No .env file found; using process environment only")
        return None
    if env_path.is_dir():
        raise ConfigurationError(f"Env file is a directory: {env_path}")
    if not env_path.exists():
        if path is not None:
            raise ConfigurationError(f"Env file not found: {env_path}")
        logger.warning(f"Ignoring missing env file {env_path}")
        return None
    load_dotenv(env_path, override=False)
    logger.debug(f"Loaded environment from {env_path}")
    return env_path


def get_endpoint_url(chain: Chain | str) -> str:
    env_var = endpoint_env_var_for(chain)
    value = os.environ.get(env_var, "").strip()
    if not value:
        raise ConfigurationError(f"{env_var} environment variable not set")
    return value
