import shutil
from typing import Iterable

from loguru import logger

from config import API_KEY_ENV_VAR, REQUIRED_TOOLS
from errors import MissingCredentialError, MissingDependencyError


def check_required_tools(tools: Iterable[str] = REQUIRED_TOOLS):
    """Checks that every executable in ``tools`` can be found on PATH."""
    for tool in tools:
        if shutil.which(tool) is None:
            raise MissingDependencyError(tool)
        logger.info(f"{tool} is installed.")


def check_api_key(config: dict) -> str:
    """Returns the API key from the configuration, raising if it is unset or blank."""
    api_key = config.get(API_KEY_ENV_VAR)
    if not api_key or not api_key.strip():
        raise MissingCredentialError(API_KEY_ENV_VAR)
    logger.info(f"{API_KEY_ENV_VAR} is set in the environment.")
    return api_key.strip()
