import os
from dotenv import load_dotenv

from errors import ConfigurationError


def load_configuration():
    load_dotenv()
    config = {
        'OPENAI_API_KEY': os.getenv('OPENAI_API_KEY'),
        'OPENAI_MODEL': os.getenv('OPENAI_MODEL', DEFAULT_MODEL),
        'OPENAI_BASE_URL': os.getenv('OPENAI_BASE_URL', OPENAI_BASE_URL),
        'OPENAI_TIMEOUT': DEFAULT_TIMEOUT,
    }

    timeout = os.getenv('OPENAI_TIMEOUT')
    if timeout:
        try:
            config['OPENAI_TIMEOUT'] = float(timeout)
        except ValueError:
            raise ConfigurationError(f"OPENAI_TIMEOUT must be a number of seconds, got {timeout!r}")
        if config['OPENAI_TIMEOUT'] <= 0:
            raise ConfigurationError("OPENAI_TIMEOUT must be greater than zero")

    return config


API_KEY_ENV_VAR = "OPENAI_API_KEY"
OPENAI_BASE_URL = "https://api.openai.com/v1"
DEFAULT_MODEL = "gpt-4"
DEFAULT_TIMEOUT = 60.0  # seconds
SYSTEM_PROMPT = "You are an assistant that generates a commit message given a git diff."
REQUIRED_TOOLS = ("git",)
