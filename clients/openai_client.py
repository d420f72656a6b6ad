import openai

from clients.base_client import Client

from openai import OpenAI
from loguru import logger

from config import DEFAULT_TIMEOUT, OPENAI_BASE_URL
from errors import ApiConnectionError, ApiError


class OpenAIClient(Client):
    def __init__(self, api_key, base_url=None, timeout=None, http_client=None):
        super().__init__(api_key)
        self.base_url = base_url or OPENAI_BASE_URL
        self.timeout = DEFAULT_TIMEOUT if timeout is None else timeout
        self.client = OpenAI(
            base_url=self.base_url,
            api_key=api_key,
            timeout=self.timeout,  # Set a timeout (in seconds)
            max_retries=0,
            http_client=http_client,
        )

    def complete(self, request):
        logger.info(f"Calling OpenAI API (model: {request.get('model')})...")
        try:
            raw_response = self.client.chat.completions.with_raw_response.create(**request)
        except openai.APIConnectionError as e:
            # APITimeoutError is a subclass, so timeouts land here too.
            raise ApiConnectionError(f"API call failed: {e}") from e
        except openai.APIStatusError as e:
            raise ApiError(f"API call failed with status {e.status_code}: {e.message}", e.status_code) from e
        logger.info("API response received.")
        body = raw_response.http_response.text
        logger.debug(f"API response:\n{body}")
        return body
