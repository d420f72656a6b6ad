import json

from loguru import logger

from config import DEFAULT_MODEL, SYSTEM_PROMPT
from errors import ResponseFormatError


def build_request(diff: str, model: str = DEFAULT_MODEL, system_prompt: str = SYSTEM_PROMPT) -> dict:
    """Wraps the diff in a chat-completion request payload."""
    return {
        "model": model,
        "messages": [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": diff},
        ],
    }


def serialize_request(request: dict) -> str:
    """Encodes the request as JSON. All string escaping is left to the encoder."""
    return json.dumps(request, indent=2)


def extract_commit_message(response) -> str:
    """
    Pulls ``choices[0].message.content`` out of a chat-completion response.

    ``response`` may be the raw body text or an already decoded dict.
    Raises ResponseFormatError when the body is not JSON or the field is
    missing or empty.
    """
    if isinstance(response, (str, bytes)):
        try:
            response = json.loads(response)
        except json.JSONDecodeError as e:
            raise ResponseFormatError(f"API response is not valid JSON: {e}") from e

    try:
        content = response["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        error = response.get("error") if isinstance(response, dict) else None
        if isinstance(error, dict) and error.get("message"):
            raise ResponseFormatError(f"API returned an error: {error['message']}") from e
        raise ResponseFormatError("API response has no choices[0].message.content field.") from e

    if not isinstance(content, str) or not content.strip():
        raise ResponseFormatError("API response contains an empty commit message.")
    return content.strip()


class MessageGenerator:
    def __init__(self, client, model=DEFAULT_MODEL, system_prompt=SYSTEM_PROMPT):
        self.client = client
        self.model = model
        self.system_prompt = system_prompt

    def generate_commit_message(self, diff):
        request = build_request(diff, self.model, self.system_prompt)
        logger.opt(lazy=True).debug("API request:\n{}", lambda: serialize_request(request))
        logger.info("API request prepared.")

        response = self.client.complete(request)
        commit_message = extract_commit_message(response)
        logger.success("Commit message generated.")
        return commit_message
