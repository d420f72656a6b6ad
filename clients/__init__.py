from .openai_client import OpenAIClient
from .base_client import Client

def create_client(client_type: str, config: dict) -> Client:
    """Creates and returns an instance of the specified client type."""
    clients = {
        "openai": lambda: OpenAIClient(
            config.get('OPENAI_API_KEY'),
            base_url=config.get('OPENAI_BASE_URL'),
            timeout=config.get('OPENAI_TIMEOUT'),
        ),
    }
    if client_type not in clients:
        raise ValueError(f"Invalid client type: {client_type}")
    return clients[client_type]()
