import os
from typing import Optional

import msgspec
from dotenv import load_dotenv

API_PREFIX = "api/v1"

DEFAULT_PROTOCOL = "http"
DEFAULT_ADDRESS = "localhost:8000"


class ServerConfig(msgspec.Struct, frozen=True):
    protocol: str = DEFAULT_PROTOCOL
    address: str = DEFAULT_ADDRESS

    @property
    def base_url(self) -> str:
        return f"{self.protocol}://{self.address}"

    def endpoint(self, name: str) -> str:
        return f"{self.base_url}/{API_PREFIX}/{name}"


class Settings:
    def __init__(self):
        # Server location
        self.SERVER_PROTOCOL: str = os.getenv("ENV_SERVER_PROTOCOL", DEFAULT_PROTOCOL)
        self.SERVER_ADDRESS: str = os.getenv("ENV_SERVER_ADDRESS", DEFAULT_ADDRESS)

    def server_config(self) -> ServerConfig:
        return ServerConfig(protocol=self.SERVER_PROTOCOL, address=self.SERVER_ADDRESS)


def load_settings(dotenv_path: Optional[str] = None) -> ServerConfig:
    """
    Reads the server location from the environment, loading .env first.
    Values already present in the environment win over the .env file.
    """
    load_dotenv(dotenv_path or os.getenv("DOTENV_PATH", ".env"), override=False)
    return Settings().server_config()
