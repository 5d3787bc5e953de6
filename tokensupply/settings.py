import logging.handlers
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import model_validator, Field, ValidationError
import logging
from typing import Optional, Annotated
from typing_extensions import Self
import os

from dotenv import load_dotenv
from tokensupply.errors import ConfigurationError
from tokensupply.supply import SupplyQuery

default_env_file = ".env"

ETHERSCAN_API_URL = "https://api.etherscan.io/api"


class SupplySettings(BaseSettings):

    model_config = SettingsConfigDict(frozen=True, extra="ignore")

    server_host: str = "0.0.0.0"
    server_port: int = 8080

    log_level: str = 'INFO'
    log_dir: str = ""

    etherscan_api_url: str = ETHERSCAN_API_URL
    etherscan_api_key: str

    # None keeps the transport default
    explorer_timeout: Optional[Annotated[float, Field(gt=0)]] = None

    token_address: str
    token_decimals: Annotated[int, Field(default=9, ge=0)]

    @model_validator(mode="after")
    def token_address_not_empty(self) -> Self:
        if self.token_address.strip() == "":
            raise ValueError("token_address must not be empty")
        return self

    def supply_query(self) -> SupplyQuery:
        return SupplyQuery(
            contract_address=self.token_address,
            api_key=self.etherscan_api_key,
            decimals=self.token_decimals
        )


def load_settings(env_file: Optional[str] = None, **overrides) -> SupplySettings:
    if env_file is None:
        env_file = os.getenv("SUPPLY_ENV_FILE", default_env_file)

    if os.path.exists(env_file):
        load_dotenv(env_file)

    try:
        return SupplySettings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(settings: SupplySettings):

    handlers = [
        logging.StreamHandler()
    ]

    if settings.log_dir != "":
        handlers.append(logging.handlers.TimedRotatingFileHandler(
            os.path.join(settings.log_dir, "tokensupply.log"),
            when='midnight',
            backupCount=30
        ))

    logging.basicConfig(
        format=log_format,
        level=settings.log_level,
        handlers=handlers,
        force=True
    )

    # Keep urllib3 connection chatter out of the service log
    if settings.log_level != "DEBUG":
        logging.getLogger("urllib3").setLevel("WARN")
