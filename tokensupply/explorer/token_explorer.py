from abc import ABC, abstractmethod
from pydantic import BaseModel, ConfigDict, field_validator
from tokensupply.supply import SupplyQuery, convert_to_human_readable
import logging

logger = logging.getLogger("[TokenExplorer]")


class ExplorerResponse(BaseModel):
    # Envelope returned by Etherscan-style APIs
    # Absent or null fields read as empty strings, a field of another type is a decode failure
    model_config = ConfigDict(strict=True)

    status: str = ""
    message: str = ""
    result: str = ""

    @field_validator("status", "message", "result", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        if value is None:
            return ""
        return value


class TokenExplorer(ABC):
# The interfaces the supply API needs from a blockchain explorer
    @abstractmethod
    def fetch_total_supply(self, contract_address: str, api_key: str) -> int:
        # Fetch the raw total supply of the token, in its smallest unit
        # Raise a SupplyError on any failure
        pass

    def get_total_supply(self, query: SupplyQuery) -> str:
        # Get the UI display of the total supply for the given query
        raw_supply = self.fetch_total_supply(query.contract_address, query.api_key)
        logger.debug(f"Raw total supply of {query.contract_address}: {raw_supply}")
        return convert_to_human_readable(raw_supply, query.decimals)
