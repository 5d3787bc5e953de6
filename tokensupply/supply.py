from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated


class SupplyQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    contract_address: str
    api_key: str
    decimals: Annotated[int, Field(ge=0)]


def convert_to_human_readable(raw_supply: int, decimals: int) -> str:
    # Integer part of raw_supply / 10^decimals, the remainder is dropped.
    # Stays in int all the way, float loses digits past 2^53.
    if decimals < 0:
        raise ValueError(f"decimals must not be negative: {decimals}")
    if raw_supply < 0:
        raise ValueError(f"supply must not be negative: {raw_supply}")

    factor = 10 ** decimals
    return str(raw_supply // factor)
