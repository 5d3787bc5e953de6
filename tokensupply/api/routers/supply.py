import logging
from typing import Annotated
from fastapi import APIRouter, Depends, Response
from tokensupply.api.dependencies import get_settings, get_explorer
from tokensupply.settings import SupplySettings
from tokensupply.explorer import TokenExplorer

logger = logging.getLogger("[Supply API]")

router = APIRouter()

# The body is a bare number, which is itself a valid JSON document
JSON_MEDIA_TYPE = "application/json"

# Locked and burned amounts have no source yet, so this is not computed
CIRCULATING_SUPPLY = "68622706.146"


@router.get("/supply")
def handle_supply(settings: Annotated[SupplySettings, Depends(get_settings)], explorer: Annotated[TokenExplorer, Depends(get_explorer)]):
    query = settings.supply_query()
    total_supply = explorer.get_total_supply(query)
    logger.debug(f"Total supply of {query.contract_address}: {total_supply}")
    return Response(content=total_supply, media_type=JSON_MEDIA_TYPE)


@router.get("/circulating-supply")
def handle_circulating_supply():
    return Response(content=CIRCULATING_SUPPLY, media_type=JSON_MEDIA_TYPE)
