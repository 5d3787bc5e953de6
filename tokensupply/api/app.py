from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from typing import Optional
from .routers import supply
from tokensupply.errors import SupplyError
from tokensupply.settings import SupplySettings
from tokensupply.explorer import TokenExplorer, create_explorer
import logging

logger = logging.getLogger("[Supply API]")


def supply_error_handler(request: Request, exc: SupplyError) -> PlainTextResponse:
    logger.error(f"{request.url.path} failed: {exc}")
    return PlainTextResponse(str(exc), status_code=500)


def create_app(settings: SupplySettings, explorer: Optional[TokenExplorer] = None) -> FastAPI:

    app = FastAPI(redirect_slashes=False)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.explorer = explorer if explorer is not None else create_explorer(settings)

    app.add_exception_handler(SupplyError, supply_error_handler)

    app.include_router(supply.router)

    return app
