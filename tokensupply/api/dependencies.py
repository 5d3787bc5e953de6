from fastapi import Request
from tokensupply.settings import SupplySettings
from tokensupply.explorer import TokenExplorer


# Both are built once by create_app and shared read-only across requests

def get_settings(request: Request) -> SupplySettings:
    return request.app.state.settings


def get_explorer(request: Request) -> TokenExplorer:
    return request.app.state.explorer
