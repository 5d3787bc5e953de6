from tokensupply.settings import SupplySettings
from .token_explorer import TokenExplorer, ExplorerResponse
from .etherscan import EtherscanExplorer


def create_explorer(settings: SupplySettings) -> TokenExplorer:
    return EtherscanExplorer(settings.etherscan_api_url, settings.explorer_timeout)
