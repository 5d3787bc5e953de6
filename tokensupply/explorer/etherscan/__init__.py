from .etherscan_explorer import EtherscanExplorer
