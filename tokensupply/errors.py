class SupplyError(Exception):
    # Base for every failure of a supply lookup
    # Surfaced to API clients as HTTP 500
    pass


class NetworkError(SupplyError):
    pass


class DecodeError(SupplyError):
    pass


class UpstreamError(SupplyError):

    def __init__(self, message: str) -> None:
        # message is the explorer's own message field, kept verbatim
        super().__init__(f"error from Etherscan: {message}")
        self.message = message


class InvalidValueError(SupplyError):
    pass


class ConfigurationError(Exception):
    # Raised only while loading settings, before the server starts
    pass
