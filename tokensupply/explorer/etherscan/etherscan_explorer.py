from ..token_explorer import TokenExplorer, ExplorerResponse
from tokensupply.errors import NetworkError, DecodeError, UpstreamError, InvalidValueError
from pydantic import ValidationError
from typing import Optional
import logging
import re
import requests

_digits = re.compile(r"[0-9]+")


class EtherscanExplorer(TokenExplorer):

    def __init__(self, api_url: str, timeout: Optional[float] = None) -> None:
        super().__init__()

        self.logger = logging.getLogger("[Etherscan]")

        self.api_url = api_url
        self.timeout = timeout


    def fetch_total_supply(self, contract_address: str, api_key: str) -> int:

        try:
            resp = requests.get(
                self.api_url,
                params={
                    "module": "stats",
                    "action": "tokensupply",
                    "contractaddress": contract_address,
                    "apikey": api_key
                },
                timeout=self.timeout
            )
        except requests.RequestException as e:
            self.logger.error(f"Token supply request failed: {e}")
            raise NetworkError(f"error fetching total supply: {e}") from e

        try:
            if resp.status_code != 200:
                self.logger.warning(f"[{resp.status_code}] {resp.text}")

            explorer_resp = self.decode_response(resp)
        finally:
            resp.close()

        if explorer_resp.status != "1":
            self.logger.error(f"Etherscan returned status {explorer_resp.status!r}: {explorer_resp.message}")
            raise UpstreamError(explorer_resp.message)

        return self.parse_supply(explorer_resp.result)


    def decode_response(self, resp: requests.Response) -> ExplorerResponse:
        try:
            return ExplorerResponse.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            self.logger.error(f"Invalid token supply response: {e}")
            raise DecodeError(f"error decoding total supply response: {e}") from e


    def parse_supply(self, result: str) -> int:
        # Base 10 digits only, no sign or whitespace
        if _digits.fullmatch(result) is None:
            self.logger.error(f"Invalid total supply value: {result!r}")
            raise InvalidValueError("invalid total supply value")

        try:
            return int(result)
        except ValueError as e:
            # Over the interpreter's int string conversion limit
            raise InvalidValueError("invalid total supply value") from e
