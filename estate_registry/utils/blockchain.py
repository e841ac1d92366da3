import itertools
import logging

from web3 import Web3

logger = logging.getLogger(__name__)


class LocalHeight:
    """In-process height counter; every read is one block past the last."""

    def __init__(self, start: int = 1):
        self._blocks = itertools.count(start)

    def current(self) -> int:
        return next(self._blocks)


class ChainHeight:
    """Reads the latest block number from a web3 provider."""

    def __init__(self, w3: Web3):
        self.w3 = w3

    def current(self) -> int:
        return int(self.w3.eth.block_number)


def build_height_source(settings):
    if settings.NETWORK == "local":
        return LocalHeight()
    if not settings.RPC_URL:
        raise RuntimeError(f"No RPC URL found for {settings.NETWORK}. Set RPC_URL in .env.")
    logger.info(f"Using {settings.NETWORK} block height from {settings.RPC_URL}")
    return ChainHeight(Web3(Web3.HTTPProvider(settings.RPC_URL)))
