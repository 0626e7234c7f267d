from __future__ import annotations

from enum import StrEnum


class Chain(StrEnum):
    MAINNET = "mainnet"
    POLYGON = "polygon"
    ZKSYNC = "zksync"
    ARBITRUM = "arbitrum"
    OPTIMISM = "optimism"
    BASE = "base"
    GNOSIS = "gnosis"


class UnsupportedChainError(ValueError):
    def __init__(self, chain: object):
        self.chain = chain
        supported = ", ".join(c.value for c in SUPPORTED_CHAINS)
        super().__init__(f"Unsupported chain {chain!r}; expected one of: {supported}")


SUPPORTED_CHAINS: list[Chain] = list(Chain)

CHAIN_ENDPOINT_ENV_VARS: dict[Chain, str] = {
    Chain.MAINNET: "MAINNET_WSS",
    Chain.POLYGON: "POLYGON_WSS",
    Chain.ZKSYNC: "ZKSYNC_WSS",
    Chain.ARBITRUM: "ARBITRUM_WSS",
    Chain.OPTIMISM: "OPTIMISM_WSS",
    Chain.BASE: "BASE_WSS",
    Chain.GNOSIS: "GNOSIS_WSS",
}

POA_MIDDLEWARE_CHAINS: set[Chain] = {
    Chain.POLYGON,
    Chain.GNOSIS,
}


def to_chain(value: Chain | str) -> Chain:
    if isinstance(value, Chain):
        return value
    try:
        return Chain(value)
    except ValueError as exc:
        raise UnsupportedChainError(value) from exc


def endpoint_env_var_for(chain: Chain | str) -> str:
    """Name of the environment variable holding the node endpoint for ``chain``."""
    return CHAIN_ENDPOINT_ENV_VARS[to_chain(chain)]
