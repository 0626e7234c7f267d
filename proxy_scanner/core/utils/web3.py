from contextlib import asynccontextmanager
from urllib.parse import urlparse

from loguru import logger
from web3 import AsyncHTTPProvider, AsyncWeb3, WebSocketProvider
from web3.middleware import ExtraDataToPOAMiddleware

from proxy_scanner.core.config import get_endpoint_url
from proxy_scanner.core.constants.chains import (
    POA_MIDDLEWARE_CHAINS,
    Chain,
    to_chain,
)
from proxy_scanner.core.errors import ConfigurationError, ConnectionFailedError

_WEBSOCKET_SCHEMES = {"ws", "wss"}
_HTTP_SCHEMES = {"http", "https"}


def _endpoint_scheme(endpoint: str) -> str:
    return urlparse(endpoint).scheme.lower()


def _is_websocket_endpoint(endpoint: str) -> bool:
    return _endpoint_scheme(endpoint) in _WEBSOCKET_SCHEMES


def _redact_endpoint(endpoint: str) -> str:
    # Node URLs usually embed an API key in the path or userinfo; keep only
    # scheme, host and port.
    parsed = urlparse(endpoint)
    host_port = parsed.netloc.rpartition("@")[2]
    return f"{parsed.scheme}://{host_port}"


def get_web3(endpoint: str, chain: Chain | str) -> AsyncWeb3:
    chain = to_chain(chain)
    scheme = _endpoint_scheme(endpoint)
    if scheme in _WEBSOCKET_SCHEMES:
        provider = WebSocketProvider(endpoint)
    elif scheme in _HTTP_SCHEMES:
        provider = AsyncHTTPProvider(endpoint)
    else:
        raise ConfigurationError(
            f"Unsupported endpoint scheme {scheme!r} for {chain}; "
            "expected ws(s):// or http(s)://"
        )
    web3 = AsyncWeb3(provider)
    if chain in POA_MIDDLEWARE_CHAINS:
        web3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)
    return web3


@asynccontextmanager
async def web3_from_chain(chain: Chain | str):
    chain = to_chain(chain)
    endpoint = get_endpoint_url(chain)
    web3 = get_web3(endpoint, chain)
    display = _redact_endpoint(endpoint)

    if _is_websocket_endpoint(endpoint):
        try:
            await web3.provider.connect()
        except Exception as exc:
            # web3's connect errors echo the full endpoint URI; report only the
            # exception type and keep the original on __cause__.
            raise ConnectionFailedError(
                display,
                f"Could not connect to {chain} node at {display} "
                f"({type(exc).__name__})",
            ) from exc
    logger.debug(f"Opened {chain} connection to {display}")

    try:
        yield web3
    finally:
        await web3.provider.disconnect()
        logger.debug(f"Closed {chain} connection to {display}")
