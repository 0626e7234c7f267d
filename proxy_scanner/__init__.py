__version__ = "0.1.0"

from proxy_scanner.core import (
    Chain,
    ProxyInfo,
    ProxyScannerError,
    resolve_proxy,
    resolve_proxy_with_web3,
)

__all__ = [
    "__version__",
    "Chain",
    "ProxyInfo",
    "ProxyScannerError",
    "resolve_proxy",
    "resolve_proxy_with_web3",
]
