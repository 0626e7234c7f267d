from proxy_scanner.core.constants.chains import Chain, endpoint_env_var_for
from proxy_scanner.core.errors import (
    ConfigurationError,
    ConnectionFailedError,
    ProxyScannerError,
    StorageReadError,
)
from proxy_scanner.core.utils.proxy import (
    ProxyInfo,
    resolve_proxy,
    resolve_proxy_with_web3,
)

__all__ = [
    "Chain",
    "ConfigurationError",
    "ConnectionFailedError",
    "ProxyInfo",
    "ProxyScannerError",
    "StorageReadError",
    "endpoint_env_var_for",
    "resolve_proxy",
    "resolve_proxy_with_web3",
]
