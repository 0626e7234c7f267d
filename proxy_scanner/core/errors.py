from __future__ import annotations


class ProxyScannerError(Exception):
    """Base class for failures that abort a scan."""


class ConfigurationError(ProxyScannerError):
    pass


class ConnectionFailedError(ProxyScannerError):
    def __init__(self, endpoint: str, message: str | None = None):
        self.endpoint = endpoint
        super().__init__(message or f"Could not connect to node at {endpoint}")


class StorageReadError(ProxyScannerError):
    def __init__(
        self,
        slot_name: str,
        proxy_address: str,
        message: str | None = None,
    ):
        self.slot_name = slot_name
        self.proxy_address = proxy_address
        super().__init__(
            message or f"Failed to read {slot_name} slot of {proxy_address}"
        )
