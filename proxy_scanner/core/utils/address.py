from __future__ import annotations

from eth_utils import add_0x_prefix, is_hex_address, to_checksum_address

from proxy_scanner.core.constants.eip1967 import (
    ADDRESS_SIZE,
    STORAGE_WORD_SIZE,
    ZERO_ADDRESS,
)


class InvalidAddressError(ValueError):
    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Not a 20-byte hex address: {value!r}")


def parse_proxy_address(value: str) -> str:
    """Validate a hex address (``0x`` optional, any case) and checksum it."""
    if not isinstance(value, str):
        raise InvalidAddressError(value)
    candidate = add_0x_prefix(value.strip())
    if not is_hex_address(candidate):
        raise InvalidAddressError(value)
    return to_checksum_address(candidate)


def address_from_storage(value: bytes) -> str:
    """Decode the address held in the low 20 bytes of a storage word.

    The upper 12 bytes are dropped without being checked, so a word with
    non-zero high bytes still yields an address.
    """
    raw = bytes(value)
    if len(raw) != STORAGE_WORD_SIZE:
        raise ValueError(
            f"Expected a {STORAGE_WORD_SIZE}-byte storage word, got {len(raw)} bytes"
        )
    return to_checksum_address(raw[-ADDRESS_SIZE:])


def is_zero_address(address: str) -> bool:
    return int(address, 16) == int(ZERO_ADDRESS, 16)
