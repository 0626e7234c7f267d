from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from loguru import logger
from web3 import AsyncWeb3
from web3.types import BlockIdentifier

from proxy_scanner.core.constants.chains import Chain
from proxy_scanner.core.constants.eip1967 import (
    ADMIN_SLOT,
    BEACON_SLOT,
    IMPLEMENTATION_SLOT,
    SLOT_NAMES,
)
from proxy_scanner.core.errors import StorageReadError
from proxy_scanner.core.utils import web3 as web3_utils
from proxy_scanner.core.utils.address import (
    address_from_storage,
    is_zero_address,
    parse_proxy_address,
)


@dataclass(frozen=True)
class ProxyInfo:
    proxy_address: str
    admin: str
    implementation: str
    beacon_fallback_used: bool
    beacon: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


async def _read_slot_address(
    w3: AsyncWeb3,
    *,
    address: str,
    slot: str,
    block_identifier: BlockIdentifier,
) -> str:
    slot_name = SLOT_NAMES.get(slot, slot)
    logger.debug(f"Reading {slot_name} slot {slot} of {address} at {block_identifier}")
    try:
        storage = await w3.eth.get_storage_at(address, slot, block_identifier)
    except Exception as exc:
        raise StorageReadError(
            slot_name, address, f"Failed to read {slot_name} slot of {address}: {exc}"
        ) from exc

    try:
        return address_from_storage(storage)
    except ValueError as exc:
        raise StorageReadError(
            slot_name,
            address,
            f"Malformed {slot_name} slot value for {address}: {exc}",
        ) from exc


async def resolve_proxy_with_web3(
    w3: AsyncWeb3,
    proxy_address: str,
    *,
    block_identifier: BlockIdentifier = "latest",
) -> ProxyInfo:
    """Read the EIP-1967 admin, implementation and (if needed) beacon slots.

    Reads are issued one at a time: admin, then implementation, then beacon
    only when the implementation slot holds the zero address. Any failed read
    raises ``StorageReadError``; there is no partial result.
    """
    proxy_addr = parse_proxy_address(proxy_address)

    admin = await _read_slot_address(
        w3, address=proxy_addr, slot=ADMIN_SLOT, block_identifier=block_identifier
    )
    implementation = await _read_slot_address(
        w3,
        address=proxy_addr,
        slot=IMPLEMENTATION_SLOT,
        block_identifier=block_identifier,
    )

    if not is_zero_address(implementation):
        return ProxyInfo(
            proxy_address=proxy_addr,
            admin=admin,
            implementation=implementation,
            beacon_fallback_used=False,
        )

    logger.debug(f"Implementation slot of {proxy_addr} is empty; reading beacon slot")
    beacon = await _read_slot_address(
        w3, address=proxy_addr, slot=BEACON_SLOT, block_identifier=block_identifier
    )
    return ProxyInfo(
        proxy_address=proxy_addr,
        admin=admin,
        implementation=implementation,
        beacon_fallback_used=True,
        beacon=beacon,
    )


async def resolve_proxy(
    chain: Chain | str,
    proxy_address: str,
    *,
    block_identifier: BlockIdentifier = "latest",
) -> ProxyInfo:
    proxy_addr = parse_proxy_address(proxy_address)
    async with web3_utils.web3_from_chain(chain) as w3:
        return await resolve_proxy_with_web3(
            w3, proxy_addr, block_identifier=block_identifier
        )
