"""Command line entry point.

Usage:
  proxy-scanner mainnet 0x1111111111111111111111111111111111111111
  proxy-scanner --json base 0x4200000000000000000000000000000000000010
  python -m proxy_scanner --block 19000000 mainnet <address>
"""

from __future__ import annotations

import asyncio
import json
import sys
from typing import Any

import click
from loguru import logger

from proxy_scanner.core.config import load_env_file
from proxy_scanner.core.constants.chains import SUPPORTED_CHAINS, Chain
from proxy_scanner.core.errors import ProxyScannerError
from proxy_scanner.core.utils.address import InvalidAddressError, parse_proxy_address
from proxy_scanner.core.utils.proxy import ProxyInfo, resolve_proxy

SEPARATOR = "=" * 72
BLOCK_TAGS = ("latest", "earliest", "pending", "safe", "finalized")


class ProxyAddressType(click.ParamType):
    name = "address"

    def convert(self, value: Any, param, ctx) -> str:  # noqa: ANN001
        try:
            return parse_proxy_address(value)
        except InvalidAddressError as exc:
            self.fail(str(exc), param, ctx)


class BlockIdentifierType(click.ParamType):
    name = "block"

    def convert(self, value: Any, param, ctx) -> int | str:  # noqa: ANN001
        if isinstance(value, int):
            return value
        text = str(value).strip().lower()
        if text in BLOCK_TAGS:
            return text
        try:
            number = int(text, 0)
        except ValueError:
            number = -1
        if number < 0:
            self.fail(
                f"{value!r} is not a block number or one of: {', '.join(BLOCK_TAGS)}",
                param,
                ctx,
            )
        return number


def _echo_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2, default=str))


def format_proxy_info(info: ProxyInfo) -> str:
    lines = [f"EIP-1967 Proxy Scanner - {info.proxy_address}", SEPARATOR]
    if info.beacon_fallback_used:
        lines.append(f"Proxy Beacon: {info.beacon}")
    else:
        lines.append(f"Implementation: {info.implementation}")
    lines.append(f"Proxy Admin: {info.admin}")
    lines.append(SEPARATOR)
    return "\n".join(lines)


@click.command(
    name="proxy-scanner",
    help="Resolve the admin and implementation (or beacon) of an EIP-1967 proxy.",
)
@click.argument(
    "network",
    type=click.Choice([c.value for c in SUPPORTED_CHAINS], case_sensitive=True),
)
@click.argument("address", type=ProxyAddressType())
@click.option(
    "--block",
    "block_identifier",
    type=BlockIdentifierType(),
    default="latest",
    show_default=True,
    help="Block number or tag to read storage at.",
)
@click.option(
    "--json", "as_json", is_flag=True, default=False, help="Print the result as JSON."
)
@click.option(
    "--env-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Env file with <NETWORK>_WSS endpoints (default: nearest .env).",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
)
def scan_cmd(
    network: str,
    address: str,
    block_identifier: int | str,
    as_json: bool,
    env_file: str | None,
    log_level: str,
) -> None:
    logger.remove()
    logger.add(sys.stderr, level=str(log_level).upper())

    try:
        load_env_file(env_file)
        info = asyncio.run(
            resolve_proxy(Chain(network), address, block_identifier=block_identifier)
        )
    except ProxyScannerError as exc:
        logger.debug(f"Scan of {address} on {network} failed: {exc!r}")
        raise click.ClickException(str(exc)) from exc

    if as_json:
        _echo_json({"network": network, "block": block_identifier, **info.to_dict()})
    else:
        click.echo(format_proxy_info(info))


def main() -> None:
    scan_cmd()


if __name__ == "__main__":
    main()
