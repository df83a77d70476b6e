"""
Exchange gateway CLI - derive addresses and query backend nodes.
"""

from __future__ import annotations

import json
import sys

import typer
from loguru import logger

from exgateway.backends.skycoin import SkycoinBackend
from exgateway.config import get_settings
from exgateway.errors import GatewayError
from exgateway.wallet.keys import AddressDeriver, DeriverConfig

app = typer.Typer(
    name="exgateway",
    help="Multi-coin UTXO gateway",
    add_completion=False,
)


def setup_logging(level: str = "INFO") -> None:
    """Configure loguru logging."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )


def _backend(node: str | None) -> SkycoinBackend:
    settings = get_settings()
    return SkycoinBackend(
        node_addr=node or settings.skycoin_node_addr,
        deriver=AddressDeriver(settings.deriver_config()),
        timeout=settings.request_timeout,
    )


@app.command()
def addresses(
    seed: str = typer.Option(..., "--seed", "-s", envvar="EXGATEWAY_SEED", help="Wallet seed"),
    count: int = typer.Option(1, "--count", "-n", help="Number of addresses"),
    hide_secret_key: bool = typer.Option(
        False,
        "--hide-secret-key",
        envvar="EXGATEWAY_HIDE_SECRET_KEY",
        help="Omit secret keys from output",
    ),
    log_level: str = typer.Option("INFO", "--log-level", "-l"),
) -> None:
    """Generate deterministic addresses from a seed."""
    setup_logging(log_level)
    deriver = AddressDeriver(DeriverConfig(hide_secret_key=hide_secret_key))

    try:
        seed_digest, entries = deriver.derive(seed.encode("utf-8"), count)
    except GatewayError as e:
        logger.error(f"Address generation failed: {e}")
        raise typer.Exit(1) from e

    result = {
        "seed_digest": seed_digest,
        "addresses": [
            {"address": e.address, "public": e.public, "secret": e.secret} for e in entries
        ],
    }
    typer.echo(json.dumps(result, indent=2))


@app.command()
def utxos(
    addrs: list[str] = typer.Argument(..., help="Addresses to query"),
    node: str | None = typer.Option(None, "--node", envvar="EXGATEWAY_SKYCOIN_NODE_ADDR"),
    log_level: str = typer.Option("INFO", "--log-level", "-l"),
) -> None:
    """List unspent outputs owned by addresses."""
    setup_logging(log_level)

    with _backend(node) as backend:
        try:
            result = backend.get_utxos(addrs)
        except GatewayError as e:
            logger.error(f"UTXO query failed: {e}")
            raise typer.Exit(1) from e

    typer.echo(json.dumps([u.to_dict() for u in result], indent=2))


@app.command()
def output(
    output_hash: str = typer.Argument(..., metavar="HASH", help="Output hash (uxid)"),
    node: str | None = typer.Option(None, "--node", envvar="EXGATEWAY_SKYCOIN_NODE_ADDR"),
    log_level: str = typer.Option("INFO", "--log-level", "-l"),
) -> None:
    """Show a single output by hash."""
    setup_logging(log_level)

    with _backend(node) as backend:
        try:
            result = backend.get_output(output_hash)
        except GatewayError as e:
            logger.error(f"Output lookup failed: {e}")
            raise typer.Exit(1) from e

    typer.echo(result.model_dump_json(indent=2))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
