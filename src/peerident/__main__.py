from __future__ import annotations
import logging
import sys
from typing import BinaryIO, TextIO
from urllib.parse import unquote_to_bytes
import click
from click_loglevel import LogLevel
import colorlog
from .clients import CLIENTS, LONG_PREFIX_CLIENTS
from .consts import DEFAULT_BUFFER_SIZE
from .core import client_for_id
from .handshake import iter_handshakes
from .util import TRACE, escape_byte, log, yield_lines


def parse_peer_id(s: str, is_hex: bool) -> bytes:
    if is_hex:
        try:
            return bytes.fromhex(s)
        except ValueError:
            raise ValueError(f"Invalid hex peer ID: {s!r}")
    else:
        # Accept the same %XX escapes that unrecognized IDs are rendered with
        return unquote_to_bytes(s)


def show_peer_id(peer_id: bytes) -> str:
    return "".join(map(escape_byte, peer_id))


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-l",
    "--log-level",
    type=LogLevel(extra={"TRACE": TRACE}),
    default="INFO",
    help="Set logging level",
    show_default=True,
)
def main(log_level: int) -> None:
    """Identify BitTorrent clients from their peer IDs"""
    log.setLevel(log_level)
    colorlog.basicConfig(
        format="%(log_color)s%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        log_colors={
            "TRACE": "green",
            "DEBUG": "cyan",
            "INFO": "bold",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "bold_red",
        },
        level="INFO",
        stream=sys.stderr,
    )
    logging.addLevelName(TRACE, "TRACE")


@main.command()
@click.option("--hex", "is_hex", is_flag=True, help="Peer IDs are given in hex")
@click.option(
    "-c",
    "--capacity",
    type=click.IntRange(min=1),
    default=DEFAULT_BUFFER_SIZE,
    help="Maximum label size in bytes, including terminator",
    show_default=True,
)
@click.argument("peer_ids", nargs=-1, required=True)
def identify(peer_ids: tuple[str, ...], is_hex: bool, capacity: int) -> None:
    """Show the client name & version for each peer ID"""
    for s in peer_ids:
        try:
            peer_id = parse_peer_id(s, is_hex)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="PEER_IDS")
        click.echo(client_for_id(peer_id, capacity))


@main.command()
@click.option("--hex", "is_hex", is_flag=True, help="Peer IDs are given in hex")
@click.argument("peeridfile", type=click.File())
@click.pass_context
def batch(ctx: click.Context, peeridfile: TextIO, is_hex: bool) -> None:
    """Identify the clients for a file of peer IDs, one per line"""
    ok = True
    qty = 0
    with peeridfile:
        for line in yield_lines(peeridfile):
            try:
                peer_id = parse_peer_id(line, is_hex)
            except ValueError as e:
                log.error("%s", e)
                ok = False
            else:
                click.echo(f"{line}\t{client_for_id(peer_id)}")
                qty += 1
    log.debug("Identified %d peer IDs", qty)
    if not ok:
        ctx.exit(1)


@main.command()
@click.argument("capture", type=click.File("rb"), nargs=-1, required=True)
@click.pass_context
def handshake(ctx: click.Context, capture: tuple[BinaryIO, ...]) -> None:
    """Identify the clients that sent the given raw BitTorrent handshakes"""
    ok = True
    for fp in capture:
        with fp:
            blob = fp.read()
        try:
            for hs in iter_handshakes(blob):
                log.log(TRACE, "%s: read %s", fp.name, hs)
                click.echo(f"{show_peer_id(hs.peer_id)}\t{hs.client}")
        except ValueError as e:
            log.error("%s: %s", fp.name, e)
            ok = False
    if not ok:
        ctx.exit(1)


@main.command()
def clients() -> None:
    """List known peer ID prefixes"""
    for registry in (LONG_PREFIX_CLIENTS, CLIENTS):
        for rec in registry:
            click.echo(f"{rec.display_prefix}\t{rec.name}\t{rec.rule_name}")


if __name__ == "__main__":
    main()
