"""Typer-based command line interface for keyticket."""
from __future__ import annotations

import binascii
from pathlib import Path
from typing import Optional

import typer

from .challenge import generate_random_challenge
from .config import AppConfig, load_config
from .core.exceptions import ConfigError, MalformedTicketError
from .keys import derive_keypair
from .logging import configure_logging
from .models import TicketInfo
from .services.ticket_builder import create_identity_ticket
from .services.ticket_verifier import verify_identity_ticket
from .storage.ticket import Ticket
from .utils.b64 import b64d, b64e, ticket_from_text, ticket_to_text
from .utils.config import PROTOCOL_VERSION

app = typer.Typer(help="Password-derived identity tickets")


@app.callback()
def main(ctx: typer.Context, config: Optional[Path] = typer.Option(None, "--config", metavar="PATH")) -> None:
    try:
        ctx.obj = load_config(config)
    except ConfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)
    configure_logging(ctx.obj.logging.normalized_level())


def _config(ctx: typer.Context) -> AppConfig:
    return ctx.obj


def _encoding(ctx: typer.Context, override: Optional[str]) -> str:
    encoding = (override or _config(ctx).output.encoding).lower()
    if encoding not in ("base64", "hex"):
        typer.echo(f"Unsupported encoding: {encoding}", err=True)
        raise typer.Exit(code=2)
    return encoding


def _encode(data: bytes, encoding: str) -> str:
    return data.hex() if encoding == "hex" else b64e(data)


def _decode(text: str, encoding: str) -> bytes:
    try:
        return bytes.fromhex(text) if encoding == "hex" else b64d(text)
    except (binascii.Error, ValueError) as exc:
        typer.echo(f"Input is not valid {encoding}: {exc}", err=True)
        raise typer.Exit(code=2)


@app.command()
def challenge(
    ctx: typer.Context,
    length: Optional[int] = typer.Option(None, "--length", min=1, help="Challenge size in bytes"),
    encoding: Optional[str] = typer.Option(None, "--encoding", help="Output encoding: base64|hex"),
) -> None:
    """Print a fresh random challenge"""
    size = length or _config(ctx).challenge.length
    typer.echo(_encode(generate_random_challenge(size), _encoding(ctx, encoding)))


@app.command()
def keygen(
    name: str = typer.Argument(...),
    password: str = typer.Option(..., "--password", prompt=True, hide_input=True),
) -> None:
    """Print the public key derived from NAME and the password"""
    typer.echo(derive_keypair(name, password).public_key.hex())


@app.command()
def create(
    ctx: typer.Context,
    name: str = typer.Argument(...),
    challenge_text: str = typer.Option(..., "--challenge", help="Challenge issued by the verifier"),
    password: str = typer.Option(..., "--password", prompt=True, hide_input=True),
    encoding: Optional[str] = typer.Option(None, "--encoding", help="Challenge encoding: base64|hex"),
) -> None:
    """Answer a challenge and print the identity ticket"""
    question = _decode(challenge_text, _encoding(ctx, encoding))
    typer.echo(ticket_to_text(create_identity_ticket(name, password, question)))


@app.command()
def verify(
    ctx: typer.Context,
    ticket_text: str = typer.Argument(..., metavar="TICKET"),
    challenge_text: str = typer.Option(..., "--challenge", help="Challenge the ticket must answer"),
    encoding: Optional[str] = typer.Option(None, "--encoding", help="Challenge encoding: base64|hex"),
) -> None:
    """Check a ticket against its challenge; exit status 1 when invalid"""
    question = _decode(challenge_text, _encoding(ctx, encoding))
    try:
        raw = ticket_from_text(ticket_text)
    except (binascii.Error, ValueError):
        raw = b""
    if verify_identity_ticket(raw, question):
        typer.echo("valid")
        return
    typer.echo("invalid")
    raise typer.Exit(code=1)


@app.command()
def inspect(ticket_text: str = typer.Argument(..., metavar="TICKET")) -> None:
    """Show the decoded fields of a ticket without verifying it"""
    try:
        ticket = Ticket.from_bytes(ticket_from_text(ticket_text))
    except (binascii.Error, ValueError, MalformedTicketError) as exc:
        typer.echo(f"Malformed ticket: {exc}", err=True)
        raise typer.Exit(code=2)
    typer.echo(TicketInfo.from_ticket(ticket).model_dump_json(indent=2))


@app.command()
def version() -> None:
    from .version import __version__

    typer.echo(f"keyticket {__version__} (protocol {PROTOCOL_VERSION})")


if __name__ == "__main__":  # pragma: no cover
    app()
