"""Command line interface.

Usage:
    multipass hash SECRET
    multipass check store.yaml members --password partner-door
    multipass validate store.yaml
"""

from __future__ import annotations

import logging
import sys

import click

from multipass._config import ConfigParseError, load_store
from multipass._gate import PasswordGate
from multipass._matcher import Matched, match
from multipass._proof import PortableHashVerifier, cookie_hash_for, cookie_name, extract_proof
from multipass._providers import DEFAULT_EXTRAS_FIELD, FieldExtrasProvider
from multipass._store import ResourceStore
from multipass._validation import validate_extras


def _load(path: str) -> ResourceStore:
    try:
        return load_store(path)
    except ConfigParseError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log gate decisions to stderr.")
def cli(verbose: bool) -> None:
    """Check submitted passwords against a resource's extra passwords."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.command("hash")
@click.argument("secret")
def hash_cmd(secret: str) -> None:
    """Print the proof token a browser would hold after submitting SECRET."""
    click.echo(PortableHashVerifier().hash(secret))


@cli.command()
@click.argument("store", type=click.Path(exists=True, dir_okay=False))
@click.argument("resource_id")
@click.option("--proof", help="Proof token (portable hash) from the cookie.")
@click.option("--password", help="Plain password; hashed before checking.")
@click.option(
    "--site-url",
    envvar="MULTIPASS_SITE_URL",
    default="",
    show_default=True,
    help="Site URL the cookie name is derived from.",
)
@click.option("--field", default=DEFAULT_EXTRAS_FIELD, show_default=True)
def check(
    store: str,
    resource_id: str,
    proof: str | None,
    password: str | None,
    site_url: str,
    field: str,
) -> None:
    """Report whether a submission unlocks RESOURCE_ID.

    Exits 0 when unlocked, 1 when locked.
    """
    if (proof is None) == (password is None):
        raise click.UsageError("exactly one of --proof or --password is required")

    verifier = PortableHashVerifier()
    if password is not None:
        proof = verifier.hash(password)

    resource_store = _load(store)
    record = resource_store.get(resource_id)
    if record is None:
        raise click.ClickException(f"unknown resource {resource_id!r}")

    cookie_hash = cookie_hash_for(site_url)
    cookies = {cookie_name(cookie_hash): proof}
    gate = PasswordGate(
        resource_store,
        provider=FieldExtrasProvider(field),
        verifier=verifier,
        cookie_hash=cookie_hash,
    )

    token = extract_proof(cookies, cookie_hash)
    if token is None:
        click.echo("no match (unrecognized proof token)")
    else:
        result = match(gate.resource_for(record), token, verifier)
        if isinstance(result, Matched):
            click.echo(f"matched: {result.label or f'#{result.index}'}")
        else:
            click.echo("no match")

    unlocked = gate.unlock(resource_id, cookies)
    click.echo("unlocked" if unlocked else "locked")
    sys.exit(0 if unlocked else 1)


@cli.command()
@click.argument("store", type=click.Path(exists=True, dir_okay=False))
@click.option("--field", default=DEFAULT_EXTRAS_FIELD, show_default=True)
def validate(store: str, field: str) -> None:
    """List extra-password problems for every resource in STORE."""
    provider = FieldExtrasProvider(field)
    total = 0
    for record in _load(store):
        for issue in validate_extras(provider.extras(record), resource_id=record.id):
            click.echo(f"{record.id}: {issue}")
            total += 1
        if not record.password and provider.extras(record):
            click.echo(f"{record.id}: extra passwords are ignored without a password")
            total += 1

    if total:
        click.echo(f"{total} issue(s) found", err=True)
        sys.exit(1)
    click.echo("ok")


def main() -> None:
    cli()
