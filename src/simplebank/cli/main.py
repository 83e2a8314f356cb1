"""SimpleBank CLI — run the server, generate token keys.

Usage:
    simplebank serve                       # Start the API (uvicorn)
    simplebank gen-key --maker aead        # Print a 32-byte key for the AEAD maker
    simplebank gen-key --maker jwt         # Print a 64-byte key for the JWT maker
"""

import secrets

import click


@click.group()
def cli():
    """SimpleBank — accounts and transfers behind bearer tokens."""


@cli.command()
@click.option("--host", default=None, help="Bind address (default: SIMPLEBANK_HOST)")
@click.option("--port", default=None, type=int, help="Port (default: SIMPLEBANK_PORT)")
@click.option("--reload", is_flag=True, help="Reload on code changes")
def serve(host, port, reload):
    """Run the API server."""
    import uvicorn

    from simplebank.config import settings

    uvicorn.run(
        "simplebank.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
    )


@cli.command("gen-key")
@click.option(
    "--maker",
    type=click.Choice(["jwt", "aead"]),
    default="aead",
    show_default=True,
    help="Token maker the key is for",
)
def gen_key(maker):
    """Print a random symmetric key suitable for the chosen maker.

    AEAD needs exactly 32 bytes; JWT needs at least 32, so it gets 64.
    """
    key = secrets.token_hex(16) if maker == "aead" else secrets.token_hex(32)
    click.echo(key)


if __name__ == "__main__":
    cli()
