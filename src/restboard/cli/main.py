"""Restboard CLI — serve the API and talk to a running instance.

Usage:
    restboard serve --port 3000                 # Run the API with uvicorn
    restboard users                             # List users
    restboard messages                          # List messages
    restboard post "Hi again, World"            # Get a session token → create a message
    restboard edit <id> "new text"              # Replace a message's text
    restboard delete <id>                       # Delete a message
    restboard token                             # Print a fresh session token
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import json
import os
import sys
from typing import Optional

import click
import httpx

from restboard import __version__

# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

DEFAULT_API_URL = "http://localhost:3000"


def _api_url() -> str:
    return os.environ.get("RESTBOARD_API_URL", DEFAULT_API_URL).rstrip("/")


def _client() -> httpx.AsyncClient:
    """Build an async HTTP client pointed at the Restboard API."""
    return httpx.AsyncClient(base_url=_api_url(), timeout=30.0)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _run(coro):
    """Run an async coroutine from synchronous Click handler.

    Handles nested event loops (e.g. when invoked via Click CliRunner
    inside an existing async context like tests) by offloading to a thread.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)
    else:
        with concurrent.futures.ThreadPoolExecutor(max_workers=1) as pool:
            return pool.submit(asyncio.run, coro).result()


def _check(r: httpx.Response) -> None:
    """Exit with the API's error detail on a non-2xx response."""
    if r.is_success:
        return
    try:
        detail = r.json().get("detail", r.text)
    except ValueError:
        detail = r.text
    click.secho(f"Error {r.status_code}: {detail}", fg="red", err=True)
    sys.exit(1)


def _pretty_json(data: dict | list) -> str:
    return json.dumps(data, indent=2, default=str)


def _print_message(m: dict) -> None:
    click.echo(f"  {m['id']:36s}  user={m['userId']:4s}  {m['text']}")


async def _session_token(c: httpx.AsyncClient) -> str:
    r = await c.get("/session")
    _check(r)
    return r.json()["token"]


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(version=__version__, prog_name="restboard")
def main():
    """Restboard — users and messages over REST."""


# ---------------------------------------------------------------------------
# restboard serve
# ---------------------------------------------------------------------------


@main.command()
@click.option("--host", help="Bind address (default: RESTBOARD_HOST or 0.0.0.0)")
@click.option("--port", "-p", type=int, help="Port (default: RESTBOARD_PORT or 3000)")
@click.option("--reload", is_flag=True, help="Restart on code changes")
def serve(host: Optional[str], port: Optional[int], reload: bool):
    """Run the API server."""
    import uvicorn

    from restboard.config import settings

    uvicorn.run(
        "restboard.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
    )


# ---------------------------------------------------------------------------
# restboard users
# ---------------------------------------------------------------------------


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Print raw JSON")
def users(as_json: bool):
    """List users."""
    _run(_users_impl(as_json))


async def _users_impl(as_json: bool):
    async with _client() as c:
        r = await c.get("/users")
        _check(r)
        data = r.json()

    if as_json:
        click.echo(_pretty_json(data))
        return

    click.secho(f"Users ({len(data)}):", bold=True)
    for u in data:
        click.echo(f"  {u['id']:4s}  {u['username']}")


# ---------------------------------------------------------------------------
# restboard messages
# ---------------------------------------------------------------------------


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Print raw JSON")
def messages(as_json: bool):
    """List messages."""
    _run(_messages_impl(as_json))


async def _messages_impl(as_json: bool):
    async with _client() as c:
        r = await c.get("/messages")
        _check(r)
        data = r.json()

    if as_json:
        click.echo(_pretty_json(data))
        return

    if not data:
        click.echo("No messages.")
        return

    click.secho(f"Messages ({len(data)}):", bold=True)
    for m in data:
        _print_message(m)


# ---------------------------------------------------------------------------
# restboard post / edit / delete
# ---------------------------------------------------------------------------


@main.command()
@click.argument("text")
def post(text: str):
    """Create a message as the current session user.

    Fetches a fresh session token first, since tokens only live for
    a few seconds.
    """
    _run(_post_impl(text))


async def _post_impl(text: str):
    async with _client() as c:
        token = await _session_token(c)
        r = await c.post(
            "/messages",
            json={"text": text},
            headers={"Authorization": f"Bearer {token}"},
        )
        _check(r)
        message = r.json()

    click.secho("Message created", fg="green")
    _print_message(message)


@main.command()
@click.argument("message_id")
@click.argument("text")
def edit(message_id: str, text: str):
    """Replace the text of a message."""
    _run(_edit_impl(message_id, text))


async def _edit_impl(message_id: str, text: str):
    async with _client() as c:
        token = await _session_token(c)
        r = await c.put(
            f"/messages/{message_id}",
            json={"text": text},
            headers={"Authorization": f"Bearer {token}"},
        )
        _check(r)
        message = r.json()

    click.secho("Message updated", fg="green")
    _print_message(message)


@main.command()
@click.argument("message_id")
def delete(message_id: str):
    """Delete a message."""
    _run(_delete_impl(message_id))


async def _delete_impl(message_id: str):
    async with _client() as c:
        token = await _session_token(c)
        r = await c.delete(
            f"/messages/{message_id}",
            headers={"Authorization": f"Bearer {token}"},
        )
        _check(r)
        message = r.json()

    click.secho("Message deleted", fg="yellow")
    _print_message(message)


# ---------------------------------------------------------------------------
# restboard token
# ---------------------------------------------------------------------------


@main.command()
def token():
    """Print a fresh session token (valid for a few seconds)."""
    _run(_token_impl())


async def _token_impl():
    async with _client() as c:
        click.echo(await _session_token(c))


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    main()
