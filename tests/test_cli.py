"""CLI tests.

Learn: the CLI's HTTP client is pointed at an in-process app through
httpx's ASGITransport, so commands run end-to-end against a real
(seeded) store without a server.
"""

import pytest
from click.testing import CliRunner
from httpx import ASGITransport, AsyncClient

from restboard import __version__
from restboard.cli import main as cli
from restboard.main import create_app


@pytest.fixture()
def runner(store, monkeypatch):
    app = create_app(store=store)

    def client():
        return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")

    monkeypatch.setattr(cli, "_client", client)
    return CliRunner()


def test_users(runner):
    result = runner.invoke(cli.main, ["users"])
    assert result.exit_code == 0
    assert "Users (2):" in result.output
    assert "Robin Wieruch" in result.output
    assert "Dave Davids" in result.output


def test_messages_json(runner):
    result = runner.invoke(cli.main, ["messages", "--json"])
    assert result.exit_code == 0
    assert '"text": "Hello World"' in result.output


def test_post_creates_message(runner, store):
    result = runner.invoke(cli.main, ["post", "Hi again, World"])
    assert result.exit_code == 0, result.output
    assert "Message created" in result.output

    texts = [m.text for m in store.list("messages")]
    assert texts[-1] == "Hi again, World"
    assert store.list("messages")[-1].user_id == "1"


def test_edit_message(runner, store):
    result = runner.invoke(cli.main, ["edit", "2", "Bye World"])
    assert result.exit_code == 0, result.output
    assert store.get("messages", "2").text == "Bye World"


def test_delete_message(runner, store):
    result = runner.invoke(cli.main, ["delete", "1"])
    assert result.exit_code == 0, result.output
    assert "Message deleted" in result.output
    assert store.count("messages") == 1


def test_delete_missing_message_fails(runner, store):
    result = runner.invoke(cli.main, ["delete", "nope"])
    assert result.exit_code == 1
    assert "Error 404" in result.output
    assert store.count("messages") == 2


def test_token(runner):
    result = runner.invoke(cli.main, ["token"])
    assert result.exit_code == 0
    # server log lines share stdout; the token is printed last
    token = result.output.strip().splitlines()[-1]
    assert token.count(".") == 2  # header.payload.signature


def test_api_url_from_env(monkeypatch):
    monkeypatch.setenv("RESTBOARD_API_URL", "http://api.example.com/")
    assert cli._api_url() == "http://api.example.com"


def test_version(runner):
    result = runner.invoke(cli.main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
