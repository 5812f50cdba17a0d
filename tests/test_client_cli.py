"""Test the ``firefly-garden`` command line client."""

from fastapi.testclient import TestClient
import httpx
import pytest

from firefly_garden import CounterClient, GardenServer
from firefly_garden.client import cli
from firefly_garden.client.cli import parse_args, visit_from_cli


@pytest.fixture
def server():
    return GardenServer()


@pytest.fixture
def counter_client(server):
    with TestClient(server.app) as client:
        yield CounterClient(client=client)


def test_parse_args_defaults():
    args = parse_args([])
    assert args.action == "show"
    assert args.url == "http://localhost:5179"
    assert args.html is None


def test_parse_args_rejects_unknown_action():
    with pytest.raises(SystemExit):
        parse_args(["explode"])


def test_show(counter_client, capsys):
    garden = visit_from_cli([], counter_client=counter_client)
    assert garden.count == 0
    assert capsys.readouterr().out.strip() == "Fireflies: 0 (Ready)"


def test_release_and_reset(server, counter_client, capsys):
    visit_from_cli(["release"], counter_client=counter_client)
    visit_from_cli(["release"], counter_client=counter_client)
    assert server.counter.count == 2
    assert capsys.readouterr().out.splitlines()[-1] == "Fireflies: 2 (Ready)"

    garden = visit_from_cli(["reset"], counter_client=counter_client)
    assert garden.count == 0
    assert server.counter.count == 0


def test_html_output(counter_client, tmp_path):
    path = tmp_path / "garden.html"
    visit_from_cli(["release", "--html", str(path)], counter_client=counter_client)
    assert path.read_text(encoding="utf-8").count('class="firefly"') == 1


def test_main_exits_when_unreachable(monkeypatch, capsys):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    unreachable = CounterClient(
        client=httpx.Client(
            base_url="http://localhost:5179", transport=httpx.MockTransport(handler)
        )
    )
    monkeypatch.setattr(cli, "CounterClient", lambda url: unreachable)
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["release"])
    assert excinfo.value.code == 1
    assert "Fireflies: 0 (Backend not reachable)" in capsys.readouterr().out
