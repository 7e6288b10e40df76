"""Tests for the tailblocks command line tool."""
from pathlib import Path

import httpx
import pytest

from tailblocks.client.cli import main


@pytest.fixture
def token_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "credentials.json"
    monkeypatch.setenv("TAILBLOCKS_API_URL", "http://api.test/api")
    monkeypatch.setenv("TAILBLOCKS_TOKEN_FILE", str(path))
    return path


@pytest.fixture
def run(backend, token_file: Path):
    def _run(*argv: str) -> int:
        return main(list(argv), transport=httpx.MockTransport(backend))

    return _run


def test_missing_api_url(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    monkeypatch.delenv("TAILBLOCKS_API_URL", raising=False)
    monkeypatch.chdir(Path(__file__).parent)

    assert main(["list"]) == 1
    assert "TAILBLOCKS_API_URL" in capsys.readouterr().err


def test_login_then_whoami(run, token_file: Path, capsys) -> None:
    assert run("login", "alice@x.com", "--password", "secret1") == 0
    assert "Logged in as alice" in capsys.readouterr().out
    assert token_file.exists()

    assert run("whoami") == 0
    assert "alice <alice@x.com>" in capsys.readouterr().out


def test_failed_login_prints_one_line_error(run, token_file: Path, capsys) -> None:
    assert run("login", "alice@x.com", "--password", "nope") == 1

    err = capsys.readouterr().err
    assert "Error: Email or password incorrect" in err
    assert not token_file.exists()


def test_logout(run, token_file: Path, capsys) -> None:
    run("login", "alice@x.com", "--password", "secret1")
    assert run("logout") == 0
    assert not token_file.exists()

    assert run("whoami") == 1
    assert "Not logged in" in capsys.readouterr().out


def test_register(run, capsys) -> None:
    assert run("register", "bob", "bob@x.com", "--password", "secret1") == 0
    assert "Registration successful" in capsys.readouterr().out


def test_list(run, capsys) -> None:
    assert run("list", "--sort", "name") == 0
    assert "c1  Btn  [buttons]" in capsys.readouterr().out


def test_favorites_requires_login(run, capsys) -> None:
    assert run("favorites") == 0
    assert "Log in to see your favorites" in capsys.readouterr().out


def test_favorite_toggle(run, capsys) -> None:
    run("login", "alice@x.com", "--password", "secret1")

    assert run("favorite", "c1") == 0
    assert "Added to favorites" in capsys.readouterr().out
    assert run("favorite", "c1") == 0
    assert "Removed from favorites" in capsys.readouterr().out


def test_favorite_logged_out_is_error(run, capsys) -> None:
    assert run("favorite", "c1") == 1
    assert "Error: No token provided" in capsys.readouterr().err


def test_show(run, capsys) -> None:
    assert run("show", "c1") == 0
    out = capsys.readouterr().out
    assert "Btn  [buttons] by alice" in out
    assert "<button>Go</button>" in out


def test_upload(run, tmp_path: Path, backend, capsys) -> None:
    code_file = tmp_path / "card.html"
    code_file.write_text("<div class=\"card\"></div>")
    run("login", "alice@x.com", "--password", "secret1")

    assert run(
        "upload",
        "--name", "Card",
        "--description", "Profile card with avatar",
        "--category", "cards",
        "--tags", "profile, avatar,",
        "--code-file", str(code_file),
    ) == 0
    assert "Uploaded Card (c2)" in capsys.readouterr().out


def test_insert(run, tmp_path: Path, capsys) -> None:
    target = tmp_path / "page.html"
    target.write_text("<body>\n</body>\n")

    assert run("insert", "c1", str(target), "--line", "2") == 0
    assert target.read_text() == "<body>\n<button>Go</button>\n</body>\n"


def test_insert_unknown_component_leaves_file(run, tmp_path: Path, capsys) -> None:
    target = tmp_path / "page.html"
    target.write_text("<body></body>\n")

    assert run("insert", "missing", str(target)) == 1
    assert target.read_text() == "<body></body>\n"
    assert "not found" in capsys.readouterr().err


def test_upload_non_utf8_file_prints_one_line_error(run, tmp_path: Path, capsys) -> None:
    code_file = tmp_path / "card.html"
    code_file.write_bytes(b"<div>\xff\xfe</div>")
    run("login", "alice@x.com", "--password", "secret1")

    assert run(
        "upload",
        "--name", "Card",
        "--description", "Profile card with avatar",
        "--category", "cards",
        "--code-file", str(code_file),
    ) == 1
    assert "Error: " in capsys.readouterr().err


def test_insert_into_non_utf8_file_leaves_it_untouched(run, tmp_path: Path, capsys) -> None:
    target = tmp_path / "page.html"
    target.write_bytes(b"\xff<body></body>\n")

    assert run("insert", "c1", str(target)) == 1
    assert target.read_bytes() == b"\xff<body></body>\n"
    assert "Error: " in capsys.readouterr().err
