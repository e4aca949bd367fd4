from pathlib import Path

import pytest

import cli
from ordquiz.services import generation_service


def test_parse_ingest_defaults() -> None:
    args = cli.parse_args(["ingest", "--delay", "0.5"])
    assert args.command == "ingest"
    assert args.delay == 0.5
    assert isinstance(args.output, Path)


def test_parse_serve() -> None:
    args = cli.parse_args(["serve", "--port", "9000"])
    assert (args.host, args.port) == ("127.0.0.1", 9000)


def test_ingest_requires_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "GEMINI_API_KEY", "")
    with pytest.raises(SystemExit):
        cli.main(["ingest"])


def test_check_models_reports_working_model(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    seen = []
    monkeypatch.setattr(cli, "GEMINI_API_KEY", "key")
    monkeypatch.setattr(
        generation_service,
        "probe_models",
        lambda names, api_key: seen.append((list(names), api_key)) or "gemini-pro",
    )
    cli.main(["check-models", "gemini-x", "gemini-pro"])
    assert seen == [(["gemini-x", "gemini-pro"], "key")]
    assert "Model gemini-pro works!" in capsys.readouterr().out


def test_check_models_none_work(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "GEMINI_API_KEY", "key")
    monkeypatch.setattr(generation_service, "probe_models", lambda names, api_key: None)
    with pytest.raises(SystemExit):
        cli.main(["check-models"])
