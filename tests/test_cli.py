"""Tests for the command-line interface."""

import json
import sys
from pathlib import Path

import pydantic
import pytest

from truthlens.cli import CLIArgs, main, run
from truthlens.config import get_default_config_path
from truthlens.data import Surface

OFFLINE_CONFIG = get_default_config_path().parent / "offline.yaml"


def test_args_reject_missing_config(tmp_path: Path) -> None:
    with pytest.raises(pydantic.ValidationError, match="Config file not found"):
        CLIArgs(command="bias", content="x", config=tmp_path / "missing.yaml")


def test_args_reject_unknown_command() -> None:
    with pytest.raises(pydantic.ValidationError, match="Unknown command"):
        CLIArgs(command="summarize", content="x", config=OFFLINE_CONFIG)


async def test_run_fact_check_offline() -> None:
    args = CLIArgs(command="fact_check", content="A claim to check.", config=OFFLINE_CONFIG)
    status, body = await run(args)

    assert status == 200
    assert body["kind"] == "fact_check"
    assert body["score"] == 50
    assert body["verification_status"] == "UNVERIFIED"
    assert body["summary"] == "No narrative service configured."
    assert body["id"]


async def test_run_app_surface_without_user() -> None:
    args = CLIArgs(
        command="bias", content="Some text.", config=OFFLINE_CONFIG, surface=Surface.APP
    )
    status, body = await run(args)

    assert status == 401
    assert body == {"error": "Authentication required."}


async def test_run_media_reads_file(tmp_path: Path) -> None:
    image = tmp_path / "photo.png"
    image.write_bytes(b"\x89PNG\r\n")
    args = CLIArgs(command="media", content=str(image), config=OFFLINE_CONFIG)

    status, body = await run(args)

    assert status == 200
    assert body["kind"] == "media_authenticity"
    assert body["content"] == "photo.png"
    assert body["authenticity"] == "QUESTIONABLE"


async def test_run_media_rejects_unknown_type(tmp_path: Path) -> None:
    doc = tmp_path / "notes.unknownext"
    doc.write_bytes(b"data")
    args = CLIArgs(command="media", content=str(doc), config=OFFLINE_CONFIG)

    status, body = await run(args)

    assert status == 400
    assert body == {"error": "Unsupported file type."}


async def test_run_writes_log_when_requested(tmp_path: Path) -> None:
    args = CLIArgs(
        command="bias",
        content="Some text.",
        config=OFFLINE_CONFIG,
        log=True,
        log_dir=str(tmp_path),
    )
    status, _ = await run(args)

    assert status == 200
    assert len(list(tmp_path.glob("run_req_*.json"))) == 1


def test_main_prints_json(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    monkeypatch.setattr(
        sys, "argv", ["truthlens", "fact_check", "A claim.", "--config", str(OFFLINE_CONFIG)]
    )
    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 0
    body = json.loads(capsys.readouterr().out)
    assert body["score"] == 50


def test_main_exits_nonzero_on_error(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    monkeypatch.setattr(
        sys, "argv", ["truthlens", "fact_check", "   ", "--config", str(OFFLINE_CONFIG)]
    )
    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 1
    body = json.loads(capsys.readouterr().out)
    assert body == {"error": "Content is required and cannot be empty."}


async def test_run_media_missing_file(tmp_path: Path) -> None:
    args = CLIArgs(command="media", content=str(tmp_path / "gone.png"), config=OFFLINE_CONFIG)

    status, body = await run(args)

    assert status == 400
    assert body == {"error": "No file provided."}


async def test_run_reports_setup_failure_as_json(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("HIVE_API_KEY", raising=False)
    config = tmp_path / "hive.yaml"
    config.write_text("generator:\n  type: static\nforensics:\n  type: hive\n")
    args = CLIArgs(command="bias", content="Some text.", config=config)

    status, body = await run(args)

    assert status == 500
    assert body == {"error": "An unexpected error occurred."}
