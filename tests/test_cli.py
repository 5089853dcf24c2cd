# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI tests for the catalog commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from datastar_attrs.catalog import UnreachableDocumentationError
from datastar_attrs.cli.app import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_list_shows_every_attribute(runner: CliRunner) -> None:
    result = runner.invoke(app, ["list"], env={"COLUMNS": "200"})
    assert result.exit_code == 0
    assert "DatastarOnSignalPatchFilter" in result.stdout
    assert "data-class" in result.stdout


def test_show_unknown_attribute_fails(runner: CliRunner) -> None:
    result = runner.invoke(app, ["show", "teleport"])
    assert result.exit_code == 1
    assert "Unknown attribute" in result.stdout


def test_show_unknown_attribute_with_markup_characters(runner: CliRunner) -> None:
    result = runner.invoke(app, ["show", "[/red]"])
    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "Unknown attribute '[/red]'" in result.stdout


def test_show_lists_builders(runner: CliRunner) -> None:
    result = runner.invoke(app, ["show", "ignore-morph"], env={"COLUMNS": "200"})
    assert result.exit_code == 0
    assert "datastar_ignore_morph_set" in result.stdout


def test_validate_succeeds_offline(tmp_path: Path, runner: CliRunner) -> None:
    result = runner.invoke(app, ["validate", "--root", str(tmp_path), "--no-emoji"])
    assert result.exit_code == 0
    assert "21 attributes, 32 modifiers valid" in result.stdout
    assert "pass --check-links" in result.stdout


def test_validate_reports_unreachable_links(
    tmp_path: Path,
    runner: CliRunner,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def _fail(self, url: str) -> None:
        raise UnreachableDocumentationError(url, "unexpected response", status=503)

    monkeypatch.setattr("datastar_attrs.catalog.loader.HttpLinkChecker.check", _fail)
    result = runner.invoke(app, ["validate", "--root", str(tmp_path), "--check-links", "--no-emoji"])
    assert result.exit_code == 1
    assert "statusCode=503" in result.stdout


def test_validate_reports_bad_configuration(tmp_path: Path, runner: CliRunner) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.datastar-attrs]\nlink-timeout = -1\n", encoding="utf-8")
    result = runner.invoke(app, ["validate", "--root", str(tmp_path), "--no-emoji"])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.stdout


def test_export_to_stdout(tmp_path: Path, runner: CliRunner) -> None:
    result = runner.invoke(app, ["export", "--root", str(tmp_path)])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert len(payload["attributes"]) == 21
    assert len(payload["checksum"]) == 64


def test_export_to_file(tmp_path: Path, runner: CliRunner) -> None:
    target = tmp_path / "catalog.json"
    result = runner.invoke(app, ["export", "--root", str(tmp_path), "--output", str(target)])
    assert result.exit_code == 0
    assert json.loads(target.read_text(encoding="utf-8"))["schemaVersion"] == "1.0.0"


def test_export_warns_before_overwriting(tmp_path: Path, runner: CliRunner) -> None:
    target = tmp_path / "catalog.json"
    target.write_text("{}", encoding="utf-8")
    result = runner.invoke(app, ["export", "--root", str(tmp_path), "--output", str(target)])
    assert result.exit_code == 0
    assert f"Overwriting {target}" in result.stdout
    assert json.loads(target.read_text(encoding="utf-8"))["checksum"]


def test_render_with_modifiers(runner: CliRunner) -> None:
    result = runner.invoke(
        app,
        [
            "render",
            "on",
            "$foo = ''",
            "--subkey",
            "click",
            "-m",
            "Window",
            "-m",
            "DebounceSecNoTrailing=1",
            "--tag",
            "button",
        ],
    )
    assert result.exit_code == 0
    assert result.stdout.strip() == "<button data-on:click__window__debounce.1s.notrailing=\"$foo = ''\"></button>"


def test_render_boolean_attribute(runner: CliRunner) -> None:
    result = runner.invoke(app, ["render", "ignore", "-m", "Self"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "<div data-ignore__self></div>"


@pytest.mark.parametrize(
    ("args", "message"),
    [
        (["render", "teleport", "x"], "Unknown attribute"),
        (["render", "show"], "requires an expression"),
        (["render", "show", "$x", "--subkey", "a"], "does not accept a sub-key"),
        (["render", "show", "$x", "-m", "Window"], "does not permit modifier"),
        (["render", "ref", "$x", "-m", "Case=upper"], "expects one of"),
        (["render", "init", "$x", "-m", "DelayMs=soon"], "could not convert"),
        (["render", "on", "x", "-k", "click", "-m", "DebounceMs=inf"], "finite duration"),
    ],
)
def test_render_errors(runner: CliRunner, args: list[str], message: str) -> None:
    result = runner.invoke(app, args)
    assert result.exit_code == 1
    assert message in result.stdout
