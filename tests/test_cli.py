"""CLI commands via click's CliRunner."""
from __future__ import annotations

import logging

import pytest
from click.testing import CliRunner

from linestore.cli import cli


@pytest.fixture()
def runner(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LINESTORE_ENCODING", raising=False)
    monkeypatch.delenv("LINESTORE_LOG_LEVEL", raising=False)
    return CliRunner()


def test_write_and_read(runner, tmp_path):
    target = tmp_path / "notes.txt"
    result = runner.invoke(cli, ["write", str(target), "a\nb\nc"])
    assert result.exit_code == 0, result.output
    assert target.read_text() == "a\nb\nc\n"

    result = runner.invoke(cli, ["read", str(target)])
    assert result.exit_code == 0
    assert result.output == "a\nb\nc\n"

    result = runner.invoke(cli, ["read", str(target), "--line", "1"])
    assert result.output == "b\n"

    result = runner.invoke(cli, ["read", str(target), "--line", "7"])
    assert result.output == "* Nothing present *\n"


def test_read_creates_missing_file(runner, tmp_path):
    target = tmp_path / "new.txt"
    result = runner.invoke(cli, ["read", str(target)])
    assert result.exit_code == 0
    assert target.exists()


def test_write_line(runner, tmp_path):
    target = tmp_path / "notes.txt"
    target.write_text("x\ny\n")
    result = runner.invoke(cli, ["write", str(target), "z", "--line", "1"])
    assert result.exit_code == 0
    assert "Updated line 1" in result.output
    assert target.read_text() == "x\nz\n"


def test_write_line_out_of_range_fails(runner, tmp_path):
    target = tmp_path / "notes.txt"
    target.write_text("x\ny\n")
    result = runner.invoke(cli, ["write", str(target), "z", "--line", "4"])
    assert result.exit_code == 1
    assert "out of range" in result.output
    assert target.read_text() == "x\ny\n"


def test_delete(runner, tmp_path):
    target = tmp_path / "notes.txt"
    target.write_text("x\n")
    result = runner.invoke(cli, ["delete", str(target)])
    assert result.exit_code == 0
    assert not target.exists()

    result = runner.invoke(cli, ["delete", str(target)])
    assert result.exit_code == 1
    assert "No such file" in result.output


def test_unwritable_location_fails(runner, tmp_path):
    target = tmp_path / "missing-dir" / "notes.txt"
    result = runner.invoke(cli, ["read", str(target)])
    assert result.exit_code == 1
    assert "Unable to create file" in result.output


def test_init(runner, tmp_path):
    result = runner.invoke(cli, ["init"])
    assert result.exit_code == 0
    assert (tmp_path / "linestore.toml").exists()

    result = runner.invoke(cli, ["init"])
    assert "already exists" in result.output


def test_unknown_encoding_is_reported(runner, tmp_path, monkeypatch):
    monkeypatch.setenv("LINESTORE_ENCODING", "bogus")
    result = runner.invoke(cli, ["read", str(tmp_path / "notes.txt")])
    assert result.exit_code == 1
    assert "Unknown encoding" in result.output
    assert not isinstance(result.exception, LookupError)


def test_init_in_missing_directory_fails(runner, tmp_path):
    result = runner.invoke(cli, ["init", "--dir", str(tmp_path / "missing")])
    assert result.exit_code == 1
    assert "Unable to write linestore.toml" in result.output


@pytest.fixture()
def basic_config_calls(monkeypatch):
    calls: list[dict] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    return calls


def test_log_level_from_env(runner, tmp_path, monkeypatch, basic_config_calls):
    monkeypatch.setenv("LINESTORE_LOG_LEVEL", "debug")
    result = runner.invoke(cli, ["read", str(tmp_path / "notes.txt")])
    assert result.exit_code == 0
    assert basic_config_calls[0]["level"] == logging.DEBUG


def test_log_level_from_file(runner, tmp_path, basic_config_calls):
    (tmp_path / "linestore.toml").write_text('[logging]\nlevel = "info"\n')
    runner.invoke(cli, ["read", str(tmp_path / "notes.txt")])
    assert basic_config_calls[0]["level"] == logging.INFO
