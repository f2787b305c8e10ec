"""Tests for the command line entry point."""

import pytest

from descriptor_checksum.__main__ import main


DESCRIPTOR = "wpkh(cU7CGBhwnMdLDbqBaXm3xE22KFyaA5s3YDBis88LyuPLnmfpDFFU)"


@pytest.fixture
def config_path(tmp_path):
    return str(tmp_path / "config.json")


def test_compute(config_path, capsys):
    assert main(["--config", config_path, "compute", DESCRIPTOR]) == 0
    assert capsys.readouterr().out.strip() == "2kyyxsrc"


def test_compute_does_not_write_config(config_path, tmp_path):
    main(["--config", config_path, "compute", DESCRIPTOR])
    assert not (tmp_path / "config.json").exists()


def test_add(config_path, capsys):
    assert main(["--config", config_path, "add", DESCRIPTOR]) == 0
    assert capsys.readouterr().out.strip() == DESCRIPTOR + "#2kyyxsrc"


def test_verify(config_path, capsys):
    assert main(["--config", config_path, "verify", DESCRIPTOR + "#2kyyxsrc"]) == 0
    assert capsys.readouterr().out.strip() == "OK"


def test_verify_mismatch(config_path, capsys):
    assert main(["--config", config_path, "verify", DESCRIPTOR + "#2kyyxsrq"]) == 1
    assert "Checksum mismatch" in capsys.readouterr().err


def test_verify_require_checksum(config_path, capsys):
    assert main(["--config", config_path, "verify", DESCRIPTOR]) == 0
    assert main(["--config", config_path, "verify", "--require-checksum", DESCRIPTOR]) == 1
    assert "Missing checksum" in capsys.readouterr().err


def test_invalid_character(config_path, capsys):
    assert main(["--config", config_path, "compute", "wpkh(\n)"]) == 1
    assert "Invalid descriptor character" in capsys.readouterr().err


def test_bad_config(tmp_path, capsys):
    path = tmp_path / "config.json"
    path.write_text('{"logging": {"level": "LOUD"}}', encoding="utf-8")

    assert main(["--config", str(path), "compute", DESCRIPTOR]) == 1
    assert "Configuration error" in capsys.readouterr().err
