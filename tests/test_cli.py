# SPDX-License-Identifier: MIT
"""Tests for the ``forgeid`` command-line interface."""

import importlib

import pytest

from forgeid import ForgeIdGenerator

cli = importlib.import_module("forgeid.cli.main")


@pytest.fixture(autouse=True)
def _quiet_cli(monkeypatch):
    monkeypatch.setattr(cli, "_configure_logging", lambda *a, **k: None)
    monkeypatch.setenv("FORGEID_SECRET", "unit-test-secret")


def _lines(capsys) -> list[str]:
    return capsys.readouterr().out.splitlines()


def test_generate_prints_verifiable_ids(capsys) -> None:
    cli.main(["generate", "--prefix", "TRX", "--count", "3", "--style", "dash"])
    ids = _lines(capsys)
    forge = ForgeIdGenerator("unit-test-secret")
    assert len(ids) == 3
    assert all(identifier.startswith("TRX-") for identifier in ids)
    assert all(forge.verify(identifier) for identifier in ids)


def test_generate_uses_configured_defaults(monkeypatch, capsys) -> None:
    monkeypatch.setenv("FORGEID_DEFAULT_PREFIX", "INV")
    monkeypatch.setenv("FORGEID_DEFAULT_STYLE", "space")
    cli.main(["generate"])
    (identifier,) = _lines(capsys)
    assert identifier.startswith("INV-")
    assert " " in identifier


def test_secret_flag_overrides_env(capsys) -> None:
    cli.main(["generate", "--secret", "flag-secret"])
    (identifier,) = _lines(capsys)
    assert ForgeIdGenerator("flag-secret").verify(identifier)
    assert not ForgeIdGenerator("unit-test-secret").verify(identifier)


def test_verify_exit_codes(capsys) -> None:
    good = ForgeIdGenerator("unit-test-secret").generate("TRX")
    cli.main(["verify", good])
    assert _lines(capsys) == [f"{good}\tvalid"]
    with pytest.raises(SystemExit) as exc:
        cli.main(["verify", good, "TRX-notavalidid00000"])
    assert exc.value.code == 1
    assert _lines(capsys)[1].endswith("\tinvalid")


def test_format_command(capsys) -> None:
    cli.main(["format", "TRX-abcdefghijklmn", "--style", "dash"])
    assert _lines(capsys) == ["TRX-abcdef-ghijkl-mn"]


def test_stress_command(capsys) -> None:
    cli.main(["stress", "--total", "20", "--progress-step", "10"])
    lines = _lines(capsys)
    assert lines[0] == "Done: 20 keys"
    assert "Duplicates: 0" in lines
    assert "Invalid: 0" in lines


def test_benchmark_command(tmp_path, capsys) -> None:
    out = tmp_path / "bench"
    cli.main(["benchmark", "--steps", "5", "10", "--output-dir", str(out)])
    assert len(_lines(capsys)) == 2
    assert (out / "benchmark.json").exists()
    assert (out / "benchmark.csv").exists()


def test_invalid_configuration_exits_with_2(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["generate", "--growth-interval", "0"])
    assert exc.value.code == 2
    assert "forgeid:" in capsys.readouterr().err


def test_invalid_prefix_exits_with_2(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["generate", "--prefix", "T_X"])
    assert exc.value.code == 2


def test_no_command_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main([])
    assert exc.value.code == 1
    assert "usage:" in capsys.readouterr().out


def test_version_flag(capsys) -> None:
    cli.main(["--version"])
    assert _lines(capsys)[0].startswith("forgeid ")


def test_diagnostics_flag(capsys) -> None:
    cli.main(["--diagnostics"])
    out = capsys.readouterr().out
    assert "Python " in out
    assert "FORGEID_SECRET" in out
