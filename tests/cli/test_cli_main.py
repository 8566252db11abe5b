"""Tests for CLI parser and main behavior."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

import pytest

from cachetop.cli.main import build_parser, main
from cachetop.exceptions import UnrecoverableFilesystemError


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep stray config files and CARGO_HOME out of CLI runs."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CARGO_HOME", raising=False)


def test_build_parser_accepts_top_flags(tmp_path: Path) -> None:
    args = build_parser().parse_args(
        ["top", "--home", str(tmp_path), "-n", "5", "-C", "git-db", "-C", "registry-src", "--grouping", "adjacent"]
    )

    assert args.command == "top"
    assert args.home == tmp_path
    assert args.limit == 5
    assert args.category == ["git-db", "registry-src"]
    assert args.grouping == "adjacent"
    assert args.workers is None


@pytest.mark.parametrize("argv", [[], ["prune"]], ids=["missing", "unknown"])
def test_main_rejects_missing_or_unknown_command(argv: list[str], capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)

    assert exc_info.value.code == 2
    assert capsys.readouterr().out == ""


def test_build_parser_rejects_unknown_grouping() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["top", "--grouping", "random"])


def test_top_prints_report(cache_home: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["top", "--home", str(cache_home), "-n", "1", "-C", "registry-cache"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out == (
        f"\nSummary of: {cache_home.resolve() / 'registry' / 'cache'}\n"
        "libc    src ckt: 1   src avg:     400 B   total: 400 B\n"
    )


def test_top_reports_categories_in_default_order(cache_home: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["top", "--home", str(cache_home), "-j", "2"])

    output = capsys.readouterr().out
    assert exit_code == 0
    headers = [line for line in output.splitlines() if line.startswith("Summary of:")]
    assert [Path(header.split()[2]).relative_to(cache_home.resolve()).as_posix() for header in headers] == [
        "git/checkouts",
        "git/db",
        "registry/src",
        "registry/cache",
    ]
    assert "tokio-rs    src ckt: 1   src avg:   1.50 kB   total: 1.50 kB\n" in output


def test_top_uses_cargo_home_environment(
    cache_home: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("CARGO_HOME", str(cache_home))

    assert main(["top", "-C", "git-checkouts"]) == 0
    assert "serde    src ckt: 1   src avg:      50 B   total: 50 B\n" in capsys.readouterr().out


def test_top_reads_config_file(tmp_path: Path, cache_home: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "cachetop.yaml").write_text(
        f"cache_home: {cache_home}\nlimit: 1\ncategories: [registry-src]\n",
        encoding="utf-8",
    )

    assert main(["top"]) == 0
    rows = [line for line in capsys.readouterr().out.splitlines() if "src ckt:" in line]
    assert rows == ["libc    src ckt: 2   src avg:   1.50 kB   total: 3 kB"]


def test_top_missing_home_fails_without_stdout(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["top", "--home", str(tmp_path / "xyxyxxxyyyxxyxyxqwertywasd")])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert "Error, no cache home directory" in captured.err
    assert "xyxyxxxyyyxxyxyxqwertywasd' found." in captured.err


@pytest.mark.parametrize(
    "extra_args",
    [["-n", "0"], ["-j", "0"], ["-C", "npm"]],
    ids=["zero_limit", "zero_workers", "unknown_category"],
)
def test_top_invalid_overrides_exit_2(
    cache_home: Path, extra_args: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = main(["top", "--home", str(cache_home), *extra_args])

    captured = capsys.readouterr()
    assert exit_code == 2
    assert captured.err.startswith("Configuration error:")
    assert captured.out == ""


def test_top_fatal_filesystem_error_exit_1(cache_home: Path, capsys: pytest.CaptureFixture[str]) -> None:
    error = UnrecoverableFilesystemError(cache_home / "git" / "db", PermissionError(13, "Permission denied"))
    with patch("cachetop.cli.main.summarize_cache_home", side_effect=error):
        exit_code = main(["top", "--home", str(cache_home)])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert captured.err.startswith("Fatal filesystem error: Failed to get metadata of")


def test_validate_config_valid(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "cachetop.yaml").write_text("limit: 3\n", encoding="utf-8")

    assert main(["validate-config"]) == 0
    assert "Configuration is valid." in capsys.readouterr().out


def test_validate_config_invalid(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "other.yaml"
    config_path.write_text("grouping: random\n", encoding="utf-8")

    assert main(["validate-config", "--config", str(config_path)]) == 2
    assert "grouping" in capsys.readouterr().err


def test_top_prints_undecodable_entry_names(
    cache_home: Path, capsys: pytest.CaptureFixture[str], write_file: Callable[[Path, int], Path]
) -> None:
    checkouts = cache_home / "git" / "checkouts"
    write_file(checkouts / os.fsdecode(b"caf\xe9-123") / "src" / "lib.rs", 5)

    exit_code = main(["top", "--home", str(cache_home), "-C", "git-checkouts"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out.endswith(
        "(55 B total)\n"
        "serde      src ckt: 1   src avg:      50 B   total: 50 B\n"
        "caf\\xe9    src ckt: 1   src avg:       5 B   total: 5 B\n"
    )
