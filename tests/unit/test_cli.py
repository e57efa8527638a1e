import io

import pytest

from grid_runner.cli import build_parser, main


def test_parser_defaults() -> None:
    args = build_parser().parse_args([])
    assert (args.rows, args.cols, args.stars, args.enemies) == (12, 30, 6, 3)
    assert args.respawn_interval == 12
    assert args.respawn_tries == 50
    assert args.seed is None
    assert not args.no_clear


def test_invalid_config_is_a_usage_error(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--rows", "0"])
    assert excinfo.value.code == 2
    assert "Board must be at least 1x1" in capsys.readouterr().err


def test_main_exits_zero_on_end_of_input(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["--seed", "3", "--no-clear"]) == 0
    out = capsys.readouterr().out
    assert "Move (W/A/S/D): " in out
    assert "Thanks for playing." in out
