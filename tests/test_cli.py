"""Tests for the command-line entrypoint."""

from pathlib import Path

import pytest

from main import main


def test_default_scenario(capsys: pytest.CaptureFixture[str]) -> None:
    """The built-in SF / LA scenario prints a full result panel."""
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Primary option" in out
    assert "Runner-up option" in out
    assert "Toyota Sienna Hybrid" in out
    assert "Environmental rating: ★★★☆☆" in out


def test_preferences_reach_summary(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--kids", "--trunk"]) == 0
    out = capsys.readouterr().out
    assert "family-friendly features" in out
    assert "ample trunk space" in out


def test_no_suitable_vehicle_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--min-seats", "50"]) == 1
    assert "No vehicle in the catalog" in capsys.readouterr().err


def test_custom_catalog(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "vehicles.yaml"
    path.write_text(
        "vehicles:\n"
        "  - name: Only EV\n    type: electric\n    range: 5000\n    seats: 5\n",
        encoding="utf-8",
    )
    assert main(["--catalog", str(path)]) == 0
    out = capsys.readouterr().out
    assert out.count("Only EV") >= 2
    assert "★★★★★" in out


@pytest.mark.parametrize(
    "argv",
    [["--house", "not-a-point"], ["--min-seats", "0"]],
)
def test_bad_arguments_exit(argv: list[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    assert exc_info.value.code == 2
