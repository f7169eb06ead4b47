"""Unit tests for the matcher CLI entry point."""

import json
from pathlib import Path

import pytest

from submission_matcher.cli.cli import main, parse_args


@pytest.fixture
def token_files(tmp_path: Path) -> tuple[Path, Path]:
    """Two token files sharing a 40-token copied block."""
    path_a = tmp_path / "a.tokens"
    path_b = tmp_path / "b.tokens"
    path_a.write_text(" ".join(str(t) for t in range(100)))
    copied = list(range(20, 60))
    path_b.write_text(
        "# submission B\n" + ", ".join(str(t) for t in list(range(1000, 1040)) + copied)
    )
    return path_a, path_b


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep MATCHER_* settings from the environment out of CLI tests."""
    for name in ("MATCHER_CONFIG", "MATCHER_FALLBACK_POLICY", "MATCHER_REPORT_RAW"):
        monkeypatch.delenv(name, raising=False)


class TestParseArgs:
    """Tests for parse_args function."""

    def test_compare_paths(self) -> None:
        """--a / --b are stored as path_a / path_b."""
        args = parse_args(["compare", "--a", "x", "--b", "y", "--json"])
        assert (args.path_a, args.path_b) == ("x", "y")
        assert args.as_json is True

    def test_command_required(self) -> None:
        """Missing command is a usage error."""
        with pytest.raises(SystemExit):
            parse_args([])


class TestMain:
    """Tests for main function."""

    def test_compare_text_output(
        self, token_files: tuple[Path, Path], capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Compare prints all five fields and exits 0."""
        path_a, path_b = token_files

        exit_code = main(["compare", "--a", str(path_a), "--b", str(path_b)])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Significant:         yes" in out
        assert "Exact match length:  40" in out
        assert "Long match length:   40" in out
        assert "Long match start A:  20" in out
        assert "Long match start B:  40" in out

    def test_compare_json_output(
        self, token_files: tuple[Path, Path], capsys: pytest.CaptureFixture[str]
    ) -> None:
        """--json prints the result as a JSON object."""
        path_a, path_b = token_files

        exit_code = main(["compare", "--a", str(path_a), "--b", str(path_b), "--json"])

        data = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert data == {
            "is_significant": True,
            "exact_match_length": 40,
            "long_match_length": 40,
            "long_match_start_a": 20,
            "long_match_start_b": 40,
        }

    def test_report_raw_flag(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """--report-raw keeps statistics for non-significant pairs."""
        path_a = tmp_path / "a.tokens"
        path_b = tmp_path / "b.tokens"
        path_a.write_text(" ".join(str(t) for t in range(100)))
        path_b.write_text(
            " ".join(str(t) for t in list(range(10)) + list(range(500, 590)))
        )

        exit_code = main(
            ["compare", "--a", str(path_a), "--b", str(path_b), "--json", "--report-raw"]
        )

        data = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert data["is_significant"] is False
        assert data["exact_match_length"] == 10

    def test_malformed_token_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Malformed input exits 1 with an error message."""
        path_a = tmp_path / "a.tokens"
        path_b = tmp_path / "b.tokens"
        path_a.write_text("1 2 three")
        path_b.write_text("1 2 3")

        exit_code = main(["compare", "--a", str(path_a), "--b", str(path_b)])

        assert exit_code == 1
        assert "not an integer token" in capsys.readouterr().err

    def test_missing_token_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Missing files exit 1."""
        exit_code = main(
            ["compare", "--a", str(tmp_path / "nope"), "--b", str(tmp_path / "nope")]
        )

        assert exit_code == 1
        assert "not found" in capsys.readouterr().err

    def test_bad_config_file(
        self,
        token_files: tuple[Path, Path],
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Invalid config exits 1."""
        path_a, path_b = token_files
        config_path = tmp_path / "matcher.yaml"
        config_path.write_text("exact_significance: 3\n")

        exit_code = main(
            [
                "compare",
                "--a",
                str(path_a),
                "--b",
                str(path_b),
                "--config",
                str(config_path),
            ]
        )

        assert exit_code == 1
        assert "Invalid matcher configuration" in capsys.readouterr().err

    def test_usage_error_exit_code(self) -> None:
        """Missing required arguments exit 2."""
        assert main(["compare", "--a", "only-a"]) == 2

    def test_demo(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Demo runs the built-in pair."""
        exit_code = main(["demo", "--json"])

        data = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert data["exact_match_length"] == 13
        assert data["long_match_length"] == 0

    def test_demo_text_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Text demo shows both sequences before the results."""
        exit_code = main(["demo"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert out.startswith("Sequence A: [10, 11,")
        assert "Comparison Results:" in out
