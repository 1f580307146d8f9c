"""Tests for the lh-avg CLI."""

import json

import pytest
from click.testing import CliRunner

from lh_avg import __version__
from lh_avg.cli.main import EXIT_ERROR, EXIT_FAILURE, EXIT_SUCCESS, cli


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner."""
    return CliRunner()


class TestExitCodes:
    """Tests for exit code constants."""

    def test_exit_codes_defined(self) -> None:
        """Test that exit codes are defined correctly."""
        assert EXIT_SUCCESS == 0
        assert EXIT_FAILURE == 1
        assert EXIT_ERROR == 2


class TestJsonOutput:
    """Tests for --format=json."""

    def test_single_score(self, runner: CliRunner, spaced_score: str) -> None:
        """Test numeric results are printed as a JSON list."""
        result = runner.invoke(cli, ["--format", "json", spaced_score])

        assert result.exit_code == EXIT_SUCCESS
        data = json.loads(result.output)
        assert len(data) == 1
        assert data[0]["perf"] == pytest.approx(0.14)
        assert data[0]["pwa"]["po"] == pytest.approx(6 / 7)
        assert data[0]["average"] == pytest.approx(0.6157823129251702, abs=1e-9)

    def test_percentages(self, runner: CliRunner, compressed_score: str) -> None:
        """Test --perc prints percentage strings."""
        result = runner.invoke(cli, ["-p", "-f", "json", compressed_score])

        assert result.exit_code == EXIT_SUCCESS
        data = json.loads(result.output)
        assert data[0]["average"] == "61.58%"
        assert data[0]["pwa"] == {"fnr": "33.33%", "ins": "0%", "po": "85.71%"}

    def test_diff(
        self, runner: CliRunner, spaced_score: str, improved_score: str
    ) -> None:
        """Test --diff prints differences against the first row."""
        result = runner.invoke(
            cli, ["-p", "-d", "-f", "json", spaced_score, improved_score]
        )

        assert result.exit_code == EXIT_SUCCESS
        data = json.loads(result.output)
        assert data[0]["perf"] == "14%"
        assert data[1]["perf"] == "14%"
        assert data[1]["bp"] == "-1%"

    def test_reads_stdin(
        self, runner: CliRunner, spaced_score: str, improved_score: str
    ) -> None:
        """Test score strings are read line by line from stdin."""
        result = runner.invoke(
            cli,
            ["-f", "json"],
            input=f"{spaced_score}\n\n{improved_score}\n",
        )

        assert result.exit_code == EXIT_SUCCESS
        assert len(json.loads(result.output)) == 2

    def test_settings_from_env(
        self,
        runner: CliRunner,
        spaced_score: str,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test defaults come from LH_AVG_ environment variables."""
        monkeypatch.setenv("LH_AVG_AS_PERCENTAGE", "true")
        monkeypatch.setenv("LH_AVG_OUTPUT_FORMAT", "json")
        result = runner.invoke(cli, [spaced_score])

        assert result.exit_code == EXIT_SUCCESS
        assert json.loads(result.output)[0]["perf"] == "14%"


class TestTableOutput:
    """Tests for the default table output."""

    def test_table(
        self,
        runner: CliRunner,
        compressed_score: str,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test the table lists the input string and its scores."""
        monkeypatch.setenv("COLUMNS", "240")
        result = runner.invoke(cli, ["-p", compressed_score])

        assert result.exit_code == EXIT_SUCCESS
        assert "14/100/98/100/(1,0,6)" in result.output
        assert "61.58%" in result.output
        assert "PWA Optimized" in result.output


class TestErrors:
    """Tests for failure paths."""

    def test_parse_error(self, runner: CliRunner) -> None:
        """Test a malformed score exits with EXIT_ERROR."""
        result = runner.invoke(cli, ["14 / 100 / 98 / (1, 0, 6)"])

        assert result.exit_code == EXIT_ERROR
        assert "Error:" in result.output
        assert "expected 4 category scores" in result.output

    def test_zero_denominator(self, runner: CliRunner) -> None:
        """Test an unevaluable fraction exits with EXIT_ERROR."""
        result = runner.invoke(cli, ["14/100/98/100/(1/0,0/3,6/7)"])

        assert result.exit_code == EXIT_ERROR
        assert "zero denominator" in result.output

    def test_invalid_configuration(
        self, runner: CliRunner, spaced_score: str, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test invalid LH_AVG_ settings exit with EXIT_ERROR and a message."""
        monkeypatch.setenv("LH_AVG_LOG_LEVEL", "LOUD")
        result = runner.invoke(cli, [spaced_score])

        assert result.exit_code == EXIT_ERROR
        assert "Error: invalid configuration" in result.output
        assert "Invalid log level" in result.output

    def test_no_scores(self, runner: CliRunner) -> None:
        """Test running without scores exits with EXIT_FAILURE."""
        result = runner.invoke(cli, [], input="")

        assert result.exit_code == EXIT_FAILURE
        assert "no score strings given" in result.output


class TestVersion:
    """Tests for --version."""

    def test_version(self, runner: CliRunner) -> None:
        """Test the version option prints the package version."""
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == EXIT_SUCCESS
        assert __version__ in result.output
