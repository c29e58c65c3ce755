"""
Unit tests for the digestkit CLI.

Tests the CLI behavior through Click's test runner:
- algorithms listing for core and extended builds
- data digests from arguments and stdin
- file digests, including partial failure
- Usage errors for unknown algorithms and bad config files
"""

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from digestkit.cli import cli
from digestkit.core.exceptions import AlgorithmComputationError
from digestkit.services.digest import DigestService

from ..vectors import ALL_NAMES, CORE_NAMES, EMPTY_DIGESTS, THIS_IS_A_TEST, THIS_IS_A_TEST_DIGESTS


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


class TestGroup:
    """Tests for the top-level group."""

    def test_no_subcommand_prints_help(self, runner):
        """Bare invocation shows help and exits 0."""
        result = runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "algorithms" in result.output
        assert "file" in result.output

    def test_version(self, runner):
        """--version prints the program name."""
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "digestkit" in result.output

    def test_missing_explicit_config_fails(self, runner, tmp_path):
        """An explicit --config that cannot be loaded is an error."""
        result = runner.invoke(cli, ["--config", str(tmp_path / "nope.toml"), "algorithms"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_explicit_config_applied(self, runner, tmp_path):
        """Settings from --config shape the catalog."""
        config = tmp_path / "digestkit.toml"
        config.write_text("[digest]\nextended = false\n")
        result = runner.invoke(cli, ["--config", str(config), "algorithms"])
        assert result.exit_code == 0
        assert "md4" not in result.output


class TestAlgorithmsCommand:
    """Tests for 'digestkit algorithms'."""

    def test_lists_extended_by_default(self, runner):
        """Every algorithm appears with its bit length."""
        result = runner.invoke(cli, ["algorithms"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert [line.split()[0] for line in lines] == list(ALL_NAMES)
        assert "256 bits  core" in lines[2]
        assert "512 bits  extended" in lines[-1]

    def test_env_hides_extended(self, runner, monkeypatch):
        """DIGESTKIT_DIGEST__EXTENDED=false leaves only the core set."""
        monkeypatch.setenv("DIGESTKIT_DIGEST__EXTENDED", "false")
        result = runner.invoke(cli, ["algorithms"])
        assert result.exit_code == 0
        assert [line.split()[0] for line in result.output.splitlines()] == list(CORE_NAMES)


class TestDataCommand:
    """Tests for 'digestkit data'."""

    @pytest.mark.parametrize("name", ALL_NAMES)
    def test_text_argument(self, runner, name):
        """TEXT is digested as UTF-8."""
        result = runner.invoke(cli, ["data", name, THIS_IS_A_TEST])
        assert result.exit_code == 0
        assert result.output.strip() == THIS_IS_A_TEST_DIGESTS[name]

    def test_stdin(self, runner):
        """Without TEXT, stdin bytes are digested."""
        result = runner.invoke(cli, ["data", "sha1"], input=THIS_IS_A_TEST.encode())
        assert result.exit_code == 0
        assert result.output.strip() == THIS_IS_A_TEST_DIGESTS["sha1"]

    def test_empty_stdin(self, runner):
        """Empty stdin digests the empty input."""
        result = runner.invoke(cli, ["data", "md5"], input=b"")
        assert result.exit_code == 0
        assert result.output.strip() == EMPTY_DIGESTS["md5"]

    def test_algorithm_name_case_insensitive(self, runner):
        """The CLI accepts upper-case algorithm names."""
        result = runner.invoke(cli, ["data", "SHA256", THIS_IS_A_TEST])
        assert result.exit_code == 0
        assert result.output.strip() == THIS_IS_A_TEST_DIGESTS["sha256"]

    def test_unknown_algorithm_is_usage_error(self, runner):
        """An unknown algorithm exits 2 and lists what is available."""
        result = runner.invoke(cli, ["data", "whirlpool", "x"])
        assert result.exit_code == 2
        assert "whirlpool" in result.output
        assert "sha256" in result.output

    def test_unencodable_text_exits_1(self, runner):
        """TEXT that cannot be UTF-8 encoded is reported and exits 1."""
        result = runner.invoke(cli, ["data", "md5", "bad \udcff"])
        assert result.exit_code == 1
        assert "digestkit:" in result.output

    def test_goes_through_service(self, runner):
        """The command digests via the bootstrapped DigestService."""
        with patch.object(DigestService, "compute_data", return_value="f" * 32) as mock_compute:
            result = runner.invoke(cli, ["data", "MD5", "x"])
        assert result.exit_code == 0
        assert result.output.strip() == "f" * 32
        mock_compute.assert_called_once_with("md5", "x")

    def test_extended_unknown_in_core_build(self, runner, monkeypatch):
        """Extended names are unknown when the extended set is off."""
        monkeypatch.setenv("DIGESTKIT_DIGEST__EXTENDED", "false")
        result = runner.invoke(cli, ["data", "md2", "x"])
        assert result.exit_code == 2


class TestFileCommand:
    """Tests for 'digestkit file'."""

    def test_single_file(self, runner, sample_file):
        """Output is '<digest>  <path>'."""
        result = runner.invoke(cli, ["file", "md5", str(sample_file)])
        assert result.exit_code == 0
        assert result.output == f"{THIS_IS_A_TEST_DIGESTS['md5']}  {sample_file}\n"

    def test_multiple_files(self, runner, sample_file, tmp_path):
        """One line per file, in argument order."""
        empty = tmp_path / "empty.bin"
        empty.write_bytes(b"")
        result = runner.invoke(cli, ["file", "sha256", str(sample_file), str(empty)])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            f"{THIS_IS_A_TEST_DIGESTS['sha256']}  {sample_file}",
            f"{EMPTY_DIGESTS['sha256']}  {empty}",
        ]

    def test_missing_file_exits_1(self, runner, sample_file, tmp_path):
        """Readable files are still printed; a missing one fails the command."""
        missing = tmp_path / "missing.bin"
        result = runner.invoke(cli, ["file", "sha1", str(missing), str(sample_file)])
        assert result.exit_code == 1
        assert f"{THIS_IS_A_TEST_DIGESTS['sha1']}  {sample_file}" in result.output
        assert f"digestkit: {missing}:" in result.output

    def test_primitive_failure_stops_remaining_files(self, runner, sample_file):
        """A hash primitive failure is not retried for the remaining paths."""
        error = AlgorithmComputationError("Hash primitive unavailable", algorithm="md5")
        with patch.object(DigestService, "compute_file", side_effect=error) as mock_compute:
            result = runner.invoke(cli, ["file", "md5", str(sample_file), str(sample_file)])
        assert result.exit_code == 1
        assert mock_compute.call_count == 1
        assert "Hash primitive unavailable" in result.output

    def test_paths_required(self, runner):
        """At least one path must be given."""
        result = runner.invoke(cli, ["file", "md5"])
        assert result.exit_code == 2

    def test_small_chunk_size_from_env(self, runner, sample_file, monkeypatch):
        """A configured chunk size does not change the digest."""
        monkeypatch.setenv("DIGESTKIT_DIGEST__CHUNK_SIZE", "3")
        result = runner.invoke(cli, ["file", "sha512", str(sample_file)])
        assert result.exit_code == 0
        assert result.output.split()[0] == THIS_IS_A_TEST_DIGESTS["sha512"]


class TestModuleEntryPoint:
    """Tests for 'python -m digestkit'."""

    def test_data_via_subprocess(self, run_digestkit):
        """The module entry point runs the CLI."""
        result = run_digestkit("data", "md4", input=THIS_IS_A_TEST.encode())
        assert result.returncode == 0, result.stderr
        assert result.stdout.decode().strip() == THIS_IS_A_TEST_DIGESTS["md4"]

    def test_core_build_via_subprocess(self, run_digestkit):
        """The extended flag reaches a fresh process through the environment."""
        result = run_digestkit("algorithms", env={"DIGESTKIT_DIGEST__EXTENDED": "false"})
        assert result.returncode == 0, result.stderr
        names = [line.split()[0] for line in result.stdout.decode().splitlines()]
        assert names == list(CORE_NAMES)
