"""Tests for the git-link command line."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from git_link.cli import cli, format_error_chain
from git_link.core.exceptions import DetachedHeadError, GitLinkError
from tests.conftest import git


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def in_repo(git_repo: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(git_repo)
    return git_repo


@pytest.mark.integration
class TestCli:
    """Tests for the git-link command."""

    def test_branch_link(self, runner: CliRunner, in_repo: Path) -> None:
        result = runner.invoke(cli, ["src/lib.X", "--line-number", "42", "--ref-type", "branch"])
        assert result.exit_code == 0
        assert result.output == "https://github.com/acme/widget/blob/main/src/lib.X#L42\n"

    def test_short_options(self, runner: CliRunner, in_repo: Path, head_sha: str) -> None:
        result = runner.invoke(cli, ["README.md", "-l", "3", "-r", "commit"])
        assert result.exit_code == 0
        expected = f"https://github.com/acme/widget/blob/{head_sha.upper()}/README.md#L3"
        assert result.output.strip() == expected

    def test_hash_options(self, runner: CliRunner, in_repo: Path, head_sha: str) -> None:
        result = runner.invoke(
            cli, ["README.md", "-r", "commit", "--hash-case", "lower", "--short-hash", "10"]
        )
        assert result.exit_code == 0
        assert f"/blob/{head_sha[:10]}/README.md" in result.output

    def test_hash_settings_from_environment(
        self,
        runner: CliRunner,
        in_repo: Path,
        head_sha: str,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("GIT_LINK_HASH_CASE", "lower")
        monkeypatch.setenv("GIT_LINK_HASH_LENGTH", "7")
        result = runner.invoke(cli, ["README.md", "-r", "commit"])
        assert result.exit_code == 0
        assert f"/blob/{head_sha[:7]}/README.md" in result.output

    def test_invalid_ref_type(self, runner: CliRunner, in_repo: Path) -> None:
        result = runner.invoke(cli, ["README.md", "-r", "tag"])
        assert result.exit_code == 1
        assert 'Unsupported ref type, acceptable values are "branch" and "commit"' in result.output

    def test_ref_type_required(self, runner: CliRunner, in_repo: Path) -> None:
        result = runner.invoke(cli, ["README.md"])
        assert result.exit_code == 2

    def test_line_number_must_be_positive(self, runner: CliRunner, in_repo: Path) -> None:
        result = runner.invoke(cli, ["README.md", "-r", "branch", "-l", "0"])
        assert result.exit_code == 2

    @pytest.mark.parametrize(
        ("variable", "value"),
        [("GIT_LINK_HASH_CASE", "title"), ("GIT_LINK_HASH_LENGTH", "0")],
    )
    def test_invalid_setting(
        self,
        runner: CliRunner,
        in_repo: Path,
        monkeypatch: pytest.MonkeyPatch,
        variable: str,
        value: str,
    ) -> None:
        monkeypatch.setenv(variable, value)
        result = runner.invoke(cli, ["README.md", "-r", "commit"])
        assert result.exit_code == 1
        assert f"Error: Invalid setting {variable}" in result.output
        assert "https://" not in result.output

    def test_missing_file(self, runner: CliRunner, in_repo: Path) -> None:
        result = runner.invoke(cli, ["nope.txt", "-r", "branch"])
        assert result.exit_code == 1
        assert "Error: The referenced file does not exist." in result.output
        assert "https://" not in result.output

    def test_detached_head(self, runner: CliRunner, in_repo: Path) -> None:
        git(in_repo, "checkout", "-q", "--detach")
        result = runner.invoke(cli, ["README.md", "-r", "branch"])
        assert result.exit_code == 1
        assert 'Error: No branch points to the current HEAD. Try using "commit"' in result.output

    def test_unsupported_host(self, runner: CliRunner, in_repo: Path) -> None:
        git(in_repo, "remote", "set-url", "origin", "git@gitlab.com:acme/widget.git")
        result = runner.invoke(cli, ["README.md", "-r", "branch"])
        assert result.exit_code == 1
        assert "Error: Only github origins are supported right now" in result.output


@pytest.mark.unit
class TestFormatErrorChain:
    """Tests for format_error_chain."""

    def test_single_error(self) -> None:
        error = DetachedHeadError('No branch points to the current HEAD. Try using "commit"')
        assert format_error_chain(error) == [
            'Error: No branch points to the current HEAD. Try using "commit"'
        ]

    def test_chain_outermost_first(self) -> None:
        try:
            try:
                b"\xff".decode("utf-8")
            except UnicodeDecodeError as exc:
                raise GitLinkError("Origin URL was not valid UTF-8") from exc
        except GitLinkError as error:
            lines = format_error_chain(error)
        assert lines[0] == "Error: Origin URL was not valid UTF-8"
        assert lines[1].startswith("Caused by: 'utf-8' codec can't decode")
        assert len(lines) == 2
