"""Tests for ``vcsverify inspect``."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from vcsverify.cli.main import cli
from vcsverify.config import VerifierSettings
from vcsverify.core import VerificationEngine
from tests.helpers import FakeGit, FakeRepo, make_checkout, make_plain_install


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def patched_git(monkeypatch: pytest.MonkeyPatch, fake_git: FakeGit) -> FakeGit:
    monkeypatch.setattr(
        VerifierSettings, "build_engine",
        lambda self: VerificationEngine(runner=fake_git, policy=self.policy),
    )
    return fake_git


class TestInspect:
    def test_signed_tag_shows_each_check(
        self, runner: CliRunner, tmp_path: Path, patched_git: FakeGit
    ) -> None:
        dep = make_checkout(tmp_path, "http-client")
        patched_git.add(
            dep.install_path,
            FakeRepo(tags=["v1.0.0"], tag_exits={"v1.0.0": 0}),
        )

        result = runner.invoke(cli, ["inspect", str(dep.install_path)])

        assert result.exit_code == 0, result.output
        assert "http-client" in result.output
        assert "commit HEAD" in result.output
        assert 'tag "v1.0.0"' in result.output
        assert "Good signature" in result.output

    def test_unsigned_exits_1_json(
        self, runner: CliRunner, tmp_path: Path, patched_git: FakeGit
    ) -> None:
        dep = make_checkout(tmp_path, "logger")
        patched_git.add(dep.install_path, FakeRepo())

        result = runner.invoke(
            cli,
            ["inspect", str(dep.install_path), "--name", "acme/logger", "--format", "json"],
        )

        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["package"] == "acme/logger"
        assert data["verified"] is False
        assert data["checks"][0]["exit_code"] == 1

    def test_not_a_checkout(
        self, runner: CliRunner, tmp_path: Path, patched_git: FakeGit
    ) -> None:
        dep = make_plain_install(tmp_path, "archive")
        result = runner.invoke(cli, ["inspect", str(dep.install_path)])
        assert result.exit_code == 1
        assert "cannot verify" in result.output
        assert patched_git.calls == []

    def test_missing_git_exits_3(self, runner: CliRunner, tmp_path: Path) -> None:
        dep = make_checkout(tmp_path, "pkg")
        result = runner.invoke(
            cli, ["inspect", str(dep.install_path), "--git", "/nonexistent/bin/git-xyz"]
        )
        assert result.exit_code == 3
