"""Tests for the git command shapes and repository detection."""

from __future__ import annotations

from pathlib import Path

from vcsverify.core import GitBackend


class TestGitBackend:
    def test_repository_detection(self, tmp_path: Path) -> None:
        backend = GitBackend()
        assert not backend.is_repository(tmp_path)
        (tmp_path / ".git").mkdir()
        assert backend.is_repository(tmp_path)

    def test_command_shapes(self, tmp_path: Path) -> None:
        backend = GitBackend("git")
        git_dir = backend.git_dir(tmp_path)
        assert git_dir == tmp_path / ".git"
        assert backend.verify_commit_args(git_dir) == [
            "git", "--git-dir", str(git_dir), "verify-commit", "--verbose", "HEAD",
        ]
        assert backend.tags_at_head_args(git_dir) == [
            "git", "--git-dir", str(git_dir), "tag", "--points-at", "HEAD",
        ]
        assert backend.verify_tag_args(git_dir, "v1.0.0") == [
            "git", "--git-dir", str(git_dir), "tag", "-v", "v1.0.0",
        ]

    def test_parse_tags_skips_blank_lines(self) -> None:
        assert GitBackend.parse_tags("v1.0.0\n\n  latest \n") == ["v1.0.0", "latest"]
        assert GitBackend.parse_tags("") == []
