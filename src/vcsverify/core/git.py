"""Git integration: repository detection and the three command shapes.

The engine only needs three operations from the version-control tool:
verify the checked-out commit, list the tags pointing at it, and verify
one tag. ``GitBackend`` builds the argument vectors for them so the rest
of the engine never spells out git syntax.
"""

from __future__ import annotations

from pathlib import Path


class GitBackend:
    """Builds git command lines against a package's ``.git`` directory.

    Args:
        executable: Name or path of the git binary.
    """

    def __init__(self, executable: str = "git") -> None:
        self.executable = executable

    @staticmethod
    def git_dir(install_path: Path) -> Path:
        return Path(install_path) / ".git"

    def is_repository(self, install_path: Path) -> bool:
        """True if the install path holds a git metadata directory."""
        return self.git_dir(install_path).is_dir()

    def verify_commit_args(self, git_dir: Path) -> list[str]:
        return [
            self.executable, "--git-dir", str(git_dir),
            "verify-commit", "--verbose", "HEAD",
        ]

    def tags_at_head_args(self, git_dir: Path) -> list[str]:
        return [
            self.executable, "--git-dir", str(git_dir),
            "tag", "--points-at", "HEAD",
        ]

    def verify_tag_args(self, git_dir: Path, tag: str) -> list[str]:
        return [self.executable, "--git-dir", str(git_dir), "tag", "-v", tag]

    @staticmethod
    def parse_tags(output: str) -> list[str]:
        """Split ``git tag --points-at`` output into tag names, in order."""
        return [line.strip() for line in output.splitlines() if line.strip()]
