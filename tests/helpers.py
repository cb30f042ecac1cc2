"""Shared test helpers: a scripted git stand-in and fake checkouts.

``FakeGit`` replaces ``run_command`` in engine tests. It answers the
three git command shapes from per-repository scripts and records every
call, so tests can assert exactly which commands ran.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from vcsverify.core import CommandResult
from vcsverify.project import Dependency


@dataclass
class FakeRepo:
    """Scripted answers for one ``.git`` directory."""

    commit_exit: int = 1
    tags: list[str] = field(default_factory=list)
    tag_exits: dict[str, int] = field(default_factory=dict)
    tag_list_exit: int = 0


class FakeGit:
    """Callable with the ``run_command`` signature backed by ``FakeRepo``s."""

    def __init__(self, repos: dict[Path, FakeRepo] | None = None) -> None:
        self.repos = {str(path): repo for path, repo in (repos or {}).items()}
        self.calls: list[list[str]] = []

    def add(self, install_path: Path, repo: FakeRepo) -> None:
        self.repos[str(install_path / ".git")] = repo

    def __call__(
        self,
        args: Sequence[str],
        *,
        timeout: float | None = None,
    ) -> CommandResult:
        argv = tuple(str(a) for a in args)
        self.calls.append(list(argv))
        repo = self.repos[argv[2]]

        if "verify-commit" in argv:
            if repo.commit_exit == 0:
                output = 'gpg: Good signature from "Release Bot <bot@example.com>"\n'
            else:
                output = "error: no signature found\n"
            return CommandResult(argv, repo.commit_exit, output)
        if "--points-at" in argv:
            if repo.tag_list_exit != 0:
                return CommandResult(argv, repo.tag_list_exit, "fatal: bad object HEAD\n")
            return CommandResult(argv, 0, "".join(f"{t}\n" for t in repo.tags))
        if "-v" in argv:
            tag = argv[-1]
            exit_code = repo.tag_exits.get(tag, 1)
            if exit_code == 0:
                output = f'tag {tag}\ngpg: Good signature from "Release Bot"\n'
            else:
                output = f"error: no signature found for tag {tag}\n"
            return CommandResult(argv, exit_code, output)
        raise AssertionError(f"Unexpected command: {argv}")

    def calls_for(self, install_path: Path) -> list[list[str]]:
        git_dir = str(install_path / ".git")
        return [call for call in self.calls if call[2] == git_dir]


def make_checkout(root: Path, name: str) -> Dependency:
    """Create ``root/<name>/.git`` and return the matching dependency."""
    install_path = root / name
    (install_path / ".git").mkdir(parents=True)
    return Dependency(name=name, install_path=install_path)


def make_plain_install(root: Path, name: str) -> Dependency:
    """Create ``root/<name>`` without git metadata (an archive install)."""
    install_path = root / name
    install_path.mkdir(parents=True)
    (install_path / "composer.json").write_text(json.dumps({"name": name}))
    return Dependency(name=name, install_path=install_path)


class StaticProject:
    """In-memory ``Project`` for verifier tests."""

    def __init__(self, dependencies: list[Dependency], preferred_install: object = "source") -> None:
        self._dependencies = dependencies
        self._preferred_install = preferred_install
        self.enumerated = False

    def preferred_install(self) -> object:
        return self._preferred_install

    def dependencies(self) -> list[Dependency]:
        self.enumerated = True
        return list(self._dependencies)
