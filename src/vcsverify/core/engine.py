"""Verification engine: the per-package signature check protocol.

For one installed package the engine:

1. Returns ``UnknownPackageFormat`` straight away when the install path
   has no ``.git`` directory. No command is run.
2. Verifies the signature of the checked-out ``HEAD`` commit.
3. Lists the tags pointing at ``HEAD`` and verifies each of them.
4. Wraps all checks, commit first and then tags in reported order, into
   a ``GitPackage`` record.

A failed signature is data, not an error. A command that cannot be
executed at all, or a tag listing that git refuses, raises
``CommandExecutionError`` and aborts the run instead of being mistaken
for an unsigned package or a package without tags.
"""

from __future__ import annotations

import logging
from pathlib import Path

from vcsverify.core.checks import SignatureCheck
from vcsverify.core.git import GitBackend
from vcsverify.core.records import (
    GitPackage,
    PackageVerification,
    UnknownPackageFormat,
    VerificationPolicy,
)
from vcsverify.core.runner import CommandResult, CommandRunner, run_command
from vcsverify.exceptions import CommandExecutionError
from vcsverify.project.models import Dependency

logger = logging.getLogger(__name__)


class VerificationEngine:
    """Runs the signature check protocol against installed packages.

    The engine holds no per-package state, so one instance can verify
    many packages, including from several threads at once.

    Args:
        runner: Callable used to execute commands. Defaults to
            ``run_command``.
        backend: Builds the git command lines.
        policy: How a package's checks are combined into a verdict.
        timeout: Optional per-command timeout in seconds.

    Usage::

        engine = VerificationEngine()
        record = engine.verify(Dependency("acme/lib", Path("vendor/acme/lib")))
        if not record.is_verified():
            print(record.explain())
    """

    def __init__(
        self,
        runner: CommandRunner = run_command,
        backend: GitBackend | None = None,
        policy: VerificationPolicy = VerificationPolicy.ANY,
        timeout: float | None = None,
    ) -> None:
        self.runner = runner
        self.backend = backend or GitBackend()
        self.policy = policy
        self.timeout = timeout

    def verify(self, dependency: Dependency) -> PackageVerification:
        """Produce the verification record for one package."""
        if not self.backend.is_repository(dependency.install_path):
            logger.info(
                "No git metadata for %s at %s",
                dependency.name, dependency.install_path,
            )
            return UnknownPackageFormat.from_non_git_package(dependency.name)

        git_dir = self.backend.git_dir(dependency.install_path)

        result = self._run(self.backend.verify_commit_args(git_dir))
        checks = [
            SignatureCheck.from_commit_check(
                dependency.name, result.command, result.exit_code, result.output
            )
        ]

        for tag in self._tags_at_head(dependency.name, git_dir):
            result = self._run(self.backend.verify_tag_args(git_dir, tag))
            checks.append(
                SignatureCheck.from_tag_check(
                    dependency.name, tag,
                    result.command, result.exit_code, result.output,
                )
            )

        record = GitPackage.from_signature_checks(
            dependency.name, *checks, policy=self.policy
        )
        if not record.is_verified():
            logger.info("Signature verification failed for %s", dependency.name)
        return record

    def _tags_at_head(self, package_name: str, git_dir: Path) -> list[str]:
        result = self._run(self.backend.tags_at_head_args(git_dir))
        if result.exit_code != 0:
            logger.error("Could not list tags for %s", package_name)
            raise CommandExecutionError(
                result.command,
                f"exit code {result.exit_code}: {result.output.strip()}",
            )
        return self.backend.parse_tags(result.output)

    def _run(self, args: list[str]) -> CommandResult:
        return self.runner(args, timeout=self.timeout)
