"""Per-package verification records.

Every package examined in a run yields exactly one record, one of two
variants of the ``PackageVerification`` union:

- ``GitPackage`` -- the package is a git checkout and was checked. It
  carries the commit check plus one check per tag pointing at ``HEAD``.
- ``UnknownPackageFormat`` -- the package has no git metadata, so nothing
  could be checked. It is never verified.

Both variants answer the same three questions: ``identifier()``,
``is_verified()`` and ``explain()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from vcsverify.core.checks import CheckKind, SignatureCheck


class VerificationPolicy(Enum):
    """How the signature checks of a checked package are combined.

    - **ANY**: the package is verified if the commit or any tag pointing
      at it has a valid signature. Supports projects that sign release
      tags rather than every commit.
    - **ALL**: every check (the commit and every tag) must pass.
    """

    ANY = "any"
    ALL = "all"


@dataclass(frozen=True)
class GitPackage:
    """A git checkout whose commit and tags were signature-checked.

    Attributes:
        package_name: Identifier of the package.
        checks: The commit check first, then one check per tag in the
            order git reported the tags. Never empty.
        policy: How ``checks`` are combined into a verdict.
    """

    package_name: str
    checks: tuple[SignatureCheck, ...]
    policy: VerificationPolicy = VerificationPolicy.ANY

    @classmethod
    def from_signature_checks(
        cls,
        package_name: str,
        *checks: SignatureCheck,
        policy: VerificationPolicy = VerificationPolicy.ANY,
    ) -> GitPackage:
        """Build a record from the checks run against one package.

        Raises:
            ValueError: If no checks are given, or a check belongs to a
                different package.
        """
        if not checks:
            raise ValueError(
                f'Package "{package_name}" needs at least one signature check'
            )
        for check in checks:
            if check.package_name != package_name:
                raise ValueError(
                    f'Signature check for "{check.package_name}" cannot be '
                    f'attached to package "{package_name}"'
                )
        return cls(package_name, tuple(checks), policy)

    def identifier(self) -> str:
        return self.package_name

    def is_verified(self) -> bool:
        if self.policy is VerificationPolicy.ALL:
            return all(check.passed for check in self.checks)
        return any(check.passed for check in self.checks)

    @property
    def failed_checks(self) -> list[SignatureCheck]:
        return [check for check in self.checks if not check.passed]

    def explain(self) -> str:
        """Describe every failed check with its command and raw output."""
        if self.is_verified():
            return f'Package "{self.package_name}" is signed and verified'

        tag_count = sum(1 for c in self.checks if c.kind is CheckKind.TAG)
        lines = [
            f'The following GIT GPG signature checks have failed for package '
            f'"{self.package_name}" ({tag_count} tag(s) point at HEAD, '
            f'policy: {self.policy.value}):',
        ]
        for check in self.failed_checks:
            lines.append("")
            lines.append(f"Checking {check.describe()} (exit code {check.exit_code}):")
            lines.append(f"$ {check.command}")
            lines.append(check.output.rstrip("\n") or "(no output)")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "package": self.package_name,
            "format": "git",
            "verified": self.is_verified(),
            "policy": self.policy.value,
            "checks": [check.to_dict() for check in self.checks],
        }


@dataclass(frozen=True)
class UnknownPackageFormat:
    """A package installed without git metadata; it cannot be verified."""

    package_name: str

    @classmethod
    def from_non_git_package(cls, package_name: str) -> UnknownPackageFormat:
        return cls(package_name)

    def identifier(self) -> str:
        return self.package_name

    def is_verified(self) -> bool:
        return False

    def explain(self) -> str:
        return (
            f'Package "{self.package_name}" is in a format that vcsverify '
            f"cannot verify: try forcing it to be downloaded as GIT repository "
            f'(set "preferred-install" to "source" and reinstall it)'
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "package": self.package_name,
            "format": "unknown",
            "verified": False,
            "policy": None,
            "checks": [],
        }


PackageVerification = Union[GitPackage, UnknownPackageFormat]
