"""Signature verification core for source-controlled dependencies.

Submodules:
    checks       -- CheckKind, SignatureCheck
    records      -- GitPackage, UnknownPackageFormat, VerificationPolicy
    runner       -- CommandResult, run_command
    git          -- GitBackend (command shapes, repository detection)
    engine       -- VerificationEngine (per-package check protocol)
    environment  -- pinned_environment (scoped locale pin)
    verifier     -- verify, check_dependencies, VerificationRun

All public names are re-exported here so that callers can write
``from vcsverify.core import verify``.
"""

from vcsverify.core.checks import CheckKind, SignatureCheck
from vcsverify.core.records import (
    GitPackage,
    PackageVerification,
    UnknownPackageFormat,
    VerificationPolicy,
)
from vcsverify.core.runner import CommandResult, CommandRunner, run_command
from vcsverify.core.git import GitBackend
from vcsverify.core.engine import VerificationEngine
from vcsverify.core.environment import pinned_environment
from vcsverify.core.verifier import (
    VerificationRun,
    assert_source_installation,
    check_dependencies,
    format_failure_report,
    verify,
)

__all__ = [
    "CheckKind",
    "CommandResult",
    "CommandRunner",
    "GitBackend",
    "GitPackage",
    "PackageVerification",
    "SignatureCheck",
    "UnknownPackageFormat",
    "VerificationEngine",
    "VerificationPolicy",
    "VerificationRun",
    "assert_source_installation",
    "check_dependencies",
    "format_failure_report",
    "pinned_environment",
    "run_command",
    "verify",
]
