"""vcsverify exception hierarchy.

All public exceptions inherit from VcsVerifyError, giving callers a single
base class to catch when they want to handle any vcsverify-specific failure
without swallowing unrelated errors.

Unsigned or unverifiable packages are not exceptions: they are recorded as
verification results and only surface, all together, through
``VerificationFailedError`` at the end of a run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from vcsverify.core.records import PackageVerification


class VcsVerifyError(Exception):
    """Base exception for all vcsverify errors."""


class ConfigurationError(VcsVerifyError):
    """Raised when the project is not installed from source control.

    Reported before any package is examined, with the configured
    installation mode in the message.
    """


class ProjectError(VcsVerifyError):
    """Raised when the project's dependency list cannot be loaded.

    Covers missing or malformed ``composer.json``, ``installed.json`` and
    ``vcsverify.yaml`` files.
    """


class CommandExecutionError(VcsVerifyError):
    """Raised when an external command cannot be executed at all.

    A missing binary, an OS-level failure or a timeout means the tooling
    is broken, which is different from a package being untrusted.

    Attributes:
        command: The command line that could not be run.
    """

    def __init__(self, command: str, reason: str) -> None:
        super().__init__(f"Could not execute `{command}`: {reason}")
        self.command = command
        self.reason = reason


class VerificationFailedError(VcsVerifyError):
    """Raised once per run when one or more packages failed verification.

    Attributes:
        failures: The failed verification records, in enumeration order.
        records: Every record of the run, verified ones included.
    """

    def __init__(
        self,
        message: str,
        failures: Sequence[PackageVerification],
        records: Sequence[PackageVerification] = (),
    ) -> None:
        super().__init__(message)
        self.failures = list(failures)
        self.records = list(records) or list(failures)
