"""Runtime settings for a verification run.

Settings come from CLI options, each of which can also be supplied
through an environment variable (see ``vcsverify check --help``).
"""

from __future__ import annotations

from dataclasses import dataclass

from vcsverify.core import GitBackend, VerificationEngine, VerificationPolicy
from vcsverify.core.environment import DETERMINISTIC_LOCALE_VALUE


@dataclass
class VerifierSettings:
    """Knobs for the engine and the run.

    Attributes:
        git_executable: git binary used for every check.
        timeout: Per-command timeout in seconds (``None`` waits forever).
        policy: How a package's signature checks are combined.
        jobs: Packages verified concurrently.
        locale: Value pinned into ``LANGUAGE`` during the run.
    """

    git_executable: str = "git"
    timeout: float | None = None
    policy: VerificationPolicy = VerificationPolicy.ANY
    jobs: int = 1
    locale: str = DETERMINISTIC_LOCALE_VALUE

    def validate(self) -> None:
        """Raise ValueError on out-of-range settings."""
        if self.jobs < 1:
            raise ValueError(f"jobs must be >= 1, got {self.jobs}")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

    def build_engine(self) -> VerificationEngine:
        self.validate()
        return VerificationEngine(
            backend=GitBackend(self.git_executable),
            policy=self.policy,
            timeout=self.timeout,
        )
