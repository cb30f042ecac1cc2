"""Aggregation and reporting over a whole project.

``verify`` is the single entry point a host pipeline calls before it
finalises dependency installation. It:

1. Fails fast with ``ConfigurationError`` unless packages were installed
   from source (before any package is examined).
2. Pins the child-process locale for the whole run.
3. Verifies every package, never stopping at the first failure.
4. Raises one ``VerificationFailedError`` listing every failing package,
   or returns quietly when all of them are verified.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Sequence

from vcsverify.core.engine import VerificationEngine
from vcsverify.core.environment import (
    DETERMINISTIC_LOCALE_VALUE,
    DETERMINISTIC_LOCALE_VARIABLE,
    pinned_environment,
)
from vcsverify.core.records import PackageVerification
from vcsverify.exceptions import ConfigurationError, VerificationFailedError
from vcsverify.project.models import Dependency, Project

logger = logging.getLogger(__name__)

SOURCE_INSTALLATION: str = "source"

REPORT_HEADER: str = "The following packages need to be signed and verified:"


@dataclass
class VerificationRun:
    """All records produced by one run, in enumeration order.

    Attributes:
        records: One record per package.
    """

    records: list[PackageVerification] = field(default_factory=list)

    @property
    def verified(self) -> list[PackageVerification]:
        return [r for r in self.records if r.is_verified()]

    @property
    def failed(self) -> list[PackageVerification]:
        return [r for r in self.records if not r.is_verified()]

    @property
    def passed(self) -> bool:
        return not self.failed

    def report(self) -> str:
        return format_failure_report(self.failed)

    def to_dict(self) -> dict[str, Any]:
        return {
            "passed": self.passed,
            "total": len(self.records),
            "verified": len(self.verified),
            "failed": len(self.failed),
            "packages": [r.to_dict() for r in self.records],
        }


def assert_source_installation(preferred_install: Any) -> None:
    """Raise unless the project installs its packages from source.

    Raises:
        ConfigurationError: If ``preferred_install`` is not exactly
            ``"source"``.
    """
    if preferred_install == SOURCE_INSTALLATION:
        return
    if preferred_install is None:
        found = "it is not set"
    else:
        found = f'found "{preferred_install}" instead'
    raise ConfigurationError(
        f'Expected installation "preferred-install" to be '
        f'"{SOURCE_INSTALLATION}", {found}'
    )


def format_failure_report(failed: Sequence[PackageVerification]) -> str:
    """Combine the explanations of all failed packages into one message."""
    sections = [f"{record.identifier()}:\n{record.explain()}" for record in failed]
    return REPORT_HEADER + "\n" + "\n\n".join(sections)


def check_dependencies(
    dependencies: Sequence[Dependency],
    engine: VerificationEngine,
    *,
    jobs: int = 1,
    locale: str = DETERMINISTIC_LOCALE_VALUE,
) -> VerificationRun:
    """Verify every dependency under a single run-wide locale pin.

    Args:
        dependencies: Packages to verify, in enumeration order.
        engine: The engine to run against each package.
        jobs: Number of packages verified concurrently. Records keep the
            order of ``dependencies`` whatever the value.
        locale: Value pinned into the locale variable during the run.

    Returns:
        The run's records, one per dependency.
    """
    with pinned_environment(DETERMINISTIC_LOCALE_VARIABLE, locale):
        if jobs > 1 and len(dependencies) > 1:
            with ThreadPoolExecutor(max_workers=jobs) as pool:
                records = list(pool.map(engine.verify, dependencies))
        else:
            records = [engine.verify(dependency) for dependency in dependencies]

    run = VerificationRun(records=records)
    logger.info(
        "Checked %d packages: %d verified, %d failed",
        len(run.records), len(run.verified), len(run.failed),
    )
    return run


def verify(
    project: Project,
    engine: VerificationEngine | None = None,
    *,
    jobs: int = 1,
    locale: str = DETERMINISTIC_LOCALE_VALUE,
) -> VerificationRun:
    """Verify all packages of ``project``; the host pipeline entry point.

    Raises:
        ConfigurationError: If the project does not install from source.
        CommandExecutionError: If git cannot be executed.
        VerificationFailedError: If any package failed verification.
    """
    assert_source_installation(project.preferred_install())

    run = check_dependencies(
        project.dependencies(),
        engine or VerificationEngine(),
        jobs=jobs,
        locale=locale,
    )
    if not run.passed:
        raise VerificationFailedError(run.report(), run.failed, run.records)
    return run
