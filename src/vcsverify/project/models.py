"""Project-side data models.

A ``Project`` is whatever knows which packages were installed and where:
the host package manager in production, a YAML manifest or a fake in
tests. The verification core only depends on this interface.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol


@dataclass(frozen=True)
class Dependency:
    """An installed package.

    Attributes:
        name: Stable package identifier (e.g. ``acme/http-client``).
        install_path: Directory the package was installed into.
    """

    name: str
    install_path: Path


class Project(Protocol):
    """Interface to the package manager that installed the dependencies."""

    def preferred_install(self) -> Any:
        """Configured installation mode; ``"source"`` is required."""

    def dependencies(self) -> list[Dependency]:
        """Installed packages, in the package manager's own order."""
