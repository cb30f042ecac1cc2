"""Project loaders: where the installed packages come from.

Submodules:
    models    -- Dependency, Project protocol
    composer  -- ComposerProject (composer.json + installed.json)
    manifest  -- ManifestProject (vcsverify.yaml)
"""

from __future__ import annotations

from pathlib import Path

from vcsverify.exceptions import ProjectError
from vcsverify.project.composer import ComposerProject
from vcsverify.project.manifest import MANIFEST_FILENAME, ManifestProject
from vcsverify.project.models import Dependency, Project


def load_project(path: Path) -> Project:
    """Pick the project loader for ``path``.

    A YAML file, or a directory holding ``vcsverify.yaml``, is read as a
    manifest; a directory holding ``composer.json`` as a Composer project.

    Raises:
        ProjectError: If ``path`` matches neither layout.
    """
    path = Path(path)
    if path.is_file() and path.suffix in (".yaml", ".yml"):
        return ManifestProject(path)
    if (path / MANIFEST_FILENAME).is_file():
        return ManifestProject(path / MANIFEST_FILENAME)
    if (path / "composer.json").is_file():
        return ComposerProject(path)
    raise ProjectError(
        f"No {MANIFEST_FILENAME} or composer.json found at: {path}"
    )


__all__ = [
    "ComposerProject",
    "Dependency",
    "MANIFEST_FILENAME",
    "ManifestProject",
    "Project",
    "load_project",
]
