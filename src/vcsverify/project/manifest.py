"""YAML manifest projects (``vcsverify.yaml``).

For pipelines without a supported package manager, the installed
packages can be listed by hand::

    preferred-install: source
    dependencies:
      - name: acme/http-client
        path: vendor/acme/http-client
      - name: acme/logger
        path: /opt/deps/logger

Relative paths are resolved against the manifest's directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from vcsverify.exceptions import ProjectError
from vcsverify.project.models import Dependency

MANIFEST_FILENAME: str = "vcsverify.yaml"


class ManifestProject:
    """A project described by a ``vcsverify.yaml`` manifest.

    Args:
        path: Path to the manifest file.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        try:
            data = yaml.safe_load(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            raise ProjectError(f"Manifest not found: {self.path}")
        except (OSError, yaml.YAMLError, UnicodeDecodeError) as exc:
            raise ProjectError(f"Cannot read manifest {self.path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ProjectError(f"Manifest {self.path} must be a YAML mapping")
        self._data: dict[str, Any] = data

    def preferred_install(self) -> Any:
        return self._data.get("preferred-install")

    def dependencies(self) -> list[Dependency]:
        entries = self._data.get("dependencies") or []
        if not isinstance(entries, list):
            raise ProjectError(f"'dependencies' in {self.path} must be a list")

        base = self.path.parent
        dependencies: list[Dependency] = []
        for index, entry in enumerate(entries):
            if not isinstance(entry, dict) or not entry.get("name") or not entry.get("path"):
                raise ProjectError(
                    f"Dependency #{index + 1} in {self.path} needs 'name' and 'path'"
                )
            path = Path(entry["path"])
            dependencies.append(
                Dependency(
                    name=str(entry["name"]),
                    install_path=path if path.is_absolute() else base / path,
                )
            )
        return dependencies
