"""Composer projects: ``composer.json`` plus ``vendor/composer/installed.json``.

Composer records every installed package in ``installed.json``. Composer 1
writes a bare list of packages, Composer 2 wraps it as
``{"packages": [...]}`` and adds an ``install-path`` relative to the
``vendor/composer`` directory. Both shapes are accepted.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from vcsverify.exceptions import ProjectError
from vcsverify.project.models import Dependency

logger = logging.getLogger(__name__)

DEFAULT_VENDOR_DIR: str = "vendor"

# Composer installs from dist archives unless told otherwise.
DEFAULT_PREFERRED_INSTALL: str = "dist"


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ProjectError(f"File not found: {path}")
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ProjectError(f"Cannot read {path}: {exc}") from exc


class ComposerProject:
    """A Composer project rooted at ``root``.

    Args:
        root: Directory holding ``composer.json``.
    """

    def __init__(self, root: Path) -> None:
        self.root = Path(root)
        manifest = _read_json(self.root / "composer.json")
        if not isinstance(manifest, dict):
            raise ProjectError(f"{self.root / 'composer.json'} must hold a JSON object")
        config = manifest.get("config") or {}
        self._config: dict[str, Any] = config if isinstance(config, dict) else {}

        vendor_dir = self._config.get("vendor-dir", DEFAULT_VENDOR_DIR)
        if not isinstance(vendor_dir, str) or not vendor_dir:
            raise ProjectError(
                f"config.vendor-dir in {self.root / 'composer.json'} must be a "
                f"non-empty string, got {vendor_dir!r}"
            )
        self._vendor_dir = vendor_dir

    @property
    def vendor_dir(self) -> Path:
        return self.root / self._vendor_dir

    def preferred_install(self) -> Any:
        value = self._config.get("preferred-install")
        return DEFAULT_PREFERRED_INSTALL if value is None else value

    def dependencies(self) -> list[Dependency]:
        installed_json = self.vendor_dir / "composer" / "installed.json"
        data = _read_json(installed_json)
        packages = data.get("packages") if isinstance(data, dict) else data
        if not isinstance(packages, list):
            raise ProjectError(f"{installed_json} has no package list")

        dependencies: list[Dependency] = []
        for package in packages:
            if not isinstance(package, dict) or "name" not in package:
                raise ProjectError(f"{installed_json} holds a package without a name")
            dependencies.append(
                Dependency(name=package["name"], install_path=self._install_path(package))
            )
        logger.debug("Found %d packages in %s", len(dependencies), installed_json)
        return dependencies

    def _install_path(self, package: dict[str, Any]) -> Path:
        install_path = package.get("install-path")
        if install_path:
            return (self.vendor_dir / "composer" / install_path).resolve()
        return self.vendor_dir / package["name"]
