"""Signature check model: the outcome of one verification command.

A ``SignatureCheck`` records a single invocation of the signature
verification tool, either against the checked-out commit or against one
tag pointing at it. Only the exit status decides the verdict; the output
text is kept verbatim for diagnostics.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class CheckKind(Enum):
    """What a signature check verified."""

    COMMIT = "commit"
    TAG = "tag"


@dataclass(frozen=True)
class SignatureCheck:
    """Immutable record of one signature verification command.

    Attributes:
        package_name: Identifier of the package the check belongs to.
        command: The exact command line that was executed.
        exit_code: Exit status of the command. 0 means the signature
            was found and is valid.
        output: Combined stdout/stderr of the command.
        kind: Whether the commit or a tag was verified.
        tag: Name of the verified tag (``None`` for commit checks).
    """

    package_name: str
    command: str
    exit_code: int
    output: str
    kind: CheckKind
    tag: str | None = None

    @classmethod
    def from_commit_check(
        cls, package_name: str, command: str, exit_code: int, output: str
    ) -> SignatureCheck:
        """Build the check for the package's checked-out ``HEAD`` commit."""
        return cls(package_name, command, exit_code, output, CheckKind.COMMIT)

    @classmethod
    def from_tag_check(
        cls,
        package_name: str,
        tag: str,
        command: str,
        exit_code: int,
        output: str,
    ) -> SignatureCheck:
        """Build the check for one tag pointing at ``HEAD``."""
        return cls(package_name, command, exit_code, output, CheckKind.TAG, tag)

    @property
    def passed(self) -> bool:
        return self.exit_code == 0

    def describe(self) -> str:
        if self.kind is CheckKind.TAG:
            return f'tag "{self.tag}"'
        return "commit HEAD"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "tag": self.tag,
            "command": self.command,
            "exit_code": self.exit_code,
            "passed": self.passed,
            "output": self.output,
        }
