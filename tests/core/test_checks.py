"""Tests for the signature check model.

Validates the exit-status-only verdict, the two named factories and the
reporting helpers of ``SignatureCheck``.
"""

from __future__ import annotations

import dataclasses

import pytest

from vcsverify.core import CheckKind, SignatureCheck


class TestSignatureCheckVerdict:
    """Only the exit status decides whether a check passed."""

    def test_exit_zero_passes(self) -> None:
        check = SignatureCheck.from_commit_check("pkg/a", "git verify-commit", 0, "")
        assert check.passed is True

    @pytest.mark.parametrize("exit_code", [1, 2, 128, -9])
    def test_non_zero_exit_fails(self, exit_code: int) -> None:
        check = SignatureCheck.from_commit_check("pkg/a", "cmd", exit_code, "")
        assert check.passed is False

    def test_output_text_is_not_parsed(self) -> None:
        """Output claiming a good signature does not rescue a failing exit code."""
        check = SignatureCheck.from_commit_check(
            "pkg/a", "cmd", 1, 'gpg: Good signature from "Someone"'
        )
        assert check.passed is False

    def test_error_text_does_not_fail_a_zero_exit(self) -> None:
        check = SignatureCheck.from_tag_check("pkg/a", "v1", "cmd", 0, "error: BAD")
        assert check.passed is True


class TestSignatureCheckConstruction:
    """Named factories record what was checked."""

    def test_commit_check_kind(self) -> None:
        check = SignatureCheck.from_commit_check("pkg/a", "cmd", 0, "out")
        assert check.kind is CheckKind.COMMIT
        assert check.tag is None
        assert check.describe() == "commit HEAD"

    def test_tag_check_kind(self) -> None:
        check = SignatureCheck.from_tag_check("pkg/a", "v1.0.0", "cmd", 1, "out")
        assert check.kind is CheckKind.TAG
        assert check.tag == "v1.0.0"
        assert check.describe() == 'tag "v1.0.0"'

    def test_is_immutable(self) -> None:
        check = SignatureCheck.from_commit_check("pkg/a", "cmd", 1, "out")
        with pytest.raises(dataclasses.FrozenInstanceError):
            check.exit_code = 0  # type: ignore[misc]

    def test_to_dict(self) -> None:
        check = SignatureCheck.from_tag_check("pkg/a", "v2", "git tag -v v2", 0, "ok")
        assert check.to_dict() == {
            "kind": "tag",
            "tag": "v2",
            "command": "git tag -v v2",
            "exit_code": 0,
            "passed": True,
            "output": "ok",
        }
