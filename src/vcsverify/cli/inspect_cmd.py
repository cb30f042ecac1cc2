"""``vcsverify inspect <package-path>`` -- Show the signature checks of one checkout.

Runs the verification protocol against a single installed package and
prints every check: the commit check, then one check per tag pointing
at HEAD, each with its command and raw git output. No project or
installation-mode check is involved, which makes it the tool for
debugging a failure reported by ``vcsverify check``.

Exit Codes:
    0 -- Package is verified.
    1 -- Package failed verification.
    3 -- git could not be executed.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from vcsverify.config import VerifierSettings
from vcsverify.core import VerificationPolicy, check_dependencies
from vcsverify.exceptions import CommandExecutionError
from vcsverify.project import Dependency


@click.command("inspect")
@click.argument("package_path", type=click.Path(exists=True, file_okay=False))
@click.option(
    "--name", default=None,
    help="Package name to report (default: the directory name).",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.option(
    "--policy",
    type=click.Choice([p.value for p in VerificationPolicy]),
    default=VerificationPolicy.ANY.value,
    envvar="VCSVERIFY_POLICY",
    show_default=True,
    help="How the commit and tag checks are combined.",
)
@click.option(
    "--git", "git_executable",
    default="git",
    envvar="VCSVERIFY_GIT",
    show_default=True,
    help="git executable to run.",
)
def inspect_command(
    package_path: str,
    name: str | None,
    output_format: str,
    policy: str,
    git_executable: str,
) -> None:
    """Show every signature check run against the checkout at PACKAGE_PATH."""
    target = Path(package_path)
    dependency = Dependency(name=name or target.resolve().name, install_path=target)
    settings = VerifierSettings(
        git_executable=git_executable, policy=VerificationPolicy(policy)
    )

    try:
        run = check_dependencies(
            [dependency], settings.build_engine(), locale=settings.locale
        )
    except CommandExecutionError as exc:
        if output_format == "json":
            click.echo(json.dumps({"error": str(exc)}))
        else:
            from vcsverify.cli.output import print_error
            print_error(str(exc))
        sys.exit(3)

    record = run.records[0]
    if output_format == "json":
        click.echo(json.dumps(record.to_dict(), indent=2))
    else:
        from vcsverify.cli.output import print_checks
        print_checks(record)

    sys.exit(0 if record.is_verified() else 1)
