"""``vcsverify check [PATH]`` -- Verify every installed package of a project.

Loads the project (``vcsverify.yaml`` manifest or Composer project),
requires source installation, verifies the signature of every installed
package and prints one table plus a combined report of all failures.

Exit Codes:
    0 -- Every package is signed and verified.
    1 -- One or more packages failed verification.
    2 -- Project could not be loaded, or is not installed from source.
    3 -- git could not be executed.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from vcsverify.config import VerifierSettings
from vcsverify.core import VerificationPolicy, verify
from vcsverify.exceptions import (
    CommandExecutionError,
    ConfigurationError,
    ProjectError,
    VerificationFailedError,
)
from vcsverify.project import load_project


def _fail(message: str, output_format: str, exit_code: int) -> None:
    if output_format == "json":
        click.echo(json.dumps({"error": message}))
    else:
        from vcsverify.cli.output import print_error
        print_error(message)
    sys.exit(exit_code)


@click.command("check")
@click.argument("path", type=click.Path(exists=True), default=".")
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
    help="'any': HEAD or one of its tags must be signed. 'all': every one must be.",
)
@click.option(
    "--jobs", "-j",
    type=click.IntRange(min=1),
    default=1,
    envvar="VCSVERIFY_JOBS",
    show_default=True,
    help="Number of packages verified concurrently.",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    envvar="VCSVERIFY_TIMEOUT",
    help="Seconds before a single git command is abandoned.",
)
@click.option(
    "--git", "git_executable",
    default="git",
    envvar="VCSVERIFY_GIT",
    show_default=True,
    help="git executable to run.",
)
def check_command(
    path: str,
    output_format: str,
    policy: str,
    jobs: int,
    timeout: float | None,
    git_executable: str,
) -> None:
    """Verify the signatures of all packages installed in PATH.

    PATH is a project directory (holding vcsverify.yaml or composer.json)
    or a vcsverify.yaml manifest. Defaults to the current directory.

    Exit code 0 if all packages are verified, 1 if any failed.
    """
    settings = VerifierSettings(
        git_executable=git_executable,
        timeout=timeout,
        policy=VerificationPolicy(policy),
        jobs=jobs,
    )

    try:
        project = load_project(Path(path))
        run = verify(
            project, settings.build_engine(),
            jobs=settings.jobs, locale=settings.locale,
        )
    except (ProjectError, ConfigurationError) as exc:
        _fail(str(exc), output_format, 2)
    except CommandExecutionError as exc:
        _fail(str(exc), output_format, 3)
    except VerificationFailedError as exc:
        if output_format == "json":
            click.echo(json.dumps({
                "passed": False,
                "total": len(exc.records),
                "failed": len(exc.failures),
                "packages": [r.to_dict() for r in exc.records],
                "report": str(exc),
            }, indent=2))
        else:
            from vcsverify.cli.output import print_report, print_verification_table
            print_verification_table(exc.records)
            print_report(str(exc))
        sys.exit(1)

    if output_format == "json":
        click.echo(json.dumps(run.to_dict(), indent=2))
    else:
        from vcsverify.cli.output import print_verification_table
        print_verification_table(run.records)
    sys.exit(0)
