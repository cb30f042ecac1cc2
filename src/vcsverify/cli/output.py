"""Rich output formatting helpers for the vcsverify CLI.

Verification output embeds raw git and GnuPG text (``[GNUPG:]`` status
lines and the like), so it is always printed as plain ``Text`` and never
parsed as Rich markup.
"""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from vcsverify.core import GitPackage, PackageVerification, SignatureCheck

console = Console()


def _verdict(passed: bool) -> Text:
    if passed:
        return Text("VERIFIED", style="bold green")
    return Text("FAILED", style="bold red")


def _route(record: PackageVerification) -> str:
    """Which signing path verified the package, if any."""
    if not isinstance(record, GitPackage):
        return "no git metadata"
    passing = [check.describe() for check in record.checks if check.passed]
    return ", ".join(passing) if passing else "-"


def print_verification_table(records: Sequence[PackageVerification]) -> None:
    """Print a summary table with one row per package.

    Args:
        records: Verification records in enumeration order.
    """
    if not records:
        console.print("[dim]No packages installed.[/dim]")
        return

    table = Table(title="Dependency Signatures", show_header=True, header_style="bold")
    table.add_column("Package", style="bold")
    table.add_column("Status", justify="center")
    table.add_column("Checks", justify="right")
    table.add_column("Signed By", style="dim")

    for record in records:
        checks = len(record.checks) if isinstance(record, GitPackage) else 0
        table.add_row(
            record.identifier(), _verdict(record.is_verified()),
            str(checks), _route(record),
        )

    console.print(table)
    verified = sum(1 for r in records if r.is_verified())
    failed = len(records) - verified
    parts = [f"[bold]{len(records)}[/bold] packages checked"]
    if verified:
        parts.append(f"[green]{verified} verified[/green]")
    if failed:
        parts.append(f"[red]{failed} failed[/red]")
    console.print(" | ".join(parts))


def print_checks(record: PackageVerification) -> None:
    """Print every signature check of one package, output included."""
    header = Text.assemble(
        ("Package: ", "bold"), (record.identifier(), ""),
        ("  Status: ", "bold"), _verdict(record.is_verified()),
    )
    console.print(Panel(header, title="Signature Verification"))

    if not isinstance(record, GitPackage):
        console.print(Text(record.explain(), style="yellow"))
        return

    for check in record.checks:
        _print_check(check)


def _print_check(check: SignatureCheck) -> None:
    console.print(Text.assemble(
        (f"{check.describe()}: ", "bold"), _verdict(check.passed),
        (f"  (exit code {check.exit_code})", "dim"),
    ))
    console.print(Text(f"$ {check.command}", style="dim"))
    if check.output.strip():
        console.print(Text(check.output.rstrip("\n")))


def print_report(message: str) -> None:
    """Print the combined failure report."""
    console.print(Panel(Text(message), title="Verification Failed", border_style="red"))


def print_error(message: str) -> None:
    console.print(Text(f"Error: {message}", style="bold red"))
