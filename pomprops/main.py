"""
pomprops — CLI entrypoint.

Usage:
    python -m pomprops.main --help
    python -m pomprops.main write
    python -m pomprops.main config check
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from pomprops import __version__
from pomprops.core.models.build import BuildKind
from pomprops.core.observability.logging_config import resolve_level, setup_from_environment


@click.group()
@click.version_option(version=__version__, prog_name="pomprops")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to pomprops.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """pomprops — write Maven archiver metadata (pom.properties, pom.xml) into build output."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_from_environment(resolve_level(debug=debug, verbose=verbose, quiet=quiet), debug=debug)


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option(
    "--output-root",
    "-o",
    type=click.Path(file_okay=False),
    default=None,
    help="Override the configured output root.",
)
@click.option(
    "--kind",
    type=click.Choice([k.value for k in BuildKind]),
    default=BuildKind.INCREMENTAL.value,
    show_default=True,
    help="Build kind to run as.",
)
@click.option(
    "--mock",
    is_flag=True,
    help="Write the pom files to memory only (the audit ledger is still recorded).",
)
@click.option("--no-audit", is_flag=True, help="Don't record the run in the audit ledger.")
@click.pass_context
def write(
    ctx: click.Context,
    as_json: bool,
    output_root: str | None,
    kind: str,
    mock: bool,
    no_audit: bool,
) -> None:
    """Create or refresh pom.properties and pom.xml.

    Examples:

        pomprops write

        pomprops write --output-root build/classes

        pomprops write --kind full --mock
    """
    from pomprops.core.use_cases.materialize import run_materialize

    result = run_materialize(
        config_path=ctx.obj.get("config_path"),
        output_root=output_root,
        kind=kind,
        mock_mode=mock,
        audit=not no_audit,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if result.error:
            sys.exit(1)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    assert result.config is not None
    quiet = ctx.obj.get("quiet", False)
    mode_label = "[mock] " if mock else ""

    if result.skipped:
        if not quiet:
            click.secho(f"⊘ {mode_label}{kind} build — nothing to write", fg="yellow")
        return

    report = result.report
    assert report is not None

    if not quiet:
        click.secho(f"\n📦 {mode_label}{result.config.coordinates}", fg="cyan", bold=True)
        click.echo(f"   → {report.destination}")
        click.echo()

    for receipt in report.receipts:
        action = "created" if receipt.created else "replaced"
        click.secho(f"   ✓ {receipt.file} ", fg="green", nl=False)
        click.echo(f"({action}, {receipt.size} bytes)")

    if not quiet:
        click.echo()


@cli.command("path")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--output-root", "-o", type=click.Path(file_okay=False), default=None)
@click.pass_context
def destination(ctx: click.Context, as_json: bool, output_root: str | None) -> None:
    """Print the destination folder for the configured coordinates."""
    from pomprops.core.use_cases.show import show_output

    result = show_output(config_path=ctx.obj.get("config_path"), output_root=output_root)

    if as_json:
        data = {"error": result.error} if result.error else {"destination": str(result.destination)}
        click.echo(json.dumps(data))
        if result.error:
            sys.exit(1)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    click.echo(str(result.destination))


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--output-root", "-o", type=click.Path(file_okay=False), default=None)
@click.pass_context
def show(ctx: click.Context, as_json: bool, output_root: str | None) -> None:
    """Show the generated pom.properties entries."""
    from pomprops.core.use_cases.show import show_output

    result = show_output(config_path=ctx.obj.get("config_path"), output_root=output_root)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if result.error:
            sys.exit(1)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    click.secho(f"\n📁 {result.destination}", fg="cyan", bold=True)
    if not result.has_properties:
        click.secho("   pom.properties not written yet. Run 'pomprops write'.", fg="yellow")
        click.echo()
        return

    for key, value in result.properties.items():
        click.echo(f"   {key} = {value}")
    if result.pom_size is not None:
        click.echo(f"   pom.xml: {result.pom_size} bytes")
    click.echo()


@cli.group()
def config() -> None:
    """Configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate pomprops.yml."""
    from pomprops.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        assert result.config is not None  # guaranteed when valid
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   Coordinates: {result.config.coordinates}")
        click.echo(f"   Destination: {result.destination}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)

    click.echo()


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("-n", "count", default=10, show_default=True, help="Number of entries.")
@click.pass_context
def history(ctx: click.Context, as_json: bool, count: int) -> None:
    """Show recent write runs from the audit ledger."""
    from pomprops.core.config.loader import config_dir, find_config_file
    from pomprops.core.persistence.audit import AuditWriter, default_audit_path

    config_path: Path | None = ctx.obj.get("config_path") or find_config_file()
    base = config_dir(config_path) if config_path else Path.cwd()
    entries = AuditWriter(default_audit_path(base)).read_recent(count)

    if as_json:
        click.echo(json.dumps([e.model_dump(mode="json") for e in entries], indent=2))
        return

    if not entries:
        click.echo("No recorded runs.")
        return

    status_colors = {"ok": "green", "skipped": "yellow", "failed": "red"}
    for entry in entries:
        mock_label = " [mock]" if entry.mock else ""
        click.echo(f"   {entry.timestamp}  {entry.coordinates}  {entry.build_kind}{mock_label} ", nl=False)
        click.secho(entry.status, fg=status_colors.get(entry.status, "white"))
        for err in entry.errors:
            click.echo(f"     │ {err}")


if __name__ == "__main__":
    cli()
