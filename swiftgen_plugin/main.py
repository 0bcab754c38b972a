"""
SwiftGen plugin: CLI entrypoint.

Usage:
    swiftgen-plugin --help
    swiftgen-plugin plan
    swiftgen-plugin plan MyTarget --json
    swiftgen-plugin locate
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from swiftgen_plugin import __version__
from swiftgen_plugin.core.observability.logging_config import (
    ENV_LOG_FILE,
    ENV_LOG_FILE_LEVEL,
    ENV_LOG_LEVEL,
    setup_logging,
)

HOST_CHOICES = ("auto", "package", "xcode")


def _parse_tools(values: tuple[str, ...]) -> dict[str, str]:
    tools: dict[str, str] = {}
    for value in values:
        name, sep, path = value.partition("=")
        if not sep or not name or not path:
            raise click.BadParameter(f"expected NAME=PATH, got {value!r}", param_hint="--tool")
        tools[name] = path
    return tools


@click.group()
@click.version_option(version=__version__, prog_name="swiftgen-plugin")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to Package.yml or XcodeProject.yml (default: auto-detect).",
)
@click.option(
    "--host",
    "host_name",
    type=click.Choice(HOST_CHOICES),
    default="auto",
    show_default=True,
    help="Build host flavour.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
    host_name: str,
) -> None:
    """SwiftGen plugin: plan pre-build code generation for each target."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None
    ctx.obj["host_name"] = host_name

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get(ENV_LOG_LEVEL, "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get(ENV_LOG_FILE),
        log_file_level=os.environ.get(ENV_LOG_FILE_LEVEL),
        quiet_third_party=not debug,
    )


@cli.command()
@click.argument("targets", nargs=-1)
@click.option(
    "--tool",
    "tools",
    multiple=True,
    metavar="NAME=PATH",
    help="Use PATH for the named tool (repeatable).",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def plan(ctx: click.Context, targets: tuple[str, ...], tools: tuple[str, ...], as_json: bool) -> None:
    """Plan generator commands for TARGETS (default: all targets)."""
    from swiftgen_plugin.core.use_cases.plan import run_plan

    result = run_plan(
        config_path=ctx.obj.get("config_path"),
        host_name=ctx.obj.get("host_name", "auto"),
        target_names=list(targets),
        tools=_parse_tools(tools),
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.ok else 1)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    quiet = ctx.obj.get("quiet", False)
    if not quiet:
        click.secho(f"\n🛠  {result.host} @ {result.root_directory}", fg="cyan", bold=True)

    for name in result.unknown_targets:
        click.secho(f"   ❌ Unknown target: {name}", fg="red")

    for target_plan in result.targets:
        target = target_plan.target
        click.echo()
        click.secho(f"   {target.name}", fg="white", bold=True, nl=False)
        if target.module_name:
            click.echo(f" ({target.module_name})")
        else:
            click.echo()

        if target_plan.error:
            click.secho(f"     ❌ {target_plan.error}", fg="red")
            continue

        # diagnostics reach stderr through logging
        if not target_plan.commands:
            click.secho("     skipped (no configuration)", fg="yellow")

        for command in target_plan.commands:
            click.echo(f"     • {command.display_name}")
            click.echo(f"       $ {' '.join(command.argv)}")
            if not quiet:
                for key, value in command.environment.items():
                    click.echo(f"         {key}={value}")
                click.echo(f"       → {command.output_directory}")

    click.echo()
    click.echo(f"   Commands: {result.command_count}")
    click.echo()

    if not result.ok:
        sys.exit(1)


@cli.command()
@click.argument("targets", nargs=-1)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def locate(ctx: click.Context, targets: tuple[str, ...], as_json: bool) -> None:
    """Show where swiftgen.yml is looked up for each target."""
    from swiftgen_plugin.core.use_cases.locate import run_locate

    result = run_locate(
        config_path=ctx.obj.get("config_path"),
        host_name=ctx.obj.get("host_name", "auto"),
        target_names=list(targets),
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(1 if result.error or result.unknown_targets else 0)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    for name in result.unknown_targets:
        click.secho(f"❌ Unknown target: {name}", fg="red")

    for entry in result.targets:
        click.secho(f"📂 {entry.target.name}", fg="cyan", bold=True)
        for path in entry.candidates:
            if path.is_file():
                click.secho(f"   ✓ {path}", fg="green")
            else:
                click.echo(f"   · {path}")

    if result.unknown_targets:
        sys.exit(1)


# ── Register sub-command groups from swiftgen_plugin/ui/cli/ ────

from swiftgen_plugin.ui.cli.targets import targets

cli.add_command(targets)


if __name__ == "__main__":
    cli()
