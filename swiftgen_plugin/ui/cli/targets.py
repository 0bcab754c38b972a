"""
CLI commands for inspecting the host's targets.
"""

from __future__ import annotations

import json
import sys

import click


@click.group()
def targets() -> None:
    """Targets: what the build host would hand to the plugin."""


@targets.command("list")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_targets(ctx: click.Context, as_json: bool) -> None:
    """List targets with their module names and directories."""
    from swiftgen_plugin.core.config.loader import ConfigError
    from swiftgen_plugin.core.use_cases.common import load_host

    try:
        host = load_host(ctx.obj.get("config_path"), ctx.obj.get("host_name", "auto"))
    except ConfigError as e:
        if as_json:
            click.echo(json.dumps({"error": str(e)}, indent=2))
        else:
            click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    descriptors = host.targets()

    if as_json:
        click.echo(json.dumps({
            "host": host.name,
            "root_directory": str(host.root_directory),
            "targets": [
                {**t.to_dict(), "work_directory": str(host.work_directory(t))}
                for t in descriptors
            ],
        }, indent=2))
        return

    click.secho(f"🎯 {len(descriptors)} target(s) ({host.name})", fg="cyan", bold=True)
    for target in descriptors:
        module = target.module_name or "-"
        click.echo(f"   • {target.name:<24} {module:<24} {target.directory}")
