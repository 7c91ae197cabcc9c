"""
CLI commands for browsing the catalog.

Thin wrappers over ``tuxmate.core.data``.
"""

from __future__ import annotations

import json

import click

from tuxmate.core.models.catalog import CATEGORIES, DISTRO_IDS


@click.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def distros(as_json: bool) -> None:
    """List supported distributions."""
    from tuxmate.core.data import get_registry

    registry = get_registry()

    if as_json:
        payload = [d.model_dump(by_alias=False) for d in registry.distros]
        click.echo(json.dumps(payload, indent=2))
        return

    click.secho("🐧 Distributions:", fg="cyan", bold=True)
    for d in registry.distros:
        click.echo(f"   {d.id:<10} {d.name:<14} {d.install_prefix}")
    click.echo()


@click.command()
@click.option(
    "--distro",
    "-d",
    "distro_id",
    type=click.Choice(DISTRO_IDS),
    default=None,
    help="Mark availability for this distribution.",
)
@click.option(
    "--category",
    "-c",
    type=click.Choice(CATEGORIES),
    default=None,
    help="Only list one category.",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def apps(distro_id: str | None, category: str | None, as_json: bool) -> None:
    """List catalog apps by category."""
    from tuxmate.core.data import get_registry

    registry = get_registry()
    categories = [category] if category else registry.categories

    if as_json:
        payload = []
        for cat in categories:
            for app in registry.apps_by_category(cat):
                entry = {
                    "id": app.id,
                    "name": app.name,
                    "category": app.category,
                    "description": app.description,
                }
                if distro_id:
                    entry["package"] = app.package_for(distro_id)
                    entry["available"] = app.is_available(distro_id)
                payload.append(entry)
        click.echo(json.dumps(payload, indent=2))
        return

    for cat in categories:
        members = registry.apps_by_category(cat)
        if not members:
            continue
        click.secho(f"\n📦 {cat}", fg="cyan", bold=True)
        for app in members:
            if distro_id is None:
                click.echo(f"   {app.id:<22} {app.name}")
                continue
            pkg = app.package_for(distro_id)
            if pkg:
                click.secho("   ✓ ", fg="green", nl=False)
                click.echo(f"{app.id:<22} {app.name}  → {pkg}")
            else:
                click.secho("   ✗ ", fg="red", nl=False)
                reason = f"  ({app.unavailable_reason})" if app.unavailable_reason else ""
                click.echo(f"{app.id:<22} {app.name}{reason}")
    click.echo()
