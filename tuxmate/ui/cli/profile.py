"""
CLI commands for selection profiles (tuxmate.yml).
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from tuxmate.core.models.catalog import DISTRO_IDS


def _profile_path(ctx: click.Context, path: str | None) -> Path | None:
    if path:
        return Path(path)
    return ctx.obj.get("profile_path") if ctx.obj else None


@click.group()
def profile() -> None:
    """Selection profiles — check, init."""


@profile.command("check")
@click.argument("path", required=False, type=click.Path(dir_okay=False))
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def profile_check(ctx: click.Context, path: str | None, as_json: bool) -> None:
    """Validate a tuxmate.yml profile."""
    from tuxmate.core.use_cases.profile_check import check_profile

    result = check_profile(_profile_path(ctx, path))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        assert result.profile is not None  # guaranteed when valid
        click.secho("✅ Profile is valid", fg="green", bold=True)
        click.echo(f"   File:   {result.profile_path}")
        click.echo(f"   Distro: {result.profile.distro}")
        click.echo(f"   Apps:   {len(result.profile.apps)}")
    else:
        click.secho("❌ Profile errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        sys.exit(1)


@profile.command("init")
@click.option("--distro", "-d", "distro_id", type=click.Choice(DISTRO_IDS), required=True)
@click.option("--app", "-a", "app_ids", multiple=True, help="App id. Repeatable.")
@click.option("--helper", type=click.Choice(["yay", "paru"]), default="yay")
@click.option("--force", is_flag=True, help="Overwrite an existing file.")
@click.argument("path", required=False, type=click.Path(dir_okay=False), default="tuxmate.yml")
def profile_init(
    distro_id: str,
    app_ids: tuple[str, ...],
    helper: str,
    force: bool,
    path: str,
) -> None:
    """Save a selection to a tuxmate.yml profile."""
    from tuxmate.core.config.loader import ProfileError, save_profile
    from tuxmate.core.models.profile import Profile

    target = Path(path)
    if target.exists() and not force:
        click.secho(f"❌ {target} already exists (use --force)", fg="red")
        sys.exit(1)

    try:
        save_profile(Profile(distro=distro_id, apps=list(app_ids), helper=helper), target)
    except ProfileError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    click.secho(f"✅ Saved {target}", fg="green")
