"""
TuxMate — CLI entrypoint.

Usage:
    tuxmate --help
    tuxmate script -d arch -a firefox -a spotify
    tuxmate command -d ubuntu -a vlc
    tuxmate profile check
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from tuxmate import __version__
from tuxmate.core.models.catalog import DISTRO_IDS
from tuxmate.core.observability.logging_config import (
    LOG_FILE_ENV,
    LOG_FILE_LEVEL_ENV,
    level_from_flags,
    setup_logging,
)

_distro_option = click.option(
    "--distro",
    "-d",
    "distro_id",
    type=click.Choice(DISTRO_IDS),
    default=None,
    help="Target distribution (default: from profile).",
)
_app_option = click.option(
    "--app",
    "-a",
    "app_ids",
    multiple=True,
    help="App id to install. Repeatable (default: from profile).",
)
_json_option = click.option(
    "--json-output", "--json", "as_json", is_flag=True, help="Output as JSON."
)


@click.group()
@click.version_option(version=__version__, prog_name="tuxmate")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--profile",
    "-p",
    "profile_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="Path to tuxmate.yml (default: auto-detect when needed).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    profile_path: str | None,
) -> None:
    """TuxMate — generate Linux app install scripts."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["profile_path"] = Path(profile_path) if profile_path else None

    setup_logging(
        level=level_from_flags(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(LOG_FILE_ENV),
        log_file_level=os.environ.get(LOG_FILE_LEVEL_ENV),
        quiet_third_party=not debug,
    )


def _selection(ctx: click.Context, distro_id: str | None, app_ids: tuple[str, ...], helper: str | None = None):
    """Build the Selection or exit 1 with the profile error."""
    from tuxmate.core.config.loader import ProfileError
    from tuxmate.core.use_cases.generate import resolve_selection

    try:
        return resolve_selection(
            distro_id,
            app_ids,
            helper=helper,
            profile_path=ctx.obj.get("profile_path"),
        )
    except ProfileError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)


def _print_notices(ctx: click.Context, result) -> None:
    """Unknown apps, AUR and unfree notices, on stderr."""
    if ctx.obj.get("quiet"):
        return
    for app_id in result.unknown_apps:
        click.secho(f"⚠️  Unknown app '{app_id}' (skipped)", fg="yellow", err=True)
    if result.aur.any:
        click.secho(
            f"⚠️  From the AUR: {', '.join(result.aur.app_names)}",
            fg="yellow",
            err=True,
        )
    if result.unfree.any:
        click.secho(
            f"⚠️  Unfree: {', '.join(result.unfree.app_names)} — "
            "set nixpkgs.config.allowUnfree = true;",
            fg="yellow",
            err=True,
        )


@cli.command()
@_distro_option
@_app_option
@click.option(
    "--helper",
    type=click.Choice(["yay", "paru"]),
    default=None,
    help="AUR helper for Arch (default: profile or yay).",
)
@click.option(
    "--output",
    "-o",
    "output",
    default=None,
    help="Write to a file, or into a directory under the suggested name. '-' = stdout.",
)
@_json_option
@click.pass_context
def script(
    ctx: click.Context,
    distro_id: str | None,
    app_ids: tuple[str, ...],
    helper: str | None,
    output: str | None,
    as_json: bool,
) -> None:
    """Generate a full install script.

    Examples:

        tuxmate script -d arch -a firefox -a spotify --helper paru

        tuxmate script -d nix -a firefox -o /etc/nixos
    """
    from tuxmate.core.use_cases.generate import generate_script

    selection = _selection(ctx, distro_id, app_ids, helper)
    result = generate_script(selection)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(1 if result.error else 0)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red", err=True)
        sys.exit(1)

    generated = result.script
    assert generated is not None  # guaranteed after error check above
    _print_notices(ctx, result)

    if output is None or output == "-":
        click.echo(generated.content)
        return

    target = Path(output)
    if target.is_dir():
        target = target / generated.filename
    try:
        target.write_text(generated.content + "\n", encoding="utf-8")
        if generated.filename.endswith(".sh"):
            target.chmod(0o755)
    except OSError as e:
        click.secho(f"❌ Cannot write {target}: {e}", fg="red", err=True)
        sys.exit(1)

    if not ctx.obj.get("quiet"):
        click.secho(f"✅ Wrote {target} ({result.package_count} packages)", fg="green", err=True)


@cli.command()
@_distro_option
@_app_option
@_json_option
@click.pass_context
def command(
    ctx: click.Context,
    distro_id: str | None,
    app_ids: tuple[str, ...],
    as_json: bool,
) -> None:
    """Print a one-line install command."""
    from tuxmate.core.use_cases.generate import generate_command

    selection = _selection(ctx, distro_id, app_ids)
    result = generate_command(selection)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(1 if result.error else 0)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red", err=True)
        sys.exit(1)

    _print_notices(ctx, result)
    click.echo(result.command)


# ── Register sub-commands from tuxmate/ui/cli/ ──────────────────

from tuxmate.ui.cli.catalog import apps, distros  # noqa: E402
from tuxmate.ui.cli.profile import profile  # noqa: E402

cli.add_command(distros)
cli.add_command(apps)
cli.add_command(profile)


if __name__ == "__main__":
    cli()
