"""CLI entry point for the batch renamer."""

from pathlib import Path

import click
from loguru import logger

from . import __version__
from .config import RunConfig
from .errors import RenamerError
from .runner import BatchRunner, select_workflow

log = logger.bind(workflow="cli")


@click.command(add_help_option=False)
@click.option("-s", "--source", default="", help="Directory (or item, for --extract) to work on.")
@click.option("-d", "--dest", default="", help="Directory for renamed/converted files. Defaults to source.")
@click.option("--prefix", default="", help="Prefix to replace; base filename for --order without TV mode.")
@click.option("--replacement", default="", help="Replaces --prefix when renaming by filename.")
@click.option("--suffix", default="", help="Removed from filenames when renaming by filename.")
@click.option("-o", "--order", is_flag=True, help="Rename files by their sort order.")
@click.option("--season", type=int, default=1, show_default=True, help="Season number for --order in TV mode.")
@click.option("--offset", type=int, default=1, show_default=True, help="First index (episode number in TV mode) for --order.")
@click.option("--tv/--no-tv", "tv_mode", default=True, show_default=True, help="SxxEyy names for --order.")
@click.option("-c", "--copy", "copy_mode", is_flag=True, help="Copy instead of move.")
@click.option("-n", "--dryrun", "dry_run", is_flag=True, help="Log actions without touching files.")
@click.option("-f", "--force", is_flag=True, help="Continue on error.")
@click.option("--dot", "include_dot_files", is_flag=True, help="Don't skip names beginning with '.'.")
@click.option("--touch", is_flag=True, help="Backdate files by one year instead of renaming.")
@click.option("--incoming", is_flag=True, help="Check the !extract folder of an incoming root.")
@click.option("--extract", is_flag=True, help="Copy/unrar one incoming item into !extract.")
@click.option("--chd", is_flag=True, help="Convert .iso/.gdi/.cue images to .chd.")
@click.option("--chdman", default=None, help="Path to the chdman binary.")
@click.option("--winrar", default=None, help="Path to the rar/unrar binary.")
@click.option("-r", "--recurse", is_flag=True, help="Recurse into subdirectories.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to .env file.",
)
@click.option("-h", "--help", "show_help", is_flag=True, help="Show this message and exit.")
@click.pass_context
def main(
    ctx: click.Context,
    source: str,
    dest: str,
    prefix: str,
    replacement: str,
    suffix: str,
    order: bool,
    season: int,
    offset: int,
    tv_mode: bool,
    copy_mode: bool,
    dry_run: bool,
    force: bool,
    include_dot_files: bool,
    touch: bool,
    incoming: bool,
    extract: bool,
    chd: bool,
    chdman: str | None,
    winrar: str | None,
    recurse: bool,
    verbose: bool,
    config_file: str | None,
    show_help: bool,
) -> None:
    """Batch rename, touch, convert, and reconcile media files."""
    click.echo(f"Complex renamer v{__version__}")

    if show_help or source == "":
        click.echo(ctx.get_help())
        ctx.exit(1)

    # Pass CLI flags as kwargs to avoid env pollution
    config_kwargs: dict = {
        "source": Path(source),
        "prefix": prefix,
        "replacement": replacement,
        "suffix": suffix,
        "season": season,
        "offset": offset,
        "tv_mode": tv_mode,
        "copy_mode": copy_mode,
        "dry_run": dry_run,
        "force": force,
        "include_dot_files": include_dot_files,
        "recurse": recurse,
        "workflow": select_workflow(extract, chd, incoming, order, touch),
    }
    if dest:
        config_kwargs["dest"] = Path(dest)
    if chdman:
        config_kwargs["chdman"] = chdman
    if winrar:
        config_kwargs["winrar"] = winrar
    if verbose:
        config_kwargs["log_level"] = "DEBUG"

    if config_file:
        config_kwargs["_env_file"] = Path(config_file)

    config = RunConfig(**config_kwargs)
    config.setup_logging()

    click.echo("Using this config:")
    click.echo(config.model_dump_json(indent=2))

    runner = BatchRunner(config)
    try:
        runner.run()
    except (RenamerError, OSError):
        ctx.exit(1)
