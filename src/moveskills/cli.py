"""Move Skills CLI — install the bundled skills for Claude Desktop.

Commands:
    init        Copy every bundled skill into the Claude skills directory
"""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .installer import SkillInstaller
from .models import InstallResult, UnitAction
from .platforms import load_config

console = Console(soft_wrap=True)
logger = logging.getLogger("moveskills.cli")

HELP_HINT = 'Run "move-skills --help" for usage information'


class MoveSkillsGroup(click.Group):
    """Command group that reports unknown commands and bad usage with exit status 1."""

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except click.UsageError as exc:
            exc.exit_code = 1
            raise

    def resolve_command(self, ctx: click.Context, args: list[str]):
        cmd_name = click.utils.make_str(args[0])
        if self.get_command(ctx, cmd_name) is None:
            console.print(f"[red]Unknown command:[/red] {escape(cmd_name)}")
            console.print(HELP_HINT)
            ctx.exit(1)
        return super().resolve_command(ctx, args)


@click.group(
    cls=MoveSkillsGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"], "ignore_unknown_options": True},
)
@click.version_option(__version__, prog_name="move-skills")
@click.option("--verbose", "-v", is_flag=True, help="Log installer activity.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Move Skills CLI.

    Installs Aptos Move contract and TypeScript SDK skills for Claude Desktop.

    \b
    Usage:
      move-skills init    Install Move skills for Claude Desktop
      move-skills --help  Show this help message
    """
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    if ctx.invoked_subcommand is None:
        console.print("Move Skills CLI\n")
        console.print("Usage: move-skills init\n")
        console.print('Run "move-skills --help" for more information')


@main.command()
def init() -> None:
    """Install the Move skills into the Claude Desktop skills directory.

    Existing copies of the skills are replaced.
    """
    console.print("[bold]Initializing Move Skills for Claude Desktop...[/bold]\n")
    try:
        installer = SkillInstaller(load_config())
        result = installer.install()
    except Exception as exc:
        logger.error("Unexpected installer failure", exc_info=True)
        console.print(f"[red]Fatal error:[/red] {escape(str(exc))}")
        sys.exit(1)

    render_result(result, installer)
    if not result.success:
        sys.exit(1)


def render_result(result: InstallResult, installer: SkillInstaller) -> None:
    """Print per-unit progress, then the summary or the fatal diagnostic."""
    if result.skills_dir:
        console.print(f"Target directory: [cyan]{escape(result.skills_dir)}[/cyan]\n")

    for report in result.units:
        if report.action == UnitAction.SKIPPED:
            console.print(f"[yellow]Plugin not found:[/yellow] {report.name}, skipping...")
            continue
        verb = "Updating" if report.action == UnitAction.UPDATED else "Installing"
        console.print(f"{verb} {report.name}...")
        console.print(f"  [green]{report.name} installed successfully[/green]")

    if not result.success:
        console.print(f"[red]Error installing Move Skills:[/red] {escape(result.message)}")
        return

    console.print("\n[green]Move Skills installed successfully![/green]\n")
    console.print("Next steps:")
    console.print("  1. Restart Claude Desktop")
    console.print("  2. The skills will be available in Claude's skill selector")

    installed = set(result.installed_names)
    console.print("\nAvailable skills:")
    for unit in installer.config.units:
        if unit.name in installed:
            console.print(f"  [cyan]{unit.name}[/cyan] - {unit.description}")


if __name__ == "__main__":
    main()
