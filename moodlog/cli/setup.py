"""Config setup command for MoodLog CLI."""

import click
from rich.console import Console
from rich.panel import Panel

from moodlog.config import create_template_config
from moodlog.errors import ConfigError

console = Console()


@click.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing config file.")
@click.pass_context
def init(ctx: click.Context, force: bool) -> None:
    """Write a template config file.

    \b
    Examples:
      moodlog init
      moodlog init --force
      moodlog --config ./moodlog.toml init
    """
    path = (ctx.obj or {}).get("config_path")

    try:
        written = create_template_config(path, force=force)
    except ConfigError as e:
        console.print(Panel(
            f"[red]{e}[/red]",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)

    console.print(f"[green]✓ Config written to {written}[/green]")
