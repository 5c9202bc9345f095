"""
Rich help rendering for the tokenbind command line.

The group help is a usage line followed by two tables, one row per subcommand
and one row per option. Each subcommand's help is its `rich_help` text in a
panel titled with the full command path, followed by its options table.
"""

from typing import Iterable
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
import click
from tokenbind.config.settings import console

PANEL_WIDTH_MAX: int = 80


def rich_help(command: str, description: str, usage: str, args: dict[str, str]) -> str:
    """
    Build the markup shown inside a command's help panel.

    :param command: The command name.
    :param description: One-line description of the command.
    :param usage: Example invocation.
    :param args: Argument or option label mapped to its description.
    :return: Rich markup string.
    """
    lines: list[str] = [
        f"[bold cyan]{command}: {description}[/bold cyan]",
        "",
        "[bold yellow]Usage:[/bold yellow]",
        f"    [green]{usage}[/green]",
        "",
        "[bold yellow]Arguments:[/bold yellow]",
    ]
    lines.extend(f"    [green]{arg}[/green]: {desc}" for arg, desc in args.items())
    return "\n".join(lines)


def options_table(params: Iterable[click.Parameter]) -> Table | None:
    """Tabulate the click options in `params`; None when there are none."""
    options: list[click.Option] = [p for p in params if isinstance(p, click.Option)]
    if not options:
        return None
    table: Table = Table(title="Options", title_justify="left", show_header=False, box=None)
    table.add_column(style="cyan")
    table.add_column()
    for option in options:
        table.add_row(", ".join(option.opts + option.secondary_opts), option.help or "")
    return table


class RichGroup(click.Group):
    """Click group whose help lists subcommands and options as Rich tables."""

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        console.print(
            f"[bold yellow]Usage:[/bold yellow] [cyan]{ctx.info_name or ''}[/cyan] "
            f"[magenta][OPTIONS] COMMAND [ARGS]...[/magenta]\n"
        )
        if self.help:
            console.print(f"[bold cyan]{self.help.strip()}[/bold cyan]\n")

        commands: Table = Table(
            title="Available Commands", title_justify="left", border_style="green"
        )
        commands.add_column("command", style="cyan")
        commands.add_column("summary")
        for name in self.list_commands(ctx):
            command: click.Command | None = self.get_command(ctx, name)
            if command is not None and not command.hidden:
                commands.add_row(name, command.get_short_help_str())
        console.print(commands)

        options: Table | None = options_table(self.get_params(ctx))
        if options is not None:
            console.print(options)


class RichCommand(click.Command):
    """Click command whose help is a titled Rich panel plus an options table."""

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        help_text: str = self.help or "No help text available."
        widest: int = max(Text.from_markup(line).cell_len for line in help_text.splitlines())
        console.print(
            Panel(
                help_text,
                title=ctx.command_path,
                expand=False,
                width=min(widest + 4, PANEL_WIDTH_MAX),
                border_style="cyan",
            )
        )
        options: Table | None = options_table(self.get_params(ctx))
        if options is not None:
            console.print(options)
