"""
Defines the main Click command group for tokenbind.

This module provides:
- The root `cli` command group.
- `bind`: bind command parameters from tokens and show the values.
- `types`: list the type names a parameter may declare.
- Parameter spec parsing and user-facing rendering of binding errors.

Parameter specs:
    TYPE            one token (str, int, bool, uuid, byte, long, ...)
    TYPE...         greedy, consume every remaining token
    TYPE?           optional, unbound when input runs out
    TYPE=DEFAULT    resolve DEFAULT when input runs out
    NAME:TYPE...    any of the above, with an explicit parameter name

Example:
    $ tokenbind bind -p count:int -p text:str... -- 3 hello world
"""

import re
import sys
from typing import Any, Final, Optional
import click
from rich.markup import escape
from rich.table import Table
from tokenbind import __version__
from tokenbind.commands.base import RichCommand, RichGroup, rich_help
from tokenbind.config.settings import appsettings, console
from tokenbind.lib.dispatcher import Dispatcher
from tokenbind.lib.errors import TokenBindError
from tokenbind.lib.log import LOG
from tokenbind.lib.registry import ResolverRegistry, registry_default, type_name
from tokenbind.models.dataModel import BindingError, BindResult, CommandParameter, ErrorKind

SPEC_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:(?P<name>[A-Za-z_]\w*):)?(?P<type>[A-Za-z_]\w*)"
    r"(?:(?P<greedy>\.\.\.)|(?P<optional>\?)|=(?P<default>.*))?$"
)


def spec_parse(spec: str, position: int, registry: ResolverRegistry) -> CommandParameter:
    """Build a CommandParameter from its command-line spec.

    Args:
        spec: Parameter spec text, see module docstring
        position: Position of the parameter in the list
        registry: Registry used to map type names to types

    Returns:
        The parameter description

    Raises:
        click.BadParameter: If the spec is malformed or names an unknown type
    """
    match: Optional[re.Match[str]] = SPEC_PATTERN.match(spec)
    if not match:
        raise click.BadParameter(f"Malformed parameter spec: {spec}")
    try:
        declared: Any = registry.type_named(match["type"])
    except KeyError:
        raise click.BadParameter(
            f"Unknown type '{match['type']}' (known: {', '.join(registry.type_names)})"
        ) from None
    return CommandParameter(
        name=match["name"] or f"arg{position}",
        type=declared,
        position=position,
        consumesAllString=bool(match["greedy"]),
        optional=bool(match["optional"]),
        default=match["default"],
    )


def bindingError_render(error: BindingError) -> str:
    """Render a binding error as a user-facing message."""
    where: str = (
        f"'{error.parameter}' (position {error.position})"
        if error.parameter is not None
        else "command"
    )
    if error.kind == ErrorKind.EXHAUSTED_INPUT:
        if error.arity:
            return f"Missing argument for {where}, expects {error.arity} token(s)"
        return f"Missing argument for {where}"
    if error.kind == ErrorKind.INVALID_NUMBER:
        kind: str = error.number_kind.value if error.number_kind else "number"
        return f"Invalid {kind} for {where}: {error.token!r}"
    if error.kind == ErrorKind.TOO_MANY_ARGUMENTS:
        return f"Too many arguments, starting at {error.token!r}"
    return f"Cannot resolve {where}: {error.message}"


def result_print(parameters: list[CommandParameter], result: BindResult) -> None:
    table: Table = Table(title="Bound parameters", border_style="cyan")
    table.add_column("#", style="yellow")
    table.add_column("name", style="cyan")
    table.add_column("type", style="magenta")
    table.add_column("value", style="green")
    for parameter, value in zip(parameters, result.values):
        table.add_row(
            str(parameter.position), parameter.name, type_name(parameter.type), escape(repr(value))
        )
    console.print(table)


@click.group(
    cls=RichGroup,
    help="""
    tokenbind

    Bind command parameters to typed values from raw tokens.
    """,
)
@click.version_option(__version__, "-V", "--version", prog_name="tokenbind")
def cli() -> None:
    """
    The root Click command group for tokenbind.
    """
    pass


@cli.command(
    cls=RichCommand,
    short_help="bind parameters from tokens",
    help=rich_help(
        command="bind",
        description="Bind parameters to values resolved from tokens",
        usage="tokenbind bind -p count:int -p text:str... -- 3 hello world",
        args={
            "-p SPEC": "parameter spec, repeat in declaration order",
            "--strict": "fail when tokens are left over",
            "TOKENS": "raw tokens, already split",
        },
    ),
)
@click.option("-p", "--param", "specs", multiple=True, required=True, help="parameter spec")
@click.option("--strict/--lenient", default=None, help="reject leftover tokens")
@click.argument("tokens", nargs=-1)
def bind(specs: tuple[str, ...], strict: Optional[bool], tokens: tuple[str, ...]) -> None:
    """
    Bind the given parameter specs against the tokens.
    """
    registry: ResolverRegistry = registry_default()
    parameters: list[CommandParameter] = [
        spec_parse(spec, position, registry) for position, spec in enumerate(specs)
    ]
    dispatcher: Dispatcher = Dispatcher(registry, reject_leftover=strict)
    try:
        result: BindResult = dispatcher.bind(parameters, tokens)
    except TokenBindError as e:
        LOG(f"Binding aborted: {e}")
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        sys.exit(2)

    if not result.success and result.error:
        console.print(f"[bold red]Error:[/bold red] {escape(bindingError_render(result.error))}")
        if appsettings.detailedOutput:
            console.print_json(result.error.model_dump_json())
        sys.exit(1)

    result_print(parameters, result)


@cli.command(
    cls=RichCommand,
    short_help="list parameter type names",
    help=rich_help(
        command="types",
        description="List the type names usable in parameter specs",
        usage="tokenbind types",
        args={"<None>": "no arguments"},
    ),
)
def types() -> None:
    """
    List the registered type names.
    """
    for name in registry_default().type_names:
        console.print(f"- [cyan]{name}[/cyan]")


# Explicitly annotate `cli` as `click.Group` for static type checking
cli: click.Group = cli
