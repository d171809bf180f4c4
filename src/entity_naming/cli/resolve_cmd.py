"""The ``entity-naming resolve`` command.

Imports each ``module:QualName`` target and prints the entity name the naming
service assigns to it, using the settings file plus command line overrides.
"""

import click
from rich.markup import escape

from entity_naming.base.errors import ConfigurationError
from entity_naming.cli.styles import Styles, console
from entity_naming.state import create_service_from_settings
from entity_naming.utils.targets import load_target

UNRESOLVED = "<unresolved>"


@click.command(name="resolve")
@click.argument("targets", nargs=-1, required=True)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Settings file (default: ENTITY_NAMING_CONFIG or ./entity_naming.yml)",
)
@click.option("--no-builtins", is_flag=True, help="Resolve builtin types to nothing")
@click.option("--max-unwrap", type=int, default=None, help="Container unwrapping budget")
@click.option("--prefer-key", is_flag=True, help="Prefer mapping keys over values")
def resolve(targets, config_path, no_builtins, max_unwrap, prefer_key):
    """Print the entity name of each TARGET.

    TARGET is an import path such as ``myapp.models:User``. Exits with status 1
    if any target cannot be imported.

    Examples:

    \b
      entity-naming resolve myapp.models:User myapp.models:Order
      entity-naming resolve builtins:int --no-builtins
    """
    try:
        service = create_service_from_settings(config_path)
    except ConfigurationError as e:
        console.print(f"❌ {escape(str(e))}", style=Styles.ERROR, soft_wrap=True)
        raise click.exceptions.Exit(1) from e

    overrides = {}
    if no_builtins:
        overrides["include_builtins"] = False
    if max_unwrap is not None:
        overrides["max_unwrap"] = max_unwrap
    if prefer_key:
        overrides["map_prefer_elem"] = False
    if overrides:
        service.reconfigure(service.config.derive(**overrides))

    failed = False
    for target in targets:
        try:
            hint = load_target(target)
        except ConfigurationError as e:
            console.print(f"❌ {escape(str(e))}", style=Styles.ERROR, soft_wrap=True)
            failed = True
            continue
        name = service.resolve_type(hint)
        if name:
            shown = f"[{Styles.VALUE}]{escape(name)}[/{Styles.VALUE}]"
        else:
            shown = f"[{Styles.UNRESOLVED}]{UNRESOLVED}[/{Styles.UNRESOLVED}]"
        console.print(f"{escape(target)} -> {shown}", highlight=False, soft_wrap=True)

    if failed:
        raise click.exceptions.Exit(1)
