"""Settings inspection commands.

Commands:
    - config show: Display the effective naming settings and registrations
"""

import json

import click
import yaml
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from entity_naming.base.errors import ConfigurationError
from entity_naming.cli.styles import Styles, console
from entity_naming.utils.config import ConfigBuilder, load_naming_settings


@click.group(name="config")
def config():
    """Inspect entity-naming settings.

    Examples:

    \b
      entity-naming config show
      entity-naming config show --config ./entity_naming.yml --format json
    """


@config.command(name="show")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Settings file (default: ENTITY_NAMING_CONFIG or ./entity_naming.yml)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "yaml", "json"]),
    default="table",
    help="Output format (default: table)",
)
def show(config_path: str | None, output_format: str):
    """Display the effective naming settings.

    Values come from the settings file when one is found, otherwise the
    built-in defaults are shown.
    """
    try:
        builder = ConfigBuilder(config_path)
        settings = load_naming_settings(builder=builder)
    except ConfigurationError as e:
        console.print(f"❌ Failed to load settings: {escape(str(e))}", style=Styles.ERROR, soft_wrap=True)
        raise click.Abort() from e

    source = str(builder.config_path) if builder.config_path else "<defaults>"
    data = {"source": source, **settings.model_dump()}

    if output_format == "table":
        table = Table(title="Entity naming settings", title_style=Styles.HEADER)
        table.add_column("Setting", style=Styles.LABEL)
        table.add_column("Value", style=Styles.VALUE)
        table.add_row("source", escape(source))
        for key in ("include_builtins", "max_unwrap", "map_prefer_elem"):
            table.add_row(key, str(data[key]))
        for target, name in settings.registrations.items():
            table.add_row(f"registration {escape(target)}", escape(name))
        console.print(table)
        return

    if output_format == "yaml":
        output_str = yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
    else:
        output_str = json.dumps(data, indent=2, ensure_ascii=False)
    console.print(Syntax(output_str, output_format, theme="monokai", word_wrap=True))
