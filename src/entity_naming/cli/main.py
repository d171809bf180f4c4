"""Main CLI entry point for entity-naming.

Subcommands are imported only when invoked, so ``entity-naming --help`` does not
load the naming service or read settings.
"""

import importlib
import sys

import click

from entity_naming import __version__
from entity_naming.utils.logger import setup_rich_logging


class LazyGroup(click.Group):
    """Click group that lazily loads subcommands only when invoked."""

    # command name -> (module path, attribute)
    commands_map = {
        "resolve": ("entity_naming.cli.resolve_cmd", "resolve"),
        "config": ("entity_naming.cli.config_cmd", "config"),
    }

    def get_command(self, ctx, cmd_name):
        """Lazily import and return the command when it's invoked."""
        if cmd_name not in self.commands_map:
            return None
        module_path, attr = self.commands_map[cmd_name]
        mod = importlib.import_module(module_path)
        return getattr(mod, attr)

    def list_commands(self, ctx):
        """Return list of available commands (for --help)."""
        return list(self.commands_map)


@click.group(cls=LazyGroup)
@click.version_option(version=__version__, prog_name="entity-naming")
def cli():
    """entity-naming - stable entity names for Python types and values.

    Use 'entity-naming COMMAND --help' for more information on a specific command.

    Examples:

    \b
      entity-naming resolve myapp.models:User
      entity-naming resolve "myapp.models:Order" --no-builtins
      entity-naming config show --format yaml
    """
    setup_rich_logging()


def main():
    """Entry point for the entity-naming CLI."""
    try:
        cli()
    except KeyboardInterrupt:
        click.echo("\nInterrupted", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
