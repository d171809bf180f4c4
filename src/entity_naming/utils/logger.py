"""
Component Logger Framework

Provides colored logging for naming components with:
- Unified API for every component (service, builder, CLI)
- Rich terminal output with component-specific colors
- Graceful fallbacks when settings are unavailable

Component loggers only emit records under the ``entity_naming`` logger
hierarchy. Handlers belong to the application: the CLI installs a Rich handler
with :func:`setup_rich_logging`, and host applications keep whatever logging
configuration they already have.

Usage:
    logger = get_logger("naming_service")
    logger.key_info("Reconfigured")
    logger.debug("Detailed trace")
    logger.success("Operation completed")
    logger.warning("Something to note")
    logger.error("Something went wrong")

    # Custom loggers with explicit parameters
    logger = get_logger(name="custom_component", color="blue")
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from entity_naming.base.errors import ConfigurationError
from entity_naming.utils.config import get_config_value


class ComponentLogger:
    """
    Rich-formatted logger with a per-component color and message hierarchy.

    Message Types:
    - key_info: Important operational information
    - info: Normal operational messages
    - debug: Detailed tracing information
    - warning: Warning messages
    - error: Error messages
    - success: Success messages
    """

    def __init__(self, base_logger: logging.Logger, component_name: str, color: str | None = "white"):
        """
        Initialize component logger.

        Args:
            base_logger: Underlying Python logger
            component_name: Name of the component (e.g., 'naming_service')
            color: Rich color name for this component, or None to read
                ``logging.logging_colors.<component_name>`` on first use
        """
        self.base_logger = base_logger
        self.component_name = component_name
        self._color = color

    @property
    def color(self) -> str:
        if self._color is None:
            try:
                self._color = get_config_value(f"logging.logging_colors.{self.component_name}") or "white"
            except ConfigurationError:
                self._color = "white"
        return self._color

    def _format_message(self, message: str, style: str, emoji: str = "") -> str:
        """Format message with Rich markup and emoji prefix."""
        prefix = f"{emoji}{self.component_name.replace('_', ' ').title()}: "
        if style:
            return f"[{style}]{prefix}{message}[/{style}]"
        return f"{prefix}{message}"

    def key_info(self, message: str) -> None:
        style = f"bold {self.color}" if self.color != "white" else "bold white"
        self.base_logger.info(self._format_message(message, style))

    def info(self, message: str) -> None:
        self.base_logger.info(self._format_message(message, self.color))

    def debug(self, message: str) -> None:
        style = f"dim {self.color}" if self.color != "white" else "dim white"
        self.base_logger.debug(self._format_message(message, style, "🔍 "))

    def warning(self, message: str) -> None:
        self.base_logger.warning(self._format_message(message, "bold yellow", "⚠️  "))

    def error(self, message: str, exc_info: bool = False) -> None:
        self.base_logger.error(self._format_message(message, "bold red", "❌ "), exc_info=exc_info)

    def success(self, message: str) -> None:
        self.base_logger.info(self._format_message(message, "bold green", "✅ "))

    # Compatibility methods - delegate to base logger
    def critical(self, message: str, *args, **kwargs) -> None:
        formatted = self._format_message(message, "bold red", "❌ ")
        self.base_logger.critical(formatted, *args, **kwargs)

    def exception(self, message: str, *args, **kwargs) -> None:
        formatted = self._format_message(message, "bold red", "❌ ")
        self.base_logger.exception(formatted, *args, **kwargs)

    def log(self, level: int, message: str, *args, **kwargs) -> None:
        self.base_logger.log(level, message, *args, **kwargs)

    @property
    def level(self) -> int:
        return self.base_logger.level

    @property
    def name(self) -> str:
        return self.base_logger.name

    def setLevel(self, level: int) -> None:
        self.base_logger.setLevel(level)

    def isEnabledFor(self, level: int) -> bool:
        return self.base_logger.isEnabledFor(level)


def setup_rich_logging(level: int = logging.INFO) -> None:
    """Install a Rich handler on the root logger unless one is already configured.

    Meant for application entry points such as the CLI. Library code never
    calls it, so importing :mod:`entity_naming` leaves logging untouched.
    """
    root_logger = logging.getLogger()

    # Leave host applications (and test harnesses) in charge of their own handlers
    if root_logger.hasHandlers():
        return

    root_logger.setLevel(level)

    try:
        rich_tracebacks = get_config_value("logging.rich_tracebacks", True)
        show_traceback_locals = get_config_value("logging.show_traceback_locals", False)
        show_full_paths = get_config_value("logging.show_full_paths", False)
    except ConfigurationError:
        # Hide locals by default
        rich_tracebacks = True
        show_traceback_locals = False
        show_full_paths = False

    console = Console(stderr=True, width=120)
    handler = RichHandler(
        console=console,
        rich_tracebacks=rich_tracebacks,
        markup=True,
        show_path=show_full_paths,
        show_time=True,
        show_level=True,
        tracebacks_show_locals=show_traceback_locals,
    )
    root_logger.addHandler(handler)


def get_logger(
    component_name: str | None = None,
    *,
    name: str | None = None,
    color: str | None = None,
) -> ComponentLogger:
    """
    Get a component logger.

    Creating a logger reads no settings and installs no handlers, so it is safe
    at module import time.

    Args:
        component_name: Component name; its color is read from
            ``logging.logging_colors.<component_name>`` when first needed
        name: Direct logger name (keyword-only), bypasses configured colors
        color: Direct color specification (keyword-only)

    Returns:
        ComponentLogger instance

    Raises:
        ValueError: If neither ``component_name`` nor ``name`` is given

    Examples:
        >>> logger = get_logger("naming_service")
        >>> logger = get_logger(name="test_logger", color="blue")
    """
    if name is not None:
        return ComponentLogger(logging.getLogger(name), name, color or "white")

    if component_name is None:
        raise ValueError(
            "Component name is required. Usage: get_logger('component_name') or "
            "get_logger(name='custom_name', color='blue')"
        )

    return ComponentLogger(logging.getLogger(f"entity_naming.{component_name}"), component_name, color)
