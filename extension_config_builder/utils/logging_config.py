"""
Structured logging configuration for Extension Config Builder.
"""

import structlog
import logging
from pathlib import Path
from typing import Dict, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    json_logs: bool = False
) -> None:
    """
    Configure structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path to log file
        json_logs: If True, output JSON formatted logs (for CI)
    """
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )

    handlers = []

    # Logs go to stderr so that stdout stays clean for the JSON config
    if json_logs:
        console_handler = logging.StreamHandler()
    else:
        console_handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,  # structlog handles this
            show_path=False,
            rich_tracebacks=True
        )

    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    root_logger = logging.getLogger()
    root_logger.handlers = handlers
    root_logger.setLevel(getattr(logging, log_level.upper()))

    # Silence noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


class BuildReporter:
    """
    Console reporting for CLI commands.

    Human-facing output goes to stderr through Rich, events go to structlog.
    """

    def __init__(self, console: Optional[Console] = None):
        self.logger = structlog.get_logger()
        self.console = console or Console(stderr=True)

    def _print(self, message: str, style: str = "") -> None:
        self.console.print(message, style=style)

    def build_start(self, root: Path) -> None:
        """Log start of a config build."""
        self.console.rule("[bold blue]Checkout UI Extension")
        self._print(f"  Project: {root}")
        self.logger.info("build_started", root=str(root))

    def localization_summary(self, default_locale: str, files: Dict[str, str]) -> None:
        """Show the locales included in the config."""
        table = Table(title="Locales")
        table.add_column("Locale")
        table.add_column("Default")
        table.add_column("Encoded size", justify="right")

        for locale in sorted(files):
            table.add_row(
                locale,
                "✓" if locale == default_locale else "",
                f"{len(files[locale]):,}"
            )

        self.console.print(table)
        self.logger.info(
            "localization_built",
            default_locale=default_locale,
            locale_count=len(files)
        )

    def no_localization(self) -> None:
        """Note that the project has no locale files."""
        self._print("  No locale files found, skipping localization", style="dim")
        self.logger.info("localization_skipped")

    def build_complete(self, keys: list) -> None:
        """Log build completion."""
        self._print(f"  ✅ Config assembled ({', '.join(keys) or 'empty'})", style="green")
        self.logger.info("build_completed", keys=keys)

    def build_failed(self, error: Exception) -> None:
        """Log build failure."""
        self.logger.error(
            "build_failed",
            error_type=type(error).__name__,
            error=str(error)
        )
