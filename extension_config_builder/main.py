"""
CLI entry point for Extension Config Builder.
"""

import click
import sys
from pathlib import Path

from . import __version__
from .config import Settings
from .core import ExtensionContext
from .errors import ExtensionError
from .localization import build_localization
from .output import config_to_json, export_to_json
from .specification_handlers import CheckoutUiExtension
from .utils import configure_logging, BuildReporter

ROOT_ARGUMENT = click.argument(
    'root',
    default='.',
    type=click.Path(exists=True, file_okay=False, path_type=Path)
)


def logging_options(command):
    """Attach the shared logging options to a command."""
    command = click.option('--json-logs', is_flag=True, help='Output logs as JSON (for CI)')(command)
    command = click.option('--log-file', type=click.Path(), help='Optional log file path')(command)
    command = click.option(
        '--log-level',
        type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR']),
        default=None,
        help='Logging level (defaults to EXTENSION_LOG_LEVEL or INFO)'
    )(command)
    return command


def _load_context(root: Path, log_level, log_file, json_logs) -> ExtensionContext:
    settings = Settings()
    configure_logging(
        log_level=log_level or settings.log_level,
        log_file=log_file or settings.log_file,
        json_logs=json_logs or settings.json_logs
    )
    return ExtensionContext.for_project(root, settings)


def _fail(error: Exception, log_level) -> None:
    click.echo(f"❌ Error: {error}", err=True)
    if log_level == 'DEBUG':
        import traceback
        traceback.print_exc()
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
def cli():
    """
    Extension Config Builder

    Validates locale files and assembles the config of checkout UI extensions.
    """
    pass


@cli.command()
@ROOT_ARGUMENT
@click.option('--output', '-o', type=click.Path(dir_okay=False), help='Write the config to a file instead of stdout')
@logging_options
def build(root: Path, output: str, log_level: str, log_file: str, json_logs: bool):
    """
    Assemble the extension config.

    \b
    Merges, later keys winning:
        1. extension_points, metafields and name from extension.config.yml
        2. the serialized build/main.js script
        3. the localization block built from locales/*.json

    \b
    Examples:
        extension-config build my-extension
        extension-config build my-extension -o config.json
    """
    try:
        context = _load_context(root, log_level, log_file, json_logs)
        reporter = BuildReporter()
        reporter.build_start(context.root)

        handler = CheckoutUiExtension()
        config = handler.config(context)

        localization = config.get("localization")
        if localization:
            reporter.localization_summary(localization["default_locale"], localization["files"])
        else:
            reporter.no_localization()
        reporter.build_complete(list(config))

        if output:
            path = export_to_json(config, output)
            click.echo(f"📄 Config exported: {path}", err=True)
        else:
            click.echo(config_to_json(config))

    except ExtensionError as e:
        BuildReporter().build_failed(e)
        click.echo(f"❌ Build failed: {e}", err=True)
        sys.exit(1)
    except ValueError as e:
        click.echo(f"❌ Configuration error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        _fail(e, log_level)


@cli.command()
@ROOT_ARGUMENT
@logging_options
def locales(root: Path, log_level: str, log_file: str, json_logs: bool):
    """Validate the locales folder and list the locales it provides."""
    try:
        context = _load_context(root, log_level, log_file, json_logs)
        reporter = BuildReporter()

        result = build_localization(context.root, ignored_dirs=context.non_locale_dirs)
        if result is None:
            reporter.no_localization()
            return

        reporter.localization_summary(result.default_locale, result.files)
        click.echo(f"✅ {len(result.files)} locale(s), default: {result.default_locale}")

    except ExtensionError as e:
        click.echo(f"❌ Invalid locales: {e}", err=True)
        sys.exit(1)
    except ValueError as e:
        click.echo(f"❌ Configuration error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        _fail(e, log_level)


@cli.command('resource-url')
@ROOT_ARGUMENT
@click.option('--shop', '-s', required=True, help='Shop domain (e.g., "example.myshopify.com")')
@logging_options
def resource_url(root: Path, shop: str, log_level: str, log_file: str, json_logs: bool):
    """Print the cart URL used to preview the extension on a shop."""
    try:
        context = _load_context(root, log_level, log_file, json_logs)
        handler = CheckoutUiExtension()

        url = handler.build_resource_url(context, shop)
        if url is None:
            click.echo(f"⚠️  No products found on {shop}; no resource URL available.", err=True)
            return

        click.echo(url)

    except ExtensionError as e:
        click.echo(f"❌ Product lookup failed: {e}", err=True)
        sys.exit(1)
    except ValueError as e:
        click.echo(f"❌ Configuration error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        _fail(e, log_level)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
