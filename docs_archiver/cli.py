# === FILE: docs_archiver/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point of the documentation archiver.

Options:
  --skip-existing, -s   Skip pages that are already archived
  --base-url URL        Base URL for the documentation site
  --start-url URL       Starting URL for crawling
  --output-dir, -o DIR  Directory of the archive (default: ./archived-docs)
  --config, -c PATH     Optional YAML/JSON config file
  --delay SEC           Pause after every archived page
  --log-level LEVEL     Logging level (DEBUG, INFO, ...)
  --log-file PATH       Also write logs to this file
  --version             Show the version
  --help, -h            Show the help message

Environment variables:
  ANTHROPIC_API_KEY     Required: API key of the conversion service
  BASE_URL              Default base URL for the documentation site
  START_URL             Default starting URL for crawling
  OUTPUT_DIR            Default archive directory

A ``.env`` file in the working directory is read first.

Examples:
  docs-archiver
  docs-archiver --skip-existing
  docs-archiver --base-url https://docs.mysite.com --start-url https://docs.mysite.com/intro
"""
import asyncio
import sys
from pathlib import Path

import click
from dotenv import load_dotenv

from docs_archiver import __version__
from docs_archiver.config import load_config
from docs_archiver.logger import init_logging
from docs_archiver.scanner import start_archive

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


class ArchiverCommand(click.Command):
    """Click command whose usage errors exit with status 1."""

    def main(self, args=None, prog_name=None, complete_var=None, standalone_mode=True, **extra):
        try:
            return super().main(args, prog_name, complete_var, standalone_mode=False, **extra)
        except click.ClickException as e:
            e.show()
            sys.exit(1)
        except click.Abort:
            click.echo('Aborted!', err=True)
            sys.exit(1)


@click.command(cls=ArchiverCommand, context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', message='docs-archiver, version %(version)s')
@click.option(
    '--skip-existing', '-s', 'skip_existing',
    is_flag=True,
    help='Skip pages that are already archived'
)
@click.option('--base-url', 'base_url', default=None, metavar='URL', help='Base URL for the documentation site')
@click.option('--start-url', 'start_url', default=None, metavar='URL', help='Starting URL for crawling')
@click.option(
    '--output-dir', '-o', 'output_dir',
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help='Archive directory  [default: ./archived-docs]'
)
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML/JSON configuration file'
)
@click.option('--delay', 'delay', type=float, default=None, help='Pause after every archived page (seconds)')
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file (console only if omitted)'
)
def cli(skip_existing, base_url, start_url, output_dir, config_path, delay, log_level, log_file):
    """Crawl a Next.js/MDX documentation site and archive every page as markdown."""
    load_dotenv(Path.cwd() / '.env')
    logger = init_logging(level=log_level, log_file=str(log_file) if log_file else None)

    try:
        cfg = load_config(
            config_path,
            skip_existing=skip_existing or None,
            base_url=base_url,
            start_url=start_url,
            output_dir=output_dir,
            delay=delay,
        )
    except Exception as e:
        print_error(f'Error loading configuration: {e}')

    if not cfg.api_key:
        print_error('Please set ANTHROPIC_API_KEY environment variable')

    if cfg.skip_existing:
        logger.info('Skip existing mode enabled - will skip already archived pages')
    logger.info('Base URL: %s', cfg.base_url)
    logger.info('Start URL: %s', cfg.start_url)

    try:
        report = asyncio.run(start_archive(cfg))
    except Exception as e:
        print_error(f'Error while archiving: {e}')

    click.echo(
        f'Archived {len(report.processed)}, skipped {len(report.skipped)}, '
        f'failed {len(report.failed)} page(s) into {cfg.output_dir}'
    )
    click.echo('Archiving completed!')


# console-script entry point
main = cli

if __name__ == "__main__":
    cli()
