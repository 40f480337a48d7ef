# === FILE: pagepipe/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point for PagePipe page discovery.

Commands:
  discover URL  Find the pages of a site (sitemap first, then link crawl)
  config        Show the effective configuration

Global options:
  --config PATH       YAML/JSON config (default: configs/default.yaml if present)
  --limit INT         Cap on pages for the link crawl (overrides max_pages)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stderr only if omitted)
  --log-format FORMAT Logging format string

discover options:
  --json PATH         Save a JSON report instead of printing the URL list
  --pretty            Indent JSON output by 2 spaces
  --no-sitemap        Skip sitemap.xml and crawl links right away
  --scan-timeout SEC  Timeout for the whole discovery (seconds)

Other:
  --version, -v       Show the PagePipe version

Example:
  pagepipe --limit 50 discover https://example.com --json pages.json
"""
import asyncio
import json
import sys
from pathlib import Path

import click

from pagepipe import __version__
from pagepipe.config import load_config
from pagepipe.errors import InvalidURLError
from pagepipe.logger import DEFAULT_FORMAT, init_logging
from pagepipe.report.json_report import render_json
from pagepipe.scanner import start_discovery

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='PagePipe, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML or JSON configuration file.'
)
@click.option(
    '--limit', '-l', 'limit',
    type=click.IntRange(min=1),
    default=None,
    help='Max pages for the link crawl (overrides max_pages)'
)
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
    help='Log file path (stderr only if omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Format string for log records'
)
@click.pass_context
def cli(ctx, config_path, limit, log_level, log_file, log_format):
    """PagePipe discovery commands."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Failed to load configuration: {e}')
    if limit is not None:
        cfg = cfg.model_copy(update={'max_pages': limit})
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('discover', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save a JSON report to this file'
)
@click.option(
    '--pretty', is_flag=True,
    help='Indent JSON output (2 spaces)'
)
@click.option(
    '--no-sitemap', 'no_sitemap', is_flag=True,
    help='Skip sitemap.xml and crawl links right away'
)
@click.option(
    '--scan-timeout', 'scan_timeout',
    type=float,
    default=None,
    help='Timeout for the whole discovery (seconds)'
)
@click.pass_context
def discover(ctx, url, json_output, pretty, no_sitemap, scan_timeout):
    """Discover the pages reachable from URL."""
    cfg = ctx.obj['config']
    if no_sitemap:
        cfg = cfg.model_copy(update={'use_sitemap': False})
    try:
        if scan_timeout:
            result = asyncio.run(
                asyncio.wait_for(start_discovery(url, cfg), timeout=scan_timeout)
            )
        else:
            result = asyncio.run(start_discovery(url, cfg))
    except asyncio.TimeoutError:
        print_error(f'Discovery did not finish within {scan_timeout} seconds')
    except InvalidURLError as e:
        print_error(str(e))
    except Exception as e:
        print_error(f'Discovery failed: {e}')

    # Without a report file the URL list goes to stdout
    if not json_output:
        click.echo(json.dumps(list(result), ensure_ascii=False, indent=2 if pretty else None))
        return

    try:
        saved = render_json(result, json_output, pretty=pretty)
    except OSError as e:
        print_error(f'Failed to save JSON report: {e}')
    click.echo(f'Found {len(result)} pages ({result.source}), JSON report: {saved}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Show the effective configuration as JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
