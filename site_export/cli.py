# === FILE: site_export/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point of the SiteExport static exporter.

Commands:
  export    Crawl the running site and write every reachable page to disk
  config    Show the effective configuration

Common options:
  --config PATH        Path to the YAML/JSON config (default: configs/default.yaml)
  --concurrency INT    Maximum number of routes rendered at once (override max_concurrent)
  --log-level LEVEL    Logging level (DEBUG, INFO, ...)
  --log-file PATH      Log file (stdout only when omitted)
  --log-format FORMAT  Logging format (e.g. "%(asctime)s %(levelname)s %(message)s")

export options:
  --out-dir DIR        Output directory (override out_dir)
  --renderer NAME      http or browser (override renderer)
  --report PATH        Save a JSON manifest of the export
  --export-timeout SEC Timeout for the whole export (seconds)

Also:
  --version, -v        Show the SiteExport version

Example:
  site-export --config configs/default.yaml export --out-dir dist --report dist/export.json
"""
import sys
import asyncio
import json
from pathlib import Path

import click

from site_export import __version__
from site_export.config import load_config
from site_export.crawler.crawler import CrawlError
from site_export.exporter import start_export
from site_export.logger import configure
from site_export.report.json_report import render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteExport, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default='configs/default.yaml',
    show_default=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to the YAML/JSON config file.'
)
@click.option(
    '--concurrency', '-k', 'concurrency',
    type=click.IntRange(min=1),
    default=None,
    help='Maximum number of routes rendered at once (override max_concurrent)'
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
    help='Path to the log file (stdout if omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Format string for log records'
)
@click.pass_context
def cli(ctx, config_path, concurrency, log_level, log_file, log_format):
    """SiteExport command group."""
    configure(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Failed to load configuration: {e}')
    if concurrency is not None:
        cfg = cfg.model_copy(update={'max_concurrent': concurrency})
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('export', context_settings=CONTEXT_SETTINGS)
@click.option(
    '--out-dir', '-o', 'out_dir',
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help='Output directory (override out_dir)'
)
@click.option(
    '--renderer', '-r', 'renderer',
    default=None,
    type=click.Choice(['http', 'browser']),
    help='Page renderer (override renderer)'
)
@click.option(
    '--report', 'report_path',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save a JSON manifest of the export'
)
@click.option(
    '--export-timeout', 'export_timeout',
    type=float,
    default=None,
    help='Timeout for the whole export (seconds)'
)
@click.pass_context
def export(ctx, out_dir, renderer, report_path, export_timeout):
    """Crawl the site and write every reachable page."""
    cfg = ctx.obj['config']
    updates = {}
    if out_dir is not None:
        updates['out_dir'] = out_dir
    if renderer is not None:
        updates['renderer'] = renderer
    if updates:
        cfg = cfg.model_copy(update=updates)

    click.echo(f'Exporting {cfg.url_for("")} to {cfg.out_dir}')
    failure = None
    try:
        if export_timeout:
            result = asyncio.run(
                asyncio.wait_for(start_export(cfg), timeout=export_timeout)
            )
        else:
            result = asyncio.run(start_export(cfg))
    except asyncio.TimeoutError:
        print_error(f'Export did not finish within {export_timeout} seconds')
    except CrawlError as e:
        result = e.result
        failure = e
    except Exception as e:
        print_error(f'Export failed: {e}')

    if report_path:
        try:
            saved = render_json(result, report_path)
            click.echo(f'JSON report: {saved}')
        except OSError as e:
            print_error(f'Failed to save the report: {e}')

    click.echo(f'Exported {len(result.pages)} page(s)')
    if failure is not None:
        print_error(str(failure))


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Show the effective configuration as JSON."""
    cfg = ctx.obj['config']
    click.echo(json.dumps(cfg.model_dump(mode='json'), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    cli()
