"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Mailjet REST client, a product of Garudex Labs

CLI entry point for the Mailjet REST client.

Issues a single GET/POST/PUT/DELETE against a Mailjet resource and prints
the normalized response as JSON.
"""

import json
import sys
from pathlib import Path
from typing import Any, List, Optional, Tuple

import click

from mailjet._version import __version__
from mailjet.cli.context import CLIContext, pass_context
from mailjet.config.settings import VALID_DEBUG_MODES, get_default_config_path, load_config
from mailjet.exceptions import InvalidConfigurationError, MailjetError
from mailjet.logging_config import clear_correlation_id, set_correlation_id, setup_logging
from mailjet.resources import list_resources, resolve_resource
from mailjet.sdk.client import MailjetClient
from mailjet.sdk.request import MailjetRequest
from mailjet.sdk.response import MailjetResponse


def parse_filter(ctx, param, values: Tuple[str, ...]) -> List[Tuple[str, str]]:
    """Click callback turning ``key=value`` options into ordered pairs."""
    filters = []
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got '{item}'")
        filters.append((key, value))
    return filters


def parse_json(ctx, param, value: Optional[str]) -> Any:
    """Click callback decoding a JSON option; ``@path`` reads a file."""
    if value is None:
        return None
    if value.startswith("@"):
        try:
            value = Path(value[1:]).read_text()
        except OSError as e:
            raise click.BadParameter(f"cannot read '{value[1:]}': {e}")
    try:
        return json.loads(value)
    except ValueError as e:
        raise click.BadParameter(f"invalid JSON: {e}")


def build_request(
    resource: str,
    resource_id: Optional[str] = None,
    filters: Optional[List[Tuple[str, str]]] = None,
    body: Any = None,
) -> MailjetRequest:
    """Resolve ``resource`` through the catalog and build the request."""
    return MailjetRequest(
        resource=resolve_resource(resource),
        id=resource_id,
        filters=tuple(filters or ()),
        body=body,
    )


def _run(ctx: CLIContext, verb: str, request: MailjetRequest) -> None:
    try:
        response: MailjetResponse = getattr(ctx.client, verb)(request)
    except MailjetError as e:
        click.echo(f"Error ({e.kind.value}): {e}", err=True)
        sys.exit(1)
    click.echo(json.dumps(response.to_dict(), indent=2, ensure_ascii=False))


@click.group()
@click.option(
    '--config',
    '-c',
    type=click.Path(exists=False, dir_okay=False, path_type=Path),
    default=None,
    help=f'Path to configuration file (default: {get_default_config_path()})',
)
@click.option(
    '--log-level',
    '-l',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], case_sensitive=False),
    default=None,
    help='Set logging level (default: logging.level from the config file)',
)
@click.option(
    '--debug',
    '-d',
    type=click.Choice(VALID_DEBUG_MODES, case_sensitive=False),
    default=None,
    help='Debug mode: none, verbose (print traffic) or nocall (dry run)',
)
@click.option('--api-key', envvar='MJ_APIKEY_PUBLIC', default=None, help='Public API key')
@click.option('--api-secret', envvar='MJ_APIKEY_PRIVATE', default=None, help='Private API key')
@click.option('--base-url', default=None, help='Root URL of the API')
@click.version_option(version=__version__, prog_name='mailjet')
@pass_context
def cli(
    ctx: CLIContext,
    config: Optional[Path],
    log_level: Optional[str],
    debug: Optional[str],
    api_key: Optional[str],
    api_secret: Optional[str],
    base_url: Optional[str],
):
    """
    Mailjet REST client - call the Mailjet v3 API from the command line.
    """
    setup_logging(level=log_level.upper() if log_level else "WARNING", json_format=False)
    set_correlation_id()
    click.get_current_context().call_on_close(clear_correlation_id)

    ctx.config_path = str(config) if config else None
    try:
        ctx.config = load_config(ctx.config_path)
    except InvalidConfigurationError as e:
        click.echo(f"Error: Invalid configuration: {e}", err=True)
        sys.exit(1)

    effective_log_level = log_level.upper() if log_level else ctx.config.logging.level.upper()
    setup_logging(
        level=effective_log_level,
        log_file=Path(ctx.config.logging.file) if ctx.config.logging.file else None,
        json_format=ctx.config.logging.format == "json",
    )

    if api_key:
        ctx.config.api.api_key = api_key
    if api_secret:
        ctx.config.api.api_secret = api_secret
    if base_url:
        ctx.config.api.base_url = base_url
    if debug:
        ctx.config.debug.mode = debug.lower()

    if click.get_current_context().invoked_subcommand == 'resources':
        return

    try:
        ctx.client = MailjetClient.from_config(ctx.config)
    except MailjetError as e:
        click.echo(f"Error ({e.kind.value}): {e}", err=True)
        sys.exit(1)
    click.get_current_context().call_on_close(ctx.client.close)


resource_argument = click.argument('resource')
id_option = click.option('--id', 'resource_id', default=None, help='Identifier of a single element')
filter_option = click.option(
    '--filter',
    '-f',
    'filters',
    multiple=True,
    callback=parse_filter,
    help='Filter as key=value (repeatable, order preserved)',
)
data_option = click.option(
    '--data',
    '-D',
    callback=parse_json,
    default=None,
    help='JSON body, or @path to read it from a file',
)


@cli.command('get')
@resource_argument
@id_option
@filter_option
@pass_context
def get(ctx: CLIContext, resource: str, resource_id: Optional[str], filters):
    """Read a resource collection or element."""
    _run(ctx, 'get', _request_or_exit(resource, resource_id, filters))


@cli.command('post')
@resource_argument
@id_option
@data_option
@pass_context
def post(ctx: CLIContext, resource: str, resource_id: Optional[str], data):
    """Create an element in a resource collection."""
    _run(ctx, 'post', _request_or_exit(resource, resource_id, body=data))


@cli.command('put')
@resource_argument
@id_option
@data_option
@pass_context
def put(ctx: CLIContext, resource: str, resource_id: Optional[str], data):
    """Update a resource element."""
    _run(ctx, 'put', _request_or_exit(resource, resource_id, body=data))


@cli.command('delete')
@resource_argument
@id_option
@filter_option
@pass_context
def delete(ctx: CLIContext, resource: str, resource_id: Optional[str], filters):
    """Delete a resource element."""
    _run(ctx, 'delete', _request_or_exit(resource, resource_id, filters))


@cli.command('resources')
def resources():
    """List the resources known to the catalog."""
    for name in list_resources():
        click.echo(name)


def _request_or_exit(resource, resource_id=None, filters=None, body=None) -> MailjetRequest:
    try:
        return build_request(resource, resource_id, filters, body)
    except MailjetError as e:
        click.echo(f"Error ({e.kind.value}): {e}", err=True)
        sys.exit(1)


def main():
    cli()


if __name__ == '__main__':
    main()
