import asyncio
import logging
import sys
from collections.abc import Callable
from datetime import datetime

import click

from .clients import create_client
from .config import get_client_config
from .data_models.config import ClientConfig
from .data_models.enums import ContentField, Endpoint, OrderBy, OrderDate, TagType
from .data_models.response import SearchResponse
from .exceptions import APIKeyValidationError, GuardianContentError, InvalidAPIKeyError
from .query import ContentQuery
from .utils import validate_api_key
from .version import __version__


def _choice(enum_type: type) -> click.Choice:
    return click.Choice([member.value for member in enum_type])


API_KEY_HINT = "To obtain an API key, go to https://open-platform.theguardian.com/access/"


def _load_config(ctx: click.Context) -> ClientConfig:
    try:
        return get_client_config()
    except ValueError as e:
        click.echo(str(e), err=True)
        click.echo(API_KEY_HINT, err=True)
        sys.stderr.flush()
        ctx.exit(1)


def _check_api_key(ctx: click.Context, config: ClientConfig) -> None:
    try:
        asyncio.run(validate_api_key(config.api_key, config.base_url))
    except (InvalidAPIKeyError, APIKeyValidationError) as e:
        click.echo(str(e), err=True)
        click.echo(API_KEY_HINT, err=True)
        sys.stderr.flush()
        ctx.exit(1)


async def _run_query(
    config: ClientConfig, configure: Callable[[ContentQuery], ContentQuery]
) -> SearchResponse:
    async with create_client(config) as client:
        return await configure(client.query()).send()


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """Command line client for the Guardian content API."""
    logging.basicConfig(level=logging.INFO)


@cli.command()
@click.argument("query")
@click.option(
    "--endpoint",
    type=_choice(Endpoint),
    default=Endpoint.CONTENT.value,
    show_default=True,
    help="API endpoint. With single-item, QUERY is the item path.",
)
@click.option("--page", type=int, help="Page number to fetch.")
@click.option("--page-size", type=int, help="Results per page (0-200).")
@click.option("--order-by", type=_choice(OrderBy), help="Result ordering.")
@click.option("--order-date", type=_choice(OrderDate), help="Date used for ordering.")
@click.option(
    "--show-field",
    "show_fields",
    multiple=True,
    type=_choice(ContentField),
    help="Optional field to include; may be repeated.",
)
@click.option(
    "--show-tag",
    "show_tags",
    multiple=True,
    type=_choice(TagType),
    help="Tag type to include; may be repeated.",
)
@click.option("--from-date", type=click.DateTime(formats=["%Y-%m-%d"]))
@click.option("--to-date", type=click.DateTime(formats=["%Y-%m-%d"]))
@click.option("--section", help="Only content in this section.")
@click.option("--tag", help="Only content with this tag.")
@click.option(
    "--skip-api-key-validation",
    is_flag=True,
    default=False,
    help="Skip the API key check made before the search.",
)
@click.pass_context
def search(
    ctx: click.Context,
    query: str,
    endpoint: str,
    page: int | None,
    page_size: int | None,
    order_by: str | None,
    order_date: str | None,
    show_fields: tuple[str, ...],
    show_tags: tuple[str, ...],
    from_date: datetime | None,
    to_date: datetime | None,
    section: str | None,
    tag: str | None,
    skip_api_key_validation: bool,
) -> None:
    """Run a single search and print the decoded response as JSON."""
    config = _load_config(ctx)
    if not skip_api_key_validation:
        _check_api_key(ctx, config)

    def configure(q: ContentQuery) -> ContentQuery:
        q.endpoint(Endpoint(endpoint)).search(query)
        if page is not None:
            q.page(page)
        if page_size is not None:
            q.page_size(page_size)
        if order_by:
            q.order_by(OrderBy(order_by))
        if order_date:
            q.order_date(OrderDate(order_date))
        if show_fields:
            q.show_fields(*show_fields)
        if show_tags:
            q.show_tags(*show_tags)
        if from_date:
            q.date_from(from_date.year, from_date.month, from_date.day)
        if to_date:
            q.date_to(to_date.year, to_date.month, to_date.day)
        if section:
            q.section(section)
        if tag:
            q.tag(tag)
        return q

    try:
        response = asyncio.run(_run_query(config, configure))
    except GuardianContentError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    click.echo(response.model_dump_json(indent=2))


@cli.command("validate-key")
@click.pass_context
def validate_key(ctx: click.Context) -> None:
    """Check that the configured API key is accepted."""
    config = _load_config(ctx)
    _check_api_key(ctx, config)
    click.echo("API key is valid.")


def main() -> None:
    """Main entry point for the CLI."""
    cli()
