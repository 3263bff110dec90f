"""Interactive console front-end for the asset catalogue."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Final

import click

from .config import configure
from .service import CatalogueService
from .store import AssetRecord, AssetType

__all__ = ["cli", "main", "run_menu"]


logger = logging.getLogger(__name__)

PROG_NAME: Final[str] = "asset-catalogue"

TYPE_PROMPT: Final[str] = "Asset type (" + ", ".join(
    f"{member.value} - {member.label}" for member in AssetType
) + ")"

MENU: Final[tuple[tuple[str, str], ...]] = (
    ("1", "Add asset"),
    ("2", "List assets by type"),
    ("3", "List assets by keyword"),
    ("4", "Remove asset"),
    ("5", "Show assets related to an asset"),
    ("6", "Relate two assets"),
    ("7", "Search assets"),
    ("0", "Exit"),
)

_EXIT_CHOICES = frozenset({"0", "q", "quit", "exit"})


def run_menu(service: CatalogueService) -> None:
    """Prompt for menu choices until the user exits."""

    actions: dict[str, Callable[[CatalogueService], None]] = {
        "1": _add_asset,
        "2": _list_by_type,
        "3": _list_by_keyword,
        "4": _remove_asset,
        "5": _show_related,
        "6": _relate_assets,
        "7": _search_assets,
    }

    while True:
        click.echo("Asset Manager")
        for key, label in MENU:
            click.echo(f"{key}. {label}")

        choice = click.prompt("Choice", type=str).strip().casefold()
        if choice in _EXIT_CHOICES:
            return

        action = actions.get(choice)
        if action is None:
            click.echo(f"Unknown option: {choice}", err=True)
            continue

        try:
            action(service)
        except (KeyError, ValueError) as exc:
            logger.debug("Menu action %s failed: %s", choice, exc)
            click.echo(f"Error: {_error_message(exc)}", err=True)


@click.command(name=PROG_NAME)
@click.option(
    "--seed/--no-seed",
    default=None,
    help="Load the demo assets before showing the menu.",
)
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ...).")
def cli(seed: bool | None, log_level: str | None) -> int:
    """Browse and edit an in-memory catalogue of media assets."""

    try:
        config = configure(log_level=log_level, seed_defaults=seed)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    logging.basicConfig(
        level=config.log_level_number,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    service = CatalogueService()
    if config.seed_defaults:
        service.seed()

    run_menu(service)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the console front-end and return a process exit code."""

    args = list(argv) if argv is not None else None
    try:
        result = cli.main(args=args, prog_name=PROG_NAME, standalone_mode=False)
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    return int(result or 0)


# ----------------------------------------------------------------------
# Menu actions
# ----------------------------------------------------------------------
def _add_asset(service: CatalogueService) -> None:
    name = click.prompt("Asset name", type=str)
    path = click.prompt("Asset path", type=str)
    asset_type = click.prompt(TYPE_PROMPT, type=str)
    keywords = click.prompt("Keywords (comma separated)", default="", show_default=False)
    category = click.prompt("Category", default="", show_default=False)
    version = click.prompt("Version", type=int, default=1)

    record = service.add_asset(
        name,
        path,
        asset_type,
        keywords=_split_keywords(keywords),
        category=category,
        version=version,
    )
    click.echo(f"Added {service.describe(record)}")


def _list_by_type(service: CatalogueService) -> None:
    asset_type = click.prompt(TYPE_PROMPT, type=str)
    _echo_records(service, service.assets_by_type(asset_type))


def _list_by_keyword(service: CatalogueService) -> None:
    keyword = click.prompt("Keyword", type=str)
    _echo_records(service, service.assets_by_keyword(keyword))


def _remove_asset(service: CatalogueService) -> None:
    name = click.prompt("Asset name", type=str)
    if service.remove_asset(name):
        click.echo(f"Removed {name}")
    else:
        click.echo(f"Asset {name} not found.")


def _show_related(service: CatalogueService) -> None:
    name = click.prompt("Asset name", type=str)
    related = service.related_assets(name)
    if not related:
        click.echo("No related assets found.")
        return
    click.echo("Related assets:")
    for record in related:
        click.echo(service.describe(record))


def _relate_assets(service: CatalogueService) -> None:
    source = click.prompt("Asset name", type=str)
    target = click.prompt("Related asset name", type=str)
    service.relate(source, target)
    click.echo(f"Related {source} -> {target}")


def _search_assets(service: CatalogueService) -> None:
    query = click.prompt("Search", type=str)
    hits = service.search(query)
    if not hits:
        click.echo("No assets found.")
        return
    for hit in hits:
        fields = ", ".join(hit.matched_fields)
        click.echo(f"{service.describe(hit.record)} [{fields}]")


# ----------------------------------------------------------------------
# Internal helpers
# ----------------------------------------------------------------------
def _echo_records(service: CatalogueService, records: Sequence[AssetRecord]) -> None:
    if not records:
        click.echo("No assets found.")
        return
    for record in records:
        click.echo(service.describe(record))


def _split_keywords(raw: str) -> list[str]:
    return [part.strip() for part in str(raw).split(",") if part.strip()]


def _error_message(exc: Exception) -> str:
    if isinstance(exc, KeyError) and exc.args:
        return str(exc.args[0])
    return str(exc)
