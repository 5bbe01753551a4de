#!/usr/bin/env python3
"""
share-intake CLI

Replays share URLs against a handoff store and shows the retained state
and every value delivered to the media and text feeds.
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .domain.enums import ChannelKey
from .domain.exceptions import ShareIntakeError
from .domain.models import LaunchOptions
from .domain.value_objects import ShareUrl
from .infrastructure.bootstrap import ShareIntakeRuntime, build_runtime
from .infrastructure.config import ShareIntakeConfig
from .infrastructure.directory_asset_store import DirectoryAssetStore
from .infrastructure.in_memory_handoff_store import InMemoryHandoffStore
from .infrastructure.nats_handoff_store import NATSHandoffStore
from .ports.handoff_store import HandoffStorePort


def _load_store_file(path: Path | None) -> InMemoryHandoffStore:
    if path is None:
        return InMemoryHandoffStore()
    try:
        mapping = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise click.BadParameter(f"Cannot read store file: {e}", param_hint="--store-file") from e
    if not isinstance(mapping, dict):
        raise click.BadParameter("Store file must hold a JSON object", param_hint="--store-file")
    return InMemoryHandoffStore.from_mapping(mapping)


def render_state(console: Console, runtime: ShareIntakeRuntime) -> None:
    """Print the four retained fields."""
    snapshot = runtime.state.snapshot()
    encode = runtime.controller.decoder.encode

    table = Table(title="Retained State")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("initial_media", _show(encode(snapshot.initial_media)))
    table.add_row("latest_media", _show(encode(snapshot.latest_media)))
    table.add_row("initial_text", _show(snapshot.initial_text))
    table.add_row("latest_text", _show(snapshot.latest_text))
    console.print(table)


def render_deliveries(console: Console, deliveries: list[tuple[str, str | None]]) -> None:
    """Print the values pushed to the feeds, in order."""
    table = Table(title="Feed Deliveries")
    table.add_column("#", justify="right")
    table.add_column("Feed", style="cyan")
    table.add_column("Value", style="green")
    for index, (feed, value) in enumerate(deliveries, start=1):
        table.add_row(str(index), feed, _show(value))
    console.print(table)


def _show(value: str | None) -> str:
    return "[dim]<absent>[/dim]" if value is None else escape(value)


@click.group()
@click.version_option(package_name="share-intake")
def main() -> None:
    """share-intake - Shared content URL intake tools."""


@main.command()
@click.argument("url")
def parse(url: str) -> None:
    """Show how a URL is classified."""
    console = Console()
    share_url = ShareUrl.parse(url)

    table = Table(title="Share URL")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("content_class", share_url.content_class.value)
    table.add_row("lookup_key", _show(share_url.lookup_key))
    console.print(table)


@main.command()
@click.argument("urls", nargs=-1, required=True)
@click.option("--initial", "-i", is_flag=True, help="Treat the first URL as the launch URL")
@click.option(
    "--store-file",
    "-f",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON object seeding an in-memory handoff store",
)
@click.option(
    "--asset-root",
    "-a",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Directory serving asset identifiers",
)
@click.option("--nats", "use_nats", is_flag=True, help="Read the handoff store from NATS KV")
def handle(
    urls: tuple[str, ...],
    initial: bool,
    store_file: Path | None,
    asset_root: Path | None,
    use_nats: bool,
) -> None:
    """Handle URLs in order and show the resulting state."""
    console = Console()

    try:
        config = ShareIntakeConfig.from_env()
    except ShareIntakeError as e:
        console.print(f"[red]Configuration error: {e.message}[/red]")
        sys.exit(2)

    asset_store = DirectoryAssetStore(asset_root) if asset_root else None
    store: HandoffStorePort
    if use_nats:
        store = NATSHandoffStore(config)
    else:
        store = _load_store_file(store_file)

    runtime = build_runtime(store, asset_store=asset_store, config=config)
    deliveries: list[tuple[str, str | None]] = []
    for key in ChannelKey:
        runtime.dispatch.attach(
            key.value, lambda value, feed=key.value: deliveries.append((feed, value))
        )

    async def run() -> None:
        if isinstance(store, NATSHandoffStore):
            await store.connect()
        try:
            for index, url in enumerate(urls):
                handled = await (
                    runtime.host.did_finish_launching(LaunchOptions(url=url))
                    if initial and index == 0
                    else runtime.host.open_url(url)
                )
                console.print(f"{'✅' if handled else '❌'} {url}")
        finally:
            if isinstance(store, NATSHandoffStore):
                await store.disconnect()

    try:
        asyncio.run(run())
    except ShareIntakeError as e:
        console.print(f"[red]Intake error: {e.message}[/red]")
        sys.exit(1)
    finally:
        if asset_store is not None:
            asset_store.close()

    render_state(console, runtime)
    render_deliveries(console, deliveries)


if __name__ == "__main__":
    main()
