"""Typer-based CLI entry point for running the picker headless."""

from __future__ import annotations

import asyncio
import functools
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich import print
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fastpicker.application.interfaces import INavigator
from fastpicker.config import CONSOLE_LOGGER_NAME
from fastpicker.domain.models import MediaItem, PermissionStatus, RequestType
from fastpicker.errors import ConfigurationError, FastPickerError
from fastpicker.errors.handler import ErrorSeverity
from fastpicker.gui.coordinators.picker_coordinator import PickerCoordinator
from fastpicker.gui.utils.console_logger import ensure_console_logger
from fastpicker.infrastructure.folder_library import FolderMediaLibrary
from fastpicker.infrastructure.permission import StaticPermissionService
from fastpicker.settings.options import PickerOptions

app = typer.Typer(help="Headless media picker over a folder of photos and videos")
console = Console()
err_console = Console(stderr=True)


class _RecordingNavigator(INavigator):
    """Navigator standing in for a host screen stack."""

    def __init__(self) -> None:
        self.result: Optional[list] = None
        self.pop_count = 0

    def can_pop(self) -> bool:
        return True

    def pop(self, result=None) -> None:
        self.pop_count += 1
        self.result = result


def _handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ConfigurationError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(2) from exc
        except FastPickerError as exc:
            typer.echo(f"Unexpected error: {exc}", err=True)
            raise typer.Exit(1) from exc

    return wrapper


def _configure_logging(verbose: bool) -> None:
    if verbose:
        ensure_console_logger(
            logging.getLogger("fastpicker"), CONSOLE_LOGGER_NAME, level=logging.DEBUG
        )


def _instant_options(**values) -> PickerOptions:
    # No one watches the animations on a terminal.
    return PickerOptions(transition_duration_ms=0, transition_reverse_duration_ms=0, **values)


def _print_error(message: str, severity: ErrorSeverity) -> None:
    err_console.print(f"[red]{severity.value}:[/red] {escape(message)}")


async def _mount(picker: PickerCoordinator) -> None:
    picker.register_error_surface(_print_error)
    picker.mount()
    await picker.wait_idle()


@app.command()
@_handle_errors
def albums(
    root: Path = typer.Argument(Path.cwd(), exists=True, file_okay=False),
    media_type: RequestType = typer.Option(RequestType.ALL, "--type", "-t", case_sensitive=False),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """List the albums the picker would show for ROOT."""

    _configure_logging(verbose)
    library = FolderMediaLibrary(root)
    picker = PickerCoordinator(
        _instant_options(max_selection=1, request_type=media_type),
        StaticPermissionService(PermissionStatus.AUTHORIZED),
        library,
    )

    async def _run() -> None:
        await _mount(picker)
        picker.unmount()

    asyncio.run(_run())

    table = Table(title=f"Albums in {library.root}")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Kind")
    table.add_column("Items", justify="right")
    table.add_column("Last modified")
    for album in picker.album_list:
        modified = album.last_modified.strftime("%Y-%m-%d %H:%M") if album.last_modified else "-"
        table.add_row(album.id, album.name, album.kind.value, str(album.asset_count), modified)
    console.print(table)


@app.command()
@_handle_errors
def pick(
    root: Path = typer.Argument(Path.cwd(), exists=True, file_okay=False),
    max_selection: int = typer.Option(1, "--max", "-m", help="Maximum number of items"),
    select: Optional[List[str]] = typer.Option(
        None, "--select", "-s", help="Previously selected item id (repeatable)"
    ),
    tap: Optional[List[str]] = typer.Option(
        None, "--tap", help="Item id to tap in the grid, in order (repeatable)"
    ),
    permission: PermissionStatus = typer.Option(
        PermissionStatus.AUTHORIZED, "--permission", case_sensitive=False
    ),
    media_type: RequestType = typer.Option(RequestType.ALL, "--type", "-t", case_sensitive=False),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Run the picker over ROOT and print the final selection."""

    _configure_logging(verbose)
    library = FolderMediaLibrary(root)
    navigator = _RecordingNavigator()
    picker = PickerCoordinator(
        _instant_options(
            max_selection=max_selection,
            selected_asset_ids=tuple(select or ()),
            request_type=media_type,
        ),
        StaticPermissionService(permission),
        library,
        navigator=navigator,
    )
    taps = list(tap or ())

    async def _run() -> None:
        await _mount(picker)
        if not picker.toolbar_visible:
            print(f"[yellow]No access to media (permission: {picker.permission_status.value})")
        if len(taps) > 1 and not picker.multi_select.is_active:
            picker.toggle_multi_select()
        for asset_id in taps:
            if picker.has_exited:
                break
            item = await library.lookup_by_id(asset_id)
            if item is None or not await library.exists(item):
                print(f"[red]No such item: {asset_id}")
                continue
            if not picker.tap(item):
                print(f"[yellow]Selection full ({max_selection}); skipped {asset_id}")
        if not picker.has_exited:
            print(f"Selected {picker.selection_label}")
            picker.exit()
        picker.unmount()

    asyncio.run(_run())
    _print_selection(navigator.result or [])


def _print_selection(items: List[MediaItem]) -> None:
    if not items:
        print("[yellow]Nothing selected")
        return
    for index, item in enumerate(items, start=1):
        print(f"[green]{index}.[/green] {item.id} ({item.media_type.value})")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
