"""classpane CLI entry point."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from classpane.models.dom.loader import DocumentLoadError, load_document
from classpane.models.state.config_manager import ConfigLoadError, ConfigManager


def _configure_logging(level: str, log_file: str) -> None:
    # The TUI owns the terminal, so log records only go to a file.
    if not log_file:
        logging.getLogger().addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.group()
def cli() -> None:
    """classpane: toggle and add CSS classes on document elements."""
    pass


@cli.command()
@click.argument("document", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Settings file")
@click.option("--log-file", default=None, help="Write logs to this file")
@click.option("--log-level", default=None, help="Log level (DEBUG, INFO, WARNING, ...)")
@click.option("--show-pane/--hide-pane", default=None, help="Show the classes pane on start")
def run(
    document: Path,
    config_path: Path | None,
    log_file: str | None,
    log_level: str | None,
    show_pane: bool | None,
) -> None:
    """Open DOCUMENT (a YAML fixture) in the elements inspector."""
    from classpane.app import ClassPaneApp

    try:
        settings = ConfigManager.load(config_path)
    except ConfigLoadError as e:
        raise click.ClickException(str(e)) from e

    updates: dict[str, object] = {}
    if log_file is not None:
        updates["log_file"] = log_file
    if log_level is not None:
        updates["log_level"] = log_level.upper()
    if show_pane is not None:
        updates["show_pane_on_start"] = show_pane
    if updates:
        settings = settings.model_copy(update=updates)

    _configure_logging(settings.log_level, settings.log_file)

    try:
        loaded = load_document(document, write_latency=settings.write_latency_seconds)
    except DocumentLoadError as e:
        raise click.ClickException(str(e)) from e

    ClassPaneApp(
        loaded,
        settings=settings,
        config_path=config_path or ConfigManager.default_path(),
    ).run()


@cli.command()
@click.argument("document", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--frame", "frame_id", default=None, help="Frame whose classes to list")
def classes(document: Path, frame_id: str | None) -> None:
    """Print every class name known in a frame of DOCUMENT."""
    import asyncio

    from classpane.controllers.completion.fetchers.class_name_fetcher import ClassNameFetcher

    try:
        loaded = load_document(document)
    except DocumentLoadError as e:
        raise click.ClickException(str(e)) from e

    target = loaded.document
    if frame_id is not None:
        frames = [
            node for node in [loaded.document, *loaded.document.descendants()]
            if node.owner_document is node and node.frame_id() == frame_id
        ]
        if not frames:
            raise click.ClickException(f"No frame named {frame_id!r}")
        target = frames[0]

    fetcher = ClassNameFetcher(loaded.dom_model, loaded.css_model)
    for class_name in asyncio.run(fetcher.fetch_class_names(target)):
        click.echo(class_name)


if __name__ == "__main__":
    cli()
