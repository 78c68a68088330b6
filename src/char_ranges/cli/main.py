"""Typer-based command line interface for char-ranges."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import regex
import structlog
import typer

from ..config import AppConfig, load_config
from ..errors import CharRangesError
from ..ext import char_ranges_offset
from ..iterator import CharRanges
from ..logging import configure_logging
from ..models import CharRange
from ..spans import find_spans

app = typer.Typer(help="Report characters of UTF-8 files with their byte ranges")
logger = structlog.get_logger(__name__)


@app.callback()
def main(ctx: typer.Context, config: Optional[Path] = typer.Option(None, "--config", metavar="PATH")) -> None:
    configure_logging()
    try:
        ctx.obj = load_config(config)
    except CharRangesError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc
    configure_logging(ctx.obj.logging.normalized_level())


def _read_utf8(path: Path) -> bytes:
    data = path.read_bytes()
    try:
        data.decode("utf-8")
    except UnicodeDecodeError as exc:
        typer.echo(f"{path} is not valid UTF-8: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    return data


def _resolve_offset(config: AppConfig, offset: Optional[int]) -> int:
    return config.output.default_offset if offset is None else offset


def _open_cursor(config: AppConfig, path: Path, offset: Optional[int]) -> CharRanges:
    data = _read_utf8(path)
    return char_ranges_offset(data, _resolve_offset(config, offset))


def _item_payload(item: Optional[CharRange]) -> Optional[Dict[str, Any]]:
    if item is None:
        return None
    span, char = item
    return {"start": span.start, "end": span.end, "char": char}


def _emit(config: AppConfig, payload: Any) -> None:
    output = config.output
    typer.echo(json.dumps(payload, ensure_ascii=output.ensure_ascii, indent=output.indent))


@app.command()
def ranges(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    offset: Optional[int] = typer.Option(None, "--offset", min=0, help="Add to every byte position"),
    reverse: bool = typer.Option(False, "--reverse", help="Walk from the end of the file"),
) -> None:
    config: AppConfig = ctx.obj
    cursor = _open_cursor(config, path, offset)
    items = cursor.rev() if reverse else cursor
    payload: List[Optional[Dict[str, Any]]] = [_item_payload(item) for item in items]
    logger.info("cli.ranges", path=str(path), count=len(payload), reverse=reverse)
    _emit(config, payload)


@app.command()
def nth(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    index: int = typer.Argument(..., min=0, help="Zero-based character index"),
    back: bool = typer.Option(False, "--back", help="Count from the end of the file"),
    offset: Optional[int] = typer.Option(None, "--offset", min=0, help="Add to every byte position"),
) -> None:
    config: AppConfig = ctx.obj
    cursor = _open_cursor(config, path, offset)
    item = cursor.nth_back(index) if back else cursor.nth(index)
    logger.info("cli.nth", path=str(path), index=index, back=back, found=item is not None)
    _emit(config, _item_payload(item))


@app.command()
def last(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    offset: Optional[int] = typer.Option(None, "--offset", min=0, help="Add to every byte position"),
) -> None:
    config: AppConfig = ctx.obj
    cursor = _open_cursor(config, path, offset)
    _emit(config, _item_payload(cursor.last()))


@app.command()
def count(path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False)) -> None:
    cursor = CharRanges(_read_utf8(path))
    typer.echo(cursor.count())


@app.command()
def locate(
    ctx: typer.Context,
    pattern: str = typer.Argument(..., help="Regular expression (regex module syntax)"),
    path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    offset: Optional[int] = typer.Option(None, "--offset", min=0, help="Add to every byte position"),
) -> None:
    config: AppConfig = ctx.obj
    text = _read_utf8(path).decode("utf-8")
    try:
        compiled = regex.compile(pattern, regex.UNICODE)
    except regex.error as exc:
        typer.echo(f"Invalid pattern: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    matches = find_spans(compiled, text, offset=_resolve_offset(config, offset))
    logger.info("cli.locate", path=str(path), matches=len(matches))
    _emit(config, [{"start": m.span.start, "end": m.span.end, "value": m.value} for m in matches])


@app.command()
def version() -> None:
    from ..version import __version__

    typer.echo(__version__)


if __name__ == "__main__":  # pragma: no cover
    app()
