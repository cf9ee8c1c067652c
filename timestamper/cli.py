#!filepath: timestamper/cli.py
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich import print

from timestamper import __version__
from timestamper.config import AppConfig
from timestamper.core.output import write
from timestamper.io.reader import TimestampsFileReader
from timestamper.io.writer import TimestampsFileWriter
from timestamper.utils.errors import CorruptTimestampsError, UserInputError
from timestamper.utils.logger import init_logging, logs

app = typer.Typer(help="Timestamper CLI")


def _load_config(config: Optional[Path]) -> AppConfig:
    try:
        return AppConfig.load(str(config) if config else None)
    except FileNotFoundError as e:
        raise UserInputError(str(e)) from e


def _fail(e: UserInputError) -> None:
    print(f"[red]{e}[/red]", file=sys.stderr)
    raise typer.Exit(code=1)


@app.command()
def version():
    print(f"v{__version__}")


@logs.catch("format timestamps failed")
def _format_file(path: Path, query: str) -> None:
    with TimestampsFileReader(path) as reader:
        write(reader, sys.stdout, query)


@app.command("format")
def format_(
    path: Path,
    query: Optional[str] = typer.Option(None, "--query", "-q", help="e.g. precision=6"),
    config: Optional[Path] = typer.Option(None, "--config", "-c"),
):
    """
    把 timestamps 文件输出为秒（每行一条）
    """
    try:
        cfg = _load_config(config)
        if not path.is_file():
            raise UserInputError(f"timestamps file not found: {path}")
    except UserInputError as e:
        _fail(e)

    if query is None:
        query = cfg.output.default_query

    try:
        _format_file(path, query)
    except CorruptTimestampsError as e:
        _fail(UserInputError(f"corrupt timestamps file {path}: {e}"))


@app.command()
def record(path: Path, millis: List[int]):
    """
    追加记录（距参考点的毫秒数，需递增）
    """
    try:
        with TimestampsFileWriter(path) as writer:
            writer.write_all(millis)
    except ValueError as e:
        _fail(UserInputError(str(e)))

    print(f"[green]Recorded {len(millis)} timestamps to {path}[/green]")


@app.command()
def serve(config: Optional[Path] = typer.Option(None, "--config", "-c")):
    """
    启动 HTTP 服务：GET /builds/<build_id>/timestamps?precision=...
    """
    from timestamper.api.app import create_app

    try:
        cfg = _load_config(config)
    except UserInputError as e:
        _fail(e)

    init_logging(cfg.log)
    print(f"[blue]Serving timestamps from {cfg.api.timestamps_dir} on {cfg.api.host}:{cfg.api.port}[/blue]")
    create_app(cfg).run(host=cfg.api.host, port=cfg.api.port)


if __name__ == "__main__":
    app()

# python -m timestamper.cli format data/builds/42/timestamps -q precision=2
