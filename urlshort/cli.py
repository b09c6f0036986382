#!/usr/bin/env python3
# urlshort/cli.py

import logging
from pathlib import Path
from typing import NoReturn

import typer
import uvicorn

from urlshort import config
from urlshort.core.loader import load_mapping
from urlshort.errors import ConfigError
from urlshort.main import build_resolver, create_app

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = typer.Typer(
    name="urlshort",
    help="Redirect request paths to URLs listed in a JSON or YAML file.",
    add_completion=False,
)


def _fail(e: ConfigError) -> NoReturn:
    logger.error("%s", e)
    typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
    raise typer.Exit(1)


@app.command()
def serve(
    config_path: Path = typer.Option(
        Path(config.CONFIG_PATH), "--config", "-c", help="JSON or YAML file of path/url records"
    ),
    no_config: bool = typer.Option(False, "--no-config", help="Serve only the built-in redirects"),
    host: str = typer.Option(config.HOST, "--host"),
    port: int = typer.Option(config.PORT, "--port", "-p"),
) -> None:
    try:
        resolver = build_resolver(None if no_config else config_path)
    except ConfigError as e:
        _fail(e)

    logger.info("Starting the server on :%d", port)
    uvicorn.run(create_app(resolver), host=host, port=port)


@app.command()
def check(
    config_path: Path = typer.Option(
        Path(config.CONFIG_PATH), "--config", "-c", help="JSON or YAML file of path/url records"
    ),
) -> None:
    """Validate a config file and list its redirects."""
    try:
        path_map = load_mapping(config_path)
    except ConfigError as e:
        _fail(e)

    for path in sorted(path_map):
        typer.echo(f"{path} -> {path_map[path]}")
    typer.echo(f"{len(path_map)} redirect(s) in {config_path}")


if __name__ == "__main__":
    app()
