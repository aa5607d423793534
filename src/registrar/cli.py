"""CLI entry point for the registrar service."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from registrar import __version__
from registrar.config import DEFAULT_CONFIG_NAME, ConfigError, RegistrarConfig, load_config
from registrar.logging import setup_logging


def _resolve_config(config_path: Path | None) -> RegistrarConfig:
    """Load the given config, or ``registrar.yaml`` from the cwd if present."""
    if config_path is None:
        default = Path.cwd() / DEFAULT_CONFIG_NAME
        if default.exists():
            config_path = default
    return load_config(config_path)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """Registrar - course registration service."""
    pass


@main.command()
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    help=f"Path to {DEFAULT_CONFIG_NAME} (auto-detected if not specified)",
)
@click.option("--host", default=None, help="Bind address (default: from config)")
@click.option("--port", type=int, default=None, help="Bind port (default: from config)")
def serve(config_path: Path | None, host: str | None, port: int | None) -> None:
    """Run the REST API with uvicorn."""
    import uvicorn  # noqa: PLC0415

    from registrar.api.app import create_app  # noqa: PLC0415

    try:
        config = _resolve_config(config_path)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    setup_logging(config.logging)

    app = create_app(
        db_path=config.database.path,
        max_credits=config.registration.max_credits,
    )
    uvicorn.run(
        app,
        host=host or config.api.host,
        port=port if port is not None else config.api.port,
    )


@main.command("check-config")
@click.argument("config_path", type=click.Path(exists=True, path_type=Path))
def check_config(config_path: Path) -> None:
    """Validate a config file and print the resolved settings."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    max_credits = config.registration.max_credits
    click.echo(f"Configuration OK: {config_path}")
    click.echo(f"  Database: {config.database.path}")
    click.echo(f"  Logging: {config.logging.level} -> {config.logging.dir}")
    click.echo(f"  Max credits: {'disabled' if max_credits is None else max_credits}")
    click.echo(f"  API: {config.api.host}:{config.api.port}")


if __name__ == "__main__":
    main()
