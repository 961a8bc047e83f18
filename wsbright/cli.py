"""Typer CLI entrypoint."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

import typer

from wsbright.core.classify import classify
from wsbright.core.errors import WsbrightError
from wsbright.core.report import parse_brightness
from wsbright.core.service import BrightnessService

app = typer.Typer(
    help="Control the brightness of a Waveshare WS170120 display",
    add_completion=False,
)

CONTEXT_SETTINGS = {
    "help_option_names": ["-?", "-h", "--help"],
}


def _configure_logging(verbose: int) -> None:
    if verbose > 1:
        level = logging.DEBUG
    elif verbose:
        level = logging.WARNING
    else:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", force=True)


def _version_callback(value: bool) -> None:
    if not value:
        return
    try:
        installed = version("wsbright")
    except PackageNotFoundError:
        installed = "unknown"
    typer.echo(f"wsbright {installed}")
    raise typer.Exit()


@app.command(context_settings=CONTEXT_SETTINGS)
def main(
    ctx: typer.Context,
    brightness: str | None = typer.Argument(
        None, help="Brightness percentage (0-100)", show_default=False
    ),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Increase verbosity"),
    show_version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Print version"
    ),
) -> None:
    """Set the display backlight to BRIGHTNESS percent."""
    if brightness is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    _configure_logging(verbose)
    try:
        value = parse_brightness(brightness)
        if verbose:
            typer.echo(f"Attempting to set brightness to {value}%.")
        result = BrightnessService().set_brightness(value)
    except WsbrightError as exc:
        diagnostic = classify(exc)
        typer.echo(f"Error: {diagnostic.message}", err=True)
        raise typer.Exit(code=diagnostic.exit_code) from None

    if verbose:
        if result.fallback_used:
            typer.echo("Feature report failed, sent brightness as an output report instead.")
        typer.echo(f"Brightness has been set to {result.brightness}%.")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
