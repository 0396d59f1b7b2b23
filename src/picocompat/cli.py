# src/picocompat/cli.py
"""picocompat Command Line Interface.

Diagnostics for sites still running API v0 plugins: which legacy events
exist, what a given plugin will receive, and what the legacy constants
resolve to for a settings file.
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from pathlib import Path

import typer
from pydantic import ValidationError

from picocompat import __version__
from picocompat.contracts import EVENT_ALIASES, LEGACY_SIGNATURES, LegacyEvent

__all__ = ["app"]

app = typer.Typer(
    name="picocompat",
    help="picocompat: run API v0 plugins on a current host.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"picocompat version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose/debug logging.",
    ),
    json_logs: bool = typer.Option(
        False,
        "--json-logs",
        help="Output structured JSON logs (for machine processing).",
    ),
) -> None:
    """picocompat: run API v0 plugins on a current host."""
    from picocompat.core.logging import configure_logging

    configure_logging(json_output=json_logs, level="DEBUG" if verbose else "INFO")


@dataclass(frozen=True)
class HandlerInfo:
    """A legacy handler with the arguments it is called with."""

    event: LegacyEvent
    arguments: tuple[str, ...]

    def render(self) -> str:
        return f"{self.event.value}({', '.join(self.arguments)})"


def _handler_info(event: LegacyEvent) -> HandlerInfo:
    return HandlerInfo(event=event, arguments=LEGACY_SIGNATURES[event])


@app.command()
def aliases() -> None:
    """List canonical events and the legacy events they fire."""
    for canonical, legacy_events in EVENT_ALIASES.items():
        handlers = ", ".join(_handler_info(event).render() for event in legacy_events)
        typer.echo(f"{canonical.value:26} -> {handlers}")


def _load_plugin(target: str) -> object:
    """Import MODULE:ATTR and instantiate it if it is a class."""
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        typer.echo(f"Error: Expected MODULE:ATTR, got '{target}'.", err=True)
        raise typer.Exit(1)

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        typer.echo(f"Error: Cannot import '{module_name}': {e}", err=True)
        raise typer.Exit(1) from None

    try:
        obj = getattr(module, attr)
    except AttributeError:
        typer.echo(f"Error: Module '{module_name}' has no attribute '{attr}'.", err=True)
        raise typer.Exit(1) from None

    return obj() if isinstance(obj, type) else obj


@app.command()
def inspect(
    target: str = typer.Argument(..., help="Legacy plugin as MODULE:ATTR."),
) -> None:
    """Show which legacy events a plugin implements and will receive."""
    from picocompat.plugins.dispatcher import TARGET_REVISIONS
    from picocompat.plugins.registry import LegacyPluginRegistry

    plugin = _load_plugin(target)
    registry = LegacyPluginRegistry()
    try:
        handle = registry.register(plugin)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    receives = handle.revision in TARGET_REVISIONS
    typer.echo(f"Plugin:   {handle.name}")
    typer.echo(f"Revision: API v{int(handle.revision)}")
    typer.echo(f"Receives legacy events: {'yes' if receives else 'no'}")

    typer.echo("\nHANDLERS:")
    handlers = [event for event in LegacyEvent if handle.implements(event)]
    if handlers:
        for event in handlers:
            typer.echo(f"  {_handler_info(event).render()}")
    else:
        typer.echo("  (none)")


@app.command()
def constants(
    settings_file: Path = typer.Option(
        ...,
        "--settings",
        "-s",
        help="Path to settings YAML file.",
    ),
) -> None:
    """Show the legacy constants a settings file defines."""
    from picocompat.core.config import load_settings
    from picocompat.core.constants import LegacyConstants, define_config_constants

    try:
        settings = load_settings(settings_file)
    except FileNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None
    except ValidationError as e:
        typer.echo(f"Error: Invalid settings in {settings_file}:", err=True)
        for error in e.errors():
            loc = ".".join(str(part) for part in error["loc"])
            typer.echo(f"  - {loc}: {error['msg']}", err=True)
        raise typer.Exit(1) from None

    legacy_constants = LegacyConstants()
    define_config_constants(legacy_constants, settings)
    for name, value in legacy_constants.items():
        typer.echo(f"{name:12} = {value!r}")


if __name__ == "__main__":
    app()
