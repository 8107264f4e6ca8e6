"""emitkit CLI — replays the event walkthrough scenarios.

Usage::

    emitkit demo                 # every scenario, in order
    emitkit demo once            # a single scenario
    emitkit settings             # effective configuration
"""

from __future__ import annotations

from typing import Callable

import click

from emitkit import __version__
from emitkit.application.server import DataServer
from emitkit.config.logging import configure_logging
from emitkit.config.settings import get_settings
from emitkit.domain.exceptions import ConfigurationError
from emitkit.infrastructure.events.emitter import ERROR_EVENT, EventEmitter


def _scenario_basic() -> None:
    emitter = EventEmitter()
    emitter.on("greet", lambda name: click.echo(f"Hello, {name}!"))
    emitter.emit("greet", "Anwarul")

    emitter.on("greet", lambda name: click.echo(f"How are you, {name}?"))
    emitter.emit("greet", "Karim")


def _scenario_once() -> None:
    emitter = EventEmitter()
    emitter.once("login", lambda user: click.echo(f"{user} logged in (once)"))
    emitter.emit("login", "Anwarul")
    emitter.emit("login", "Karim")
    click.echo(f"Listeners left for login: {emitter.listener_count('login')}")


def _scenario_remove() -> None:
    emitter = EventEmitter()

    def bye_listener(name: str) -> None:
        click.echo(f"Goodbye, {name}")

    emitter.on("bye", bye_listener)
    emitter.emit("bye", "Anwarul")
    emitter.remove_listener("bye", bye_listener)
    emitter.emit("bye", "Karim")


def _scenario_inspect() -> None:
    emitter = EventEmitter()
    emitter.on("greet", lambda name: None)
    emitter.on("greet", lambda name: None)
    emitter.on("login", lambda user: None)
    click.echo(f"Registered events: {emitter.event_names()}")
    click.echo(f"Listeners count for greet: {emitter.listener_count('greet')}")
    click.echo(f"Max listeners: {emitter.get_max_listeners()}")


def _scenario_server_events() -> None:
    emitter = EventEmitter()
    emitter.on("dataReceive", lambda data: click.echo(f"Data received: {data}"))
    emitter.on(ERROR_EVENT, lambda err: click.echo(f"Error: {err}"))
    emitter.emit("dataReceive", {"id": 1, "msg": "Hello"})
    emitter.emit(ERROR_EVENT, "Something went wrong")


def _scenario_server() -> None:
    server = DataServer("API Server", output=click.echo)
    server.on("data", lambda data: click.echo(f"Received data: {data}"))
    server.once("close", lambda: click.echo("Server closed (once listener)"))

    server.receive_data("Hello World")
    server.receive_data("Another Request")
    server.shutdown()
    server.shutdown()


SCENARIOS: dict[str, Callable[[], None]] = {
    "basic": _scenario_basic,
    "once": _scenario_once,
    "remove": _scenario_remove,
    "inspect": _scenario_inspect,
    "server-events": _scenario_server_events,
    "server": _scenario_server,
}


@click.group()
@click.version_option(version=__version__, prog_name="emitkit")
@click.option(
    "--log-level",
    default=None,
    help="Override EMITKIT_LOG_LEVEL (DEBUG, INFO, WARNING, ...).",
)
def cli(log_level: str | None) -> None:
    """Synchronous event emitter walkthrough."""
    try:
        configure_logging(level=log_level)
    except ConfigurationError as e:
        raise click.BadParameter(e.message, param_hint="--log-level") from e


@cli.command()
@click.argument(
    "scenario",
    type=click.Choice([*SCENARIOS, "all"]),
    default="all",
)
def demo(scenario: str) -> None:
    """Run one walkthrough SCENARIO, or all of them."""
    selected = list(SCENARIOS) if scenario == "all" else [scenario]
    for name in selected:
        click.echo(f"--- {name} ---")
        SCENARIOS[name]()


@cli.command()
def settings() -> None:
    """Show the effective emitkit settings."""
    current = get_settings()
    for key, value in current.model_dump().items():
        if hasattr(value, "value"):
            value = value.value
        click.echo(f"{key}: {value}")


if __name__ == "__main__":
    cli()
