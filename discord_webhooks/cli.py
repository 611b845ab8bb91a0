"""
Command-line tools for trying out the dispatcher by hand.
"""

import asyncio
import json

import click

from discord_webhooks import create_registry


@click.group()
def cli():
    pass


@cli.command()
@click.argument("event_type")
@click.argument("payload", type=click.File("r"))
def replay(event_type, payload):
    "Send a saved webhook payload through the registered actions"
    event = json.load(payload)
    registry = create_registry()
    asyncio.run(registry.emit(event_type, event))


@cli.command()
def handlers():
    "List the event types and the actions registered for them"
    registry = create_registry()
    for event_type in sorted(registry.get_registered_events()):
        names = ", ".join(action.name for action in registry.get_handlers(event_type))
        click.echo(f"{event_type}: {names}")


if __name__ == "__main__":
    cli()
