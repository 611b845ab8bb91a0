"""
Dispatch incoming webhook events to matching actions.
"""

import asyncio
import json
import logging
from typing import Dict, FrozenSet, Iterable, List, Optional, Union

import sentry_sdk

from ...types import EventType
from ...utils import memoize
from .actions.base import Action


logger = logging.getLogger(__name__)


class EventRegistry:
    """
    Maps GitHub event types to the actions that handle them.

    Registration is expected to happen once at startup, before any events
    are emitted. There's no way to unregister an action.
    """

    def __init__(self):
        self._actions: Dict[EventType, List[Action]] = {}

    def register(self, actions: Iterable[Action]) -> None:
        """
        Register `actions` for every event type they subscribe to.

        Registering the same action instance twice for the same event type is
        a no-op.

        Raises:
            ValueError: if an action subscribes to no event types.
        """
        for action in actions:
            if not action.event_types:
                raise ValueError(f"{action.name} doesn't subscribe to any event types")
            for event_type in action.event_types:
                registered = self._actions.setdefault(event_type, [])
                if any(a is action for a in registered):
                    logger.debug(f"{action.name} is already registered for {event_type} events")
                    continue
                registered.append(action)
                logger.info(f"Registered {action.name} for {event_type} events")

    async def emit(self, event_type: Union[EventType, str], event) -> None:
        """
        Run every action registered for `event_type` on `event`.

        The actions run concurrently. A failing action is logged, and doesn't
        affect the others or the caller: this only returns once every action
        has finished, and never raises because of an action.

        Arguments:
            event_type (EventType or str): GitHub event type
            event (Dict[str, Any]): The parsed event payload
        """
        # Copy the list, so a late registration can't change it under us.
        actions = list(self._actions.get(event_type, ()))
        if not actions:
            logger.warning(f"No handlers registered for event type: {event_type}")
            return

        logger.info(f"Processing {event_type} event with {len(actions)} handler(s)")
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"{event_type} payload: {json.dumps(event, sort_keys=True, indent=4, default=str)}")

        await asyncio.gather(*(self._run_action(action, event_type, event) for action in actions))

    async def _run_action(self, action: Action, event_type, event) -> None:
        try:
            await action.execute(event)
        except Exception as exc:    # pylint: disable=broad-except
            logger.exception(f"{action.name} failed: {exc}")
            sentry_sdk.capture_exception(
                exc,
                extras={"action": action.name, "event_type": str(event_type), "event": event},
            )
        else:
            logger.info(f"{action.name} executed successfully")

    def get_registered_events(self) -> FrozenSet[EventType]:
        """The event types that have at least one action."""
        return frozenset(event_type for event_type, actions in self._actions.items() if actions)

    def get_handlers(self, event_type: Union[EventType, str]) -> List[Action]:
        """The actions registered for `event_type`, in registration order."""
        return list(self._actions.get(event_type, ()))


@memoize
def get_registry() -> EventRegistry:
    """
    The registry for this process.

    Created on first use, and the same object every time after that.
    """
    return EventRegistry()


async def dispatch(event_type, event, registry: Optional[EventRegistry] = None) -> None:
    """
    Hand an incoming event to the actions that want it.

    Arguments:
        event_type (EventType or str): GitHub event type, from the
            ``X-GitHub-Event`` header
        event (Dict[str, Any]): The parsed event payload
        registry (EventRegistry): Where to look for actions. Defaults to the
            process-wide registry.
    """
    registry = registry or get_registry()
    await registry.emit(event_type, event)
