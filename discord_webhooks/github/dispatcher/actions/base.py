"""
The interface every dispatcher action implements.
"""

import abc
from typing import Any, Dict, Iterable, Optional, Tuple

from .... import config
from ....types import EventType


class Action(abc.ABC):
    """
    Something to do when GitHub sends us an event.

    Subclasses list the event types they want in ``EVENT_TYPES``, and
    implement :meth:`execute`.

    Attributes:
        name (str): Used in logs to say which action did what
        event_types (Tuple[EventType, ...]): The event types to run for, in
            order
    """

    EVENT_TYPES: Tuple[EventType, ...] = ()

    # The key of this action's sections in the "events" and "events_config"
    # configuration.
    CONFIG_KEY: Optional[str] = None

    def __init__(self, name: Optional[str] = None, event_types: Optional[Iterable[EventType]] = None):
        self.name = name or type(self).__name__
        if event_types is None:
            event_types = self.EVENT_TYPES
        # Keep the order, drop repeats.
        self.event_types = tuple(dict.fromkeys(EventType(t) for t in event_types))
        if not self.event_types:
            raise ValueError(f"{self.name} must subscribe to at least one event type")

    def __repr__(self):
        types = ", ".join(str(t) for t in self.event_types)
        return f"<{type(self).__name__} {self.name!r} [{types}]>"

    @abc.abstractmethod
    async def execute(self, event) -> None:
        """
        Process one event.

        Raise an exception to report failure; the dispatcher logs it.

        Arguments:
            event (Dict[str, Any]): The parsed event payload
        """

    def enabled(self) -> bool:
        """Is this action switched on in the "events" configuration?"""
        if self.CONFIG_KEY is None:
            return True
        return bool(config.get("events", self.CONFIG_KEY, False))

    def options(self) -> Dict[str, Any]:
        """This action's section of the "events_config" configuration."""
        if self.CONFIG_KEY is None:
            return {}
        return config.get("events_config", self.CONFIG_KEY, {})
