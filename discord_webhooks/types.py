"""Types specific to discord_webhooks."""

from __future__ import annotations

import dataclasses
import enum
from typing import Any, Dict, List, Optional


class EventType(str, enum.Enum):
    """
    The GitHub event types we know about, as delivered in the
    ``X-GitHub-Event`` header.

    Members are equal to their string values, so the raw header value can be
    used anywhere an EventType is expected.
    """
    PING = "ping"
    PUSH = "push"
    ISSUES = "issues"
    WORKFLOW_RUN = "workflow_run"
    WORKFLOW_JOB = "workflow_job"

    def __str__(self):
        return self.value


# The webhook payloads, as parsed JSON objects.
IssuesDict = Dict
PushDict = Dict
WorkflowRunDict = Dict
WorkflowJobDict = Dict

# The "sender" object found in every payload.
SenderDict = Dict


@dataclasses.dataclass(frozen=True)
class EmbedField:
    name: str
    value: str
    inline: bool = False


@dataclasses.dataclass(frozen=True)
class EmbedAuthor:
    name: str
    url: Optional[str] = None
    icon_url: Optional[str] = None


@dataclasses.dataclass
class Embed:
    """A Discord embed, the rich message body we post."""
    title: Optional[str] = None
    description: Optional[str] = None
    color: Optional[int] = None
    url: Optional[str] = None
    timestamp: Optional[str] = None
    author: Optional[EmbedAuthor] = None
    fields: List[EmbedField] = dataclasses.field(default_factory=list)

    def add_field(self, name: str, value: str, inline: bool = False) -> None:
        self.fields.append(EmbedField(name, value, inline))

    def asdict(self) -> Dict[str, Any]:
        """The JSON form Discord expects, leaving out anything unset."""
        data = dataclasses.asdict(
            self,
            dict_factory=lambda items: {k: v for k, v in items if v is not None},
        )
        if not data["fields"]:
            del data["fields"]
        return data
