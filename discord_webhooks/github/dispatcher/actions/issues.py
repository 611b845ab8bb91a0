"""
Announce issue activity on Discord.
"""

import logging

from .... import discord
from ....types import Embed, EventType, IssuesDict
from ....utils import pluralize, truncate
from .base import Action

logger = logging.getLogger(__name__)

# How much of the issue body to quote.
BODY_LENGTH = 300

# Titles at least this long don't fit in an inline field.
TITLE_LENGTH = 50


class IssuesAction(Action):
    """
    Post an embed when an issue is opened, closed, reopened or (un)labeled.
    """

    EVENT_TYPES = (EventType.ISSUES,)
    CONFIG_KEY = "issues"

    async def execute(self, event: IssuesDict) -> None:
        if not self.enabled():
            logger.debug("Issues events are disabled, not posting")
            return

        await discord.send(self.build_embed(event))

    def build_embed(self, event: IssuesDict) -> Embed:
        options = self.options()
        issue = event["issue"]
        repo = event["repository"]["full_name"]
        action_text = event.get("action") or "updated"
        number = issue["number"]
        labels = issue.get("labels") or []
        assignees = issue.get("assignees") or []
        is_open = issue["state"] == "open"

        diff_lines = ["+ Issue opened" if is_open else "- Issue closed"]
        if labels:
            diff_lines.append(f"! {pluralize(len(labels), 'label')} applied")
        description = [
            f">>> Issue **#{number}** {action_text} in [`{repo}`](https://github.com/{repo})",
            "```diff",
            *diff_lines,
            "```",
        ]
        body = (issue.get("body") or "").strip()
        if body:
            description.append(f"> {truncate(body, BODY_LENGTH)}")

        embed = Embed(
            title=f"Issue {action_text}: #{number}",
            description="\n".join(description),
            color=options.get("embed_color"),
            url=issue.get("html_url"),
            **discord.get_defaults(event["sender"]),
        )

        title = issue["title"]
        embed.add_field(
            f"`#{number}`",
            f"```fix\n{truncate(title, TITLE_LENGTH)}\n```",
            inline=len(title) < TITLE_LENGTH,
        )
        if options.get("show_labels") and labels:
            embed.add_field("Labels", ", ".join(f"`{label['name']}`" for label in labels), inline=True)
        if options.get("show_assignees") and assignees:
            embed.add_field(
                "Assignees",
                ", ".join(f"[@{a['login']}](https://github.com/{a['login']})" for a in assignees),
                inline=True,
            )
        embed.add_field("State", "Open" if is_open else "Closed", inline=True)
        return embed
