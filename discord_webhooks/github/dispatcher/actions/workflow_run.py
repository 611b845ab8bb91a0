"""
Announce finished GitHub Actions workflow runs on Discord.
"""

import logging
from typing import Optional

from .... import discord
from ....types import Embed, EventType, WorkflowRunDict
from ....utils import format_duration, get_status_text
from .base import Action

logger = logging.getLogger(__name__)

# Conclusions that get their own color, whatever the configured one is.
CONCLUSION_COLORS = {
    "success": 0x2ECC71,
    "failure": 0xE74C3C,
}


def conclusion_color(conclusion: Optional[str], default: Optional[int]) -> Optional[int]:
    return CONCLUSION_COLORS.get(conclusion or "", default)


class WorkflowRunAction(Action):
    """
    Post an embed when a workflow run completes.

    Requested and in-progress runs are ignored.
    """

    EVENT_TYPES = (EventType.WORKFLOW_RUN,)
    CONFIG_KEY = "workflow_run"

    async def execute(self, event: WorkflowRunDict) -> None:
        if not self.enabled():
            logger.debug("Workflow run events are disabled, not posting")
            return

        if event.get("action") != "completed":
            logger.debug(f"Ignoring workflow run action {event.get('action')!r}")
            return

        await discord.send(self.build_embed(event))

    def build_embed(self, event: WorkflowRunDict) -> Embed:
        options = self.options()
        run = event["workflow_run"]
        repo = event["repository"]["full_name"]
        conclusion = run.get("conclusion")
        status = get_status_text(conclusion)

        embed = Embed(
            title=f"Workflow {run['name']}: {status}",
            description=f"Workflow run [#{run['id']}]({run['html_url']}) in "
                        f"[`{repo}`](https://github.com/{repo}) finished",
            color=conclusion_color(conclusion, options.get("embed_color")),
            url=run["html_url"],
            **discord.get_defaults(event["sender"]),
        )
        if options.get("show_conclusion"):
            embed.add_field("Conclusion", f"`{status}`", inline=True)
        if options.get("show_duration"):
            started = run.get("run_started_at") or run.get("created_at")
            embed.add_field("Duration", format_duration(started, run.get("updated_at")), inline=True)
        if run.get("head_branch"):
            embed.add_field("Branch", f"`{run['head_branch']}`", inline=True)
        return embed
