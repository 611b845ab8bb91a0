"""
Announce finished GitHub Actions jobs on Discord.
"""

import logging

from .... import discord
from ....types import Embed, EventType, WorkflowJobDict
from ....utils import format_duration, get_status_text
from .base import Action
from .workflow_run import conclusion_color

logger = logging.getLogger(__name__)

MAX_STEPS_SHOWN = 10

STEP_MARKERS = {
    "success": "+",
    "failure": "-",
    "cancelled": "!",
    "skipped": "~",
}


class WorkflowJobAction(Action):
    """
    Post an embed when a workflow job completes.
    """

    EVENT_TYPES = (EventType.WORKFLOW_JOB,)
    CONFIG_KEY = "workflow_job"

    async def execute(self, event: WorkflowJobDict) -> None:
        if not self.enabled():
            logger.debug("Workflow job events are disabled, not posting")
            return

        if event.get("action") != "completed":
            logger.debug(f"Ignoring workflow job action {event.get('action')!r}")
            return

        await discord.send(self.build_embed(event))

    def build_embed(self, event: WorkflowJobDict) -> Embed:
        options = self.options()
        job = event["workflow_job"]
        repo = event["repository"]["full_name"]
        conclusion = job.get("conclusion")
        status = get_status_text(conclusion)

        embed = Embed(
            title=f"Job {job['name']}: {status}",
            description=f"Job [#{job['id']}]({job['html_url']}) in "
                        f"[`{repo}`](https://github.com/{repo}) finished",
            color=conclusion_color(conclusion, options.get("embed_color")),
            url=job["html_url"],
            **discord.get_defaults(event["sender"]),
        )
        embed.add_field("Conclusion", f"`{status}`", inline=True)
        embed.add_field("Duration", format_duration(job.get("started_at"), job.get("completed_at")), inline=True)
        if options.get("show_runner") and job.get("runner_name"):
            embed.add_field("Runner", f"`{job['runner_name']}`", inline=True)

        steps = job.get("steps") or []
        if options.get("show_steps") and steps:
            lines = [
                f"{STEP_MARKERS.get(step.get('conclusion') or '', ' ')} {step['name']}"
                for step in steps[:MAX_STEPS_SHOWN]
            ]
            if len(steps) > MAX_STEPS_SHOWN:
                lines.append(f"  ... {len(steps) - MAX_STEPS_SHOWN} more")
            embed.add_field("Steps", "```diff\n" + "\n".join(lines) + "\n```")
        return embed
