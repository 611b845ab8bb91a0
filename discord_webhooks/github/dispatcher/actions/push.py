"""
Announce pushed commits on Discord.
"""

import logging

from .... import discord
from ....types import Embed, EventType, PushDict
from ....utils import format_file_changes, pluralize, truncate
from .base import Action

logger = logging.getLogger(__name__)

# Commit message first lines longer than this are cut.
MESSAGE_LENGTH = 72


def branch_name(ref: str) -> str:
    """ "refs/heads/main" -> "main". Tags and other refs are returned whole."""
    prefix = "refs/heads/"
    if ref.startswith(prefix):
        return ref[len(prefix):]
    return ref


class PushAction(Action):
    """
    Post an embed listing the commits in a push.
    """

    EVENT_TYPES = (EventType.PUSH,)
    CONFIG_KEY = "push"

    async def execute(self, event: PushDict) -> None:
        if not self.enabled():
            logger.debug("Push events are disabled, not posting")
            return

        commits = event.get("commits") or []
        if event.get("deleted") or not commits:
            logger.info(f"Nothing to announce for push to {event.get('ref')!r}: no commits")
            return

        await discord.send(self.build_embed(event))

    def build_embed(self, event: PushDict) -> Embed:
        options = self.options()
        repo = event["repository"]
        branch = branch_name(event["ref"])
        commits = event["commits"]
        repo_url = repo.get("html_url") or f"https://github.com/{repo['full_name']}"

        lines = [
            f"**{pluralize(len(commits), 'new commit')}** pushed to "
            f"[`{repo['full_name']}`]({repo_url}) on `{branch}`",
            "",
        ]
        max_shown = options.get("max_commits_shown", 5)
        for commit in commits[:max_shown]:
            lines.append(self.commit_line(commit, options.get("show_commit_details")))
        if len(commits) > max_shown:
            lines.append(f"... and {len(commits) - max_shown} more")

        embed = Embed(
            title=f"Push to {branch}",
            description="\n".join(lines),
            color=options.get("embed_color"),
            url=event.get("compare"),
            **discord.get_defaults(event["sender"]),
        )

        if options.get("show_file_changes"):
            changes = format_file_changes(
                [f for c in commits for f in c.get("added", [])],
                [f for c in commits for f in c.get("modified", [])],
                [f for c in commits for f in c.get("removed", [])],
            )
            if changes:
                embed.add_field("Files changed", f"```diff\n{changes}\n```")
        return embed

    def commit_line(self, commit, show_details) -> str:
        sha = commit["id"][:7]
        message = truncate(commit["message"].splitlines()[0] if commit["message"] else "", MESSAGE_LENGTH)
        line = f"[`{sha}`]({commit['url']}) {message} - {commit['author']['name']}"
        if show_details:
            changes = format_file_changes(
                commit.get("added", []), commit.get("modified", []), commit.get("removed", []),
            )
            if changes:
                line += f" ({changes})"
        return line
