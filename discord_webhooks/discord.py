"""
Deliver embeds to Discord through a channel webhook.
"""

import asyncio
import logging
from typing import Any, Dict

import arrow
import requests

from discord_webhooks import settings
from discord_webhooks.types import Embed, EmbedAuthor, SenderDict
from discord_webhooks.utils import log_check_response

logger = logging.getLogger(__name__)


class DeliveryError(Exception):
    """A message couldn't be handed to Discord."""


def get_discord_session():
    """
    Get the session to post to Discord with, in an easily test-patchable way.
    """
    session = requests.Session()
    session.headers["Content-Type"] = "application/json"
    session.trust_env = False   # prevent reading the local .netrc
    return session


def send_embed(embed: Embed) -> None:
    """
    Post one embed to the configured Discord webhook.

    Raises:
        DeliveryError: if no webhook URL is configured.
        RequestFailed: if Discord didn't answer with a 2xx status.
    """
    try:
        webhook_url = settings.DISCORD_WEBHOOK_URL
        if not webhook_url:
            raise DeliveryError("Discord webhook URL not configured")

        message = {"embeds": [embed.asdict()]}
        with get_discord_session() as session:
            response = session.post(webhook_url, json=message, timeout=settings.DISCORD_TIMEOUT)
        log_check_response(response)
        logger.info(f"Successfully sent Discord message {embed.title!r}")
    except Exception as exc:
        logger.error(f"Failed to send Discord message: {exc}")
        raise


async def send(embed: Embed) -> None:
    """
    Post an embed without blocking the event loop.

    Errors from :func:`send_embed` are raised to the caller.
    """
    await asyncio.to_thread(send_embed, embed)


def get_defaults(sender: SenderDict) -> Dict[str, Any]:
    """
    The embed properties every message shares: who did it, and when.
    """
    return {
        "timestamp": arrow.utcnow().isoformat(),
        "author": EmbedAuthor(
            name=sender["login"],
            url=sender.get("html_url"),
            icon_url=sender.get("avatar_url"),
        ),
    }
