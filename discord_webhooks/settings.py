"""Settings for how the webhook should behave."""

import os
from typing import Optional


# The Discord webhook that embeds are posted to. Looks like
# https://discord.com/api/webhooks/ID/TOKEN
DISCORD_WEBHOOK_URL: Optional[str] = os.environ.get("DISCORD_WEBHOOK_URL", None)

# A YAML file whose "events" and "events_config" sections override the
# defaults in discord_webhooks.config.
DISCORD_WEBHOOKS_CONFIG_FILE: Optional[str] = os.environ.get("DISCORD_WEBHOOKS_CONFIG_FILE", None)

# Which config class to start from: "default" or "testing".
DISCORD_WEBHOOKS_CONFIG = os.environ.get("DISCORD_WEBHOOKS_CONFIG", "default")

# How long to wait for Discord to answer, in seconds.
DISCORD_TIMEOUT = float(os.environ.get("DISCORD_TIMEOUT", "10"))
