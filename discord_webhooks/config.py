"""
Which events to forward, and how each one is shown on Discord.

The defaults live on the config classes. A YAML file named by the
``DISCORD_WEBHOOKS_CONFIG_FILE`` setting can override any of them::

    events:
      workflow_job: false
    events_config:
      push:
        max_commits_shown: 10
"""

import copy
import logging
from typing import Any, Dict

import yaml

from discord_webhooks import settings
from discord_webhooks.utils import memoize

logger = logging.getLogger(__name__)


class DefaultConfig:
    EVENTS = {
        "push": True,
        "issues": True,
        "workflow_run": True,
        "workflow_job": True,
    }
    EVENTS_CONFIG = {
        "push": {
            "show_file_changes": True,
            "max_commits_shown": 5,
            "show_commit_details": True,
            "embed_color": 0x7289DA,
        },
        "issues": {
            "show_labels": True,
            "show_assignees": True,
            "embed_color": 0x2ECC71,
        },
        "workflow_run": {
            "show_duration": True,
            "show_conclusion": True,
            "embed_color": 0x3498DB,
        },
        "workflow_job": {
            "show_steps": False,
            "show_runner": True,
            "embed_color": 0x9B59B6,
        },
    }

    def __init__(self):
        # Copy the class-level defaults so overrides never leak between
        # instances.
        self.EVENTS = copy.deepcopy(self.EVENTS)
        self.EVENTS_CONFIG = copy.deepcopy(self.EVENTS_CONFIG)

    def sections(self) -> Dict[str, Dict[str, Any]]:
        return {"events": self.EVENTS, "events_config": self.EVENTS_CONFIG}

    def update_from_yaml(self, path: str) -> None:
        """Overlay the sections found in the YAML file at `path`."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path!r} must contain a mapping, not {type(data).__name__}")
        sections = self.sections()
        for section_name, section in data.items():
            if section_name not in sections:
                logger.warning(f"Ignoring unknown config section {section_name!r} in {path}")
                continue
            _deep_update(sections[section_name], section)


class TestingConfig(DefaultConfig):
    EVENTS_CONFIG = dict(
        DefaultConfig.EVENTS_CONFIG,
        workflow_job=dict(DefaultConfig.EVENTS_CONFIG["workflow_job"], show_steps=True),
    )


CONFIG_CLASSES = {
    "default": DefaultConfig,
    "testing": TestingConfig,
}


def _deep_update(target: Dict, overrides: Dict) -> None:
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _deep_update(target[key], value)
        else:
            target[key] = value


@memoize
def load_config() -> DefaultConfig:
    """
    Build the config object from the settings.

    Cached forever: call ``utils.clear_memoized_values`` to re-read it.
    """
    name = (settings.DISCORD_WEBHOOKS_CONFIG or "default").lower()
    try:
        config_class = CONFIG_CLASSES[name]
    except KeyError:
        raise ValueError(f"Unknown config {name!r}, expected one of {sorted(CONFIG_CLASSES)}") from None
    config = config_class()
    if settings.DISCORD_WEBHOOKS_CONFIG_FILE:
        logger.info(f"Reading config overrides from {settings.DISCORD_WEBHOOKS_CONFIG_FILE}")
        config.update_from_yaml(settings.DISCORD_WEBHOOKS_CONFIG_FILE)
    return config


def get(section: str, key: str, default: Any = None) -> Any:
    """
    Get one config value, like ``get("events_config", "issues")``.
    """
    sections = load_config().sections()
    if section not in sections:
        raise KeyError(f"No config section named {section!r}")
    return sections[section].get(key, default)
