"""Tests of the push action."""

import asyncio

import pytest

from discord_webhooks.github.dispatcher.actions import PushAction
from discord_webhooks.github.dispatcher.actions.push import branch_name

from .payloads import commit, push_event


def run_action(event):
    asyncio.run(PushAction().execute(event))


@pytest.mark.parametrize("ref, branch", [
    ("refs/heads/main", "main"),
    ("refs/heads/feature/login", "feature/login"),
    ("refs/tags/v1.0", "refs/tags/v1.0"),
])
def test_branch_name(ref, branch):
    assert branch_name(ref) == branch


def test_push(fake_discord):
    commits = [
        commit("a1b2c3d4e5f6", "Fix the thing\n\nLonger explanation.", added=["new.py"], modified=["old.py"]),
        commit("0123456789ab", "Add tests", author="Bob", removed=["gone.py"]),
    ]
    run_action(push_event(commits))

    [embed] = fake_discord.embeds
    assert embed["title"] == "Push to main"
    assert embed["url"] == "https://github.com/org/repo/compare/000000...abcdef"
    assert embed["color"] == 0x7289DA
    assert embed["description"] == (
        "**2 new commits** pushed to [`org/repo`](https://github.com/org/repo) on `main`\n"
        "\n"
        "[`a1b2c3d`](https://github.com/org/repo/commit/a1b2c3d4e5f6) Fix the thing - Alice"
        " (+ 1 added, ~ 1 modified)\n"
        "[`0123456`](https://github.com/org/repo/commit/0123456789ab) Add tests - Bob (- 1 removed)"
    )
    assert embed["fields"] == [{
        "name": "Files changed",
        "value": "```diff\n+ 1 added, ~ 1 modified, - 1 removed\n```",
        "inline": False,
    }]


def test_push_one_commit(fake_discord):
    run_action(push_event([commit("a1b2c3d4e5f6", "Only one")]))
    [embed] = fake_discord.embeds
    assert embed["description"].startswith("**1 new commit** pushed")
    # No files touched, so no summary.
    assert "fields" not in embed


def test_push_too_many_commits(fake_discord):
    commits = [commit(f"{i:012x}", f"Commit {i}") for i in range(8)]
    run_action(push_event(commits))

    [embed] = fake_discord.embeds
    lines = embed["description"].splitlines()
    assert len([line for line in lines if line.startswith("[`")]) == 5
    assert lines[-1] == "... and 3 more"


def test_push_without_details(fake_discord, mocker):
    mocker.patch.dict(
        "discord_webhooks.config.DefaultConfig.EVENTS_CONFIG",
        {"push": {"show_file_changes": False, "max_commits_shown": 1, "show_commit_details": False}},
    )
    mocker.patch("discord_webhooks.settings.DISCORD_WEBHOOKS_CONFIG", "default")
    run_action(push_event([commit("a1b2c3d4e5f6", "Fix", added=["x.py"])]))

    [embed] = fake_discord.embeds
    assert embed["description"].endswith("Fix - Alice")
    assert "fields" not in embed
    assert "color" not in embed


@pytest.mark.parametrize("event", [
    push_event([], ref="refs/heads/old", deleted=True),
    push_event([]),
])
def test_nothing_to_announce(fake_discord, event):
    run_action(event)
    assert fake_discord.embeds == []
