"""Automatically run by pytest to set up test infrastructure."""

import pytest
import requests_mock

import discord_webhooks.utils

from . import settings as test_settings


@pytest.fixture
def requests_mocker():
    """Make requests_mock available as a fixture."""
    mocker = requests_mock.Mocker(real_http=False, case_sensitive=True)
    mocker.start()
    try:
        yield mocker
    finally:
        mocker.stop()


@pytest.fixture(autouse=True)
def settings_for_tests(mocker):
    for name, value in vars(test_settings).items():
        if name.isupper():
            mocker.patch(f"discord_webhooks.settings.{name}", value)


@pytest.fixture(autouse=True)
def reset_all_memoized_functions():
    """Clears the values cached by @memoize before each test. Applied automatically."""
    discord_webhooks.utils.clear_memoized_values()


class FakeDiscord:
    """Collects the embeds posted to the test webhook."""

    def __init__(self, requests_mocker, status_code=204):
        self.adapter = requests_mocker.post(
            test_settings.DISCORD_WEBHOOK_URL,
            status_code=status_code,
            text="" if status_code < 400 else '{"message": "Invalid Form Body"}',
        )

    @property
    def embeds(self):
        posted = []
        for request in self.adapter.request_history:
            posted.extend(request.json()["embeds"])
        return posted


@pytest.fixture
def fake_discord(requests_mocker):
    return FakeDiscord(requests_mocker)


@pytest.fixture
def broken_discord(requests_mocker):
    """A Discord that rejects every message."""
    return FakeDiscord(requests_mocker, status_code=400)
