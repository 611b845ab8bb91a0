"""
Generic utilities.
"""

import functools
from typing import Iterable, Optional

import arrow

from discord_webhooks import logger


class RequestFailed(Exception):
    pass

def log_check_response(response):
    """
    Logs HTTP request and response at debug level and checks if it succeeded.

    Arguments:
        response (requests.Response)

    Raises:
        RequestFailed: if the response status isn't a success.
    """
    msg = "Request: {0.method} {0.url}: {0.body!r}".format(response.request)
    logger.debug(msg)
    msg = "Response: {0.status_code} {0.reason!r} for {0.url}: {0.content!r}".format(response)
    logger.debug(msg)
    try:
        response.raise_for_status()
    except Exception as exc:
        req = response.request
        raise RequestFailed(
            f"HTTP request failed: {req.method} {req.url}: {response.status_code}. "
            f"Response body: {response.content}"
        ) from exc


def truncate(text: str, max_length: int) -> str:
    """
    Shorten `text` to at most `max_length` chars, ending with "..." if cut.
    """
    if len(text) <= max_length:
        return text
    return text[:max_length - 3] + "..."


def pluralize(count: int, singular: str, plural: Optional[str] = None) -> str:
    if count == 1:
        return f"{count} {singular}"
    return f"{count} {plural or singular + 's'}"


def format_file_changes(added: Iterable[str], modified: Iterable[str], removed: Iterable[str]) -> str:
    """
    Summarize file changes like "+ 2 added, ~ 1 modified, - 3 removed".

    Kinds of change with no files are left out.
    """
    parts = []
    for marker, files, verb in [("+", added, "added"), ("~", modified, "modified"), ("-", removed, "removed")]:
        count = len(list(files))
        if count:
            parts.append(f"{marker} {count} {verb}")
    return ", ".join(parts)


STATUS_TEXTS = {
    "success": "SUCCESS",
    "failure": "FAILURE",
    "cancelled": "CANCELLED",
    "skipped": "SKIPPED",
}

def get_status_text(conclusion: Optional[str]) -> str:
    """The text to show for a workflow conclusion. No conclusion yet is "PENDING"."""
    return STATUS_TEXTS.get(conclusion or "", "PENDING")


def format_duration(start: Optional[str], end: Optional[str]) -> str:
    """
    Format the time between two ISO-8601 timestamps: "42s", "3m 5s", "2h 10m".
    """
    if not start or not end:
        return "Unknown"

    seconds = int((arrow.get(end) - arrow.get(start)).total_seconds())
    if seconds < 60:
        return f"{seconds}s"
    elif seconds < 3600:
        minutes, seconds = divmod(seconds, 60)
        return f"{minutes}m {seconds}s"
    else:
        hours, seconds = divmod(seconds, 3600)
        return f"{hours}h {seconds // 60}m"


# A list of all the memoized functions, so that `clear_memoized_values` can
# clear them all.
_memoized_functions = []

def memoize(func):
    """Cache the value returned by a function call forever."""
    func = functools.lru_cache()(func)
    _memoized_functions.append(func)
    return func

def clear_memoized_values():
    """Clear all the values saved by @memoize, to ensure isolated tests."""
    for func in _memoized_functions:
        func.cache_clear()
