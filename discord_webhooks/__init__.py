import logging
import os
import sys

import sentry_sdk

__version__ = "0.1.0"

log_level = os.environ.get('LOGLEVEL', 'INFO').upper()
logger = logging.getLogger(__name__)
handler = logging.StreamHandler(sys.stderr)
handler.setLevel(log_level)
handler.setFormatter(logging.Formatter("[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"))
logger.addHandler(handler)
logger.setLevel(log_level)

# urllib3 is chatty on debug-level, quiet it.
logging.getLogger("urllib3").setLevel("WARN")


def create_registry(actions=None):
    """
    Set up the process-wide event registry with our actions.

    Arguments:
        actions (List[Action]): The actions to register. Defaults to the
            shared instances from ``default_actions()``, so calling this
            again doesn't register them twice.

    Returns:
        EventRegistry: the process-wide registry.
    """
    if os.environ.get("SENTRY_DSN", ""):
        sentry_sdk.init()

    from .github.dispatcher import get_registry
    from .github.dispatcher.actions import default_actions

    if actions is None:
        actions = default_actions()
    registry = get_registry()
    registry.register(actions)
    return registry
