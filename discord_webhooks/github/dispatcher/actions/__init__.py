r"""
Actions evaluated by the dispatcher.

Each action subclasses :class:`~.base.Action`: it lists the GitHub event
types it wants in ``EVENT_TYPES``, and implements ``execute(event)``.

Inputs
------

-  `event\_type`_ is one of the GitHub event types as delivered via the
   ``X-GitHub-Event`` header.

-  event is the event payload parsed into a Python ``dict``.

.. _event\_type: https://docs.github.com/en/webhooks/webhook-events-and-payloads
"""

from ....utils import memoize
from .issues import IssuesAction
from .push import PushAction
from .workflow_job import WorkflowJobAction
from .workflow_run import WorkflowRunAction

# List[Type[Action], ...]: The actions to register, in order
ACTIONS = [
    IssuesAction,
    PushAction,
    WorkflowRunAction,
    WorkflowJobAction,
]


@memoize
def default_actions():
    """One instance of every action in ``ACTIONS``, the same ones every time."""
    return tuple(action_class() for action_class in ACTIONS)
