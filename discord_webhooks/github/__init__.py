"""
Handle incoming GitHub events.

Subpackages and modules:

-  ``dispatcher``: Receive incoming events, and delegate processing to
   the actions registered for their event type.
-  ``dispatcher.actions``: Turn events into Discord messages.
"""
