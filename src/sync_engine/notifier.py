"""User-facing notification channel.

Notices are fire-and-forget, best-effort text messages. They are never used
for control flow; components report outcomes through return values and use
the notifier only to tell the user what happened.
"""

import logging

logger = logging.getLogger(__name__)


class Notifier:
    """Default notifier that routes notices to the log.

    Presentation layers subclass this and override notice() to display the
    message (see src.cli.output.OutputHandler).
    """

    def notice(self, message: str) -> None:
        logger.info(message)
