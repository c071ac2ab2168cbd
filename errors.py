# errors.py
# Everything that can abort a hiscore lookup, and the HTTP status each one maps to.

import logging

logger = logging.getLogger(__name__)


class HiscoreError(Exception):
    """Base class for errors raised while loading a player's hiscore."""

    status_code = 500

    def log(self):
        """Log this error, with its traceback. Level is based on the status code."""
        level = logging.ERROR if self.status_code >= 500 else logging.DEBUG
        logger.log(level, "API Error: %s", self, exc_info=self)


class HiscoreParseError(HiscoreError):
    """
    The hiscore sent back something we can't parse. That's a server error
    on our side: better to give a 500 than incomplete data.
    """


class UpstreamError(HiscoreError):
    """The request to the hiscore failed, or the hiscore returned an error status."""

    def __init__(self, message, upstream_status=None):
        super().__init__(message)
        self.upstream_status = upstream_status
        # Forward whatever status the hiscore gave us. No status at all is a 500
        self.status_code = upstream_status or 500
