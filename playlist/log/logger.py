"""
The logger class used throughout the entire package.
"""
import logging

from playlist.log import STAT


class PlaylistLogger(logging.Logger):
    """The logger for all logging operations in Playlist."""

    __slots__ = ()

    def stat(self, msg, *args, **kwargs) -> None:
        """Log 'msg % args' with severity 'STAT'."""
        if self.isEnabledFor(STAT):
            self._log(STAT, msg, args, **kwargs)


logging.setLoggerClass(PlaylistLogger)
