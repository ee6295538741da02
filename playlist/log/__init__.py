"""
All classes and functions pertaining to logging operations throughout the package.
"""
import logging

#: Summary statistics of a completed operation e.g. the number of tracks parsed.
STAT = logging.DEBUG + 3
logging.addLevelName(STAT, "STAT")
logging.STAT = STAT
