"""
Reading Tracker - Personal Reading Progress Tracker

A local, single-user tool for recording books, logging daily reading
progress in pages or minutes, and tracking streaks, achievements and
reading statistics.
"""

__version__ = "1.0.0"
__author__ = "Reading Tracker Contributors"
