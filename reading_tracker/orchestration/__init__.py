"""Orchestration of tracker state and services."""

from .record_store import RecordStore

__all__ = ["RecordStore"]
