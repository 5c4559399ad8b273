"""Diagnostic sinks."""

from lengthlint.application.collectors.sinks import CollectingSink, FanOutSink, LoggingSink

__all__ = [
    "CollectingSink",
    "LoggingSink",
    "FanOutSink",
]
