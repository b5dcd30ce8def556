"""Sink implementations."""

from .base import Sink
from .memory import InMemorySink
from .stdout import StdoutSink

__all__ = ["Sink", "StdoutSink", "InMemorySink"]
