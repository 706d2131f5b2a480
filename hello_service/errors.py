"""Exceptions raised while bringing the service up."""
from __future__ import annotations


class StartupError(Exception):
    """The service cannot start: bad configuration or the port cannot be bound."""
