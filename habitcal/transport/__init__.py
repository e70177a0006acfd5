"""Transport abstraction - base class for message transports.

A transport handles sending and receiving messages and nothing else.
Habit logic lives in the screen / commands layer.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

log = logging.getLogger(__name__)


@dataclass
class IncomingMessage:
    """A message received from any transport."""
    user_id: int
    channel_id: int
    text: str
    transport: str  # "telegram" | etc.
    raw: dict | None = None  # transport-specific raw data


class Transport(ABC):
    """Abstract base class for message transports."""

    @abstractmethod
    async def start(self) -> None:
        """Start the transport (connect, listen for messages)."""
        ...

    @abstractmethod
    async def stop(self) -> None:
        """Gracefully stop the transport."""
        ...

    @abstractmethod
    async def send_message(self, user_id: int, text: str) -> None:
        """Send a text message to a user."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Transport identifier (e.g., 'telegram')."""
        ...
