"""Routing of decoded protobuf messages to per-type callbacks."""

from __future__ import annotations

from typing import Any, Callable, Dict

from google.protobuf.message import Message

MessageCallback = Callable[[Any, Message, float], None]


class ProtobufDispatcher:
    """Calls the callback registered for a message's type, else the default."""

    def __init__(self, default_callback: MessageCallback) -> None:
        self._default = default_callback
        self._callbacks: Dict[str, MessageCallback] = {}

    def register(self, message_type: type, callback: MessageCallback) -> None:
        """Route messages of the generated class ``message_type`` to ``callback``."""
        self.register_descriptor(message_type.DESCRIPTOR, callback)

    def register_descriptor(self, descriptor: Any, callback: MessageCallback) -> None:
        """Route messages described by ``descriptor`` to ``callback``."""
        self._callbacks[descriptor.full_name] = callback

    def dispatch(self, conn: Any, message: Message, receive_time: float) -> None:
        """Deliver ``message`` to the matching callback."""
        callback = self._callbacks.get(message.DESCRIPTOR.full_name, self._default)
        callback(conn, message, receive_time)