"""
Viewer Broadcaster Interface

Fan-out of state deltas to every connected viewer (stage screen, audience
phones, admin console).

Follows Dependency Inversion Principle:
- Action processor and timeline scheduler depend on this interface
- The in-memory channel registry implements it
"""

from typing import Any, Dict, Protocol

from anyio.streams.memory import MemoryObjectReceiveStream


class IViewerBroadcaster(Protocol):
    """Protocol for pushing named events to all connected viewers"""

    def register(self) -> MemoryObjectReceiveStream[dict]:
        """
        Open a channel for a new viewer

        Returns:
            Receive stream of SSE messages ({'event': name, 'data': json})

        Note:
            - The first message on every channel is a single `init` event
              carrying the full session snapshot at registration time
        """
        ...

    def unregister(self, stream: MemoryObjectReceiveStream[dict]) -> None:
        """
        Close a viewer channel (called from the viewer's disconnect path)

        Note:
            - Safe to call with an unknown or already closed stream
        """
        ...

    def send(self, event: str, payload: Dict[str, Any]) -> None:
        """
        Deliver an event to every registered channel

        Note:
            - Best effort: a failing channel is skipped, delivery continues
            - Not transactional, partial delivery is acceptable
        """
        ...

    @property
    def connection_count(self) -> int:
        """Number of registered viewer channels"""
        ...
