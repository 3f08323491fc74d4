"""
In-memory Viewer Broadcaster Implementation

Singleton fan-out for session state deltas, from the action processor and the
timeline scheduler to every open /events stream.
"""

from typing import Any, Dict, List

from anyio import BrokenResourceError, ClosedResourceError, WouldBlock, create_memory_object_stream
from anyio.streams.memory import MemoryObjectReceiveStream, MemoryObjectSendStream
import orjson

from src.platform.logging.loguru_io import Logger
from src.platform.metrics.stage_metrics import metrics
from src.service.stage.domain.entity.session_state import SessionState
from src.service.stage.domain.enum.action_type import ViewerEventType


def build_sse_message(event: str, payload: Dict[str, Any]) -> dict:
    return {'event': event, 'data': orjson.dumps(payload).decode()}


class ViewerBroadcasterImpl:
    """
    In-memory pub/sub for viewer channels

    Architecture:
    - ActionProcessor / TimelineScheduler → send() → every channel → SSE endpoint
    - One bounded stream pair per connected viewer
    - Runs on the event loop thread only, no locking

    Memory Management:
    - Stream max buffer: VIEWER_STREAM_BUFFER_SIZE messages
    - Drop policy: a full, closed or broken channel misses the event
    - Cleanup: the SSE endpoint unregisters its own channel on disconnect
    """

    def __init__(self, *, session_state: SessionState, buffer_size: int = 100) -> None:
        self._session_state = session_state
        self._buffer_size = buffer_size
        self._channels: List[
            tuple[MemoryObjectSendStream[dict], MemoryObjectReceiveStream[dict]]
        ] = []

    @property
    def connection_count(self) -> int:
        return len(self._channels)

    def register(self) -> MemoryObjectReceiveStream[dict]:
        send_stream, receive_stream = create_memory_object_stream[dict](
            max_buffer_size=self._buffer_size
        )

        # init goes in before the channel is visible to send(), so it is always first
        send_stream.send_nowait(
            build_sse_message(ViewerEventType.INIT, self._session_state.snapshot())
        )
        self._channels.append((send_stream, receive_stream))
        metrics.set_viewer_count(count=self.connection_count)

        Logger.base.debug(
            f'📡 [BROADCASTER] Viewer registered (total viewers: {self.connection_count})'
        )
        return receive_stream

    def unregister(self, stream: MemoryObjectReceiveStream[dict]) -> None:
        for i, (send_stream, receive_stream) in enumerate(self._channels):
            if receive_stream is stream:
                send_stream.close()
                receive_stream.close()
                self._channels.pop(i)
                metrics.set_viewer_count(count=self.connection_count)
                Logger.base.debug(
                    f'📡 [BROADCASTER] Viewer unregistered (remaining: {self.connection_count})'
                )
                break

    def send(self, event: str, payload: Dict[str, Any]) -> None:
        message = build_sse_message(event, payload)
        delivered = 0
        failures: Dict[str, int] = {}

        for send_stream, _ in list(self._channels):
            try:
                send_stream.send_nowait(message)
                delivered += 1
            except WouldBlock:
                # Slow consumer
                failures['buffer_full'] = failures.get('buffer_full', 0) + 1
                Logger.base.warning(
                    f'⚠️ [BROADCASTER] Viewer stream full, dropping event (event={event})'
                )
            except (ClosedResourceError, BrokenResourceError) as e:
                failures['closed'] = failures.get('closed', 0) + 1
                Logger.base.warning(
                    f'⚠️ [BROADCASTER] Viewer stream unavailable ({type(e).__name__}), '
                    f'skipping event (event={event})'
                )

        metrics.record_broadcast(event=event, delivered=delivered, failures=failures)
        Logger.base.info(
            f'📡 [BROADCASTER] {event}: delivered={delivered}, '
            f'dropped={sum(failures.values())}'
        )
