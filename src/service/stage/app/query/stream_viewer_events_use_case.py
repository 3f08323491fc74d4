"""
Stream Viewer Events Use Case

SSE streaming of session state to one viewer: the `init` snapshot first,
then every broadcast delta until the viewer disconnects.
"""

from collections.abc import AsyncGenerator
from typing import Self

import anyio
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.stage.app.interface.i_viewer_broadcaster import IViewerBroadcaster


class StreamViewerEventsUseCase:
    """Use case for streaming session events via SSE."""

    def __init__(self, broadcaster: IViewerBroadcaster) -> None:
        self.broadcaster = broadcaster

    @classmethod
    @inject
    def depends(
        cls,
        broadcaster: IViewerBroadcaster = Depends(Provide[Container.viewer_broadcaster]),
    ) -> Self:
        return cls(broadcaster=broadcaster)

    async def stream(self) -> AsyncGenerator[dict, None]:
        """
        Stream viewer events via SSE.

        Yields:
            Dict with SSE `event` name and JSON `data`
        """
        receive_stream = self.broadcaster.register()
        Logger.base.info(
            f'[SSE] Viewer connected (viewers: {self.broadcaster.connection_count})'
        )

        try:
            async for message in receive_stream:
                yield message

        except anyio.get_cancelled_exc_class():
            Logger.base.info('[SSE] Viewer disconnected')
            raise
        except Exception as e:
            Logger.base.error(f'[SSE] Error in viewer stream: {type(e).__name__}: {e}')
            raise
        finally:
            self.broadcaster.unregister(receive_stream)
