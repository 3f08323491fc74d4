from typing import Callable

import attrs


@attrs.define(frozen=True)
class TimelineStep:
    """One cue of the scripted show: fire `action` `offset_ms` after the flow starts."""

    offset_ms: int
    label: str
    action: Callable[[], None]
