"""
Action Type Enum - Domain Value Object

Names of the events pushed to viewers. Every host action is broadcast under
its own type, so the same names double as SSE event names.
"""

from enum import StrEnum


class ActionType(StrEnum):
    """Host actions understood by the action processor"""

    SCENE = 'scene'
    JOIN = 'join'
    POLL_START = 'poll:start'
    POLL_VOTE = 'poll:vote'
    POLL_STOP = 'poll:stop'
    POLL_REVEAL = 'poll:reveal'
    MEDIA_PLAY = 'media:play'
    MEDIA_STOP = 'media:stop'
    SOCIAL_FEATURE = 'social:feature'
    OPS_PING = 'ops:ping'
    PERSONA = 'persona'


class ViewerEventType(StrEnum):
    """Events emitted outside the action table"""

    INIT = 'init'
    TIMELINE_STATUS = 'timeline:status'
    JOURNEY_SUMMARY = 'journey:summary'


# Reserved control command, routed to the timeline scheduler instead of the processor
TIMELINE_COMMAND = 'timeline'
