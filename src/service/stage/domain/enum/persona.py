"""
Persona Enum - Domain Value Object

The closed set of personas the audience can pick in the persona survey.
"""

from enum import StrEnum


class Persona(StrEnum):
    EXPLORER = 'explorer'
    CREATOR = 'creator'
    GUARDIAN = 'guardian'
    TRAILBLAZER = 'trailblazer'

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @classmethod
    def parse(cls, value: object) -> 'Persona | None':
        """Return the persona named by value, or None for anything unrecognized."""
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


_DESCRIPTIONS = {
    Persona.EXPLORER: 'Tries new paths, experiments, and learns by doing',
    Persona.CREATOR: 'Builds solutions, designs experiences, and iterates fast',
    Persona.GUARDIAN: 'Rallies people, supports teams, and keeps spirits high',
    Persona.TRAILBLAZER: 'Thinks ahead, analyses patterns, and leads change',
}
