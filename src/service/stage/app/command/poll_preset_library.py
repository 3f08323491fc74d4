from typing import Dict, List

from src.platform.logging.loguru_io import Logger
from src.service.stage.app.command.action_processor import ActionProcessor
from src.service.stage.domain.enum.action_type import ActionType
from src.service.stage.domain.value_object.poll_preset import POLL_PRESETS, PollPreset


class PollPresetLibrary:
    """Launches catalogue quizzes through the action processor."""

    def __init__(
        self,
        *,
        action_processor: ActionProcessor,
        preset_duration_ms: int = 20000,
        presets: Dict[str, PollPreset] = POLL_PRESETS,
    ) -> None:
        self.action_processor = action_processor
        self.preset_duration_ms = preset_duration_ms
        self._presets = presets

    def keys(self) -> List[str]:
        return list(self._presets)

    def catalogue(self) -> List[Dict[str, object]]:
        return [
            {'key': preset.key, 'question': preset.question, 'options': list(preset.option_labels)}
            for preset in self._presets.values()
        ]

    def start_preset(self, key: str) -> bool:
        """
        Switch the stage to the poll scene and start the preset quiz

        Returns:
            False for an unknown key (nothing is mutated or broadcast)
        """
        preset = self._presets.get(key)
        if preset is None:
            Logger.base.warning(f'⚠️ [PRESET] Unknown preset {key!r}')
            return False

        self.action_processor.state.last_preset = key
        self.action_processor.apply(ActionType.SCENE, {'scene': 'poll'})
        self.action_processor.apply(
            ActionType.POLL_START,
            {
                'question': preset.question,
                'options': preset.numbered_options(),
                'durationMs': self.preset_duration_ms,
                'answerText': preset.answer_text,
            },
        )
        Logger.base.info(f'🗳️ [PRESET] Started preset {key}')
        return True
