from typing import Dict, List, Tuple

import attrs


@attrs.define(frozen=True)
class PollPreset:
    """A branded multiple-choice quiz the host can launch with one call."""

    key: str
    question: str
    option_labels: Tuple[str, ...]
    answer: str

    @property
    def answer_text(self) -> str:
        return f'Correct: {self.answer}'

    def numbered_options(self) -> List[Dict[str, object]]:
        return [{'id': idx, 'label': label} for idx, label in enumerate(self.option_labels, 1)]


POLL_PRESETS: Dict[str, PollPreset] = {
    preset.key: preset
    for preset in (
        PollPreset(
            key='cca',
            question='How many students get their 1st or 2nd choice CCA?',
            option_labels=('50%', '70%', '90%', '100%'),
            answer='90%',
        ),
        PollPreset(
            key='g3jc',
            question='What percentage of majority G3 students qualify for JC?',
            option_labels=('60%', '75%', '90%'),
            answer='90%',
        ),
        PollPreset(
            key='g3poly',
            question='What percentage of majority G3 students qualify for Poly?',
            option_labels=('70%', '85%', '99%'),
            answer='99%',
        ),
        PollPreset(
            key='g2pfp',
            question='What percentage of majority G2 students qualify for PFP?',
            option_labels=('10%', '25%', '40%'),
            answer='25%',
        ),
        PollPreset(
            key='nexus',
            question=(
                'What percentage of students participate in NEXUS 301/302 '
                '(International Exchange / Industry Attachment)?'
            ),
            option_labels=('20%', '35%', '50%'),
            answer='50%',
        ),
    )
}
