"""On/Off strategy: a single frame toggled by two constant timelines."""

from ...constants import OFF_SUFFIX, ON_SUFFIX
from ..timeline import GenerationMode, Timeline
from .base_strategy import BaseStrategy, SynthesisContext


class OnOffStrategy(BaseStrategy):
    """
    One frame becomes ``<name>_on`` and ``<name>_off``.

    Both hold a single key per binding at t=0: the active values in ``_on``,
    the not-selected values in ``_off``.
    """

    mode = GenerationMode.ON_OFF

    def generate(self, context: SynthesisContext) -> tuple[Timeline, ...]:
        on_timeline = self.new_timeline(context, ON_SUFFIX)
        off_timeline = self.new_timeline(context, OFF_SUFFIX)

        self.write_frame(on_timeline, context, 0, selected=True)
        self.write_frame(off_timeline, context, 0, selected=False)

        return on_timeline, off_timeline
