"""A/B strategy: two frames, each selected by its own constant timeline."""

from ...constants import A_SUFFIX, B_SUFFIX
from ..timeline import GenerationMode, Timeline
from .base_strategy import BaseStrategy, SynthesisContext


class ABStrategy(BaseStrategy):
    """
    Two frames become ``<name>_A`` and ``<name>_B``, all keys at t=0.

    In ``_A`` frame A is written with active values and then frame B with
    not-selected values; ``_B`` writes frame A not-selected and then frame B
    active. A binding shared by both frames keeps the later write.

    The not-selected policy is asymmetric: objects take the inverse of their
    configured flag so the two timelines alternate visibility, while materials
    and blend weights fall back to their base material or zero.
    """

    mode = GenerationMode.AB

    def generate(self, context: SynthesisContext) -> tuple[Timeline, ...]:
        a_timeline = self.new_timeline(context, A_SUFFIX)
        b_timeline = self.new_timeline(context, B_SUFFIX)

        self.write_frame(a_timeline, context, 0, selected=True)
        self.write_frame(a_timeline, context, 1, selected=False)

        self.write_frame(b_timeline, context, 0, selected=False)
        self.write_frame(b_timeline, context, 1, selected=True)

        return a_timeline, b_timeline
