"""Linear strategy: three or more frames played back across the step budget."""

from ...constants import LINEAR_SUFFIX
from ..bindings import Binding
from ..curve import KeyValue
from ..regions import TimeRegion, plan_regions
from ..timeline import GenerationMode, Timeline
from .base_strategy import BaseStrategy, SynthesisContext, absent_value, active_value


class LinearStrategy(BaseStrategy):
    """
    Frames become consecutive regions of a single ``<name>_lin`` timeline.

    Every binding seen in any frame gets one key at the start of each region
    plus a trailing key at the end of the budget. A region whose frame does
    not mention the binding holds the absent value: off for objects, zero for
    blend weights, and for materials the base material recorded the first
    time the binding was seen.
    """

    mode = GenerationMode.LINEAR

    def generate(self, context: SynthesisContext) -> tuple[Timeline, ...]:
        regions = plan_regions(len(context.frames), context.config.total_steps)
        samples, fallbacks = self._collect_samples(context)

        timeline = self.new_timeline(context, LINEAR_SUFFIX)
        for binding in sorted(samples, key=Binding.sort_key):
            self._write_curve(
                timeline, context, regions, binding, samples[binding], fallbacks[binding]
            )
        return (timeline,)

    def _collect_samples(
        self, context: SynthesisContext
    ) -> tuple[dict[Binding, dict[int, KeyValue]], dict[Binding, KeyValue]]:
        samples: dict[Binding, dict[int, KeyValue]] = {}
        fallbacks: dict[Binding, KeyValue] = {}

        for frame_index, frame in enumerate(context.frames):
            for endpoint in frame.endpoints():
                binding = self.bind(endpoint, context.root, frame_index)
                if binding is None:
                    continue
                value = active_value(endpoint)

                per_region = samples.setdefault(binding, {})
                # First entry for a binding within one frame wins
                if frame_index in per_region:
                    continue
                per_region[frame_index] = value
                if binding not in fallbacks:
                    fallbacks[binding] = absent_value(endpoint)

        return samples, fallbacks

    def _write_curve(
        self,
        timeline: Timeline,
        context: SynthesisContext,
        regions: tuple[TimeRegion, ...],
        binding: Binding,
        per_region: dict[int, KeyValue],
        fallback: KeyValue,
    ) -> None:
        config = context.config
        for region_index, region in enumerate(regions):
            value = per_region.get(region_index, fallback)
            timeline.set_key(binding, config.step_to_seconds(region.start_step), value)

        end_time = config.step_to_seconds(config.total_steps)
        if timeline.curve(binding).has_key_near(end_time):
            return
        last_value = per_region.get(len(regions) - 1, fallback)
        timeline.set_key(binding, end_time, last_value)
