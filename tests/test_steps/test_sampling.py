"""Tests for the sampling plan, traversal and selection loop (no real video)."""

import numpy as np
import pytest

from framesampler.core.errors import ConfigurationError, FrameReadError
from framesampler.steps.s01_extract_frames._sampling import (
    Direction,
    SamplingPlan,
    Traversal,
    flip_horizontal,
    sample_frames,
)


class FakeSource:
    """Returns frames whose pixels hold the 1-based read number."""

    def __init__(self, frame_count: int, failing_reads: set[int] | None = None):
        self.frame_count = frame_count
        self.failing_reads = failing_reads or set()
        self.reads = 0

    def read(self) -> np.ndarray:
        self.reads += 1
        if self.reads in self.failing_reads:
            raise FrameReadError(self.reads)
        frame = np.zeros((2, 3, 3), dtype=np.uint8)
        frame[:, 0] = self.reads % 256  # left column only
        return frame


class RecordingSink:
    def __init__(self):
        self.saved: list[tuple[int, np.ndarray]] = []

    def __call__(self, frame: np.ndarray, counter: int) -> str:
        self.saved.append((counter, frame))
        return f"{counter:04d}.png"


def _run(frame_count, frames_to_extract, direction, failing_reads=None):
    source = FakeSource(frame_count, failing_reads)
    plan = SamplingPlan.build(frame_count, frames_to_extract)
    traversal = Traversal.for_direction(direction, frame_count)
    sink = RecordingSink()
    result = sample_frames(source, plan, traversal, sink)
    return source, sink, result


class TestSamplingPlan:
    def test_interval_is_truncating_division(self):
        plan = SamplingPlan.build(105, 10)
        assert plan.interval == 10
        assert plan.frame_count == 105
        assert plan.frames_to_extract == 10

    def test_selects_multiples_but_not_zero(self):
        plan = SamplingPlan.build(100, 10)
        assert not plan.selects(0)
        assert plan.selects(10)
        assert plan.selects(100)
        assert not plan.selects(15)

    def test_more_frames_than_video_is_rejected(self):
        with pytest.raises(ConfigurationError):
            SamplingPlan.build(5, 10)

    @pytest.mark.parametrize("frames_to_extract", [0, -3])
    def test_non_positive_target_is_rejected(self, frames_to_extract):
        with pytest.raises(ConfigurationError):
            SamplingPlan.build(100, frames_to_extract)

    def test_empty_video_is_rejected(self):
        with pytest.raises(ConfigurationError):
            SamplingPlan.build(0, 1)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            SamplingPlan.build(3, 4)


class TestTraversal:
    def test_forward_visits_one_to_n(self):
        t = Traversal.for_direction(Direction.FORWARD, 5)
        assert list(t.indices()) == [1, 2, 3, 4, 5]
        assert t.flip is False

    def test_reverse_visits_n_minus_one_to_zero(self):
        t = Traversal.for_direction(Direction.REVERSE, 5)
        assert list(t.indices()) == [4, 3, 2, 1, 0]
        assert t.flip is True

    def test_accepts_string_direction(self):
        t = Traversal.for_direction("reverse", 3)
        assert t.step == -1


class TestSampleFrames:
    def test_forward_hundred_frames_ten_samples(self):
        source, sink, result = _run(100, 10, Direction.FORWARD)
        assert result.source_indices == [10, 20, 30, 40, 50, 60, 70, 80, 90, 100]
        assert [c for c, _ in sink.saved] == list(range(1, 11))
        assert result.frame_list == [f"{i:04d}.png" for i in range(1, 11)]
        assert source.reads == 100

    def test_forward_does_not_flip(self):
        _, sink, _ = _run(100, 10, Direction.FORWARD)
        for _, frame in sink.saved:
            assert frame[0, 0, 0] != 0
            assert frame[0, -1, 0] == 0

    def test_reverse_hundred_frames(self):
        source, sink, result = _run(100, 10, Direction.REVERSE)
        # Index 0 is the last one visited and is never selected.
        assert result.source_indices == [90, 80, 70, 60, 50, 40, 30, 20, 10]
        assert [c for c, _ in sink.saved] == list(range(1, 10))
        assert source.reads == 100

    def test_reverse_flips_every_saved_frame(self):
        _, sink, _ = _run(100, 10, Direction.REVERSE)
        for _, frame in sink.saved:
            assert frame[0, 0, 0] == 0
            assert frame[0, -1, 0] != 0

    def test_reverse_reads_sequentially(self):
        _, sink, result = _run(100, 10, Direction.REVERSE)
        # Index 90 is visited on the 10th read.
        _, first = sink.saved[0]
        assert first[0, -1, 0] == 10

    def test_read_failure_is_skipped(self):
        source, sink, result = _run(100, 10, Direction.FORWARD, failing_reads={30})
        assert result.skipped_reads == 1
        assert 30 not in result.source_indices
        assert len(result.frame_list) == 9
        assert [c for c, _ in sink.saved] == list(range(1, 10))
        assert source.reads == 100

    def test_unselected_read_failure_does_not_change_output(self):
        _, _, result = _run(100, 10, Direction.FORWARD, failing_reads={7})
        assert result.skipped_reads == 1
        assert len(result.frame_list) == 10

    def test_all_frames_when_target_equals_count(self):
        _, _, result = _run(6, 6, Direction.FORWARD)
        assert result.source_indices == [1, 2, 3, 4, 5, 6]


class TestFlipHorizontal:
    def test_reverses_column_order(self):
        frame = np.arange(2 * 4 * 3, dtype=np.uint8).reshape(2, 4, 3)
        np.testing.assert_array_equal(flip_horizontal(frame), frame[:, ::-1])
