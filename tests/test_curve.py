"""Tests for keyframe merging on step curves."""

from frame_timeline.timeline.curve import CONSTANT_INTERPOLATION, Curve, Keyframe


def test_merge_keeps_keys_sorted():
    curve = Curve()
    curve.merge(2.0, 1.0)
    curve.merge(0.0, 0.0)
    curve.merge(1.0, 0.5)

    assert curve.times == (0.0, 1.0, 2.0)
    assert curve.values == (0.0, 0.5, 1.0)


def test_merge_is_idempotent():
    curve = Curve()
    curve.merge(0.5, 1.0)
    curve.merge(0.5, 1.0)

    assert curve.keys == (Keyframe(0.5, 1.0),)


def test_merges_closer_than_epsilon_collapse_last_write_wins():
    curve = Curve(epsilon=1e-6)
    curve.merge(1.0, 0.0)
    curve.merge(1.0 + 5e-7, 1.0)
    curve.merge(1.0 - 5e-7, "Cloth")

    assert len(curve) == 1
    assert curve.keys[0].time == 1.0
    assert curve.keys[0].value == "Cloth"


def test_merges_further_than_epsilon_stay_separate():
    curve = Curve(epsilon=1e-6)
    curve.merge(1.0, 0.0)
    curve.merge(1.0 + 2e-6, 1.0)

    assert len(curve) == 2


def test_interpolation_is_constant():
    curve = Curve()
    curve.merge(0.0, 1.0)

    assert curve.interpolation == CONSTANT_INTERPOLATION
    assert curve.has_key_near(0.0)
    assert not curve.has_key_near(0.1)
