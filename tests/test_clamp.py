from __future__ import annotations

import math

import numpy as np
import pytest

from threshold_clamp import ThresholdLengthError, clamp


def _expected(values, thresholds):
    return [0.0 if v > t else v for v, t in zip(values, thresholds)]


def _as_list(x):
    return [float(v) for v in x]


@pytest.mark.parametrize("container", [list, lambda xs: np.asarray(xs, dtype=float)])
@pytest.mark.parametrize(
    "values, thresholds, expected",
    [
        ([1.0, 5.0, 3.0], [2.0, 2.0, 3.0], [1.0, 0.0, 3.0]),
        ([-1.0, 0.0], [-2.0, -2.0], [0.0, 0.0]),
        ([0.5, 0.5, 0.5], [0.5, 0.5, 0.5], [0.5, 0.5, 0.5]),
        ([10.0, -10.0], [9.999, -10.001], [0.0, 0.0]),
    ],
)
def test_known_examples(container, values, thresholds, expected):
    v = container(values)
    result = clamp(v, thresholds)
    assert result is None
    assert _as_list(v) == expected


def test_postcondition_on_random_arrays():
    rng = np.random.default_rng(42)
    for _ in range(20):
        n = int(rng.integers(0, 64))
        values = rng.normal(0.0, 1.0, size=n)
        thresholds = rng.normal(0.0, 1.0, size=n)
        original = values.copy()

        clamp(values, thresholds)

        for i in range(n):
            if original[i] > thresholds[i]:
                assert values[i] == 0.0
            else:
                assert values[i] == original[i]


def test_list_and_array_paths_agree():
    rng = np.random.default_rng(7)
    values = rng.uniform(-5.0, 5.0, size=50)
    thresholds = rng.uniform(-5.0, 5.0, size=50)

    as_list = values.tolist()
    as_array = values.copy()
    clamp(as_list, thresholds.tolist())
    clamp(as_array, thresholds)

    assert as_list == as_array.tolist()


@pytest.mark.parametrize("container", [list, lambda xs: np.asarray(xs, dtype=float)])
def test_second_call_matches_recomputation(container):
    values = [3.0, -1.0, 0.5, 2.0, -4.0]
    thresholds = [1.0, -2.0, 0.5, 5.0, -5.0]

    v = container(values)
    clamp(v, thresholds)
    once = _as_list(v)
    assert once == _expected(values, thresholds)

    clamp(v, thresholds)
    assert _as_list(v) == _expected(once, thresholds)


def test_empty_sequences():
    v = []
    clamp(v, [])
    assert v == []

    a = np.array([], dtype=float)
    clamp(a, np.array([], dtype=float))
    assert a.size == 0


@pytest.mark.parametrize("container", [list, lambda xs: np.asarray(xs, dtype=float)])
def test_nan_values_pass_through(container):
    v = container([math.nan, 5.0, math.nan])
    clamp(v, [0.0, 1.0, -100.0])

    assert math.isnan(v[0])
    assert v[1] == 0.0
    assert math.isnan(v[2])


@pytest.mark.parametrize("container", [list, lambda xs: np.asarray(xs, dtype=float)])
def test_nan_threshold_never_zeroes(container):
    v = container([1.0, 2.0])
    clamp(v, [math.nan, 1.0])
    assert _as_list(v) == [1.0, 0.0]


def test_infinities():
    v = [math.inf, -math.inf, 1.0]
    clamp(v, [1e308, -1e308, math.inf])
    assert v == [0.0, -math.inf, 1.0]


def test_thresholds_are_not_modified():
    thresholds = np.array([0.0, 1.0, 2.0])
    snapshot = thresholds.copy()
    clamp(np.array([5.0, 5.0, 5.0]), thresholds)
    np.testing.assert_array_equal(thresholds, snapshot)

    t_list = [0.0, 1.0]
    clamp([3.0, 3.0], t_list)
    assert t_list == [0.0, 1.0]


def test_list_values_with_array_thresholds():
    v = [1.0, 5.0, 3.0]
    clamp(v, np.array([2.0, 2.0, 3.0]))
    assert v == [1.0, 0.0, 3.0]


def test_array_values_with_list_thresholds():
    v = np.array([1.0, 5.0, 3.0])
    clamp(v, [2.0, 2.0, 3.0])
    assert v.tolist() == [1.0, 0.0, 3.0]


def test_integer_array_is_clamped_in_place():
    v = np.array([1, 5, 3])
    clamp(v, [2, 2, 3])
    assert v.dtype.kind == "i"
    assert v.tolist() == [1, 0, 3]


def test_float32_array_keeps_dtype():
    v = np.array([1.0, 5.0], dtype=np.float32)
    clamp(v, [2.0, 2.0])
    assert v.dtype == np.float32
    assert v.tolist() == [1.0, 0.0]


def test_array_view_mutates_base():
    base = np.array([9.0, 1.0, 9.0, 1.0])
    clamp(base[::2], [5.0, 5.0])
    assert base.tolist() == [0.0, 1.0, 0.0, 1.0]


# ─── error handling ───────────────────────────────────────────────────

@pytest.mark.parametrize(
    "values, thresholds",
    [
        ([1.0, 2.0, 3.0], [0.0, 0.0]),
        ([1.0, 2.0], [0.0, 0.0, 0.0]),
        ([1.0], []),
    ],
)
def test_length_mismatch_is_rejected_without_mutation(values, thresholds):
    v = list(values)
    with pytest.raises(ThresholdLengthError, match="same length"):
        clamp(v, thresholds)
    assert v == values

    a = np.asarray(values, dtype=float)
    with pytest.raises(ThresholdLengthError):
        clamp(a, np.asarray(thresholds, dtype=float))
    assert a.tolist() == values


def test_length_error_is_a_value_error():
    assert issubclass(ThresholdLengthError, ValueError)


def test_tuple_values_are_rejected():
    with pytest.raises(TypeError, match="mutable"):
        clamp((1.0, 2.0), [0.0, 0.0])


def test_read_only_array_is_rejected():
    a = np.array([1.0, 2.0])
    a.setflags(write=False)
    with pytest.raises(ValueError, match="read-only"):
        clamp(a, [0.0, 0.0])
    assert a.tolist() == [1.0, 2.0]


def test_two_dimensional_inputs_are_rejected():
    with pytest.raises(ValueError, match="1-D"):
        clamp(np.zeros((2, 2)), np.zeros((2, 2)))
    with pytest.raises(ValueError, match="1-D"):
        clamp(np.zeros(2), np.zeros((2, 1)))
    with pytest.raises(ValueError, match="1-D"):
        clamp([0.0, 0.0], np.zeros((2, 1)))


def test_non_numeric_element_propagates_and_leaves_values_untouched():
    v = [5.0, None, 5.0]
    with pytest.raises(TypeError):
        clamp(v, [0.0, 0.0, 0.0])
    assert v == [5.0, None, 5.0]


def test_typed_buffer_refusing_floats_raises_type_error():
    import array

    v = array.array("i", [5, 1])
    with pytest.raises(TypeError):
        clamp(v, [0, 0])
