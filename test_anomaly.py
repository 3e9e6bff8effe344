import pytest

from anomaly import compare_policies, find_anomalies, is_monotonic, sweep
from exceptions import InvalidConfiguration
from policies import Policy
from reference_stream import ReferenceStream


BELADY = ReferenceStream.from_pages([1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5])


def test_fifo_sweep_shows_belady_anomaly():
    curve = sweep(BELADY, 1, 5)
    assert curve == [(1, 12), (2, 12), (3, 9), (4, 10), (5, 5)]
    assert find_anomalies(curve) == [4]
    assert not is_monotonic(curve)


@pytest.mark.parametrize("algorithm", [Policy.LRU, Policy.OPT])
def test_stack_policies_show_no_anomaly(algorithm):
    curve = sweep(BELADY, 1, 6, algorithm)
    assert is_monotonic(curve)


def test_sweep_single_point():
    assert sweep(BELADY, 3, 3) == [(3, 9)]


def test_sweep_of_empty_stream():
    assert sweep(ReferenceStream([]), 1, 3) == [(1, 0), (2, 0), (3, 0)]


@pytest.mark.parametrize("min_frames, max_frames", [(0, 3), (4, 3), (-2, -1)])
def test_sweep_rejects_bad_range(min_frames, max_frames):
    with pytest.raises(InvalidConfiguration):
        sweep(BELADY, min_frames, max_frames)


def test_compare_policies():
    curves = compare_policies(BELADY, 3, 4)
    assert set(curves) == set(Policy)
    assert curves[Policy.FIFO] == [(3, 9), (4, 10)]
    assert curves[Policy.LRU] == [(3, 10), (4, 8)]
    assert curves[Policy.OPT] == [(3, 7), (4, 6)]


def test_find_anomalies_reports_every_rise():
    curve = [(1, 10), (2, 11), (3, 8), (4, 8), (5, 9)]
    assert find_anomalies(curve) == [2, 5]
    assert find_anomalies([]) == []
    assert is_monotonic([(1, 3)])
