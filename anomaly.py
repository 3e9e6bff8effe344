from exceptions import InvalidConfiguration
from policies import Policy
from simulator import run_simulation


def sweep(stream, min_frames, max_frames, algorithm=Policy.FIFO):
    """
    Run one independent simulation per frame count in [min_frames, max_frames]
    and return the (num_frames, page_faults) curve in increasing frame order.
    """
    if min_frames < 1:
        raise InvalidConfiguration(f"frame count must be positive, got {min_frames}")
    if max_frames < min_frames:
        raise InvalidConfiguration(f"empty frame range {min_frames}..{max_frames}")

    return [(num_frames, run_simulation(stream, algorithm, num_frames).page_faults)
            for num_frames in range(min_frames, max_frames + 1)]


def compare_policies(stream, min_frames, max_frames, algorithms=tuple(Policy)):
    return {algorithm: sweep(stream, min_frames, max_frames, algorithm) for algorithm in algorithms}


def find_anomalies(curve):
    # Frame counts whose fault count exceeds the previous point on the curve
    return [curr[0] for prev, curr in zip(curve, curve[1:]) if curr[1] > prev[1]]


def is_monotonic(curve):
    return not find_anomalies(curve)
