from enum import Enum


class Policy(Enum):
    FIFO = 'FIFO'
    LRU = 'LRU'
    OPT = 'OPT'

    def __str__(self):
        return self.value


# Victim selectors run only on a full table whose incoming page is absent.
# Strict comparisons keep the lowest frame index on ties.

def select_victim_fifo(frame_table):
    oldest_time = float('inf')
    victim_frame = 0

    for frame_num, frame in enumerate(frame_table.frames):
        if frame.insertion_order < oldest_time:
            oldest_time = frame.insertion_order
            victim_frame = frame_num

    return victim_frame


def select_victim_lru(frame_table):
    lru_time = float('inf')
    victim_frame = 0

    for frame_num, frame in enumerate(frame_table.frames):
        if frame.last_access_index < lru_time:
            lru_time = frame.last_access_index
            victim_frame = frame_num

    return victim_frame


def select_victim_optimal(frame_table, stream):
    """
    Optimal algorithm: Replace the page that will be used furthest in the future
    (or never used again).

    A resident page has not been referenced since its last_access_index, so
    the next use recorded for that index is its next reference after the
    current one.
    """
    max_future_time = -1
    victim_frame = 0

    for frame_num, frame in enumerate(frame_table.frames):
        next_ref_time = stream.next_use[frame.last_access_index]

        # Never referenced again: no better choice exists
        if next_ref_time is None:
            return frame_num

        if next_ref_time > max_future_time:
            max_future_time = next_ref_time
            victim_frame = frame_num

    return victim_frame
