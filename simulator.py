from exceptions import InvalidConfiguration
from memory_manager import FrameTable, Statistics
from policies import Policy, select_victim_fifo, select_victim_lru, select_victim_optimal


DEFAULT_NUM_FRAMES = 5


class VirtualMemorySimulator:

    def __init__(self, algorithm=Policy.FIFO, num_frames=DEFAULT_NUM_FRAMES, record_trace=False):
        if not isinstance(algorithm, Policy):
            raise InvalidConfiguration(f"Unknown algorithm: {algorithm}")
        if num_frames < 1:
            raise InvalidConfiguration(f"frame count must be positive, got {num_frames}")

        self.algorithm = algorithm
        self.num_frames = num_frames
        self.record_trace = record_trace

    def run(self, stream):
        # Fresh state per run; nothing survives between calls
        frame_table = FrameTable(self.num_frames)
        stats = Statistics(self.algorithm, self.num_frames)
        time_counter = 0

        for current_index, page_num in enumerate(stream.page_numbers):
            frame_num = frame_table.contains(page_num)

            if frame_num is not None:
                frame_table.touch(frame_num, current_index)
                stats.record_hit()
            else:
                stats.record_page_fault()
                if not frame_table.is_full():
                    frame_table.admit(page_num, current_index, time_counter)
                else:
                    victim = self.select_victim(frame_table, stream)
                    frame_table.replace(victim, page_num, current_index, time_counter)
                time_counter += 1

            if self.record_trace:
                stats.snapshots.append(frame_table.snapshot())

        stats.frame_table = frame_table
        return stats

    def select_victim(self, frame_table, stream):
        if self.algorithm is Policy.FIFO:
            return select_victim_fifo(frame_table)
        elif self.algorithm is Policy.LRU:
            return select_victim_lru(frame_table)
        elif self.algorithm is Policy.OPT:
            return select_victim_optimal(frame_table, stream)
        else:
            raise InvalidConfiguration(f"Unknown algorithm: {self.algorithm}")


def run_simulation(stream, algorithm, num_frames, record_trace=False):
    return VirtualMemorySimulator(algorithm, num_frames, record_trace=record_trace).run(stream)
