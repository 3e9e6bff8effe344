class Frame:
    def __init__(self, page_num, current_index, timestamp):
        self.page_num = page_num
        self.insertion_order = timestamp  # For FIFO
        self.last_access_index = current_index  # For LRU
        self.access_count = 1


class FrameTable:

    def __init__(self, num_frames):
        self.num_frames = num_frames
        # Resident frames in slot order; slots past len(frames) are unused
        self.frames = []

    def contains(self, page_num):
        for i, frame in enumerate(self.frames):
            if frame.page_num == page_num:
                return i
        return None

    def is_full(self):
        return len(self.frames) == self.num_frames

    def admit(self, page_num, current_index, timestamp):
        self.frames.append(Frame(page_num, current_index, timestamp))
        return len(self.frames) - 1

    def touch(self, frame_num, current_index):
        frame = self.frames[frame_num]
        frame.access_count += 1
        frame.last_access_index = current_index

    def replace(self, frame_num, page_num, current_index, timestamp):
        self.frames[frame_num] = Frame(page_num, current_index, timestamp)

    def get_frame_info(self, frame_num):
        return self.frames[frame_num]

    def snapshot(self):
        """Resident page per slot, None for an unused slot."""
        pages = [frame.page_num for frame in self.frames]
        return tuple(pages + [None] * (self.num_frames - len(pages)))

    def __len__(self):
        return len(self.frames)


def format_snapshot(snapshot):
    return "Frame Table - " + " ".join('#' if page is None else str(page) for page in snapshot)


class Statistics:
    def __init__(self, algorithm, num_frames):
        self.algorithm = algorithm
        self.num_frames = num_frames
        self.references = 0
        self.hits = 0
        self.page_faults = 0
        self.snapshots = []
        self.frame_table = None  # Final table of the run

    def record_hit(self):
        self.references += 1
        self.hits += 1

    def record_page_fault(self):
        self.references += 1
        self.page_faults += 1

    def fault_rate(self):
        return self.page_faults / self.references if self.references else 0.0

    def hit_rate(self):
        return self.hits / self.references if self.references else 0.0

    def __str__(self):
        return (f"Frames: {self.num_frames}\n"
                f"References: {self.references}\n"
                f"Page Hits: {self.hits}\n"
                f"Page Faults: {self.page_faults}\n"
                f"Fault Rate: {self.fault_rate():.4f}")
