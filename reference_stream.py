from exceptions import InvalidConfiguration, TraceFormatError


DEFAULT_PAGE_SIZE = 100
DEFAULT_TRACE_FILE = 'address.txt'


def parse_address(address, page_size=DEFAULT_PAGE_SIZE):
    page_num = address // page_size
    offset = address % page_size
    return page_num, offset


class ReferenceStream:
    """
    Immutable sequence of memory addresses split into pages of page_size.

    next_use[i] is the next index after i that references the same page,
    or None if the page is never referenced again. It is computed once so
    the optimal policy never rescans the stream.
    """

    def __init__(self, addresses, page_size=DEFAULT_PAGE_SIZE):
        if page_size < 1:
            raise InvalidConfiguration(f"page size must be positive, got {page_size}")

        self.page_size = page_size
        self.addresses = tuple(addresses)
        for address in self.addresses:
            if address < 0:
                raise InvalidConfiguration(f"address must be non-negative, got {address}")

        self.page_numbers = tuple(parse_address(a, page_size)[0] for a in self.addresses)
        self.next_use = self._build_next_use()

    def _build_next_use(self):
        next_use = [None] * len(self.page_numbers)
        seen = {}  # page_num -> nearest later index
        for idx in range(len(self.page_numbers) - 1, -1, -1):
            page_num = self.page_numbers[idx]
            next_use[idx] = seen.get(page_num)
            seen[page_num] = idx
        return tuple(next_use)

    @classmethod
    def from_pages(cls, page_numbers):
        return cls(page_numbers, page_size=1)

    def offset(self, index):
        return parse_address(self.addresses[index], self.page_size)[1]

    def distinct_pages(self):
        return set(self.page_numbers)

    def __len__(self):
        return len(self.addresses)

    def __repr__(self):
        return f"ReferenceStream({len(self)} addresses, page_size={self.page_size})"


def parse_trace(lines):
    addresses = []
    for line_num, line in enumerate(lines, 1):
        if isinstance(line, bytes):
            try:
                line = line.decode("utf-8")
            except UnicodeDecodeError:
                raise TraceFormatError(line_num, line.strip(), "not valid UTF-8") from None
        for token in line.split():
            # Plain decimal digits only: no sign, underscores or non-ASCII digits
            if not (token.isascii() and token.isdigit()):
                raise TraceFormatError(line_num, token)
            addresses.append(int(token))
    return addresses


def load_reference_stream(filename, page_size=DEFAULT_PAGE_SIZE):
    with open(filename, "rb") as f:
        addresses = parse_trace(f)
    return ReferenceStream(addresses, page_size=page_size)
