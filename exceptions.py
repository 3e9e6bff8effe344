class SimulatorError(Exception):
    pass


class InvalidConfiguration(SimulatorError, ValueError):
    pass


class TraceFormatError(SimulatorError, ValueError):

    def __init__(self, line_num, token, reason="not a non-negative integer"):
        self.line_num = line_num
        self.token = token
        super().__init__(f"line {line_num}: {token!r} is {reason}")
