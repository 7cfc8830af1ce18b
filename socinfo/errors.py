class SocInfoError(Exception):
    """Base class for every failure while collecting SoC information."""


class ParseError(SocInfoError):
    def __init__(self, buffer):
        self.buffer = buffer
        super().__init__("socinfo parsing error: `{}`".format(buffer))


class CommandIOError(SocInfoError):
    def __init__(self, program, reason):
        self.program = program
        self.reason = reason
        super().__init__("I/O error: `{}: {}`".format(program, reason))


class Utf8ConversionError(SocInfoError):
    def __init__(self, reason):
        self.reason = reason
        super().__init__("utf8 conversion error: `{}`".format(reason))


class ParseIntError(SocInfoError):
    def __init__(self, value):
        self.value = value
        super().__init__(
            "integer parsing error: `invalid digit found in string: {!r}`".format(value)
        )
