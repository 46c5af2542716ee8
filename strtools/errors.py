"""Exceptions raised by the codecs and parsers of this package."""


class InputError(ValueError):
    """Raised when input holds a byte that is not valid at a given offset."""

    def __init__(self, offset: int, byte: int) -> None:
        self.offset = offset
        self.byte = byte
        super().__init__(offset, byte)

    def __str__(self) -> str:
        return f"Input error. offset = {self.offset}, byte = {self.byte}({chr(self.byte)})"