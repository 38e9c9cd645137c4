class DelimapError(Exception):
    """Base class for hard failures raised by delimap."""


class UnsupportedFormatError(DelimapError, ValueError):
    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f"The extension {extension!r} is not supported")
