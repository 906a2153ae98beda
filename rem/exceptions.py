"""
Exceptions raised by the rem note store
"""


class RemError(Exception):
    """Base class for all rem errors."""
    pass


class DecodeError(RemError):
    """Raised when the notes store content is present but malformed."""
    pass


class EditorError(RemError):
    """Raised when the external editor cannot be launched or fails."""
    pass
