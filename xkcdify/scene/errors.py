"""
Warning and error types for recoverable conditions met while restyling a figure.
"""


class XkcdifyWarning(UserWarning):
    """Base class for warnings emitted by xkcdify."""


class UnsupportedArtistWarning(XkcdifyWarning):
    """An artist of a kind that cannot be restyled was skipped."""


class StackingWarning(XkcdifyWarning):
    """An artist could not be restacked and was left in place."""


class ChildNotFoundError(LookupError):
    """The artist is not among its parent's children."""
