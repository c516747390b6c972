"""
Error types for LessonView.

Only index violations and unresolvable playlists are exceptions. Unknown
content tags are not errors: they fall back to markdown notes.
"""


class LessonViewError(Exception):
    """Base class for LessonView errors."""


class InvalidIndex(LessonViewError, IndexError):
    """An answer or selection index is outside its valid range."""

    def __init__(self, what: str, index: int, upper: int):
        self.what = what
        self.index = index
        self.upper = upper
        super().__init__(f"{what} index {index} out of range [0, {upper})")


class EmptyPlaylist(LessonViewError, ValueError):
    """A video lesson has neither a playlist nor a content URL."""
