"""
Playlist resolver - Normalize a video lesson into playable items.

Provides:
- resolve_playlist: ordered, non-empty list of VideoItem
- PlaylistCursor: current-item index with auto-advance on video end
"""

import logging
from typing import Optional

from lessonview.errors import EmptyPlaylist, InvalidIndex
from lessonview.schemas import Chapter, LessonContentDescriptor, VideoItem

logger = logging.getLogger(__name__)


def resolve_playlist(descriptor: LessonContentDescriptor, chapter: Optional[Chapter] = None) -> list[VideoItem]:
    """
    Resolve the videos to play for a lesson.

    A non-empty playlist is returned as-is (order preserved). Otherwise the
    lesson's own content URL becomes a single item titled after the chapter.

    Args:
        descriptor: Lesson content descriptor
        chapter: Chapter metadata (supplies the fallback title)

    Returns:
        Non-empty list of VideoItem

    Raises:
        EmptyPlaylist: If there is no playlist and no content URL
    """
    if descriptor.video_playlist:
        return list(descriptor.video_playlist)

    url = descriptor.content.strip()
    if not url:
        raise EmptyPlaylist("Video lesson has no playlist and no content URL")

    title = chapter.title if chapter else ""
    logger.debug(f"No playlist, using content URL as single video: {title!r}")
    return [VideoItem(title=title, url=url)]


class PlaylistCursor:
    """Index of the current item in a resolved playlist."""

    def __init__(self, length: int, index: int = 0):
        if length < 1:
            raise EmptyPlaylist("Playlist cursor needs at least one item")
        self.length = length
        self.index = 0
        self.select(index)

    @property
    def is_last(self) -> bool:
        return self.index == self.length - 1

    @property
    def has_next(self) -> bool:
        return not self.is_last

    def select(self, index: int):
        """Jump to an item chosen by the learner."""
        if not 0 <= index < self.length:
            raise InvalidIndex("playlist", index, self.length)
        self.index = index

    def advance(self) -> bool:
        """
        Move to the next item after the current one ends.

        Stops at the last item (no wrap-around).

        Returns:
            True if the cursor moved
        """
        if self.is_last:
            return False
        self.index += 1
        return True
