"""
Content classifier - Decide how a lesson is rendered.

Provides:
- Render mode classification for a content descriptor
- Video and document URL heuristics
- Document-host link normalization ("/view" and "/edit" to "/preview")
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

from lessonview.schemas import (
    Chapter,
    ContentTypeTag,
    DocumentKind,
    LessonContentDescriptor,
    McqQuestion,
    RenderMode,
    MCQ_TAGS,
    DOCUMENT_TAGS,
    HTML_NOTES_TAGS,
)

logger = logging.getLogger(__name__)


VIDEO_HOST_MARKERS = ("youtube.com", "youtu.be")
VIDEO_EXTENSIONS = (".mp4", ".webm", ".ogg", ".ogv", ".mov", ".m4v", ".mkv")

# Hosts whose share links can be shown in a preview frame
DOCUMENT_HOSTS = frozenset({"drive.google.com", "docs.google.com"})

_SHARE_SUFFIX = re.compile(r"/(?:view|edit)/?$")


@dataclass(frozen=True)
class ClassifiedContent:
    """Render mode plus the normalized payload that mode needs."""
    mode: RenderMode
    questions: tuple[McqQuestion, ...] = field(default_factory=tuple)
    document_url: Optional[str] = None
    document_kind: Optional[DocumentKind] = None
    body: str = ""


# -----------------------------------------------------------------------------
# URL heuristics
# -----------------------------------------------------------------------------

def _host(url: str) -> str:
    return (urlsplit(url.strip()).hostname or "").lower()


def is_video_url(url: str) -> bool:
    """True for YouTube links and URLs whose path ends in a video extension."""
    lowered = url.strip().lower()
    if not lowered:
        return False
    if any(marker in lowered for marker in VIDEO_HOST_MARKERS):
        return True
    return urlsplit(lowered).path.endswith(VIDEO_EXTENSIONS)


def is_document_host(url: str) -> bool:
    return _host(url) in DOCUMENT_HOSTS


def normalize_document_url(url: str) -> str:
    """
    Rewrite a document-host share link to its preview form.

    Only links on a known document host are touched. The rewrite is
    idempotent: a "/preview" link is returned unchanged.

    Args:
        url: Document URL as supplied by the content source

    Returns:
        URL suitable for an embedded preview frame
    """
    url = url.strip()
    if not is_document_host(url):
        return url
    parts = urlsplit(url)
    path = _SHARE_SUFFIX.sub("/preview", parts.path)
    return urlunsplit(parts._replace(path=path))


def classify_document_url(url: str) -> DocumentKind:
    """PDF files and document-host links embed; anything else is a link."""
    if urlsplit(url.strip().lower()).path.endswith(".pdf") or is_document_host(url):
        return DocumentKind.EMBEDDABLE
    return DocumentKind.EXTERNAL_LINK


# -----------------------------------------------------------------------------
# Classification
# -----------------------------------------------------------------------------

def classify(descriptor: Optional[LessonContentDescriptor], chapter: Optional[Chapter] = None) -> RenderMode:
    """
    Classify a lesson into exactly one render mode.

    Rules are applied in order and the first match wins. Chapter metadata
    does not affect the mode.

    Args:
        descriptor: Lesson content, or None when the content source has none
        chapter: Chapter metadata for the lesson

    Returns:
        The RenderMode for this lesson
    """
    if descriptor is None or descriptor.is_coming_soon:
        return RenderMode.UNAVAILABLE

    tag = descriptor.type

    if tag in MCQ_TAGS:
        if descriptor.mcq_data:
            return RenderMode.QUIZ
        # QuizEngine rejects zero questions; do not fall through to notes
        return RenderMode.UNAVAILABLE

    if tag == ContentTypeTag.VIDEO_LECTURE or (
        tag == ContentTypeTag.PDF_VIEWER and is_video_url(descriptor.content)
    ):
        return RenderMode.VIDEO

    if tag in DOCUMENT_TAGS:
        return RenderMode.DOCUMENT

    if tag in HTML_NOTES_TAGS:
        return RenderMode.RICH_HTML

    return RenderMode.MARKDOWN_NOTES


def classify_content(
    descriptor: Optional[LessonContentDescriptor],
    chapter: Optional[Chapter] = None,
) -> ClassifiedContent:
    """Classify a lesson and extract the payload for its render mode."""
    mode = classify(descriptor, chapter)

    if mode == RenderMode.UNAVAILABLE:
        return ClassifiedContent(mode=mode)

    if mode == RenderMode.QUIZ:
        return ClassifiedContent(mode=mode, questions=tuple(descriptor.questions))

    if mode == RenderMode.DOCUMENT:
        url = normalize_document_url(descriptor.content)
        return ClassifiedContent(
            mode=mode,
            document_url=url,
            document_kind=classify_document_url(url),
        )

    # video payload comes from the playlist resolver
    return ClassifiedContent(mode=mode, body=descriptor.content)
