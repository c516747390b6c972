"""Render modes a lesson can be classified into."""

from enum import Enum


class RenderMode(str, Enum):
    QUIZ = "quiz"
    VIDEO = "video"
    DOCUMENT = "document"
    RICH_HTML = "rich_html"
    MARKDOWN_NOTES = "markdown_notes"
    UNAVAILABLE = "unavailable"  # absent or coming soon


class DocumentKind(str, Enum):
    EMBEDDABLE = "embeddable"        # shown inline in a document frame
    EXTERNAL_LINK = "external_link"  # shown as an outbound link
