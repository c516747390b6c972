"""
Media renderer - HTML fragments for document lessons.

The embedding widgets themselves are external; these helpers only build
the frame or link markup around a URL.
"""

import html

from lessonview.engine import DocumentView


def render_document(view: DocumentView, height: int = 800) -> str:
    """
    Render a document lesson.

    Embeddable documents get a preview frame; anything else becomes an
    outbound link.

    Args:
        view: DocumentView from the orchestrator
        height: Frame height in pixels

    Returns:
        HTML string
    """
    url = html.escape(view.url, quote=True)
    if view.embeddable:
        return (
            f'<iframe src="{url}" title="{html.escape(view.title, quote=True)}" '
            f'width="100%" height="{height}" style="border: none;"></iframe>'
        )
    return (
        f'<a class="document-link" href="{url}" target="_blank" rel="noopener noreferrer">'
        f'Open {html.escape(view.title or "document")}</a>'
    )
