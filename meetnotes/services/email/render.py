"""Markdown to HTML rendering for outgoing summaries."""

from markdown_it import MarkdownIt

# CommonMark plus the GFM table and strikethrough extensions models tend to emit.
# Raw HTML passes through, so rendering already-rendered output is a no-op.
_md = MarkdownIt("commonmark").enable(["table", "strikethrough"])


def render_markdown(body: str) -> str:
    """Renders a markdown body to an HTML fragment."""
    return _md.render(body)
