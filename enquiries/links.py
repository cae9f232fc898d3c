"""
Grammar for the free-text "links" field.

A links value is split on commas or newlines; each piece is trimmed and empty
pieces are dropped. Order is preserved.
"""

import re

LINK_SEPARATORS = re.compile(r"[\n,]")
SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")


def parse_links(value):
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        pieces = [str(item) for item in value if item is not None]
    else:
        pieces = LINK_SEPARATORS.split(str(value))
    return [piece.strip() for piece in pieces if piece.strip()]


def normalize_url(link):
    """Make a link absolute by prefixing https:// when it has no scheme."""
    link = link.strip()
    if not link or SCHEME.match(link):
        return link
    return f"https://{link}"
