"""HTML fragment rendering.

Renders metadata as `<meta>` tags and JSON-LD `<script>` blocks. Output is
plain strings ready to be embedded in a page head.
"""

import html
import json
import secrets
import string
from collections.abc import Iterable

_KEY_ALPHABET = string.ascii_letters + string.digits

# Characters that must not appear raw inside a <script> element
_JSON_ESCAPES = {ord(char): f"\\u{ord(char):04x}" for char in "<>&"}


def generate_unique_key(length: int = 16) -> str:
    """Generate a random alphanumeric key for element ids.

    Args:
        length: Number of characters in the key

    Returns:
        Random key made of ASCII letters and digits
    """
    return "".join(secrets.choice(_KEY_ALPHABET) for _ in range(length))


def meta_tag(attribute: str, key: str, content: str) -> str:
    """Render a single HTML meta tag.

    Args:
        attribute: Name of the key attribute ("property" for OpenGraph, "name" for Twitter)
        key: Attribute value (e.g., "og:title")
        content: Tag content

    Returns:
        Escaped `<meta>` tag, or empty string when content is empty
    """
    if not content:
        return ""
    return (
        f'<meta {attribute}="{html.escape(key)}" content="{html.escape(content)}">'
    )


def render_meta_tags(attribute: str, pairs: Iterable[tuple[str, str]]) -> str:
    """Render key/content pairs as newline-separated meta tags.

    Pairs with empty content are skipped.
    """
    tags = (meta_tag(attribute, key, content) for key, content in pairs)
    return "\n".join(tag for tag in tags if tag)


def json_ld_script(element_id: str, data: object) -> str:
    """Render data as a JSON-LD script element.

    Args:
        element_id: Value of the script id attribute
        data: JSON-serializable structured data

    Returns:
        `<script type="application/ld+json">` element with the serialized data
    """
    payload = json.dumps(data, ensure_ascii=False).translate(_JSON_ESCAPES)
    return (
        f'<script id="{html.escape(element_id)}" type="application/ld+json">'
        f"{payload}</script>"
    )
