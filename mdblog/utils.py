import re

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def slugify(title: str) -> str:
    """Turn a free-form title into a URL and filename safe identifier."""
    slug = _NON_SLUG_CHARS.sub("-", title.lower())
    return slug.strip("-")
