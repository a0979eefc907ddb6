"""Task helper utilities."""

from __future__ import annotations

from collections.abc import Iterable


def parse_tags(raw: str) -> list[str]:
    """
    Parse a comma-separated tag string.

    Segments are trimmed and empty segments dropped. Order and duplicates
    are preserved.

    Args:
        raw: Tag string such as ``" math, , physics ,math"``

    Returns:
        List of tags, e.g. ``["math", "physics", "math"]``
    """
    return [tag.strip() for tag in raw.split(",") if tag.strip()]


def normalize_tags(value: str | Iterable[str] | None) -> list[str]:
    """Normalize tags given as a comma-separated string or a list."""
    if value is None:
        return []
    if isinstance(value, str):
        return parse_tags(value)
    if not isinstance(value, (list, tuple)):
        raise ValueError("tags must be a list or a comma-separated string")
    return [str(tag).strip() for tag in value if str(tag).strip()]


def resolve_id(ids: Iterable[str], id_or_prefix: str) -> str | None:
    """
    Resolve a full id or unique id prefix to a full id.

    Args:
        ids: All known ids
        id_or_prefix: Full id or prefix typed by the user

    Returns:
        The full id, or None if nothing matches

    Raises:
        ValueError: If the prefix matches more than one id
    """
    id_or_prefix = id_or_prefix.strip()
    if not id_or_prefix:
        return None

    ids = list(ids)
    if id_or_prefix in ids:
        return id_or_prefix

    matches = [i for i in ids if i.startswith(id_or_prefix)]
    if not matches:
        return None
    if len(matches) > 1:
        shown = ", ".join(m[:8] for m in matches[:5])
        if len(matches) > 5:
            shown += f", ... ({len(matches)} total)"
        raise ValueError(
            f"Ambiguous ID '{id_or_prefix}' matches {len(matches)} items: {shown}"
        )
    return matches[0]
