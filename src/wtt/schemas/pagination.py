"""Offset/limit windowing over sorted result sets."""

from collections.abc import Callable, Sequence

from typing import TypeVar

from src.wtt.core.exceptions import ValidationError

T = TypeVar("T")

# size=None means "no upper bound"
UNBOUNDED: int | None = None


def apply_window(items: Sequence[T], position: int = 0, size: int | None = UNBOUNDED) -> list[T]:
    """Return at most `size` items starting at `position`.

    Args:
        items: Already filtered and sorted items
        position: Zero-based offset of the first item
        size: Maximum number of items, or None for all remaining

    Returns:
        The window; fewer than `size` items near the end

    Raises:
        ValidationError: If position or size is negative
    """
    if position < 0:
        raise ValidationError("position must not be negative", details={"position": position})
    if size is None:
        return list(items[position:])
    if size < 0:
        raise ValidationError("size must not be negative", details={"size": size})
    return list(items[position : position + size])


def filter_by_query(
    items: Sequence[T],
    text_of: Callable[[T], str | None],
    query: str | None = None,
    query_type: str | None = None,
) -> list[T]:
    """Keep items whose text contains `query` (case-insensitive).

    query_type is accepted for compatibility with callers that name the
    queried attribute; only plain substring matching is supported.
    """
    if not query:
        return list(items)
    needle = query.casefold()
    return [item for item in items if needle in (text_of(item) or "").casefold()]
