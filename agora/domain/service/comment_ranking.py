"""Ordering of top-level comment threads.

Thread order only ever looks at the root comment; replies stay oldest-first
regardless of the sort mode.
"""

from typing import Iterable

from agora.domain.model.comment import Comment, CommentThread
from agora.domain.value import CommentSort


def popularity_score(comment: Comment) -> int:
    """Net votes."""
    return comment.upvotes - comment.downvotes


def controversy_score(comment: Comment) -> float:
    """Engagement weighted towards an even up/down split.

    ``(up + down) / (|up - down| + 1)``; a comment without votes scores 0.
    """
    total = comment.upvotes + comment.downvotes
    if total == 0:
        return 0.0
    return total / (abs(comment.upvotes - comment.downvotes) + 1)


def merge_candidates(*batches: Iterable[Comment]) -> list[Comment]:
    """Concatenate batches, keeping the first occurrence of each comment."""
    seen = set()
    merged = []
    for batch in batches:
        for comment in batch:
            if comment.id in seen:
                continue
            seen.add(comment.id)
            merged.append(comment)
    return merged


def rank_threads(
    threads: list[CommentThread], sort: CommentSort
) -> list[CommentThread]:
    """Order threads for display.

    ``newest`` sorts by creation time (id breaks exact ties). The score based
    orders are stable, so equal scores keep the order the candidates were
    fetched in.

    Args:
        threads: Candidate threads in fetch order
        sort: Sort mode

    Returns:
        New list in display order
    """
    if sort == CommentSort.NEWEST:
        return sorted(
            threads, key=lambda t: (t.root.created_at, t.root.id), reverse=True
        )
    if sort == CommentSort.POPULAR:
        return sorted(threads, key=lambda t: popularity_score(t.root), reverse=True)
    return sorted(threads, key=lambda t: controversy_score(t.root), reverse=True)


def drop_empty_deleted(threads: list[CommentThread]) -> list[CommentThread]:
    """Remove deleted roots that have no live replies left to show."""
    return [t for t in threads if not (t.root.is_deleted and not t.replies)]
