"""
Iteration utilities for punktcore.

This module provides utility functions for iterating through sequences
with specialized behaviors needed for the Punkt algorithm.
"""

from typing import Any, Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple

from punktcore.core.tokens import PunktToken
from punktcore.exceptions import EmptyInputError


class TokenPair(NamedTuple):
    """A token and the token that follows it, or None at the end of the document."""

    current: PunktToken
    next: Optional[PunktToken]


def pair_iter(iterable: Iterable[Any]) -> Iterator[Tuple[Any, Optional[Any]]]:
    """
    Iterate through pairs of items from an iterable, where the second item
    can be None for the last item.

    Args:
        iterable: The input iterable

    Yields:
        Pairs of (current_item, next_item) where next_item is None for the last item
    """
    # Indexed access for sequences; items are never compared, so equal
    # tokens at different positions are kept apart
    if hasattr(iterable, "__getitem__") and hasattr(iterable, "__len__"):
        sequence = iterable
        length = len(sequence)
        if length == 0:
            return
        for i in range(length - 1):
            yield sequence[i], sequence[i + 1]
        yield sequence[length - 1], None
    else:
        it = iter(iterable)
        sentinel = object()
        prev = next(it, sentinel)
        if prev is sentinel:
            return
        for current in it:
            yield prev, current
            prev = current
        yield prev, None


def token_pairs(tokens: Sequence[PunktToken]) -> List[TokenPair]:
    """
    Pair every token with the token that follows it.

    Args:
        tokens: The annotated tokens of one document

    Returns:
        One TokenPair per token; the last pair's ``next`` is None

    Raises:
        EmptyInputError: If there are no tokens
    """
    pairs = [TokenPair(current, following) for current, following in pair_iter(tokens)]
    if not pairs:
        raise EmptyInputError("Cannot pair an empty token sequence")
    return pairs
