"""Flattening of validation failure trees."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from schema_messages.models.failure import ValidationFailure


def iter_leaf_failures(failures: Iterable[ValidationFailure]) -> Iterator[ValidationFailure]:
    """Yield leaf failures depth-first, left to right.

    Composite failures are replaced by their sub errors. Uses an explicit
    stack, so nesting depth is not bounded by the recursion limit.
    """
    stack: list[Iterator[ValidationFailure]] = [iter(failures)]
    while stack:
        failure = next(stack[-1], None)
        if failure is None:
            stack.pop()
        elif failure.is_composite:
            stack.append(iter(failure.sub_errors))
        else:
            yield failure


def flatten_failures(failures: Iterable[ValidationFailure]) -> list[ValidationFailure]:
    """Return every leaf failure of the tree in encounter order.

    Args:
        failures: Top-level failures of a validation outcome

    Returns:
        Leaf failures; duplicates are kept
    """
    return list(iter_leaf_failures(failures))
