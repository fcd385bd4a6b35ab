"""
Collection helper utility.

All helpers accept None in place of a collection and treat it as empty.
"""

from collections.abc import MutableSequence, MutableSet
from typing import Any, Callable, Collection, Dict, Hashable, Iterable, List, Optional, Tuple, TypeVar, Union

T = TypeVar('T')
K = TypeVar('K', bound=Hashable)


class CollectionUtils:
    """Stateless helpers for common collection operations."""

    @staticmethod
    def is_empty(collection: Optional[Collection[Any]]) -> bool:
        """Check if a collection is None or has no elements."""
        return collection is None or len(collection) == 0

    @staticmethod
    def contains(collection: Optional[Collection[T]], element: T) -> bool:
        """Check if a collection contains a specific element."""
        return collection is not None and element in collection

    @staticmethod
    def add_all(target: Optional[Union[MutableSequence, MutableSet]], source: Optional[Iterable[T]]) -> None:
        """
        Add all elements from source to target, in source order.

        Lists are extended; sets are updated. Does nothing if either
        argument is None.
        """
        if target is None or source is None:
            return

        if isinstance(target, MutableSet):
            target |= set(source)
        else:
            target.extend(list(source))

    @staticmethod
    def remove_all(target: Optional[Union[MutableSequence, MutableSet]], source: Optional[Iterable[T]]) -> None:
        """
        Remove every element of target that is equal to an element of source.

        Does nothing if either argument is None.
        """
        if target is None or source is None:
            return

        # Snapshot source so removing from a list against itself works
        to_remove = list(source)

        if isinstance(target, MutableSet):
            target -= set(to_remove)
        else:
            target[:] = [item for item in target if item not in to_remove]

    @staticmethod
    def unmodifiable_list(collection: Optional[Iterable[T]]) -> Tuple[T, ...]:
        """
        Create a read-only snapshot of a collection.

        Returns:
            A tuple copy; an empty tuple for None
        """
        if collection is None:
            return ()
        return tuple(collection)

    @staticmethod
    def reverse(collection: Optional[List[T]]) -> None:
        """Reverse the order of elements in a list, in place."""
        if collection is not None:
            collection.reverse()

    @staticmethod
    def filter(collection: Optional[Iterable[T]], predicate: Callable[[T], bool]) -> List[T]:
        """
        Filter a collection based on a predicate.

        Args:
            collection: The collection to filter
            predicate: The predicate to apply

        Returns:
            A new list containing the elements that match the predicate
        """
        if collection is None:
            return []
        return [item for item in collection if predicate(item)]

    @staticmethod
    def find_first(collection: Optional[Iterable[T]], predicate: Callable[[T], bool]) -> Optional[T]:
        """
        Find the first element in a collection that matches a predicate.

        Args:
            collection: The collection to search
            predicate: The predicate to apply

        Returns:
            The first matching element, or None if no match is found
        """
        if collection is None:
            return None
        return next((item for item in collection if predicate(item)), None)

    @staticmethod
    def group_by(collection: Optional[Iterable[T]], classifier: Callable[[T], K]) -> Dict[K, List[T]]:
        """
        Group a collection of elements by a classifier function.

        Args:
            collection: The collection to group
            classifier: The classifier function

        Returns:
            A dict mapping each key produced by the classifier to the list of
            items with that key, in their original order
        """
        groups: Dict[K, List[T]] = {}
        if collection is None:
            return groups

        for item in collection:
            groups.setdefault(classifier(item), []).append(item)
        return groups

    @staticmethod
    def count(collection: Optional[Iterable[T]], predicate: Callable[[T], bool]) -> int:
        """
        Count the number of elements in a collection that match a predicate.

        Args:
            collection: The collection to search
            predicate: The predicate to apply

        Returns:
            The number of matching elements
        """
        if collection is None:
            return 0
        return sum(1 for item in collection if predicate(item))
