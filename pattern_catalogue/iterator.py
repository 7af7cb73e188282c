"""Traversing a words collection without exposing its storage."""

from collections.abc import Iterable, Iterator
from typing import Any, List, Optional


class AlphabeticalOrderIterator(Iterator):
    """Walks a collection front to back, or back to front when reversed."""

    def __init__(self, collection: List[Any], reverse: bool = False):
        self._collection = collection
        self._reverse = reverse
        self._position = -1 if reverse else 0

    def __next__(self) -> Any:
        size = len(self._collection)
        if not -size <= self._position < size:
            raise StopIteration()

        value = self._collection[self._position]

        self._position += -1 if self._reverse else 1
        return value


class WordsCollection(Iterable):
    def __init__(self, collection: Optional[List[Any]] = None):
        self._collection = collection if collection is not None else []

    def __iter__(self) -> AlphabeticalOrderIterator:
        return AlphabeticalOrderIterator(self._collection)

    def __len__(self) -> int:
        return len(self._collection)

    def get_reverse_iterator(self) -> AlphabeticalOrderIterator:
        return AlphabeticalOrderIterator(self._collection, True)

    def add_item(self, item: Any) -> None:
        self._collection.append(item)


def demo() -> None:
    collection = WordsCollection()
    collection.add_item("First")
    collection.add_item("Second")
    collection.add_item("Third")

    print("Straight traversal:")
    print("\n".join(collection))
    print("")

    print("Reverse traversal:")
    print("\n".join(collection.get_reverse_iterator()))
