"""
Singly-linked sequence of tariff records.

TariffLinkedList is the storage used by the tariff manager. It keeps a
single forward chain of nodes starting at ``_head`` plus a size counter,
and offers the usual sequence operations (size queries, positional
access, insertion, removal, membership tests, bulk operations, array
export) both as named methods and through the Python container protocol
(len, in, indexing, iteration).

Every positional operation walks the chain from the head, so it costs
O(index). Iteration is done with TariffIterator, which can also unlink
the element it returned last in O(1).

Error conventions:
    ValueError           None given where a tariff is required.
    TypeError            non-tariff element, or non-integer index.
    IndexError           index outside the valid range.
    StopIteration        iterator advanced past the end.
    NotImplementedError  list iterators and sub-lists (slicing).
    RuntimeError         iterator misuse or list modified during iteration.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, List, Optional, Tuple, TypeVar

from tariff_model import MobileTariff, monthly_fee_key


TariffT = TypeVar("TariffT", bound=MobileTariff[Any])


class _Node(Generic[TariffT]):
    """One cell of the chain: a tariff and the link to the next cell."""

    __slots__ = ("tariff", "next")

    def __init__(self, tariff: TariffT, next: Optional["_Node[TariffT]"] = None) -> None:
        self.tariff = tariff
        self.next = next


class TariffLinkedList(Generic[TariffT]):
    """
    Singly-linked list of tariffs.

    The list is generic over the element type, not over the identifier
    type of the tariffs: ``TariffLinkedList[MobileTariff[str]]`` holds
    string-identified tariffs.

    Args:
        tariffs:
            Optional initial content. A single tariff creates a
            one-element list, any other iterable is appended in order.

    Invariants kept by every public method, whether it returns or raises:
        * ``_size == 0`` exactly when ``_head is None``;
        * exactly ``_size`` nodes are reachable from ``_head``, no cycles;
        * every node holds a MobileTariff (never None).
    """

    def __init__(self, tariffs: Optional[Any] = None) -> None:
        self._head: Optional[_Node[TariffT]] = None
        self._size = 0
        # Bumped on every structural change; iterators use it to fail fast.
        self._mod_count = 0

        if tariffs is None:
            return
        if isinstance(tariffs, MobileTariff):
            self.add(tariffs)
        else:
            self.add_all(tariffs)

    # ------------------------------------------------------------------
    # Size queries
    # ------------------------------------------------------------------

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    # ------------------------------------------------------------------
    # Membership and search
    # ------------------------------------------------------------------

    def contains(self, obj: object) -> bool:
        """True if some element equals ``obj``. Non-tariff probes are never contained."""
        return self.index_of(obj) != -1

    def __contains__(self, obj: object) -> bool:
        return self.contains(obj)

    def index_of(self, obj: object) -> int:
        """Position of the first element equal to ``obj``, or -1."""
        if not isinstance(obj, MobileTariff):
            return -1

        index = 0
        current = self._head
        while current is not None:
            if current.tariff == obj:
                return index
            current = current.next
            index += 1
        return -1

    def last_index_of(self, obj: object) -> int:
        """Position of the last element equal to ``obj``, or -1."""
        if not isinstance(obj, MobileTariff):
            return -1

        last_index = -1
        index = 0
        current = self._head
        while current is not None:
            if current.tariff == obj:
                last_index = index
            current = current.next
            index += 1
        return last_index

    def contains_all(self, probes: Iterable[object]) -> bool:
        return all(self.contains(probe) for probe in probes)

    # ------------------------------------------------------------------
    # Positional access
    # ------------------------------------------------------------------

    def get(self, index: int) -> TariffT:
        self._check_index(index, self._size)
        return self._node_at(index).tariff

    def set(self, index: int, tariff: TariffT) -> TariffT:
        """Replace the element at ``index`` and return the one it held before."""
        self._check_index(index, self._size)
        self._check_tariff(tariff)

        node = self._node_at(index)
        previous = node.tariff
        node.tariff = tariff
        return previous

    def add_at(self, index: int, tariff: TariffT) -> None:
        """
        Insert ``tariff`` so that it ends up at position ``index``.

        Elements previously at ``index`` and after shift one position to
        the right. ``index == size`` appends; ``index == 0`` links the new
        node in front of the head without walking the chain.
        """
        self._check_index(index, self._size + 1)
        self._check_tariff(tariff)

        if index == 0:
            self._head = _Node(tariff, self._head)
        else:
            previous = self._node_at(index - 1)
            previous.next = _Node(tariff, previous.next)
        self._size += 1
        self._mod_count += 1

    def remove_at(self, index: int) -> TariffT:
        """Unlink the element at ``index`` and return it."""
        self._check_index(index, self._size)

        if index == 0:
            removed = self._head
            self._head = removed.next
        else:
            previous = self._node_at(index - 1)
            removed = previous.next
            previous.next = removed.next
        self._size -= 1
        self._mod_count += 1
        return removed.tariff

    def __getitem__(self, index: Any) -> TariffT:
        if isinstance(index, slice):
            return self.sub_list(index.start, index.stop)
        return self.get(index)

    def __setitem__(self, index: Any, tariff: TariffT) -> None:
        if isinstance(index, slice):
            raise NotImplementedError("Присвоєння зрiзу не пiдтримується")
        self.set(index, tariff)

    def __delitem__(self, index: Any) -> None:
        if isinstance(index, slice):
            raise NotImplementedError("Видалення зрiзу не пiдтримується")
        self.remove_at(index)

    # ------------------------------------------------------------------
    # Insertion and removal by value
    # ------------------------------------------------------------------

    def add(self, tariff: TariffT) -> bool:
        """Append ``tariff`` at the tail. Always returns True."""
        self._check_tariff(tariff)

        node = _Node(tariff)
        if self._head is None:
            self._head = node
        else:
            self._tail().next = node
        self._size += 1
        self._mod_count += 1
        return True

    def append(self, tariff: TariffT) -> None:
        self.add(tariff)

    def remove(self, obj: object) -> bool:
        """Remove the first element equal to ``obj``; False if there is none."""
        if not isinstance(obj, MobileTariff):
            return False

        previous: Optional[_Node[TariffT]] = None
        current = self._head
        while current is not None:
            if current.tariff == obj:
                self._unlink(previous, current)
                return True
            previous = current
            current = current.next
        return False

    # ------------------------------------------------------------------
    # Bulk operations
    # ------------------------------------------------------------------

    def add_all(self, tariffs: Iterable[TariffT]) -> bool:
        """
        Append every element of ``tariffs`` in order.

        The input is copied and fully validated before any node is
        linked, so a rejected element leaves the list untouched.

        Returns:
            True if the list was modified (the input was not empty).
        """
        first, last, count = self._build_chain(tariffs)
        if first is None:
            return False

        if self._head is None:
            self._head = first
        else:
            self._tail().next = first
        self._size += count
        self._mod_count += 1
        return True

    def add_all_at(self, index: int, tariffs: Iterable[TariffT]) -> bool:
        """
        Insert every element of ``tariffs`` starting at position ``index``.

        The inserted run keeps its input order and occupies positions
        ``[index, index + len(tariffs))``; elements previously at
        ``index`` and after shift right. The input is snapshotted first,
        so passing the list itself inserts a copy of its current content.

        Raises:
            IndexError: if ``index`` is outside ``[0, size]``.
        """
        self._check_index(index, self._size + 1)
        first, last, count = self._build_chain(tariffs)
        if first is None:
            return False

        if index == 0:
            last.next = self._head
            self._head = first
        else:
            previous = self._node_at(index - 1)
            last.next = previous.next
            previous.next = first
        self._size += count
        self._mod_count += 1
        return True

    def remove_all(self, probes: Iterable[object]) -> bool:
        """Remove one occurrence per probe. True if anything was removed."""
        modified = False
        for probe in list(probes):
            if self.remove(probe):
                modified = True
        return modified

    def retain_all(self, keep: Iterable[object]) -> bool:
        """
        Remove every element that is not in ``keep``.

        Done in a single pass with the iterator's own removal, so the
        surviving elements keep their relative order.
        """
        if not hasattr(keep, "__contains__"):
            keep = list(keep)

        modified = False
        iterator = self.iterator()
        while iterator.has_next():
            if iterator.next() not in keep:
                iterator.remove()
                modified = True
        return modified

    def clear(self) -> None:
        """Drop the whole chain at once."""
        self._head = None
        self._size = 0
        self._mod_count += 1

    def sort(self, key: Optional[Callable[[TariffT], Any]] = None, reverse: bool = False) -> None:
        """
        Stable in-place sort, by monthly fee unless ``key`` is given.

        Nodes stay where they are; only their payloads are reassigned.
        """
        if self._size < 2:
            return

        ordered = sorted(self.to_array(), key=key or monthly_fee_key, reverse=reverse)
        current = self._head
        for tariff in ordered:
            current.tariff = tariff
            current = current.next
        self._mod_count += 1

    # ------------------------------------------------------------------
    # Traversal and export
    # ------------------------------------------------------------------

    def iterator(self) -> "TariffIterator[TariffT]":
        return TariffIterator(self)

    def __iter__(self) -> "TariffIterator[TariffT]":
        return self.iterator()

    def to_array(self, buffer: Optional[List[Any]] = None) -> List[Any]:
        """
        Snapshot the list in traversal order.

        Without ``buffer`` a new list of length ``size`` is returned.
        With a ``buffer`` of at least ``size`` slots, the elements are
        written into it (plus a None marker right after the last one when
        the buffer is longer) and the buffer itself is returned; a
        shorter buffer is left alone and a new list is returned instead.
        """
        snapshot: List[Any] = []
        current = self._head
        while current is not None:
            snapshot.append(current.tariff)
            current = current.next

        if buffer is None or len(buffer) < self._size:
            return snapshot

        buffer[: self._size] = snapshot
        if len(buffer) > self._size:
            buffer[self._size] = None
        return buffer

    # ------------------------------------------------------------------
    # Unsupported operations
    # ------------------------------------------------------------------

    def list_iterator(self, index: Optional[int] = None) -> Any:
        raise NotImplementedError("Операцiя list_iterator не пiдтримується")

    def sub_list(self, from_index: Optional[int], to_index: Optional[int]) -> Any:
        raise NotImplementedError("Операцiя sub_list не пiдтримується")

    # ------------------------------------------------------------------
    # Comparison and representation
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TariffLinkedList):
            other_items = other.to_array()
        elif isinstance(other, (list, tuple)):
            other_items = list(other)
        else:
            return NotImplemented
        return self.to_array() == other_items

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_array()!r})"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _check_index(self, index: int, upper: int) -> None:
        """Require ``0 <= index < upper``; negative indices never wrap around."""
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"iндекс має бути цiлим числом, отримано {index!r}")
        if index < 0 or index >= upper:
            raise IndexError(f"iндекс: {index}, Розмiр: {self._size}")

    @staticmethod
    def _check_tariff(tariff: object) -> None:
        if tariff is None:
            raise ValueError("Тариф не може бути None")
        if not isinstance(tariff, MobileTariff):
            raise TypeError(f"Очiкувався тариф, отримано {type(tariff).__name__}")

    def _node_at(self, index: int) -> _Node[TariffT]:
        current = self._head
        for _ in range(index):
            current = current.next
        return current

    def _tail(self) -> _Node[TariffT]:
        current = self._head
        while current.next is not None:
            current = current.next
        return current

    def _build_chain(
        self,
        tariffs: Iterable[TariffT],
    ) -> Tuple[Optional[_Node[TariffT]], Optional[_Node[TariffT]], int]:
        """
        Copy ``tariffs`` into a detached chain of new nodes.

        Returns (first, last, count); (None, None, 0) for empty input.
        Validation of all elements happens before the chain is built.
        """
        if tariffs is None:
            raise ValueError("Колекцiя не може бути None")

        snapshot = list(tariffs)
        for tariff in snapshot:
            self._check_tariff(tariff)
        if not snapshot:
            return None, None, 0

        first = _Node(snapshot[0])
        last = first
        for tariff in snapshot[1:]:
            last.next = _Node(tariff)
            last = last.next
        return first, last, len(snapshot)

    def _unlink(self, previous: Optional[_Node[TariffT]], node: _Node[TariffT]) -> None:
        """Detach ``node``, whose predecessor is ``previous`` (None for the head)."""
        if previous is None:
            self._head = node.next
        else:
            previous.next = node.next
        self._size -= 1
        self._mod_count += 1


class TariffIterator(Generic[TariffT]):
    """
    Forward, one-shot traversal of a TariffLinkedList.

    Besides the Python iterator protocol it offers ``has_next``/``next``
    and ``remove``, which unlinks the element returned last. The
    iterator caches the predecessor of that element, so removal does not
    walk the chain again.

    Structural changes made to the list by anything other than this
    iterator's ``remove`` make the next step raise RuntimeError.
    """

    def __init__(self, owner: TariffLinkedList[TariffT]) -> None:
        self._owner = owner
        self._next_node = owner._head
        self._last_returned: Optional[_Node[TariffT]] = None
        # Node preceding _last_returned (or preceding _next_node after a removal).
        self._previous: Optional[_Node[TariffT]] = None
        self._expected_mod_count = owner._mod_count

    def __iter__(self) -> "TariffIterator[TariffT]":
        return self

    def has_next(self) -> bool:
        return self._next_node is not None

    def __next__(self) -> TariffT:
        self._check_for_comodification()
        if self._next_node is None:
            raise StopIteration

        if self._last_returned is not None:
            self._previous = self._last_returned
        self._last_returned = self._next_node
        self._next_node = self._next_node.next
        return self._last_returned.tariff

    def next(self) -> TariffT:
        return self.__next__()

    def remove(self) -> None:
        """Unlink the element returned by the last ``next`` call."""
        self._check_for_comodification()
        if self._last_returned is None:
            raise RuntimeError("Немає елемента для видалення: спочатку викличте next()")

        self._owner._unlink(self._previous, self._last_returned)
        self._last_returned = None
        self._expected_mod_count = self._owner._mod_count

    def _check_for_comodification(self) -> None:
        if self._owner._mod_count != self._expected_mod_count:
            raise RuntimeError("Список змiнено пiд час iтерацiї")
