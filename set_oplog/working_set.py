from typing import Iterable, Set, Tuple, Union

from attr import attrib, attrs


@attrs(frozen=True, slots=True, repr=False)
class NotANumber:
    r"""
    The value a malformed numeric payload stands for under the ``sentinel`` policy.

    There is exactly one instance, `NOT_A_NUMBER`.
    Unlike ``float("nan")`` it equals itself,
    so a `WorkingSet` holds at most one copy of it
    and removing it after adding it empties the slot again.

    When members are ordered, the sentinel sorts before every integer.
    """

    def __repr__(self) -> str:
        return "NaN"


NOT_A_NUMBER = NotANumber()

Member = Union[int, NotANumber]


def _member_sort_key(member: Member) -> Tuple[int, int]:
    if isinstance(member, NotANumber):
        return (0, 0)
    return (1, member)


def sort_members(members: Iterable[Member]) -> Tuple[Member, ...]:
    """
    Sort *members* ascending by numeric value, with `NOT_A_NUMBER` first.
    """
    return tuple(sorted(members, key=_member_sort_key))


@attrs(slots=True, repr=False)
class WorkingSet:
    r"""
    The in-memory set of distinct integers built up from an operation log.

    Adding a value already present and removing a value which is absent
    both leave the set unchanged.
    """

    _members: Set[Member] = attrib(factory=set, init=False)

    def add(self, value: Member) -> None:
        self._members.add(value)

    def remove(self, value: Member) -> None:
        self._members.discard(value)

    def flush(self) -> None:
        """
        Reserved for a future flush operation.

        This currently does nothing; in particular it does *not* clear the set.
        """

    def sorted_members(self) -> Tuple[Member, ...]:
        return sort_members(self._members)

    def __contains__(self, value: object) -> bool:
        return value in self._members

    def __len__(self) -> int:
        return len(self._members)

    def __repr__(self) -> str:
        return f"WorkingSet({list(self.sorted_members())!r})"
