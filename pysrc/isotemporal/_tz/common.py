"""Results of looking up a local time in a timezone.

Offsets and times here are plain integers: offsets in seconds east of UTC,
transitions in UTC epoch seconds.
"""

from typing import Union

EpochSecs = int
Offset = int


class Unambiguous:
    """The local time has exactly one valid offset"""

    __slots__ = ("offset",)
    offset: Offset

    def __init__(self, offset: Offset):
        self.offset = offset

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Unambiguous):
            return self.offset == other.offset
        return False  # pragma: no cover

    def __repr__(self) -> str:
        return f"Unambiguous({self.offset})"


class _Transition:
    __slots__ = ("transition", "before", "after")
    transition: EpochSecs
    before: Offset
    after: Offset

    def __init__(self, transition: EpochSecs, before: Offset, after: Offset):
        self.transition = transition
        self.before = before
        self.after = after

    def __eq__(self, other: object) -> bool:
        if type(other) is type(self):
            return (self.transition, self.before, self.after) == (
                other.transition,  # type: ignore[attr-defined]
                other.before,  # type: ignore[attr-defined]
                other.after,  # type: ignore[attr-defined]
            )
        return False  # pragma: no cover

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.transition}, "
            f"{self.before}, {self.after})"
        )


class Gap(_Transition):
    """The local time is skipped: clocks jumped forward at ``transition``"""

    __slots__ = ()


class Fold(_Transition):
    """The local time occurs twice: clocks were set back at ``transition``"""

    __slots__ = ()


Ambiguity = Union[Unambiguous, Gap, Fold]
