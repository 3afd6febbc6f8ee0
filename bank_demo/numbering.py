"""Account number assignment."""


class AccountNumberSequence:
    """Monotonic account number counter.

    Each ``Bank`` owns one sequence so that numbering state never leaks
    between independent banks (or tests).

    Parameters
    ----------
    start : int
        First number handed out (default 1).
    """

    __slots__ = ("_start", "_next")

    def __init__(self, start: int = 1) -> None:
        self._start = start
        self._next = start

    def next(self) -> int:
        """Return the next account number and advance the counter."""
        value = self._next
        self._next += 1
        return value

    def peek(self) -> int:
        """Return the number the next call to ``next()`` will hand out."""
        return self._next

    def reset(self, start: int | None = None) -> None:
        """Rewind the counter to ``start`` (or the initial start value)."""
        if start is not None:
            self._start = start
        self._next = self._start

    def __repr__(self) -> str:
        return f"AccountNumberSequence(next={self._next})"
