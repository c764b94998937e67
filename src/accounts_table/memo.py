from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def _same(left: Any, right: Any) -> bool:
    if left is right:
        return True
    if isinstance(left, (list, tuple)) and isinstance(right, (list, tuple)):
        return len(left) == len(right) and all(a is b for a, b in zip(left, right))
    return left == right


class LastCallMemo(Generic[T]):
    """Remembers the last (arguments, result) pair of a pure function.

    Sequences are compared element by element by identity, anything else with
    ``==``. A call with the same arguments returns the cached result object.
    """

    def __init__(self, func: Callable[..., T]) -> None:
        self._func = func
        self._last_args: tuple[Any, ...] | None = None
        self._last_result: T | None = None
        self.hits = 0
        self.misses = 0

    def __call__(self, *args: Any) -> T:
        if self._last_args is not None and len(args) == len(self._last_args):
            if all(_same(new, old) for new, old in zip(args, self._last_args)):
                self.hits += 1
                return self._last_result  # type: ignore[return-value]
        self.misses += 1
        result = self._func(*args)
        self._last_args = args
        self._last_result = result
        return result

    def clear(self) -> None:
        self._last_args = None
        self._last_result = None
