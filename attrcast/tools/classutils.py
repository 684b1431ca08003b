from __future__ import annotations
import functools
import typing as t


if t.TYPE_CHECKING:
    from collections.abc import Callable

T = t.TypeVar("T")
P = t.ParamSpec("P")

__all__ = ["synchronized", "locked"]


def synchronized(lock_attr: str = '_lock') -> Callable[[Callable[P, T]], Callable[P, T]]:
    """ Decorator running a method while holding the lock stored on the
        instance attribute ``lock_attr``.
    """
    def synchronized_lock(func, /):
        @functools.wraps(func)
        def locked(inst, *args, **kwargs):
            with getattr(inst, lock_attr):
                return func(inst, *args, **kwargs)
        return locked
    return synchronized_lock


locked = synchronized()
