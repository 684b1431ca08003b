from __future__ import annotations
import enum

__all__ = ["Sentinel", "SENTINEL", "NoDefault", "NO_DEFAULT"]


class Sentinel(enum.Enum):
    """Class for typing parameters with a sentinel as a default"""
    SENTINEL = -1


SENTINEL = Sentinel.SENTINEL


class NoDefault(enum.Enum):
    """Marker of an attribute declared without a default value"""
    NO_DEFAULT = -1

    def __repr__(self):
        return 'NO_DEFAULT'

    def __bool__(self):
        return False


NO_DEFAULT = NoDefault.NO_DEFAULT
