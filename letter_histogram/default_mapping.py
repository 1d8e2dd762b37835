from typing import Generic, TypeVar

_unset = object()

K = TypeVar("K")
V = TypeVar("V")


class DefaultMapping(dict, Generic[K, V]):
    """dict that answers misses with a fixed default.

    Unlike defaultdict, looking up an absent key never inserts it, so
    membership and iteration only ever reflect keys that were set.
    """

    def __init__(self, default: V, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.default = default

    def __missing__(self, key: K) -> V:
        return self.default

    def get(self, key: K, default=_unset) -> V:
        if key in self:
            return super().__getitem__(key)
        return self.default if default is _unset else default

    def set(self, key: K, value: V):
        self[key] = value

    def __repr__(self):
        return f"{type(self).__name__}({self.default!r}, {dict.__repr__(self)})"
