import threading


class OnceCell:
    """
    A value built at most once, on first request.

    The first caller of `get_or_build` runs the builder; concurrent first
    callers wait on the lock and then see the built value. Callers that come
    after the build never take the lock. A failing builder leaves the cell
    empty, so the next request tries again.
    """

    def __init__(self):
        self._value = None
        self._built = False
        self._lock = threading.Lock()

    @property
    def built(self):
        return self._built

    def get(self):
        return self._value

    def get_or_build(self, builder):
        if self._built:
            return self._value
        with self._lock:
            if not self._built:
                self._value = builder()
                self._built = True
        return self._value

    def reset(self):
        with self._lock:
            self._value = None
            self._built = False

    def __repr__(self):
        if self._built:
            return f"OnceCell({self._value!r})"
        return "OnceCell(<empty>)"
