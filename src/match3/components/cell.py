class _Empty:
    """Marker for a cleared cell awaiting gravity and refill."""

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'EMPTY'

    def __bool__(self) -> bool:
        return False


EMPTY = _Empty()
