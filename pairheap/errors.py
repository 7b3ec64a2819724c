class HeapError(Exception):
    pass


class InvalidArgument(HeapError, ValueError):
    """Bad capacity, count, source array or pair value passed to a Heap."""
    pass


class EmptyHeapError(HeapError, IndexError):
    """Peek or extract on a heap with no pairs."""
    pass


class CapacityExceededError(HeapError):
    """Insert into a heap whose size already equals its capacity."""
    pass
