"""
Coroutine exceptions.
"""
__all__ = [
    'CoroutineError', 'Exhausted', 'AllocationError', 'MisuseError',
    'LeakError'
]


class CoroutineError(Exception):
    "Base class for the errors raised by corogen."


class Exhausted(StopIteration):
    """Raised by ``send``/``next`` when the body has finished. This isn't a
    failure, just the terminal outcome: once raised it will be raised on
    every further call."""
    __doc_all__ = []


class AllocationError(CoroutineError, MemoryError):
    """Raised when a allocator can't supply a frame block for a
    RecursiveCoroutine. No coroutine instance is produced."""
    __doc_all__ = []


class MisuseError(CoroutineError, RuntimeError):
    """Raised when the caller breaks the contract: yielding after close,
    yielding from outside the body, sending to a generator that is already
    running, using a disposed coroutine and so on."""
    __doc_all__ = []


class LeakError(CoroutineError):
    "Raised by TrackingAllocator.check_leaks when blocks are still live."
    __doc_all__ = []
