"""
A module for quick importing the essential core stuff.
(coroutine, recursive_coroutine, the engines, allocators and exceptions)
"""
from .core.context import Context
from .core.generators import Generator, NODEFAULT
from .core.coroutines import coroutine, coro, debug_coroutine, \
        Coroutine, CoroutineInstance, InlineCoroutine
from .core.recursive import recursive_coroutine, debug_recursive_coroutine, \
        RecursiveCoroutine, RecursiveConstructor
from .core.allocators import Allocator, HeapAllocator, TrackingAllocator, \
        LimitedAllocator, default_allocator
from .core.exceptions import CoroutineError, Exhausted, AllocationError, \
        MisuseError, LeakError
from .core import allocators
