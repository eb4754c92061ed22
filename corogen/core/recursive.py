"""
The engine for self-referential generators.

A body that builds and drives coroutines of its own type gets a chain of
greenlets, one per level, each kept alive by its own frame block. The blocks
come from a allocator and go back to it on ``dispose()``:

.. sourcecode:: python

    @recursive_coroutine(default=None)
    def walk(ctx):
        try:
            allocator, node = ctx.yield_(None)
            if node is None:
                return
            with walk(allocator) as child:
                child.send(None)
                ctx.yield_from(child, (allocator, node.left))
            ctx.yield_(node.value)
            ...
        finally:
            ctx.close()
"""
__all__ = [
    'RecursiveCoroutine', 'RecursiveConstructor', 'recursive_coroutine',
    'debug_recursive_coroutine'
]

import logging

from corogen.core.allocators import default_allocator
from corogen.core.coroutines import CoroutineInstance, Coroutine, Frame, \
        CoroutineDocstring
from corogen.core.generators import NODEFAULT
from corogen.core.exceptions import MisuseError

log = logging.getLogger(__name__)


class RecursiveCoroutine(CoroutineInstance):
    '''
    Same contract as InlineCoroutine but the frame is a block owned through
    `allocator`. ``dispose()`` must be called exactly once on every built
    instance (or use it as a context manager).

    Disposing a coroutine that didn't finish abandons the body: it is not
    resumed or unwound, so cleanup the body does on its own exit path is not
    guaranteed to run.
    '''
    __slots__ = ('allocator',)

    def __init__(self, body, allocator, **options):
        frame = allocator.create(lambda: Frame(body))
        try:
            super(RecursiveCoroutine, self).__init__(body, frame, **options)
        except BaseException:
            allocator.destroy(frame)
            raise
        self.allocator = allocator

    @classmethod
    def create(cls, body, allocator=default_allocator, send_type=object,
               yield_type=object, default=NODEFAULT, strict=False):
        """Build a coroutine for `body` with a frame from `allocator`.
        Raises AllocationError if the allocator can't provide one."""
        return cls(body, allocator, send_type=send_type,
                   yield_type=yield_type, default=default, strict=strict)

    @property
    def disposed(self):
        return self.state == self.STATE_FINALIZED

    def dispose(self):
        "Give the frame block back to the allocator."
        if self.state == self.STATE_FINALIZED:
            raise MisuseError("%r was already disposed" % self)
        if self.sending:
            raise MisuseError("Can't dispose %r while it runs" % self)
        if self.state == self.STATE_RUNNING and self.debug:
            log.debug("Abandoning suspended %r.", self)
        frame, self.frame = self.frame, None
        self.context.continuation = None
        self.state = self.STATE_FINALIZED
        self.allocator.destroy(frame)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, tb):
        self.dispose()


class RecursiveConstructor(Coroutine):
    __doc__ = CoroutineDocstring("""
    A constructor for recursive generator bodies. Calling it with a allocator
    returns a fresh RecursiveCoroutine.
    Example::

        @recursive_coroutine(yield_type=int, default=None)
        def body(ctx):
            ...
            with body(allocator) as child:
                ...
    """)
    __slots__ = ()

    def __init__(self, func, constructor=RecursiveCoroutine, **options):
        super(RecursiveConstructor, self).__init__(func, constructor,
                                                   **options)

    def __call__(self, allocator=default_allocator):
        "Return a RecursiveCoroutine instance"
        return self.constructor.create(self.wrapped_func, allocator,
                                       **self.options)


class DebugRecursiveConstructor(RecursiveConstructor):
    __slots__ = ()

    def __call__(self, allocator=default_allocator):
        inst = super(DebugRecursiveConstructor, self).__call__(allocator)
        inst.debug = True
        return inst


def recursive_coroutine(func=None, **options):
    """
    A decorator for generator bodies that build coroutines of their own type.
    Takes the same options as `coroutine`.
    """
    if func is None:
        return lambda func: RecursiveConstructor(func, **options)
    return RecursiveConstructor(func, **options)


def debug_recursive_coroutine(func=None, **options):
    if func is None:
        return lambda func: DebugRecursiveConstructor(func, **options)
    return DebugRecursiveConstructor(func, **options)
