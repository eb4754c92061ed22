"""
Allocators for the frame blocks of RecursiveCoroutine.

A allocator has two calls:

* create(factory) - return a new block made by calling `factory()`, or raise
  AllocationError
* destroy(block) - give the block back

The recursive engine calls ``create`` once when it's built and ``destroy``
once when it's disposed.
"""
__all__ = [
    'Allocator', 'HeapAllocator', 'TrackingAllocator', 'LimitedAllocator',
    'default_allocator'
]

import logging

from corogen.core.exceptions import AllocationError, MisuseError, LeakError

log = logging.getLogger(__name__)


class Allocator(object):
    """All allocators derive from this.

    Note: you don't really use this, this is for subclassing for other
    allocators.
    """
    __slots__ = ()

    def create(self, factory):
        raise NotImplementedError()

    def destroy(self, block):
        raise NotImplementedError()

    def __repr__(self):
        return "<%s at 0x%X>" % (self.__class__.__name__, id(self))


class HeapAllocator(Allocator):
    "The general purpose allocator: just builds the block, never fails."
    __slots__ = ()

    def create(self, factory):
        try:
            return factory()
        except MemoryError as exc:
            raise AllocationError("%r failed to create a block: %s" % (
                self, exc)) from exc

    def destroy(self, block):
        if hasattr(block, 'clear'):
            block.clear()


class TrackingAllocator(HeapAllocator):
    """
    Keeps count of the live blocks, like a testing allocator:

    .. sourcecode:: python

        alloc = TrackingAllocator()
        ...
        alloc.check_leaks()

    * created, destroyed - totals since construction
    * live - blocks created and not yet destroyed

    Destroying a block that isn't live raises MisuseError.
    """
    __slots__ = ('blocks', 'created', 'destroyed')

    def __init__(self):
        self.blocks = {}
        self.created = self.destroyed = 0

    @property
    def live(self):
        return len(self.blocks)

    def create(self, factory):
        block = super(TrackingAllocator, self).create(factory)
        self.blocks[id(block)] = block
        self.created += 1
        log.debug("%r created %r (%s live)", self, block, self.live)
        return block

    def destroy(self, block):
        if self.blocks.pop(id(block), None) is None:
            raise MisuseError("%r doesn't own %r (double free?)" % (
                self, block))
        self.destroyed += 1
        log.debug("%r destroyed %r (%s live)", self, block, self.live)
        super(TrackingAllocator, self).destroy(block)

    def check_leaks(self):
        if self.blocks:
            raise LeakError("%s blocks leaked: %r" % (
                self.live, list(self.blocks.values())))

    def __repr__(self):
        return "<%s at 0x%X live:%s created:%s destroyed:%s>" % (
            self.__class__.__name__,
            id(self),
            self.live,
            self.created,
            self.destroyed,
        )


class LimitedAllocator(TrackingAllocator):
    """A TrackingAllocator that fails with AllocationError once `limit`
    blocks are live. ``LimitedAllocator(0)`` always fails."""
    __slots__ = ('limit',)

    def __init__(self, limit):
        super(LimitedAllocator, self).__init__()
        self.limit = limit

    def create(self, factory):
        if self.live >= self.limit:
            log.debug("%r refused a block, limit is %s", self, self.limit)
            raise AllocationError("%r is out of blocks (limit: %s)" % (
                self, self.limit))
        return super(LimitedAllocator, self).create(factory)


default_allocator = HeapAllocator()
