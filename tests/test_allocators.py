__doc_all__ = []

import unittest
import sys

from corogen.common import *
from corogen.core.coroutines import Frame


def body(ctx):
    ctx.close()


class AllocatorTest(unittest.TestCase):
    def test_heap(self):
        alloc = HeapAllocator()
        frame = alloc.create(lambda: Frame(body))
        self.assertTrue(frame.body is body)
        alloc.destroy(frame)
        self.assertTrue(frame.body is None)

    def test_heap_out_of_memory(self):
        def factory():
            raise MemoryError()
        self.assertRaises(AllocationError, HeapAllocator().create, factory)

    def test_tracking(self):
        alloc = TrackingAllocator()
        frames = [alloc.create(lambda: Frame(body)) for i in range(3)]
        self.assertEqual(alloc.live, 3)
        self.assertRaises(LeakError, alloc.check_leaks)
        for frame in frames:
            alloc.destroy(frame)
        self.assertEqual((alloc.created, alloc.destroyed), (3, 3))
        alloc.check_leaks()
        self.assertRaises(MisuseError, alloc.destroy, frames[0])
        self.assertTrue('live:0' in repr(alloc))

    def test_limited(self):
        alloc = LimitedAllocator(2)
        first = alloc.create(lambda: Frame(body))
        alloc.create(lambda: Frame(body))
        self.assertRaises(AllocationError, alloc.create, lambda: Frame(body))
        alloc.destroy(first)
        alloc.create(lambda: Frame(body))
        self.assertEqual(alloc.live, 2)
        self.assertRaises(AllocationError,
                          LimitedAllocator(0).create, lambda: Frame(body))

    def test_abstract(self):
        self.assertRaises(NotImplementedError, Allocator().create, Frame)
        self.assertRaises(NotImplementedError, Allocator().destroy, None)

    def test_custom(self):
        class Pool(Allocator):
            def __init__(self):
                self.free = []
                self.given = 0

            def create(self, factory):
                self.given += 1
                return factory()

            def destroy(self, block):
                block.clear()
                self.free.append(block)
        pool = Pool()
        gen = RecursiveCoroutine.create(body, pool, default=None)
        self.assertRaises(Exhausted, gen.next)
        gen.dispose()
        self.assertEqual((pool.given, len(pool.free)), (1, 1))

if __name__ == "__main__":
    sys.argv.insert(1, '-v')
    unittest.main()
