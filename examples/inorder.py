import collections

from corogen.core.recursive import recursive_coroutine
from corogen.core.allocators import TrackingAllocator


Node = collections.namedtuple('Node', 'value left right')


@recursive_coroutine(default=None)
def inorder(ctx):
    try:
        allocator, node = ctx.yield_(None)
        if node is None:
            return
        subtree(ctx, allocator, node.left)
        ctx.yield_(node.value)
        subtree(ctx, allocator, node.right)
    finally:
        ctx.close()


def subtree(ctx, allocator, node):
    if node is None:
        return
    with inorder(allocator) as child:
        child.send(None)
        ctx.yield_from(child, (allocator, node))


def walk(tree, allocator):
    gen = inorder(allocator)
    try:
        gen.send(None)
        yield gen.send((allocator, tree))
        for value in gen:
            yield value
    except StopIteration:
        return
    finally:
        gen.dispose()


if __name__ == "__main__":
    tree = Node(2, Node(1, None, None), Node(4, Node(3, None, None), None))
    alloc = TrackingAllocator()
    print(list(walk(tree, alloc)))
    print(alloc)
    alloc.check_leaks()
