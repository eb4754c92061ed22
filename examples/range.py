import logging

from corogen.core.coroutines import coroutine, debug_coroutine


def count(ctx, n):
    # yield_ works from a helper, the whole stack is suspended
    for i in range(n):
        ctx.yield_(i)


@coroutine(send_type=type(None), yield_type=int, default=None)
def ten(ctx):
    try:
        count(ctx, 10)
    finally:
        ctx.close()


@debug_coroutine(yield_type=int, default=None)
def countdown(ctx):
    try:
        step = 1
        i = 10
        while i > 0:
            step = ctx.yield_(i) or step
            i -= step
    finally:
        ctx.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    print(list(ten()))

    gen = countdown()
    print(gen.next())
    print(gen.send(3))
    print(list(gen))
