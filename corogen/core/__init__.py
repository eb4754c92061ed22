'''
The core of corogen: contexts, the generator interface and the two
coroutine engines.

Example::

    @coroutine(send_type=type(None), yield_type=int, default=None)
    def ten(ctx):
        try:
            for i in range(10):
                ctx.yield_(i)
        finally:
            ctx.close()

    gen = ten()
    gen.next()   # 0
    gen.next()   # 1

* the `body` (``ten`` above) gets a `Context` and calls ``yield_`` on it to
  hand out a value. ``yield_`` returns the next message the consumer sends.

* the `generator` (``gen`` above) is driven by the consumer with ``send``
  or ``next``. When the body is done every call raises `Exhausted` (it's a
  StopIteration so generators work in ``for`` loops too).

* there are no operations and no scheduler: ``send`` switches straight into
  the body's greenlet and the body's ``yield_`` switches straight back.

::

    consumer                 InlineCoroutine               body greenlet
       |                            |                            |
       +--send(msg)---------------->+                            |
       |                 finished? raise Exhausted               |
       |                 pending_send = msg                      |
       |                 NEED_INIT? spawn greenlet               |
       |                            +--switch------------------->+
       |                            |             pending_yield = value
       |                            +<------------parent.switch--+
       |                 finished? raise Exhausted               |
       +<-----pending_yield---------+                            |

`RecursiveCoroutine` runs the same state machine but takes the frame holding
the greenlet from an allocator, and gives it back on ``dispose()``.
'''
