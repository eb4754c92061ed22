"""
The body-facing side of a generator.
"""
__all__ = ['Context']

from greenlet import getcurrent

from corogen.core.exceptions import Exhausted, MisuseError
from corogen.core.generators import NODEFAULT


class Context(object):
    """
    The handle a generator body receives. The body calls ``yield_`` to hand
    a value to the consumer and ``close`` when it's done.

    Usage:

    .. sourcecode:: python

        def body(ctx):
            try:
                msg = ctx.yield_(1)
                ctx.yield_(msg * 2)
            finally:
                ctx.close()

    * pending_yield - last value offered to the consumer, valid while the
      body is suspended
    * pending_send - last message from the consumer, valid while the body
      is running
    * continuation - the greenlet running the body, owned by the engine
    * finished - goes from False to True once and stays there

    With `strict` the yielded values are checked against `yield_type`.
    """
    __slots__ = (
        'send_type', 'yield_type', 'strict', 'pending_yield', 'pending_send',
        'continuation', 'finished',
    )

    def __init__(self, send_type=object, yield_type=object, strict=False):
        self.send_type = send_type
        self.yield_type = yield_type
        self.strict = strict
        self.pending_yield = None
        self.pending_send = None
        self.continuation = None
        self.finished = False

    @property
    def running(self):
        return self.continuation is not None and \
            self.continuation is getcurrent()

    def yield_(self, value):
        """Offer `value` to the consumer and suspend. Returns the message
        given to the next ``send``."""
        if self.finished:
            raise MisuseError("yield_ called on a closed context %r" % self)
        if not self.running:
            raise MisuseError(
                "yield_ called from %r, outside the body of %r" % (
                    getcurrent(), self))
        if self.strict and not isinstance(value, self.yield_type):
            raise TypeError("Yielded %r, expected an instance of %r" % (
                value, self.yield_type))
        self.pending_yield = value
        self.continuation.parent.switch(value)
        return self.pending_send

    def yield_from(self, generator, message=NODEFAULT):
        """Re-yield every value of `generator`, feeding it the messages this
        context receives. The first message sent to `generator` is `message`
        if given, else the message that last resumed this body. Returns when
        `generator` is exhausted."""
        if message is NODEFAULT:
            message = self.pending_send
        while True:
            try:
                value = generator.send(message)
            except Exhausted:
                return
            message = self.yield_(value)

    def close(self):
        "Mark the generator as finished. Calling it again does nothing."
        self.finished = True

    def __repr__(self):
        return "<%s instance at 0x%08X %s, send: %r, yield: %r>" % (
            self.__class__.__name__,
            id(self),
            self.finished and "finished" or "open",
            self.send_type,
            self.yield_type,
        )
    __str__ = __repr__
