"""
Coroutine related boilerplate and wrappers.
"""
__all__ = [
    'coro', 'coroutine', 'debug_coroutine', 'Coroutine', 'CoroutineInstance',
    'InlineCoroutine', 'Frame'
]

import logging
import sys

from greenlet import greenlet, getcurrent

from corogen.core.context import Context
from corogen.core.generators import Generator, NODEFAULT
from corogen.core.exceptions import Exhausted, MisuseError

log = logging.getLogger(__name__)


class Frame(object):
    """
    Storage for one suspended invocation of a body: the body and the greenlet
    running it. InlineCoroutine makes its own, RecursiveCoroutine gets one
    from an allocator.
    """
    __slots__ = ('body', 'continuation')

    def __init__(self, body):
        self.body = body
        self.continuation = None

    def spawn(self, context):
        "Make the greenlet that will run the body, child of the current one."
        self.continuation = context.continuation = greenlet(
            self.run, parent=getcurrent())
        return self.continuation

    def run(self, context):
        """This runs in a greenlet"""
        try:
            self.body(context)
        except StopIteration as exc:
            raise MisuseError(
                "%r raised StopIteration" % (self.body,)) from exc
        finally:
            context.close()

    def clear(self):
        self.body = self.continuation = None

    def __repr__(self):
        return "<%s at 0x%08X for %r, continuation: %r>" % (
            self.__class__.__name__,
            id(self),
            self.body,
            self.continuation,
        )


class CoroutineInstance(Generator):
    '''
    The state machine shared by the engines. It drives a body through its
    Context and a Frame:

    * in STATE_NEED_INIT the first send spawns the greenlet and runs the
      body up to its first yield_ (the message of that send is never seen
      by the body).

    * in STATE_RUNNING send resumes the body right where it yielded.

    * when the body returns the state is STATE_COMPLETED, when it raises
      the state is STATE_FAILED and the exception goes to the sender. Either
      way the context is finished and every send raises Exhausted.

    * STATE_FINALIZED is set by engines that release their frame.
    '''
    STATE_NEED_INIT, STATE_RUNNING, STATE_COMPLETED, \
        STATE_FAILED, STATE_FINALIZED = range(5)
    _state_names = "NOTSTARTED", "RUNNING", "COMPLETED", "FAILED", "FINALIZED"
    __slots__ = (
        'name', 'state', 'context', 'frame', 'default', 'exception',
        'started', 'sending', 'debug', '__weakref__',
    )
    running = property(lambda self: self.state < self.STATE_COMPLETED)
    finished = property(lambda self: self.context.finished)
    send_type = property(lambda self: self.context.send_type)
    yield_type = property(lambda self: self.context.yield_type)

    def __init__(self, body, frame, send_type=object, yield_type=object,
                 default=NODEFAULT, strict=False):
        if not callable(body):
            raise ValueError("Bad generator body: %r" % (body,))
        self.name = getattr(body, '__name__', None) or repr(body)
        self.context = Context(send_type, yield_type, strict)
        self.frame = frame
        self.default = default
        self.exception = None
        self.state = self.STATE_NEED_INIT
        self.started = False
        self.sending = False
        self.debug = False

    def send(self, message):
        """
        Handle the message:

        * if the body is finished raise Exhausted, the body isn't touched

        * if coro is in STATE_NEED_INIT start the body, else resume it

        * if the body finishes during this call raise Exhausted, if it
          raises set STATE_FAILED and let the exception through
        """
        if self.state == self.STATE_FINALIZED:
            raise MisuseError("%r was disposed" % self)
        context = self.context
        if context.finished:
            raise Exhausted()
        if self.sending:
            raise MisuseError("%r is already running" % self)
        if context.strict and not isinstance(message, context.send_type):
            raise TypeError("Sent %r, expected an instance of %r" % (
                message, context.send_type))

        if self.state == self.STATE_NEED_INIT:
            continuation = self.frame.spawn(context)
            self.started = True
            self.state = self.STATE_RUNNING
            args = (context,)
        else:
            continuation = self.frame.continuation
            try:
                continuation.parent = getcurrent()
            except ValueError as exc:
                raise MisuseError(
                    "%r can't be resumed from %r: %s" % (
                        self, getcurrent(), exc)) from exc
            args = (message,)

        context.pending_send = message
        if self.debug:
            log.debug("Running %r with: %r", self, message)
        self.sending = True
        try:
            continuation.switch(*args)
        except BaseException:
            self.state = self.STATE_FAILED
            self.exception = sys.exc_info()
            self.handle_error()
            raise
        finally:
            self.sending = False

        if context.finished:
            self.state = self.STATE_COMPLETED
            if self.debug:
                log.debug("%r completed.", self)
            raise Exhausted()
        if self.debug:
            log.debug("Yields %r.", context.pending_yield)
        return context.pending_yield

    def handle_error(self):
        log.debug("Exception happened during processing of coroutine %s.",
                  self, exc_info=self.exception)

    def __repr__(self):
        return "<%s %s instance at 0x%08X, state: %s>" % (
            self.name,
            self.__class__.__name__,
            id(self),
            self._state_names[self.state]
        )
    __str__ = __repr__


class InlineCoroutine(CoroutineInstance):
    '''
    The plain engine: owns its frame directly, nothing to acquire or release.
    Use RecursiveCoroutine when the body builds coroutines of its own type.
    '''
    __slots__ = ()

    @classmethod
    def create(cls, body, send_type=object, yield_type=object,
               default=NODEFAULT, strict=False):
        return cls(body, Frame(body), send_type=send_type,
                   yield_type=yield_type, default=default, strict=strict)


class CoroutineDocstring(object):
    """
    Evil class to make docstrings accesable on different places like:

      - the Coroutine class
      - the Coroutine instance
      - the Coroutine instance as a descriptor (that means as a method in a class)

    """
    def __init__(self, doc):
        self.doc = doc

    def __get__(self, inst, ownr):
        if inst:
            return inst.wrapped_func.__doc__
        else:
            return self.doc


class Coroutine(object):
    __doc__ = CoroutineDocstring("""
    A constructor for generator bodies. Calling it returns a fresh
    CoroutineInstance (an InlineCoroutine by default).
    Example::

        @coroutine(send_type=type(None), yield_type=int, default=None)
        def plain_ol_body(ctx):
            try:
                ctx.yield_(bla)
                ctx.yield_(bla)
            finally:
                ctx.close()
    """)
    __slots__ = ('wrapped_func', 'constructor', 'options')

    def __init__(self, func, constructor=InlineCoroutine, **options):
        self.wrapped_func = func
        self.constructor = constructor
        self.options = options

    @property
    def __name__(self):
        return self.wrapped_func.__name__

    def __repr__(self):
        return "<%s constructor at 0x%08X wrapping %r>" % (
            self.constructor.__name__,
            id(self),
            self.wrapped_func,
        )
    __str__ = __repr__

    def __get__(self, instance, owner):
        """
        Decorating methods with a class need that class to be an descriptor
        as the __call__ doesn't get automaticaly binded to the instance as
        functions do.
        """
        if instance is None:
            return self
        return self.__class__(self.wrapped_func.__get__(instance, owner),
                              self.constructor, **self.options)

    def __call__(self):
        "Return a CoroutineInstance instance"
        return self.constructor.create(self.wrapped_func, **self.options)


class DebugCoroutine(Coroutine):
    __slots__ = ()

    def __call__(self):
        "Return a CoroutineInstance instance that logs what it does"
        inst = super(DebugCoroutine, self).__call__()
        inst.debug = True
        return inst


def coroutine(func=None, **options):
    """
    A decorator for generator bodies. Use it bare or with the constructor
    options (send_type, yield_type, default, strict)::

        @coroutine
        def body(ctx): ...

        @coroutine(yield_type=int, default=None)
        def body(ctx): ...
    """
    if func is None:
        return lambda func: Coroutine(func, **options)
    return Coroutine(func, **options)

coro = coroutine


def debug_coroutine(func=None, **options):
    if func is None:
        return lambda func: DebugCoroutine(func, **options)
    return DebugCoroutine(func, **options)

debug_coro = debug_coroutine
