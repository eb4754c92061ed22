"""
The consumer-facing side of a generator.
"""
__all__ = ['Generator', 'NODEFAULT']

from corogen.core.exceptions import MisuseError


class _NoDefault(object):
    __slots__ = ()

    def __repr__(self):
        return 'NODEFAULT'

NODEFAULT = _NoDefault()


class Generator(object):
    """
    Base class for the engines. It doesn't own any state, it just forwards
    ``next`` and the iteration protocol to ``send``.

    * send_type, yield_type - the message and value types, as stated by
      whoever built the generator
    * default - the message ``next`` sends; NODEFAULT means ``next`` is not
      available and ``send`` must be used

    Note: you don't really use this, this is for subclassing for engines.
    """
    __slots__ = ()

    send_type = object
    yield_type = object
    default = NODEFAULT

    def send(self, message):
        """Deliver `message` to the body and return the value of its next
        ``yield_``. Raises Exhausted when the body is done."""
        raise NotImplementedError()

    def next(self):
        "Send the default message."
        if self.default is NODEFAULT:
            raise MisuseError(
                "%r has no default message, use send() instead" % self)
        return self.send(self.default)

    def __iter__(self):
        return self

    def __next__(self):
        return self.next()
