"""
A suspension is a deferred expression that is evaluated at most once.

The first call to `force` runs the expression and caches its result;
every later call returns the cached result. This is the `lazy val` of
the stream cells: many observers may share a suspension and all of them
see the same single evaluation.

If the expression raises, the exception is cached and replayed by every
later `force`; the expression is not run again, RecursionError
included. Only an interruption that is not an Exception (e.g.
KeyboardInterrupt) leaves the suspension unforced.
"""

import logging

logger = logging.getLogger(__name__)

_FORCING = object()


class Suspension:
    __slots__ = '_expr', '_value', '_error'

    def __init__(self, expr):
        self._value = None
        self._error = None
        self._expr = None
        if not callable(expr):
            raise TypeError("suspension expects a callable, got {!r}".format(expr))
        self._expr = expr

    @classmethod
    def done(cls, value):
        """Suspension that is already forced to `value`"""
        suspension = cls.__new__(cls)
        suspension._value = value
        suspension._error = None
        suspension._expr = None
        return suspension

    def is_forced(self):
        return self._expr is None

    def has_value(self):
        return self._expr is None and self._error is None

    def force(self):
        expr = self._expr
        if expr is _FORCING:
            raise RuntimeError("suspension was forced during its own evaluation")
        if expr is not None:
            self._expr = _FORCING
            try:
                self._value = expr()
            except Exception as error:
                logger.debug("suspended expression %r raised %r", expr, error)
                self._error = error
            except BaseException:
                self._expr = expr
                raise
            self._expr = None
        if self._error is not None:
            raise self._error
        return self._value

    def __repr__(self):
        if not hasattr(self, '_expr'):
            return 'Suspension(<uninitialized>)'
        if not self.is_forced():
            return 'Suspension(<unforced>)'
        if self._error is not None:
            return 'Suspension(<raised {!r}>)'.format(self._error)
        return 'Suspension({!r})'.format(self._value)
