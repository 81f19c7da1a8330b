"""
A stream is a lazily evaluated, possibly infinite sequence.

A stream wraps a cell, which is either Empty or a Node holding a
suspended head and a suspended tail stream. Suspensions are forced at
most once, so walking a stream a second time costs nothing.

Almost every operation is derived from two generic combinators:
> fold_right eliminates a stream from the front, handing the rest of the
  fold to its combining function as a suspension.
> unfold builds a stream from a seed and a step function, producing the
  next cell only when the previous tail is forced.
"""

from functional_data_structures import Empty, Node
from suspension import Suspension


def _suspend(expr):
    if isinstance(expr, Suspension):
        return expr
    return Suspension(expr)


def _deferred_stream(other):
    if isinstance(other, Stream):
        return other
    if isinstance(other, Suspension):
        return Stream.defer(other.force)
    return Stream.defer(other)


class Stream:
    __slots__ = '_cell',

    def __init__(self, cell=Empty()):
        object.__setattr__(self, '_cell', Suspension.done(cell))

    @classmethod
    def defer(cls, expr):
        """Stream whose cell is taken from the stream `expr()` returns,
        evaluated when the stream is first inspected"""
        stream = cls.__new__(cls)
        object.__setattr__(stream, '_cell', Suspension(lambda: expr().cell))
        return stream

    @property
    def cell(self):
        return self._cell.force()

    def is_empty(self):
        return self.cell.is_empty()

    def fold_right(self, zero, combine):
        """Right-associative, non-strict fold.

        `combine(head, rest)` receives the rest of the fold as a
        Suspension. If `combine` never forces it, the remainder of the
        stream is never visited. Every forced rest adds stack frames, so
        to_list, exists, for_all, find and filter walk the stream in a
        loop instead.
        """
        cell = self.cell
        if cell.is_empty():
            return zero
        tail = cell.tail
        return combine(cell.head.force(),
                       Suspension(lambda: tail.force().fold_right(zero, combine)))

    def exists(self, p):
        for value in self:
            if p(value):
                return True
        return False

    def for_all(self, p):
        for value in self:
            if not p(value):
                return False
        return True

    def find(self, p):
        """First element satisfying p, or None"""
        for value in self:
            if p(value):
                return value
        return None

    def head_option(self):
        """First element, or None for an empty stream (also None when the
        first element is None)"""
        return self.fold_right(None, lambda a, _: a)

    def take(self, n):
        if n < 1:
            return empty()
        cell = self.cell
        if cell.is_empty():
            return empty()
        if n == 1:
            # the source tail is never needed past the last element
            return cons(cell.head, _EXHAUSTED)
        tail = cell.tail
        return cons(cell.head, lambda: tail.force().take(n - 1))

    def take_unfold(self, n):
        def step(state):
            rest, i = state
            if i <= 0:
                return None
            cell = rest.force().cell
            if cell.is_empty():
                return None
            return cell.head.force(), (cell.tail, i - 1)

        return unfold((Suspension.done(self), n), step)

    def drop(self, n):
        # walks n cells but leaves the dropped heads unforced
        stream = self
        while n > 0:
            cell = stream.cell
            if cell.is_empty():
                break
            stream = cell.tail.force()
            n -= 1
        return stream

    def take_while(self, p):
        cell = self.cell
        if not cell.is_empty() and p(cell.head.force()):
            tail = cell.tail
            return cons(cell.head, lambda: tail.force().take_while(p))
        return empty()

    def take_while_folded(self, p):
        return self.fold_right(
            empty(), lambda a, b: cons(Suspension.done(a), b) if p(a) else empty())

    def take_while_unfold(self, p):
        def step(rest):
            cell = rest.force().cell
            if cell.is_empty():
                return None
            value = cell.head.force()
            if not p(value):
                return None
            return value, cell.tail

        return unfold(Suspension.done(self), step)

    def map(self, f):
        return self.fold_right(empty(), lambda a, b: cons(lambda: f(a), b))

    def map_unfold(self, f):
        def step(rest):
            cell = rest.force().cell
            if cell.is_empty():
                return None
            return f(cell.head.force()), cell.tail

        return unfold(Suspension.done(self), step)

    def filter(self, p):
        # rejected cells are skipped in a loop, not by recursion
        stream = self
        while not stream.is_empty():
            cell = stream.cell
            value = cell.head.force()
            rest = cell.tail
            if p(value):
                return cons(cell.head, lambda: rest.force().filter(p))
            stream = rest.force()
        return empty()

    def append(self, other):
        """Lazily concatenate `other`, a stream or a zero-argument callable
        returning one, which is not evaluated until this stream runs out"""
        return self.fold_right(_deferred_stream(other),
                               lambda a, b: cons(Suspension.done(a), b))

    def flat_map(self, f):
        return self.fold_right(empty(), lambda a, b: f(a).append(b))

    def zip_with(self, other, f):
        def step(state):
            left = state[0].force().cell
            if left.is_empty():
                return None
            right = state[1].force().cell
            if right.is_empty():
                return None
            return f(left.head.force(), right.head.force()), (left.tail, right.tail)

        return unfold((Suspension.done(self), Suspension.done(other)), step)

    def zip_all(self, other, fillvalue=None):
        """Pair up both streams until both run out, padding the shorter
        one with `fillvalue`.

        The default padding None cannot be told apart from a None element;
        pass a private marker as `fillvalue` where that matters, as
        starts_with does.
        """
        def head(cell):
            return fillvalue if cell.is_empty() else cell.head.force()

        def tail(cell):
            return _EXHAUSTED if cell.is_empty() else cell.tail

        def step(state):
            left = state[0].force().cell
            right = state[1].force().cell
            if left.is_empty() and right.is_empty():
                return None
            return (head(left), head(right)), (tail(left), tail(right))

        return unfold((Suspension.done(self), Suspension.done(other)), step)

    def starts_with(self, prefix):
        missing = object()
        return (self.zip_all(prefix, fillvalue=missing)
                .take_while(lambda pair: pair[1] is not missing)
                .for_all(lambda pair: pair[0] is not missing and pair[0] == pair[1]))

    def tails(self):
        def step(state):
            rest, done = state
            stream = rest.force()
            if not stream.is_empty():
                return stream, (stream.cell.tail, False)
            if not done:
                return stream, (rest, True)
            return None

        return unfold((Suspension.done(self), False), step)

    def to_list(self):
        """All elements as a list; only meaningful for finite streams"""
        return list(self._iter(self))

    def __setattr__(self, *args, **kwargs):
        raise TypeError("'{}' object is immutable".format(type(self).__name__))

    # Indirectly implemented as static method so that the generator does
    # not keep the first cell alive while walking a long stream.
    @staticmethod
    def _iter(stream):
        while not stream.is_empty():
            cell = stream.cell
            yield cell.head.force()
            stream = cell.tail.force()

    def __iter__(self):
        return self._iter(self)

    def __repr__(self):
        items = []
        seen = set()
        cell_suspension = self._cell
        while cell_suspension.has_value() and id(cell_suspension) not in seen:
            seen.add(id(cell_suspension))
            cell = cell_suspension.force()
            if cell.is_empty():
                return 'Stream({})'.format(', '.join(items))
            items.append(repr(cell.head.force()) if cell.head.has_value() else '?')
            if not cell.tail.has_value():
                break
            cell_suspension = cell.tail.force()._cell
        items.append('...')
        return 'Stream({})'.format(', '.join(items))


_EMPTY = Stream()
_EXHAUSTED = Suspension.done(_EMPTY)


def empty():
    return _EMPTY


def cons(head, tail):
    """Stream from a suspended head and a suspended tail.

    Both arguments are zero-argument callables (or Suspensions); the tail
    callable must return a Stream. Neither is evaluated here.
    """
    return Stream(Node(_suspend(head), _suspend(tail)))


def unfold(seed, step):
    """Stream generated from `seed`.

    `step(state)` returns None to end the stream or a pair
    `(value, next_state)`; the rest of the stream is generated from
    `next_state` when the tail is forced.
    """
    found = step(seed)
    if found is None:
        return empty()
    value, state = found
    return Stream(Node(Suspension.done(value), Suspension(lambda: unfold(state, step))))


def from_elements(*values):
    def step(i):
        if i < len(values):
            return values[i], i + 1
        return None

    return unfold(0, step)


def from_iterable(iterable):
    """Memoizing stream over an iterable, pulling each item at most once"""
    iterator = iter(iterable)

    def step(it):
        for value in it:
            return value, it
        return None

    return Stream.defer(lambda: unfold(iterator, step))
