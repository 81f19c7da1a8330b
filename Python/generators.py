"""Infinite streams.

Most of these come in two flavours: built by hand from `cons` with a
tail that refers back to the stream (or to the generating function), and
built with `unfold`. Both produce the same elements.
"""

import operator

import sympy as sy

from stream import cons, unfold
from suspension import Suspension


def ones():
    """1, 1, 1, ... as a single cell whose tail is the stream itself"""
    stream = cons(lambda: 1, lambda: stream)
    return stream


def constant(value):
    stream = cons(lambda: value, lambda: stream)
    return stream


def constant_unfold(value):
    return unfold(value, lambda v: (v, v))


def counting_from(n):
    """n, n + 1, n + 2, ..."""
    return cons(lambda: n, lambda: counting_from(n + 1))


def counting_from_unfold(n):
    return unfold(n, lambda i: (i, i + 1))


def naturals():
    """0, 1, 2, ... defined as 0 followed by naturals + ones"""
    stream = cons(lambda: 0, lambda: stream.zip_with(ones(), operator.add))
    return stream


def fibonacci():
    def fib(current, following):
        return cons(lambda: current, lambda: fib(following, current + following))

    return fib(0, 1)


def fibonacci_unfold():
    return unfold((0, 1), lambda pair: (pair[0], (pair[1], pair[0] + pair[1])))


def primes():
    """the primes, stepping from one to the next with sympy"""
    return unfold(2, lambda p: (p, int(sy.nextprime(p))))


def sieve():
    """the primes, by the sieve of Eratosthenes"""

    def sift(stream):
        cell = stream.cell
        prime = cell.head.force()
        rest = cell.tail
        return cons(Suspension.done(prime),
                    lambda: sift(rest.force().filter(lambda n: n % prime != 0)))

    return sift(counting_from(2))
