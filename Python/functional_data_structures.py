class Singleton:
    """Class with a single instance"""

    def __new__(cls):
        obj = object.__new__(cls)
        cls.__new__ = lambda _: obj
        return obj


class Empty(Singleton):
    """The cell that ends a finite stream"""

    @staticmethod
    def is_empty():
        return True

    def __setattr__(self, *args, **kwargs):
        raise TypeError("'{}' object is immutable".format(type(self).__name__))

    def __repr__(self):
        return 'Empty()'


class Node(tuple):
    """Stream cell holding a suspended head and a suspended tail stream.

    This cell type is immutable. Structure is shared freely between
    streams, e.g. `take` reuses the head suspensions of its source.
    """

    def __new__(cls, head, tail):
        return super().__new__(cls, (head, tail))

    @staticmethod
    def is_empty():
        return False

    @property
    def head(self):
        return self[0]

    @property
    def tail(self):
        return self[1]

    def __setattr__(self, *args, **kwargs):
        raise TypeError("'{}' object does not support item assignment".format(type(self).__name__))

    def __deepcopy__(self, memodict=None):
        # suspensions may close over themselves, so copies share them
        return self

    def __repr__(self):
        return 'Node({!r}, {!r})'.format(self.head, self.tail)
