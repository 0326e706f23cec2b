import logging
from collections import namedtuple

logger = logging.getLogger(__name__)


_MemoLocation = namedtuple('MemoLocation', ['location', 'origin', 'cache'])


class MemoLocation(_MemoLocation):
    """
    Caches get_nth results relative to one fixed base location.

    `origin` is the location wrap was called with and never changes,
    `location` is the focus of this particular wrapper. Every wrapper
    derived from the same wrap call shares `cache`, a dict mapping a
    child index to the location get_nth produced for it.

    Locations are immutable so cached entries never go stale.
    """

    __slots__ = ()

    @classmethod
    def wrap(cls, location):
        return cls(location=location, origin=location, cache={})

    @property
    def cursor(self):
        return self.location.cursor

    @property
    def path(self):
        return self.location.path

    def get_nth(self, n):
        """
        Like Location.get_nth, but always relative to `origin`. Results
        are cached, failures are not.
        """
        try:
            cached = self.cache[n]
        except KeyError:
            pass
        else:
            logger.debug('get_nth(%s): cache hit', n)
            return self._replace(location=cached)

        loc = self.origin.get_nth(n)
        if loc is None:
            logger.debug('get_nth(%s): no such child, not cached', n)
            return None

        logger.debug('get_nth(%s): cache miss, stored', n)
        self.cache[n] = loc
        return self._replace(location=loc)

    def cached_indices(self):
        return sorted(self.cache)

    def into_inner(self):
        return self.location


del _MemoLocation
