"""Common code for the mapset library."""

######################################################################
### Public names.

__all__ = [
    "MapsetError",
    "UnhashableElementError",
    ]

######################################################################
### Exceptions.

class MapsetError(Exception):
    """Base class for mapset exceptions."""

class UnhashableElementError(MapsetError, TypeError):
    """An element that cannot be hashed was used as a set element."""

    def __init__(self, element):
        MapsetError.__init__(
            self,
            "unhashable set element of type %s: %r" % (
                type(element).__name__, element))
        self.element = element
