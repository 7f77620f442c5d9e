"""mapset -- Sets of hashable elements backed by dictionaries."""

from mapset.common import MapsetError, UnhashableElementError
from mapset.sets import SENTINEL, Set, frommapping, new
from mapset.version import version as __version__

__all__ = [
    "MapsetError",
    "SENTINEL",
    "Set",
    "UnhashableElementError",
    "frommapping",
    "new",
]
