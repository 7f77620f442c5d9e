"""sets -- A set type backed by a dictionary.

This module contains a class called Set, which implements a mutable
set of hashable elements on top of an ordinary dictionary. The keys of
the dictionary are the elements of the set; every value is SENTINEL
and is never looked at.

Apart from the usual container protocol, the class has these methods:

insert       -- add elements and return the set itself
delete       -- remove an element and tell whether it was present
subtract     -- remove elements and return the set itself
has          -- membership test
union        -- new set with the elements of both sets
intersection -- new set with the elements common to both sets
difference   -- new set with the elements of one set not in another
equal        -- whether two sets contain the same elements
issubset     -- whether all elements are in another set
issuperset   -- whether all elements of another set are in this one
elements     -- list of the elements, in no particular order
asmapping    -- the underlying dictionary

Union and intersection work on the smaller of the two sets, so that
intersection is O(min(len(a), len(b))) and union only inserts the
elements of the smaller set into a copy of the larger one.

Sets are not thread-safe. Concurrent mutation of a set must be
serialized by the caller.
"""

__all__ = ["SENTINEL", "Set", "frommapping", "new"]

from mapset.common import UnhashableElementError

# Value stored for every key of the underlying dictionary.
SENTINEL = None


class Set:
    """A mutable set of hashable elements.

    The order of iteration is undefined and may differ between two
    sets holding the same elements.

    Sets returned by copy, union, intersection and difference are
    built by fromrawmapping, which does not call __init__. Subclasses
    must therefore not keep state that only __init__ sets up.
    """

    def __init__(self, *elements):
        """Constructor.

        Arguments:

        elements -- Initial elements of the set. Duplicates are
                    ignored.
        """
        self._elements = {}
        if elements:
            self.insert(*elements)

    def __and__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.intersection(other)

    def __contains__(self, element):
        return self.has(element)

    def __copy__(self):
        return self.copy()

    def __eq__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.equal(other)

    def __ge__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.issuperset(other)

    def __gt__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return len(self) > len(other) and self.issuperset(other)

    # Mutable and comparable by value.
    __hash__ = None

    def __iter__(self):
        return iter(self._elements)

    def __le__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.issubset(other)

    def __len__(self):
        return len(self._elements)

    def __lt__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return len(self) < len(other) and self.issubset(other)

    def __or__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.union(other)

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self.elements())

    def __sub__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.difference(other)

    @classmethod
    def fromiterable(cls, iterable):
        """Create a set from the elements of an iterable."""
        new = cls()
        newelements = new._elements
        for x in iterable:
            try:
                newelements[x] = SENTINEL
            except TypeError:
                _checkhashable(x)
                raise
        return new

    @classmethod
    def frommapping(cls, mapping):
        """Create a set from the keys of a mapping.

        The values of the mapping are ignored. The mapping is neither
        modified nor referenced by the new set.
        """
        return cls.fromiterable(mapping.keys())

    @classmethod
    def fromrawmapping(cls, raw):
        """Create a set that uses a dictionary as its storage.

        No copy is made: the set takes over the dictionary, whose keys
        become the elements. The values should be SENTINEL; they are
        not checked. This is the inverse of asmapping.
        """
        if not isinstance(raw, dict):
            raise TypeError(
                "expected a dict, got %s" % type(raw).__name__)
        new = cls.__new__(cls)
        new._elements = raw
        return new

    def asmapping(self):
        """Return the dictionary backing the set.

        The dictionary is shared, not copied, so changes to it are
        changes to the set.
        """
        return self._elements

    def clear(self):
        self._elements.clear()

    def copy(self):
        """Return a shallow copy of the set."""
        return self.__class__.fromrawmapping(self._elements.copy())

    def delete(self, element):
        """Remove an element from the set.

        Returns True if the element was in the set, otherwise False.
        To remove several elements at once, use subtract.
        """
        selfelements = self._elements
        try:
            if element not in selfelements:
                return False
        except TypeError:
            _checkhashable(element)
            raise
        del selfelements[element]
        return True

    def difference(self, other):
        """Return a new set with the elements of self not in other."""
        _checkset(other)
        otherelements = other._elements
        newelements = {}
        for x in self._elements:
            if x not in otherelements:
                newelements[x] = SENTINEL
        return self.__class__.fromrawmapping(newelements)

    def elements(self):
        """Return a list of the elements of the set.

        The order of the list is undefined.
        """
        return list(self._elements)

    def equal(self, other):
        """Check whether self and other contain the same elements."""
        _checkset(other)
        if len(self._elements) != len(other._elements):
            return False
        return self._allin(other)

    def has(self, element):
        """Check whether an element is in the set."""
        try:
            return element in self._elements
        except TypeError:
            _checkhashable(element)
            raise

    def insert(self, *elements):
        """Add elements to the set and return the set itself."""
        selfelements = self._elements
        for x in elements:
            try:
                selfelements[x] = SENTINEL
            except TypeError:
                _checkhashable(x)
                raise
        return self

    def intersection(self, other):
        """Return a new set with the elements in both self and other."""
        _checkset(other)
        smaller = self._elements
        larger = other._elements
        if len(smaller) > len(larger):
            smaller, larger = larger, smaller
        newelements = {}
        for x in smaller:
            if x in larger:
                newelements[x] = SENTINEL
        return self.__class__.fromrawmapping(newelements)

    def issubset(self, other):
        """Check whether every element of self is in other."""
        _checkset(other)
        if len(self._elements) > len(other._elements):
            return False
        return self._allin(other)

    def issuperset(self, other):
        """Check whether every element of other is in self."""
        _checkset(other)
        return other.issubset(self)

    def subtract(self, *elements):
        """Remove elements from the set and return the set itself.

        Elements that are not in the set are ignored.
        """
        selfelements = self._elements
        for x in elements:
            try:
                selfelements.pop(x, None)
            except TypeError:
                _checkhashable(x)
                raise
        return self

    def union(self, other):
        """Return a new set with the elements in self or other."""
        _checkset(other)
        smaller = self._elements
        larger = other._elements
        if len(smaller) > len(larger):
            smaller, larger = larger, smaller
        newelements = larger.copy()
        for x in smaller:
            newelements[x] = SENTINEL
        return self.__class__.fromrawmapping(newelements)

    def _allin(self, other):
        otherelements = other._elements
        for x in self._elements:
            if x not in otherelements:
                return False
        return True


def new(*elements):
    """Return a new set containing the given elements."""
    return Set(*elements)


def frommapping(mapping):
    """Return a new set containing the keys of a mapping."""
    return Set.frommapping(mapping)


def _checkhashable(element):
    try:
        hash(element)
    except TypeError:
        raise UnhashableElementError(element) from None


def _checkset(other):
    if not isinstance(other, Set):
        raise TypeError(
            "expected a Set, got %s" % type(other).__name__)
