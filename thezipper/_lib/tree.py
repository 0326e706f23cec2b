from collections import namedtuple


class Variant(object):
    """
    Mixin for namedtuple based tagged unions.

    Plain namedtuples compare equal to any tuple holding the same values,
    so Item('a') would equal Section('a'). Variants only compare equal
    to instances of the exact same class.
    """

    __slots__ = ()

    def __eq__(self, other):
        return type(self) is type(other) and tuple.__eq__(self, other)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self).__name__,) + tuple(self))


class Tree(Variant):
    """Base class of Item and Section"""

    __slots__ = ()

    def is_item(self):
        return isinstance(self, Item)

    def is_section(self):
        return isinstance(self, Section)


_Item = namedtuple('Item', ['value'])


class Item(Tree, _Item):
    """A leaf holding one opaque value."""

    __slots__ = ()


_Section = namedtuple('Section', ['children'])


class Section(Tree, _Section):
    """
    An internal node holding zero or more ordered children.

    >>> Section([Item('a'), Item('b')])
    Section(children=(Item(value='a'), Item(value='b')))
    """

    __slots__ = ()

    def __new__(cls, children=()):
        return super(Section, cls).__new__(cls, tuple(children))


del _Item
del _Section


def from_nested(obj):
    """
    Build a tree out of nested lists, anything that is not a list or
    tuple becomes an Item.

    >>> from_nested(['a', ['b']])
    Section(children=(Item(value='a'), Section(children=(Item(value='b'),))))
    """
    if isinstance(obj, (list, tuple)):
        return Section(from_nested(child) for child in obj)
    return Item(obj)


def to_nested(tree):
    """
    >>> to_nested(Section([Item(1), Section([]), Item(2)]))
    [1, [], 2]
    """
    if isinstance(tree, Section):
        return [to_nested(child) for child in tree.children]
    return tree.value
