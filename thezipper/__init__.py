from . import fn
from ._lib.memo import MemoLocation
from ._lib.tree import Item, Section, Tree, from_nested, to_nested
from ._lib.zipper import TOP, Location, Node, Path, Top

__all__ = [
    'fn',
    'Tree', 'Item', 'Section', 'from_nested', 'to_nested',
    'Path', 'Top', 'TOP', 'Node', 'Location',
    'MemoLocation',
]
