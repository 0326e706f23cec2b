"""
Huet's zipper over Item/Section trees.

A Location is a cursor (the focused subtree) plus a Path describing
everything around it. Every move or edit returns a new Location, or None
when the move is impossible; nothing is ever mutated.

HUET G. The Zipper. Journal of Functional Programming. 1997;7(5):549-554.
"""

from collections import namedtuple

from .memo import MemoLocation
from .tree import Section, Variant


class Path(Variant):
    """Base class of Top and Node"""

    __slots__ = ()


_Top = namedtuple('Top', [])


class Top(Path, _Top):
    """No enclosing context."""

    __slots__ = ()


TOP = Top()

_Node = namedtuple('Node', ['left', 'right', 'parent'])


class Node(Path, _Node):
    """
    The cursor sits among siblings.

    Both `left` and `right` are stored nearest-first, so the enclosing
    section is reversed(left) + (cursor,) + right. `parent` is shared
    between every location derived by lateral moves.
    """

    __slots__ = ()

    def __new__(cls, left=(), right=(), parent=TOP):
        return super(Node, cls).__new__(cls, tuple(left), tuple(right), parent)


del _Top
del _Node


_Location = namedtuple('Location', ['cursor', 'path'])


class Location(Variant, _Location):

    __slots__ = ()

    @classmethod
    def new(cls, tree):
        """
        Wrap a tree in a synthetic root context whose right siblings
        already hold the tree.

        Going up from the unmoved result rebuilds Section([tree, tree]);
        use at_top when ascent has to stop at the original tree.

        >>> from thezipper import Item
        >>> loc = Location.new(Item('a'))
        >>> loc.path
        Node(left=(), right=(Item(value='a'),), parent=Top())
        """
        return cls(tree, Node((), (tree,), TOP))

    @classmethod
    def at_top(cls, tree):
        return cls(tree, TOP)

    def is_top(self):
        return isinstance(self.path, Top)

    def children(self):
        if isinstance(self.cursor, Section):
            return self.cursor.children

    ## Navigation
    def go_left(self):
        path = self.path
        if self.is_top() or not path.left:
            return None

        return Location(path.left[0], Node(
            left=path.left[1:],
            right=(self.cursor,) + path.right,
            parent=path.parent,
        ))

    def go_right(self):
        path = self.path
        if self.is_top() or not path.right:
            return None

        return Location(path.right[0], Node(
            left=(self.cursor,) + path.left,
            right=path.right[1:],
            parent=path.parent,
        ))

    def go_up(self):
        if self.is_top():
            return None

        l, r, parent = self.path
        return Location(Section(l[::-1] + (self.cursor,) + r), parent)

    def go_down(self):
        children = self.children()
        if not children:
            return None

        return Location(children[0], Node((), children[1:], self.path))

    def get_nth(self, n):
        """
        Focus the n-th child of the cursor, counting from 0.

        Equivalent to go_down followed by n calls to go_right.

        >>> from thezipper import from_nested
        >>> Location.new(from_nested(['a', '+', 'b'])).get_nth(2).cursor
        Item(value='b')
        """
        if n < 0:
            return None

        loc = self.go_down()
        for _ in range(n):
            if loc is None:
                break
            loc = loc.go_right()
        return loc

    def top(self):
        """
        Go up until the path is Top. Starting from a Location.new
        location the result holds the root tree twice, see new.
        """
        loc = self
        while not loc.is_top():
            loc = loc.go_up()
        return loc

    def root(self):
        return self.top().cursor

    def leftmost(self):
        """Returns the left most sibling at this location or self"""

        if self.is_top() or not self.path.left:
            return self

        l, r, parent = self.path
        siblings = l[-2::-1] + (self.cursor,) + r
        return Location(l[-1], Node((), siblings, parent))

    def rightmost(self):
        """Returns the right most sibling at this location or self"""

        if self.is_top() or not self.path.right:
            return self

        l, r, parent = self.path
        siblings = r[-2::-1] + (self.cursor,) + l
        return Location(r[-1], Node(siblings, (), parent))

    def preorder_iter(self):
        """
        Yield the locations of the cursor's subtree in depth-first
        pre-order, starting with this location.

        For example given the following tree:

                a
              /   \\
             b     e
             ^     ^
            c d   f g

        starting at a the locations visited are a, b, c, d, e, f, g.
        """
        stack = [self]
        while stack:
            loc = stack.pop()
            yield loc

            child = loc.go_down()
            siblings = []
            while child is not None:
                siblings.append(child)
                child = child.go_right()
            stack.extend(reversed(siblings))

    def find(self, func):
        for loc in self.preorder_iter():
            if func(loc):
                return loc
        return None

    ## Editing
    def change(self, tree):
        return self._replace(cursor=tree)

    def edit(self, f, *args):
        """Replace the cursor with the value of f(cursor, *args)"""
        return self.change(f(self.cursor, *args))

    def insert_left(self, tree):
        """Insert tree as the nearest left sibling without moving"""
        if self.is_top():
            return None

        path = self.path
        return self._replace(path=path._replace(left=(tree,) + path.left))

    def insert_right(self, tree):
        """Insert tree as the nearest right sibling without moving"""
        if self.is_top():
            return None

        path = self.path
        return self._replace(path=path._replace(right=(tree,) + path.right))

    def insert_down(self, tree):
        """
        Insert tree as the first child of the cursor and focus it. The
        cursor's existing children become its right siblings.
        """
        children = self.children()
        if children is None:
            return None

        return Location(tree, Node((), children, self.path))

    def delete(self):
        """
        Remove the cursor. Focus moves to the nearest right sibling,
        else the nearest left sibling, else up to the now empty parent
        section.
        """
        if self.is_top():
            return None

        l, r, parent = self.path
        if r:
            return Location(r[0], Node(l, r[1:], parent))
        elif l:
            return Location(l[0], Node(l[1:], (), parent))
        else:
            return Location(Section(), parent)

    def with_memo(self):
        return MemoLocation.wrap(self)


del _Location
