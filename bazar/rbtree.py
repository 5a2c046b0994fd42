import enum
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

K = TypeVar("K")

# every tree reserves slot 0 of its arena for the sentinel. all absent
# children and the root's parent point here
NIL = 0


class Direction(enum.IntEnum):
    ROOT = -1
    LEFT = 0
    RIGHT = 1


class Colour(enum.Enum):
    BLACK = 0
    RED = 1


class InvariantError(AssertionError):
    """Raised by RedBlackTree.validate() when a red-black property is broken"""


class Node:

    __slots__ = ("key", "colour", "parent", "left", "right")

    def __init__(self, key=None, colour: Colour = Colour.RED):
        self.reset(key, colour)

    def reset(self, key=None, colour: Colour = Colour.RED):
        self.key = key
        self.colour = colour
        self.parent = NIL
        self.left = NIL
        self.right = NIL

    def get_child(self, direction: Direction) -> int:
        if direction == Direction.LEFT:
            return self.left
        return self.right

    def set_child(self, direction: Direction, index: int):
        if direction == Direction.LEFT:
            self.left = index
        else:
            self.right = index


class RedBlackTreeIterator(Iterator[K]):
    """Walks a tree by chasing successor (or predecessor) links

    The iterator remembers the tree's modification counter when it is created
    and refuses to continue once the tree has been structurally changed.
    """

    def __init__(self, tree: "RedBlackTree[K]", reverse: bool = False):
        self._tree = tree
        self._reverse = reverse
        self._version = tree._version
        self._cursor = tree.maximum() if reverse else tree.minimum()

    def __iter__(self):
        return self

    def __next__(self) -> K:
        tree = self._tree
        if tree._version != self._version:
            raise RuntimeError("tree mutated during iteration")
        if self._cursor == NIL:
            raise StopIteration
        cursor = self._cursor
        if self._reverse:
            self._cursor = tree.predecessor(cursor)
        else:
            self._cursor = tree.successor(cursor)
        return tree.key(cursor)


class RedBlackTree(Generic[K]):
    """Ordered collection of comparable keys

    Nodes are kept in an arena (a plain list) and refer to each other by
    index. Equal keys are all kept: a key equal to a visited node is routed to
    its right subtree, so duplicates come out adjacent during iteration.
    """

    def __init__(self, keys: Iterable[K] = ()):
        self._nodes: List[Node] = [Node(colour=Colour.BLACK)]
        self._free: List[int] = []
        self.root = NIL
        self._count = 0
        self._version = 0
        self.update(keys)

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key) -> bool:
        return self.search(key) != NIL

    def __iter__(self) -> Iterator[K]:
        return RedBlackTreeIterator(self)

    def __reversed__(self) -> Iterator[K]:
        return RedBlackTreeIterator(self, reverse=True)

    def __repr__(self):
        return "%s([%s])" % (type(self).__name__, ", ".join(repr(key) for key in self))

    def size(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self.root == NIL

    def contains(self, key: K) -> bool:
        return key in self

    def key(self, x: int) -> K:
        if x == NIL:
            raise KeyError("the sentinel holds no key")
        return self._nodes[x].key

    def first(self) -> K:
        if self.root == NIL:
            raise KeyError("first(): tree is empty")
        return self._nodes[self.minimum()].key

    def last(self) -> K:
        if self.root == NIL:
            raise KeyError("last(): tree is empty")
        return self._nodes[self.maximum()].key

    def get_direction(self, x: int) -> Direction:
        parent = self._nodes[x].parent
        if parent == NIL:
            return Direction.ROOT
        return Direction.LEFT if x == self._nodes[parent].left else Direction.RIGHT

    def search(self, key: K) -> int:
        """Returns the index of a node holding key, or NIL"""
        nodes = self._nodes
        x = self.root
        while x != NIL:
            node = nodes[x]
            if key == node.key:
                return x
            x = node.left if key < node.key else node.right
        return NIL

    def minimum(self, x: Optional[int] = None) -> int:
        """Returns the leftmost node of the subtree rooted at x"""
        nodes = self._nodes
        if x is None:
            x = self.root
        while nodes[x].left != NIL:
            x = nodes[x].left
        return x

    def maximum(self, x: Optional[int] = None) -> int:
        """Returns the rightmost node of the subtree rooted at x"""
        nodes = self._nodes
        if x is None:
            x = self.root
        while nodes[x].right != NIL:
            x = nodes[x].right
        return x

    def successor(self, x: int) -> int:
        nodes = self._nodes
        if x == NIL:
            return NIL
        if nodes[x].right != NIL:
            return self.minimum(nodes[x].right)
        # climb until we leave a left subtree
        y = nodes[x].parent
        while y != NIL and x == nodes[y].right:
            x, y = y, nodes[y].parent
        return y

    def predecessor(self, x: int) -> int:
        nodes = self._nodes
        if x == NIL:
            return NIL
        if nodes[x].left != NIL:
            return self.maximum(nodes[x].left)
        y = nodes[x].parent
        while y != NIL and x == nodes[y].left:
            x, y = y, nodes[y].parent
        return y

    def add(self, key: K) -> bool:
        """Inserts key and rebalances the tree"""
        nodes = self._nodes
        parent = NIL
        direction = Direction.LEFT
        x = self.root
        while x != NIL:
            parent = x
            direction = Direction.LEFT if key < nodes[x].key else Direction.RIGHT
            x = nodes[x].get_child(direction)

        z = self._allocate(key)
        nodes[z].parent = parent
        if parent == NIL:
            self.root = z
        else:
            nodes[parent].set_child(direction, z)

        self._count += 1
        self._version += 1
        self._insert_fixup(z)
        return True

    def update(self, keys: Iterable[K]):
        for key in keys:
            self.add(key)

    def remove(self, key: K) -> bool:
        """Removes one node holding key. Absent keys are ignored"""
        z = self.search(key)
        if z == NIL:
            return False
        self._delete(z)
        return True

    discard = remove

    def retain_all(self, other) -> bool:
        """Keeps only the keys that are also in other"""
        doomed = [key for key in self if key not in other]
        for key in doomed:
            self.remove(key)
        return bool(doomed)

    def remove_all(self, other) -> bool:
        """Drops every key that is also in other"""
        doomed = [key for key in self if key in other]
        for key in doomed:
            self.remove(key)
        return bool(doomed)

    def clear(self):
        if self.root == NIL:
            return
        self._nodes = [Node(colour=Colour.BLACK)]
        self._free = []
        self.root = NIL
        self._count = 0
        self._version += 1

    def _allocate(self, key: K) -> int:
        if self._free:
            index = self._free.pop()
            self._nodes[index].reset(key)
            return index
        self._nodes.append(Node(key))
        return len(self._nodes) - 1

    def _release(self, x: int):
        # drop the key so the slot no longer keeps it alive
        self._nodes[x].reset()
        self._free.append(x)
        self._count -= 1
        self._version += 1

    def _rotate_subtree(self, sub: int, direction: Direction) -> int:
        """Moves sub down in the given direction, lifting its other child"""
        nodes = self._nodes
        opposite = Direction(1 - direction)
        new_root = nodes[sub].get_child(opposite)
        # nothing to lift, e.g. when asked to rotate around the sentinel
        if new_root == NIL:
            return sub

        new_child = nodes[new_root].get_child(direction)
        nodes[sub].set_child(opposite, new_child)
        if new_child != NIL:
            nodes[new_child].parent = sub

        sub_parent = nodes[sub].parent
        nodes[new_root].parent = sub_parent
        if sub_parent == NIL:
            self.root = new_root
        else:
            d = Direction.RIGHT if sub == nodes[sub_parent].right else Direction.LEFT
            nodes[sub_parent].set_child(d, new_root)

        nodes[new_root].set_child(direction, sub)
        nodes[sub].parent = new_root
        return new_root

    def _insert_fixup(self, z: int):
        nodes = self._nodes
        while nodes[nodes[z].parent].colour == Colour.RED:
            # a red parent is never the root, so the grandparent is real
            parent = nodes[z].parent
            grandparent = nodes[parent].parent
            direction = self.get_direction(parent)
            opposite = Direction(1 - direction)
            uncle = nodes[grandparent].get_child(opposite)

            if nodes[uncle].colour == Colour.RED:
                # push the blackness down from the grandparent and retry two
                # levels up
                nodes[parent].colour = Colour.BLACK
                nodes[uncle].colour = Colour.BLACK
                nodes[grandparent].colour = Colour.RED
                z = grandparent
                continue

            # if z sits between its parent and grandparent, rotate it to the
            # outside first
            if z == nodes[parent].get_child(opposite):
                z = parent
                self._rotate_subtree(z, direction)
                parent = nodes[z].parent

            nodes[parent].colour = Colour.BLACK
            nodes[grandparent].colour = Colour.RED
            self._rotate_subtree(grandparent, opposite)

        nodes[self.root].colour = Colour.BLACK

    def _transplant(self, u: int, v: int):
        nodes = self._nodes
        parent = nodes[u].parent
        if parent == NIL:
            self.root = v
        elif u == nodes[parent].left:
            nodes[parent].left = v
        else:
            nodes[parent].right = v
        # v may be the sentinel, its parent is only read by _delete_fixup
        nodes[v].parent = parent

    def _delete(self, z: int):
        nodes = self._nodes
        y = z
        y_colour = nodes[y].colour

        if nodes[z].left == NIL:
            x = nodes[z].right
            self._transplant(z, x)
        elif nodes[z].right == NIL:
            x = nodes[z].left
            self._transplant(z, x)
        else:
            # z has both children, its successor y takes its place
            y = self.minimum(nodes[z].right)
            y_colour = nodes[y].colour
            x = nodes[y].right
            if nodes[y].parent == z:
                nodes[x].parent = y
            else:
                self._transplant(y, x)
                nodes[y].right = nodes[z].right
                nodes[nodes[y].right].parent = y
            self._transplant(z, y)
            nodes[y].left = nodes[z].left
            nodes[nodes[y].left].parent = y
            nodes[y].colour = nodes[z].colour

        if y_colour == Colour.BLACK:
            self._delete_fixup(x)
        nodes[NIL].parent = NIL
        self._release(z)

    def _delete_fixup(self, x: int):
        nodes = self._nodes
        # x carries an extra black until it reaches a red node or the root
        while x != self.root and nodes[x].colour == Colour.BLACK:
            parent = nodes[x].parent
            direction = Direction.LEFT if x == nodes[parent].left else Direction.RIGHT
            opposite = Direction(1 - direction)
            sibling = nodes[parent].get_child(opposite)

            if nodes[sibling].colour == Colour.RED:
                nodes[sibling].colour = Colour.BLACK
                nodes[parent].colour = Colour.RED
                self._rotate_subtree(parent, direction)
                sibling = nodes[parent].get_child(opposite)

            close_nephew = nodes[sibling].get_child(direction)
            distant_nephew = nodes[sibling].get_child(opposite)

            if (nodes[close_nephew].colour == Colour.BLACK
                    and nodes[distant_nephew].colour == Colour.BLACK):
                nodes[sibling].colour = Colour.RED
                x = parent
                continue

            if nodes[distant_nephew].colour == Colour.BLACK:
                nodes[close_nephew].colour = Colour.BLACK
                nodes[sibling].colour = Colour.RED
                self._rotate_subtree(sibling, opposite)
                sibling = nodes[parent].get_child(opposite)
                distant_nephew = nodes[sibling].get_child(opposite)

            nodes[sibling].colour = nodes[parent].colour
            nodes[parent].colour = Colour.BLACK
            nodes[distant_nephew].colour = Colour.BLACK
            self._rotate_subtree(parent, direction)
            x = self.root

        nodes[x].colour = Colour.BLACK

    def height(self, x: Optional[int] = None) -> int:
        """Number of nodes on the longest path from x down to a leaf"""
        if x is None:
            x = self.root
        if x == NIL:
            return 0
        node = self._nodes[x]
        return 1 + max(self.height(node.left), self.height(node.right))

    def black_height(self, x: Optional[int] = None) -> int:
        if x is None:
            x = self.root
        return self._validate(x)[1]

    def validate(self) -> int:
        """Checks every red-black property and returns the root's black-height"""
        nodes = self._nodes
        if nodes[NIL].colour != Colour.BLACK:
            raise InvariantError("sentinel is not black")
        if nodes[NIL].left != NIL or nodes[NIL].right != NIL:
            raise InvariantError("sentinel has children")
        if nodes[self.root].colour != Colour.BLACK:
            raise InvariantError("root is not black")
        if self.root != NIL and nodes[self.root].parent != NIL:
            raise InvariantError("root has a parent")

        count, black_height = self._validate(self.root)
        if count != self._count:
            raise InvariantError("size counter is %d but tree holds %d nodes"
                                 % (self._count, count))

        previous = NIL
        x = self.minimum()
        while x != NIL:
            if previous != NIL and nodes[x].key < nodes[previous].key:
                raise InvariantError("keys out of order: %r before %r"
                                     % (nodes[previous].key, nodes[x].key))
            previous, x = x, self.successor(x)
        return black_height

    def _validate(self, x: int):
        """Returns (node count, black-height) of the subtree rooted at x"""
        if x == NIL:
            return 0, 0
        nodes = self._nodes
        node = nodes[x]
        for child in (node.left, node.right):
            if child == NIL:
                continue
            if nodes[child].parent != x:
                raise InvariantError("broken parent link below %r" % (node.key,))
            if node.colour == Colour.RED and nodes[child].colour == Colour.RED:
                raise InvariantError("red node %r has a red child" % (node.key,))
        if node.left != NIL and node.key < nodes[node.left].key:
            raise InvariantError("left child of %r is greater" % (node.key,))
        if node.right != NIL and nodes[node.right].key < node.key:
            raise InvariantError("right child of %r is smaller" % (node.key,))

        left_count, left_height = self._validate(node.left)
        right_count, right_height = self._validate(node.right)
        if left_height != right_height:
            raise InvariantError("black-height mismatch below %r: %d != %d"
                                 % (node.key, left_height, right_height))
        black = 1 if node.colour == Colour.BLACK else 0
        return left_count + right_count + 1, left_height + black

    def pprint(self, x: Optional[int] = None, depth=0) -> str:
        if x is None:
            x = self.root
        if x == NIL:
            return "\t" * depth + "|_ null\n"
        # recursively draw a tree
        node = self._nodes[x]
        direction = self.get_direction(x)
        return ("\t" * depth + f"|_ {direction.name} | {node.key}: {node.colour}\n"
                + self.pprint(node.left, depth + 1)
                + self.pprint(node.right, depth + 1))


class RedBlackSet(RedBlackTree[K]):
    """A RedBlackTree that holds each key at most once"""

    def add(self, key: K) -> bool:
        if key in self:
            return False
        return super().add(key)
