"""Order-statistic red-black tree keyed by comparable values."""

from __future__ import annotations

from typing import Any, Iterator, Optional

EMPTY_TREE_TEXT = "The Tree is empty"


class _Node:
    __slots__ = ("key", "value", "red", "size", "left", "right", "parent")

    def __init__(self, key: Any = None, value: Any = None, nil: Optional["_Node"] = None):
        self.key = key
        self.value = value
        self.red = False
        self.size = 0
        self.left = nil
        self.right = nil
        self.parent = nil


class RedBlackTree:
    """A red-black tree with unique keys and subtree sizes for rank queries."""

    def __init__(self) -> None:
        self._nil = _Node()
        self._root = self._nil

    # ----- lookup -------------------------------------------------------

    def _find_node(self, key: Any) -> _Node:
        x = self._root
        while x is not self._nil and key != x.key:
            x = x.left if key < x.key else x.right
        return x

    def _minimum(self, x: _Node) -> _Node:
        while x.left is not self._nil:
            x = x.left
        return x

    def find(self, key: Any) -> bool:
        """Return True if the key is stored in the tree."""
        return self._find_node(key) is not self._nil

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the value stored under key, or default."""
        node = self._find_node(key)
        return default if node is self._nil else node.value

    def count_less(self, key: Any) -> int:
        """Return how many stored keys are strictly less than key."""
        count = 0
        x = self._root
        while x is not self._nil:
            if x.key <= key:
                count += x.size - x.right.size
            if x.key == key:
                return count - 1
            x = x.left if x.key > key else x.right
        return count

    def __len__(self) -> int:
        return self._root.size

    def __contains__(self, key: Any) -> bool:
        return self.find(key)

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        x = self._root
        while stack or x is not self._nil:
            while x is not self._nil:
                stack.append(x)
                x = x.left
            x = stack.pop()
            yield x.key
            x = x.right

    # ----- rotations ----------------------------------------------------

    def _rotate_left(self, x: _Node) -> None:
        y = x.right
        if y is self._nil:
            raise RuntimeError("left rotation on a node without a right child")
        x.right = y.left
        if y.left is not self._nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is self._nil:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y
        x.size = x.left.size + x.right.size + 1
        y.size = y.left.size + y.right.size + 1

    def _rotate_right(self, y: _Node) -> None:
        x = y.left
        if x is self._nil:
            raise RuntimeError("right rotation on a node without a left child")
        y.left = x.right
        if x.right is not self._nil:
            x.right.parent = y
        x.parent = y.parent
        if y.parent is self._nil:
            self._root = x
        elif y is y.parent.right:
            y.parent.right = x
        else:
            y.parent.left = x
        x.right = y
        y.parent = x
        y.size = y.left.size + y.right.size + 1
        x.size = x.left.size + x.right.size + 1

    # ----- insertion ----------------------------------------------------

    def insert(self, key: Any, value: Any) -> bool:
        """Insert key with value; return False if the key was already present."""
        if self._find_node(key) is not self._nil:
            return False
        z = _Node(key, value, self._nil)
        y = self._nil
        x = self._root
        while x is not self._nil:
            y = x
            x.size += 1
            x = x.left if z.key < x.key else x.right
        z.parent = y
        if y is self._nil:
            self._root = z
        elif z.key < y.key:
            y.left = z
        else:
            y.right = z
        z.red = True
        z.size = 1
        self._insert_fixup(z)
        return True

    def _insert_fixup(self, z: _Node) -> None:
        while z.parent.red:
            grandparent = z.parent.parent
            if z.parent is grandparent.left:
                uncle = grandparent.right
                if uncle.red:
                    grandparent.red = True
                    z.parent.red = False
                    uncle.red = False
                    z = grandparent
                else:
                    if z is z.parent.right:
                        z = z.parent
                        self._rotate_left(z)
                    z.parent.red = False
                    z.parent.parent.red = True
                    self._rotate_right(z.parent.parent)
            else:
                uncle = grandparent.left
                if uncle.red:
                    z.parent.red = False
                    uncle.red = False
                    grandparent.red = True
                    z = grandparent
                else:
                    if z is z.parent.left:
                        z = z.parent
                        self._rotate_right(z)
                    z.parent.red = False
                    z.parent.parent.red = True
                    self._rotate_left(z.parent.parent)
        self._root.red = False

    # ----- removal ------------------------------------------------------

    def _transplant(self, u: _Node, v: _Node) -> None:
        if u.parent is self._nil:
            self._root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        v.parent = u.parent

    def remove(self, key: Any) -> bool:
        """Remove key; return False if it was not present."""
        z = self._find_node(key)
        if z is self._nil:
            return False
        self._remove_node(z)
        return True

    def _remove_node(self, z: _Node) -> None:
        nil = self._nil
        y = z
        was_y_red = y.red
        if z.left is nil:
            x = z.right
            self._transplant(z, x)
        elif z.right is nil:
            x = z.left
            self._transplant(z, x)
        else:
            y = self._minimum(z.right)
            was_y_red = y.red
            x = y.right
            if y.parent is z:
                x.parent = y
            else:
                self._transplant(y, y.right)
                y.right = z.right
                y.right.parent = y
            self._transplant(z, y)
            y.left = z.left
            y.left.parent = y
            y.red = z.red
            y.size = z.size

        ancestor = x.parent
        while ancestor is not nil:
            ancestor.size -= 1
            ancestor = ancestor.parent
        if not was_y_red:
            self._remove_fixup(x)

    def _remove_fixup(self, x: _Node) -> None:
        while x is not self._root and not x.red:
            if x is x.parent.left:
                w = x.parent.right
                if w.red:
                    w.red = False
                    x.parent.red = True
                    self._rotate_left(x.parent)
                    w = x.parent.right
                if not w.left.red and not w.right.red:
                    w.red = True
                    x = x.parent
                else:
                    if not w.right.red:
                        w.left.red = False
                        w.red = True
                        self._rotate_right(w)
                        w = x.parent.right
                    w.red = x.parent.red
                    x.parent.red = False
                    w.right.red = False
                    self._rotate_left(x.parent)
                    x = self._root
            else:
                w = x.parent.left
                if w.red:
                    w.red = False
                    x.parent.red = True
                    self._rotate_right(x.parent)
                    w = x.parent.left
                if not w.right.red and not w.left.red:
                    w.red = True
                    x = x.parent
                else:
                    if not w.left.red:
                        w.right.red = False
                        w.red = True
                        self._rotate_left(w)
                        w = x.parent.left
                    w.red = x.parent.red
                    x.parent.red = False
                    w.left.red = False
                    self._rotate_right(x.parent)
                    x = self._root
        x.red = False

    # ----- display ------------------------------------------------------

    def render(self) -> str:
        """Preorder text of the tree as value->size->COLOUR with parenthesised children."""
        if self._root is self._nil:
            return EMPTY_TREE_TEXT
        parts: list[str] = []
        self._render_into(self._root, parts)
        return "".join(parts)

    def _render_into(self, node: _Node, parts: list[str]) -> None:
        if node is self._nil:
            return
        parts.append(f"{node.value}->{node.size}->{'RED' if node.red else 'BLACK'}")
        if node.left is self._nil and node.right is self._nil:
            return
        parts.append("(")
        self._render_into(node.left, parts)
        parts.append(")(")
        self._render_into(node.right, parts)
        parts.append(")")

    def __str__(self) -> str:
        return self.render()