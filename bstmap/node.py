class Node(object):
    """
    Unit of the tree, stores a pair of key-value and the number of nodes
    in the subtree rooted at itself.
    """
    __slots__ = ('key', 'value', 'left', 'right', 'count')

    def __init__(self, key, value, count=1):
        self.key = key
        self.value = value
        self.left = self.right = None
        self.count = count

    def __repr__(self):
        return '<Node {key}:{value} ({count})>'.format(key=self.key, value=self.value, count=self.count)


def size_of(node) -> int:
    """Number of nodes in subtree rooted at `node`, 0 for an absent node."""
    if node is None:
        return 0
    return node.count


def recount(node: Node) -> Node:
    node.count = 1 + size_of(node.left) + size_of(node.right)
    return node
