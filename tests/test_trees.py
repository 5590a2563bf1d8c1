from algoshelf.trees import TreeNode, height, spiral_order


def _sample_tree():
    root = TreeNode(1)
    root.left = TreeNode(2)
    root.right = TreeNode(3)
    root.left.left = TreeNode(7)
    root.left.right = TreeNode(6)
    root.right.left = TreeNode(5)
    root.right.right = TreeNode(4)
    return root


def _perfect_tree(values):
    """Build a tree laid out like a heap: children of i are 2i+1 and 2i+2."""
    nodes = [TreeNode(v) for v in values]
    for i, node in enumerate(nodes):
        if 2 * i + 1 < len(nodes):
            node.left = nodes[2 * i + 1]
        if 2 * i + 2 < len(nodes):
            node.right = nodes[2 * i + 2]
    return nodes[0] if nodes else None


def _chain(values):
    root = None
    for value in reversed(values):
        root = TreeNode(value, left=root)
    return root


def test_sample_spiral_order():
    assert spiral_order(_sample_tree()) == [1, 2, 3, 4, 5, 6, 7]


def test_sample_height():
    assert height(_sample_tree()) == 3


def test_empty_tree():
    assert height(None) == 0
    assert spiral_order(None) == []


def test_chain_height_and_order():
    values = ["a", "b", "c", "d", "e"]
    root = _chain(values)
    assert height(root) == len(values)
    assert spiral_order(root) == values


def test_levels_alternate_direction():
    values = list(range(100, 115))
    result = spiral_order(_perfect_tree(values))
    assert result[0:1] == values[0:1]
    assert result[1:3] == values[1:3]
    assert result[3:7] == values[3:7][::-1]
    assert result[7:15] == values[7:15]


def test_spiral_keeps_every_node_once():
    values = [9, 4, 17, 4, 0, -3, 8, 22, 1, 5]
    result = spiral_order(_perfect_tree(values))
    assert sorted(result) == sorted(values)
    assert len(result) == len(values)