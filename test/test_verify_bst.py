from binary_tree import Node, verify_bst


def test_single_node():
    root = Node(15)
    assert verify_bst(root)


def test_greater_item_in_left_subtree():
    root = Node(15, left=Node(16, left=Node(16)))
    assert not verify_bst(root)


def test_greater_item_deep_in_left_subtree():
    root = Node(15, left=Node(10, right=Node(14, right=Node(16))))
    assert not verify_bst(root)


def test_equal_item_on_the_right():
    root = Node(15, left=Node(10), right=Node(15))
    assert verify_bst(root)


def test_equal_item_on_the_left():
    root = Node(15, left=Node(15))
    assert not verify_bst(root)


def test_empty():
    assert verify_bst(None)
