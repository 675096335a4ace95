import pytest

from estruturas.tree import Tree, build


def traversal_tree():
    b = build("B", "E", "F")
    c = build("C", "G", "H", "I")
    return build("A", b, c, "D")


def big_tree():
    d = build("D", "I", "J")
    b = build("B", d, "E", "F")
    h = build("H", "K")
    c = build("C", "G", h)
    return build("A", b, c)


def lines(values):
    return "".join(f"{value}\n" for value in values)


def all_nodes(root):
    return [root.find(info) for info in root.preorder()]


def test_traversals_match_source():
    root = traversal_tree()
    assert lines(root.preorder()) == "A\nB\nE\nF\nC\nG\nH\nI\nD\n"
    assert lines(root.postorder()) == "E\nF\nB\nG\nH\nI\nC\nD\nA\n"
    assert lines(root.levelorder()) == "A\nB\nC\nD\nE\nF\nG\nH\nI\n"


def test_parent_and_child_links():
    root = big_tree()
    b = root.child(0)
    assert b.info == "B"
    assert b.parent is root
    assert root.parent is None
    assert root.child(2) is None
    assert root.child(-1) is None


def test_node_kinds():
    root = big_tree()
    assert root.is_root() and not root.is_internal()
    b = root.find("B")
    assert b.is_internal() and not b.is_external()
    k = root.find("K")
    assert k.is_external() and not k.is_root()


def test_degree_counts_added_children():
    node = Tree("X")
    assert node.degree() == 0
    node.add_subtree(Tree("Y"))
    node.add_subtree(Tree("Z"))
    assert node.degree() == 2
    node.add_subtree(None)
    assert node.degree() == 2


def test_depth_is_parent_depth_plus_one():
    root = big_tree()
    assert root.depth() == 0
    for node in all_nodes(root)[1:]:
        assert node.depth() == node.parent.depth() + 1


def test_height_is_greatest_depth():
    root = big_tree()
    nodes = all_nodes(root)
    assert root.height() == max(node.depth() for node in nodes)
    assert all(node.height() == 0 for node in nodes if node.is_external())


def test_size_matches_traversals():
    root = big_tree()
    assert root.size() == len("ABCDEFGHIJK")
    for node in all_nodes(root):
        assert node.size() == len(list(node.preorder())) == len(list(node.levelorder()))


def test_contains_and_find():
    root = big_tree()
    assert "J" in root
    assert "L" not in root
    assert root.find("H").info == "H"
    assert root.find("L") is None
    assert "J" not in root.find("C")


def test_remove_subtree():
    root = big_tree()
    b = root.find("B")
    d = root.find("D")
    before = root.size()
    b.remove_subtree(d)
    assert root.size() == before - d.size()
    assert "J" not in root
    assert d.parent is None
    with pytest.raises(ValueError):
        b.remove_subtree(d)


def test_graphviz_output():
    root = build("A", "B", build("C", "E", "F"), build("D", "G"))
    expected = (
        "graph Arvore {\n  node [shape=circle]\n"
        "  A -- B\n  A -- C\n  C -- E\n  C -- F\n  A -- D\n  D -- G\n}\n"
    )
    assert root.graphviz("Arvore") == expected


def test_graphviz_has_one_edge_per_non_root():
    root = big_tree()
    text = root.graphviz()
    assert text.startswith("graph NodeTree {\n")
    assert text.count(" -- ") == root.size() - 1


def test_render_small_trees():
    assert Tree("A").render() == "A\n"
    assert build("A", "B").render() == "A ─── B\n"


def test_render_has_one_line_per_leaf():
    root = big_tree()
    rendered = root.render().splitlines()
    leaves = [node.info for node in all_nodes(root) if node.is_external()]
    assert len(rendered) == len(leaves)
    assert sorted(line[-1] for line in rendered) == sorted(leaves)
    assert rendered[0].startswith("A ─┬─ C")


def test_generic_values_and_info_update():
    root = build(1, build(2, 4), 3)
    assert list(root.preorder()) == [1, 2, 4, 3]
    root.find(4).info = 40
    assert 40 in root
    assert 4 not in root