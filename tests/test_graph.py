"""Tests for the panel graph."""

from codeflow_mcp.navigation import NavigationGraph, NavigationTarget
from codeflow_mcp.parser import Symbol


def make_target(file_path: str, name: str = "thing", line: int = 1, local: bool = False) -> NavigationTarget:
    return NavigationTarget(
        file_path=file_path,
        content=f"function {name}() {{}}\n",
        symbol=Symbol(name=name, kind="function", line=line, column=9),
        local=local,
    )


def test_open_root_is_idempotent():
    """Test reopening a root file returns the same panel."""
    graph = NavigationGraph()

    first = graph.open_root("src/App.jsx", "const x = 1;")
    second = graph.open_root("src/App.jsx", "const x = 1;")

    assert first == second == "1"
    assert len(graph.panels) == 1
    assert graph.get(first).is_root
    assert graph.get(first).language == "javascript"


def test_roots_stack_vertically():
    """Test later roots are placed below earlier ones."""
    graph = NavigationGraph()

    a = graph.open_root("a.js", "")
    b = graph.open_root("b.py", "")

    assert graph.get(a).position == (50, 200)
    assert graph.get(b).position == (50, 800)
    assert graph.get(b).language == "python"


def test_root_focuses_react_symbol():
    """Test a root panel focuses its React binding when declared."""
    graph = NavigationGraph()

    panel_id = graph.open_root("index.js", "// entry\nconst React = require('react');\n")

    assert graph.get(panel_id).focus == (2, 6)


def test_open_child_links_source():
    """Test a resolved symbol opens a linked child panel."""
    graph = NavigationGraph()
    root = graph.open_root("a.js", "import { greet } from './b';")

    child = graph.open_child(root, "greet", make_target("b.tsx", "greet", line=3))

    panel = graph.get(child)
    assert panel.source_node_id == root
    assert panel.symbol_name == "greet"
    assert panel.focus == (3, 9)
    assert panel.language == "typescript"
    assert [(e.source, e.target, e.label) for e in graph.edges] == [(root, child, "greet")]


def test_children_placed_right_of_source():
    """Test sibling children stack to the right of their source."""
    graph = NavigationGraph()
    root = graph.open_root("a.js", "short")

    first = graph.open_child(root, "one", make_target("one.js", "one"))
    second = graph.open_child(root, "two", make_target("two.js", "two"))

    assert graph.get(first).position == (600, 120)
    assert graph.get(second).position == (600, 320)


def test_repeated_navigation_creates_one_child():
    """Test the same symbol from the same source reuses its child."""
    graph = NavigationGraph()
    root = graph.open_root("a.js", "")

    first = graph.open_child(root, "greet", make_target("b.js", "greet"))
    second = graph.open_child(root, "greet", make_target("b.js", "greet"))

    assert first == second
    assert len(graph.panels) == 2
    assert len(graph.edges) == 1


def test_same_symbol_from_different_sources():
    """Test each source panel gets its own child for a symbol."""
    graph = NavigationGraph()
    a = graph.open_root("a.js", "")
    b = graph.open_root("b.js", "")

    from_a = graph.open_child(a, "greet", make_target("g.js", "greet"))
    from_b = graph.open_child(b, "greet", make_target("g.js", "greet"))

    assert from_a != from_b
    assert len(graph.edges) == 2


def test_close_cascades_to_descendants_only():
    """Test closing a panel removes its subtree and nothing else."""
    graph = NavigationGraph()
    a = graph.open_root("a.js", "")
    b = graph.open_child(a, "b", make_target("b.js", "b"))
    c = graph.open_child(b, "c", make_target("c.js", "c"))
    d = graph.open_child(a, "d", make_target("d.js", "d"))

    removed = graph.close(b)

    assert set(removed) == {b, c}
    assert set(graph.panels) == {a, d}
    assert [(e.source, e.target) for e in graph.edges] == [(a, d)]


def test_close_root_removes_everything_below():
    """Test closing a root clears its whole tree."""
    graph = NavigationGraph()
    a = graph.open_root("a.js", "")
    b = graph.open_child(a, "b", make_target("b.js", "b"))
    graph.open_child(b, "c", make_target("c.js", "c"))
    other = graph.open_root("other.js", "")

    graph.close(a)

    assert set(graph.panels) == {other}
    assert graph.edges == []


def test_close_unknown_panel():
    """Test closing a missing panel is a no-op."""
    graph = NavigationGraph()
    graph.open_root("a.js", "")

    assert graph.close("42") == []
    assert len(graph.panels) == 1


def test_orphaned_navigation_is_discarded():
    """Test results for a closed source panel are dropped."""
    graph = NavigationGraph()
    a = graph.open_root("a.js", "")
    graph.close(a)

    assert graph.open_child(a, "greet", make_target("b.js", "greet")) is None
    assert graph.panels == {}
    assert graph.edges == []


def test_recenter_bumps_focus_token():
    """Test every recenter issues a fresh, increasing token."""
    graph = NavigationGraph()
    a = graph.open_root("a.js", "")

    first = graph.recenter(a, 10, 4)
    second = graph.recenter(a, 10, 4)

    assert second > first
    assert graph.get(a).focus == (10, 4)
    assert graph.get(a).focus_token == second
    assert graph.edges == []
    assert len(graph.panels) == 1


def test_recenter_unknown_panel():
    """Test recentering a missing panel returns None."""
    assert NavigationGraph().recenter("1", 1, 0) is None


def test_apply_local_target_recenters_source():
    """Test local targets recenter instead of opening panels."""
    graph = NavigationGraph()
    a = graph.open_root("a.js", "function helper() {}")

    result = graph.apply(a, "helper", make_target("a.js", "helper", line=5, local=True))

    assert result == a
    assert graph.get(a).focus == (5, 9)
    assert len(graph.panels) == 1


def test_apply_remote_target_opens_child():
    """Test remote targets open a child panel."""
    graph = NavigationGraph()
    a = graph.open_root("a.js", "")

    result = graph.apply(a, "greet", make_target("b.js", "greet"))

    assert result != a
    assert graph.get(result).source_node_id == a


def test_to_dict_snapshot():
    """Test the serialized graph omits file content."""
    graph = NavigationGraph()
    a = graph.open_root("a.js", "secret")
    graph.open_child(a, "greet", make_target("b.js", "greet"))

    snapshot = graph.to_dict()

    assert len(snapshot["panels"]) == 2
    assert "content" not in snapshot["panels"][0]
    assert snapshot["edges"][0]["label"] == "greet"
    assert snapshot["panels"][1]["position"] == {"x": 600, "y": 120}
