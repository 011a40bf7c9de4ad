"""Tests for candidate path generation."""

from codeflow_mcp.navigation import candidate_paths


def test_capitalized_symbol_prefers_component_extension():
    """Test components are probed as .jsx before .js."""
    paths = candidate_paths("components/Button", "Button", False)

    assert paths == [
        "components/Button.jsx",
        "components/Button.js",
        "components/Button.tsx",
        "components/Button.ts",
        "components/Button.json",
        "components/Button.scss",
        "components/Button.css",
    ]


def test_lowercase_symbol_prefers_script_extension():
    """Test plain functions are probed as .js first."""
    paths = candidate_paths("utils/format", "format", False)

    assert paths[:2] == ["utils/format.js", "utils/format.jsx"]
    assert len(paths) == 7


def test_existing_extension_is_tried_first():
    """Test a path with a known extension is probed as written."""
    paths = candidate_paths("styles/main.css", "main", False)

    assert paths[0] == "styles/main.css"
    assert "styles/main.jsx" in paths
    assert "styles/main.css.js" not in paths
    assert len(paths) == 7


def test_unknown_extension_gets_guess_appended():
    """Test dotted names without a probe extension still get one."""
    paths = candidate_paths("services/user.service", "userService", False)

    assert paths[0] == "services/user.service.js"


def test_tilde_adds_src_variants_after_plain_ones():
    """Test ~ imports also probe under src/."""
    paths = candidate_paths("lib/x", "x", True)

    assert len(paths) == 14
    assert paths[:7] == candidate_paths("lib/x", "x", False)
    assert paths[7] == "src/lib/x.js"
    assert paths[8] == "src/lib/x.jsx"


def test_paths_are_unique():
    """Test no path is probed twice."""
    paths = candidate_paths("src/app.ts", "App", True)

    assert len(paths) == len(set(paths))
