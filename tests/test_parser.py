"""Tests for the heuristic symbol extractor."""

import pytest
from codeflow_mcp.parser import extract_symbols, find_symbol, Symbol


JAVASCRIPT_SOURCE = '''import React, { useState } from 'react';

/** Greet a user. */
function greet(name) {
    return `Hello, ${name}!`;
}

export class Calculator {
    add(a, b) {
        return a + b;
    }
}

const Button = ({ label }) => {
    return <button>{label}</button>;
};

export default function App() {
    const [count, setCount] = useState(0);
    return <Button label="hi" />;
}
'''


def test_parse_javascript():
    """Test JavaScript declarations are found with kinds and positions."""
    symbols = extract_symbols(JAVASCRIPT_SOURCE)

    greet = find_symbol(symbols, "greet")
    assert greet == Symbol(name="greet", kind="function", line=4, column=9)

    calc = find_symbol(symbols, "Calculator")
    assert calc is not None
    assert calc.kind == "class"
    assert calc.line == 8
    assert calc.column == 13

    button = find_symbol(symbols, "Button")
    assert button.kind == "component"
    assert button.line == 14
    assert button.column == 6

    app = find_symbol(symbols, "App")
    assert app.kind == "component"
    assert app.line == 18
    assert app.column == 24


TYPESCRIPT_SOURCE = '''export interface Props<T> {
    value: T;
}

type ID = string | number;

export type Mapper<T> = (value: T) => T;

enum Color { Red, Green }

export namespace Shapes {
    export const side = 1;
}

declare module 'virtual-module' {
}
'''


def test_parse_typescript():
    """Test TypeScript-only declarations."""
    symbols = extract_symbols(TYPESCRIPT_SOURCE)
    kinds = {s.name: s.kind for s in symbols}

    assert kinds["Props"] == "interface"
    assert kinds["ID"] == "type"
    assert kinds["Mapper"] == "type"
    assert kinds["Color"] == "enum"
    assert kinds["Shapes"] == "namespace"
    assert kinds["virtual-module"] == "module"
    assert kinds["side"] == "function"

    module = find_symbol(symbols, "virtual-module")
    assert module.line == 15
    assert module.column == 16


def test_component_outranks_class():
    """Test a name declared as class and component keeps the component."""
    symbols = extract_symbols("class Foo {}\nconst Foo = () => {}\n")

    foos = [s for s in symbols if s.name == "Foo"]
    assert len(foos) == 1
    assert foos[0].kind == "component"
    assert foos[0].line == 2


def test_first_occurrence_wins_ties():
    """Test equal kinds keep the earliest declaration."""
    symbols = extract_symbols("function load() {}\n\nfunction load() {}\n")

    assert symbols == [Symbol(name="load", kind="function", line=1, column=9)]


def test_names_are_unique():
    """Test no name appears twice in a result."""
    symbols = extract_symbols(JAVASCRIPT_SOURCE + TYPESCRIPT_SOURCE + JAVASCRIPT_SOURCE)
    names = [s.name for s in symbols]

    assert len(names) == len(set(names))


def test_extraction_is_deterministic():
    """Test repeated extraction returns identical results."""
    assert extract_symbols(JAVASCRIPT_SOURCE) == extract_symbols(JAVASCRIPT_SOURCE)


def test_results_follow_scan_order():
    """Test symbols come out in source order."""
    symbols = extract_symbols("function b() {}\nfunction a() {}\nclass C {}\n")

    assert [s.name for s in symbols] == ["b", "a", "C"]


def test_commented_code_is_not_filtered():
    """Test declarations inside comments are still reported."""
    symbols = extract_symbols("// function legacy() {}\n")

    assert find_symbol(symbols, "legacy") is not None


@pytest.mark.parametrize("content", ["", "\n\n", "just some prose", "}{)(=>"])
def test_no_matches_returns_empty(content):
    """Test text without declarations yields nothing."""
    assert extract_symbols(content) == []
