"""
Pytest configuration and fixtures for docoutline tests.
"""

import pytest

from docoutline.core.outline import AnalyzedElement, Position
from docoutline.generator import DocumentOutliner, default_registry


@pytest.fixture
def sample_markdown() -> str:
    """A small Markdown document with three heading levels."""
    return (
        "# Guide\n"
        "\n"
        "Intro text.\n"
        "\n"
        "## Installation\n"
        "\n"
        "### From source\n"
        "\n"
        "## Usage\n"
        "\n"
        "# Reference\n"
    )


@pytest.fixture
def sample_csv() -> str:
    """Delimited text with a header and typed columns."""
    return (
        "Name,Age,Email,Active\n"
        "Alice,25,alice@example.com,true\n"
        "Bob,30,bob@example.com,false\n"
        "Carol,28,carol@example.com,true\n"
        "Dave,27,dave@example.com,false\n"
    )


@pytest.fixture
def sample_python() -> str:
    """A module with a class, methods and a top-level function."""
    return (
        "class Person:\n"
        '    """A person."""\n'
        "\n"
        "    species: str = 'human'\n"
        "\n"
        "    def __init__(self, name: str, age: int = 0):\n"
        "        self.name = name\n"
        "        self.age = age\n"
        "\n"
        "    def _secret(self):\n"
        "        return 42\n"
        "\n"
        "\n"
        "def greet(person: Person) -> str:\n"
        '    """Say hello."""\n'
        "    return f'Hello {person.name}'\n"
    )


@pytest.fixture
def flat_elements() -> list[AnalyzedElement]:
    """Elements A(1), B(2), C(2), D(1) in document order."""
    return [
        AnalyzedElement(name="A", kind="class", depth=1, position=Position(1)),
        AnalyzedElement(name="B", kind="method", depth=2, position=Position(2)),
        AnalyzedElement(name="C", kind="method", depth=2, position=Position(5)),
        AnalyzedElement(name="D", kind="function", depth=1, position=Position(9)),
    ]


@pytest.fixture
def registry():
    """A fresh registry with the built-in analyzers."""
    return default_registry()


@pytest.fixture
def outliner() -> DocumentOutliner:
    """An outliner backed by a fresh default registry."""
    return DocumentOutliner()
