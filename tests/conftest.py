"""Shared test fixtures for snippet-engine."""

from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"

# Canonical two-variant snippet used across tests
BASIC_SNIPPET = (
    '//<snippet task="2">\n'
    "//<student>\n"
    "//task\n"
    "//</student>\n"
    "//<solution>\n"
    "code();\n"
    "//</solution>\n"
    "//</snippet>"
)


@pytest.fixture
def basic_text():
    return BASIC_SNIPPET


@pytest.fixture
def exercise_text():
    with open(FIXTURES / "Exercise.cs", encoding="utf-8", newline="") as f:
        return f.read()


@pytest.fixture
def source_tree(tmp_path):
    """A small exercise folder with marked-up and plain files."""
    src = tmp_path / "exercise"
    (src / "sub").mkdir(parents=True)
    (src / "Exercise.cs").write_text((FIXTURES / "Exercise.cs").read_text())
    (src / "sub" / "Plain.cs").write_text("class Plain {}\n")
    (src / "notes.txt").write_text("//<snippet>\nnot parsed\n")
    return src
