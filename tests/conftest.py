"""Pytest configuration and shared fixtures for the resumedoc test suite.

This module provides shared fixtures, test configuration, and the sample
trees used across the generator, serialization and CLI tests.
"""

import logging
import os

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import item

from resumedoc.ast import (
    BoldMark,
    BulletList,
    Document,
    ItalicMark,
    LinkAttrs,
    LinkMark,
    OrderedList,
    OrderedListAttrs,
    Paragraph,
    Text,
)

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo ``configure_logging`` so records keep reaching caplog."""
    package_logger = logging.getLogger("resumedoc")
    saved = (package_logger.level, list(package_logger.handlers), package_logger.propagate)
    yield
    for handler in package_logger.handlers:
        if handler not in saved[1]:
            handler.close()
    package_logger.setLevel(saved[0])
    package_logger.handlers[:] = saved[1]
    package_logger.propagate = saved[2]


@pytest.fixture
def resume_document() -> Document:
    """Provide a work-experience style tree exercising every node and mark.

    Returns
    -------
    Document
        Two paragraphs, a bullet list with a nested ordered list, and marks.

    """
    return Document(
        content=[
            Paragraph(
                content=[
                    Text(text="Senior engineer at "),
                    Text(text="Acme", marks=[LinkMark(attrs=LinkAttrs(href="https://acme.example"))]),
                    Text(text="."),
                ]
            ),
            BulletList(
                content=[
                    item("Led the platform team"),
                    item(
                        "Shipped:",
                        OrderedList(
                            content=[item("billing"), item("search")],
                            attrs=OrderedListAttrs(start=3),
                        ),
                    ),
                ]
            ),
            Paragraph(content=[Text(text="Impact", marks=[BoldMark(), ItalicMark()])]),
        ]
    )


@pytest.fixture
def resume_tree_dict() -> dict:
    """Provide the serialized form of ``resume_document``.

    Returns
    -------
    dict
        Tree in the upstream producer's dictionary shape.

    """

    def para(text: str) -> dict:
        return {"type": "paragraph", "content": [{"type": "text", "text": text}]}

    def list_item(*content: dict) -> dict:
        return {"type": "listItem", "content": list(content)}

    return {
        "type": "doc",
        "content": [
            {
                "type": "paragraph",
                "content": [
                    {"type": "text", "text": "Senior engineer at "},
                    {
                        "type": "text",
                        "text": "Acme",
                        "marks": [{"type": "link", "attrs": {"href": "https://acme.example"}}],
                    },
                    {"type": "text", "text": "."},
                ],
            },
            {
                "type": "bulletList",
                "content": [
                    list_item(para("Led the platform team")),
                    list_item(
                        para("Shipped:"),
                        {
                            "type": "orderedList",
                            "attrs": {"start": 3},
                            "content": [list_item(para("billing")), list_item(para("search"))],
                        },
                    ),
                ],
            },
            {
                "type": "paragraph",
                "content": [{"type": "text", "text": "Impact", "marks": [{"type": "bold"}, {"type": "italic"}]}],
            },
        ],
    }
