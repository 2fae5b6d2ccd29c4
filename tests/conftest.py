"""Shared fixtures for dotlens tests."""

import pytest

SERVICES_DOT = """\
digraph services {
    rankdir=LR;
    node [shape=box];

    // entry points
    api [label="API Gateway", color=blue];
    db [
        label="Database",
        shape=cylinder
    ];

    api -> auth [label="call"];
    api -> db [label="query", color="red"];
    auth -> db [
        label="query",
        style=dashed
    ];
    api -> cache;
    cache -- db [weight=2];
}
"""

CALL_DOT = """\
digraph {
  a [label="A"];
  b;
  c;
  a -> b [label="call"];
  a -> c;
}"""


@pytest.fixture
def services_dot():
    """A directed graph with labelled, unlabelled and multi-line edges."""
    return SERVICES_DOT


@pytest.fixture
def call_dot():
    """Small graph with one labelled and one unlabelled edge."""
    return CALL_DOT


@pytest.fixture
def dot_file(tmp_path, services_dot):
    """services_dot written to a .dot file."""
    path = tmp_path / "services.dot"
    path.write_text(services_dot, encoding="utf-8")
    return path
