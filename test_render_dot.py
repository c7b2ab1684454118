"""Tests for DOT node and edge statements"""

from recgraph.graph import (
    ComponentNodeBuilder,
    TypeRef,
    edge_endpoint,
    render_edge,
    render_node,
)


def test_box_node_statement():
    node = ComponentNodeBuilder("n1", TypeRef("org.example.ItemScorer")).build()
    assert render_node(node) == (
        '"n1" [label="o.e.ItemScorer", shape="box", fillcolor="white", style="filled"];'
    )


def test_provided_table_node_statement():
    node = (
        ComponentNodeBuilder("n2", TypeRef("org.example.ItemScorer"))
        .add_dependency(TypeRef("org.example.RatingSource"))
        .set_is_provided(True)
        .build()
    )
    dashed_body = node.body.replace(
        '<TD PORT="H"', '<TD STYLE="dashed" PORT="H"'
    )
    assert dashed_body != node.body
    assert render_node(node) == (
        f'"n2" [label=<{dashed_body}>, shape="plaintext", margin=0];'
    )


def test_table_node_not_provided_keeps_body():
    node = (
        ComponentNodeBuilder("n3", TypeRef("org.example.ItemScorer"))
        .add_dependency(TypeRef("org.example.RatingSource"))
        .build()
    )
    assert render_node(node) == (
        f'"n3" [label=<{node.body}>, shape="plaintext", margin=0];'
    )
    assert 'STYLE="dashed"' not in render_node(node)


def test_edge_from_dependency_port_to_header():
    source = ComponentNodeBuilder("a", TypeRef("org.example.ItemScorer"))
    source.add_dependency(TypeRef("org.example.RatingSource"))
    source.add_dependency(TypeRef("org.example.Baseline"))

    assert render_edge("a", "b", source.last_dependency_port(), "H") == '"a":"2" -> "b":"H";'
    assert render_edge("a", "b") == '"a" -> "b";'


def test_endpoint_quotes_ids():
    assert edge_endpoint('x"y') == '"x\\"y"'
    assert edge_endpoint("n1", 3) == '"n1":"3"'
