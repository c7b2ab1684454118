# recgraph/graph/render_dot.py
"""
Graphviz DOT statements for component nodes.

Only single statements are produced here; assembling them into a digraph
and running a layout engine is up to the caller.

Docs: https://graphviz.org/doc/info/shapes.html#html
"""

from typing import Any, Optional

from recgraph.graph.node_builder import HEADER_PORT, LabelDescriptor


def _quote(value: str) -> str:
    """Make a string safe as a double-quoted DOT ID"""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _dash_header(body: str) -> str:
    """Dash the header cell border of a table label"""
    header = f'<TD PORT="{HEADER_PORT}"'
    return body.replace(header, f'<TD STYLE="dashed" PORT="{HEADER_PORT}"', 1)


def _format_attr(desc: LabelDescriptor, key: str, value: Any) -> str:
    if key == "label" and desc.is_table:
        if desc.dashed:
            value = _dash_header(value)
        # HTML-like labels are delimited by <...> instead of quotes
        return f"<{value}>"
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return _quote(str(value))


def render_node(desc: LabelDescriptor) -> str:
    """
    Render a LabelDescriptor as a DOT node statement.

    Returns:
        e.g. `"c3" [label="Foo", shape="box", fillcolor="white", style="filled"];`
    """
    attrs = ", ".join(
        f"{key}={_format_attr(desc, key, value)}"
        for key, value in desc.attributes().items()
    )
    return f"{_quote(desc.node_id)} [{attrs}];"


def edge_endpoint(node_id: str, port: Optional[Any] = None) -> str:
    if port is None:
        return _quote(node_id)
    return f"{_quote(node_id)}:{_quote(str(port))}"


def render_edge(
    source: str,
    target: str,
    source_port: Optional[Any] = None,
    target_port: Optional[Any] = None,
) -> str:
    """Render an edge, e.g. from a dependency row to another node's header"""
    return (
        f"{edge_endpoint(source, source_port)} -> "
        f"{edge_endpoint(target, target_port)};"
    )
