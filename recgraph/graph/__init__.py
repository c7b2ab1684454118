"""
Component graph node labels.
"""

from recgraph.graph.errors import InvalidStateError, MalformedAnnotationFormat
from recgraph.graph.types import ComponentDescriptor, Qualifier, TypeRef
from recgraph.graph.names import (
    abbreviate_annotation,
    abbreviate_type,
    escape_markup,
    render_value,
)
from recgraph.graph.node_builder import (
    HEADER_PORT,
    NEUTRAL_COLOR,
    SHAREABLE_COLOR,
    SIMPLE_BOX,
    TABLE,
    UNSHARED_COLOR,
    ComponentNodeBuilder,
    DependencyEntry,
    LabelDescriptor,
    ParameterEntry,
)
from recgraph.graph.render_dot import edge_endpoint, render_edge, render_node


__all__ = [
    "InvalidStateError",
    "MalformedAnnotationFormat",
    "ComponentDescriptor",
    "Qualifier",
    "TypeRef",
    "abbreviate_annotation",
    "abbreviate_type",
    "escape_markup",
    "render_value",
    "HEADER_PORT",
    "NEUTRAL_COLOR",
    "SHAREABLE_COLOR",
    "SIMPLE_BOX",
    "TABLE",
    "UNSHARED_COLOR",
    "ComponentNodeBuilder",
    "DependencyEntry",
    "LabelDescriptor",
    "ParameterEntry",
    "edge_endpoint",
    "render_edge",
    "render_node",
]
