# recgraph/graph/node_builder.py
"""
Component node labels.

A ComponentNodeBuilder collects what is known about one component of a
dependency-injection graph (its dependencies, configured parameters and
sharing flags) and builds a LabelDescriptor that Graphviz can draw:

- no dependencies and no parameters -> a filled box with the type name
- otherwise -> an HTML-like table with a header cell (port "H") and one
  row per dependency (ports "1".."N") and per parameter (no port)

Edges into a table node should target `<node_id>:H`; edges out of a
dependency row use `<node_id>:<port>`.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from recgraph.graph.errors import InvalidStateError
from recgraph.graph.names import (
    TypeLike,
    abbreviate_annotation,
    abbreviate_type,
    escape_markup,
    render_value,
)
from recgraph.graph.types import ComponentDescriptor, TypeRef


SHAREABLE_COLOR = "#73d216"
UNSHARED_COLOR = "#cc0000"
NEUTRAL_COLOR = "white"

SIMPLE_BOX = "box"
TABLE = "plaintext"

HEADER_PORT = "H"


@dataclass(frozen=True)
class DependencyEntry:
    type_label: str
    qualifier_label: Optional[str] = None

    @property
    def label(self) -> str:
        if self.qualifier_label is None:
            return self.type_label
        return f"{self.qualifier_label}: {self.type_label}"


@dataclass(frozen=True)
class ParameterEntry:
    qualifier_label: str
    rendered_value: str

    @property
    def label(self) -> str:
        return f"{self.qualifier_label}: {self.rendered_value}"


@dataclass(frozen=True)
class LabelDescriptor:
    node_id: str
    shape: str                          # SIMPLE_BOX | TABLE
    fill_color: str
    dashed: bool                        # provided by a provider
    body: str                           # caption, or table markup
    anchor_port: Optional[str] = None   # table nodes only

    @property
    def is_table(self) -> bool:
        return self.shape == TABLE

    @property
    def target(self) -> str:
        """Endpoint other nodes should point their edges at."""
        if self.anchor_port is None:
            return self.node_id
        return f"{self.node_id}:{self.anchor_port}"

    def attributes(self) -> Dict[str, Any]:
        """
        Graphviz node attributes, in emission order.

        A plaintext node has no outline to dash, so `dashed` is not an
        attribute for tables; render_dot marks the header cell instead.
        """
        if not self.is_table:
            styles = ["filled"]
            if self.dashed:
                styles.append("dashed")
            return {
                "label": self.body,
                "shape": self.shape,
                "fillcolor": self.fill_color,
                "style": ",".join(styles),
            }

        return {
            "label": self.body,
            "shape": self.shape,
            "margin": 0,
        }


class ComponentNodeBuilder:
    """
    Build the label of a single component node.

    Usage:
        builder = ComponentNodeBuilder("c12", TypeRef.of(ItemScorer))
        builder.add_dependency(TypeRef.of(RatingSource))
        port = builder.last_dependency_port()
        node = builder.set_shareable(True).set_shared(True).build()
    """

    def __init__(self, identifier: str, type_ref: TypeLike):
        self._node_id = identifier
        self._label = abbreviate_type(type_ref)
        if isinstance(type_ref, type):
            type_ref = TypeRef.of(type_ref)
        self._is_interface = isinstance(type_ref, TypeRef) and type_ref.is_interface

        self._dependencies: List[DependencyEntry] = []
        self._parameters: List[ParameterEntry] = []

        self._shareable = False
        self._is_shared = False
        self._is_provider = False
        self._is_provided = False

    @classmethod
    def from_descriptor(cls, desc: ComponentDescriptor) -> "ComponentNodeBuilder":
        return (
            cls(desc.identifier, desc.type)
            .set_shareable(desc.is_shareable)
            .set_shared(desc.is_shared)
            .set_is_provider(desc.is_provider)
            .set_is_provided(desc.is_provided)
        )

    # -------------------------
    # Accumulation
    # -------------------------

    def add_dependency(
        self, desired_type: TypeLike, qualifier: Any = None
    ) -> "ComponentNodeBuilder":
        """
        Add a dependency row. Its port is the new dependency count.

        Args:
            desired_type: the type the component asks for
            qualifier: optional qualifier on the injection point
        """
        qualifier_label = None
        if qualifier is not None:
            qualifier_label = abbreviate_annotation(qualifier)
        self._dependencies.append(
            DependencyEntry(abbreviate_type(desired_type), qualifier_label)
        )
        return self

    def add_parameter(self, qualifier: Any, value: Any) -> "ComponentNodeBuilder":
        self._parameters.append(
            ParameterEntry(abbreviate_annotation(qualifier), render_value(value))
        )
        return self

    def last_dependency_port(self) -> int:
        """Port of the most recently added dependency (1-based)."""
        if not self._dependencies:
            raise InvalidStateError("dependency list is empty")
        return len(self._dependencies)

    def set_shareable(self, yn: bool) -> "ComponentNodeBuilder":
        self._shareable = yn
        return self

    def set_shared(self, yn: bool) -> "ComponentNodeBuilder":
        self._is_shared = yn
        return self

    def set_is_provider(self, yn: bool) -> "ComponentNodeBuilder":
        self._is_provider = yn
        return self

    def set_is_provided(self, yn: bool) -> "ComponentNodeBuilder":
        self._is_provided = yn
        return self

    @property
    def node_id(self) -> str:
        return self._node_id

    @property
    def is_interface(self) -> bool:
        return self._is_interface

    @property
    def is_provider(self) -> bool:
        return self._is_provider

    @property
    def dependencies(self) -> List[DependencyEntry]:
        return list(self._dependencies)

    @property
    def parameters(self) -> List[ParameterEntry]:
        return list(self._parameters)

    # -------------------------
    # Build
    # -------------------------

    def fill_color(self) -> str:
        if not self._shareable:
            return NEUTRAL_COLOR
        if self._is_shared:
            return SHAREABLE_COLOR
        return UNSHARED_COLOR

    def build(self) -> LabelDescriptor:
        fill = self.fill_color()

        if not self._dependencies and not self._parameters:
            return LabelDescriptor(
                node_id=self._node_id,
                shape=SIMPLE_BOX,
                fill_color=fill,
                dashed=self._is_provided,
                body=self._label,
            )

        return LabelDescriptor(
            node_id=self._node_id,
            shape=TABLE,
            fill_color=fill,
            dashed=self._is_provided,
            body=self._render_table(fill),
            anchor_port=HEADER_PORT,
        )

    def _render_table(self, fill: str) -> str:
        parts = ['<TABLE CELLSPACING="0" BORDER="0">']

        parts.append(
            f'<TR><TD PORT="{HEADER_PORT}" ALIGN="CENTER" BORDER="2"'
            f' BGCOLOR="{fill}">'
            f"<B>{escape_markup(self._label)}</B>"
            "</TD></TR>"
        )

        for port, dep in enumerate(self._dependencies, start=1):
            parts.append(
                f'<TR><TD BORDER="1" PORT="{port}" ALIGN="LEFT">'
                f"{escape_markup(dep.label)}"
                "</TD></TR>"
            )

        for param in self._parameters:
            parts.append(
                '<TR><TD BORDER="1" ALIGN="LEFT">'
                f"{escape_markup(param.label)}"
                "</TD></TR>"
            )

        parts.append("</TABLE>")
        return "".join(parts)
