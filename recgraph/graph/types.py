import inspect
from dataclasses import dataclass, fields, is_dataclass
from typing import Protocol


@dataclass(frozen=True)
class TypeRef:
    name: str                   # fully qualified, dot separated
    is_interface: bool = False  # abstract class or protocol

    @classmethod
    def of(cls, klass: type) -> "TypeRef":
        return cls(
            name=f"{klass.__module__}.{klass.__qualname__}",
            is_interface=_is_interface(klass),
        )


def _is_interface(klass: type) -> bool:
    if inspect.isabstract(klass):
        return True
    return bool(getattr(klass, "_is_protocol", False)) and klass is not Protocol


class Qualifier:
    """
    Base class for binding qualifiers.

    Subclasses are frozen dataclasses. The string form mirrors an annotation:
    `@<module>.<QualName>(<field>=<repr>, ...)`, with empty parentheses when
    the qualifier has no fields.
    """

    def __str__(self) -> str:
        klass = type(self)
        members = ""
        if is_dataclass(self):
            members = ", ".join(
                f"{f.name}={getattr(self, f.name)!r}" for f in fields(self)
            )
        return f"@{klass.__module__}.{klass.__qualname__}({members})"


@dataclass
class ComponentDescriptor:
    identifier: str             # addressing key, never displayed
    type: TypeRef
    is_shareable: bool = False
    is_shared: bool = False     # only meaningful when shareable
    is_provider: bool = False
    is_provided: bool = False
