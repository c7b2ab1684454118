# recgraph/graph/names.py
"""
Short, readable names for types and qualifiers.

Component graphs get wide quickly, so every type name is shortened before it
is put on a node: enclosing package segments collapse to their first letter
(`recgraph.svd.module.FeatureCount` -> `r.s.m.FeatureCount`) while the class
name and any nested class names stay whole.
"""

import html
import json
import re
from typing import Any, Union

from recgraph.graph.errors import MalformedAnnotationFormat
from recgraph.graph.types import TypeRef


SCALAR_BUILTINS = ["bool", "int", "float", "complex", "str", "bytes"]

# numpy scalar class names by the builtin they box. numpy names the same
# class differently across versions and platforms, so all spellings are kept.
NUMPY_SCALARS = {
    "bool": ["bool", "bool_", "bool8"],
    "int": [
        "byte", "ubyte", "short", "ushort", "intc", "uintc",
        "int_", "uint", "long", "ulong", "longlong", "ulonglong",
        "intp", "uintp",
        "int8", "int16", "int32", "int64",
        "uint8", "uint16", "uint32", "uint64",
    ],
    "float": [
        "half", "single", "double", "longdouble", "float_", "longfloat",
        "float16", "float32", "float64", "float96", "float128",
    ],
    "complex": [
        "csingle", "cdouble", "clongdouble", "complex_", "cfloat",
        "singlecomplex", "clongfloat", "longcomplex",
        "complex64", "complex128", "complex192", "complex256",
    ],
    "str": ["str_", "unicode_"],
    "bytes": ["bytes_", "string_"],
}

# Qualified name -> primitive kind, for builtins and their numpy boxes
PRIMITIVE_NAMES = {f"builtins.{name}": name for name in SCALAR_BUILTINS}
PRIMITIVE_NAMES.update({
    f"numpy.{numpy_name}": kind
    for kind, numpy_names in NUMPY_SCALARS.items()
    for numpy_name in numpy_names
})

CORE_NAMESPACE = "builtins"

# Matches the string form of a qualifier, e.g. `@pkg.mod.Name(k=1)`.
# The shape comes from Qualifier.__str__ and is not negotiable here.
ANNOTATION_RE = re.compile(r"@([^(]+)\((.*)\)")

TypeLike = Union[TypeRef, type, str]


def qualified_name(type_ref: TypeLike) -> str:
    if isinstance(type_ref, TypeRef):
        return type_ref.name
    if isinstance(type_ref, type):
        return f"{type_ref.__module__}.{type_ref.__qualname__}"
    return str(type_ref)


def abbreviate_type(type_ref: TypeLike) -> str:
    """
    Shorten a type name for display.

    - scalar builtins and their numpy counterparts -> `int`, `float`, ...
    - anything else in `builtins` -> its simple name
    - otherwise every segment before the first capitalised one is cut to its
      first character; the capitalised segment and what follows are kept
    """
    name = qualified_name(type_ref)

    # nested / generated names may carry a prefix, e.g. "class pkg.Foo"
    name = name.split(" ")[-1]

    if name in PRIMITIVE_NAMES:
        return PRIMITIVE_NAMES[name]

    path = name.split(".")
    if len(path) > 1 and path[0] == CORE_NAMESPACE:
        return path[-1]

    first_type = len(path) - 1
    for i, segment in enumerate(path):
        if segment[:1].isupper():
            first_type = i
            break

    short = [segment[:1] for segment in path[:first_type]]
    return ".".join(short + path[first_type:])


def abbreviate_annotation(annotation: Any) -> str:
    """
    Shorten a qualifier to `@ShortName` or `@ShortName(members)`.

    Members are copied as they appear in the qualifier's string form.
    Raises MalformedAnnotationFormat if that form is not `@Name(members)`.
    """
    match = ANNOTATION_RE.fullmatch(str(annotation))
    if not match:
        raise MalformedAnnotationFormat(
            f"invalid annotation string format: {annotation!s}"
        )

    if isinstance(annotation, str):
        annotation_type: TypeLike = match.group(1)
    else:
        annotation_type = type(annotation)

    short = "@" + abbreviate_type(annotation_type)
    members = match.group(2)
    if members:
        short += f"({members})"
    return short


def render_value(value: Any) -> str:
    """Strings become escaped double-quoted literals; the rest use str()."""
    if isinstance(value, str):
        return json.dumps(value)
    return str(value)


def escape_markup(text: str) -> str:
    return html.escape(text, quote=True)
