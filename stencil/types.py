from __future__ import annotations

from typing import Any, NotRequired, TypedDict

from .comment import DocComment


class CommentSpec(TypedDict):
    description: str
    type: NotRequired[str]


class ImportSpec(TypedDict):
    name: str
    alias: NotRequired[str]


class ConstantSpec(TypedDict):
    name: str
    value: Any


class PropertySpec(TypedDict):
    name: str
    visibility: NotRequired[str]
    value: NotRequired[Any]
    static: NotRequired[bool]
    comment: NotRequired[CommentSpec]


class ParamSpec(TypedDict):
    name: str
    type: NotRequired[str]
    default: NotRequired[Any]
    description: NotRequired[str]


class MethodSpec(TypedDict):
    name: str
    visibility: NotRequired[str]
    static: NotRequired[bool]
    abstract: NotRequired[bool]
    description: NotRequired[str]
    params: NotRequired[list[ParamSpec]]
    returns: NotRequired[str]
    indent: NotRequired[int]
    body: NotRequired[list[str]]


class ClassSpec(TypedDict):
    name: str
    class_name: NotRequired[str]
    namespace: NotRequired[str]
    abstract: NotRequired[bool]
    extends: NotRequired[str]
    implements: NotRequired[list[str]]
    imports: NotRequired[list[ImportSpec]]
    indent: NotRequired[int]
    constants: NotRequired[list[ConstantSpec]]
    properties: NotRequired[list[PropertySpec]]
    methods: NotRequired[list[MethodSpec]]


def mk_field_comment(cs: CommentSpec) -> DocComment:
    return DocComment.for_field(cs.get("type", "mixed"), cs["description"])


def mk_method_comment(ms: MethodSpec) -> DocComment:
    doc = DocComment.for_method(ms.get("description", ""))
    for ps in ms.get("params", []):
        doc.add_parameter(ps["name"], ps.get("type", "mixed"), ps.get("description"))
    return doc.set_return_type(ms.get("returns", "void"))
