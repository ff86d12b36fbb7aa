from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from .builder import ClassBuilder
from .method import MethodBuilder, Visibility
from .types import ClassSpec, MethodSpec, PropertySpec, mk_field_comment, mk_method_comment

logger = logging.getLogger(__name__)


def _require_str(data: Dict[str, Any], key: str, where: str) -> str:
    value: Any = data.get(key)
    if not isinstance(value, str) or not value:
        raise ValueError(f"{where}: '{key}' missing or not a string")
    return value


def _optional_list(data: Dict[str, Any], key: str, where: str) -> List[Any]:
    value: Any = data.get(key, [])
    if not isinstance(value, list):
        raise ValueError(f"{where}: '{key}' must be a list")
    return value


def _optional_str(data: Dict[str, Any], key: str, where: str) -> None:
    if key in data and not isinstance(data[key], str):
        raise ValueError(f"{where}: '{key}' must be a string")


def _optional_indent(data: Dict[str, Any], where: str) -> None:
    value: Any = data.get("indent", 0)
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{where}: 'indent' must be a non-negative integer")


def _optional_visibility(data: Dict[str, Any], where: str) -> str:
    raw: Any = data.get("visibility", "public")
    if not isinstance(raw, str) or Visibility.parse(raw) is None:
        raise ValueError(f"{where}: unknown visibility {raw!r}")
    return raw


def _validate_method(ms: Dict[str, Any], where: str) -> None:
    _require_str(ms, "name", where)
    _optional_visibility(ms, where)
    _optional_indent(ms, where)
    for key in ("description", "returns"):
        _optional_str(ms, key, where)
    for i, ps in enumerate(_optional_list(ms, "params", where)):
        if not isinstance(ps, dict):
            raise ValueError(f"{where}.params[{i}]: must be an object")
        _require_str(ps, "name", f"{where}.params[{i}]")
        for key in ("type", "description"):
            _optional_str(ps, key, f"{where}.params[{i}]")
    body = _optional_list(ms, "body", where)
    if not all(isinstance(ln, str) for ln in body):
        raise ValueError(f"{where}: body must be a list of strings")


def validate_spec(data: Any) -> ClassSpec:
    if not isinstance(data, dict):
        raise ValueError("class description must be an object")
    _require_str(data, "name", "class")
    for key in ("namespace", "extends", "class_name"):
        _optional_str(data, key, "class")
    _optional_indent(data, "class")
    implements = _optional_list(data, "implements", "class")
    if not all(isinstance(i, str) for i in implements):
        raise ValueError("class: implements must be a list of strings")
    for i, imp in enumerate(_optional_list(data, "imports", "class")):
        if not isinstance(imp, dict):
            raise ValueError(f"imports[{i}]: must be an object")
        _require_str(imp, "name", f"imports[{i}]")
        _optional_str(imp, "alias", f"imports[{i}]")
    for i, cs in enumerate(_optional_list(data, "constants", "class")):
        if not isinstance(cs, dict) or "value" not in cs:
            raise ValueError(f"constants[{i}]: needs 'name' and 'value'")
        _require_str(cs, "name", f"constants[{i}]")
    for i, ps in enumerate(_optional_list(data, "properties", "class")):
        if not isinstance(ps, dict):
            raise ValueError(f"properties[{i}]: must be an object")
        _require_str(ps, "name", f"properties[{i}]")
        _optional_visibility(ps, f"properties[{i}]")
        if "comment" in ps:
            comment: Any = ps["comment"]
            if not isinstance(comment, dict):
                raise ValueError(f"properties[{i}]: comment must be an object")
            _require_str(comment, "description", f"properties[{i}].comment")
            _optional_str(comment, "type", f"properties[{i}].comment")
    for i, ms in enumerate(_optional_list(data, "methods", "class")):
        if not isinstance(ms, dict):
            raise ValueError(f"methods[{i}]: must be an object")
        _validate_method(ms, f"methods[{i}]")
    return data  # type: ignore[return-value]


def _wants_doc(ms: MethodSpec) -> bool:
    return bool(ms.get("description") or ms.get("returns") or any("type" in p for p in ms.get("params", [])))


def spec_to_method(ms: MethodSpec) -> MethodBuilder:
    method = MethodBuilder(ms["name"]).set_visibility(ms.get("visibility", "public"))
    if ms.get("static"):
        method.set_static()
    if ms.get("abstract"):
        method.set_abstract()
    method.set_indentation(ms.get("indent", 1))
    for ps in ms.get("params", []):
        method.add_param(ps["name"], ps.get("default"), ps.get("type"))
    for ln in ms.get("body", []):
        method.add_raw_line(ln)
    return method


def _add_property(builder: ClassBuilder, ps: PropertySpec) -> None:
    if "comment" in ps:
        builder.add_comment(mk_field_comment(ps["comment"]))
    builder.add_variable(
        ps["name"],
        ps.get("visibility", "public"),
        ps.get("value"),
        bool(ps.get("static", False)),
    )


def dict_to_builder(data: Dict[str, Any]) -> ClassBuilder:
    """Drive a ``ClassBuilder`` from a JSON-style class description."""
    spec = validate_spec(data)
    builder = ClassBuilder(spec["name"]).set_indentation(spec.get("indent", 1))
    if "class_name" in spec:
        builder.set_class_name(spec["class_name"])
    if "namespace" in spec:
        builder.set_namespace(spec["namespace"])
    if spec.get("abstract"):
        builder.set_abstract()
    if "extends" in spec:
        builder.set_parent(spec["extends"])
    if spec.get("implements"):
        builder.implement(spec["implements"])
    for imp in spec.get("imports", []):
        builder.add_import(imp["name"], imp.get("alias"))

    # Sections are separated by a single blank line.
    sections = 0
    constants = spec.get("constants", [])
    if constants:
        for cs in constants:
            builder.add_constant(cs["name"], cs["value"])
        sections += 1

    for i, ps in enumerate(spec.get("properties", [])):
        if i == 0 and sections:
            builder.add_blank_lines()
        elif i > 0 and "comment" in ps:
            builder.add_blank_lines()
        _add_property(builder, ps)
    if spec.get("properties"):
        sections += 1

    for i, ms in enumerate(spec.get("methods", [])):
        if i > 0 or sections:
            builder.add_blank_lines()
        if _wants_doc(ms):
            builder.add_comment(mk_method_comment(ms))
        builder.add_method(spec_to_method(ms))

    logger.debug("Built class %s from description", builder.class_name)
    return builder


def load_spec(path: str | Path) -> ClassBuilder:
    raw: Any = json.loads(Path(path).read_text(encoding="utf-8"))
    return dict_to_builder(raw)
