"""ESTree gateway: load, walk and translate raw ESTree mappings into domain value objects."""

import json
import math
from collections.abc import Iterator, Mapping
from decimal import Decimal
from pathlib import Path
from typing import Any, Optional

from max_params_linter.domain.constants import MEMBER_PARENT_TYPES
from max_params_linter.domain.entities import (
    FunctionKind,
    FunctionLikeNode,
    MemberOwner,
    ParameterNode,
)
from max_params_linter.domain.exceptions import InvalidTreeError
from max_params_linter.domain.protocols import TreeGatewayProtocol

EstreeNode = Mapping[str, Any]

# Keys that never hold child nodes (or would loop back up the tree).
_NON_CHILD_KEYS = frozenset({"parent", "range", "loc", "tokens", "comments", "type"})


class EstreeGateway(TreeGatewayProtocol):
    """
    Reads trees produced by typescript-estree (with `range: true`).

    Infrastructure only: the domain consumes FunctionLikeNode and never the
    raw mappings.
    """

    @staticmethod
    def load(path: str | Path) -> EstreeNode:
        """Load a JSON-serialised ESTree program from disk."""
        try:
            with Path(path).open(encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as exc:
            raise InvalidTreeError(f"{path}: not valid JSON ({exc})") from exc
        if not EstreeGateway.is_node(data):
            raise InvalidTreeError(f"{path}: root is not an ESTree node")
        return data

    @staticmethod
    def is_node(value: object) -> bool:
        return isinstance(value, Mapping) and isinstance(value.get("type"), str)

    @staticmethod
    def node_range(node: EstreeNode) -> tuple[int, int]:
        raw = node.get("range")
        if (
            not isinstance(raw, (list, tuple))
            or len(raw) != 2
            or not all(isinstance(x, int) for x in raw)
        ):
            raise InvalidTreeError(f"{node.get('type')} node has no usable 'range'")
        return (raw[0], raw[1])

    @classmethod
    def children(cls, node: EstreeNode) -> list[EstreeNode]:
        """Direct child nodes in source order."""
        found: list[EstreeNode] = []
        for key, value in node.items():
            if key in _NON_CHILD_KEYS:
                continue
            if cls.is_node(value):
                found.append(value)
            elif isinstance(value, list):
                found.extend(item for item in value if cls.is_node(item))
        found.sort(key=lambda child: cls.node_range(child)[0])
        return found

    @classmethod
    def walk(
        cls, node: EstreeNode, parent: Optional[EstreeNode] = None
    ) -> Iterator[tuple[EstreeNode, Optional[EstreeNode]]]:
        """Pre-order traversal yielding (node, parent) in document order."""
        stack: list[tuple[EstreeNode, Optional[EstreeNode]]] = [(node, parent)]
        while stack:
            current, current_parent = stack.pop()
            yield current, current_parent
            for child in reversed(cls.children(current)):
                stack.append((child, current))

    @staticmethod
    def _js_string(value: object) -> str | None:
        """String form of a literal key as JS would print it."""
        if value is None:
            return "null"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            if math.isnan(value):
                return "NaN"
            if math.isinf(value):
                return "Infinity" if value > 0 else "-Infinity"
            if value.is_integer() and abs(value) < 1e21:
                return str(int(value))
            text = repr(value)
            if "e" not in text:
                return text
            if 1e-6 <= abs(value) < 1e21:
                return format(Decimal(text), "f")
            mantissa, exponent = text.split("e")
            power = int(exponent)
            return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"
        if isinstance(value, str):
            return value
        return None

    @classmethod
    def static_property_name(cls, owner: EstreeNode) -> str | None:
        """Key name of a property/member when it is known without evaluation."""
        key = owner.get("key")
        if not cls.is_node(key):
            return None
        key_type = key["type"]
        computed = bool(owner.get("computed"))
        if key_type == "Identifier" and not computed:
            return str(key.get("name"))
        if key_type == "Literal":
            if "regex" in key:
                pattern = key["regex"]
                return f"/{pattern.get('pattern', '')}/{pattern.get('flags', '')}"
            if "bigint" in key:
                return str(key["bigint"])
            return cls._js_string(key.get("value"))
        if key_type == "TemplateLiteral" and not key.get("expressions"):
            quasis = key.get("quasis") or []
            if len(quasis) == 1:
                return str(quasis[0].get("value", {}).get("cooked", ""))
        return None

    @classmethod
    def to_parameter(cls, node: EstreeNode) -> ParameterNode:
        name: str | None = None
        annotation_type: str | None = None
        if node["type"] == "Identifier":
            name = node.get("name")
            annotation = node.get("typeAnnotation")
            if cls.is_node(annotation):
                inner = annotation.get("typeAnnotation")
                if cls.is_node(inner):
                    annotation_type = inner["type"]
        return ParameterNode(
            node_type=node["type"],
            range=cls.node_range(node),
            name=name,
            annotation_type=annotation_type,
        )

    @classmethod
    def to_owner(cls, node: EstreeNode, parent: Optional[EstreeNode]) -> MemberOwner | None:
        """Member owner when the function is the value of a property or class member."""
        if parent is None or parent.get("type") not in MEMBER_PARENT_TYPES:
            return None
        if parent.get("value") is not node:
            return None
        key = parent.get("key")
        computed = bool(parent.get("computed"))
        private_name: str | None = None
        if not computed and cls.is_node(key) and key["type"] == "PrivateIdentifier":
            private_name = str(key.get("name"))
        return MemberOwner(
            node_type=parent["type"],
            range=cls.node_range(parent),
            kind=parent.get("kind"),
            static=bool(parent.get("static")),
            private_name=private_name,
            static_key_name=None if private_name else cls.static_property_name(parent),
        )

    @classmethod
    def _optional_range(cls, node: EstreeNode, key: str) -> tuple[int, int] | None:
        value = node.get(key)
        return cls.node_range(value) if cls.is_node(value) else None

    @classmethod
    def to_function_like(
        cls, node: EstreeNode, parent: Optional[EstreeNode] = None
    ) -> FunctionLikeNode:
        """Translate a function-like ESTree node. Raises InvalidTreeError otherwise."""
        if not cls.is_node(node):
            raise InvalidTreeError(f"Not an ESTree node: {node!r}")
        kind = FunctionKind.from_type(node["type"])
        if kind is None:
            raise InvalidTreeError(f"{node['type']} is not a function-like node")
        ident = node.get("id")
        has_id = cls.is_node(ident)
        return FunctionLikeNode(
            kind=kind,
            range=cls.node_range(node),
            params=tuple(cls.to_parameter(p) for p in node.get("params") or [] if cls.is_node(p)),
            id_name=ident.get("name") if has_id else None,
            id_range=cls.node_range(ident) if has_id else None,
            type_parameters_range=cls._optional_range(node, "typeParameters"),
            return_type_range=cls._optional_range(node, "returnType"),
            body_range=cls._optional_range(node, "body"),
            is_async=bool(node.get("async")),
            is_generator=bool(node.get("generator")),
            owner=cls.to_owner(node, parent),
        )
