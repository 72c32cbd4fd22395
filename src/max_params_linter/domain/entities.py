"""
Immutable value objects describing the parts of a syntax tree the rule reads.

Infrastructure (EstreeGateway) builds these from raw ESTree mappings; the
domain never sees the raw tree.
"""

from dataclasses import dataclass
from enum import Enum

from max_params_linter.domain.constants import CLASS_MEMBER_TYPES


class FunctionKind(Enum):
    """Closed set of function-like node variants. Values are ESTree type names."""
    DECLARATION = "FunctionDeclaration"
    EXPRESSION = "FunctionExpression"
    ARROW = "ArrowFunctionExpression"
    DECLARE = "TSDeclareFunction"
    FUNCTION_TYPE = "TSFunctionType"

    @classmethod
    def from_type(cls, node_type: str) -> "FunctionKind | None":
        """Return the variant for an ESTree type name, or None when not function-like."""
        for kind in cls:
            if kind.value == node_type:
                return kind
        return None


@dataclass(frozen=True)
class SourcePosition:
    """Line is 1-based, column is 0-based."""
    line: int
    column: int


@dataclass(frozen=True)
class SourceLocation:
    start: SourcePosition
    end: SourcePosition


@dataclass(frozen=True)
class ParameterNode:
    """
    One entry of a parameter list.

    `name` is only set for simple identifier parameters. `annotation_type` is
    the ESTree type of the annotated type (e.g. "TSVoidKeyword"), if any.
    """
    node_type: str
    range: tuple[int, int]
    name: str | None = None
    annotation_type: str | None = None

    @property
    def is_identifier(self) -> bool:
        return self.node_type == "Identifier"


@dataclass(frozen=True)
class MemberOwner:
    """The object property or class member a function is the value of."""
    node_type: str
    range: tuple[int, int]
    kind: str | None = None
    static: bool = False
    private_name: str | None = None
    """Set when the key is a non-computed PrivateIdentifier (without '#')."""
    static_key_name: str | None = None
    """Statically known key name, None when it cannot be determined."""

    @property
    def is_class_member(self) -> bool:
        return self.node_type in CLASS_MEMBER_TYPES


@dataclass(frozen=True)
class FunctionLikeNode:
    """A function declaration, expression, arrow, or type-only signature."""
    kind: FunctionKind
    range: tuple[int, int]
    params: tuple[ParameterNode, ...]
    id_name: str | None = None
    id_range: tuple[int, int] | None = None
    type_parameters_range: tuple[int, int] | None = None
    return_type_range: tuple[int, int] | None = None
    body_range: tuple[int, int] | None = None
    is_async: bool = False
    is_generator: bool = False
    owner: MemberOwner | None = None
