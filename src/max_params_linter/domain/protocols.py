from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional, Protocol

if TYPE_CHECKING:
    from max_params_linter.domain.entities import FunctionLikeNode, SourcePosition
    from max_params_linter.domain.rules import Diagnostic


class SourceTextProtocol(Protocol):
    """Read-only access to the text a tree was parsed from."""

    def position_at(self, offset: int) -> "SourcePosition":
        """Convert a character offset into a line/column position."""
        ...

    def find_token_after(self, token: str, start: int, end: Optional[int] = None) -> Optional[int]:
        """Offset of the first `token` in [start, end), skipping comments and strings."""
        ...

    def find_token_before(self, token: str, start: int, end: int) -> Optional[int]:
        """Offset of the last `token` in [start, end), skipping comments and strings."""
        ...


class ReporterProtocol(Protocol):
    """Host-side diagnostic collector."""

    def report(self, diagnostic: "Diagnostic") -> None:
        ...


class TreeGatewayProtocol(Protocol):
    """Translates host syntax tree nodes into domain value objects."""

    def to_function_like(
        self, node: Mapping[str, Any], parent: Optional[Mapping[str, Any]] = None
    ) -> "FunctionLikeNode":
        ...
