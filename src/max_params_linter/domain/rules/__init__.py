"""Domain models for rules and diagnostics."""

from dataclasses import dataclass, field

__all__ = [
    "Checkable",
    "Diagnostic",
]

from typing import Protocol

from max_params_linter.domain.entities import FunctionLikeNode, SourceLocation
from max_params_linter.domain.protocols import SourceTextProtocol
from max_params_linter.domain.registry_types import MessageData


@dataclass(frozen=True)
class Diagnostic:
    """
    A report handed to the host collector.

    Never retained or mutated by the rule after it is emitted.
    """

    rule_id: str
    message_id: str
    message: str
    loc: SourceLocation
    node_range: tuple[int, int]
    data: MessageData = field(default_factory=lambda: MessageData(name="", count=0, max=0))

    @property
    def line(self) -> int:
        return self.loc.start.line

    @property
    def column(self) -> int:
        return self.loc.start.column

    def format(self) -> str:
        """Return `line:column  message  rule-id`."""
        return f"{self.line}:{self.column}  {self.message}  {self.rule_id}"


class Checkable(Protocol):
    """One-and-done check: given a node, return diagnostics."""

    code: str
    description: str

    def check(self, node: FunctionLikeNode, source: SourceTextProtocol) -> list[Diagnostic]:
        """Evaluate a single node. No state carries across calls."""
        ...
