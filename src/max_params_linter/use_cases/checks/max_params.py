"""Max params check: host-facing visitor for every function-like node type."""

from typing import Any, Mapping, Optional

from max_params_linter.domain.config import RuleOptions
from max_params_linter.domain.protocols import (
    ReporterProtocol,
    SourceTextProtocol,
    TreeGatewayProtocol,
)
from max_params_linter.domain.rules.max_params import MaxParamsRule


class MaxParamsChecker:
    """
    Thin visitor: translates the node and delegates to MaxParamsRule.

    Options are resolved once by the caller and fixed for the run; the source
    accessor is replaced per file through open().
    """

    name: str = "max-params"

    def __init__(
        self,
        reporter: ReporterProtocol,
        options: RuleOptions,
        gateway: TreeGatewayProtocol,
    ) -> None:
        self.reporter = reporter
        self._rule = MaxParamsRule(options)
        self._gateway = gateway
        self._source: Optional[SourceTextProtocol] = None

    @property
    def rule(self) -> MaxParamsRule:
        return self._rule

    def open(self, source: SourceTextProtocol) -> None:
        """Start a new file."""
        self._source = source

    def close(self) -> None:
        """Finish the current file."""
        self._source = None

    def visit_function(self, node: Mapping[str, Any], parent: Optional[Mapping[str, Any]] = None) -> None:
        if self._source is None:
            raise RuntimeError("MaxParamsChecker.open() must be called before visiting nodes")
        function = self._gateway.to_function_like(node, parent)
        for diagnostic in self._rule.check(function, self._source):
            self.reporter.report(diagnostic)

    visit_functiondeclaration = visit_function
    visit_functionexpression = visit_function
    visit_arrowfunctionexpression = visit_function
    visit_tsdeclarefunction = visit_function
    visit_tsfunctiontype = visit_function
