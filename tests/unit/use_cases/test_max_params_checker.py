"""Unit tests for MaxParamsChecker."""

import unittest
from unittest.mock import MagicMock

from max_params_linter.domain.config import RuleOptions
from max_params_linter.infrastructure.gateways.estree_gateway import EstreeGateway
from max_params_linter.infrastructure.source_text import SourceText
from max_params_linter.use_cases.checks.max_params import MaxParamsChecker
from tests.estree_builders import function


class TestMaxParamsChecker(unittest.TestCase):
    def setUp(self) -> None:
        self.reporter = MagicMock()
        self.checker = MaxParamsChecker(self.reporter, options=RuleOptions(max_params=2), gateway=EstreeGateway())

    def test_reports_each_diagnostic(self) -> None:
        code = "function test(a, b, c) {}"
        raw = function(code, "FunctionDeclaration", code, ["a", "b", "c"], name="test", body="{}")
        self.checker.open(SourceText(code))
        self.checker.visit_functiondeclaration(raw, None)
        self.reporter.report.assert_called_once()
        diagnostic = self.reporter.report.call_args[0][0]
        self.assertEqual(diagnostic.data, {"name": "Function 'test'", "count": 3, "max": 2})

    def test_does_not_report_within_limit(self) -> None:
        code = "function test(a, b) {}"
        raw = function(code, "FunctionDeclaration", code, ["a", "b"], name="test", body="{}")
        self.checker.open(SourceText(code))
        self.checker.visit_function(raw)
        self.reporter.report.assert_not_called()

    def test_all_function_like_callbacks_share_one_handler(self) -> None:
        for callback in (
            "visit_functiondeclaration",
            "visit_functionexpression",
            "visit_arrowfunctionexpression",
            "visit_tsdeclarefunction",
            "visit_tsfunctiontype",
        ):
            self.assertIs(getattr(MaxParamsChecker, callback), MaxParamsChecker.visit_function)

    def test_uses_injected_gateway(self) -> None:
        gateway = MagicMock()
        gateway.to_function_like.side_effect = EstreeGateway.to_function_like
        checker = MaxParamsChecker(self.reporter, options=RuleOptions(), gateway=gateway)
        code = "(a) => a"
        raw = function(code, "ArrowFunctionExpression", code, ["a"], body="a")
        checker.open(SourceText(code))
        checker.visit_arrowfunctionexpression(raw, None)
        gateway.to_function_like.assert_called_once_with(raw, None)

    def test_visit_before_open_raises(self) -> None:
        code = "function f() {}"
        raw = function(code, "FunctionDeclaration", code, name="f", body="{}")
        with self.assertRaises(RuntimeError):
            self.checker.visit_function(raw)

    def test_close_forgets_source(self) -> None:
        self.checker.open(SourceText(""))
        self.checker.close()
        with self.assertRaises(RuntimeError):
            self.checker.visit_function({})

    def test_rule_exposes_options(self) -> None:
        self.assertEqual(self.checker.rule.options.max_params, 2)
