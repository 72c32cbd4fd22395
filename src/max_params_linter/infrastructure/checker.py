"""
Composition root: resolves options once, wires the checker and drives it over
ESTree programs. Lives in infrastructure as it creates the gateways.
"""

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from max_params_linter.domain.config import ConfigurationLoader
from max_params_linter.domain.protocols import ReporterProtocol
from max_params_linter.domain.rules import Diagnostic
from max_params_linter.infrastructure.config_file_loader import ConfigFileLoader
from max_params_linter.infrastructure.gateways.estree_gateway import EstreeGateway
from max_params_linter.infrastructure.source_text import SourceText
from max_params_linter.use_cases.checks.max_params import MaxParamsChecker

_UNSET: Any = object()


class CollectingReporter(ReporterProtocol):
    """Keeps diagnostics in the order they were reported."""

    def __init__(self) -> None:
        self.diagnostics: list[Diagnostic] = []

    def report(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def reset(self) -> list[Diagnostic]:
        """Return collected diagnostics and start over."""
        collected, self.diagnostics = self.diagnostics, []
        return collected


def build_checker(
    reporter: ReporterProtocol,
    raw_option: object = _UNSET,
    config_start: Path | None = None,
) -> MaxParamsChecker:
    """
    Build a checker with options resolved once for the run.

    Without raw_option the nearest pyproject.toml is consulted. Raises
    InvalidOptionsError for values that do not match the option schema.
    """
    if raw_option is _UNSET:
        raw_option = ConfigFileLoader.load_config_from_fs(config_start)
    options = ConfigurationLoader(raw_option).options
    logging.debug(
        "max-params: max_params=%d count_void_this=%s",
        options.max_params,
        options.count_void_this,
    )
    return MaxParamsChecker(reporter, options=options, gateway=EstreeGateway())


class EstreeLinter:
    """Walks ESTree programs and dispatches visit_<type> callbacks to checkers."""

    def __init__(self, checkers: Iterable[Any]) -> None:
        self._checkers = list(checkers)

    def check_program(self, program: Mapping[str, Any], source: str | SourceText) -> None:
        """Visit every node of program in document order."""
        text = source if isinstance(source, SourceText) else SourceText(source)
        for checker in self._checkers:
            checker.open(text)
        try:
            for node, parent in EstreeGateway.walk(program):
                callback_name = f"visit_{str(node['type']).lower()}"
                for checker in self._checkers:
                    callback = getattr(checker, callback_name, None)
                    if callback is not None:
                        callback(node, parent)
        finally:
            for checker in self._checkers:
                checker.close()


def lint_program(
    program: Mapping[str, Any],
    source: str,
    raw_option: object = None,
) -> list[Diagnostic]:
    """Run max-params over one program and return its diagnostics in visit order."""
    reporter = CollectingReporter()
    checker = build_checker(reporter, raw_option=raw_option)
    EstreeLinter([checker]).check_program(program, source)
    return reporter.diagnostics


def lint_file(tree_path: str | Path, source_path: str | Path, raw_option: object = _UNSET) -> list[Diagnostic]:
    """Run max-params over a JSON ESTree dump and the source it was parsed from."""
    program = EstreeGateway.load(tree_path)
    source = Path(source_path).read_text(encoding="utf-8")
    reporter = CollectingReporter()
    checker = build_checker(reporter, raw_option=raw_option, config_start=Path(source_path).parent)
    EstreeLinter([checker]).check_program(program, source)
    return reporter.diagnostics
