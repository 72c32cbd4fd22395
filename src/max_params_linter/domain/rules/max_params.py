"""Max params rule: flag function-like nodes whose parameter list exceeds a maximum."""

import logging
from collections.abc import Sequence
from typing import ClassVar

from max_params_linter.domain.config import RuleOptions
from max_params_linter.domain.constants import (
    EXCEED_TEMPLATE,
    MESSAGE_ID_EXCEED,
    RECEIVER_IDENTIFIER,
    RULE_ID,
    VOID_TYPE,
)
from max_params_linter.domain.entities import FunctionLikeNode, ParameterNode
from max_params_linter.domain.protocols import SourceTextProtocol
from max_params_linter.domain.registry_types import MessageData, RuleMeta
from max_params_linter.domain.rule_msgs import RuleMsgBuilder
from max_params_linter.domain.rules import Checkable, Diagnostic
from max_params_linter.domain.services.function_naming import FunctionNamer
from max_params_linter.domain.services.head_location import FunctionHeadLocator

_COUNT_SCHEMA: dict[str, object] = {"type": "integer", "minimum": 0}


class MaxParamsRule(Checkable):
    """Enforce a maximum number of parameters in function definitions."""

    code: str = RULE_ID
    description: str = "Enforce a maximum number of parameters in function definitions"

    meta: ClassVar[RuleMeta] = {
        "type": "suggestion",
        "docs": {"description": description, "recommended": False},
        "schema": [
            {
                "oneOf": [
                    _COUNT_SCHEMA,
                    {
                        "type": "object",
                        "properties": {
                            "maximum": _COUNT_SCHEMA,
                            "max": _COUNT_SCHEMA,
                            "countVoidThis": {
                                "type": "boolean",
                                "description": "Whether to count a `this` declaration when the type is `void`.",
                            },
                        },
                        "additionalProperties": False,
                    },
                ]
            }
        ],
        "messages": {MESSAGE_ID_EXCEED: EXCEED_TEMPLATE},
    }

    def __init__(self, options: RuleOptions | None = None) -> None:
        self._options = options if options is not None else RuleOptions()

    @property
    def options(self) -> RuleOptions:
        return self._options

    @staticmethod
    def is_void_receiver(param: ParameterNode) -> bool:
        """True for a `this: void` parameter."""
        return (
            param.is_identifier
            and param.name == RECEIVER_IDENTIFIER
            and param.annotation_type == VOID_TYPE
        )

    @classmethod
    def without_void_this(cls, params: Sequence[ParameterNode]) -> Sequence[ParameterNode]:
        """Drop a leading `this: void` parameter. Only the first position is inspected."""
        if not params or not cls.is_void_receiver(params[0]):
            return params
        return params[1:]

    def effective_parameters(self, node: FunctionLikeNode) -> Sequence[ParameterNode]:
        """Parameters counted against the maximum; the node itself is never modified."""
        if self._options.count_void_this:
            return node.params
        return self.without_void_this(node.params)

    def check(self, node: FunctionLikeNode, source: SourceTextProtocol) -> list[Diagnostic]:
        """Return one `exceed` diagnostic when the effective count is over the maximum."""
        count = len(self.effective_parameters(node))
        maximum = self._options.max_params
        if count <= maximum:
            return []

        data = MessageData(name=FunctionNamer.display_name(node), count=count, max=maximum)
        diagnostic = Diagnostic(
            rule_id=self.code,
            message_id=MESSAGE_ID_EXCEED,
            message=RuleMsgBuilder.build_message(self.meta, MESSAGE_ID_EXCEED, data),
            loc=FunctionHeadLocator.locate(node, source),
            node_range=node.range,
            data=data,
        )
        logging.debug("%s: %s", self.code, diagnostic.message)
        return [diagnostic]
