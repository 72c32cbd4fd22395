"""Location of a function's head: introducer and parameter-list opening, never the body."""

from max_params_linter.domain.entities import FunctionKind, FunctionLikeNode, SourceLocation
from max_params_linter.domain.protocols import SourceTextProtocol


class FunctionHeadLocator:
    """Derives the diagnostic span for a function-like node from the source text."""

    @staticmethod
    def _search_limit(node: FunctionLikeNode) -> int:
        if node.body_range is not None:
            return node.body_range[0]
        return node.range[1]

    @classmethod
    def opening_paren_offset(cls, node: FunctionLikeNode, source: SourceTextProtocol) -> int:
        """
        Offset of the `(` opening the parameter list.

        Searched after the id (or type parameters), else from the node start.
        A bare arrow parameter (`x => x`) has no paren; its start is used.
        """
        if node.type_parameters_range is not None:
            anchor = node.type_parameters_range[1]
        elif node.id_range is not None:
            anchor = node.id_range[1]
        else:
            anchor = node.range[0]
        found = source.find_token_after("(", anchor, cls._search_limit(node))
        if found is not None:
            return found
        if node.params:
            return node.params[0].range[0]
        return node.range[0]

    @classmethod
    def arrow_token_offset(cls, node: FunctionLikeNode, source: SourceTextProtocol) -> int | None:
        """Offset of the `=>` token preceding an arrow function's body."""
        anchor = node.range[0]
        if node.return_type_range is not None:
            anchor = node.return_type_range[1]
        elif node.params:
            anchor = node.params[-1].range[1]
        return source.find_token_before("=>", anchor, cls._search_limit(node))

    @classmethod
    def locate(cls, node: FunctionLikeNode, source: SourceTextProtocol) -> SourceLocation:
        owner = node.owner
        if owner is not None:
            start = owner.range[0]
            end = cls.opening_paren_offset(node, source)
        elif node.kind is FunctionKind.ARROW:
            arrow = cls.arrow_token_offset(node, source)
            if arrow is None:
                start, end = node.range
            else:
                start, end = arrow, arrow + 2
        else:
            start = node.range[0]
            end = cls.opening_paren_offset(node, source)
        return SourceLocation(start=source.position_at(start), end=source.position_at(end))
