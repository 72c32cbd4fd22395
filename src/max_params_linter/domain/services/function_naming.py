"""Human-readable description of a function: its kind followed by its name."""

from max_params_linter.domain.entities import FunctionKind, FunctionLikeNode


class FunctionNamer:
    """
    Builds descriptions such as "function 'foo'", "arrow function" or
    "static private method #x". Stateless; no top-level functions.
    """

    @staticmethod
    def upper_case_first(text: str) -> str:
        if not text:
            return text
        return text[0].upper() + text[1:]

    @staticmethod
    def name_with_kind(node: FunctionLikeNode) -> str:
        owner = node.owner
        tokens: list[str] = []

        if owner is not None and owner.is_class_member:
            if owner.static:
                tokens.append("static")
            if owner.private_name is not None:
                tokens.append("private")
        if node.is_async:
            tokens.append("async")
        if node.is_generator:
            tokens.append("generator")

        if owner is not None and owner.node_type in ("Property", "MethodDefinition"):
            if owner.kind == "constructor":
                return "constructor"
            if owner.kind == "get":
                tokens.append("getter")
            elif owner.kind == "set":
                tokens.append("setter")
            else:
                tokens.append("method")
        elif owner is not None:
            tokens.append("method")
        else:
            if node.kind is FunctionKind.ARROW:
                tokens.append("arrow")
            tokens.append("function")

        if owner is not None:
            if owner.private_name is not None:
                tokens.append(f"#{owner.private_name}")
            elif owner.static_key_name is not None:
                tokens.append(f"'{owner.static_key_name}'")
            elif node.id_name:
                tokens.append(f"'{node.id_name}'")
        elif node.id_name:
            tokens.append(f"'{node.id_name}'")

        return " ".join(tokens)

    @classmethod
    def display_name(cls, node: FunctionLikeNode) -> str:
        """name_with_kind with its first letter capitalized, e.g. "Function 'foo'"."""
        return cls.upper_case_first(cls.name_with_kind(node))
