"""
Rule constants: identifiers, defaults and ESTree node type names.
"""

RULE_ID: str = "max-params"
MESSAGE_ID_EXCEED: str = "exceed"
EXCEED_TEMPLATE: str = "{{name}} has too many parameters ({{count}}). Maximum allowed is {{max}}."

DEFAULT_MAX_PARAMS: int = 3
DEFAULT_COUNT_VOID_THIS: bool = False

# Receiver parameter: `this: void`
RECEIVER_IDENTIFIER: str = "this"
VOID_TYPE: str = "TSVoidKeyword"

# Parents whose key names the function (object/class members)
MEMBER_PARENT_TYPES: frozenset[str] = frozenset(
    {"Property", "MethodDefinition", "PropertyDefinition"}
)
CLASS_MEMBER_TYPES: frozenset[str] = frozenset(
    {"MethodDefinition", "PropertyDefinition"}
)

CONFIG_SECTION: str = "max-params"
