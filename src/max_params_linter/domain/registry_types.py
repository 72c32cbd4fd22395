from typing import Literal, TypedDict


class RuleDocs(TypedDict, total=False):
    description: str
    recommended: bool
    url: str


class RuleMeta(TypedDict, total=False):
    type: Literal["problem", "suggestion", "layout"]
    docs: RuleDocs
    schema: list[dict[str, object]]
    messages: dict[str, str]


class MessageData(TypedDict):
    name: str
    count: int
    max: int
