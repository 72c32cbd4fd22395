"""Pure message rendering from rule metadata. No I/O or infrastructure imports."""

import re
from collections.abc import Mapping

from max_params_linter.domain.registry_types import RuleMeta

_PLACEHOLDER = re.compile(r"\{\{\s*([^{}]+?)\s*\}\}")


class RuleMsgBuilder:
    """Renders `{{key}}` message templates the way the host framework does."""

    @staticmethod
    def get_template(meta: RuleMeta, message_id: str) -> str | None:
        """Return the template registered for message_id, if any."""
        messages = meta.get("messages") or {}
        return messages.get(message_id)

    @staticmethod
    def interpolate(template: str, data: Mapping[str, object]) -> str:
        """Substitute placeholders; placeholders without data are left as written."""

        def replace(match: re.Match[str]) -> str:
            key = match.group(1)
            if key in data:
                return str(data[key])
            return match.group(0)

        return _PLACEHOLDER.sub(replace, template)

    @staticmethod
    def build_message(meta: RuleMeta, message_id: str, data: Mapping[str, object]) -> str:
        """Render the message for message_id. Raises KeyError for unknown ids."""
        template = RuleMsgBuilder.get_template(meta, message_id)
        if template is None:
            raise KeyError(f"Unknown message id: {message_id}")
        return RuleMsgBuilder.interpolate(template, data)
