"""Script values referenced by aggregations."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from agg_tree.domain import ScriptType
from agg_tree.errors import InvalidAggregationError

_EMPTY_SCRIPT_ERROR = "Script must not be empty."


class Script(BaseModel):
    """Represent an inline or stored script.

    Args:
        script: Inline script source, or stored script id.
        type: Whether `script` is inline source or a stored id.
        lang: Optional script language.
        params: Optional script parameters.

    """

    model_config = ConfigDict(frozen=True)

    script: str
    type: ScriptType = ScriptType.INLINE
    lang: str | None = None
    params: dict[str, Any] = Field(default_factory=dict)

    def source(self) -> str | dict[str, Any]:
        """Render the script.

        Raises:
            InvalidAggregationError: If the script is empty.

        Returns:
            str | dict[str, Any]: Bare source for plain inline scripts, a mapping otherwise.

        """
        if not self.script.strip():
            raise InvalidAggregationError(_EMPTY_SCRIPT_ERROR)

        if self.type == ScriptType.INLINE and not self.lang and not self.params:
            return self.script

        key = "id" if self.type == ScriptType.STORED else "source"
        rendered: dict[str, Any] = {key: self.script}
        if self.lang:
            rendered["lang"] = self.lang
        if self.params:
            rendered["params"] = dict(self.params)
        return rendered
