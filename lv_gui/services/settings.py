"""Viewer settings resolved from the environment."""

from __future__ import annotations

import os
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

from lv_common.config.env import parse_bool_env, parse_int_env


class ViewerSettings(BaseModel):
    """Startup options for the viewer application."""

    theme: str | None = None
    demo: bool = False
    demo_lines: int = Field(default=200, ge=0)
    demo_interval_ms: int = Field(default=50, ge=0)

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ViewerSettings":
        """Build settings from ``LV_*`` variables, ignoring unparsable ones."""
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        theme = env.get("LV_GUI_THEME")
        if theme:
            values["theme"] = theme
        demo = parse_bool_env(env.get("LV_DEMO"))
        if demo is not None:
            values["demo"] = demo
        lines = parse_int_env(env.get("LV_DEMO_LINES"))
        if lines is not None and lines >= 0:
            values["demo_lines"] = lines
        interval = parse_int_env(env.get("LV_DEMO_INTERVAL_MS"))
        if interval is not None and interval >= 0:
            values["demo_interval_ms"] = interval
        return cls(**values)

    def with_overrides(self, **overrides: Any) -> "ViewerSettings":
        """Return a copy with every non-None override applied."""
        updates = {key: value for key, value in overrides.items() if value is not None}
        return self.model_validate({**self.model_dump(), **updates})
