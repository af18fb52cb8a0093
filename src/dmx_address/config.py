"""
Configuration for dmx-address.

Uses Pydantic Settings so the parser bound can come from environment
variables, a YAML file, or direct instantiation.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from dmx_address.address import DMXAddress, ParseResult, try_parse
from dmx_address.universe import DMX_UNIVERSE_MAX, SACN_UNIVERSE_MAX


class ParserSettings(BaseSettings):
    """
    Address parser settings.

    Can be configured via:
    - Environment variables (prefixed with DMX_ADDRESS_)
    - YAML config file
    - Direct instantiation
    """

    max_universe: int = Field(default=DMX_UNIVERSE_MAX, ge=1, le=SACN_UNIVERSE_MAX)

    model_config = SettingsConfigDict(env_prefix="DMX_ADDRESS_")

    @classmethod
    def from_yaml(cls, path: Path) -> "ParserSettings":
        """Load settings from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls(**(data or {}))

    def to_yaml(self, path: Path) -> None:
        """Save settings to a YAML file."""
        with open(path, "w") as f:
            yaml.dump(self.model_dump(), f, default_flow_style=False)

    def parse(self, text: str) -> DMXAddress:
        return try_parse(text, max_universe=self.max_universe).unwrap()

    def try_parse(self, text: str) -> ParseResult:
        return try_parse(text, max_universe=self.max_universe)
