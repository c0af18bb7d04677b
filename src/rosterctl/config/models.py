"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, rosterctl.toml only contains
overrides. A fresh checkout needs no config file at all.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class DataConfig(BaseModel):
    """[data] section — bootstrap document locations.

    Relative paths resolve against the data root (the directory holding
    ``rosterctl.toml``, or the working directory when there is none).
    """

    model_config = {"frozen": True}

    profile_file: str = "user.json"
    roster_file: str = "friends.json"


class RosterConfig(BaseModel):
    """[roster] section."""

    model_config = {"frozen": True}

    unique_emails: bool = True


class McpConfig(BaseModel):
    """[mcp] section — defaults for ``rosterctl serve``."""

    model_config = {"frozen": True}

    transport: Literal["stdio", "sse", "streamable-http"] = "stdio"
    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)


class RosterFileConfig(BaseModel):
    """Root of the rosterctl.toml schema."""

    model_config = {"frozen": True}

    data: DataConfig = Field(default_factory=DataConfig)
    roster: RosterConfig = Field(default_factory=RosterConfig)
    mcp: McpConfig = Field(default_factory=McpConfig)
