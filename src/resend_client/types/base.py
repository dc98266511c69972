# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Base model shared by all request and response schemas."""

from pydantic import BaseModel, ConfigDict


class ResendModel(BaseModel):
    """
    Base class for API schemas.

    Fields whose wire name differs from the Python attribute name declare an
    explicit alias; both names are accepted on input. Serialization for the
    wire always goes through the aliases.
    """

    model_config = ConfigDict(populate_by_name=True)

    def to_json(self) -> str:
        """Serialize with wire field names, keeping ``null`` fields."""
        return self.model_dump_json(by_alias=True)


__all__ = ["ResendModel"]
