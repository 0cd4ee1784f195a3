"""Configuration data models."""

from __future__ import annotations
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union
from pydantic import BaseModel, Field, field_validator

from .constants import DEFAULT_MAX_LINE_WIDTH


class Order(str, Enum):
    """Entry ordering strategies."""

    PRESERVE = "preserve"
    BY_IDENTITY = "msgid"
    BY_LOCATION = "location"


# Alternative spellings accepted from config files and the command line
ORDER_ALIASES = {
    "none": Order.PRESERVE,
    "no-sort": Order.PRESERVE,
    "output": Order.BY_IDENTITY,
    "id": Order.BY_IDENTITY,
    "file": Order.BY_LOCATION,
    "reference": Order.BY_LOCATION,
}


class MergeOptions(BaseModel):
    """Options consumed by the merge pipeline."""

    order: Order = Order.PRESERVE
    drop_references: bool = Field(False, description="Drop #: reference comments")
    drop_all_comments: bool = Field(False, description="Drop every comment category")
    width: Optional[int] = Field(None, ge=1, description="Characters per quoted line")
    wrap: bool = Field(True, description="Split long strings over several lines")
    include_fuzzy: bool = Field(True, description="Keep entries flagged fuzzy")
    output_obsolete_entries: bool = Field(True, description="Keep #~ obsolete entries")
    remove_header_fields: List[str] = Field(default_factory=list)
    workers: int = Field(1, ge=1, description="Threads used to parse inputs")

    @field_validator("order", mode="before")
    @classmethod
    def resolve_order_alias(cls, v):
        if isinstance(v, str) and not isinstance(v, Order):
            name = v.strip().lower()
            if name in ORDER_ALIASES:
                return ORDER_ALIASES[name]
            return name
        return v

    @field_validator("remove_header_fields")
    @classmethod
    def validate_header_fields(cls, v: List[str]) -> List[str]:
        if any(not name.strip() or ":" in name for name in v):
            raise ValueError("remove_header_fields must be header keys without ':'")
        return [name.strip() for name in v]

    @property
    def max_line_width(self) -> int:
        """Effective wrap budget."""
        if self.width is not None:
            return self.width
        return DEFAULT_MAX_LINE_WIDTH

    @classmethod
    def from_toml_file(cls, path: Union[Path, str]) -> "MergeOptions":
        """Load options from the ``[merge]`` table of a TOML file."""
        try:
            import tomllib
        except ImportError:
            import tomli as tomllib

        with open(path, "rb") as f:
            data = tomllib.load(f)
        return cls.model_validate(data.get("merge", {}))
