"""The ``[input]`` section of ``shopnet.toml``.

Every field has a default, so a config file only lists what it changes.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

_BOUND_PAIRS = (
    ("min_shops", "max_shops"),
    ("min_roads", "max_roads"),
    ("min_shop_id", "max_shop_id"),
)


class InputConfig(BaseModel):
    """Accepted header counts, the shop identifier range, and file encoding."""

    model_config = {"frozen": True}

    min_shops: int = Field(default=2, ge=0)
    max_shops: int = Field(default=1000, ge=0)
    min_roads: int = Field(default=1, ge=0)
    max_roads: int = Field(default=1000, ge=0)
    min_shop_id: int = Field(default=1, ge=0)
    max_shop_id: int = Field(default=1000, ge=0)
    # Range-check the road destination too, not only the source shop.
    strict_road_to: bool = False
    encoding: str = "utf-8"

    @model_validator(mode="after")
    def _check_bounds(self) -> InputConfig:
        for low, high in _BOUND_PAIRS:
            if getattr(self, low) > getattr(self, high):
                msg = f"{low} must not exceed {high}"
                raise ValueError(msg)
        return self
