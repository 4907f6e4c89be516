"""Layout and display settings with code-baked defaults.

Any field can be overridden through ``FAMGRID_*`` environment variables,
nested sections with a double underscore (``FAMGRID_CELL__WIDTH=200``).
"""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CellConfig(BaseModel):
    """Size of one person box on screen, in pixels."""

    model_config = {"frozen": True}

    width: int = Field(default=150, gt=0)
    height: int = Field(default=100, gt=0)
    pad: int = Field(default=15, ge=0)


class DisplayConfig(BaseModel):
    """Viewport translation and zoom applied after grid placement."""

    model_config = {"frozen": True}

    offset_x: float = -400.0
    offset_y: float = -300.0
    zoom: float = Field(default=1.0, gt=0)


class FamgridSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FAMGRID_",
        env_nested_delimiter="__",
        frozen=True,
    )

    start: int = Field(default=3, ge=0)
    max_hops: int = Field(default=2, ge=0)
    capacity: int | None = Field(default=2048, ge=1)
    output_path: str | None = "family_tree.png"
    verbose: bool = False
    log_json: bool = False
    cell: CellConfig = Field(default_factory=CellConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
