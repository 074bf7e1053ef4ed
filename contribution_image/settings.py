import re

from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from contribution_image.clients.contributions_client import DEFAULT_API_URL
from contribution_image.clients.contributions_client import DEFAULT_TIMEOUT_SECONDS
from contribution_image.schemas.contributions import DEFAULT_BACKGROUND
from contribution_image.schemas.contributions import DEFAULT_CELL_SIZE
from contribution_image.schemas.contributions import DEFAULT_PADDING
from contribution_image.schemas.contributions import DEFAULT_PALETTE
from contribution_image.schemas.contributions import GRID_COLUMNS
from contribution_image.schemas.contributions import GRID_ROWS
from contribution_image.schemas.contributions import GridLayout
from contribution_image.services.render_service import DEFAULT_OUTPUT_FILENAME


HEX_COLOR_PATTERN = re.compile(r"^#[0-9a-fA-F]{6}$")


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Values are read from process environment and optionally from `.env`.
    """

    contributions_api_url: str = DEFAULT_API_URL
    request_timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    output_filename: str = DEFAULT_OUTPUT_FILENAME

    grid_cell_size: int = DEFAULT_CELL_SIZE
    grid_padding: int = DEFAULT_PADDING
    grid_columns: int = GRID_COLUMNS
    grid_rows: int = GRID_ROWS
    grid_background: str = DEFAULT_BACKGROUND
    grid_palette: tuple[str, ...] = DEFAULT_PALETTE

    log_level: str = "INFO"
    sentry_dsn: str | None = None
    environment: str = "development"
    release: str | None = None
    sentry_traces_sample_rate: float = 0.1

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("grid_cell_size", "grid_columns", "grid_rows")
    @classmethod
    def _require_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("grid dimensions must be positive")
        return value

    @field_validator("grid_padding")
    @classmethod
    def _require_non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("grid padding cannot be negative")
        return value

    @field_validator("grid_background")
    @classmethod
    def _require_hex_color(cls, value: str) -> str:
        if not HEX_COLOR_PATTERN.match(value):
            raise ValueError(f"invalid color {value!r}, expected #rrggbb")
        return value.lower()

    @field_validator("grid_palette")
    @classmethod
    def _require_hex_palette(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("grid palette cannot be empty")
        for color in value:
            if not HEX_COLOR_PATTERN.match(color):
                raise ValueError(f"invalid color {color!r}, expected #rrggbb")
        return tuple(color.lower() for color in value)

    def grid_layout(self) -> GridLayout:
        """Build the grid geometry and colors used by the renderer."""

        return GridLayout(
            cell_size=self.grid_cell_size,
            padding=self.grid_padding,
            columns=self.grid_columns,
            rows=self.grid_rows,
            background=self.grid_background,
            palette=self.grid_palette,
        )
