from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import model_validator


LEVEL_COUNT = 5

GRID_COLUMNS = 53
GRID_ROWS = 7
DEFAULT_CELL_SIZE = 10
DEFAULT_PADDING = 2
DEFAULT_BACKGROUND = "#0d1117"
DEFAULT_PALETTE: tuple[str, ...] = (
    "#161b22",
    "#0e4429",
    "#006d32",
    "#26a641",
    "#39d353",
)

# Textual buckets returned by the contributions API next to (or instead of) `level`.
CONTRIBUTION_LEVEL_NAMES: dict[str, int] = {
    "NONE": 0,
    "FIRST_QUARTILE": 1,
    "SECOND_QUARTILE": 2,
    "THIRD_QUARTILE": 3,
    "FOURTH_QUARTILE": 4,
}


def _is_known_level(value: Any) -> bool:
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and 0 <= value < LEVEL_COUNT
    )


def _parse_count(value: Any) -> int | None:
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value
    return None


class ContributionDay(BaseModel):
    """Single day of activity, bucketed into a level in range 0..4.

    Unknown, missing or out-of-range levels are normalized to 0 instead of
    failing validation.
    """

    model_config = ConfigDict(frozen=True)

    level: int = Field(default=0, ge=0, lt=LEVEL_COUNT)
    count: int | None = None

    @model_validator(mode="before")
    @classmethod
    def _normalize_record(cls, data: Any) -> dict[str, Any]:
        if isinstance(data, BaseModel):
            data = data.model_dump()
        if not isinstance(data, Mapping):
            return {}

        level = data.get("level")
        if not _is_known_level(level):
            level_name = data.get("contributionLevel")
            if isinstance(level_name, str):
                level = CONTRIBUTION_LEVEL_NAMES.get(level_name.upper(), 0)
            else:
                level = 0

        raw_count = data.get("count")
        if raw_count is None:
            raw_count = data.get("contributionCount")

        return {
            "level": level,
            "count": _parse_count(raw_count),
        }


class ContributionSet(BaseModel):
    """Ordered, immutable contribution history of one subject."""

    model_config = ConfigDict(frozen=True)

    username: str
    days: tuple[ContributionDay, ...]

    @property
    def total(self) -> int:
        return sum(day.count for day in self.days if day.count is not None)


class GridCell(BaseModel):
    """Grid position of one contribution day and its palette index."""

    model_config = ConfigDict(frozen=True)

    column: int = Field(ge=0)
    row: int = Field(ge=0)
    color_index: int = Field(ge=0)


class GridLayout(BaseModel):
    """Geometry and colors of the rendered contribution grid."""

    model_config = ConfigDict(frozen=True)

    cell_size: int = Field(default=DEFAULT_CELL_SIZE, gt=0)
    padding: int = Field(default=DEFAULT_PADDING, ge=0)
    columns: int = Field(default=GRID_COLUMNS, gt=0)
    rows: int = Field(default=GRID_ROWS, gt=0)
    background: str = DEFAULT_BACKGROUND
    palette: tuple[str, ...] = DEFAULT_PALETTE

    @property
    def pitch(self) -> int:
        return self.cell_size + self.padding

    @property
    def width(self) -> int:
        return self.columns * self.pitch

    @property
    def height(self) -> int:
        return self.rows * self.pitch

    @property
    def capacity(self) -> int:
        return self.columns * self.rows

    def cell_origin(self, cell: GridCell) -> tuple[int, int]:
        """Return the top-left pixel of a cell."""

        return cell.column * self.pitch, cell.row * self.pitch
