import logging
from collections.abc import Iterator
from collections.abc import Sequence
from itertools import islice

from contribution_image.schemas.contributions import ContributionDay
from contribution_image.schemas.contributions import GRID_COLUMNS
from contribution_image.schemas.contributions import GRID_ROWS
from contribution_image.schemas.contributions import GridCell
from contribution_image.schemas.contributions import LEVEL_COUNT


logger = logging.getLogger(__name__)


def map_to_grid(
    days: Sequence[ContributionDay],
    columns: int = GRID_COLUMNS,
    rows: int = GRID_ROWS,
    palette_size: int = LEVEL_COUNT,
) -> Iterator[GridCell]:
    """Place contribution days on a fixed columns x rows grid.

    Day `i` lands in column `i // rows` and row `i % rows`. Days past the
    grid capacity are dropped and the remaining cells are left unpainted.
    """

    capacity = columns * rows
    if len(days) > capacity:
        logger.warning(
            "Ignoring %d contribution days beyond the %dx%d grid",
            len(days) - capacity,
            columns,
            rows,
        )

    max_index = palette_size - 1
    for index, day in enumerate(islice(days, capacity)):
        color_index = min(max(day.level, 0), max_index)
        yield GridCell(column=index // rows, row=index % rows, color_index=color_index)
