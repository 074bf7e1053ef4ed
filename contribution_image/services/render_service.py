import logging
from collections.abc import Iterable
from io import BytesIO
from pathlib import Path

from PIL import Image
from PIL import ImageDraw

from contribution_image.schemas.contributions import GridCell
from contribution_image.schemas.contributions import GridLayout


logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_FILENAME = "contributions.png"


def render_grid(cells: Iterable[GridCell], layout: GridLayout) -> Image.Image:
    """Paint the background and every mapped cell into an RGB raster."""

    image = Image.new("RGB", (layout.width, layout.height), layout.background)
    draw = ImageDraw.Draw(image)

    painted = 0
    for cell in cells:
        x, y = layout.cell_origin(cell)
        # Pillow rectangles include both corner pixels.
        draw.rectangle(
            [x, y, x + layout.cell_size - 1, y + layout.cell_size - 1],
            fill=layout.palette[cell.color_index],
        )
        painted += 1

    logger.debug("Painted %d cells on a %dx%d raster", painted, *image.size)
    return image


def encode_png(image: Image.Image) -> bytes:
    """Encode a raster as PNG bytes."""

    buffer = BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def write_png(
    image: Image.Image,
    output_dir: Path,
    filename: str = DEFAULT_OUTPUT_FILENAME,
) -> Path:
    """Write the raster to `output_dir / filename`, replacing any existing file."""

    output_path = Path(output_dir) / filename
    output_path.write_bytes(encode_png(image))
    logger.info("Wrote %s", output_path)
    return output_path
