import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from contribution_image.clients.contributions_client import ContributionDataError
from contribution_image.clients.contributions_client import fetch_contributions
from contribution_image.core.observability import configure_logging
from contribution_image.core.observability import init_sentry
from contribution_image.services.grid_service import map_to_grid
from contribution_image.services.render_service import render_grid
from contribution_image.services.render_service import write_png
from contribution_image.settings import Settings


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contribution-image",
        description="Render a user's contribution calendar as a PNG grid.",
    )
    parser.add_argument("username", help="Account whose contributions are drawn")
    return parser


def generate_contribution_image(
    username: str, output_dir: Path, settings: Settings
) -> Path:
    """Fetch contributions for `username` and write the grid image to `output_dir`.

    Raises:
        ContributionDataError: If the response holds no contribution days.
    """

    contributions = fetch_contributions(
        username,
        api_url=settings.contributions_api_url,
        timeout=settings.request_timeout_seconds,
    )

    layout = settings.grid_layout()
    cells = map_to_grid(
        contributions.days,
        columns=layout.columns,
        rows=layout.rows,
        palette_size=len(layout.palette),
    )
    image = render_grid(cells, layout)
    return write_png(image, output_dir, settings.output_filename)


def main(argv: Sequence[str] | None = None, output_dir: Path | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    username = args.username.strip()
    if not username:
        parser.error("username cannot be empty")

    settings = Settings()
    configure_logging(settings)
    init_sentry(settings)

    try:
        output_path = generate_contribution_image(
            username=username,
            output_dir=Path.cwd() if output_dir is None else output_dir,
            settings=settings,
        )
    except ContributionDataError as exc:
        logger.debug("Contribution data rejected", exc_info=exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"Contribution image generated as {output_path.name} for {username}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
