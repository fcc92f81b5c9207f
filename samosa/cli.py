# Copyright (c) 2026 Samosa
# SPDX-License-Identifier: MIT

"""
Command line entry point.

Exposes :func:`samosa.measure.measure_with_visualization` as the
``samosa-measure`` command.

Usage::

    samosa-measure plate.jpg
    samosa-measure plate.jpg --reference-length 5 --pixel-length 100 --unit cm
    samosa-measure plate.jpg --pixels-per-unit 20 --output plate_marked.png
    samosa-measure plate.jpg --format json_pretty
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click

from samosa.errors import InvalidInputError
from samosa.measure import DEFAULT_HIGHLIGHT, measure_with_visualization
from samosa.measure.io import save_image
from samosa.runtime import SerializerFormat, to_report
from samosa.schema import Calibration

logger = logging.getLogger(__name__)


def _parse_highlight(ctx, param, value: str) -> tuple[int, int, int]:
    """Parse an ``R,G,B`` option value into a tuple of ints."""
    parts = [p.strip() for p in value.split(",")]
    try:
        channels = tuple(int(p) for p in parts)
    except ValueError as e:
        raise click.BadParameter(
            f"expected R,G,B integers, got {value!r}"
        ) from e
    if len(channels) != 3 or not all(0 <= c <= 255 for c in channels):
        raise click.BadParameter(f"expected three values in 0-255, got {value!r}")
    return channels


def _build_calibration(
    reference_length: Optional[float],
    pixel_length: Optional[float],
    pixels_per_unit: Optional[float],
    unit: str,
) -> Optional[Calibration]:
    """Turn the calibration options into a Calibration, or None."""
    if pixels_per_unit is not None:
        if reference_length is not None or pixel_length is not None:
            raise InvalidInputError(
                "Use either --pixels-per-unit or "
                "--reference-length/--pixel-length, not both"
            )
        return Calibration.from_ratio(pixels_per_unit, unit=unit)

    if reference_length is None and pixel_length is None:
        return None
    if reference_length is None or pixel_length is None:
        raise InvalidInputError(
            "--reference-length and --pixel-length must be given together"
        )
    return Calibration(reference_length, pixel_length, unit=unit)


@click.command("samosa-measure")
@click.argument(
    "image",
    type=click.Path(exists=True, dir_okay=False),
)
@click.option(
    "--reference-length",
    type=float,
    default=None,
    help="Physical length of a reference object in the image (e.g. 5 for 5 cm).",
)
@click.option(
    "--pixel-length",
    type=float,
    default=None,
    help="Length of the same reference object measured in pixels.",
)
@click.option(
    "--pixels-per-unit",
    type=float,
    default=None,
    help="Calibration factor given directly, in pixels per unit length.",
)
@click.option(
    "--unit",
    default="cm",
    show_default=True,
    help="Unit of the calibration length.",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the visualization (matched pixels highlighted) to this file.",
)
@click.option(
    "--highlight",
    default=",".join(str(c) for c in DEFAULT_HIGHLIGHT),
    show_default=True,
    callback=_parse_highlight,
    help="Highlight color for matched pixels as R,G,B.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in SerializerFormat]),
    default=SerializerFormat.NATURAL.value,
    show_default=True,
    help="Report format.",
)
@click.option(
    "--verbose",
    is_flag=True,
    default=False,
    help="Enable DEBUG-level logging.",
)
def cli(
    image: str,
    reference_length: Optional[float],
    pixel_length: Optional[float],
    pixels_per_unit: Optional[float],
    unit: str,
    output_path: Optional[str],
    highlight: tuple[int, int, int],
    output_format: str,
    verbose: bool,
) -> None:
    """Measure the samosa-colored area of IMAGE.

    Counts samosa-colored pixels, reports their coverage of the image and,
    when calibrated, the estimated real area.

    \b
    Examples:
        # Pixel counts and coverage only
        samosa-measure plate.jpg

        # A 5 cm coin spans 100 pixels
        samosa-measure plate.jpg --reference-length 5 --pixel-length 100

        # Save the highlighted image
        samosa-measure plate.jpg --pixels-per-unit 20 --output marked.png
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        calibration = _build_calibration(
            reference_length, pixel_length, pixels_per_unit, unit
        )
        logger.debug("Using calibration %s", calibration)
        measurement, visualization = measure_with_visualization(
            image,
            calibration=calibration,
            highlight=highlight,
        )
        if output_path:
            save_image(visualization, output_path)
    except InvalidInputError as exc:
        click.echo(f"Error: {exc.message}", err=True)
        sys.exit(1)

    click.echo(to_report(measurement, format=SerializerFormat(output_format)))


if __name__ == "__main__":
    cli()
