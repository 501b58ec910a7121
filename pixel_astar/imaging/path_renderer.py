"""
Drawing a found path onto the source image and writing it to disk.
"""

import logging
from pathlib import Path
from typing import Iterable, Sequence, Tuple, Union

import matplotlib.pyplot as plt
import numpy as np

RED = (255, 0, 0)

logger = logging.getLogger(__name__)


def draw_path(pixels: np.ndarray, positions: Iterable[Tuple[int, int]],
              color: Sequence[int] = RED) -> np.ndarray:
    """
    Recolour every path pixel.

    Args:
        pixels: (height, width, 3) uint8 image
        positions: (x, y) pixel coordinates
        color: RGB colour of the path

    Returns:
        Copy of the image with the path drawn
    """
    solution = np.array(pixels, copy=True)

    for x, y in positions:
        solution[int(y), int(x), :3] = color

    return solution


def save_image(pixels: np.ndarray, output_path: Union[str, Path]) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    plt.imsave(str(output_path), np.asarray(pixels, dtype=np.uint8))

    logger.info(f"Solution image saved to {output_path}")
    return output_path


def show_image(pixels: np.ndarray, title: str = "A* algorithm"):
    """Display the solution in a matplotlib window until it is closed."""
    fig, ax = plt.subplots()
    ax.imshow(pixels, interpolation='nearest')
    ax.set_title(title)
    ax.set_axis_off()
    plt.show()
    plt.close(fig)
