"""
Image-backed traversability grid.
A pixel is walkable when its RGB value equals the walkable colour exactly
(pure white by default); every other colour is a wall.
"""

import logging
from pathlib import Path
from typing import Sequence, Tuple, Union

import matplotlib.image as mpimg
import numpy as np

from pixel_astar.planning.exceptions import ImageLoadError

WHITE = (255, 255, 255)


def to_rgb8(image: np.ndarray) -> np.ndarray:
    """
    Normalise an image array to (height, width, 3) uint8.

    Float images are taken to be in [0, 1], alpha is dropped and grayscale is
    broadcast to three channels.
    """
    image = np.asarray(image)

    if np.issubdtype(image.dtype, np.floating):
        image = np.round(np.clip(image, 0.0, 1.0) * 255.0)
    image = image.astype(np.uint8)

    if image.ndim == 2:
        image = np.stack([image] * 3, axis=-1)
    elif image.ndim == 3 and image.shape[2] in (3, 4):
        image = image[:, :, :3]
    else:
        raise ImageLoadError(f"Unsupported image shape {image.shape}")

    return np.ascontiguousarray(image)


class ImageGrid:
    """
    Walkable mask of an RGB image, indexed [y, x].
    Satisfies the GridSource protocol used by GridGraphBuilder.
    """

    def __init__(self, pixels: np.ndarray, walkable_color: Sequence[int] = WHITE):
        self.logger = logging.getLogger(__name__)

        self.pixels = to_rgb8(pixels)
        self.walkable_color = tuple(int(c) for c in walkable_color)

        self.mask = np.all(self.pixels == np.array(self.walkable_color, dtype=np.uint8), axis=-1)
        self.height, self.width = self.mask.shape

        self.logger.debug(
            f"Image grid {self.width}x{self.height}: {int(self.mask.sum())} walkable pixels"
        )

    @classmethod
    def from_file(cls, path: Union[str, Path], walkable_color: Sequence[int] = WHITE) -> 'ImageGrid':
        """
        Load an image file (any format matplotlib/Pillow can read).

        Raises:
            ImageLoadError: file missing or unreadable
        """
        path = Path(path)
        if not path.is_file():
            raise ImageLoadError(f"Failed to load '{path}': no such file")

        try:
            pixels = mpimg.imread(str(path))
        except (OSError, ValueError, SyntaxError) as e:
            raise ImageLoadError(f"Failed to load '{path}': {e}") from e

        return cls(pixels, walkable_color)

    @classmethod
    def from_array(cls, pixels: np.ndarray, walkable_color: Sequence[int] = WHITE) -> 'ImageGrid':
        return cls(pixels, walkable_color)

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_walkable(self, x: int, y: int) -> bool:
        return bool(self.mask[y, x])
