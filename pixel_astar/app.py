"""
Image path solver.
Loads an image, turns its white pixels into a walkable grid graph, searches a
path between two pixels with A*, and writes the solution image with the path
drawn in red.
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from pixel_astar.imaging.image_grid import WHITE, ImageGrid
from pixel_astar.imaging.path_renderer import RED, draw_path, save_image
from pixel_astar.planning.astar_search import AStarSearch
from pixel_astar.planning.exceptions import InvalidCoordinateError
from pixel_astar.planning.graph_builder import GridGraphBuilder
from pixel_astar.planning.path_finder import PathFinder, SearchResult
from pixel_astar.utils.config_loader import SystemConfig

Pixel = Tuple[int, int]


@dataclass
class SolveReport:
    """Everything the caller needs to present one solved image."""
    image_path: Path
    start: Pixel
    goal: Pixel
    result: SearchResult
    elapsed_ms: float
    output_path: Optional[Path]
    solution: Any = None   # RGB array with the path drawn

    @property
    def success(self) -> bool:
        return self.result.success


class ImagePathSolver:

    def __init__(self, config: Union[SystemConfig, Dict[str, Any], None] = None):
        if isinstance(config, SystemConfig):
            config = config.to_dict()
        config = config or {}

        self.logger = logging.getLogger(__name__)

        self.planning_config = config.get('planning', {}) or {}
        self.imaging_config = config.get('imaging', {}) or {}

        self.walkable_color = tuple(self.imaging_config.get('walkable_color', WHITE))
        self.path_color = tuple(self.imaging_config.get('path_color', RED))
        self.output_file = self.imaging_config.get('output_file', 'solution.png')

        self.builder = GridGraphBuilder(self.planning_config)

    def solve(self, image_path: Union[str, Path], start: Pixel, goal: Pixel,
              output_path: Union[str, Path, None] = None, save: bool = True) -> SolveReport:
        """
        Solve one image.

        Args:
            image_path: Image file; pure white pixels are walkable
            start: (x, y) start pixel
            goal: (x, y) goal pixel
            output_path: Where to write the solution (default from config)
            save: Write the solution image

        Returns:
            SolveReport with the search result and timing

        Raises:
            ImageLoadError: image could not be read
            InvalidCoordinateError: start or goal outside the image
        """
        image_path = Path(image_path)
        grid = ImageGrid.from_file(image_path, self.walkable_color)

        for x, y in (start, goal):
            if not grid.contains(x, y):
                raise InvalidCoordinateError(x, y, grid.width, grid.height)

        graph = self.builder.build_from_array(grid.mask)
        finder = PathFinder(graph, self.planning_config).set_start(start).set_goal(goal)

        self.logger.info(
            f"Searching for path in '{image_path}' from pixel({start[0]},{start[1]}) "
            f"to pixel({goal[0]},{goal[1]}) ..."
        )

        before = time.perf_counter()
        result = finder.find_path(AStarSearch)
        elapsed_ms = (time.perf_counter() - before) * 1000.0

        self.logger.info(f"{'success' if result.success else 'failure'} time : {elapsed_ms:.3f}ms")
        self.logger.info(f"path size : {len(result.path)}")

        solution = draw_path(grid.pixels, result.positions, self.path_color)

        written = None
        if save:
            written = save_image(solution, output_path or self.output_file)

        return SolveReport(
            image_path=image_path,
            start=tuple(start),
            goal=tuple(goal),
            result=result,
            elapsed_ms=elapsed_ms,
            output_path=written,
            solution=solution,
        )
