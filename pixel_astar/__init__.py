"""
pixel-astar: A* shortest paths through the white pixels of an image.
Main package initialization.

Example:
    from pixel_astar.planning import GridGraphBuilder, PathFinder, AStarSearch
    from pixel_astar.app import ImagePathSolver
"""

import logging
import sys

# Package version
__version__ = "1.0.0"
__description__ = "A* pathfinding on image-derived grids"

# Setup basic logging
if not logging.getLogger().handlers:
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )

logger = logging.getLogger(__name__)
logger.debug(f"pixel-astar v{__version__} package loaded")

__all__ = ['__version__', '__description__']
