"""
Image input and output around the pathfinding core.
"""

from pixel_astar.imaging.image_grid import ImageGrid, to_rgb8
from pixel_astar.imaging.path_renderer import draw_path, save_image, show_image

__all__ = ["ImageGrid", "to_rgb8", "draw_path", "save_image", "show_image"]
