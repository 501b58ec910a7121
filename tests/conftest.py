import os
import sys
import logging

import numpy as np
import pytest

os.environ.setdefault("MPLBACKEND", "Agg")

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from pixel_astar.planning.graph_builder import GridGraphBuilder


def ascii_mask(rows):
    """'#' is a wall, anything else is walkable. Rows are y, columns are x."""
    return np.array([[ch != '#' for ch in row] for row in rows], dtype=bool)


@pytest.fixture
def build_grid():
    """Build a GridGraph from an ASCII map."""
    def _build(rows, **config):
        return GridGraphBuilder(config).build_from_array(ascii_mask(rows))

    return _build


def _is_pytest_handler(handler):
    return type(handler).__module__.startswith("_pytest")


@pytest.fixture
def restore_root_logger():
    """Undo SystemLogger changes to the root and package loggers."""
    root = logging.getLogger()
    original = [h for h in root.handlers if not _is_pytest_handler(h)]
    level = root.level

    yield root

    for handler in list(root.handlers):
        if _is_pytest_handler(handler):
            continue
        root.removeHandler(handler)
        if handler not in original:
            handler.close()
    for handler in original:
        root.addHandler(handler)
    root.setLevel(level)

    for name in list(logging.Logger.manager.loggerDict):
        if name.startswith("pixel_astar"):
            component = logging.getLogger(name)
            component.setLevel(logging.NOTSET)
            for handler in list(component.handlers):
                handler.close()
                component.removeHandler(handler)
