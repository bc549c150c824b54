"""Graph and tree algorithms on plain Python data: union-find, binary lifting,
lowest common ancestors, Euler tours, heavy-light and centroid decomposition."""

__version__ = "0.1.0"