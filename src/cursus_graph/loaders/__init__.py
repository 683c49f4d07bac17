"""Curriculum document loaders."""

from cursus_graph.loaders.cursus import CursusLoader

__all__ = ["CursusLoader"]
