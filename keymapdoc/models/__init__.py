"""Models package for keymapdoc."""

from keymapdoc.models.base import KeymapDocBaseModel, KeymapDocFrozenModel


__all__ = ["KeymapDocBaseModel", "KeymapDocFrozenModel"]
