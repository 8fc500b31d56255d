"""Hierarchical transforms whose world matrix follows their parent's."""

from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np

_log = logging.getLogger(__name__)


class TransformError(ValueError):
    """Raised when a parent/child link cannot be made or broken."""


def _identity() -> np.ndarray:
    return np.identity(4, dtype=np.float32)


class Transform:
    """A node holding a local and a world 4x4 matrix in a parent/child tree."""

    def __init__(self, local: Optional[np.ndarray] = None) -> None:
        self.local: np.ndarray = _identity() if local is None else np.array(local, dtype=np.float32)
        self.world: np.ndarray = _identity()
        self.parent: Optional[Transform] = None
        self.children: List[Transform] = []

    def update(self) -> None:
        """Recompute the world matrix of this node and all its descendants."""
        self.world = self.local @ self.parent.world if self.parent is not None else self.local.copy()
        for child in self.children:
            child.update()

    def add_child(self, child: Transform) -> None:
        """Attach ``child`` under this node."""
        if child is self:
            _log.error("Child can't be itself")
            raise TransformError("a transform cannot be its own child")
        if child.parent is not None:
            _log.error("Child already have a parent")
            raise TransformError("child already has a parent")
        self.children.append(child)
        child.parent = self

    def remove_child(self, child: Transform) -> None:
        """Detach ``child`` from this node."""
        remaining = [c for c in self.children if c is not child]
        if len(remaining) == len(self.children):
            _log.warning("Child doesn't exist")
            raise TransformError("not a child of this transform")
        self.children = remaining
        child.parent = None

    def set_parent(self, parent: Transform) -> None:
        """Attach this node under ``parent``."""
        if parent is self:
            _log.warning("Parent can't be itself")
            raise TransformError("a transform cannot be its own parent")
        if self.parent is not None:
            _log.warning("Already have a parent")
            raise TransformError("transform already has a parent")
        self.parent = parent
        parent.children.append(self)

    def remove_parent(self) -> None:
        """Detach this node from its parent."""
        if self.parent is None:
            _log.warning("Parent doesn't exist")
            raise TransformError("transform has no parent")
        self.parent.remove_child(self)

    def detach(self) -> None:
        """Break every link: leave the parent and release all children."""
        if self.parent is not None:
            self.remove_parent()
        while self.children:
            self.remove_child(self.children[0])