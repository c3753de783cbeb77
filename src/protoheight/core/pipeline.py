"""Frame pipeline: runs layout then paint for a render tree."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..utils.logger import get_logger
from .geometry import BoxConstraints, Offset

if TYPE_CHECKING:
    from ..painting.canvas import Canvas
    from .node import RenderBox

LOGGER = get_logger(__name__)


class PipelineOwner:
    """Owns a root node and flushes pending layout and paint work.

    Nodes never lay out or paint themselves on their own; they only mark
    themselves dirty, the request bubbles up to the root, and the owner
    records that a frame is needed. flush_layout() and flush_paint() then
    run whatever was requested, always layout first.

    Attributes:
        layout_requests: Number of times a relayout was scheduled
        paint_requests: Number of times a repaint was scheduled
    """

    def __init__(self) -> None:
        self._root: RenderBox | None = None
        self._root_constraints = BoxConstraints()
        self._layout_requested = False
        self._paint_requested = False
        self.layout_requests = 0
        self.paint_requests = 0

    @property
    def root(self) -> RenderBox | None:
        return self._root

    @property
    def root_constraints(self) -> BoxConstraints:
        return self._root_constraints

    @property
    def needs_layout(self) -> bool:
        return self._layout_requested

    @property
    def needs_paint(self) -> bool:
        return self._paint_requested

    def set_root(self, root: RenderBox, constraints: BoxConstraints | None = None) -> None:
        """Install the root of the render tree.

        Args:
            root: Node without a parent
            constraints: Constraints for the root; unconstrained if omitted
        """
        if root.parent is not None:
            raise ValueError(f"Root node '{root.name}' must not have a parent")
        if self._root is not None:
            self._root.detach()
        self._root = root
        if constraints is not None:
            self._root_constraints = constraints
        root.attach(self)
        self.request_layout(root)
        self.request_paint(root)

    def set_constraints(self, constraints: BoxConstraints) -> None:
        """Change the root constraints, scheduling a relayout if they differ."""
        if constraints == self._root_constraints:
            return
        self._root_constraints = constraints
        if self._root is not None:
            self.request_layout(self._root)

    def request_layout(self, node: RenderBox) -> None:
        self._layout_requested = True
        self.layout_requests += 1

    def request_paint(self, node: RenderBox) -> None:
        self._paint_requested = True
        self.paint_requests += 1

    def flush_layout(self) -> bool:
        """Lay out the root if anything asked for it.

        Returns:
            True if a layout pass ran
        """
        if not self._layout_requested or self._root is None:
            return False
        LOGGER.debug("Laying out '%s' under %r", self._root.name, self._root_constraints)
        self._root.layout(self._root_constraints)
        self._layout_requested = False
        return True

    def flush_paint(self, canvas: Canvas) -> bool:
        """Repaint the whole tree onto canvas if anything asked for it.

        Returns:
            True if a paint pass ran
        """
        if not self._paint_requested or self._root is None:
            return False
        if self._layout_requested:
            self.flush_layout()
        LOGGER.debug("Painting '%s'", self._root.name)
        canvas.clear()
        self._root.paint(canvas, Offset.zero())
        for node in self._root.iter_nodes():
            node.mark_painted()
        self._paint_requested = False
        return True

    def draw_frame(self, canvas: Canvas) -> None:
        """Run layout then paint."""
        self.flush_layout()
        self.flush_paint(canvas)
