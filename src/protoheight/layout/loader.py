"""YAML loader for render tree definitions."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import yaml

from ..boxes.primitives import RenderRow, RenderSizedBox
from ..core.node import RenderBox
from ..utils.logger import get_logger
from .prototype_height import RenderPrototypeHeight
from .slots import PrototypeHeightSlot

LOGGER = get_logger(__name__)


class TreeLoader:
    """Builds render trees from YAML descriptions.

    Every node is a mapping with a ``type`` key. Supported types:

        box:
            type: box
            size: [width, height]
            color: "#ff8800"        # optional
            fill_height: false       # optional
            name: label              # optional, any node

        row:
            type: row
            spacing: 4               # optional
            children: [<node>, ...]

        prototype_height:
            type: prototype_height
            background: white        # optional
            prototype: <node>        # optional slot
            content: <node>          # optional slot

    Example:
        type: prototype_height
        background: white
        prototype:
          type: row
          children:
            - {type: box, size: [64, 36], color: "#6200ee"}
        content:
          type: box
          size: [100, 200]
          color: grey
          fill_height: true
    """

    def __init__(self) -> None:
        self._builders: dict[str, Callable[[dict[str, Any]], RenderBox]] = {
            "box": self._build_box,
            "row": self._build_row,
            "prototype_height": self._build_prototype_height,
        }

    @property
    def node_types(self) -> list[str]:
        return list(self._builders)

    def load(self, path: str | Path) -> RenderBox:
        """Load a render tree from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            Root node of the tree

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the description is invalid
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Tree definition not found: {path}")
        with open(path) as f:
            data = yaml.safe_load(f)
        LOGGER.debug("Loaded tree definition from %s", path)
        return self.build(data)

    def load_string(self, yaml_string: str) -> RenderBox:
        """Load a render tree from a YAML string."""
        return self.build(yaml.safe_load(yaml_string))

    def build(self, data: Any) -> RenderBox:
        """Build a node (and its subtree) from parsed YAML data."""
        if not isinstance(data, dict):
            raise ValueError(f"Node definition must be a mapping, got {type(data).__name__}")
        node_type = data.get("type")
        if node_type is None:
            raise ValueError(f"Node definition is missing 'type': {data}")
        builder = self._builders.get(node_type)
        if builder is None:
            raise ValueError(f"Unknown node type: {node_type}")
        return builder(data)

    def _check_keys(self, data: dict[str, Any], allowed: set[str]) -> None:
        unknown = set(data) - allowed - {"type", "name"}
        if unknown:
            raise ValueError(f"Unknown keys for '{data['type']}' node: {sorted(unknown)}")

    def _build_box(self, data: dict[str, Any]) -> RenderBox:
        self._check_keys(data, {"size", "color", "fill_height"})
        size = data.get("size")
        if not isinstance(size, (list, tuple)) or len(size) != 2:
            raise ValueError(f"Box 'size' must be [width, height], got {size!r}")
        color = data.get("color")
        if isinstance(color, list):
            color = tuple(color)
        fill_height = data.get("fill_height", False)
        if not isinstance(fill_height, bool):
            raise ValueError(f"Box 'fill_height' must be true or false, got {fill_height!r}")
        return RenderSizedBox(
            size[0],
            size[1],
            color=color,
            fill_height=fill_height,
            name=data.get("name"),
        )

    def _build_row(self, data: dict[str, Any]) -> RenderBox:
        self._check_keys(data, {"children", "spacing"})
        children_data = data.get("children", [])
        if not isinstance(children_data, list):
            raise ValueError(f"Row 'children' must be a list, got {children_data!r}")
        children = [self.build(child) for child in children_data]
        return RenderRow(children, spacing=data.get("spacing", 0.0), name=data.get("name"))

    def _build_prototype_height(self, data: dict[str, Any]) -> RenderBox:
        slot_keys = {slot.value for slot in PrototypeHeightSlot}
        self._check_keys(data, slot_keys | {"background"})
        background = data.get("background")
        if isinstance(background, list):
            background = tuple(background)

        node = RenderPrototypeHeight(background_color=background, name=data.get("name"))
        for slot in node.slots():
            child_data = data.get(slot.value)
            if child_data is not None:
                node.set_child_for_slot(slot, self.build(child_data))
        return node
