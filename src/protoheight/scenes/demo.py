"""Demo scenes: a prototype-height strip like a toolbar of list items."""

from pathlib import Path

from ..boxes.primitives import RenderRow, RenderSizedBox
from ..core.node import RenderBox
from ..layout import RenderPrototypeHeight, TreeLoader

ASSETS_DIR = Path(__file__).parent.parent / "assets"

BUTTON_SIZE = (64, 36)
ITEM_COUNT = 5


def create_demo_scene() -> RenderBox:
    """Create the demo strip.

    The prototype is a row holding a single button-sized box; it is never
    drawn but fixes the strip's height. The content is a row of grey list
    items that stretch to exactly that height.

    Returns:
        Root node of the demo tree
    """
    prototype = RenderRow([RenderSizedBox(*BUTTON_SIZE, name="button")], name="button_row")
    items = [
        RenderSizedBox(BUTTON_SIZE[0], 200, color="grey", fill_height=True, name=f"item_{i}")
        for i in range(ITEM_COUNT)
    ]
    return RenderPrototypeHeight(
        background_color="white",
        prototype=prototype,
        content=RenderRow(items, spacing=2, name="item_list"),
        name="demo",
    )


def create_asset_scene(asset_name: str) -> RenderBox:
    """Create a scene from a YAML file in the assets directory."""
    loader = TreeLoader()
    return loader.load(ASSETS_DIR / f"{asset_name}.yaml")


def create_toolbar_scene() -> RenderBox:
    """Create the toolbar scene from assets/toolbar.yaml."""
    return create_asset_scene("toolbar")


def create_overflow_scene() -> RenderBox:
    """Create a scene that overflows on purpose, to show the debug markers."""
    return create_asset_scene("overflow")
