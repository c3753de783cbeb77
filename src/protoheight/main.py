"""Main entry point for protoheight."""

import argparse
import logging
from pathlib import Path

from .core.geometry import BoxConstraints, Offset, Size
from .core.hit_test import BoxHitTestResult
from .core.node import RenderBox
from .core.pipeline import PipelineOwner
from .debug import debug_settings, load_debug_settings
from .layout import TreeLoader
from .painting.canvas import Canvas
from .scenes import create_demo_scene, create_overflow_scene, create_toolbar_scene
from .utils.logger import get_logger, set_level

LOGGER = get_logger(__name__)

# Scene registry - maps scene names to factory functions
SCENES = {
    "demo": create_demo_scene,
    "toolbar": create_toolbar_scene,
    "overflow": create_overflow_scene,
}


def parse_size(value: str) -> tuple[int, int]:
    """Parse a WxH string into a pair of positive ints."""
    try:
        width, height = (int(part) for part in value.lower().split("x"))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected WxH, got {value!r}") from exc
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"Size must be positive, got {value!r}")
    return width, height


def parse_point(value: str) -> Offset:
    try:
        x, y = (float(part) for part in value.split(","))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected X,Y, got {value!r}") from exc
    return Offset(x, y)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Protoheight - lay out and paint a prototype-height render tree",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-s", "--scene",
        choices=list(SCENES.keys()),
        default="demo",
        help="Built-in scene to lay out (default: demo)",
    )
    source.add_argument(
        "-t", "--tree",
        metavar="PATH",
        help="YAML tree definition to lay out instead of a built-in scene",
    )
    parser.add_argument(
        "--size",
        metavar="WxH",
        type=parse_size,
        default=(400, 120),
        help="Canvas size; the root is loosely constrained to it (default: 400x120)",
    )
    parser.add_argument(
        "-r", "--render",
        metavar="PATH",
        help="Paint the tree and save the image to PATH",
    )
    parser.add_argument(
        "--hit",
        metavar="X,Y",
        type=parse_point,
        help="Hit-test a position and print the nodes that were hit",
    )
    parser.add_argument(
        "--debug-config",
        metavar="PATH",
        help="YAML file with debug settings",
    )
    parser.add_argument(
        "--no-overflow-indicator",
        action="store_true",
        help="Do not paint overflow markers",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def describe_tree(root: RenderBox) -> list[str]:
    """One line per node, indented by depth."""
    lines = []
    for node in root.iter_nodes():
        indent = "  " * node.depth
        size_info = f" {node.size.width:g}x{node.size.height:g}" if node.has_size else ""
        lines.append(f"{indent}- {node.name}{size_info}")
    return lines


def main(argv: list[str] | None = None) -> None:
    """Run protoheight."""
    args = parse_args(argv)

    if args.verbose:
        set_level(logging.DEBUG)
    if args.debug_config:
        debug_settings.update(load_debug_settings(args.debug_config))
    if args.no_overflow_indicator:
        debug_settings.paint_overflow_indicators = False

    if args.tree:
        root = TreeLoader().load(args.tree)
    else:
        root = SCENES[args.scene]()

    width, height = args.size
    owner = PipelineOwner()
    owner.set_root(root, BoxConstraints.loose(Size(width, height)))
    owner.flush_layout()

    print("Protoheight - prototype-height layout")
    print("=" * 40)
    print(f"Tree contains {len(list(root.iter_nodes()))} nodes:")
    for line in describe_tree(root):
        print(line)

    if args.hit is not None:
        result = BoxHitTestResult()
        root.hit_test(result, args.hit)
        names = ", ".join(entry.target.name for entry in result) or "nothing"
        print(f"\nHit at ({args.hit.dx:g}, {args.hit.dy:g}): {names}")

    if args.render:
        output_path = Path(args.render)
        print(f"\nPainting to {output_path} ({width}x{height})...")
        canvas = Canvas(width, height, background="#202020")
        owner.flush_paint(canvas)
        canvas.save(output_path)
        print(f"Saved render to {output_path}")
        LOGGER.info("Rendered %s", output_path)


if __name__ == "__main__":
    main()
