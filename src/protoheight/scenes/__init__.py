"""Pre-built scenes for protoheight."""

from .demo import create_demo_scene, create_overflow_scene, create_toolbar_scene

__all__ = ["create_demo_scene", "create_overflow_scene", "create_toolbar_scene"]
