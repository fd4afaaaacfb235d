"""Reference renderers for generated layouts (text map and Pillow image)."""

from .ascii import render_ascii
from .colors import ROLE_COLORS, role_color
from .image import render_image, save_image

__all__ = [
    "ROLE_COLORS",
    "render_ascii",
    "render_image",
    "role_color",
    "save_image",
]
