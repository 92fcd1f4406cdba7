"""Image loading shared by the game's sprites."""

from __future__ import annotations

import os
import sys

import pygame


def load_texture(path: str | os.PathLike[str]) -> pygame.Surface | None:
    """Load an image file, or report the failure and return None.

    A missing texture is not fatal: sprites without one simply draw nothing.
    """
    try:
        surface = pygame.image.load(os.fspath(path))
    except (pygame.error, OSError) as exc:
        print(f"Cannot load {os.fspath(path)}: {exc}", file=sys.stderr)
        return None
    if pygame.display.get_surface() is not None:
        surface = surface.convert_alpha()
    return surface