"""Geometry tests between the chicken and the saws."""

from __future__ import annotations

import math


def check_circle_collision(rect1, rect2) -> bool:
    """Treat both rectangles as circles slightly smaller than their width."""
    cx1 = rect1.x + rect1.w / 2
    cy1 = rect1.y + rect1.h / 2
    cx2 = rect2.x + rect2.w / 2
    cy2 = rect2.y + rect2.h / 2
    radius1 = (rect1.w - 4) / 2
    radius2 = (rect2.w - 4) / 2
    return math.hypot(cx2 - cx1, cy2 - cy1) < radius1 + radius2


def check_jump_over_saw(chicken_rect, saw_rect) -> bool:
    """True when the chicken is wholly above the saw and horizontally over it."""
    is_higher = chicken_rect.y + chicken_rect.h < saw_rect.y
    dx = abs((saw_rect.x + saw_rect.w / 2) - (chicken_rect.x + chicken_rect.w / 2))
    is_aligned = dx < (chicken_rect.w + saw_rect.w) / 2
    return is_higher and is_aligned