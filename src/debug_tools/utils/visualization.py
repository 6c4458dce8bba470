"""
Visualization utilities for the debug programs.

This module provides matplotlib drawing functions that work in screen
coordinates: the origin is the top-left corner of the display, y grows
downward and one data unit is one display pixel.
"""

import matplotlib.pyplot as plt
import matplotlib.patches as patches
import numpy as np
from typing import List, Sequence, Tuple

from ..core.point import Point


# Glyph cell of the 6x8 monospace font used for labels and the parameter panel
CHAR_WIDTH = 6
CHAR_HEIGHT = 8


def create_figure(display_size: Tuple[int, int], scale: int = 3, dpi: int = 100, title: str = None):
    """
    Create a figure with one axis covering a display of the given size.

    Args:
        display_size: (width, height) of the display in pixels
        scale: Number of screen pixels per display pixel (default: 3)
        dpi: Figure resolution
        title: Optional window title

    Returns:
        Tuple of (fig, ax)

    Example:
        >>> fig, ax = create_figure((256, 256), scale=3)
    """
    width, height = display_size
    fig = plt.figure(figsize=(width * scale / dpi, height * scale / dpi), dpi=dpi)
    ax = fig.add_axes([0, 0, 1, 1])
    if title and fig.canvas.manager is not None:
        fig.canvas.manager.set_window_title(title)
    setup_display(ax, display_size)
    return fig, ax


def setup_display(ax, display_size: Tuple[int, int], background: str = 'black'):
    """
    Clear an axis and configure it as a y-down pixel display.

    Args:
        ax: Matplotlib axis
        display_size: (width, height) of the display in pixels
        background: Fill color of the display
    """
    width, height = display_size
    ax.clear()
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_aspect('equal', adjustable='box')
    ax.set_facecolor(background)
    ax.set_xticks([])
    ax.set_yticks([])


def pixels_to_points(ax, pixels: float) -> float:
    """
    Convert a length in display pixels to typographic points.

    Line widths and font sizes are given in points by matplotlib, while the
    debug programs specify them in display pixels.
    """
    x_min, x_max = ax.get_xlim()
    axis_width = ax.get_window_extent().width
    screen_pixels = pixels * axis_width / abs(x_max - x_min)
    return screen_pixels * 72.0 / ax.figure.dpi


def draw_line(ax, start: Point, end: Point, color: str, width: int = 1):
    """Draw a straight line between two points."""
    ax.plot([start.x, end.x], [start.y, end.y], color=color,
            linewidth=pixels_to_points(ax, width), solid_capstyle='butt', zorder=2)


def draw_polyline(ax, points: Sequence[Point], color: str, width: int = 1):
    """
    Draw connected line segments through a sequence of points.

    Fewer than two points draw nothing.
    """
    if len(points) < 2:
        return

    coords = np.array([p.as_tuple() for p in points])
    ax.plot(coords[:, 0], coords[:, 1], color=color,
            linewidth=pixels_to_points(ax, width), solid_joinstyle='miter', zorder=2)


def draw_circle(ax, center: Point, diameter: int, color: str, width: int = 1):
    """Draw the outline of a circle."""
    circle = patches.Circle(
        (center.x, center.y),
        diameter / 2,
        fill=False,
        edgecolor=color,
        linewidth=pixels_to_points(ax, width),
        zorder=4
    )
    ax.add_patch(circle)


def draw_text(ax, text: str, position: Tuple[int, int], color: str):
    """
    Draw text with its top-left corner at a display position.

    Args:
        ax: Matplotlib axis
        text: Text to draw
        position: (x, y) of the top-left corner in display pixels
        color: Text color
    """
    ax.text(position[0], position[1], text, color=color,
            fontsize=pixels_to_points(ax, CHAR_HEIGHT), family='monospace',
            ha='left', va='top', zorder=5)


def draw_parameter_panel(ax, parameters: List, color: str, origin: Tuple[int, int] = (2, 2)):
    """
    Draw the list of parameter names and values.

    Names are drawn in one column and values aligned in a second column
    after the longest name, one row per parameter.

    Args:
        ax: Matplotlib axis
        parameters: Parameters providing ``name`` and ``format_value()``
        color: Text color
        origin: Top-left corner of the panel in display pixels
    """
    max_name_width = max((len(parameter.name) for parameter in parameters), default=0)

    name_x = origin[0] + CHAR_WIDTH
    value_x = name_x + (max_name_width + 1) * CHAR_WIDTH
    y = origin[1]

    for parameter in parameters:
        draw_text(ax, parameter.name, (name_x, y), color)
        draw_text(ax, parameter.format_value(), (value_x, y), color)
        y += CHAR_HEIGHT


def save_figure(fig, filename: str, dpi: int = 150):
    """
    Save a figure to an image file.

    Args:
        fig: Matplotlib figure
        filename: Output filename (e.g., 'line.png')
        dpi: Output resolution
    """
    fig.savefig(filename, dpi=dpi, facecolor=fig.get_facecolor())
    print(f"Figure saved as '{filename}'")
