"""
Abstract base class for all debug programs.

This module defines the common interface that the debug programs (line,
polyline, line intersection) must implement.
"""

from abc import ABC, abstractmethod
from typing import List, Tuple, Optional, Dict, Any
import json
import numpy as np

from .parameter import Parameter
from ..utils.visualization import setup_display, draw_parameter_panel


class DebugApp(ABC):
    """
    Abstract base class for debug programs.

    A debug program owns a handful of editable parameters and draws
    primitives built from them onto a small pixel display.

    Attributes:
        DISPLAY_SIZE (Tuple[int, int]): (width, height) of the display in pixels
        TITLE (str): Window title
        config (Dict[str, Any]): Program configuration ('parameters' section)
    """

    DISPLAY_SIZE: Tuple[int, int] = (256, 256)
    TITLE: str = "Debugger"

    clear_color: str = 'black'
    menu_color: str = 'white'

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the program with default parameters.

        Args:
            config: Optional configuration dictionary; values under its
                'parameters' key override the defaults

        Raises:
            ValueError: If the configuration names an unknown parameter or
                holds an invalid value
        """
        self.config = config or {}
        self._initialize_app()
        self.set_parameters(self.config.get('parameters') or {})

    @abstractmethod
    def _initialize_app(self) -> None:
        """
        Set the default value of every parameter attribute.

        Subclasses must override this method.
        """
        pass

    @abstractmethod
    def parameters(self) -> List[Parameter]:
        """
        Get the editable parameters in display order.

        Returns:
            List of parameters bound to this program's attributes
        """
        pass

    @abstractmethod
    def draw(self, ax) -> None:
        """
        Draw the program's primitives on a display axis.

        Args:
            ax: Matplotlib axis set up by setup_display
        """
        pass

    @abstractmethod
    def scene_points(self) -> List[Tuple[int, int]]:
        """
        Get the points of the drawn primitives.

        Returns:
            List of (x, y) display coordinates
        """
        pass

    def describe(self) -> str:
        """Short textual status of the scene (empty by default)."""
        return ""

    def get_parameter(self, name: str) -> Parameter:
        """
        Look up a parameter by name.

        Raises:
            ValueError: If no parameter has this name
        """
        for parameter in self.parameters():
            if parameter.name == name:
                return parameter

        available = ', '.join(p.name for p in self.parameters())
        raise ValueError(f"Unknown parameter '{name}'. Available parameters: {available}")

    def set_parameters(self, values: Dict[str, Any]) -> None:
        """
        Set several parameters at once.

        String values are parsed with Parameter.assign, anything else is
        assigned directly.

        Args:
            values: Mapping from parameter name to value

        Example:
            >>> app.set_parameters({'start': [10, 20], 'stroke': '3'})
        """
        for name, value in values.items():
            parameter = self.get_parameter(name)
            if isinstance(value, str):
                parameter.assign(value)
            else:
                parameter.value = value

    def render(self, ax, show_parameters: bool = True) -> None:
        """
        Clear the display, draw the scene and the parameter panel.

        Args:
            ax: Matplotlib axis
            show_parameters: Whether to draw the parameter panel
        """
        setup_display(ax, self.DISPLAY_SIZE, self.clear_color)
        self.draw(ax)

        if show_parameters:
            draw_parameter_panel(ax, self.parameters(), self.menu_color)

    def save_scene(self, filename: str) -> None:
        """
        Save the scene points to a file.

        Supports multiple formats based on file extension:
        - .npy: NumPy binary format
        - .json: JSON format with points, parameters and description
        - .csv: Comma-separated values

        Args:
            filename: Output file path with extension

        Raises:
            ValueError: If file format is unsupported

        Example:
            >>> app.save_scene('outputs/scene.json')
        """
        points = self.scene_points()

        if filename.endswith('.npy'):
            np.save(filename, np.array(points, dtype=np.int64).reshape(-1, 2))
        elif filename.endswith('.json'):
            with open(filename, 'w') as f:
                json.dump({
                    'app': self.__class__.__name__,
                    'points': [list(p) for p in points],
                    'parameters': {p.name: p.format_value() for p in self.parameters()},
                    'description': self.describe()
                }, f, indent=2)
        elif filename.endswith('.csv'):
            np.savetxt(filename, np.array(points, dtype=np.int64).reshape(-1, 2),
                       fmt='%d', delimiter=',', header='x,y', comments='')
        else:
            raise ValueError(f"Unsupported file format: {filename}. "
                             f"Use .npy, .json, or .csv")

    def __repr__(self) -> str:
        """String representation of the program."""
        values = ', '.join(f"{p.name}={p.format_value()}" for p in self.parameters())
        return f"{self.__class__.__name__}({values})"

    def __str__(self) -> str:
        """Human-readable string representation."""
        return self.TITLE
