"""
YAML configuration file loader for the debug programs.

This module provides utilities to load configuration files holding the
initial parameter values, visualization settings and output locations of
each debug program.
"""

import yaml
from typing import Dict, Any, List, Tuple
from pathlib import Path


def load_yaml_config(filepath: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filepath: Path to YAML file

    Returns:
        Dictionary containing configuration parameters

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If file is not valid YAML

    Example:
        >>> config = load_yaml_config('configs/line.yaml')
        >>> print(config['app']['parameters']['start'])
        [128, 128]
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Config file not found: {filepath}")

    with open(filepath, 'r') as f:
        try:
            config = yaml.safe_load(f)
            return config if config is not None else {}
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Error parsing YAML file {filepath}: {e}")


def load_app_config(app_name: str, config_dir: str = 'configs') -> Dict[str, Any]:
    """
    Load the configuration of one debug program.

    Args:
        app_name: Name of the program ('line', 'polyline', 'line_intersection')
        config_dir: Directory containing config files (default: 'configs')

    Returns:
        Dictionary with the sections 'app', 'visualization' and 'output';
        sections missing from the file are empty

    Raises:
        FileNotFoundError: If the program's config file doesn't exist
        ValueError: If a section or app.parameters is not a mapping, or if
            visualization.scale is not a positive integer

    Example:
        >>> config = load_app_config('line_intersection')
        >>> config['app']['parameters']['l1_start']
        [150, 170]
    """
    config_path = Path(config_dir) / f'{app_name}.yaml'
    config = load_yaml_config(str(config_path))

    sections = {}
    for section in ('app', 'visualization', 'output'):
        value = config.get(section) or {}
        if not isinstance(value, dict):
            raise ValueError(f"Section '{section}' in {config_path} must be a mapping")
        sections[section] = value

    parameters = sections['app'].get('parameters')
    if parameters is not None and not isinstance(parameters, dict):
        raise ValueError(f"'app.parameters' in {config_path} must be a mapping")

    scale = sections['visualization'].get('scale', 3)
    if isinstance(scale, bool) or not isinstance(scale, int) or scale < 1:
        raise ValueError(f"'visualization.scale' in {config_path} must be a positive integer, "
                         f"got {scale!r}")

    return sections


def parse_overrides(assignments) -> Dict[str, str]:
    """
    Parse ``NAME=VALUE`` parameter overrides.

    Args:
        assignments: Iterable of strings such as 'l1_start=10,20'

    Returns:
        Dictionary mapping parameter names to their unparsed values

    Raises:
        ValueError: If an assignment has no '=' or an empty name

    Example:
        >>> parse_overrides(['stroke=3', 'start=(1, 2)'])
        {'stroke': '3', 'start': '(1, 2)'}
    """
    overrides = {}
    for assignment in assignments:
        name, sep, value = assignment.partition('=')
        name = name.strip()
        if not sep or not name:
            raise ValueError(f"Invalid parameter override '{assignment}', expected NAME=VALUE")
        overrides[name] = value.strip()
    return overrides


def parse_nudges(assignments) -> List[Tuple[str, int, int]]:
    """
    Parse ``NAME=DX[,DY]`` parameter nudges.

    Args:
        assignments: Iterable of strings such as 'l2_end=1,-1' or 'stroke=-2'

    Returns:
        List of (name, dx, dy) in the given order; dy defaults to 0

    Raises:
        ValueError: If an assignment is not NAME=DX or NAME=DX,DY with integer steps

    Example:
        >>> parse_nudges(['stroke=2', 'start=-1,3'])
        [('stroke', 2, 0), ('start', -1, 3)]
    """
    nudges = []
    for assignment in assignments:
        name, sep, steps = assignment.partition('=')
        name = name.strip()
        parts = [part.strip() for part in steps.split(',')]
        if not sep or not name or len(parts) > 2:
            raise ValueError(f"Invalid parameter nudge '{assignment}', expected NAME=DX[,DY]")
        try:
            dx = int(parts[0])
            dy = int(parts[1]) if len(parts) == 2 else 0
        except ValueError:
            raise ValueError(f"Invalid parameter nudge '{assignment}', "
                             f"steps must be integers") from None
        nudges.append((name, dx, dy))
    return nudges


def get_display_settings(config: Dict[str, Any]) -> Tuple[int, bool]:
    """
    Extract visualization settings from configuration.

    Args:
        config: Configuration from load_app_config

    Returns:
        Tuple of (scale, show_parameters)
    """
    vis = config.get('visualization', {})
    return vis.get('scale', 3), bool(vis.get('show_parameters', True))
