"""
Main entry point for the debug programs.

This CLI renders one of the debug programs with parameters taken from YAML
configuration files and command line overrides.
"""

import argparse
import sys
from pathlib import Path
import matplotlib.pyplot as plt
import yaml

from .apps import LineDebug, PolylineDebug, LineIntersectionDebug
from .utils.config_loader import (
    load_app_config, parse_overrides, parse_nudges, get_display_settings,
)
from .utils.visualization import create_figure, save_figure


APP_MAP = {
    'line': LineDebug,
    'polyline': PolylineDebug,
    'line_intersection': LineIntersectionDebug
}


def run_app(app_name: str, config_dir: str = 'configs', overrides=None, nudges=None,
            visualize: bool = True, save: bool = False) -> int:
    """
    Run a debug program.

    Args:
        app_name: Name of the program ('line', 'polyline', 'line_intersection')
        config_dir: Directory containing configuration files
        overrides: Optional list of 'NAME=VALUE' parameter overrides
        nudges: Optional list of 'NAME=DX[,DY]' saturating steps, applied after
            the overrides
        visualize: Whether to show the display window
        save: Whether to save the figure and the scene data

    Returns:
        Process exit status (0 on success, 1 on error)
    """
    if app_name not in APP_MAP:
        print(f"Error: Unknown app '{app_name}'")
        print(f"Available apps: {', '.join(APP_MAP.keys())}")
        return 1

    # Load configuration
    try:
        config = load_app_config(app_name, config_dir)
    except FileNotFoundError as e:
        print(f"{e}. Using built-in defaults.")
        config = {'app': {}, 'visualization': {}, 'output': {}}
    except (ValueError, yaml.YAMLError) as e:
        print(f"Error loading configuration: {e}")
        return 1

    # Create program and apply overrides
    AppClass = APP_MAP[app_name]
    try:
        app = AppClass(config['app'])
        app.set_parameters(parse_overrides(overrides or []))
        for name, dx, dy in parse_nudges(nudges or []):
            app.get_parameter(name).adjust(dx, dy)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print(f"\n{'='*60}")
    print(app.TITLE)
    print(f"{'='*60}\n")

    print("Parameters:")
    for parameter in app.parameters():
        print(f"  {parameter.name}: {parameter.format_value()}")

    description = app.describe()
    if description:
        print(f"\nResult: {description}")
    print()

    if not visualize and not save:
        return 0

    scale, show_parameters = get_display_settings(config)
    fig, ax = create_figure(app.DISPLAY_SIZE, scale=scale, title=app.TITLE)
    app.render(ax, show_parameters=show_parameters)

    if save:
        output_config = config.get('output', {})
        save_path = Path(output_config.get('save_path', f'outputs/{app_name}/'))
        save_path.mkdir(parents=True, exist_ok=True)

        save_figure(fig, str(save_path / output_config.get('plot_filename', f'{app_name}.png')))

        scene_file = save_path / output_config.get('scene_filename', 'scene.json')
        app.save_scene(str(scene_file))
        print(f"Scene data saved to: {scene_file}")

    if visualize:
        plt.show()

    plt.close(fig)
    return 0


def main():
    """Main entry point with command-line argument parsing."""
    parser = argparse.ArgumentParser(
        description='Drawing primitive debug programs',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show the line intersection debugger
  debug-tools --app line_intersection

  # Move the second line and print the result without a window
  debug-tools --app line_intersection --set l2_start=100,100 --set l2_end=200,90 --no-viz

  # Render a thicker polyline with three points and save it
  debug-tools --app polyline --set points=3 --set stroke=15 --save

  # Step the second line's end one pixel right and up
  debug-tools --app line_intersection --nudge l2_end=1,-1 --no-viz

  # Use custom config directory
  debug-tools --app line --config-dir ../my_configs
        """
    )

    parser.add_argument(
        '--app', '-a',
        type=str,
        choices=list(APP_MAP.keys()),
        required=True,
        help='Debug program to run'
    )

    parser.add_argument(
        '--config-dir', '-c',
        type=str,
        default='configs',
        help='Directory containing YAML configuration files (default: configs)'
    )

    parser.add_argument(
        '--set', '-p',
        dest='overrides',
        action='append',
        default=[],
        metavar='NAME=VALUE',
        help='Override a parameter, e.g. l1_start=10,20 (repeatable)'
    )

    parser.add_argument(
        '--nudge', '-n',
        dest='nudges',
        action='append',
        default=[],
        metavar='NAME=DX[,DY]',
        help='Step a parameter, clamped to its range, e.g. l2_end=1,-1 (repeatable)'
    )

    parser.add_argument(
        '--save', '-s',
        action='store_true',
        help='Save output files (figure and scene data)'
    )

    parser.add_argument(
        '--no-viz',
        action='store_true',
        help='Disable visualization'
    )

    args = parser.parse_args()

    # Run the program
    sys.exit(run_app(
        app_name=args.app,
        config_dir=args.config_dir,
        overrides=args.overrides,
        nudges=args.nudges,
        visualize=not args.no_viz,
        save=args.save
    ))


if __name__ == '__main__':
    main()
