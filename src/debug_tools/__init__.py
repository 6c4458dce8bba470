"""
Debug Tools - Interactive debugging harness for 2-D drawing primitives

A small set of debug programs that render line, polyline and line intersection
scenes from editable parameters, built around an integer-exact line
intersection routine.

Modules:
    core: Integer point arithmetic, linear equations and line intersection
    apps: Debug programs and their editable parameters
    utils: YAML configuration management and matplotlib drawing helpers
    main: Command line entry point
"""

__version__ = "0.1.0"
