#!/usr/bin/env python3
"""
run.py - Main entry point for canvas-connect4
"""

import argparse
import sys

from canvas_connect4.config import DisplayConfig
from canvas_connect4.debug import debug, DebugLevel

# --- Utility Functions ---

def configure_debug(args):
    """Configure debug output from args.debug, args.debug_level and args.log_file."""
    if args.debug:
        debug.configure(level=DebugLevel.DEBUG)
    else:
        debug.set_from_string(args.debug_level)
    debug.configure(log_file=args.log_file)
    if args.components:
        debug.configure(components=[c.strip() for c in args.components.split(',')])


def display_config(args) -> DisplayConfig:
    """Build the display settings from the command line flags."""
    config = DisplayConfig()
    for name in ('width', 'height', 'disc_radius', 'spacing', 'fps'):
        value = getattr(args, name, None)
        if value is not None:
            setattr(config, name, value)
    return config

# --- Command Handlers ---

def handle_play(args):
    """Open the game window."""
    from canvas_connect4.interfaces.gui import PygameApp

    app = PygameApp(display_config(args))
    app.run(max_frames=args.max_frames)


def handle_tool(args):
    """Run one of the headless commands (test, benchmark, snapshot)."""
    from canvas_connect4.interfaces.cli import SimpleCLI

    cli = SimpleCLI(args, display_config(args))
    if args.command == 'test':
        cli.test_position()
    elif args.command == 'benchmark':
        cli.benchmark()
    elif args.command == 'snapshot':
        cli.snapshot()

# --- Main Entry Point ---

def build_parser():
    parser = argparse.ArgumentParser(
        description='Two-player Connect Four on an interactive canvas',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
    Examples:

    # Play in a window (click a column to drop a disc, R restarts, Esc quits)
    python run.py play

    # Play on a smaller canvas with info logging
    python run.py play --width 800 --height 760 --debug_level info

    # Analyse a position (42 values, top row first, 0 empty / 1 / 2)
    python run.py test --position 0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,2,2,2,1,1,1,1

    # Benchmark the engine and the headless renderer
    python run.py benchmark --iterations 5000

    # Render a move sequence (board columns) to a numpy file
    python run.py snapshot --moves 3,3,4,4,5,5,6 --output frame.npy
    """
    )
    parser.add_argument('command',
        choices=['play', 'test', 'benchmark', 'snapshot'],
        help='play (open the game window), test (analyse a position), '
             'benchmark (performance testing), snapshot (render moves headlessly)')

    log_group = parser.add_argument_group('Logging options')
    log_group.add_argument('--debug',
        action='store_true',
        help='Enable debug mode (equivalent to --debug_level debug)')
    log_group.add_argument('--debug_level',
        choices=['none', 'error', 'warning', 'info', 'debug', 'trace'],
        default='warning',
        help='Set debug level: none (silent), error, warning, info, debug, trace (most verbose)')
    log_group.add_argument('--log_file',
        type=str,
        default=None,
        help='Also write log output to this file')
    log_group.add_argument('--components',
        type=str,
        help='Comma-separated components to log (board, session, render, gui)')

    display_group = parser.add_argument_group('Display options')
    display_group.add_argument('--width', type=int, help='Canvas width in pixels')
    display_group.add_argument('--height', type=int, help='Canvas height in pixels')
    display_group.add_argument('--disc_radius', type=int, help='Disc radius in pixels')
    display_group.add_argument('--spacing', type=int, help='Gap between discs in pixels')
    display_group.add_argument('--fps', type=int, help='Frames per second')
    display_group.add_argument('--max_frames',
        type=int,
        default=None,
        help='Close the window after this many frames (used with play)')

    tool_group = parser.add_argument_group('Tool options')
    tool_group.add_argument('--position',
        type=str,
        help='Board position to test (comma-separated values for test command)')
    tool_group.add_argument('--iterations',
        type=int,
        default=1000,
        help='Number of iterations for benchmarking')
    tool_group.add_argument('--moves',
        type=str,
        help='Comma-separated board columns to play (used with snapshot)')
    tool_group.add_argument('--output',
        type=str,
        help='Save the snapshot frame to this .npy file')
    return parser


def main(argv=None):
    """Main entry point for canvas-connect4."""
    args = build_parser().parse_args(argv)
    configure_debug(args)

    if args.command == 'play':
        handle_play(args)
    else:
        handle_tool(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
