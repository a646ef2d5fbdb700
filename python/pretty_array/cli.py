import argparse
import json
import logging
import os
import sys
from typing import Optional

import numpy as np

import pretty_array

logger = logging.getLogger(__name__)

BOOL_OPTIONS = {'suppress_exp'}

def parse_and_apply_display_options(options_str: Optional[str]):
    """
    Parses a display option string (e.g., "edge_items=2, precision=3")
    and applies them to the global configuration.
    """
    if not options_str:
        return

    kwargs = {}
    try:
        settings = options_str.split(',')
        for setting in settings:
            setting = setting.strip()
            if not setting:
                continue

            if '=' not in setting:
                print(f"Warning: Invalid display option format '{setting}'. Expected 'key=value'.", file=sys.stderr)
                continue

            key, val_str = setting.split('=', 1)
            key = key.strip()
            val_str = val_str.strip()

            try:
                val = int(val_str)
            except ValueError:
                print(f"Warning: Invalid value for '{key}': '{val_str}'. Must be an integer.", file=sys.stderr)
                continue

            kwargs[key] = bool(val) if key in BOOL_OPTIONS else val

        if kwargs:
            pretty_array.set_display_options(**kwargs)

    except Exception as e:
        print(f"Warning: Error parsing display options: {e}", file=sys.stderr)

def load_array(source: str):
    """Load a nested JSON array from a file path, or stdin for '-'."""
    if source == '-':
        return json.load(sys.stdin)
    with open(source, 'r', encoding='utf-8') as f:
        return json.load(f)

def handle_demo(args):
    """Handler for the 'demo' command."""
    try:
        parse_and_apply_display_options(args.display_options)
        shape = tuple(args.shape)
        arr = np.arange(1, int(np.prod(shape)) + 1).reshape(shape)
        print(list(pretty_array.get_shape(arr)))
        print(pretty_array.render(arr), end="")

    except Exception as e:
        print(f"Error rendering demo array: {e}", file=sys.stderr)
        sys.exit(1)

def handle_render(args):
    """Handler for the 'render' command."""
    if args.input != '-' and not os.path.exists(args.input):
        print(f"Error: File not found: {args.input}", file=sys.stderr)
        sys.exit(1)

    try:
        parse_and_apply_display_options(args.display_options)
        data = load_array(args.input)
        logger.debug("Loaded array input from %s", args.input)

        if args.shape_only:
            print(list(pretty_array.get_shape(data)))
        else:
            print(pretty_array.render(data), end="")

    except Exception as e:
        print(f"Error rendering array: {e}", file=sys.stderr)
        sys.exit(1)

def main():
    # Main parser configuration
    parser = argparse.ArgumentParser(
        description="Boxed text rendering of N-dimensional arrays",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--log-level', default='WARNING', help="Logging level (e.g. DEBUG, INFO)")
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    display_help = 'Display configuration (e.g. "edge_items=2,precision=3,suppress_exp=0")'

    # --- DEMO Command ---
    p_demo = subparsers.add_parser(
        'demo',
        help="Render an iota array of the given shape",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    p_demo.add_argument('-s', '--shape', type=int, nargs='+', default=[2, 3, 7, 8], help="Array shape")
    p_demo.add_argument('-d', '--display-options', type=str, help=display_help)
    p_demo.set_defaults(func=handle_demo)

    # --- RENDER Command ---
    p_render = subparsers.add_parser(
        'render',
        help="Render a nested JSON array",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    p_render.add_argument('input', help="JSON file path, or '-' for stdin")
    p_render.add_argument('--shape-only', action='store_true', help="Only print the array shape")
    p_render.add_argument('-d', '--display-options', type=str, help=display_help)
    p_render.set_defaults(func=handle_render)

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if not args.command:
        parser.print_help()
        sys.exit(1)

    args.func(args)

if __name__ == "__main__":
    main()
