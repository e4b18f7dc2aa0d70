import argparse
import sys
import xml.etree.ElementTree as ET

from .config import load_config, validate_config
from .core.errors import SvgLevelError
from .core.svg_loader import build_paths
from .core.exporter import LevelExporter, MODES
from .core.visualization import plot_segments


def build_parser():
    parser = argparse.ArgumentParser(
        prog='svg2level',
        description="Export SVG path outlines as level line segments")
    parser.add_argument('input', help="Path to SVG")
    parser.add_argument('-o', '--output', type=str, help="Output file (default: stdout)")
    parser.add_argument('--config', type=str, help="JSON config overriding the defaults")
    parser.add_argument('--mode', choices=MODES,
                        help="named: all outlines with names, first: first outline only, unnamed")
    parser.add_argument('--block-name', type=str, help="Name of the emitted block (default: Level)")
    parser.add_argument('--strict-moveto', action='store_true',
                        help="Reject relative moveto (m) like any other unsupported command")
    parser.add_argument('--debug', action='store_true', help="Log every group and path visited")
    parser.add_argument('--plot', action='store_true', help="Show a preview of the segments")
    parser.add_argument('--plot-file', type=str, help="Save the preview to an image file")
    return parser


def apply_overrides(config, args):
    if args.mode: config['export']['mode'] = args.mode
    if args.block_name: config['export']['block_name'] = args.block_name
    if args.strict_moveto: config['path']['relative_moveto'] = False
    if args.debug: config['debug'] = True
    return validate_config(config)


def run(args):
    config = apply_overrides(load_config(args.config), args)

    print(f"[Input] Loading {args.input}...", file=sys.stderr)
    outlines = build_paths(args.input,
                           relative_moveto=config['path']['relative_moveto'],
                           debug=config['debug'])

    segments = LevelExporter.export(args.output, outlines, args.input, config)

    if args.plot or args.plot_file:
        plot_segments(segments, title=args.input, output=args.plot_file)


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        run(args)
    except SvgLevelError as e:
        print(f"[Error] {e}", file=sys.stderr)
        return 1
    except ET.ParseError as e:
        print(f"[Error] Failed to parse XML: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"[Error] {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
