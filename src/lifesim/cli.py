"""
Command line entry point: play a preset in the terminal or summarize a headless run
"""
import argparse
import sys

from .config import PRESETS, get_preset
from .evaluation.metrics import summarize_run
from .utils.patterns import PATTERN_CATEGORIES
from .utils.runner import SimulationRunner, simulate


def build_parser():
    parser = argparse.ArgumentParser(prog='lifesim',
                                     description="Conway's Game of Life in the terminal")
    parser.add_argument('preset', nargs='?', default='glider',
                        choices=sorted(PRESETS), help='Starting configuration')
    parser.add_argument('--rows', type=int, help='Grid rows')
    parser.add_argument('--cols', type=int, help='Grid columns')
    parser.add_argument('--boundary', type=str, choices=['clamped', 'toroidal', 'wrap'],
                        help='Edge handling')
    parser.add_argument('--pattern', nargs=3, action='append', metavar=('NAME', 'ROW', 'COL'),
                        help='Place a pattern (repeatable, replaces the preset patterns)')
    parser.add_argument('--generations', type=int, default=None,
                        help='Stop after this many generations (default: run until Ctrl+C)')
    parser.add_argument('--delay', type=float, help='Delay between generations in ms')
    parser.add_argument('--alive', type=str, help='Glyph for live cells')
    parser.add_argument('--dead', type=str, help='Glyph for dead cells')
    parser.add_argument('--separator', type=str, help='String drawn after every cell')
    parser.add_argument('--no-clear', action='store_true',
                        help='Do not clear the screen between generations')
    parser.add_argument('--summary', action='store_true',
                        help='Run headless and print run statistics')
    parser.add_argument('--progress', action='store_true',
                        help='Show a progress bar in --summary mode')
    parser.add_argument('--list-patterns', action='store_true',
                        help='List available patterns and exit')
    return parser


def list_patterns(stream):
    for category, patterns in PATTERN_CATEGORIES.items():
        stream.write(f"{category}: {', '.join(patterns)}\n")


def main(argv=None, stream=None, sleep=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    stream = stream if stream is not None else sys.stdout

    if args.list_patterns:
        list_patterns(stream)
        return 0

    if args.generations is not None and args.generations < 0:
        parser.error(f"--generations must be non-negative, got {args.generations}")

    placements = None
    if args.pattern:
        try:
            placements = tuple((name, int(row), int(col)) for name, row, col in args.pattern)
        except ValueError:
            parser.error("--pattern ROW and COL must be integers")

    try:
        config = get_preset(args.preset).with_overrides(
            rows=args.rows,
            cols=args.cols,
            boundary=args.boundary,
            placements=placements,
            delay_ms=args.delay,
            alive_glyph=args.alive,
            dead_glyph=args.dead,
            cell_separator=args.separator,
            clear_screen=False if args.no_clear else None,
        )
        grid = config.build_grid()
    except ValueError as e:
        parser.error(str(e))

    if args.summary:
        num_steps = args.generations if args.generations is not None else 100
        trajectory = simulate(grid, num_steps, show_progress=args.progress)
        stream.write(f"Preset: {args.preset} ({config.rows}x{config.cols}, {config.boundary})\n")
        for key, value in summarize_run(trajectory).items():
            stream.write(f"  {key}: {value}\n")
        return 0

    runner_kwargs = {}
    if sleep is not None:
        runner_kwargs['sleep'] = sleep
    runner = SimulationRunner(
        grid,
        renderer=config.build_renderer(),
        delay_ms=config.delay_ms,
        max_generations=args.generations,
        stream=stream,
        clear_screen=config.clear_screen,
        **runner_kwargs
    )
    try:
        runner.run()
    except KeyboardInterrupt:
        stream.write(f"\nStopped at generation {grid.generation}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
