"""Labyrinth CLI entry point.

Provides subcommands for running the maze API server, printing generated
mazes and their solutions, and running the built-in self test. Accepts
configuration via flags and environment variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import os
import signal
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

_color_init()
_COLOR_ENABLED = True

# Disable colors if output is not a real terminal (e.g., during pytest capture)
try:
    if not sys.stdout.isatty():  # pragma: no cover - environment dependent
        _COLOR_ENABLED = False
except (AttributeError, ValueError):  # pragma: no cover
    _COLOR_ENABLED = False

ALGORITHM_CHOICES = (
    "recursive-backtracking",
    "binary-tree",
    "eller",
    "prim",
    "recursive-division",
)
SIZE_CHOICES = ("small", "medium", "large")


def _load_version() -> str:
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "VERSION")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return "0.1.0"


__version__ = _load_version()


def _dimension(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {raw!r}")
    if value < 2:
        raise argparse.ArgumentTypeError(f"dimension must be >= 2, got {value}")
    return value


def _add_maze_options(sub: argparse.ArgumentParser) -> None:
    sub.add_argument("--width", type=_dimension, default=None, help="Maze width in cells (overrides --size)")
    sub.add_argument("--height", type=_dimension, default=None, help="Maze height in cells (overrides --size)")
    sub.add_argument(
        "--size",
        choices=SIZE_CHOICES,
        default=None,
        help="Size preset: small 15x15, medium 25x25, large 35x35 (default: env MAZE_DEFAULT_SIZE or medium)",
    )
    sub.add_argument(
        "--algorithm",
        choices=ALGORITHM_CHOICES,
        default=None,
        help="Generation algorithm (default: env MAZE_DEFAULT_ALGORITHM or recursive-backtracking)",
    )
    sub.add_argument("--seed", type=int, default=None, help="Seed for reproducible mazes (default: random)")
    sub.add_argument("--json", action="store_true", help="Print JSON instead of an ASCII drawing")


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Labyrinth Maze Engine

    Generate, solve and validate grid mazes from the command line, or run the
    JSON API server. Configuration can be provided via CLI flags or environment
    variables. If both are present, CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          HOST                    Bind address for the web server (default: 0.0.0.0)
          PORT                    Port for the web server (default: 5000)
          MAZE_DEFAULT_SIZE       Size preset used when no dimensions are given (default: medium)
          MAZE_DEFAULT_ALGORITHM  Algorithm used when none is given (default: recursive-backtracking)
          MAZE_MAX_DIMENSION      Largest width/height accepted by the API (default: 200)
          MAZE_DISABLE_CACHE      Set to 1 to regenerate API mazes on every request
          LABYRINTH_LOG_LEVEL     debug | info | warn | error (default: info)

        Examples:
          # Run the server on the default host and port
          python run.py server

          # Print a small Prim maze with a fixed seed
          python run.py generate --size small --algorithm prim --seed 42

          # Print the solution path through a 30x20 Eller maze
          python run.py solve --width 30 --height 20 --algorithm eller

          # Run the self test (exit status 1 on failure)
          python run.py selftest
        """
    )

    parser = argparse.ArgumentParser(
        prog="Labyrinth",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Labyrinth Maze Engine {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    # server subcommand
    server_parser = subparsers.add_parser(
        "server",
        help="Run the maze JSON API server",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Run the Flask maze API server",
    )
    server_parser.add_argument(
        "--host",
        default=None,
        help="Host interface to bind (default: env HOST or 0.0.0.0)",
    )
    server_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (default: env PORT or 5000)",
    )
    server_parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable Flask debug mode with verbose error pages",
    )
    server_parser.set_defaults(command="server")

    # generate subcommand
    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a maze and print it",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    _add_maze_options(gen_parser)
    gen_parser.set_defaults(command="generate")

    # solve subcommand
    solve_parser = subparsers.add_parser(
        "solve",
        help="Generate a maze and print it with the solution path marked",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    _add_maze_options(solve_parser)
    solve_parser.set_defaults(command="solve")

    # selftest subcommand
    selftest_parser = subparsers.add_parser(
        "selftest",
        help="Run generation/connectivity/boundary/performance checks",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    selftest_parser.add_argument("--seed", type=int, default=None, help="Base seed for reproducible runs")
    selftest_parser.add_argument("--json", action="store_true", help="Print raw JSON results")
    selftest_parser.set_defaults(command="selftest")

    # If no subcommand provided, default to server
    if len(argv) == 0:
        argv = ["server"]

    args = parser.parse_args(argv)
    return args


def _build_maze(args):
    from labyrinth.maze import Maze, preset_dimensions

    size = args.size or os.getenv("MAZE_DEFAULT_SIZE", "medium")
    width, height = preset_dimensions(size)
    return Maze(
        width=args.width or width,
        height=args.height or height,
        algorithm=args.algorithm or os.getenv("MAZE_DEFAULT_ALGORITHM", "recursive-backtracking"),
        seed=args.seed,
    )


def _run_generate(args, show_solution: bool) -> int:
    maze = _build_maze(args)
    if args.json:
        print(json.dumps(maze.to_json(include_solution=show_solution)))
        return 0
    print(maze.to_ascii(show_solution=show_solution))
    summary = f"{maze.algorithm} {maze.width}x{maze.height} seed={maze.seed}"
    if show_solution:
        summary += f" path_length={len(maze.solution)}"
    print(summary)
    return 0


def _run_selftest(args) -> int:
    from labyrinth.maze.diagnostics import format_report, run_self_test

    results = run_self_test(seed=args.seed)
    if args.json:
        print(json.dumps(results, indent=2))
    else:
        print(format_report(results))
    return 0 if results["ok"] else 1


def _print_banner(mode: str, host: str, port: int) -> None:
    title = (
        f"{Fore.CYAN}{Style.BRIGHT}Labyrinth Maze Server{Style.RESET_ALL}"
        if _COLOR_ENABLED
        else "Labyrinth Maze Server"
    )

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text

    def value(val: str | int) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)

    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    lines = [
        divider,
        f"  {title}",
        divider,
        f"  {label('Mode:'):12} {value(mode.upper())}",
        f"  {label('Host:'):12} {value(host)}",
        f"  {label('Port:'):12} {value(port)}",
        f"  {label('Algorithm:'):12} {value(os.getenv('MAZE_DEFAULT_ALGORITHM', 'recursive-backtracking'))}",
        f"  {label('Size:'):12} {value(os.getenv('MAZE_DEFAULT_SIZE', 'medium'))}",
        divider,
        "",
    ]
    print("\n".join(lines))


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    mode = (getattr(args, "command", None) or "server").lower()

    # Keep stdout parseable when emitting JSON
    if getattr(args, "json", False):
        os.environ.setdefault("LABYRINTH_LOG_LEVEL", "error")

    from labyrinth.logging_utils import log

    if mode == "generate":
        return _run_generate(args, show_solution=False)
    elif mode == "solve":
        return _run_generate(args, show_solution=True)
    elif mode == "selftest":
        return _run_selftest(args)

    # Resolve configuration from CLI flags or env vars
    env_host = os.getenv("HOST", "0.0.0.0")
    env_port = int(os.getenv("PORT", "5000"))
    host = getattr(args, "host", None) or env_host
    port = int(getattr(args, "port", None) or env_port)

    def handle_sigint(sig, frame):
        print("\n[INFO] Shutting down server...")
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    # Import server entrypoints only after environment is ready
    from labyrinth.server import start_server

    _print_banner(mode, host, port)
    log.info(event="startup", mode=mode, host=host, port=port)
    start_server(host=host, port=port, debug=getattr(args, "debug", False))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
