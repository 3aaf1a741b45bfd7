"""Maze Game CLI entry point.

Provides subcommands for running the web server, printing a generated maze,
and diagnosing the structure of specific seeds. Accepts configuration via
flags and environment variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import os
import signal
import sys
from pathlib import Path
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

_color_init()

# Disable colors if output is not a real terminal (e.g., during pytest capture)
_COLOR_ENABLED = sys.stdout.isatty() and os.getenv("NO_COLOR") is None

DEFAULT_SEEDS = [292372, 730727]


def _load_version() -> str:
    try:
        return (Path(__file__).resolve().parent / "VERSION").read_text(encoding="utf-8").strip()
    except OSError:
        return "0.1.0"


__version__ = _load_version()


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Maze Game Server

    Run the JSON game server, print a generated maze, or check the structural
    invariants of specific seeds. Configuration can be provided via CLI flags
    or environment variables. If both are present, CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          HOST            Bind address for the web server (default: 0.0.0.0)
          PORT            Port for the web server (default: 5000)
          MAZE_WIDTH      Default maze width for new games (default: 150)
          MAZE_HEIGHT     Default maze height for new games (default: 150)
          MAZE_SEED       Fixed seed for new games (default: random)

        Examples:
          # Run the server on the default host and port
          python run.py server

          # Print a 41x21 maze with its solution
          python run.py generate --seed 7 --width 41 --height 21 --solve

          # Check a few seeds for cycles, gaps in the border, or unreachable cells
          python run.py diagnose 1 2 3
        """
    )

    parser = argparse.ArgumentParser(
        prog="mazegame",
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
        version=f"Maze Game Server {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    server_parser = subparsers.add_parser(
        "server",
        help="Run the web server",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Run the Flask JSON game server",
    )
    server_parser.add_argument("--host", default=None, help="Host interface to bind (default: env HOST or 0.0.0.0)")
    server_parser.add_argument("--port", type=int, default=None, help="Port to listen on (default: env PORT or 5000)")
    server_parser.add_argument("--debug", action="store_true", help="Enable Flask debug mode")
    server_parser.set_defaults(command="server")

    gen_parser = subparsers.add_parser(
        "generate",
        help="Print a generated maze",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    gen_parser.add_argument("--seed", type=int, default=None, help="Seed (default: random)")
    gen_parser.add_argument("--width", type=int, default=41, help="Grid width in cells (default: 41)")
    gen_parser.add_argument("--height", type=int, default=21, help="Grid height in cells (default: 21)")
    gen_parser.add_argument("--solve", action="store_true", help="Overlay the start->end solution")
    gen_parser.add_argument("--json", action="store_true", help="Emit JSON instead of ASCII art")
    gen_parser.set_defaults(command="generate")

    diag_parser = subparsers.add_parser(
        "diagnose",
        help="Check perfect-maze invariants for seeds",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    diag_parser.add_argument("seeds", nargs="*", type=int, help=f"Seeds to check (default: {DEFAULT_SEEDS})")
    diag_parser.add_argument("--width", type=int, default=75)
    diag_parser.add_argument("--height", type=int, default=75)
    diag_parser.set_defaults(command="diagnose")

    # If no subcommand provided, default to server
    if len(argv) == 0:
        argv = ["server"]

    return parser.parse_args(argv)


def _banner(mode: str, host: str, port: int) -> str:
    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text

    def value(val) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)

    title = f"{Fore.CYAN}{Style.BRIGHT}Maze Game Server{Style.RESET_ALL}" if _COLOR_ENABLED else "Maze Game Server"
    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    lines = [
        divider,
        f"  {title}",
        divider,
        f"  {label('Mode:'):12} {value(mode.upper())}",
        f"  {label('Host:'):12} {value(host)}",
        f"  {label('Port:'):12} {value(port)}",
        f"  {label('Maze size:'):12} {value(os.getenv('MAZE_WIDTH', '150') + 'x' + os.getenv('MAZE_HEIGHT', '150'))}",
        divider,
        "",
    ]
    return "\n".join(lines)


def run_generate(args) -> int:
    from mazegame.maze import ConfigurationError, Maze

    try:
        maze = Maze(seed=args.seed, size=(args.width, args.height)).generate()
    except ConfigurationError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1
    path = maze.solve(*maze.start) if args.solve else None
    if args.json:
        data = maze.to_json()
        if path is not None:
            data["solution"] = [list(p) for p in path]
        print(json.dumps(data))
    else:
        print(maze.to_ascii(path))
        print(f"seed={maze.seed} start={maze.start} end={maze.end}")
    return 0


def run_diagnose(args) -> int:
    from mazegame.maze import ConfigurationError
    from mazegame.maze.debug_checks import diagnose_seed

    seeds = args.seeds or DEFAULT_SEEDS
    try:
        results = [diagnose_seed(seed, size=(args.width, args.height)) for seed in seeds]
    except ConfigurationError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1
    print(json.dumps({"results": results}, indent=2))
    # Non-zero exit if any failure
    return 0 if all(r["ok"] for r in results) else 1


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    mode = (getattr(args, "command", None) or "server").lower()
    if mode == "generate":
        return run_generate(args)
    if mode == "diagnose":
        return run_diagnose(args)

    host = getattr(args, "host", None) or os.getenv("HOST", "0.0.0.0")
    port = int(getattr(args, "port", None) or os.getenv("PORT", "5000"))
    debug = bool(getattr(args, "debug", False) or os.getenv("FLASK_DEBUG") == "1")

    def handle_sigint(sig, frame):
        print("\n[INFO] Shutting down server...")
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    # Import server entrypoints only after environment is ready
    from mazegame.logging_utils import log
    from mazegame.server import start_server

    print(_banner(mode, host, port))
    log.info(event="listen", host=host, port=port, debug=debug)
    start_server(host=host, port=port, debug=debug)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
