"""Entry point: ``python -m scrap_hunter``.

Supports three modes:
  - ``python -m scrap_hunter``        → Interactive terminal game (default)
  - ``python -m scrap_hunter cli``    → Headless scripted run with replay output
  - ``python -m scrap_hunter serve``  → FastAPI server, one command per request
"""

from __future__ import annotations

import argparse
import logging
import sys

logger = logging.getLogger(__name__)

_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Scrap Hunter grid exploration engine")
    sub = parser.add_subparsers(dest="command")

    # --- Interactive terminal (default) ---
    play = sub.add_parser("play", help="Play in the terminal (default)")
    play.add_argument("--seed", type=int, default=None, help="World seed (random if omitted)")
    play.add_argument("--map-dir", type=str, default="")
    play.add_argument("--log-level", type=str, default="WARNING", choices=_LEVELS)

    # --- Headless CLI mode ---
    cli = sub.add_parser("cli", help="Run a scripted command sequence headlessly")
    cli.add_argument("--seed", type=int, default=42)
    cli.add_argument("--commands", type=str, required=True,
                     help="Command characters, e.g. 'ddssae' (w/a/s/d/e/q, others wait)")
    cli.add_argument("--map-dir", type=str, default="")
    cli.add_argument("--replay", type=str, default="replay.json")
    cli.add_argument("--log-level", type=str, default="INFO", choices=_LEVELS)

    # --- Server mode ---
    srv = sub.add_parser("serve", help="Start the FastAPI server")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--seed", type=int, default=42)
    srv.add_argument("--map-dir", type=str, default="")
    srv.add_argument("--log-level", type=str, default="INFO", choices=_LEVELS)

    return parser


def _run_play(args: argparse.Namespace) -> None:
    import time

    from scrap_hunter.config import SimulationConfig
    from scrap_hunter.engine.session import GameSession
    from scrap_hunter.ui.terminal import TerminalUI
    from scrap_hunter.utils.logging import setup_logging

    seed = args.seed if args.seed is not None else time.time_ns() & 0x7FFFFFFF
    config = SimulationConfig(world_seed=seed, map_dir=args.map_dir, log_level=args.log_level)
    setup_logging(config.log_level, stream=sys.stderr)

    TerminalUI().play(GameSession(config))


def _run_cli(args: argparse.Namespace) -> None:
    from scrap_hunter.config import SimulationConfig
    from scrap_hunter.engine.session import GameSession
    from scrap_hunter.utils.logging import setup_logging
    from scrap_hunter.utils.replay import ReplayRecorder

    config = SimulationConfig(
        world_seed=args.seed,
        map_dir=args.map_dir,
        replay_file=args.replay,
        log_level=args.log_level,
    )
    setup_logging(config.log_level)

    recorder = ReplayRecorder(config.replay_file, config.world_seed)
    session = GameSession(config, recorder=recorder)
    if session.begin():
        for ch in args.commands:
            session.handle(ch)
            if session.over:
                break

    recorder.flush()
    logger.info(
        "Stopped on day %d at tick %d: banked %d/%d, hp %d%s",
        session.day, session.tick, session.total_banked, session.quota, session.actor.hp,
        f" ({session.end_reason})" if session.over else "",
    )


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from scrap_hunter.api.app import create_app
    from scrap_hunter.config import SimulationConfig

    config = SimulationConfig(world_seed=args.seed, map_dir=args.map_dir, log_level=args.log_level)
    app = create_app(config)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Default to play mode if no subcommand given
    if args.command is None:
        args = parser.parse_args(["play"])

    if args.command == "play":
        _run_play(args)
    elif args.command == "cli":
        _run_cli(args)
    elif args.command == "serve":
        _run_server(args)


if __name__ == "__main__":
    main()
