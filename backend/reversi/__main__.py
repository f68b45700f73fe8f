#!/usr/bin/env python3
"""
Reversi - Main Entry Point
"""

import argparse
import logging
import sys

import uvicorn

from .config import AIStrategy, load_config, load_server_config, parse_player
from .console import ConsoleView, run
from .errors import ConfigurationError
from .game import GameController
from .server import create_app


def _player_arg(value: str) -> int:
    try:
        return parse_player(value)
    except ConfigurationError as e:
        raise argparse.ArgumentTypeError(e.message)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="reversi", description="Play Reversi")
    parser.add_argument("command", nargs="?", choices=["serve", "play"], default="serve")
    parser.add_argument("--no-ai", action="store_true", help="two human players")
    parser.add_argument("--ai-player", type=_player_arg, help="black or white")
    parser.add_argument("--ai-strategy", choices=[s.value for s in AIStrategy])
    parser.add_argument("--seed", type=int)
    parser.add_argument("--host")
    parser.add_argument("--port", type=int)
    return parser


def main(argv=None) -> int:
    args = create_parser().parse_args(argv)

    try:
        config = load_config()
        server_config = load_server_config()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    overrides = {}
    if args.no_ai:
        overrides["opponent_is_ai"] = False
    if args.ai_player is not None:
        overrides["ai_player"] = args.ai_player
    if args.ai_strategy:
        overrides["ai_strategy"] = AIStrategy(args.ai_strategy)
    if args.seed is not None:
        overrides["seed"] = args.seed
    config = config.model_copy(update=overrides)

    server_overrides = {}
    if args.host:
        server_overrides["host"] = args.host
    if args.port is not None:
        server_overrides["port"] = args.port
    server_config = server_config.model_copy(update=server_overrides)

    logging.basicConfig(
        level=server_config.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command == "play":
        view = ConsoleView()
        game = GameController(config, listener=view)
        run(game, view)
        return 0

    print("Starting Reversi server...")
    print(f"Server will be available at: http://localhost:{server_config.port}")
    print(f"API documentation: http://localhost:{server_config.port}/docs")
    print("Press Ctrl+C to stop the server")

    uvicorn.run(
        create_app(config),
        host=server_config.host,
        port=server_config.port,
        log_level=server_config.log_level,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
