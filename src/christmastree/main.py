"""
Application Initialization
==========================
This module parses the runtime options, wires the scene together and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Sets up logging.
2. Creates the random source (optionally seeded) and the scene generator.
3. Instantiates the Main Window, which owns the scene and its controller.
4. Reports a failure to open the window and exits instead of retrying.
"""
from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass
from typing import Optional, Sequence

from christmastree import config
from christmastree.errors import WindowCreationError
from christmastree.logging_config import parse_level, setup_logging
from christmastree.model.generator import SceneGenerator, make_rng

logger = logging.getLogger(__name__)


@dataclass
class AppOptions:
    seed: Optional[int] = None
    log_level: int = logging.INFO
    log_file: Optional[str] = None


def parse_args(argv: Optional[Sequence[str]] = None) -> AppOptions:
    """Read options from the command line, falling back to environment variables."""
    parser = argparse.ArgumentParser(prog="christmastree", description="Animated Christmas tree.")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help=f"seed for the random scene (env: {config.ENV_SEED})",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help=f"DEBUG, INFO, WARNING, ... (env: {config.ENV_LOG_LEVEL})",
    )
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    args = parser.parse_args(argv)

    seed = args.seed
    if seed is None and os.environ.get(config.ENV_SEED):
        try:
            seed = int(os.environ[config.ENV_SEED])
        except ValueError:
            parser.error(f"{config.ENV_SEED} must be an integer")

    try:
        log_level = parse_level(args.log_level or os.environ.get(config.ENV_LOG_LEVEL))
    except ValueError as e:
        parser.error(str(e))

    return AppOptions(seed=seed, log_level=log_level, log_file=args.log_file)


def main(argv: Optional[Sequence[str]] = None) -> int:
    options = parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=options.log_level, log_file=options.log_file)

    # 2. Create the Qt Application and the Main Window
    # Imported here so that --help works without a display
    from christmastree.application import create_app
    from christmastree.view.main_window import MainWindow

    generator = SceneGenerator(make_rng(options.seed))
    try:
        app = create_app()
        window = MainWindow(generator)
        window.show()
    except WindowCreationError as e:
        logger.critical(f"Failed to launch application: {e}")
        return 1

    logger.info(f"Window '{config.WINDOW_TITLE}' shown (seed={options.seed}).")

    # 3. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
