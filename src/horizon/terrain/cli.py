"""Command-line interface for terrain generation."""

import argparse
import logging
import time

import structlog


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for terrain generation."""
    parser = argparse.ArgumentParser(
        description="Generate a deterministic side-view terrain with trees and clouds"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="World seed (default: config initial seed)"
    )
    parser.add_argument(
        "--width", type=int, default=None, help="Terrain width (default: 1864)"
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path or name of a TOML config file",
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=0,
        help="Advance the seed this many times after the first world",
    )
    parser.add_argument(
        "--validate", action="store_true", help="Validate every generated world"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )

    args = parser.parse_args(argv)

    # Configure logging
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )

    # Import here to avoid slow startup for --help
    from ..config import Config, find_config, load_config
    from ..exceptions import HorizonError
    from ..session import WorldSession
    from .validation import validate_terrain

    try:
        config = load_config(find_config(args.config)) if args.config else Config()
    except HorizonError as e:
        print(f"Error: {e}")
        return 2

    updates = {}
    if args.seed is not None:
        updates["session"] = config.session.model_copy(update={"initial_seed": args.seed})
    if args.width is not None:
        updates["terrain"] = config.terrain.model_copy(update={"width": args.width})
    if updates:
        config = config.model_copy(update=updates)

    start_time = time.time()
    try:
        session = WorldSession(config)
    except HorizonError as e:
        print(f"Error: {e}")
        return 2

    failures = 0
    worlds = [(session.seed, session.result)]
    for result in session.run_continuous(args.steps):
        worlds.append((session.seed, result))
    gen_time = time.time() - start_time

    for offset, (seed, result) in enumerate(worlds):
        stats = result.statistics
        print(
            f"seed={seed} width={len(result.profile)} "
            f"min={stats.minimum:.2f} max={stats.maximum:.2f} avg={stats.average:.2f} "
            f"water_line={stats.water_line} trees={len(result.trees)} clouds={len(result.clouds)}"
        )
        if args.validate:
            smoothing = (
                config.session.initial_smoothing_window
                if offset == 0
                else config.session.smoothing_window
            )
            validation = validate_terrain(result, config.terrain.with_smoothing(smoothing))
            if not validation.passed:
                failures += 1

    print()
    print(f"Generated {len(worlds)} worlds in {gen_time:.3f}s")

    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
