"""CLI entrypoint: load a rule table, run the automaton, render the grid.

Supports ``--config path/to/config.json``. CLI arguments override config-file
values; config-file values override built-in defaults.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

from turmite.config.constants import (
    CELL_SCALE,
    GRID_SIZE,
    NUM_STEPS,
    OUTPUT_PATH,
    PROGRAM_PATH,
)
from turmite.config.types import RunConfig
from turmite.domain.errors import TurmiteError
from turmite.domain.grid import Grid
from turmite.domain.rules import RuleTable, ant_rule_table
from turmite.domain.turmite import Turmite
from turmite.io.grid_store import write_grid
from turmite.io.rule_file import load_rules
from turmite.simulation.engine import run_steps, summarize
from turmite.viz.render import render_figure, render_grid
from turmite.viz.theme import Theme, get_theme

logger = logging.getLogger(__name__)

EXIT_RUN_FAILURE = 1
EXIT_CONFIG_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="turmite", description="Run a turmite and render the final grid"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-p", "--prog", type=Path, default=None, help="File containing the turmite program"
    )
    source.add_argument(
        "--ant", type=str, default=None, help="Langton's-ant turn string, e.g. RL or LLRR"
    )
    parser.add_argument("-s", "--size", type=int, default=None, help="Edge size of the grid")
    parser.add_argument("--steps", type=int, default=None, help="Number of steps")
    parser.add_argument("-o", "--output", type=Path, default=None, help="Image output path")
    parser.add_argument("--scale", type=int, default=None, help="Pixels per cell edge")
    parser.add_argument("--theme", type=str, default=None, help="Palette preset (default, paper)")
    parser.add_argument(
        "--grid-out", type=Path, default=None, help="Also export the final grid as Parquet"
    )
    parser.add_argument(
        "--figure", type=Path, default=None, help="Also write an annotated figure"
    )
    parser.add_argument(
        "--render-partial",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Render the grid of a failed run for debugging",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _build_config(args: argparse.Namespace) -> RunConfig:
    """Merge CLI args over config-file values over built-in defaults."""
    file_cfg: dict[str, object] = {}
    if args.config is not None:
        file_cfg = json.loads(Path(args.config).read_text())
        if not isinstance(file_cfg, dict):
            raise ValueError("config file must contain a JSON object")

    def _get(cli_val: object, key: str, default: object) -> object:
        if cli_val is not None:
            return cli_val
        return file_cfg.get(key, default)

    def _get_path(cli_val: Path | None, key: str) -> Path | None:
        value = _get(cli_val, key, None)
        return None if value is None else Path(str(value))

    ant_raw = _get(args.ant, "ant", None)
    if args.prog is not None:
        # An explicit --prog overrides an ant spec from the config file
        ant_raw = None

    return RunConfig(
        program=Path(str(_get(args.prog, "prog", PROGRAM_PATH))),
        ant=None if ant_raw is None else str(ant_raw),
        size=int(_get(args.size, "size", GRID_SIZE)),  # type: ignore[call-overload]
        steps=int(_get(args.steps, "steps", NUM_STEPS)),  # type: ignore[call-overload]
        output=Path(str(_get(args.output, "output", OUTPUT_PATH))),
        scale=int(_get(args.scale, "scale", CELL_SCALE)),  # type: ignore[call-overload]
        theme=str(_get(args.theme, "theme", "default")),
        grid_out=_get_path(args.grid_out, "grid_out"),
        figure=_get_path(args.figure, "figure"),
        render_partial=bool(_get(args.render_partial, "render_partial", False)),
    )


def _load_table(config: RunConfig, theme: Theme) -> RuleTable:
    if config.ant is not None:
        table = ant_rule_table(config.ant)
        if max(table.colors()) >= theme.num_colors:
            raise ValueError(
                f"ant spec {config.ant!r} needs {len(config.ant)} colors; "
                f"palette has {theme.num_colors}"
            )
        logger.info("Built ant %s with %d rules", config.ant.upper(), len(table))
        return table
    return load_rules(config.program, num_colors=theme.num_colors)


def _write_outputs(
    config: RunConfig, grid: Grid, turmite: Turmite, theme: Theme, title: str
) -> None:
    render_grid(grid, config.output, theme=theme, scale=config.scale)
    if config.figure is not None:
        render_figure(grid, config.figure, theme=theme, title=title, turmite=turmite)
    if config.grid_out is not None:
        write_grid(
            grid,
            config.grid_out,
            metadata={"steps": turmite.steps_taken, "rule_count": len(turmite.rules)},
        )


def run(config: RunConfig) -> dict[str, object]:
    """Execute one configured run and return a JSON-serializable summary.

    Raises :exc:`TurmiteError` on load or runtime failure. With
    ``render_partial`` the grid is rendered before the error propagates.
    """
    theme = get_theme(config.theme)
    rules = _load_table(config, theme)

    grid = Grid(config.size)
    turmite = Turmite.at_center(rules, grid)
    logger.debug("Run config: %s", config)
    logger.info(
        "Running %d steps on a %dx%d grid", config.steps, config.size, config.size
    )
    try:
        run_steps(turmite, grid, config.steps)
    except TurmiteError:
        if config.render_partial:
            logger.warning("Rendering partial grid after %d steps", turmite.steps_taken)
            _write_outputs(
                config, grid, turmite, theme, title=f"failed after {turmite.steps_taken} steps"
            )
        raise

    _write_outputs(config, grid, turmite, theme, title=f"{turmite.steps_taken} steps")
    result = summarize(turmite, grid)
    summary: dict[str, object] = asdict(result)
    summary["color_counts"] = {str(k): v for k, v in result.color_counts.items()}
    summary["output"] = str(config.output)
    return summary


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint. Returns the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = _build_config(args)
        summary = run(config)
    except TurmiteError as exc:
        logger.error("%s", exc)
        return EXIT_RUN_FAILURE
    except (ValueError, TypeError) as exc:
        logger.error("Invalid configuration: %s", exc)
        return EXIT_CONFIG_ERROR
    except OSError as exc:
        logger.error("I/O error: %s", exc)
        return EXIT_RUN_FAILURE

    print(json.dumps(summary, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
