"""Command line front end for the DPS calculator."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, Optional, Sequence

from dpscalc.data.errors import DataError
from dpscalc.data.repositories import (
    EnemiesRepository,
    EquipmentRepository,
    PrayersRepository,
    SpellsRepository,
)
from dpscalc.domain.entities import Extra
from dpscalc.domain.errors import CombatError
from dpscalc.services import LoadoutError, LoadoutRequest, LoadoutService, describe_styles
from dpscalc.utils.logging import setup_logging

from .config import load_config
from .render import render_bullet_lines, render_heading, render_report

EXIT_OK = 0
EXIT_ERROR = 2

_LEVEL_OPTIONS = {
    "attack": "attack",
    "strength": "strength",
    "defence": "defence",
    "ranged": "ranged",
    "magic": "magic",
    "hitpoints": "hitpoints",
    "prayer_level": "prayer",
}

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dpscalc",
        description="Compute expected damage per second of a loadout against an enemy.",
    )
    parser.add_argument("--enemy", help="Enemy name as listed in enemies.json.")
    parser.add_argument(
        "--item", action="append", default=[], metavar="NAME",
        help="Equip an item; repeat for every slot, applied in order.",
    )
    parser.add_argument(
        "--prayer", action="append", default=[], metavar="NAME",
        help="Activate a prayer; repeat to stack prayers.",
    )
    parser.add_argument("--spell", help="Cast this spell instead of using the weapon.")
    parser.add_argument("--style", type=int, help="Combat style index of the wielded weapon.")

    levels = parser.add_argument_group("levels")
    for option in ("attack", "strength", "defence", "ranged", "magic", "hitpoints"):
        levels.add_argument(f"--{option}", type=int, metavar="LEVEL")
    levels.add_argument("--prayer-level", dest="prayer_level", type=int, metavar="LEVEL")

    parser.add_argument("--not-on-task", action="store_true", help="The enemy is not a slayer task.")
    parser.add_argument("--outside-wilderness", action="store_true", help="The fight is outside the wilderness.")
    parser.add_argument("--list-styles", action="store_true", help="List the wielded weapon's combat styles.")
    parser.add_argument("--list-enemies", action="store_true", help="List known enemy names.")
    parser.add_argument("--definitions", type=Path, help="Directory holding the JSON definition files.")
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        type=str.upper,
    )
    parser.add_argument("--config", type=Path, help="Path of the JSON config file.")
    return parser


def _build_service(definitions: Optional[Path]) -> LoadoutService:
    return LoadoutService(
        equipment_repo=EquipmentRepository(definitions),
        prayers_repo=PrayersRepository(definitions),
        spells_repo=SpellsRepository(definitions),
        enemies_repo=EnemiesRepository(definitions),
    )


def _request_from_args(args: argparse.Namespace) -> LoadoutRequest:
    levels: Dict[str, int] = {}
    for option, skill in _LEVEL_OPTIONS.items():
        value = getattr(args, option)
        if value is not None:
            levels[skill] = value
    return LoadoutRequest(
        items=tuple(args.item),
        prayers=tuple(args.prayer),
        spell=args.spell,
        style_index=args.style,
        levels=levels,
        extra=Extra(
            on_slayer_task=not args.not_on_task,
            in_wilderness=not args.outside_wilderness,
        ),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the calculator and return the process exit status."""
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    setup_logging(args.log_level or config["log_level"] or "WARNING")

    definitions = args.definitions
    if definitions is None and config["definitions_path"]:
        definitions = Path(config["definitions_path"])
    logger.debug("Using definitions from %s", definitions or "the bundled data directory")

    service = _build_service(definitions)
    try:
        if args.list_enemies:
            render_heading("Enemies")
            render_bullet_lines(service.list_enemies())
            return EXIT_OK
        player = service.build_player(_request_from_args(args))
        if args.list_styles:
            render_heading("Combat styles")
            for line in describe_styles(player):
                print(line)
            return EXIT_OK
        if not args.enemy:
            print("Error: --enemy is required unless listing styles or enemies.", file=sys.stderr)
            return EXIT_ERROR
        enemy = service.get_enemy(args.enemy)
        report = service.evaluate(player, enemy)
    except (LoadoutError, DataError, CombatError) as exc:
        logger.debug("Calculation failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR
    render_report(enemy.name, report)
    return EXIT_OK
