"""Shared CLI rendering helpers."""
from __future__ import annotations

from typing import Iterable

from dpscalc.services import DpsReport


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_bullet_lines(lines: Iterable[str]) -> None:
    """Print bullet-prefixed lines."""
    for line in lines:
        print(f"- {line}")


def format_report(report: DpsReport) -> list[str]:
    option = report.combat_option
    return [
        f"Style: {option.name} ({report.style_type.value}, {option.weapon_style.value})",
        f"Accuracy roll: {int(report.accuracy_roll)}",
        f"Defence roll: {int(report.defence_roll)}",
        f"Max hit: {int(report.max_hit)}",
        f"Attack speed: {int(report.attack_speed)} ticks",
        f"Hit chance: {report.hit_rate:.2%}",
        f"DPS: {report.dps:.4f}",
    ]


def render_report(enemy_name: str, report: DpsReport) -> None:
    """Print the DPS breakdown against one enemy."""
    render_heading(f"DPS vs {enemy_name}")
    render_bullet_lines(format_report(report))
