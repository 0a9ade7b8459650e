"""End-to-end loadouts checked against known calculator output."""
import pytest

from dpscalc.core.numeric import Scalar, Ticks
from dpscalc.domain.combat_styles import StyleType
from dpscalc.domain.entities import Levels, Player
from tests.helpers.loadouts import enemy, item, prayer, spell


def _assert_dps(value: float, expected: float, rounded: float) -> None:
    assert value == pytest.approx(expected, abs=1e-6)
    assert round(value, 4) == rounded


def test_whip_and_defender_with_piety_against_fire_giant() -> None:
    player = (
        Player()
        .set_levels(Levels.of(attack=99, strength=99))
        .equip(item("Abyssal whip"))
        .equip(item("Dragon defender"))
        .activate_prayer(prayer("Piety"))
        .change_combat_style(1)
    )
    target = enemy("Fire giant (level 86)")

    assert player.combat_option.name == "Lash"
    assert player.max_accuracy_roll(target) == Scalar(21590)
    assert player.max_hit(target) == Scalar(31)
    assert target.max_defence_roll(StyleType.SLASH) == Scalar(4958)
    _assert_dps(player.dps(target), 5.716511895389, 5.7165)


def test_dragon_hunter_crossbow_rapid_against_mithril_dragon() -> None:
    player = (
        Player()
        .set_levels(Levels.of(ranged=99))
        .equip(item("Dragon hunter crossbow"))
        .equip(item("Dragon bolts"))
        .activate_prayer(prayer("Rigour"))
        .change_combat_style(1)
    )
    target = enemy("Mithril dragon")

    assert player.max_accuracy_roll(target) == Scalar(26044)
    assert player.max_hit(target) == Scalar(46)
    assert player.attack_speed(target) == Ticks(5)
    _assert_dps(player.dps(target), 2.340311149660, 2.3403)


def test_colossal_blade_against_fire_giant() -> None:
    player = (
        Player()
        .set_levels(Levels.of(attack=99, strength=99))
        .equip(item("Colossal blade"))
        .activate_prayer(prayer("Piety"))
        .change_combat_style(0)
    )
    target = enemy("Fire giant (level 86)")

    assert player.max_accuracy_roll(target) == Scalar(20898)
    assert player.max_hit(target) == Scalar(37)
    assert player.attack_speed(target) == Ticks(6)
    _assert_dps(player.dps(target), 4.529077680484, 4.5291)


def test_unarmed_wind_bolt_against_fire_giant() -> None:
    player = Player().set_levels(Levels.of(magic=99)).select_spell(spell("Wind Bolt"))
    target = enemy("Fire giant (level 86)")

    assert player.max_accuracy_roll(target) == Scalar(6912)
    assert target.max_defence_roll(StyleType.MAGIC) == Scalar(640)
    assert player.max_hit(target) == Scalar(9)
    assert player.attack_speed(target) == Ticks(5)
    _assert_dps(player.dps(target), 1.430348618545, 1.4303)


def test_trident_of_the_swamp_against_mithril_dragon() -> None:
    player = (
        Player()
        .set_levels(Levels.of(magic=99))
        .equip(item("Trident of the swamp"))
        .activate_prayer(prayer("Mystic Might"))
        .change_combat_style(0)
    )
    target = enemy("Mithril dragon")

    assert player.max_accuracy_roll(target) == Scalar(11036)
    assert target.max_defence_roll(StyleType.MAGIC) == Scalar(16638)
    assert player.max_hit(target) == Scalar(31)
    assert player.attack_speed(target) == Ticks(4)
    _assert_dps(player.dps(target), 2.141780355390, 2.1418)


def test_arclight_against_greater_demon() -> None:
    player = (
        Player()
        .set_levels(Levels.of(attack=99, strength=99))
        .equip(item("Arclight"))
        .change_combat_style(0)
    )
    target = enemy("Greater demon")

    # (99 + 3 + 8) * (72 + 64) = 14960, then x17/10
    assert player.max_accuracy_roll(target) == Scalar(25432)
    # (99 + 8) * (72 + 64) + 320 over 640 = 23, then x17/10
    assert player.max_hit(target) == Scalar(39)
