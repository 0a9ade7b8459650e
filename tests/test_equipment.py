import pytest

from dpscalc.core.numeric import Percentage, Scalar, Ticks
from dpscalc.domain.combat_styles import CombatOption, StyleType, WeaponStyle, WeaponType
from dpscalc.domain.defs import (
    Attribute,
    DamageBonus,
    Head,
    PoweredStaff,
    Shield,
    Slot,
    StatBonuses,
    Stats,
    WeaponOneHanded,
    sum_stats,
)
from dpscalc.domain.entities import Equipped, OneHanded, TwoHanded, Wielded
from dpscalc.domain.errors import UnimplementedStyleError
from tests.helpers.loadouts import make_weapon


def _stats(seed: int) -> Stats:
    return Stats(
        attack=StatBonuses(Scalar(seed), Scalar(seed + 1), Scalar(-seed), Scalar(2 * seed), Scalar(3)),
        defence=StatBonuses(slash=Scalar(seed * 5)),
        damage=DamageBonus(Scalar(seed), Scalar(seed + 7), Percentage(seed)),
        prayer_bonus=Scalar(seed - 2),
    )


def test_stats_addition_is_associative_and_commutative() -> None:
    a, b, c = _stats(1), _stats(4), _stats(-9)
    assert (a + b) + c == a + (b + c)
    assert a + b == b + a


def test_zero_stats_is_identity() -> None:
    a = _stats(3)
    assert a + Stats.zero() == a
    assert sum_stats([]) == Stats.zero()
    assert sum_stats([a, Stats.zero()]) == a


def test_stat_bonus_lookup_by_style() -> None:
    bonuses = StatBonuses(Scalar(1), Scalar(2), Scalar(3), Scalar(4), Scalar(5))
    assert bonuses.for_style(StyleType.STAB) == Scalar(1)
    assert bonuses.for_style(StyleType.SLASH) == Scalar(2)
    assert bonuses.for_style(StyleType.CRUSH) == Scalar(3)
    assert bonuses.for_style(StyleType.RANGED) == Scalar(4)
    assert bonuses.for_style(StyleType.MAGIC) == Scalar(5)
    with pytest.raises(UnimplementedStyleError):
        bonuses.for_style(StyleType.NONE)


def test_empty_items_have_zero_stats() -> None:
    empty = Head.empty()
    assert empty.is_empty
    assert empty.stats == Stats.zero()
    assert empty.attributes == ()
    assert empty.slot is Slot.HEAD


def test_empty_weapon_is_unarmed() -> None:
    weapon = WeaponOneHanded.empty()
    assert weapon.weapon_stats.weapon_type is WeaponType.UNARMED
    assert weapon.weapon_stats.attack_speed == Ticks(4)
    assert weapon.powered_staff is None


def test_one_handed_stats_include_shield() -> None:
    weapon = WeaponOneHanded(name="Sword", stats=_stats(2))
    shield = Shield(name="Shield", stats=_stats(5), attributes=(Attribute.VOID_ARMOUR,))
    wielded = OneHanded(weapon=weapon, shield=shield)
    assert wielded.stats() == _stats(2) + _stats(5)
    assert wielded.attributes() == ()


def test_two_handed_stats_are_weapon_only() -> None:
    weapon = make_weapon(WeaponType.TWO_HANDED_SWORD, two_handed=True, attributes=(Attribute.COLOSSAL_BLADE,))
    wielded = TwoHanded(weapon=weapon)
    assert wielded.stats() == Stats.zero()
    assert wielded.has_attribute(Attribute.COLOSSAL_BLADE)


def test_attack_speed_applies_style_delta() -> None:
    wielded = OneHanded(weapon=make_weapon(WeaponType.CROSSBOW, attack_speed=6))
    rapid = CombatOption("Rapid", StyleType.RANGED, WeaponStyle.RAPID)
    accurate = CombatOption("Accurate", StyleType.RANGED, WeaponStyle.ACCURATE)
    assert wielded.attack_speed(rapid) == Ticks(5)
    assert wielded.attack_speed(accurate) == Ticks(6)


def test_equipping_two_handed_drops_shield() -> None:
    equipped = Equipped()
    equipped.equip(Shield(name="Defender"))
    assert equipped.equip(make_weapon(WeaponType.TWO_HANDED_SWORD, two_handed=True)) is True
    assert isinstance(equipped.wielded, TwoHanded)


def test_equipping_one_handed_over_two_handed_leaves_shield_empty() -> None:
    equipped = Equipped()
    equipped.equip(make_weapon(WeaponType.TWO_HANDED_SWORD, two_handed=True))
    equipped.equip(make_weapon(WeaponType.WHIP, name="Whip"))
    assert isinstance(equipped.wielded, OneHanded)
    assert equipped.wielded.weapon.name == "Whip"
    assert equipped.wielded.shield.is_empty


def test_one_handed_swap_keeps_shield() -> None:
    equipped = Equipped()
    equipped.equip(Shield(name="Defender"))
    equipped.equip(make_weapon(WeaponType.WHIP, name="Whip"))
    equipped.equip(make_weapon(WeaponType.SLASH_SWORD, name="Sword"))
    assert equipped.wielded.weapon.name == "Sword"
    assert equipped.wielded.shield.name == "Defender"


def test_shield_over_two_handed_drops_weapon() -> None:
    equipped = Equipped()
    equipped.equip(make_weapon(WeaponType.TWO_HANDED_SWORD, two_handed=True))
    equipped.equip(Shield(name="Defender"))
    assert isinstance(equipped.wielded, OneHanded)
    assert equipped.wielded.weapon.is_empty
    assert equipped.wielded.shield.name == "Defender"


def test_worn_items_do_not_touch_hands() -> None:
    equipped = Equipped()
    assert equipped.equip(Head(name="Helm", stats=_stats(1))) is False
    assert equipped.total_stats() == _stats(1)
    assert equipped.unequip(Slot.HEAD) is False
    assert equipped.head.is_empty


def test_unequip_weapon_keeps_shield() -> None:
    equipped = Equipped()
    equipped.equip(make_weapon(WeaponType.WHIP))
    equipped.equip(Shield(name="Defender"))
    assert equipped.unequip(Slot.WEAPON_ONE_HANDED) is True
    assert equipped.wielded.weapon.is_empty
    assert equipped.wielded.shield.name == "Defender"


def test_attribute_groups_follow_slot_order() -> None:
    equipped = Equipped()
    equipped.equip(Head(name="Mask", attributes=(Attribute.BLACK_MASK,)))
    equipped.equip(make_weapon(WeaponType.CROSSBOW, attributes=(Attribute.DRAGON_HUNTER_CROSSBOW,)))
    groups = equipped.attribute_groups()
    assert len(groups) == 10
    assert groups[0] == (Attribute.BLACK_MASK,)
    assert groups[4] == (Attribute.DRAGON_HUNTER_CROSSBOW,)
    assert equipped.has_attribute(Attribute.BLACK_MASK)
    assert not equipped.has_attribute(Attribute.ARCLIGHT)


@pytest.mark.parametrize(
    ("staff", "magic", "expected"),
    [
        (PoweredStaff.STARTER_STAFF, 99, 8),
        (PoweredStaff.TRIDENT_OF_THE_SEAS, 99, 28),
        (PoweredStaff.THAMMARONS_SCEPTRE, 99, 25),
        (PoweredStaff.ACCURSED_SCEPTRE, 99, 27),
        (PoweredStaff.TRIDENT_OF_THE_SWAMP, 99, 31),
        (PoweredStaff.SANGUINESTI_STAFF, 99, 32),
        (PoweredStaff.DAWNBRINGER, 99, 15),
        (PoweredStaff.TUMEKENS_SHADOW, 99, 34),
        (PoweredStaff.CRYSTAL_STAFF_BASIC, 99, 25),
        (PoweredStaff.CRYSTAL_STAFF_ATTUNED, 99, 31),
        (PoweredStaff.CRYSTAL_STAFF_PERFECTED, 99, 39),
        (PoweredStaff.SWAMP_LIZARD, 99, 19),
        (PoweredStaff.ORANGE_SALAMANDER, 99, 19),
        (PoweredStaff.RED_SALAMANDER, 99, 22),
        (PoweredStaff.BLACK_SALAMANDER, 99, 24),
    ],
)
def test_powered_staff_max_hits(staff: PoweredStaff, magic: int, expected: int) -> None:
    assert staff.base_max_hit(Scalar(magic)) == Scalar(expected)


@pytest.mark.parametrize(
    ("staff", "magic", "expected"),
    [
        (PoweredStaff.TRIDENT_OF_THE_SEAS, 1, 0),
        (PoweredStaff.THAMMARONS_SCEPTRE, 20, 0),
        (PoweredStaff.DAWNBRINGER, 5, 0),
        (PoweredStaff.TRIDENT_OF_THE_SEAS, 18, 1),
    ],
)
def test_powered_staff_max_hit_floors_at_zero(staff: PoweredStaff, magic: int, expected: int) -> None:
    assert staff.base_max_hit(Scalar(magic)) == Scalar(expected)


def test_bare_wielded_has_no_stats() -> None:
    with pytest.raises(NotImplementedError):
        Wielded().stats()
