import pytest

from dpscalc.core.numeric import Scalar, Ticks
from dpscalc.data.errors import MissingEntryError
from dpscalc.data.repositories import (
    EnemiesRepository,
    EquipmentRepository,
    PrayersRepository,
    SpellsRepository,
)
from dpscalc.domain.combat_styles import StyleType
from dpscalc.domain.entities import Extra
from dpscalc.domain.errors import InvalidStyleIndexError
from dpscalc.services import LoadoutError, LoadoutRequest, LoadoutService, describe_styles


def _service() -> LoadoutService:
    return LoadoutService(
        equipment_repo=EquipmentRepository(),
        prayers_repo=PrayersRepository(),
        spells_repo=SpellsRepository(),
        enemies_repo=EnemiesRepository(),
    )


def test_build_player_and_evaluate() -> None:
    service = _service()
    request = LoadoutRequest(
        items=("Abyssal whip", "Dragon defender"),
        prayers=("Piety",),
        style_index=1,
        levels={"attack": 99, "strength": 99},
    )
    player = service.build_player(request)
    report = service.evaluate(player, service.get_enemy("Fire giant (level 86)"))

    assert report.combat_option.name == "Lash"
    assert report.style_type is StyleType.SLASH
    assert report.accuracy_roll == Scalar(21590)
    assert report.defence_roll == Scalar(4958)
    assert report.max_hit == Scalar(31)
    assert report.attack_speed == Ticks(4)
    assert report.hit_rate == pytest.approx(0.885137325738)
    assert round(report.dps, 4) == 5.7165


def test_build_player_with_spell_and_extra() -> None:
    request = LoadoutRequest(
        spell="Wind Bolt",
        levels={"magic": 99},
        extra=Extra(on_slayer_task=False, in_wilderness=False),
    )
    player = _service().build_player(request)
    assert player.spell is not None and player.spell.name == "Wind Bolt"
    assert player.extra.on_slayer_task is False
    assert player.levels.magic == Scalar(99)


def test_items_are_equipped_in_request_order() -> None:
    request = LoadoutRequest(items=("Dragon defender", "Colossal blade", "Abyssal whip"))
    player = _service().build_player(request)
    assert player.equipped.wielded.weapon.name == "Abyssal whip"
    assert player.equipped.wielded.shield.is_empty


def test_unknown_names_raise_loadout_error() -> None:
    service = _service()
    with pytest.raises(LoadoutError) as excinfo:
        service.build_player(LoadoutRequest(items=("Excalibur",)))
    assert isinstance(excinfo.value.__cause__, MissingEntryError)
    with pytest.raises(LoadoutError):
        service.build_player(LoadoutRequest(prayers=("Smite",)))
    with pytest.raises(LoadoutError):
        service.get_enemy("Jad")


def test_unknown_skill_raises_loadout_error() -> None:
    with pytest.raises(LoadoutError, match="agility"):
        _service().build_player(LoadoutRequest(levels={"agility": 99}))


def test_invalid_style_index_propagates() -> None:
    with pytest.raises(InvalidStyleIndexError):
        _service().build_player(LoadoutRequest(items=("Abyssal whip",), style_index=7))


def test_describe_styles_marks_selection() -> None:
    player = _service().build_player(LoadoutRequest(items=("Abyssal whip",), style_index=1))
    assert describe_styles(player) == [
        "  0: Flick (Slash, Accurate)",
        "* 1: Lash (Slash, Controlled)",
        "  2: Deflect (Slash, Defensive)",
    ]


def test_list_enemies_is_sorted() -> None:
    names = _service().list_enemies()
    assert names == sorted(names)
    assert "Fire giant (level 86)" in names


def test_describe_styles_marks_only_selected_duplicate() -> None:
    player = _service().build_player(LoadoutRequest(items=("Trident of the swamp",), style_index=1))
    assert describe_styles(player) == [
        "  0: Accurate (Magic, Accurate)",
        "* 1: Accurate (Magic, Accurate)",
        "  2: Longrange (Magic, Longrange)",
    ]
