"""
Tests for the immutable order composition model.

Covers the pure transitions and the derived totals:
- Extras quantity floor at 0, unknown ids ignored, catalog order preserved
- Dish quantity floor at 1
- Total = (price + sum of quantity x value) x quantity, recomputed per instance
- Model validation of the one-entry-per-extra invariant
"""

import random
from decimal import Decimal

import pytest
from pydantic import ValidationError

from domain.enums import FavoriteState
from domain.models.order_composition import OrderComposition, SelectedExtra
from test_fixtures import make_dish, plain_format


def start(profile: str = "simple", is_favorite: bool = False) -> OrderComposition:
    dish = make_dish(profile)
    return OrderComposition.start(dish, is_favorite, plain_format(dish.price))


# =============================================================================
# INITIAL STATE
# =============================================================================


def test_start_resets_quantities():
    """A fresh composition has one dish and every extra at zero, in catalog order."""
    composition = start("veggie")

    assert composition.quantity == 1
    assert [e.id for e in composition.extras] == [2, 3, 4]
    assert all(e.quantity == 0 for e in composition.extras)
    assert composition.formatted_price == "21.90"
    assert composition.total() == Decimal("21.90")


def test_start_dish_without_extras():
    composition = start("plain")

    assert composition.extras == ()
    assert composition.extras_total() == Decimal("0")
    assert composition.total() == Decimal("25")


# =============================================================================
# EXTRAS
# =============================================================================


def test_increment_extra_only_touches_target():
    composition = start("veggie").with_extra_incremented(3)

    assert [(e.id, e.quantity) for e in composition.extras] == [(2, 0), (3, 1), (4, 0)]


def test_transitions_return_new_instances():
    """The original composition is left untouched by a mutation."""
    original = start()
    changed = original.with_extra_incremented(1)

    assert original.extras[0].quantity == 0
    assert changed.extras[0].quantity == 1
    assert changed is not original


def test_decrement_extra_at_zero_is_noop():
    composition = start()

    assert composition.with_extra_decremented(1) is composition
    assert composition.extras[0].quantity == 0


def test_unknown_extra_is_noop():
    composition = start()

    assert composition.with_extra_incremented(99) is composition
    assert composition.with_extra_decremented(99) is composition


def test_random_extra_sequences_never_go_negative():
    """Any sequence of extra +/- keeps every quantity at or above zero."""
    rng = random.Random(1234)
    composition = start("veggie")
    expected = {2: 0, 3: 0, 4: 0}

    for _ in range(500):
        extra_id = rng.choice([2, 3, 4, 5])
        if rng.random() < 0.5:
            composition = composition.with_extra_incremented(extra_id)
            if extra_id in expected:
                expected[extra_id] += 1
        else:
            composition = composition.with_extra_decremented(extra_id)
            if expected.get(extra_id, 0) > 0:
                expected[extra_id] -= 1

        assert all(e.quantity >= 0 for e in composition.extras)

    assert {e.id: e.quantity for e in composition.extras} == expected


def test_chosen_extras_only_positive_quantities():
    composition = start("veggie").with_extra_incremented(4).with_extra_incremented(4)

    chosen = composition.chosen_extras()
    assert [(e.id, e.quantity) for e in chosen] == [(4, 2)]


# =============================================================================
# DISH QUANTITY
# =============================================================================


def test_decrement_food_at_one_is_noop():
    composition = start()

    assert composition.with_food_decremented().quantity == 1


def test_food_quantity_up_and_down():
    composition = start().with_food_incremented().with_food_incremented()
    assert composition.quantity == 3

    composition = composition.with_food_decremented()
    assert composition.quantity == 2


def test_random_food_sequences_never_below_one():
    rng = random.Random(99)
    composition = start()
    for _ in range(300):
        if rng.random() < 0.4:
            composition = composition.with_food_incremented()
        else:
            composition = composition.with_food_decremented()
        assert composition.quantity >= 1


# =============================================================================
# PRICING
# =============================================================================


def test_total_scenario():
    """10.00 dish, extra of 2.00 taken twice, two dishes -> 28.00."""
    composition = start()
    assert plain_format(composition.total()) == "10.00"

    composition = composition.with_extra_incremented(1).with_extra_incremented(1)
    assert composition.extras[0].quantity == 2
    assert plain_format(composition.total()) == "14.00"

    composition = composition.with_food_incremented()
    assert plain_format(composition.total()) == "28.00"


def test_total_matches_formula_for_random_states():
    rng = random.Random(7)
    composition = start("veggie")
    for _ in range(200):
        step = rng.choice(["+e", "-e", "+f", "-f"])
        extra_id = rng.choice([2, 3, 4])
        if step == "+e":
            composition = composition.with_extra_incremented(extra_id)
        elif step == "-e":
            composition = composition.with_extra_decremented(extra_id)
        elif step == "+f":
            composition = composition.with_food_incremented()
        else:
            composition = composition.with_food_decremented()

        extras = sum((e.value * e.quantity for e in composition.extras), Decimal("0"))
        assert composition.total() == (composition.dish.price + extras) * composition.quantity


def test_decimal_values_do_not_drift():
    """Prices like 21.90 stay exact: no float accumulation."""
    composition = start("veggie")
    for _ in range(3):
        composition = composition.with_extra_incremented(2)

    assert composition.unit_total() == Decimal("21.90") + Decimal("4.50")
    assert plain_format(composition.total()) == "26.40"


# =============================================================================
# FAVORITE / VALIDATION
# =============================================================================


def test_with_favorite_and_state():
    composition = start(is_favorite=True)
    assert composition.favorite_state == FavoriteState.FAVORITE
    assert composition.favorite_state.icon_name == "favorite"

    composition = composition.with_favorite(False)
    assert composition.favorite_state == FavoriteState.NOT_FAVORITE
    assert composition.favorite_state.icon_name == "favorite-border"


def test_extras_must_match_dish():
    dish = make_dish("veggie")
    with pytest.raises(ValidationError):
        OrderComposition(
            dish=dish,
            formatted_price="21.90",
            extras=(SelectedExtra(id=2, name="Ervilha", value=Decimal("1.5")),),
        )


def test_duplicate_extra_ids_rejected():
    dish = make_dish(
        "simple",
        extras=[
            {"id": 1, "name": "Bacon", "value": 2},
            {"id": 1, "name": "Bacon duplo", "value": 4},
        ],
    )
    with pytest.raises(ValidationError):
        OrderComposition.start(dish, False, "10.00")


def test_dish_extras_cannot_change_after_load():
    dish = make_dish("veggie")

    assert isinstance(dish.extras, tuple)
    with pytest.raises(AttributeError):
        dish.extras.append(dish.extras[0])
    with pytest.raises(ValidationError):
        dish.extras = ()
    assert [e.id for e in dish.extras] == [2, 3, 4]


def test_quantity_constraints_enforced_on_construction():
    dish = make_dish()
    with pytest.raises(ValidationError):
        OrderComposition(
            dish=dish,
            formatted_price="10.00",
            extras=(SelectedExtra(id=1, name="Bacon", value=Decimal("2")),),
            quantity=0,
        )
    with pytest.raises(ValidationError):
        SelectedExtra(id=1, name="Bacon", value=Decimal("2"), quantity=-1)
