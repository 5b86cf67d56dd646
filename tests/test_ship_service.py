"""Tests for ShipService: listing, creation, partial updates and deletion."""
import asyncio
from unittest.mock import MagicMock

import pytest

from space_fleet_api.app.core.errors import ShipNotFoundError, ShipValidationError
from space_fleet_api.app.schemas.ship import ShipOrder, ShipType
from space_fleet_api.app.services.rating import compute_rating
from space_fleet_api.app.services.ship_query import ShipFilter
from space_fleet_api.app.services.ship_service import ShipService


@pytest.fixture
def seeded(service, valid_fields, year_millis):
    """Five ships with distinct speeds, types and production years."""
    specs = [
        ("Liberty", ShipType.TRANSPORT, 3019, False, 0.5, 100),
        ("Orion", ShipType.MILITARY, 2900, True, 0.9, 2000),
        ("Vega", ShipType.MERCHANT, 3010, False, 0.2, 15),
        ("Nova", ShipType.MILITARY, 2800, False, 0.7, 500),
        ("Libra", ShipType.TRANSPORT, 3015, True, 0.3, 40),
    ]
    ships = []
    for name, ship_type, year, is_used, speed, crew_size in specs:
        fields = dict(
            valid_fields,
            name=name,
            ship_type=ship_type,
            prod_date=year_millis(year),
            is_used=is_used,
            speed=speed,
            crew_size=crew_size,
        )
        ships.append(asyncio.run(service.create_ship(fields)))
    return ships


class TestCreate:

    def test_example_rating(self, service, valid_fields):
        ship = asyncio.run(service.create_ship(valid_fields))
        assert ship.id is not None
        assert ship.rating == 40.0
        assert ship.name == "Liberty"

    def test_rating_matches_formula(self, service, valid_fields, year_millis):
        valid_fields.update(prod_date=year_millis(2987), is_used=True, speed=0.83)
        ship = asyncio.run(service.create_ship(valid_fields))
        assert ship.rating == compute_rating(2987, True, 0.83)

    def test_is_used_defaults_to_false(self, service, valid_fields):
        del valid_fields["is_used"]
        ship = asyncio.run(service.create_ship(valid_fields))
        assert ship.is_used is False

    def test_created_ship_is_persisted(self, service, valid_fields):
        ship = asyncio.run(service.create_ship(valid_fields))
        assert asyncio.run(service.get_ship(ship.id)) == ship


class TestList:

    def test_defaults_first_three_by_id(self, service, seeded):
        ships = asyncio.run(service.list_ships())
        assert [s.id for s in ships] == [s.id for s in seeded[:3]]

    def test_page_offset(self, service, seeded):
        ships = asyncio.run(service.list_ships(page_number=1, page_size=2))
        assert [s.name for s in ships] == ["Vega", "Nova"]

    def test_order_by_speed(self, service, seeded):
        ships = asyncio.run(service.list_ships(order=ShipOrder.SPEED, page_size=5))
        assert [s.name for s in ships] == ["Vega", "Libra", "Liberty", "Nova", "Orion"]

    def test_order_by_date(self, service, seeded):
        ships = asyncio.run(service.list_ships(order=ShipOrder.DATE, page_size=5))
        assert [s.name for s in ships] == ["Nova", "Orion", "Vega", "Libra", "Liberty"]

    def test_filters_combine(self, service, seeded, year_millis):
        filters = ShipFilter(name="Lib", after=year_millis(3016))
        ships = asyncio.run(service.list_ships(filters))
        assert [s.name for s in ships] == ["Liberty"]

    def test_range_filters(self, service, seeded):
        filters = ShipFilter(min_speed=0.3, max_speed=0.7, min_crew_size=50)
        ships = asyncio.run(service.list_ships(filters, page_size=10))
        assert [s.name for s in ships] == ["Liberty", "Nova"]

    def test_rating_and_usage_filters(self, service, seeded):
        filters = ShipFilter(is_used=False, min_rating=1.0)
        ships = asyncio.run(service.list_ships(filters, page_size=10))
        assert {s.name for s in ships} == {s.name for s in seeded if not s.is_used and s.rating >= 1.0}

    def test_count_ignores_pagination(self, service, seeded):
        assert asyncio.run(service.count_ships()) == 5
        assert asyncio.run(service.count_ships(ShipFilter(ship_type=ShipType.MILITARY))) == 2

    def test_invalid_page(self, service):
        with pytest.raises(ShipValidationError):
            asyncio.run(service.list_ships(page_number=-1))
        with pytest.raises(ShipValidationError):
            asyncio.run(service.list_ships(page_size=0))


class TestGet:

    def test_missing_ship(self, service):
        with pytest.raises(ShipNotFoundError):
            asyncio.run(service.get_ship(42))


class TestUpdate:

    def test_speed_only(self, service, seeded, year_millis):
        before = seeded[0]
        after = asyncio.run(service.update_ship(before.id, {"speed": 0.25}))
        assert after.speed == 0.25
        assert after.rating == compute_rating(3019, False, 0.25)
        for field in ("id", "name", "planet", "ship_type", "prod_date", "is_used", "crew_size"):
            assert getattr(after, field) == getattr(before, field)
        assert asyncio.run(service.get_ship(before.id)) == after

    def test_invalid_field_skipped_valid_field_applied(self, service, seeded):
        before = seeded[1]
        after = asyncio.run(service.update_ship(before.id, {"name": "Orion II", "crew_size": 10000}))
        assert after.name == "Orion II"
        assert after.crew_size == before.crew_size
        stored = asyncio.run(service.get_ship(before.id))
        assert stored.name == "Orion II"
        assert stored.crew_size == 2000

    def test_rating_recomputed_from_updated_fields(self, service, seeded, year_millis):
        ship = seeded[2]
        after = asyncio.run(service.update_ship(ship.id, {"prod_date": year_millis(3019), "is_used": True}))
        assert after.rating == compute_rating(3019, True, ship.speed)

    def test_nothing_valid_means_no_write(self, store, seeded):
        spy = MagicMock(wraps=store)
        service = ShipService(spy)
        ship = seeded[0]
        result = asyncio.run(service.update_ship(ship.id, {"name": "", "speed": 2.0, "rating": 99.0}))
        assert result == ship
        spy.save.assert_not_called()

    def test_missing_ship(self, store):
        spy = MagicMock(wraps=store)
        with pytest.raises(ShipNotFoundError):
            asyncio.run(ShipService(spy).update_ship(5, {"name": "Ghost"}))
        spy.find_by_id.assert_called_once_with(5)
        spy.save.assert_not_called()


class TestDelete:

    def test_returns_snapshot_and_removes(self, service, seeded):
        ship = seeded[3]
        deleted = asyncio.run(service.delete_ship(ship.id))
        assert deleted == ship
        with pytest.raises(ShipNotFoundError):
            asyncio.run(service.get_ship(ship.id))
        assert asyncio.run(service.count_ships()) == 4

    def test_missing_ship_no_mutation(self, store, seeded):
        spy = MagicMock(wraps=store)
        with pytest.raises(ShipNotFoundError):
            asyncio.run(ShipService(spy).delete_ship(999))
        spy.delete.assert_not_called()
        assert asyncio.run(ShipService(store).count_ships()) == 5


class TestIntegerRange:

    @pytest.mark.parametrize("filters", [
        ShipFilter(after=10 ** 20),
        ShipFilter(before=-(2 ** 63) - 1),
        ShipFilter(min_crew_size=2 ** 63),
        ShipFilter(max_crew_size=10 ** 30),
    ])
    def test_unrepresentable_criteria_rejected(self, service, filters):
        with pytest.raises(ShipValidationError):
            asyncio.run(service.count_ships(filters))
        with pytest.raises(ShipValidationError):
            asyncio.run(service.list_ships(filters))

    def test_unrepresentable_page_rejected(self, service):
        with pytest.raises(ShipValidationError):
            asyncio.run(service.list_ships(page_size=10 ** 20))
        with pytest.raises(ShipValidationError):
            asyncio.run(service.list_ships(page_number=2 ** 40, page_size=2 ** 30))

    def test_largest_bounds_accepted(self, service, seeded):
        filters = ShipFilter(after=-(2 ** 63), before=2 ** 63 - 1)
        assert asyncio.run(service.count_ships(filters)) == 5
