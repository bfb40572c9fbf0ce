"""
Tests for CartService used directly, without the HTTP layer.
"""
from decimal import Decimal
from types import SimpleNamespace

import pytest

from gamestore.data.models import CarritoItemModel
from gamestore.domain.errors import BadRequest, NotFound, Unauthorized
from gamestore.services.cart_service import CartService
from tests.conftest import ADMIN, CUSTOMER


def _line(precio, cantidad):
    return SimpleNamespace(juego=SimpleNamespace(precio=Decimal(precio)), cantidad=cantidad)


class TestSubtotal:

    def test_empty(self):
        assert CartService.subtotal([]) == 0.0

    def test_rounds_to_two_decimals(self):
        lines = [_line("0.335", 1), _line("0.10", 3)]

        assert CartService.subtotal(lines) == 0.64

    def test_sum_of_price_times_quantity(self):
        lines = [_line("29.99", 2), _line("13.99", 1)]

        assert CartService.subtotal(lines) == 73.97


class TestCommands:

    def test_missing_identity_is_unauthorized(self, db_session):
        svc = CartService(db_session)

        with pytest.raises(Unauthorized):
            svc.get_cart(None)
        with pytest.raises(Unauthorized):
            svc.add_item(None, 1, 1)
        with pytest.raises(Unauthorized):
            svc.remove_item(None, 1)
        with pytest.raises(Unauthorized):
            svc.clear_cart(None)

    @pytest.mark.parametrize("juego_id,cantidad", [(None, 1), (1, None), (1, 0), (1, -3)])
    def test_invalid_input_is_bad_request(self, db_session, juego_id, cantidad):
        with pytest.raises(BadRequest):
            CartService(db_session).add_item(ADMIN, juego_id, cantidad)

    def test_last_submitted_quantity_wins(self, db_session):
        svc = CartService(db_session)

        for cantidad in (3, 1, 8, 2):
            svc.add_item(ADMIN, 3, cantidad)

        lines = db_session.query(CarritoItemModel).filter_by(usuario_id=1, juego_id=3).all()
        assert len(lines) == 1
        assert lines[0].cantidad == 2

    def test_unknown_game_creates_no_line(self, db_session):
        with pytest.raises(NotFound):
            CartService(db_session).add_item(ADMIN, 42, 1)

        assert db_session.query(CarritoItemModel).count() == 0

    def test_remove_absent_line_is_not_found(self, db_session):
        svc = CartService(db_session)
        svc.add_item(CUSTOMER, 1, 1)

        # same game, different user
        with pytest.raises(NotFound):
            svc.remove_item(ADMIN, 1)

        assert svc.get_cart(CUSTOMER)["items"][0]["id"] == 1

    def test_clear_reports_removed_rows(self, db_session):
        svc = CartService(db_session)
        svc.add_item(ADMIN, 1, 1)
        svc.add_item(ADMIN, 2, 4)
        svc.add_item(CUSTOMER, 1, 1)

        assert svc.clear_cart(ADMIN) == 2
        assert svc.clear_cart(ADMIN) == 0
        assert len(svc.get_cart(CUSTOMER)["items"]) == 1

    def test_insert_race_is_retried_as_update(self, db_session):
        svc = CartService(db_session)
        svc.add_item(ADMIN, 2, 1)

        real_lookup = svc.repo.get_cart_item
        calls = []

        def stale_lookup(usuario_id, juego_id):
            # first lookup misses the row another request just committed
            calls.append(juego_id)
            if len(calls) == 1:
                return None
            return real_lookup(usuario_id, juego_id)

        svc.repo.get_cart_item = stale_lookup

        items = svc.add_item(ADMIN, 2, 4)

        assert len(calls) == 2
        assert [(i["id"], i["cantidad"]) for i in items] == [(2, 4)]
