"""Tests for orjson rendering of database documents."""

import datetime
from decimal import Decimal

import pytest
from bson import Decimal128, ObjectId

from query_catalog.utils import dumps


class TestDumps:
    """Test compact JSON rendering."""

    def test_basic_types(self):
        row = {"title": "1984", "price": 12.5, "in_stock": True, "tags": None}
        assert dumps(row) == '{"title":"1984","price":12.5,"in_stock":true,"tags":null}'

    def test_object_id(self):
        oid = ObjectId("64b7f0c2a1b2c3d4e5f60718")
        assert dumps({"_id": oid}) == '{"_id":"64b7f0c2a1b2c3d4e5f60718"}'

    def test_decimal128(self):
        assert dumps({"price": Decimal128(Decimal("9.99"))}) == '{"price":"9.99"}'

    def test_datetime_native(self):
        value = datetime.datetime(2024, 1, 15, 10, 30, 0)
        assert dumps({"added": value}) == '{"added":"2024-01-15T10:30:00"}'

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            dumps({"value": object()})

    def test_non_bson_container_rejected(self):
        """Test only BSON-decoded types get a default conversion."""
        with pytest.raises(TypeError):
            dumps({"tags": {"fiction", "classic"}})
