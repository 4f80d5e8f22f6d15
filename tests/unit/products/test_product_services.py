"""Unit tests for ProductService.

Covers:
- get_all / get_by_id: mapping to response DTOs, not found.
- get_paged: delegation, page metadata, invalid parameters.
- create: identifier and timestamp assignment.
- update_stock: stock overwrite, updated_at stamping, not found.
- delete: single conditional delete, not found.
"""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
import uuid6
from django.utils import timezone

from modules.core.exceptions import EntityNotFound, InvalidArgument
from modules.core.pagination import PaginationParameters
from modules.products.dtos import CreateProductRequest, UpdateStockRequest
from modules.products.exceptions import InvalidPaginationParameters, ProductNotFound
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository
from modules.products.services import ProductService

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    return MagicMock(spec=IProductRepository)


@pytest.fixture()
def service(mock_repo):
    return ProductService(repository=mock_repo)


def _make_product(**overrides) -> Product:
    defaults = {
        "id": uuid6.uuid7(),
        "name": "Widget",
        "image_url": "https://example.com/widget.jpg",
        "price": Decimal("19.99"),
        "stock_quantity": 10,
        "created_at": timezone.now() - timedelta(days=1),
    }
    defaults.update(overrides)
    return Product(**defaults)


# ===========================================================================
# Queries
# ===========================================================================


class TestGetAll:
    def test_maps_every_product(self, service, mock_repo):
        mock_repo.get_all.return_value = [
            _make_product(name="Alpha"),
            _make_product(name="Beta"),
        ]

        result = service.get_all()

        assert [p.name for p in result] == ["Alpha", "Beta"]
        mock_repo.get_all.assert_called_once_with()

    def test_empty_catalog(self, service, mock_repo):
        mock_repo.get_all.return_value = []
        assert service.get_all() == []


class TestGetById:
    def test_success(self, service, mock_repo):
        product = _make_product()
        mock_repo.get_by_id.return_value = product

        result = service.get_by_id(str(product.id))

        assert result.id == product.id
        assert result.image_url == product.image_url

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFound) as exc_info:
            service.get_by_id("0190a4a2-7b1c-7d3e-8f00-000000000001")

        assert str(exc_info.value) == (
            "Product with ID 0190a4a2-7b1c-7d3e-8f00-000000000001 was not found"
        )
        assert isinstance(exc_info.value, EntityNotFound)
        assert exc_info.value.status_code == 404


class TestGetPaged:
    def test_wraps_repository_page(self, service, mock_repo):
        mock_repo.get_paged.return_value = (
            [_make_product(name=f"P{i}") for i in range(5)],
            15,
        )

        result = service.get_paged(PaginationParameters(page_number=2, page_size=10))

        mock_repo.get_paged.assert_called_once_with(2, 10)
        assert len(result.items) == 5
        assert result.total_count == 15
        assert result.total_pages == 2
        assert result.has_previous
        assert not result.has_next

    def test_clamped_page_size_is_passed_through(self, service, mock_repo):
        mock_repo.get_paged.return_value = ([], 0)

        service.get_paged(PaginationParameters(page_number=1, page_size=500))

        mock_repo.get_paged.assert_called_once_with(1, 100)

    @pytest.mark.parametrize(
        ("page_number", "page_size"),
        [(0, 10), (1, 0), (-3, 10)],
    )
    def test_invalid_parameters_raise_argument_error(
        self, service, mock_repo, page_number, page_size
    ):
        params = PaginationParameters(page_number=page_number, page_size=page_size)

        with pytest.raises(InvalidPaginationParameters) as exc_info:
            service.get_paged(params)

        assert isinstance(exc_info.value, InvalidArgument)
        assert not isinstance(exc_info.value, EntityNotFound)
        mock_repo.get_paged.assert_not_called()


# ===========================================================================
# Commands
# ===========================================================================


class TestCreate:
    def test_assigns_id_and_created_at(self, service, mock_repo):
        mock_repo.create.side_effect = lambda p: p
        before = timezone.now()

        result = service.create(
            CreateProductRequest(
                name="Wireless Mouse",
                image_url="https://example.com/mouse.jpg",
                price=Decimal("29.99"),
                description="Ergonomic",
                stock_quantity=100,
            )
        )

        mock_repo.create.assert_called_once()
        saved = mock_repo.create.call_args.args[0]
        assert saved.id is not None
        assert result.id == saved.id
        assert result.created_at >= before
        assert result.updated_at is None
        assert result.name == "Wireless Mouse"
        assert result.price == Decimal("29.99")
        assert result.stock_quantity == 100

    def test_each_product_gets_a_new_id(self, service, mock_repo):
        mock_repo.create.side_effect = lambda p: p
        request = CreateProductRequest(name="Cable", image_url="https://example.com/c.jpg")

        first = service.create(request)
        second = service.create(request)

        assert first.id != second.id

    def test_optional_fields_stay_empty(self, service, mock_repo):
        mock_repo.create.side_effect = lambda p: p

        result = service.create(
            CreateProductRequest(name="Cable", image_url="https://example.com/c.jpg")
        )

        assert result.price is None
        assert result.description is None
        assert result.stock_quantity is None

    @pytest.mark.parametrize(
        ("price", "stored"),
        [("1.239", "1.24"), ("1.235", "1.24"), ("1.234", "1.23"), ("5", "5.00")],
    )
    def test_price_is_rounded_to_two_decimals(self, service, mock_repo, price, stored):
        mock_repo.create.side_effect = lambda p: p

        result = service.create(
            CreateProductRequest(
                name="Cable", image_url="https://example.com/c.jpg", price=Decimal(price)
            )
        )

        assert mock_repo.create.call_args.args[0].price == Decimal(stored)
        assert result.price == Decimal(stored)


class TestUpdateStock:
    def test_overwrites_stock_and_stamps_updated_at(self, service, mock_repo):
        existing = _make_product(stock_quantity=10)
        created_at = existing.created_at
        mock_repo.get_by_id.return_value = existing
        mock_repo.update.side_effect = lambda p: p

        result = service.update_stock(str(existing.id), UpdateStockRequest(stock_quantity=0))

        assert result.stock_quantity == 0
        assert result.updated_at is not None
        assert result.updated_at >= result.created_at
        assert result.created_at == created_at
        mock_repo.update.assert_called_once_with(existing)

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFound):
            service.update_stock("missing", UpdateStockRequest(stock_quantity=5))

        mock_repo.update.assert_not_called()


class TestDelete:
    def test_success(self, service, mock_repo):
        mock_repo.delete.return_value = True

        service.delete("0190a4a2-7b1c-7d3e-8f00-000000000001")

        mock_repo.delete.assert_called_once_with("0190a4a2-7b1c-7d3e-8f00-000000000001")
        mock_repo.get_by_id.assert_not_called()

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.delete.return_value = False

        with pytest.raises(ProductNotFound):
            service.delete("0190a4a2-7b1c-7d3e-8f00-000000000001")
