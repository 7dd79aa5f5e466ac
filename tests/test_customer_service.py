"""Tests for CustomerService forwarding to its repository."""

from unittest.mock import AsyncMock, Mock

import pytest

from customer_service.models.customer import Customer
from customer_service.services.customer_service import CustomerService


@pytest.fixture
def mock_repository():
    repository = Mock()
    repository.find_by_id = AsyncMock()
    repository.save = AsyncMock()
    repository.delete = AsyncMock()
    return repository


class TestCustomerService:

    @pytest.mark.asyncio
    async def test_find_all_streams_repository_results(self, repository):
        await repository.save(Customer(first_name="Ana"))
        await repository.save(Customer(first_name="Bruno"))
        service = CustomerService(repository)

        names = [c.first_name async for c in service.find_all()]

        assert sorted(names) == ["Ana", "Bruno"]

    @pytest.mark.asyncio
    async def test_find_by_id_forwards(self, mock_repository):
        customer = Customer(id="abc", first_name="Ana")
        mock_repository.find_by_id.return_value = customer

        result = await CustomerService(mock_repository).find_by_id("abc")

        assert result is customer
        mock_repository.find_by_id.assert_awaited_once_with("abc")

    @pytest.mark.asyncio
    async def test_find_by_id_absent_is_none(self, mock_repository):
        mock_repository.find_by_id.return_value = None

        assert await CustomerService(mock_repository).find_by_id("abc") is None

    @pytest.mark.asyncio
    async def test_save_returns_repository_result(self, mock_repository):
        saved = Customer(id="abc", first_name="Ana")
        mock_repository.save.return_value = saved

        result = await CustomerService(mock_repository).save(Customer(first_name="Ana"))

        assert result is saved

    @pytest.mark.asyncio
    async def test_delete_forwards_record(self, mock_repository):
        customer = Customer(id="abc")

        await CustomerService(mock_repository).delete(customer)

        mock_repository.delete.assert_awaited_once_with(customer)
