"""Unit tests for the email uniqueness checker."""

from unittest.mock import AsyncMock

import pytest

from domain.services.uniqueness_checker import UniquenessChecker
from tests.unit.conftest import make_patient


class TestIsEmailTaken:
    @pytest.mark.asyncio
    async def test_free_email(self, store: AsyncMock) -> None:
        checker = UniquenessChecker(store)

        assert not await checker.is_email_taken("new@example.com", "u1")
        store.query_by_field.assert_awaited_once_with("email", "new@example.com")

    @pytest.mark.asyncio
    async def test_email_held_by_another_record(self, store: AsyncMock) -> None:
        store.query_by_field.return_value = [make_patient("u2", email="new@example.com")]
        checker = UniquenessChecker(store)

        assert await checker.is_email_taken("new@example.com", "u1")

    @pytest.mark.asyncio
    async def test_own_record_is_not_a_conflict(self, store: AsyncMock) -> None:
        store.query_by_field.return_value = [make_patient("u1", email="sam@example.com")]
        checker = UniquenessChecker(store)

        assert not await checker.is_email_taken("sam@example.com", "u1")

    @pytest.mark.asyncio
    async def test_without_exclusion_any_match_counts(self, store: AsyncMock) -> None:
        store.query_by_field.return_value = [make_patient("u1")]
        checker = UniquenessChecker(store)

        assert await checker.is_email_taken("sam@example.com")

    @pytest.mark.asyncio
    async def test_store_errors_propagate(self, store: AsyncMock) -> None:
        store.query_by_field.side_effect = ConnectionError("unreachable")
        checker = UniquenessChecker(store)

        with pytest.raises(ConnectionError):
            await checker.is_email_taken("sam@example.com", "u1")
