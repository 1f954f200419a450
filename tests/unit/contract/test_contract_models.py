"""Tests for contract model validation."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError as PydanticValidationError

from sogrinha.core.db import merge_update
from sogrinha.core.modules.contract.models import ContractData, ContractKind, ContractUpdate
from sogrinha.errors import ValidationError


def contract_data(**overrides):
    values = {
        "kind": ContractKind.RENTAL,
        "start_date": datetime(2026, 10, 1, tzinfo=UTC),
        "end_date": datetime(2027, 9, 30, tzinfo=UTC),
        "payment_day": 5,
        "payment_value": 2500,
        "owner_id": "12345678-1234-5678-1234-567812345678",
    }
    return ContractData.model_validate({**values, **overrides})


class TestContractData:
    """Tests for ContractData validation."""

    def test_kind_is_rental(self):
        """Test the rental grouping of kinds."""
        assert ContractKind.RENTAL.is_rental
        assert ContractKind.RENTAL_WITH_ADMINISTRATION.is_rental
        assert not ContractKind.SALE_WITH_EXCLUSIVITY.is_rental

    def test_end_before_start_rejected(self):
        """Test that a contract cannot end before it starts."""
        with pytest.raises(PydanticValidationError):
            contract_data(end_date=datetime(2026, 9, 1, tzinfo=UTC))

    @pytest.mark.parametrize("day", [0, 32])
    def test_payment_day_bounds(self, day):
        """Test that the payment day is a day of month."""
        with pytest.raises(PydanticValidationError):
            contract_data(payment_day=day)

    def test_mixed_timezone_dates(self):
        """Test that a date without timezone is taken as UTC and compared with an aware one."""
        data = contract_data(start_date="2026-01-01T00:00:00", end_date="2026-12-01T00:00:00Z")
        assert data.start_date == datetime(2026, 1, 1, tzinfo=UTC)
        assert data.end_date == datetime(2026, 12, 1, tzinfo=UTC)

    def test_mixed_timezone_end_before_start_rejected(self):
        """Test that mixed timezone dates still fail validation when out of order."""
        with pytest.raises(PydanticValidationError):
            contract_data(start_date="2026-12-01T00:00:00", end_date="2026-01-01T00:00:00Z")


class TestMergeUpdate:
    """Tests for merge_update on contracts."""

    def test_only_set_fields_change(self, mock_contract):
        """Test that a partial update keeps the other fields."""
        merged = merge_update(ContractData, mock_contract, ContractUpdate(payment_value=3000))
        assert merged.payment_value == 3000
        assert merged.payment_day == mock_contract.payment_day
        assert merged.lessee_id == mock_contract.lessee_id

    def test_explicit_null_detaches(self, mock_contract):
        """Test that an explicit null clears an optional reference."""
        merged = merge_update(ContractData, mock_contract, ContractUpdate.model_validate({"lessee_id": None}))
        assert merged.lessee_id is None

    def test_invalid_merge_is_domain_error(self, mock_contract):
        """Test that an update breaking an invariant raises ValidationError."""
        with pytest.raises(ValidationError):
            merge_update(ContractData, mock_contract, ContractUpdate(end_date=datetime(2020, 1, 1, tzinfo=UTC)))

    def test_required_field_null_rejected(self, mock_contract):
        """Test that a required field cannot be nulled."""
        with pytest.raises(ValidationError):
            merge_update(ContractData, mock_contract, ContractUpdate.model_validate({"owner_id": None}))

    def test_naive_end_date_on_stored_contract(self, mock_contract):
        """Test that a timezone-less end_date merges with the stored aware start_date."""
        update = ContractUpdate.model_validate({"end_date": "2027-12-31T00:00:00"})
        merged = merge_update(ContractData, mock_contract, update)
        assert merged.end_date == datetime(2027, 12, 31, tzinfo=UTC)

    def test_naive_end_date_before_start_is_domain_error(self, mock_contract):
        """Test that an out-of-order timezone-less end_date raises ValidationError, not TypeError."""
        update = ContractUpdate.model_validate({"end_date": "2020-01-01T00:00:00"})
        with pytest.raises(ValidationError):
            merge_update(ContractData, mock_contract, update)
