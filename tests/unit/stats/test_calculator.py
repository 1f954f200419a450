"""Tests for dashboard statistics."""

from datetime import UTC, date, datetime

import pytest

from sogrinha.core.modules.contract.models import ContractKind, ContractStatus
from sogrinha.core.modules.real_estate.models import RealEstateStatus
from sogrinha.core.modules.stats.calculator import compute_home_stats, last_months

TODAY = date(2026, 10, 19)


@pytest.fixture
def real_estates(mock_real_estate):
    statuses = [
        RealEstateStatus.LEASED,
        RealEstateStatus.LEASED,
        RealEstateStatus.AVAILABLE,
        RealEstateStatus.SOLD,
        RealEstateStatus.UNDER_MAINTENANCE,
    ]
    return [mock_real_estate.model_copy(update={"status": status}) for status in statuses]


@pytest.fixture
def contracts(mock_contract):
    return [
        mock_contract.model_copy(update={"payment_value": 2000.0, "start_date": datetime(2026, 10, 1, tzinfo=UTC)}),
        mock_contract.model_copy(update={"payment_value": 1000.0, "start_date": datetime(2026, 6, 10, tzinfo=UTC)}),
        mock_contract.model_copy(
            update={"payment_value": 3000.0, "start_date": datetime(2026, 4, 1, tzinfo=UTC)}
        ),  # Outside the six month window
        mock_contract.model_copy(
            update={"status": ContractStatus.DONE, "kind": ContractKind.SALE_WITH_EXCLUSIVITY, "payment_value": 9999.0}
        ),
        mock_contract.model_copy(update={"status": ContractStatus.VOIDED, "payment_value": 500.0}),
    ]


class TestLastMonths:
    """Tests for last_months function."""

    def test_oldest_first(self):
        """Test that months are listed oldest first, ending with the current month."""
        assert last_months(TODAY, 3) == [(2026, 8), (2026, 9), (2026, 10)]

    def test_crosses_year(self):
        """Test that the window wraps into the previous year."""
        assert last_months(date(2026, 2, 1), 4) == [(2025, 11), (2025, 12), (2026, 1), (2026, 2)]


class TestComputeHomeStats:
    """Tests for compute_home_stats function."""

    def test_empty(self):
        """Test that no records give zeroes without dividing by zero."""
        stats = compute_home_stats([], [], TODAY)
        assert stats.real_estate.occupancy_rate == 0
        assert stats.financial.average_rent == 0
        assert len(stats.financial.revenue_by_month) == 6
        assert stats.contracts.total == 0

    def test_real_estate_totals(self, real_estates, contracts):
        """Test property counts and occupancy rate."""
        stats = compute_home_stats(real_estates, contracts, TODAY)

        assert stats.real_estate.total == 5
        assert stats.real_estate.leased == 2
        assert stats.real_estate.available == 1
        assert stats.real_estate.sold == 1
        assert stats.real_estate.under_maintenance == 1
        assert stats.real_estate.occupancy_rate == pytest.approx(40.0)
        assert [(s.name, s.value) for s in stats.property_distribution] == [
            ("Disponível", 1),
            ("Alugado", 2),
            ("Vendido", 1),
            ("Em Manutenção", 1),
        ]

    def test_financial(self, real_estates, contracts):
        """Test revenue figures of active contracts."""
        financial = compute_home_stats(real_estates, contracts, TODAY).financial

        assert financial.total_revenue == 6000.0
        assert financial.average_rent == 2000.0
        assert financial.projected_annual_revenue == 72000.0
        assert [m.month for m in financial.revenue_by_month] == ["Mai", "Jun", "Jul", "Ago", "Set", "Out"]
        assert [m.revenue for m in financial.revenue_by_month] == [0, 1000.0, 0, 0, 0, 2000.0]
        assert financial.monthly_revenue == 2000.0

    def test_contracts(self, real_estates, contracts):
        """Test contract totals and kind distribution."""
        stats = compute_home_stats(real_estates, contracts, TODAY).contracts

        assert (stats.total, stats.active, stats.completed, stats.cancelled) == (5, 3, 1, 1)
        assert [(d.kind, d.count) for d in stats.distribution] == [
            ("Venda com exclusividade", 1),
            ("Venda sem exclusividade", 0),
            ("Locação com administração", 0),
            ("Locação", 4),
        ]
