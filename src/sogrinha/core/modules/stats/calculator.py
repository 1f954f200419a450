"""Dashboard statistics computed from the full property and contract lists."""

from collections import Counter
from collections.abc import Sequence
from datetime import date

from sogrinha.core.modules.contract.models import Contract, ContractKind, ContractStatus
from sogrinha.core.modules.real_estate.models import RealEstate, RealEstateStatus
from sogrinha.core.modules.stats.models import (
    ContractKindCount,
    ContractStats,
    DistributionSlice,
    FinancialStats,
    HomeStats,
    MonthlyRevenue,
    RealEstateStats,
)

SHORT_MONTH_NAMES = ["Jan", "Fev", "Mar", "Abr", "Mai", "Jun", "Jul", "Ago", "Set", "Out", "Nov", "Dez"]
REVENUE_MONTHS = 6


def last_months(today: date, count: int) -> list[tuple[int, int]]:
    """(year, month) pairs of the last ``count`` months including the current one, oldest first."""
    months = []
    year, month = today.year, today.month
    for _ in range(count):
        months.append((year, month))
        month -= 1
        if month == 0:
            year, month = year - 1, 12
    return list(reversed(months))


def compute_home_stats(
    real_estates: Sequence[RealEstate], contracts: Sequence[Contract], today: date
) -> HomeStats:
    statuses = Counter(real_estate.status for real_estate in real_estates)
    total_properties = len(real_estates)
    leased = statuses[RealEstateStatus.LEASED]
    occupancy_rate = leased / total_properties * 100 if total_properties else 0.0

    active_contracts = [c for c in contracts if c.status == ContractStatus.ACTIVE]
    total_revenue = sum(c.payment_value for c in active_contracts)
    average_rent = total_revenue / len(active_contracts) if active_contracts else 0.0

    revenue_by_month = [
        MonthlyRevenue(
            month=SHORT_MONTH_NAMES[month - 1],
            revenue=sum(
                c.payment_value
                for c in active_contracts
                if c.start_date.year == year and c.start_date.month == month
            ),
        )
        for year, month in last_months(today, REVENUE_MONTHS)
    ]

    contract_statuses = Counter(contract.status for contract in contracts)
    contract_kinds = Counter(contract.kind for contract in contracts)

    return HomeStats(
        real_estate=RealEstateStats(
            total=total_properties,
            available=statuses[RealEstateStatus.AVAILABLE],
            leased=leased,
            sold=statuses[RealEstateStatus.SOLD],
            under_maintenance=statuses[RealEstateStatus.UNDER_MAINTENANCE],
            occupancy_rate=occupancy_rate,
        ),
        financial=FinancialStats(
            total_revenue=total_revenue,
            monthly_revenue=revenue_by_month[-1].revenue,
            average_rent=average_rent,
            projected_annual_revenue=total_revenue * 12,
            revenue_by_month=revenue_by_month,
        ),
        contracts=ContractStats(
            total=len(contracts),
            active=contract_statuses[ContractStatus.ACTIVE],
            completed=contract_statuses[ContractStatus.DONE],
            cancelled=contract_statuses[ContractStatus.VOIDED],
            distribution=[ContractKindCount(kind=kind.value, count=contract_kinds[kind]) for kind in ContractKind],
        ),
        property_distribution=[
            DistributionSlice(name=status.value, value=statuses[status])
            for status in (
                RealEstateStatus.AVAILABLE,
                RealEstateStatus.LEASED,
                RealEstateStatus.SOLD,
                RealEstateStatus.UNDER_MAINTENANCE,
            )
        ],
    )
