from pydantic import BaseModel


class RealEstateStats(BaseModel):
    total: int
    available: int
    leased: int
    sold: int
    under_maintenance: int
    occupancy_rate: float  # Leased share of all properties, in percent


class MonthlyRevenue(BaseModel):
    month: str  # Short Portuguese month name, e.g. "Out"
    revenue: float


class FinancialStats(BaseModel):
    total_revenue: float
    monthly_revenue: float
    average_rent: float
    projected_annual_revenue: float
    revenue_by_month: list[MonthlyRevenue]


class ContractKindCount(BaseModel):
    kind: str
    count: int


class ContractStats(BaseModel):
    total: int
    active: int
    completed: int
    cancelled: int
    distribution: list[ContractKindCount]


class DistributionSlice(BaseModel):
    name: str
    value: int


class HomeStats(BaseModel):
    """Figures shown on the dashboard."""

    real_estate: RealEstateStats
    financial: FinancialStats
    contracts: ContractStats
    property_distribution: list[DistributionSlice]
