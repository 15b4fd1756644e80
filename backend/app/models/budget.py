"""Budget summary model."""

from pydantic import BaseModel


class BudgetSummary(BaseModel):
    """Cost totals for a trip, in the trip currency."""

    currency: str
    activities: float
    activity_transports: float
    transports: float
    total: float
