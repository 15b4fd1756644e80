"""Budget totals for a trip."""

from backend.app.models.budget import BudgetSummary
from backend.app.models.trips import Trip


def summarize_budget(trip: Trip) -> BudgetSummary:
    """Sum activity, embedded transport and standalone transport costs.

    Missing costs count as zero. Amounts are assumed to be in the trip currency.
    """
    activities = sum(a.cost or 0 for a in trip.activities)
    activity_transports = sum(
        a.transport.cost or 0 for a in trip.activities if a.transport is not None
    )
    transports = sum(t.cost or 0 for t in trip.transports)

    return BudgetSummary(
        currency=trip.currency,
        activities=activities,
        activity_transports=activity_transports,
        transports=transports,
        total=activities + activity_transports + transports,
    )
