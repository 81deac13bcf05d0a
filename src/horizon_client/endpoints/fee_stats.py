"""Fee statistics request."""

from ..models.request import Request
from .resources import FEE_STATS_PATH


class FeeStatsRequest(Request):
    """Fee statistics of the last ledgers, ``/fee_stats``. Takes no parameters."""

    def _resource_path(self) -> str:
        return FEE_STATS_PATH


__all__ = ["FeeStatsRequest"]
