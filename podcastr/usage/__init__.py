"""Usage accounting and cost reporting."""

from .tracker import UsageCounters, UsageTracker
from .report import render_cost_report

__all__ = ["UsageCounters", "UsageTracker", "render_cost_report"]
