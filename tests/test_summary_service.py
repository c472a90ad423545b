"""Unit tests for the dashboard summary."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from app.models.registration import Registration
from app.services.summary_service import Summary, summarize


def make(occupant_type, hours, status="approved"):
    return Registration(occupant_type=occupant_type, hours_approved=hours, status=status)


class TestSummary:
    def test_empty(self):
        assert summarize([]) == Summary(active=0, tenants=0, guests=0, total_hours=0)

    def test_completed_excluded(self):
        registrations = [
            make("tenant", 2),
            make("guest", 5, status="parked"),
            make("tenant", 10, status="completed"),
            make("guest", 1),
        ]
        assert summarize(registrations) == Summary(active=3, tenants=1, guests=2, total_hours=8)

    def test_order_independent_and_repeatable(self):
        registrations = [make("tenant", 3), make("guest", 4, status="completed"), make("guest", 6)]
        first = summarize(registrations)
        assert summarize(list(reversed(registrations))) == first
        assert summarize(registrations) == first
