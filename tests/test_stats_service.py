# tests/test_stats_service.py
"""Unit tests for the dashboard figures."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from datetime import date
from rentaldesk.records import Booking, Vehicle
from rentaldesk.repository import RentalRepository
from rentaldesk.services.stats_service import DashboardStats, compute_dashboard_stats
from rentaldesk.storage.memory import MemoryStore


def make_vehicle(vehicle_id="v1", status="available"):
    return Vehicle(id=vehicle_id, model="Toyota Vios", plate=f"P-{vehicle_id}", daily_rate=1500,
                   transmission="auto", color_hex="#3B82F6", image_url="", status=status)


def make_booking(booking_id="b1", start=date(2024, 6, 1), end=date(2024, 6, 3),
                 price=4500, status="confirmed"):
    return Booking(id=booking_id, vehicle_id="v1", guest_name="Juan", guest_phone="0912",
                   start_date=start, end_date=end, total_price=price, status=status)


def make_repo(today, vehicles, bookings):
    store = MemoryStore()
    for v in vehicles:
        store.save_vehicle(v)
    for b in bookings:
        store.save_booking(b)
    return RentalRepository(store, today=lambda: today)


class TestDashboardStats:
    def test_empty_bookings(self):
        vehicles = [make_vehicle("v1"), make_vehicle("v2", status="maintenance"), make_vehicle("v3")]
        stats = compute_dashboard_stats(vehicles, [], date(2024, 6, 2))
        assert stats == DashboardStats(total_cars=3, rented_today=0, revenue_today=0, monthly_revenue=0)

    def test_booking_in_progress_counts_today(self):
        stats = compute_dashboard_stats([make_vehicle()], [make_booking()], date(2024, 6, 2))
        assert stats.rented_today == 1
        assert stats.revenue_today == 4500

    def test_today_window_is_inclusive(self):
        bookings = [make_booking()]
        assert compute_dashboard_stats([], bookings, date(2024, 6, 1)).rented_today == 1
        assert compute_dashboard_stats([], bookings, date(2024, 6, 3)).rented_today == 1
        assert compute_dashboard_stats([], bookings, date(2024, 6, 4)).rented_today == 0

    def test_pending_booking_counts_as_rented(self):
        stats = compute_dashboard_stats([], [make_booking(status="pending")], date(2024, 6, 2))
        assert stats.rented_today == 1

    def test_inactive_statuses_excluded_from_today(self):
        bookings = [make_booking(f"b{i}", status=s) for i, s in enumerate(("cancelled", "completed", "archived"))]
        stats = compute_dashboard_stats([], bookings, date(2024, 6, 2))
        assert stats.rented_today == 0
        assert stats.revenue_today == 0

    def test_monthly_revenue_uses_end_date_month(self):
        bookings = [
            make_booking("b1", start=date(2024, 5, 28), end=date(2024, 6, 2), price=1000, status="completed"),
            make_booking("b2", start=date(2024, 6, 29), end=date(2024, 7, 1), price=2000, status="completed"),
            make_booking("b3", start=date(2024, 6, 10), end=date(2024, 6, 30), price=4000, status="completed"),
        ]
        stats = compute_dashboard_stats([], bookings, date(2024, 6, 15))
        assert stats.monthly_revenue == 5000

    def test_monthly_revenue_ignores_non_completed(self):
        bookings = [
            make_booking("b1", status="confirmed"),
            make_booking("b2", status="cancelled"),
            make_booking("b3", status="archived"),
        ]
        assert compute_dashboard_stats([], bookings, date(2024, 6, 20)).monthly_revenue == 0

    def test_december_month_bounds(self):
        bookings = [make_booking(start=date(2024, 12, 30), end=date(2024, 12, 31), status="completed")]
        assert compute_dashboard_stats([], bookings, date(2024, 12, 1)).monthly_revenue == 4500

    def test_deterministic(self):
        args = ([make_vehicle()], [make_booking()], date(2024, 6, 2))
        assert compute_dashboard_stats(*args) == compute_dashboard_stats(*args)


class TestStatsScenario:
    def test_during_rental(self):
        repo = make_repo(date(2024, 6, 2), [make_vehicle()], [make_booking()])
        stats = repo.get_stats()
        assert stats.rented_today == 1
        assert stats.revenue_today == 4500
        assert stats.monthly_revenue == 0

    def test_following_month_after_sweep(self):
        repo = make_repo(date(2024, 7, 1), [make_vehicle()], [make_booking()])
        stats = repo.get_stats()
        assert repo.store.get_booking("b1").status == "completed"
        assert stats.rented_today == 0
        assert stats.monthly_revenue == 0

    def test_same_month_after_sweep(self):
        repo = make_repo(date(2024, 6, 30), [make_vehicle()], [make_booking()])
        assert repo.get_stats().monthly_revenue == 4500
