"""Reporting module for expecto test output."""

from expecto.reports.base import Reporter
from expecto.reports.console import ConsoleReporter

__all__ = ["ConsoleReporter", "Reporter"]
