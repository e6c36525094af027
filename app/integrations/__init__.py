"""Integrations package: external HUD system ports."""

from app.integrations.contracts import HudReportingGateway, IntegrationError, SubmissionReceipt
from app.integrations.fake_impl import FakeHudReportingGateway

__all__ = [
    "FakeHudReportingGateway",
    "HudReportingGateway",
    "IntegrationError",
    "SubmissionReceipt",
]
