"""Request-scoped access to the record store and analytics service built at startup."""

from fastapi import Request

from snatched.analytics.service import AnalyticsService
from snatched.store.base import RecordStore


def get_record_store(request: Request) -> RecordStore:
    return request.app.state.record_store


def get_analytics(request: Request) -> AnalyticsService:
    return request.app.state.analytics
