"""
Request timing middleware tests.
"""

from unittest.mock import patch

import pytest
from django.http import JsonResponse
from django.test import Client, RequestFactory

from brandvoice.core.models import Organization
from brandvoice.middleware import timing
from brandvoice.middleware.timing import QueryTimer, RequestTimingMiddleware


def _logged_lines(log_info) -> list[str]:
    return [call.args[0] % call.args[1:] for call in log_info.call_args_list]


@pytest.mark.django_db
class TestRequestTiming:

    def test_api_responses_carry_timing_headers(self, client: Client):
        response = client.get("/api/health")

        assert "X-Request-Time-Ms" in response
        assert int(response["X-Response-Bytes"]) == len(response.content)

    def test_logs_one_line_per_api_request(self, client: Client):
        with patch.object(timing.logger, "info") as log_info:
            client.get("/api/health")

        lines = _logged_lines(log_info)
        assert len(lines) == 1
        assert lines[0].startswith("GET /api/health | status=200 | ms=")
        assert "brand=" not in lines[0]
        assert "user=" not in lines[0]

    def test_logs_brand_and_user(self, auth_client: Client, brand, user):
        with patch.object(timing.logger, "info") as log_info:
            auth_client.get("/api/brands/acme/rules")

        line = _logged_lines(log_info)[0]
        assert "| brand=acme |" in line
        assert line.endswith(f"user={user.id}")

    def test_non_api_paths_untouched(self, client: Client):
        response = client.get("/health/")
        assert "X-Request-Time-Ms" not in response

    def test_rejected_requests_are_timed(self, client: Client):
        response = client.get("/api/channels")

        assert response.status_code == 401
        assert "X-Request-Time-Ms" in response
        assert "X-DB-Queries" not in response


@pytest.mark.django_db
class TestDatabaseTiming:

    def test_counts_queries_when_enabled(self, monkeypatch):
        monkeypatch.setenv("BRANDVOICE_LOG_DB_TIMING", "1")

        def view(request):
            Organization.objects.count()
            Organization.objects.exists()
            return JsonResponse({})

        middleware = RequestTimingMiddleware(view)
        with patch.object(timing.logger, "info") as log_info:
            response = middleware(RequestFactory().get("/api/anything"))

        assert response["X-DB-Queries"] == "2"
        assert "| queries=2 | db_ms=" in _logged_lines(log_info)[0]

    def test_disabled_by_default(self, monkeypatch):
        monkeypatch.delenv("BRANDVOICE_LOG_DB_TIMING", raising=False)

        middleware = RequestTimingMiddleware(lambda request: JsonResponse({}))
        response = middleware(RequestFactory().get("/api/anything"))

        assert "X-DB-Queries" not in response


@pytest.mark.unit
class TestQueryTimer:

    def test_counts_failed_queries_too(self):
        timer = QueryTimer()

        def failing_execute(sql, params, many, context):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            timer(failing_execute, "SELECT 1", (), False, {})

        assert timer.count == 1
        assert timer.total_ms >= 0.0
