import logging
import pytest
from app.core.config import settings
from app.utils.request_logging_middleware import format_log_line


class TestFormatLogLine:

    def test_short_line_untouched(self):
        assert format_log_line("GET", "/api/products", 200, 3) == "GET /api/products 200 in 3ms"

    def test_body_appended(self):
        line = format_log_line("POST", "/api/contact", 400, 1, '{"success":false}')
        assert line == 'POST /api/contact 400 in 1ms :: {"success":false}'

    def test_long_line_truncated(self):
        line = format_log_line("POST", "/api/contact", 200, 12, "x" * 200)

        assert len(line) == 80
        assert line.endswith("…")


@pytest.mark.asyncio
class TestRequestLoggingMiddleware:
    async def test_api_requests_are_logged(self, client, caplog):
        caplog.set_level(logging.INFO, logger="app.utils.request_logging_middleware")

        response = client.get(f"{settings.API_PREFIX}/products/teleporter")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Product not found"}
        assert any(
            r.getMessage().startswith("GET /api/products/teleporter 404 in")
            for r in caplog.records
        )

    async def test_other_paths_are_not_logged(self, client, caplog):
        caplog.set_level(logging.INFO, logger="app.utils.request_logging_middleware")

        response = client.get("/health")

        assert response.status_code == 200
        assert not [r for r in caplog.records if r.name == "app.utils.request_logging_middleware"]
