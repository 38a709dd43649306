import logging

import pytest

pytestmark = pytest.mark.integration


class TestCorrelationIdOnCustomerRoutes:
    def test_request_id_returned_on_create(self, api_client):
        response = api_client.post(
            "/api/customers",
            {"firstName": "Dave", "lastName": "Brown", "email": "dave@example.com"},
            format="json",
            HTTP_X_REQUEST_ID="create-123",
        )
        assert response.status_code == 201
        assert response["X-Request-ID"] == "create-123"

    def test_service_logs_carry_correlation_id(self, api_client, caplog):
        with caplog.at_level(logging.INFO):
            api_client.get("/api/customers/99", HTTP_X_REQUEST_ID="lookup-789")
        messages = [record.getMessage() for record in caplog.records]
        assert any(
            "customer.not_found" in message and "lookup-789" in message
            for message in messages
        ), messages
