"""Tests for AWS Lambda handler."""

import base64
import json

from lambda_handler import lambda_handler

PAYLOAD = {
    "invoice": {
        "customer": "BigCo",
        "performances": [
            {"playID": "hamlet", "audience": 55},
            {"playID": "as-like", "audience": 35},
        ],
    },
    "plays": {
        "hamlet": {"name": "Hamlet", "type": "tragedy"},
        "as-like": {"name": "As You Like It", "type": "comedy"},
    },
}


class TestLambdaHandler:
    """Test the Lambda handler routes and responses."""

    def test_health_check(self):
        """GET /health returns healthy status."""
        event = {"httpMethod": "GET", "path": "/health"}
        response = lambda_handler(event, None)

        assert response["statusCode"] == 200
        body = json.loads(response["body"])
        assert body["status"] == "healthy"

    def test_api_info(self):
        """GET /api returns API information."""
        event = {"httpMethod": "GET", "path": "/api"}
        response = lambda_handler(event, None)

        assert response["statusCode"] == 200
        body = json.loads(response["body"])
        assert body["status"] == "ok"
        assert "endpoints" in body

    def test_cors_preflight(self):
        """OPTIONS requests return CORS headers."""
        event = {"httpMethod": "OPTIONS", "path": "/statement"}
        response = lambda_handler(event, None)

        assert response["statusCode"] == 200
        assert "Access-Control-Allow-Origin" in response["headers"]
        assert "Access-Control-Allow-Methods" in response["headers"]

    def test_not_found(self):
        """Unknown paths return 404."""
        event = {"httpMethod": "GET", "path": "/unknown"}
        response = lambda_handler(event, None)

        assert response["statusCode"] == 404

    def test_statement_success(self):
        """POST /statement calculates a valid invoice."""
        event = {"httpMethod": "POST", "path": "/statement", "body": json.dumps(PAYLOAD)}
        response = lambda_handler(event, None)

        assert response["statusCode"] == 200
        body = json.loads(response["body"])
        assert body["total_amount_cents"] == 123000
        assert body["total_volume_credits"] == 37

    def test_legacy_process_path(self):
        """POST /process is routed to the statement handler."""
        event = {"httpMethod": "POST", "path": "/process", "body": json.dumps(PAYLOAD)}
        response = lambda_handler(event, None)

        assert response["statusCode"] == 200

    def test_base64_body(self):
        """Base64 encoded bodies from API Gateway are decoded."""
        encoded = base64.b64encode(json.dumps(PAYLOAD).encode("utf-8")).decode("ascii")
        event = {"httpMethod": "POST", "path": "/statement", "body": encoded, "isBase64Encoded": True}
        response = lambda_handler(event, None)

        assert response["statusCode"] == 200

    def test_statement_empty_body(self):
        """POST /statement with empty body returns 400."""
        event = {"httpMethod": "POST", "path": "/statement", "body": ""}
        response = lambda_handler(event, None)

        assert response["statusCode"] == 400
        body = json.loads(response["body"])
        assert "error" in body

    def test_statement_invalid_json(self):
        """POST /statement with invalid JSON returns 400."""
        event = {"httpMethod": "POST", "path": "/statement", "body": "not valid json"}
        response = lambda_handler(event, None)

        assert response["statusCode"] == 400
        body = json.loads(response["body"])
        assert "error" in body

    def test_unknown_play_type(self):
        """An unsupported genre returns 400 with its error code."""
        payload = json.loads(json.dumps(PAYLOAD))
        payload["plays"]["hamlet"]["type"] = "history"

        event = {"httpMethod": "POST", "path": "/statement", "body": json.dumps(payload)}
        response = lambda_handler(event, None)

        assert response["statusCode"] == 400
        body = json.loads(response["body"])
        assert body["status"] == "validation_failed"
        assert body["code"] == "UNKNOWN_PLAY_TYPE"

    def test_unknown_play(self):
        """A performance of a play missing from the catalog returns 400."""
        payload = json.loads(json.dumps(PAYLOAD))
        del payload["plays"]["as-like"]

        event = {"httpMethod": "POST", "path": "/statement", "body": json.dumps(payload)}
        response = lambda_handler(event, None)

        assert response["statusCode"] == 400
        body = json.loads(response["body"])
        assert body["code"] == "UNKNOWN_PLAY"
        assert "total_amount" not in body

    def test_http_api_format(self):
        """Supports HTTP API v2 event format."""
        event = {"requestContext": {"http": {"method": "GET"}}, "rawPath": "/health"}
        response = lambda_handler(event, None)

        assert response["statusCode"] == 200
