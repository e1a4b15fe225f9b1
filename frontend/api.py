# frontend/api.py
"""HTTP client for the finance backend, built on requests."""
import os
import logging

import requests

logger = logging.getLogger("finance-frontend")

API_BASE = os.environ.get("API_BASE", "http://localhost:5000")


class ApiRequestError(Exception):
    def __init__(self, message, status_code=None, code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code


def safe_json(resp):
    try:
        return resp.json()
    except ValueError:
        return None


class ApiClient:
    """Thin wrapper over the REST endpoints. Every call is attempted once."""

    def __init__(self, base_url=API_BASE, session=None, timeout=10):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def request(self, method, path, token=None, json=None, params=None):
        headers = {}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        url = self.base_url + path
        try:
            response = self.session.request(
                method.upper(), url, headers=headers, json=json, params=params, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise ApiRequestError(f"Connection failed: {e}")

        payload = safe_json(response)
        if response.status_code >= 400:
            body = payload if isinstance(payload, dict) else {}
            raise ApiRequestError(
                body.get("message") or body.get("msg") or f"HTTP {response.status_code}",
                status_code=response.status_code,
                code=body.get("error"),
            )
        return payload

    # ---------------- Auth ----------------
    def signup(self, username, password):
        return self.request("POST", "/auth/signup", json={"username": username, "password": password})

    def login(self, username, password):
        return self.request("POST", "/auth/login", json={"username": username, "password": password})

    # ---------------- Transactions ----------------
    def list_transactions(self, token, filters=None):
        return self.request("GET", "/api/transactions", token=token, params=filters or None)

    def create_transaction(self, token, body):
        return self.request("POST", "/api/transactions", token=token, json=body)

    def update_transaction(self, token, tx_id, body):
        return self.request("PUT", f"/api/transactions/{tx_id}", token=token, json=body)

    def delete_transaction(self, token, tx_id):
        return self.request("DELETE", f"/api/transactions/{tx_id}", token=token)

    def summary(self, token, filters=None):
        return self.request("GET", "/api/summary", token=token, params=filters or None)

    # ---------------- Misc ----------------
    def categories(self):
        return self.request("GET", "/categories")

    def health(self):
        return self.request("GET", "/health")
