# -*- coding: utf-8 -*-
"""
Gestion Scolaire API Client
===========================

Thin REST client for the school-management backend: bearer token
attachment, JSON requests, multipart uploads and error translation into
application exceptions.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
import urllib3

from services.exceptions import ApiException, NetworkException, ValidationException
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ApiConfig:
    """
    API connection settings.

    Values left as None are loaded from Config (which reads the .env file).
    """
    base_url: str = None
    timeout: int = None
    verify_ssl: bool = None

    def __post_init__(self):
        from app.config import Config

        if self.base_url is None:
            self.base_url = Config.API_BASE_URL
        if self.timeout is None:
            self.timeout = Config.API_TIMEOUT
        if self.verify_ssl is None:
            self.verify_ssl = Config.API_VERIFY_SSL
        if not self.verify_ssl:
            # Self-signed certificates in development
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)


class ApiClient:
    """
    HTTP client for the backend.

    Usage:
        client = ApiClient(ApiConfig(base_url="http://localhost:8000"))
        client.set_access_token(token)
        classes = client.get("/planification/classes")
    """

    def __init__(self, config: Optional[ApiConfig] = None, access_token: Optional[str] = None):
        self.config = config or ApiConfig()
        self.base_url = self.config.base_url.rstrip('/')
        self.access_token: Optional[str] = access_token
        self.session = requests.Session()

    def set_access_token(self, token: Optional[str]):
        """Set the token obtained at login (None to clear it)."""
        self.access_token = token

    def _headers(self, json_body: bool = True) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if json_body:
            headers["Content-Type"] = "application/json"
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    # ==================== Requests ====================

    def get(self, endpoint: str, params: Optional[Dict] = None) -> Any:
        return self._request("GET", endpoint, params=params)

    def post(self, endpoint: str, json_data: Optional[Dict] = None) -> Any:
        return self._request("POST", endpoint, json_data=json_data)

    def post_multipart(self, endpoint: str, form_fields: Dict[str, str],
                       files: Optional[Dict[str, tuple]] = None) -> Any:
        """
        POST multipart/form-data.

        Args:
            endpoint: API endpoint
            form_fields: Plain text parts
            files: File parts as ``{part_name: (file_name, content, mime_type)}``
        """
        files = files or {}
        parts = {name: (None, value) for name, value in form_fields.items()}
        parts.update(files)

        logger.info(f"[API REQ] POST {endpoint} (multipart: {', '.join(parts)})")
        return self._send(
            "POST", endpoint,
            files=parts,
            headers=self._headers(json_body=False),
        )

    def _request(
        self,
        method: str,
        endpoint: str,
        json_data: Optional[Dict] = None,
        params: Optional[Dict] = None
    ) -> Any:
        """
        Execute a JSON request.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: API endpoint (e.g., "/inscriptions/eleves")
            json_data: JSON payload
            params: Query parameters

        Returns:
            Response JSON data (None for an empty body)
        """
        logger.info(f"[API REQ] {method} {endpoint}")
        if params:
            logger.info(f"[API REQ] Params: {params}")
        if json_data:
            logger.debug(f"[API REQ] Body: {json.dumps(json_data, ensure_ascii=False, default=str)}")

        return self._send(
            method, endpoint,
            json=json_data,
            params=params,
            headers=self._headers(),
        )

    def _send(self, method: str, endpoint: str, **kwargs) -> Any:
        url = f"{self.base_url}{endpoint}"
        try:
            response = self.session.request(
                method=method,
                url=url,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
                **kwargs
            )
            response.raise_for_status()

            result = response.json() if response.text else None
            logger.info(f"[API RES] {response.status_code} {endpoint}")
            return result

        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            response_data = {}
            try:
                response_data = e.response.json() if e.response is not None else {}
            except (ValueError, AttributeError):
                pass
            logger.error(f"[API ERR] {status_code} {method} {endpoint} | Response: {response_data}")
            if status_code == 422:
                raise ValidationException.from_response(response_data, context=endpoint)
            raise ApiException(
                message=str(e),
                status_code=status_code,
                response_data=response_data,
                context=endpoint
            )
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Network error: {endpoint} - {e}")
            raise NetworkException(message=str(e), original_error=e, context=endpoint)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {endpoint} - {e}")
            raise NetworkException(message=str(e), original_error=e, context=endpoint)
