# -*- coding: utf-8 -*-
"""
Form API Service - identity registration and form schema retrieval.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
import urllib3

from app.config import Config
from models.form_schema import FormSchema
from models.identity import Identity
from services.exceptions import ApiException, NetworkException, SchemaFetchError
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ApiConfig:
    """
    Connection settings for the form backend.

    Reads defaults from Config (which reads from .env).
    """
    base_url: str = None
    timeout: int = None
    verify_ssl: bool = None

    def __post_init__(self):
        """Load from Config if not provided."""
        if self.base_url is None:
            self.base_url = Config.API_BASE_URL
        if self.timeout is None:
            self.timeout = Config.API_TIMEOUT
        if self.verify_ssl is None:
            self.verify_ssl = Config.API_VERIFY_SSL

        if not self.verify_ssl:
            # Self-signed certificates in development
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)


@dataclass
class RegistrationResult:
    """Outcome of identity registration."""
    success: bool
    message: str


class FormApiService:
    """
    Client for the form backend.

    Usage:
        service = FormApiService()
        result = service.create_user(Identity("RA22", "Jane"))
        schema = service.get_form("RA22")
    """

    def __init__(self, config: Optional[ApiConfig] = None):
        self.config = config or ApiConfig()
        self.base_url = self.config.base_url.rstrip('/')

    def _request(
        self,
        method: str,
        endpoint: str,
        json_data: Optional[Dict] = None,
        params: Optional[Dict] = None
    ) -> Any:
        """
        Execute an HTTP request.

        Returns:
            Response JSON data (None for an empty body)

        Raises:
            ApiException: Non-2xx response
            NetworkException: Connection failure or timeout
        """
        url = f"{self.base_url}{endpoint}"

        logger.info(f"[API REQ] {method} {endpoint}")
        if params:
            logger.info(f"[API REQ] Params: {params}")

        try:
            response = requests.request(
                method=method,
                url=url,
                json=json_data,
                params=params,
                headers={"Content-Type": "application/json"},
                timeout=self.config.timeout,
                verify=self.config.verify_ssl
            )
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Network error: {endpoint} - {e}")
            raise NetworkException(message=str(e), original_error=e)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {endpoint} - {e}")
            raise NetworkException(message=str(e), original_error=e)

        result = None
        if response.text:
            try:
                result = response.json()
            except ValueError:
                result = None

        if not response.ok:
            response_data = result if isinstance(result, dict) else {}
            message = response_data.get("message") or f"HTTP {response.status_code}"
            logger.error(f"[API ERR] {response.status_code} {method} {endpoint} | Response: {response_data}")
            raise ApiException(
                message=message,
                status_code=response.status_code,
                response_data=response_data
            )

        logger.info(f"[API RES] {response.status_code} {endpoint}")
        if result is not None:
            res_str = json.dumps(result, ensure_ascii=False, default=str)
            if len(res_str) > 1000:
                logger.debug(f"[API RES] Body (truncated): {res_str[:1000]}...")
            else:
                logger.debug(f"[API RES] Body: {res_str}")
        return result

    # ==================== Identity ====================

    def create_user(self, identity: Identity) -> RegistrationResult:
        """
        Register an identity with the backend.

        Never raises: transport and API failures become an unsuccessful
        RegistrationResult carrying the failure message.
        """
        try:
            data = self._request("POST", "/create-user", json_data=identity.to_dict())
        except ApiException as e:
            message = e.response_data.get("message") or tr("registration.failed")
            logger.error(f"Error creating user: {e}")
            return RegistrationResult(success=False, message=message)
        except NetworkException as e:
            logger.error(f"Error creating user: {e}")
            return RegistrationResult(success=False, message=e.message)

        message = ""
        if isinstance(data, dict):
            message = data.get("message") or ""
        logger.info(f"User registered: {identity.roll_number}")
        return RegistrationResult(success=True, message=message or tr("registration.success"))

    # ==================== Form Schema ====================

    def get_form(self, roll_number: str) -> FormSchema:
        """
        Fetch the form schema for an identity token.

        Raises:
            SchemaFetchError: transport failure, malformed payload, or a
                schema without sections
        """
        try:
            data = self._request("GET", "/get-form", params={"rollNumber": roll_number})
        except (ApiException, NetworkException) as e:
            logger.error(f"Error fetching form: {e}")
            raise SchemaFetchError(str(e), SchemaFetchError.REASON_TRANSPORT, cause=e)

        if not isinstance(data, dict):
            raise SchemaFetchError("Form response is not an object", SchemaFetchError.REASON_INVALID)

        try:
            schema = FormSchema.from_dict(data)
        except (ValueError, TypeError) as e:
            logger.error(f"Malformed form schema: {e}")
            raise SchemaFetchError(str(e), SchemaFetchError.REASON_INVALID, cause=e)

        if schema.is_empty:
            raise SchemaFetchError("Form has no sections", SchemaFetchError.REASON_EMPTY)

        logger.info(
            f"Fetched form '{schema.title}' with {schema.section_count} sections "
            f"and {len(schema.field_ids())} fields"
        )
        return schema
