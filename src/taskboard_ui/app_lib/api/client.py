import requests
from typing import Dict, Any, Optional
import streamlit as st
from taskboard_ui.config.settings import config


class APIClient:
    def __init__(self):
        self.config = config
        self.session = requests.Session()
        self.base_url = config.endpoints.base
        self.timeout = config.request_timeout
        self._setup_defaults()

    def _setup_defaults(self):
        """Setup default headers and session configuration"""
        self.session.headers.update({
            'Content-Type': 'application/json',
            'Accept': 'application/json'
        })

    def _error_detail(self, response: requests.Response) -> str:
        """Pull the server's message out of an error body."""
        try:
            body = response.json()
        except ValueError:
            return response.text
        if isinstance(body, dict):
            return str(body.get("error") or body.get("detail") or body)
        return str(body)

    def _handle_error(self, error: Exception, url: str, show_ui_error: bool = True):
        if isinstance(error, requests.exceptions.Timeout):
            error_message = f"Request timeout: {url}"
        elif isinstance(error, requests.exceptions.ConnectionError):
            error_message = f"Connection error: Could not connect to {url}"
        elif isinstance(error, requests.exceptions.HTTPError) and error.response is not None:
            error_message = f"HTTP {error.response.status_code} error: {self._error_detail(error.response)}"
        else:
            error_message = f"Request failed: {str(error)}"

        # Show in UI if enabled
        if show_ui_error:
            st.error(error_message)

        # Re-raise to allow caller to handle if needed
        raise error

    def _build_url(self, endpoint: str) -> str:
        if endpoint.startswith('http'):
            return endpoint
        if endpoint.startswith('/'):
            return f"{self.base_url}{endpoint}"
        return f"{self.base_url}/{endpoint}"

    def get(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        timeout: Optional[int] = None,
        show_errors: bool = True
    ) -> Dict[str, Any]:
        url = self._build_url(endpoint)
        try:
            response = self.session.get(url, params=params, timeout=timeout or self.timeout)
            response.raise_for_status()
            return response.json()
        except Exception as e:
            self._handle_error(e, url, show_errors)

    def post(
        self,
        endpoint: str,
        data: Optional[Any] = None,
        timeout: Optional[int] = None,
        show_errors: bool = True
    ) -> Dict[str, Any]:
        url = self._build_url(endpoint)
        try:
            response = self.session.post(url, json=data, timeout=timeout or self.timeout)
            response.raise_for_status()
            return response.json()
        except Exception as e:
            self._handle_error(e, url, show_errors)

    def call(
        self,
        procedure: str,
        payload: Optional[Any] = None,
        timeout: Optional[int] = None,
        show_errors: bool = True
    ) -> Any:
        """Invoke a named procedure and return its ``result``."""
        response = self.post(
            f"{self.config.endpoints.rpc}/{procedure}",
            data=payload,
            timeout=timeout,
            show_errors=show_errors
        )
        return response.get("result")


# Export singleton instance - use this throughout the app
api_client = APIClient()
