"""
PrometheusClient for querying Prometheus via its HTTP API.
"""

from datetime import datetime, timedelta
from enum import Enum
from typing import Optional

import requests
import structlog

from .exceptions import PromAuthError, PromConnectionError, PromDecodeError, PromQueryError
from .models import (
    AlertManagers,
    Alerts,
    Config,
    Envelope,
    Expression,
    FlagMap,
    LabelOrValueList,
    Payload,
    Rules,
    SeriesList,
    Targets,
    decode_envelope,
)
from .utils import format_duration, format_timestamp

logger = structlog.get_logger(__name__)

INSTANT_QUERY_ENDPOINT = "/api/v1/query"
RANGE_QUERY_ENDPOINT = "/api/v1/query_range"
SERIES_ENDPOINT = "/api/v1/series"
LABELS_ENDPOINT = "/api/v1/labels"
LABEL_VALUES_ENDPOINT = "/api/v1/label/{}/values"
TARGETS_ENDPOINT = "/api/v1/targets"
RULES_ENDPOINT = "/api/v1/rules"
ALERTS_ENDPOINT = "/api/v1/alerts"
ALERT_MANAGERS_ENDPOINT = "/api/v1/alertmanagers"
STATUS_CONFIG_ENDPOINT = "/api/v1/status/config"
STATUS_FLAGS_ENDPOINT = "/api/v1/status/flags"

# Status codes for which the API documents a JSON error envelope
ENVELOPE_STATUS_CODES = {200, 400, 422, 503}


class TargetState(str, Enum):
    """Filter for the targets endpoint."""

    ACTIVE = "active"
    DROPPED = "dropped"
    ANY = "any"


class RuleTypeFilter(str, Enum):
    """Filter for the rules endpoint."""

    ALERT = "alert"
    RECORD = "record"


class PrometheusClient:
    """
    Client for the Prometheus HTTP query API.

    Every method returns an Envelope whose payload variant is resolved from
    the response shape.

    Example:
        client = PrometheusClient(
            base_url="http://prometheus.example.com:9090",
            query_timeout=timedelta(seconds=5)
        )

        envelope = client.instant_query("up")
        for instant in envelope.unwrap().result:
            print(instant.metric, instant.sample.value)
    """

    def __init__(
        self,
        base_url: str,
        auth: Optional[tuple[str, str]] = None,
        ca_cert: Optional[str] = None,
        verify_ssl: bool = True,
        timeout: int = 30,
        query_timeout: Optional[timedelta | float] = None
    ):
        """
        Initialize the Prometheus client.

        Args:
            base_url: Base URL of the Prometheus server (e.g., "http://localhost:9090").
            auth: Optional tuple of (username, password) for basic authentication.
            ca_cert: Optional path to CA certificate PEM file for self-signed certs.
            verify_ssl: Whether to verify SSL certificates. Set False to disable (insecure).
            timeout: HTTP request timeout in seconds.
            query_timeout: Optional evaluation timeout forwarded to the query endpoints.
        """
        self.base_url = base_url.rstrip("/")
        self.auth = auth
        self.ca_cert = ca_cert
        self.verify_ssl = verify_ssl
        self.timeout = timeout
        self.query_timeout = query_timeout

        self._session: Optional[requests.Session] = None
        self._log = logger.bind(base_url=self.base_url)

    @property
    def session(self) -> requests.Session:
        """
        Get or create HTTP session with configured authentication and SSL settings.

        Returns:
            Configured requests.Session instance.
        """
        if self._session is None:
            self._session = requests.Session()

            if self.auth:
                self._session.auth = self.auth

            if self.ca_cert:
                self._session.verify = self.ca_cert
            else:
                self._session.verify = self.verify_ssl

        return self._session

    def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[dict] = None,
        data: Optional[dict] = None,
        hint: Optional[type[Payload]] = None
    ) -> Envelope:
        """
        Make HTTP request to the Prometheus API.

        Args:
            method: HTTP method (GET or POST).
            endpoint: API endpoint path.
            params: Optional query parameters.
            data: Optional form-encoded body parameters.
            hint: Payload class this endpoint is expected to return.

        Returns:
            Decoded response envelope, which may be an error envelope.

        Raises:
            PromConnectionError: If connection to Prometheus fails.
            PromAuthError: If authentication fails (401/403).
            PromQueryError: If the server answers with an unexpected status
                or an error body that is not an API envelope.
            PromDecodeError: If a successful response cannot be decoded.
        """
        url = f"{self.base_url}{endpoint}"

        try:
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                data=data,
                timeout=self.timeout
            )
        except requests.exceptions.SSLError as e:
            raise PromConnectionError(f"SSL error connecting to Prometheus: {e}") from e
        except requests.exceptions.ConnectionError as e:
            raise PromConnectionError(f"Failed to connect to Prometheus at {url}: {e}") from e
        except requests.exceptions.Timeout as e:
            raise PromConnectionError(f"Request to Prometheus timed out: {e}") from e
        except requests.exceptions.RequestException as e:
            raise PromConnectionError(f"Request to Prometheus failed: {e}") from e

        self._log.debug(
            "prometheus_request", method=method, endpoint=endpoint, status=response.status_code
        )

        if response.status_code == 401:
            raise PromAuthError("Authentication failed: invalid credentials")
        if response.status_code == 403:
            raise PromAuthError("Authorization failed: access denied")

        if response.status_code not in ENVELOPE_STATUS_CODES:
            raise PromQueryError(
                f"Prometheus request failed with status {response.status_code}: {response.text}"
            )

        try:
            return decode_envelope(response.content, hint)
        except PromDecodeError as e:
            if response.status_code == 200:
                raise
            raise PromQueryError(
                f"Prometheus request failed with status {response.status_code}: {response.text}"
            ) from e

    def _query_timeout_param(self) -> dict:
        if self.query_timeout is None:
            return {}
        return {"timeout": format_duration(self.query_timeout)}

    def instant_query(
        self,
        query: str,
        time: Optional[datetime | float] = None
    ) -> Envelope:
        """
        Evaluate a query at a single point in time.

        Args:
            query: PromQL query string (e.g., 'up{job="api"}').
            time: Evaluation time; the server uses its current time if omitted.

        Returns:
            Envelope whose payload is an Expression.
        """
        params = {"query": query}

        if time is not None:
            params["time"] = format_timestamp(time)
        params.update(self._query_timeout_param())

        return self._request("GET", INSTANT_QUERY_ENDPOINT, params, hint=Expression)

    def range_query(
        self,
        query: str,
        start: datetime | float,
        end: datetime | float,
        step: timedelta | float
    ) -> Envelope:
        """
        Evaluate a query over a range of time.

        Args:
            query: PromQL query string.
            start: Start of the range.
            end: End of the range.
            step: Resolution step between evaluations (timedelta or seconds).

        Returns:
            Envelope whose payload is an Expression, normally a RangeMatrix.
        """
        params = {
            "query": query,
            "start": format_timestamp(start),
            "end": format_timestamp(end),
            "step": format_duration(step)
        }
        params.update(self._query_timeout_param())

        return self._request("GET", RANGE_QUERY_ENDPOINT, params, hint=Expression)

    def series(
        self,
        selectors: list[str],
        start: Optional[datetime | float] = None,
        end: Optional[datetime | float] = None
    ) -> Envelope:
        """
        Find series matching the given selectors.

        Selectors are sent as a form-encoded POST body so long selector lists
        do not hit URL length limits.

        Args:
            selectors: List of series selectors (e.g., ['up', '{job="api"}']).
            start: Optional start of the time range.
            end: Optional end of the time range.

        Returns:
            Envelope whose payload is a SeriesList.

        Raises:
            ValueError: If no selector is given.
        """
        if not selectors:
            raise ValueError("At least one series selector is required")

        data = {"match[]": list(selectors)}

        if start is not None:
            data["start"] = format_timestamp(start)
        if end is not None:
            data["end"] = format_timestamp(end)

        return self._request("POST", SERIES_ENDPOINT, data=data, hint=SeriesList)

    def label_names(self) -> Envelope:
        """
        Get all label names.

        Returns:
            Envelope whose payload is a LabelOrValueList.
        """
        return self._request("GET", LABELS_ENDPOINT, hint=LabelOrValueList)

    def label_values(self, label: str) -> Envelope:
        """
        Get all values of a label.

        Args:
            label: Label name to get values for.

        Returns:
            Envelope whose payload is a LabelOrValueList.
        """
        endpoint = LABEL_VALUES_ENDPOINT.format(label)
        return self._request("GET", endpoint, hint=LabelOrValueList)

    def targets(self, state: Optional[TargetState] = None) -> Envelope:
        """
        Get scrape targets, optionally filtered by state.

        Args:
            state: Optional TargetState filter.

        Returns:
            Envelope whose payload is Targets.
        """
        params = {"state": TargetState(state).value} if state is not None else None
        return self._request("GET", TARGETS_ENDPOINT, params, hint=Targets)

    def rules(self, rule_type: Optional[RuleTypeFilter] = None) -> Envelope:
        """
        Get loaded rule groups, optionally filtered by rule type.

        Args:
            rule_type: Optional RuleTypeFilter.

        Returns:
            Envelope whose payload is Rules.
        """
        params = {"type": RuleTypeFilter(rule_type).value} if rule_type is not None else None
        return self._request("GET", RULES_ENDPOINT, params, hint=Rules)

    def alerts(self) -> Envelope:
        """Get all active alerts."""
        return self._request("GET", ALERTS_ENDPOINT, hint=Alerts)

    def alert_managers(self) -> Envelope:
        """Get the Alertmanagers Prometheus sends alerts to."""
        return self._request("GET", ALERT_MANAGERS_ENDPOINT, hint=AlertManagers)

    def config(self) -> Envelope:
        """Get the loaded configuration file as YAML."""
        return self._request("GET", STATUS_CONFIG_ENDPOINT, hint=Config)

    def flags(self) -> Envelope:
        """Get the command-line flag values."""
        return self._request("GET", STATUS_FLAGS_ENDPOINT, hint=FlagMap)

    def close(self) -> None:
        """Close the HTTP session."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self) -> "PrometheusClient":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit - closes session."""
        self.close()
