"""API client for the GitHub v3 REST API (github.com and Enterprise hosts)."""

from __future__ import annotations

import base64
import json
import logging
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional, Union
from urllib.parse import quote

import httpx
from rich.console import Console

from ghtools.core.config import ClientConfig
from ghtools.core.credentials import CredentialPrompt
from ghtools.core.errors import APIError, ConfigurationError, InvalidRequestError
from ghtools.core.trace import SEPARATOR, format_request, format_response

logger = logging.getLogger(__name__)

DEFAULT_ACCEPT = "application/vnd.github.v3+json"
DEFAULT_CONTENT_TYPE = "application/json"

# GitHub redirects some PUT endpoints (e.g. renamed repositories)
REDIRECT_METHODS = frozenset({"GET", "HEAD", "PUT"})

RequestData = Union[str, Mapping[str, Any], list, None]


@dataclass
class RequestOptions:
    """Per-call options for APIClient.command."""

    content_type: Optional[str] = None
    accept_type: Optional[str] = None
    no_follow: bool = False
    page_limit: Optional[int] = None
    # Full follow URL from a Link header; overrides normal URL construction
    link: Union[str, bool, None] = None


def pretty(content: Any) -> str:
    """Render content as 2-space indented JSON when possible, else as text."""
    if isinstance(content, (bytes, bytearray)):
        content = content.decode("utf-8", errors="replace")
    if isinstance(content, str):
        try:
            content = json.loads(content)
        except ValueError:
            return content
    try:
        return json.dumps(content, indent=2)
    except (TypeError, ValueError):
        return str(content)


def _query_value(key: str, value: Any) -> str:
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        raise InvalidRequestError(
            f"GET data must be flat: {key!r} has a {type(value).__name__} value"
        )
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _page_number(url: str) -> Optional[int]:
    page = httpx.URL(url).params.get("page")
    try:
        return int(page) if page is not None else None
    except ValueError:
        return None


class APIClient:
    """HTTP client for one GitHub host.

    The base URI and Authorization header are resolved once, when the
    client is built. ``next_link`` holds the "next" pagination URL of the
    most recent response, so a caller can continue by hand after a
    ``no_follow`` or ``page_limit`` call.
    """

    def __init__(
        self,
        config: ClientConfig,
        prompt: Optional[CredentialPrompt] = None,
        transport: Optional[httpx.BaseTransport] = None,
        console: Optional[Console] = None,
    ):
        self.config = config
        self.base_uri = config.base_uri
        self.verbose = config.verbose
        self.console = console or Console(stderr=True, highlight=False)
        self.next_link: Optional[str] = None
        self._transport = transport
        self._client: Optional[httpx.Client] = None
        self._auth_header = self._resolve_auth(prompt)

    def _resolve_auth(self, prompt: Optional[CredentialPrompt]) -> str:
        config = self.config
        if config.token:
            return "token " + quote(config.token, safe="")

        username, password = config.username, config.password
        if not (username and password):
            if prompt is None:
                raise ConfigurationError(
                    "no token or username/password provided for " + config.host
                )
            username = prompt.ask_username(username or "")
            password = prompt.ask_password()
            if not (username and password):
                raise ConfigurationError("no credentials entered for " + config.host)
            self.config = replace(config, username=username, password=password)

        encoded = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
        return "Basic " + encoded

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize the HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=self.config.timeout, transport=self._transport)
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "APIClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def build_url(
        self,
        method: str,
        target: str,
        data: RequestData = None,
        options: Optional[RequestOptions] = None,
    ) -> str:
        """Build the request URL; GET data becomes the query string.

        Query values are not escaped; callers pass them pre-encoded.
        """
        options = options or RequestOptions()
        if isinstance(options.link, str):
            return options.link

        if target.startswith("/"):
            target = target[1:]
        if target.startswith(("http://", "https://")):
            url = target
        else:
            url = f"{self.base_uri}/{target}"

        if options.link or method.upper() != "GET" or not data:
            return url

        if isinstance(data, str):
            query = data
        elif isinstance(data, Mapping):
            query = "&".join(
                f"{key}={_query_value(key, data[key])}" for key in sorted(data)
            )
        else:
            raise InvalidRequestError("GET data must be a query string or a flat mapping")

        if query:
            url += "?" + query
        return url

    def build_request(
        self,
        method: str,
        url: str,
        data: RequestData = None,
        options: Optional[RequestOptions] = None,
    ) -> httpx.Request:
        """Build a request; only non-GET, non-follow requests carry a body."""
        options = options or RequestOptions()
        method = method.upper()
        headers = {
            "Authorization": self._auth_header,
            "Accept": options.accept_type or DEFAULT_ACCEPT,
        }
        content = b""

        if not options.link and method != "GET":
            payload = {} if data is None else data
            body = payload if isinstance(payload, str) else json.dumps(payload, separators=(",", ":"))
            if body:
                headers["Content-Type"] = options.content_type or DEFAULT_CONTENT_TYPE
                content = body.encode("utf-8")

        request = httpx.Request(method, url, headers=headers, content=content or None)

        if self.verbose:
            self._trace(format_request(request, self.verbose))
        return request

    def issue(self, request: httpx.Request) -> httpx.Response:
        """Send a request; non-2xx responses raise APIError."""
        follow = request.method in REDIRECT_METHODS
        response = self.client.send(request, follow_redirects=follow)

        if response.history:
            logger.debug("Followed %d redirect(s) to %s", len(response.history), response.url)
        if self.verbose:
            self._trace(format_response(response, self.verbose))

        if not response.is_success:
            status_line = f"{response.status_code} {response.reason_phrase}"
            raise APIError(response.status_code, status_line, response.text, pretty(response.text))
        return response

    def extract_content(self, response: httpx.Response) -> Any:
        """Decode a JSON body, falling back to the raw text (e.g. diffs)."""
        try:
            return response.json()
        except ValueError:
            return response.text

    def command(
        self,
        method: str,
        target: str,
        data: RequestData = None,
        options: Optional[RequestOptions] = None,
    ) -> Any:
        """Run one API call, following "next" links and merging the pages.

        Args:
            method: HTTP method (GET, POST, PUT, ...)
            target: API path relative to the base URI, or a full URL
            data: query string or flat mapping for GET, JSON payload otherwise
            options: per-call options

        Returns:
            Decoded JSON content, or the raw text for non-JSON responses
        """
        method = method.upper()
        options = options or RequestOptions()
        self.next_link = None

        url = self.build_url(method, target, data, options)
        content, link = self._fetch(method, url, data, options)

        while link:
            if options.no_follow:
                break
            if options.page_limit is not None:
                page = _page_number(link)
                if page is not None and page > options.page_limit:
                    logger.debug("Page %d exceeds limit %d, not following", page, options.page_limit)
                    break

            logger.debug("Following next link %s", link)
            hop = replace(options, link=link)
            page_content, link = self._fetch(method, link, data, hop)
            _merge(content, page_content)

        return content

    def _fetch(self, method: str, url: str, data: RequestData, options: RequestOptions):
        request = self.build_request(method, url, data, options)
        response = self.issue(request)
        content = self.extract_content(response)

        link = None
        if isinstance(content, (list, dict)):
            link = response.links.get("next", {}).get("url")
        self.next_link = link
        return content, link

    def _trace(self, text: str) -> None:
        self.console.out(text, highlight=False)
        self.console.out(SEPARATOR, highlight=False)

    # Convenience wrappers
    def get(self, target: str, data: RequestData = None, **options: Any) -> Any:
        return self.command("GET", target, data, RequestOptions(**options))

    def post(self, target: str, data: RequestData = None, **options: Any) -> Any:
        return self.command("POST", target, data, RequestOptions(**options))

    def put(self, target: str, data: RequestData = None, **options: Any) -> Any:
        return self.command("PUT", target, data, RequestOptions(**options))

    def patch(self, target: str, data: RequestData = None, **options: Any) -> Any:
        return self.command("PATCH", target, data, RequestOptions(**options))

    def delete(self, target: str, data: RequestData = None, **options: Any) -> Any:
        return self.command("DELETE", target, data, RequestOptions(**options))


def _merge(content: Any, page: Any) -> None:
    if isinstance(content, list) and isinstance(page, list):
        content.extend(page)
    elif (
        isinstance(content, dict)
        and isinstance(page, dict)
        and isinstance(content.get("items"), list)
        and isinstance(page.get("items"), list)
    ):
        content["items"].extend(page["items"])
