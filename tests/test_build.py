"""Tests for URL and request construction."""

import json

import pytest

from ghtools.core.api_client import APIClient, RequestOptions
from ghtools.core.errors import InvalidRequestError

BASE = "https://github.example.com/api/v3"


@pytest.fixture
def api(config):
    return APIClient(config)


class TestBuildURL:
    """APIClient.build_url is a pure function of its inputs."""

    def test_leading_slash_is_optional(self, api):
        """Targets with and without a leading slash resolve the same."""
        assert api.build_url("GET", "user") == f"{BASE}/user"
        assert api.build_url("GET", "/user") == f"{BASE}/user"

    def test_only_one_leading_slash_stripped(self, api):
        """Only the first leading slash is removed."""
        assert api.build_url("GET", "//user") == f"{BASE}//user"

    def test_mapping_sorted_by_key(self, api):
        """Query pairs are ordered by key."""
        url = api.build_url("GET", "user", {"buz": "biz", "bar": "baz"})
        assert url == f"{BASE}/user?bar=baz&buz=biz"

    def test_values_are_not_escaped(self, api):
        """Query values go into the URL untouched."""
        url = api.build_url("GET", "search/issues", {"q": "repo:a/b is:open"})
        assert url == f"{BASE}/search/issues?q=repo:a/b is:open"

    def test_scalar_values(self, api):
        """Booleans and None render as query text."""
        url = api.build_url("GET", "repos", {"per_page": 100, "archived": False, "x": None})
        assert url == f"{BASE}/repos?archived=false&per_page=100&x="

    def test_query_string_used_as_is(self, api):
        """A string payload is appended after the question mark."""
        assert api.build_url("GET", "user/repos", "type=owner&sort=pushed") == f"{BASE}/user/repos?type=owner&sort=pushed"

    def test_empty_data_adds_nothing(self, api):
        """Empty data leaves the URL bare."""
        assert api.build_url("GET", "user", {}) == f"{BASE}/user"
        assert api.build_url("GET", "user", "") == f"{BASE}/user"

    @pytest.mark.parametrize("method", ["POST", "PUT", "PATCH", "DELETE"])
    def test_non_get_ignores_data(self, api, method):
        """Data never reaches the URL for other methods."""
        assert api.build_url(method, "user", {"bar": "baz"}) == f"{BASE}/user"

    def test_link_flag_suppresses_query(self, api):
        """A truthy link drops the query."""
        url = api.build_url("GET", "user", {"bar": "baz"}, RequestOptions(link=True))
        assert url == f"{BASE}/user"

    def test_link_url_overrides_everything(self, api):
        """A link URL is returned verbatim."""
        link = "https://github.example.com/api/v3/user?page=3"
        assert api.build_url("GET", "other", {"bar": "baz"}, RequestOptions(link=link)) == link

    @pytest.mark.parametrize("value", [["a", "b"], ("a",), {"nested": 1}, {"a"}])
    def test_nested_get_data_fails(self, api, value):
        """Nested GET values cannot be flattened."""
        with pytest.raises(InvalidRequestError):
            api.build_url("GET", "user", {"bar": value})

    def test_nested_data_fine_for_post(self, api):
        """Nested values are fine in a request body."""
        assert api.build_url("POST", "user", {"bar": ["a", "b"]}) == f"{BASE}/user"

    def test_full_url_target(self, api):
        """Absolute targets bypass the base URI."""
        assert api.build_url("GET", "https://foo/user") == "https://foo/user"
        assert api.build_url("GET", "https://foo/user", {"bar": "baz"}) == "https://foo/user?bar=baz"
        assert api.build_url("GET", "http://foo/user") == "http://foo/user"

    def test_lowercase_method(self, api):
        """Method names are matched case-insensitively."""
        assert api.build_url("get", "user", {"a": "1"}) == f"{BASE}/user?a=1"


class TestBuildRequest:
    """APIClient.build_request headers and bodies."""

    def test_get_has_no_body(self, api):
        """GET requests carry neither body nor Content-Type."""
        request = api.build_request("GET", f"{BASE}/user", {"bar": "baz"}, RequestOptions(content_type="text/plain"))
        assert request.content == b""
        assert "Content-Type" not in request.headers

    def test_post_json_body(self, api):
        """Structures are sent as compact JSON."""
        request = api.build_request("POST", f"{BASE}/user", {"bar": "baz"})
        assert request.content == b'{"bar":"baz"}'
        assert request.headers["Content-Type"] == "application/json"

    def test_content_type_override(self, api):
        """The content type option replaces the JSON default."""
        request = api.build_request("POST", f"{BASE}/user", {"bar": "baz"}, RequestOptions(content_type="application/x-custom"))
        assert request.headers["Content-Type"] == "application/x-custom"

    def test_missing_payload_is_empty_object(self, api):
        """A bare POST sends an empty object."""
        request = api.build_request("PUT", f"{BASE}/user/starred/o/r")
        assert request.content == b"{}"
        assert request.headers["Content-Type"] == "application/json"

    def test_string_payload_verbatim(self, api):
        """String payloads are sent as given."""
        request = api.build_request("POST", f"{BASE}/markdown/raw", "# Hello", RequestOptions(content_type="text/plain"))
        assert request.content == b"# Hello"
        assert request.headers["Content-Type"] == "text/plain"

    def test_empty_string_payload_has_no_body(self, api):
        """An empty string body is dropped."""
        request = api.build_request("POST", f"{BASE}/thing", "")
        assert request.content == b""
        assert "Content-Type" not in request.headers

    def test_list_payload(self, api):
        """Lists serialize as JSON arrays."""
        request = api.build_request("POST", f"{BASE}/repos/o/r/issues/1/labels", ["bug", "p1"])
        assert json.loads(request.content) == ["bug", "p1"]

    def test_follow_request_has_no_body(self, api):
        """Requests for a next link never carry a body."""
        link = f"{BASE}/thing?page=2"
        request = api.build_request("POST", link, {"bar": "baz"}, RequestOptions(link=link))
        assert request.content == b""
        assert "Content-Type" not in request.headers

    def test_default_accept(self, api):
        """The v3 media type is accepted by default."""
        request = api.build_request("GET", f"{BASE}/user")
        assert request.headers["Accept"] == "application/vnd.github.v3+json"

    def test_accept_override(self, api):
        """The accept option replaces the default media type."""
        preview = "application/vnd.github.luke-cage-preview+json"
        request = api.build_request("GET", f"{BASE}/user", options=RequestOptions(accept_type=preview))
        assert request.headers["Accept"] == preview

    def test_authorization_always_set(self, api):
        """Every request carries the Authorization header."""
        for method in ("GET", "POST", "DELETE"):
            assert api.build_request(method, f"{BASE}/user").headers["Authorization"] == "token s3cr3t-token"

    def test_method_uppercased(self, api):
        """The request method is upper-cased."""
        assert api.build_request("patch", f"{BASE}/user", {"a": 1}).method == "PATCH"
