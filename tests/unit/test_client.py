"""Tests for the GraphQL client."""

import json

import httpx
import pytest
import respx

from lagoon_cli.client.auth import BearerTokenAuth, resolve_auth
from lagoon_cli.client.errors import APIConnectionError, APIError, AuthenticationError
from lagoon_cli.client.graphql import GraphQLClient
from lagoon_cli.config.models import Profile

API = "https://api.lagoon.test/graphql"


@pytest.fixture
def profile() -> Profile:
    return Profile(name="test", url=API, token="secret")


class TestAuth:
    def test_bearer_token_auth(self):
        auth = BearerTokenAuth("secret")
        request = httpx.Request("POST", API)
        modified = next(auth.auth_flow(request))
        assert modified.headers["Authorization"] == "Bearer secret"

    def test_resolve_auth_token(self, profile: Profile):
        assert isinstance(resolve_auth(profile), BearerTokenAuth)

    def test_resolve_auth_none(self):
        assert resolve_auth(Profile(name="t", url=API)) is None


class TestExecute:
    @respx.mock
    def test_posts_query_and_variables(self, profile: Profile):
        route = respx.post(API).mock(
            return_value=httpx.Response(200, json={"data": {"ok": True}})
        )
        with GraphQLClient(profile) as client:
            data = client.execute("query { ok }", {"id": 1})
        assert data == {"data": {"ok": True}}
        sent = json.loads(route.calls.last.request.content)
        assert sent == {"query": "query { ok }", "variables": {"id": 1}}
        assert route.calls.last.request.headers["Authorization"] == "Bearer secret"

    @respx.mock
    def test_omits_missing_variables(self, profile: Profile):
        route = respx.post(API).mock(
            return_value=httpx.Response(200, json={"data": {}})
        )
        with GraphQLClient(profile) as client:
            client.execute("query { ok }")
        assert "variables" not in json.loads(route.calls.last.request.content)

    @respx.mock
    def test_auth_error(self, profile: Profile):
        respx.post(API).mock(return_value=httpx.Response(401, text="Unauthorized"))
        with GraphQLClient(profile) as client, pytest.raises(
            AuthenticationError, match="Check your API token",
        ):
            client.execute("query { ok }")

    @respx.mock
    def test_server_error(self, profile: Profile):
        respx.post(API).mock(return_value=httpx.Response(502, text="Bad Gateway"))
        with GraphQLClient(profile) as client, pytest.raises(APIError, match="502"):
            client.execute("query { ok }")

    @respx.mock
    def test_graphql_errors_on_4xx_are_returned(self, profile: Profile):
        body = {"errors": [{"message": "Syntax Error"}]}
        respx.post(API).mock(return_value=httpx.Response(400, json=body))
        with GraphQLClient(profile) as client:
            assert client.execute("query {") == body

    @respx.mock
    def test_non_json_body(self, profile: Profile):
        respx.post(API).mock(return_value=httpx.Response(200, text="<html>"))
        with GraphQLClient(profile) as client, pytest.raises(APIError, match="not a GraphQL"):
            client.execute("query { ok }")

    @respx.mock
    def test_connect_error(self, profile: Profile):
        respx.post(API).mock(side_effect=httpx.ConnectError("refused"))
        with GraphQLClient(profile) as client, pytest.raises(
            APIConnectionError, match="Cannot connect",
        ):
            client.execute("query { ok }")


class TestRunQuery:
    @respx.mock
    def test_success(self, profile: Profile):
        respx.post(API).mock(
            return_value=httpx.Response(200, json={"data": {"allCustomers": []}})
        )
        with GraphQLClient(profile) as client:
            result = client.run_query("query { allCustomers { id } }")
        assert result.errors is None
        assert result.data == {"allCustomers": []}

    @respx.mock
    def test_graphql_errors(self, profile: Profile):
        respx.post(API).mock(
            return_value=httpx.Response(200, json={
                "data": None,
                "errors": [{"message": "Unauthorized", "path": ["addProject"]}],
            })
        )
        with GraphQLClient(profile) as client:
            result = client.run_query("mutation { addProject }")
        assert result.data is None
        assert [e.message for e in result.errors] == ["Unauthorized"]
        assert result.errors[0].path == ["addProject"]

    @respx.mock
    def test_transport_failure_becomes_error(self, profile: Profile):
        respx.post(API).mock(side_effect=httpx.ReadTimeout("slow"))
        with GraphQLClient(profile) as client:
            result = client.run_query("query { ok }")
        assert result.errors is not None
        assert "timed out" in result.errors[0].message

    @respx.mock
    def test_http_failure_becomes_error(self, profile: Profile):
        respx.post(API).mock(return_value=httpx.Response(403, text="Forbidden"))
        with GraphQLClient(profile) as client:
            result = client.run_query("query { ok }")
        assert result.errors is not None
        assert "Authentication failed" in result.errors[0].message

    @respx.mock
    def test_malformed_body_becomes_error(self, profile: Profile):
        respx.post(API).mock(
            return_value=httpx.Response(200, json={"data": ["not", "an", "object"]})
        )
        with GraphQLClient(profile) as client:
            result = client.run_query("query { ok }")
        assert result.errors is not None
        assert "Malformed GraphQL response" in result.errors[0].message
