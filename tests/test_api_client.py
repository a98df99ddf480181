import pytest
import requests

from domain.results import SearchResponse
from search_state_manager import SearchQuery
from search_ui import (
    DecodeError,
    HttpStatusError,
    SearchServiceClient,
    SearchServiceConfig,
    SearchServiceError,
    TransportError,
)

BASE_URL = "http://search.test"

QUERY = SearchQuery(text="market trends", country="US", ui_language="en-US")


def test_search_url_encodes_query_with_percent_twenty(client):
    url = client.build_url("/search", QUERY)
    assert url == f"{BASE_URL}/search?query=market%20trends&country=US&ui_lang=en-US"


def test_reserved_characters_are_encoded(client):
    query = SearchQuery(text="a&b=c/d?e", country="GB", ui_language="en-GB")
    url = client.build_url("/generate_pdf", query)
    assert url == f"{BASE_URL}/generate_pdf?query=a%26b%3Dc%2Fd%3Fe&country=GB&ui_lang=en-GB"


def test_base_url_trailing_slash_is_dropped(fake_session):
    client = SearchServiceClient(config=SearchServiceConfig(base_url="http://search.test/"), session=fake_session)
    assert client.base_url == "http://search.test"
    assert client.build_url("/search", QUERY).startswith("http://search.test/search?")


def test_session_gets_default_headers(client, fake_session):
    assert fake_session.headers["Accept"].startswith("application/json")
    assert "User-Agent" in fake_session.headers


def test_fetch_search_results_parses_results(client, fake_session, make_response):
    fake_session.get.return_value = make_response(
        json_data={
            "results": [
                {"url": "a.com", "title": "A", "summary": "sum1", "score": 0.9},
                {"url": "b.com"},
            ]
        }
    )

    response = client.fetch_search_results(QUERY)

    assert isinstance(response, SearchResponse)
    assert [r.url for r in response.results] == ["a.com", "b.com"]
    assert response.results[0].title == "A"
    assert response.results[1].summary is None
    fake_session.get.assert_called_once_with(
        f"{BASE_URL}/search?query=market%20trends&country=US&ui_lang=en-US", timeout=None
    )


def test_configured_timeout_is_passed_to_session(fake_session, make_response):
    client = SearchServiceClient(config=SearchServiceConfig(base_url=BASE_URL, timeout=12.5), session=fake_session)
    fake_session.get.return_value = make_response(json_data={"results": []})

    client.fetch_search_results(QUERY)

    assert fake_session.get.call_args.kwargs["timeout"] == 12.5


@pytest.mark.parametrize("payload", [{}, {"results": None}])
def test_missing_or_null_results_are_empty(client, fake_session, payload, make_response):
    fake_session.get.return_value = make_response(json_data=payload)
    assert client.fetch_search_results(QUERY).results == []


def test_non_2xx_status_raises_http_status_error(client, fake_session, make_response):
    fake_session.get.return_value = make_response(status_code=502, json_data={"detail": "bad gateway"})

    with pytest.raises(HttpStatusError) as excinfo:
        client.fetch_search_results(QUERY)

    assert excinfo.value.status_code == 502
    assert str(excinfo.value) == "Failed to fetch results"
    assert "502" not in str(excinfo.value)


def test_network_failure_raises_transport_error(client, fake_session):
    fake_session.get.side_effect = requests.exceptions.ConnectionError("connection refused")

    with pytest.raises(TransportError) as excinfo:
        client.fetch_search_results(QUERY)

    assert isinstance(excinfo.value.__cause__, requests.exceptions.ConnectionError)
    assert excinfo.value.url.startswith(f"{BASE_URL}/search?")


def test_timeout_raises_transport_error(client, fake_session):
    fake_session.get.side_effect = requests.exceptions.Timeout("read timed out")
    with pytest.raises(TransportError):
        client.fetch_export_blob(QUERY)


def test_invalid_json_raises_decode_error(client, fake_session, make_response):
    fake_session.get.return_value = make_response(json_error=ValueError("Expecting value"))
    with pytest.raises(DecodeError):
        client.fetch_search_results(QUERY)


@pytest.mark.parametrize(
    "payload",
    [
        [{"url": "a.com"}],
        "results",
        {"results": "not-a-list"},
        {"results": [{"title": "no url"}]},
    ],
)
def test_unexpected_payload_shapes_raise_decode_error(client, fake_session, payload, make_response):
    fake_session.get.return_value = make_response(json_data=payload)
    with pytest.raises(DecodeError):
        client.fetch_search_results(QUERY)


def test_fetch_export_blob_returns_raw_bytes(client, fake_session, make_response):
    blob = b"%PDF-1.7 \x00\xff not inspected"
    response = make_response(content=blob)
    fake_session.get.return_value = response

    assert client.fetch_export_blob(QUERY) == blob
    fake_session.get.assert_called_once_with(
        f"{BASE_URL}/generate_pdf?query=market%20trends&country=US&ui_lang=en-US", timeout=None
    )
    response.json.assert_not_called()


def test_export_error_status(client, fake_session, make_response):
    fake_session.get.return_value = make_response(status_code=404)

    with pytest.raises(HttpStatusError) as excinfo:
        client.fetch_export_blob(QUERY)

    assert str(excinfo.value) == "Failed to generate PDF"


def test_all_errors_share_a_base_class():
    for error_cls in (TransportError, HttpStatusError, DecodeError):
        assert issubclass(error_cls, SearchServiceError)
        assert issubclass(error_cls, RuntimeError)
