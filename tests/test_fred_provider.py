import httpx
import pytest

from trade_radar.errors import ParseError
from trade_radar.models import Failure, Observation, Success
from trade_radar.providers.fred_provider import fred_latest, parse_fred_csv_latest


def test_parse_returns_last_row_when_valid():
    csv = "DATE,VALUE\n2024-01-01,100\n2024-02-01,101.5\n2024-03-01,99.25\n"
    assert parse_fred_csv_latest(csv) == Observation(date="2024-03-01", value=99.25)


def test_parse_skips_missing_sentinels_from_the_end():
    """'.' and NaN (any case) trailing rows are skipped; the latest valid row wins."""
    csv = "DATE,VALUE\n2024-01-01,100\n2024-02-01,.\n2024-03-01,NaN"
    assert parse_fred_csv_latest(csv) == Observation(date="2024-01-01", value=100.0)


def test_parse_handles_crlf_blank_lines_and_padding():
    csv = "observation_date,TLMFGCONS\r\n\r\n  2025-06-01,231456  \r\n2025-07-01,nan\r\n\r\n"
    assert parse_fred_csv_latest(csv) == Observation(date="2025-06-01", value=231456.0)


def test_parse_skips_non_numeric_non_finite_and_empty_fields():
    csv = "DATE,VALUE\n2024-01-01,7\n2024-02-01,abc\n2024-03-01,inf\n2024-04-01,\n,5\n"
    assert parse_fred_csv_latest(csv) == Observation(date="2024-01-01", value=7.0)


def test_parse_header_only_is_a_parse_error():
    with pytest.raises(ParseError) as exc:
        parse_fred_csv_latest("DATE,VALUE\n")
    assert "Could not parse latest observation" in str(exc.value)


def test_parse_all_rows_invalid_is_a_parse_error():
    with pytest.raises(ParseError) as exc:
        parse_fred_csv_latest("DATE,VALUE\n2024-01-01,.\n2024-02-01,NAN")
    assert "no valid rows" in str(exc.value)


def test_parse_empty_payload():
    with pytest.raises(ParseError):
        parse_fred_csv_latest("")


def test_fred_latest_success_builds_encoded_request(upstream, http_client):
    upstream.handler = lambda req: httpx.Response(200, text="DATE,VALUE\n2025-05-01,1.5\n")

    result = fred_latest("  IMPCH ", client=http_client)

    assert isinstance(result, Success)
    assert result.observation == Observation("2025-05-01", 1.5)
    assert result.key == "IMPCH"
    assert result.source_url == "https://fred.stlouisfed.org/series/IMPCH"
    req = upstream.requests[0]
    assert req.url.path == "/graph/fredgraph.csv"
    assert req.url.params["id"] == "IMPCH"


@pytest.mark.parametrize("bad_id", [None, "", "   "])
def test_fred_latest_missing_id_makes_no_request(upstream, http_client, bad_id):
    result = fred_latest(bad_id, client=http_client)
    assert isinstance(result, Failure)
    assert result.kind == "input"
    assert result.error == "Missing required query param: id"
    assert upstream.requests == []


def test_fred_latest_rejects_malformed_id(upstream, http_client):
    result = fred_latest("GDP&file_type=json", client=http_client)
    assert isinstance(result, Failure)
    assert result.kind == "input"
    assert upstream.requests == []


def test_fred_latest_upstream_status(upstream, http_client):
    upstream.handler = lambda req: httpx.Response(500, text="oops")
    result = fred_latest("GDP", client=http_client)
    assert isinstance(result, Failure)
    assert result.kind == "upstream_status"
    assert result.error == "FRED fetch failed (500)"


def test_fred_latest_transport_error(upstream, http_client):
    def boom(req):
        raise httpx.ConnectError("connection refused", request=req)

    upstream.handler = boom
    result = fred_latest("GDP", client=http_client)
    assert isinstance(result, Failure)
    assert result.kind == "upstream_transport"
    assert "connection refused" in result.error
    assert len(upstream.requests) == 1  # no retry


def test_fred_latest_unparseable_payload(upstream, http_client):
    upstream.handler = lambda req: httpx.Response(200, text="DATE,VALUE\n")
    result = fred_latest("GDP", client=http_client)
    assert isinstance(result, Failure)
    assert result.kind == "parse"
    assert result.error.startswith("Could not parse latest observation")


@pytest.mark.parametrize("raw", ["1_000", "١٢", "0x10", "1e", "+"])
def test_parse_skips_values_outside_plain_decimal_notation(raw):
    csv = f"DATE,VALUE\n2024-01-01,5\n2024-02-01,{raw}"
    assert parse_fred_csv_latest(csv) == Observation(date="2024-01-01", value=5.0)


@pytest.mark.parametrize("raw,expected", [("-3.5", -3.5), ("+2", 2.0), (".5", 0.5), ("1.2E3", 1200.0), ("7.", 7.0)])
def test_parse_accepts_plain_decimal_forms(raw, expected):
    assert parse_fred_csv_latest(f"DATE,VALUE\n2024-01-01,{raw}").value == expected


def test_fred_latest_unexpected_error_becomes_failure(upstream, http_client):
    def explode(req):
        raise RuntimeError("transport blew up")

    upstream.handler = explode
    result = fred_latest("GDP", client=http_client)
    assert isinstance(result, Failure)
    assert result.kind == "upstream_transport"
    assert result.error == "transport blew up"
