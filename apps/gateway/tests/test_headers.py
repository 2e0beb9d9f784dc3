import pytest

from apps.gateway.headers import HTTP_HEADERS, META_KEYS, get_header_key


def test_contract_has_exactly_six_headers():
    assert dict(HTTP_HEADERS) == {
        "COMPANY_ID": "X-Company-ID",
        "USER_ID": "X-User-ID",
        "USER_ROLE": "X-User-Role",
        "GATEWAY_SOURCE": "X-Gateway-Source",
        "GATEWAY_TIMESTAMP": "X-Gateway-Timestamp",
        "GATEWAY_REQUEST_ID": "X-Gateway-Request-ID",
    }


def test_contract_is_read_only():
    with pytest.raises(TypeError):
        HTTP_HEADERS["COMPANY_ID"] = "X-Tenant"
    with pytest.raises(TypeError):
        del HTTP_HEADERS["USER_ID"]
    assert HTTP_HEADERS["COMPANY_ID"] == "X-Company-ID"


@pytest.mark.parametrize("wire", list(HTTP_HEADERS.values()))
def test_header_key_ignores_case(wire):
    expected = get_header_key(wire)
    assert get_header_key(wire.lower()) == expected
    assert get_header_key(wire.upper()) == expected
    assert get_header_key(wire.swapcase()) == expected


def test_header_key_examples():
    assert get_header_key("X-Company-ID") == get_header_key("x-company-id") == "x-company-id"
    assert get_header_key("") == ""
    assert get_header_key("Content-Type") == "content-type"


def test_meta_keys_follow_django_naming():
    assert META_KEYS["COMPANY_ID"] == "HTTP_X_COMPANY_ID"
    assert META_KEYS["GATEWAY_REQUEST_ID"] == "HTTP_X_GATEWAY_REQUEST_ID"
    assert set(META_KEYS) == set(HTTP_HEADERS)
