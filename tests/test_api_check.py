import hashlib

import pytest
import requests

from passguard.api_check import HIBP_RANGE_URL, pwned_count
from passguard.errors import InvalidInput
from tests.conftest import FakeResponse, FakeSession


def _split(password):
    sha1 = hashlib.sha1(password.encode("utf-8")).hexdigest().upper()
    return sha1[:5], sha1[5:]


def test_only_prefix_is_sent_and_count_is_parsed():
    prefix, suffix = _split("password")
    body = "\r\n".join([
        "0018A45C4D1DEF81644B54AB7F969B88D65:1",
        f"{suffix}:9659365",
        "garbage-line",
    ])
    session = FakeSession(FakeResponse(text=body))

    assert pwned_count("password", session=session, timeout=3) == 9659365

    method, url, kwargs = session.calls[0]
    assert method == "GET"
    assert url == HIBP_RANGE_URL.format(prefix)
    assert suffix not in url
    assert kwargs["timeout"] == 3


def test_unknown_password_returns_zero():
    session = FakeSession(FakeResponse(text="0018A45C4D1DEF81644B54AB7F969B88D65:1"))
    assert pwned_count("Xk9#mQ2$vL7!pR4&", session=session) == 0


def test_padding_entries_with_zero_count():
    _, suffix = _split("hunter2")
    session = FakeSession(FakeResponse(text=f"{suffix}:0"))
    assert pwned_count("hunter2", session=session) == 0


def test_http_errors_propagate():
    session = FakeSession(FakeResponse(status_code=503))
    with pytest.raises(requests.HTTPError):
        pwned_count("password", session=session)


def test_empty_password():
    with pytest.raises(InvalidInput):
        pwned_count("", session=FakeSession())
