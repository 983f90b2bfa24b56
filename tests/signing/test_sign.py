# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Tests for the sign orchestrator."""

import logging
import urllib.parse
from datetime import datetime, timedelta
from unittest.mock import patch

import pytest

from s3presign.credentials import Credentials
from s3presign.method import Method
from s3presign.signing import (
    add_query_params,
    build_canonical_request,
    host_header,
    sign,
)


URL = "https://examplebucket.s3.amazonaws.com/test.txt"
AWS_SIGNATURE = (
    "aeeed9bbccd4d02ee5c0109b86d86835f995330da4c265957d157751f604d404"
)


def _query(url: str) -> list[tuple[str, str]]:
    return urllib.parse.parse_qsl(
        urllib.parse.urlsplit(url).query, keep_blank_values=True
    )


class TestSign:
    """Tests for sign with credentials."""

    def test_aws_example(
        self,
        aws_date: datetime,
        aws_credentials: Credentials,
        signed_url,
    ) -> None:
        """Reproduces the presigned GET example from the AWS docs."""
        url = sign(
            aws_date, Method.GET, URL, aws_credentials, "us-east-1", 86400
        )
        assert url == signed_url("test.txt", AWS_SIGNATURE)

    def test_deterministic(
        self, aws_date: datetime, aws_credentials: Credentials
    ) -> None:
        """Signing twice with identical inputs gives identical URLs."""
        args = (aws_date, Method.GET, URL, aws_credentials, "us-east-1", 60)
        assert sign(*args) == sign(*args)

    def test_signature_is_last(
        self, aws_date: datetime, aws_credentials: Credentials
    ) -> None:
        """X-Amz-Signature is appended after the sorted parameters."""
        url = sign(
            aws_date,
            Method.GET,
            URL,
            aws_credentials,
            "us-east-1",
            86400,
            [("a", "1"), ("z", "2")],
        )
        names = [name for name, _ in _query(url)]
        assert names == [
            "X-Amz-Algorithm",
            "X-Amz-Credential",
            "X-Amz-Date",
            "X-Amz-Expires",
            "X-Amz-SignedHeaders",
            "a",
            "z",
            "X-Amz-Signature",
        ]

    def test_existing_query_replaced(
        self,
        aws_date: datetime,
        aws_credentials: Credentials,
        signed_url,
    ) -> None:
        """A query string already on the URL does not leak into the result."""
        url = sign(
            aws_date,
            Method.GET,
            f"{URL}?stale=1",
            aws_credentials,
            "us-east-1",
            86400,
        )
        assert url == signed_url("test.txt", AWS_SIGNATURE)

    def test_changing_time_only_changes_dated_lines(
        self, aws_date: datetime, aws_credentials: Credentials
    ) -> None:
        """A new timestamp changes the signature and only dated fields."""
        with patch(
            "s3presign.signing.build_canonical_request",
            wraps=build_canonical_request,
        ) as spy:
            first = sign(
                aws_date, Method.GET, URL, aws_credentials, "us-east-1", 60
            )
            second = sign(
                aws_date + timedelta(seconds=1),
                Method.GET,
                URL,
                aws_credentials,
                "us-east-1",
                60,
            )
        assert first != second
        first_lines = spy.call_args_list[0].args
        second_lines = spy.call_args_list[1].args
        first_request = build_canonical_request(*first_lines).split("\n")
        second_request = build_canonical_request(*second_lines).split("\n")
        # Only the query line carries X-Amz-Date
        for index in (0, 1, 3, 4, 5, 6):
            assert first_request[index] == second_request[index]
        assert first_request[2] != second_request[2]

    def test_session_token(
        self, aws_date: datetime, aws_credentials: Credentials
    ) -> None:
        """The session token is signed and changes the signature."""
        with_token = Credentials(
            aws_credentials.key, aws_credentials.secret, "session/token+="
        )
        plain = sign(
            aws_date, Method.GET, URL, aws_credentials, "us-east-1", 86400
        )
        tokened = sign(
            aws_date, Method.GET, URL, with_token, "us-east-1", 86400
        )

        pairs = _query(tokened)
        names = [name for name, _ in pairs]
        assert ("X-Amz-Security-Token", "session/token+=") in pairs
        assert names.index("X-Amz-Security-Token") == (
            names.index("X-Amz-Expires") + 1
        )
        assert names.index("X-Amz-Security-Token") < names.index(
            "X-Amz-Signature"
        )
        assert "X-Amz-Security-Token=session%2Ftoken%2B%3D" in tokened
        assert dict(pairs)["X-Amz-Signature"] != dict(_query(plain))[
            "X-Amz-Signature"
        ]

    def test_extra_headers_are_signed(
        self, aws_date: datetime, aws_credentials: Credentials
    ) -> None:
        """Caller headers are lower-cased and listed with host."""
        url = sign(
            aws_date,
            Method.PUT,
            URL,
            aws_credentials,
            "us-east-1",
            86400,
            headers=[("Content-Type", "text/plain"), ("X-Amz-Meta-A", "1")],
        )
        assert dict(_query(url))["X-Amz-SignedHeaders"] == (
            "content-type;host;x-amz-meta-a"
        )

    @pytest.mark.parametrize("name", ["Host", "host"])
    def test_caller_host_header_ignored(
        self,
        name: str,
        aws_date: datetime,
        aws_credentials: Credentials,
        signed_url,
    ) -> None:
        """The URL host is signed once, whatever host the caller passes."""
        url = sign(
            aws_date,
            Method.GET,
            URL,
            aws_credentials,
            "us-east-1",
            86400,
            headers=[(name, "other.example")],
        )
        assert url == signed_url("test.txt", AWS_SIGNATURE)

        mixed = sign(
            aws_date,
            Method.PUT,
            URL,
            aws_credentials,
            "us-east-1",
            86400,
            headers=[("Content-Type", "text/plain"), (name, "other.example")],
        )
        assert dict(_query(mixed))["X-Amz-SignedHeaders"] == (
            "content-type;host"
        )

    def test_header_value_affects_signature(
        self, aws_date: datetime, aws_credentials: Credentials
    ) -> None:
        """Signed header values are part of the signature."""
        urls = {
            sign(
                aws_date,
                Method.PUT,
                URL,
                aws_credentials,
                "us-east-1",
                86400,
                headers=[("content-type", value)],
            )
            for value in ("text/plain", "image/png")
        }
        assert len(urls) == 2

    def test_colliding_query_keys_both_kept(
        self, aws_date: datetime, aws_credentials: Credentials
    ) -> None:
        """A caller parameter named like a signing parameter follows it."""
        url = sign(
            aws_date,
            Method.GET,
            URL,
            aws_credentials,
            "us-east-1",
            86400,
            [("X-Amz-Date", "caller")],
        )
        dates = [value for name, value in _query(url) if name == "X-Amz-Date"]
        assert dates == ["20130524T000000Z", "caller"]

    def test_debug_log_has_no_secret(
        self,
        aws_date: datetime,
        aws_credentials: Credentials,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Debug output names the access key but never the secret."""
        with caplog.at_level(logging.DEBUG, logger="s3presign.signing"):
            sign(aws_date, Method.GET, URL, aws_credentials, "us-east-1", 60)
        assert aws_credentials.key in caplog.text
        assert aws_credentials.secret not in caplog.text


class TestAnonymous:
    """Tests for sign without credentials."""

    def test_no_amz_parameters(self, aws_date: datetime) -> None:
        """Only caller parameters are added, verbatim and unsigned."""
        url = sign(
            aws_date,
            Method.GET,
            URL,
            None,
            "us-east-1",
            86400,
            [("response-content-type", "text/plain")],
        )
        assert url == f"{URL}?response-content-type=text%2Fplain"
        assert "X-Amz-" not in url

    def test_url_unchanged_without_parameters(self, aws_date: datetime) -> None:
        """With nothing to add, the URL comes back as-is."""
        assert sign(aws_date, Method.GET, URL, None, "us-east-1", 86400) == URL

    def test_add_query_params_appends(self) -> None:
        """Existing parameters are kept."""
        assert add_query_params(f"{URL}?a=1", [("b", "2 3")]) == (
            f"{URL}?a=1&b=2%203"
        )


class TestHostHeader:
    """Tests for host_header."""

    def test_default_port_omitted(self) -> None:
        """Scheme default ports are not included."""
        assert host_header("https://h.example:443/k") == "h.example"
        assert host_header("http://h.example:80/k") == "h.example"

    def test_custom_port_kept(self) -> None:
        """Non-default ports are included."""
        assert host_header("http://localhost:9000/b/k") == "localhost:9000"
        assert host_header("https://h.example:80/") == "h.example:80"

    def test_ipv6(self) -> None:
        """IPv6 literals keep their brackets."""
        assert host_header("http://[::1]:9000/b") == "[::1]:9000"
