"""
Tests for core helper functions.
"""

from __future__ import annotations

from django.test import RequestFactory

from core.helpers import get_client_ip, join_url


class TestGetClientIp:
    def test_uses_remote_addr(self):
        request = RequestFactory().get("/", REMOTE_ADDR="10.0.0.7")

        assert get_client_ip(request) == "10.0.0.7"

    def test_prefers_first_forwarded_address(self):
        request = RequestFactory().get(
            "/", HTTP_X_FORWARDED_FOR="203.0.113.9, 10.0.0.1", REMOTE_ADDR="10.0.0.1"
        )

        assert get_client_ip(request) == "203.0.113.9"


class TestJoinUrl:
    def test_joins_with_single_slashes(self):
        assert (
            join_url("https://cdn.example.com/", "uploads", "images-1.png")
            == "https://cdn.example.com/uploads/images-1.png"
        )

    def test_empty_base_is_root_relative(self):
        assert join_url("", "uploads", "a.png") == "/uploads/a.png"

    def test_segments_are_percent_encoded(self):
        assert join_url("http://x", "uploads", "a b.png") == "http://x/uploads/a%20b.png"
