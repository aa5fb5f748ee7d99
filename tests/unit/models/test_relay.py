"""
Unit tests for models.relay module.

Tests:
- URL parsing and normalization (wss/ws, with/without ports)
- Network detection (clearnet, tor, i2p, loki, local)
- Rejection of malformed, non-WebSocket, and local URLs
- allow_local policy
- validate_relay_url() for strings and Relay instances
- Immutability and hash/equality over the normalized URL
"""

import pytest

from nostrtags.exceptions import InvalidInputError, InvalidRelayUrlError
from nostrtags.models import NetworkType, Relay, validate_relay_url


class TestParsing:
    """URL parsing and normalization."""

    def test_wss_clearnet(self):
        r = Relay("wss://relay.example.com")
        assert r.url == "wss://relay.example.com"
        assert r.scheme == "wss"
        assert r.host == "relay.example.com"
        assert r.network == NetworkType.CLEARNET
        assert r.port is None
        assert r.path is None

    def test_ws_clearnet_upgraded_to_wss(self):
        """Clearnet ws:// gets upgraded to wss://."""
        r = Relay("ws://relay.example.com")
        assert r.scheme == "wss"
        assert r.url == "wss://relay.example.com"

    def test_explicit_port(self):
        r = Relay("wss://relay.example.com:8080")
        assert r.url == "wss://relay.example.com:8080"
        assert r.port == 8080

    def test_default_port_443_omitted(self):
        r = Relay("wss://relay.example.com:443")
        assert r.url == "wss://relay.example.com"
        assert r.port == 443

    def test_path_preserved(self):
        r = Relay("wss://relay.example.com/nostr")
        assert r.path == "/nostr"
        assert r.url == "wss://relay.example.com/nostr"

    def test_trailing_slash_removed(self):
        r = Relay("wss://relay.example.com/")
        assert r.path is None

    def test_double_slashes_normalized(self):
        r = Relay("wss://relay.example.com//nostr//")
        assert r.path == "/nostr"

    def test_whitespace_stripped(self):
        r = Relay("  wss://relay.example.com  ")
        assert r.url == "wss://relay.example.com"

    def test_host_lowercased(self):
        assert Relay("wss://Relay.Example.COM").url == "wss://relay.example.com"

    def test_ipv6(self):
        r = Relay("wss://[2606:4700::1]:8080")
        assert r.host == "2606:4700::1"
        assert r.url == "wss://[2606:4700::1]:8080"
        assert r.network == NetworkType.CLEARNET

    def test_str(self):
        assert str(Relay("wss://relay.example.com/")) == "wss://relay.example.com"


class TestNetworkDetection:
    """Network type detection."""

    def test_tor(self):
        r = Relay("wss://abc123.onion")
        assert r.network == NetworkType.TOR
        assert r.url == "ws://abc123.onion"  # overlay networks use ws://

    def test_i2p(self):
        r = Relay("wss://relay.i2p")
        assert r.network == NetworkType.I2P
        assert r.scheme == "ws"

    def test_loki(self):
        r = Relay("wss://relay.loki")
        assert r.network == NetworkType.LOKI
        assert r.scheme == "ws"

    def test_case_insensitive(self):
        assert Relay._detect_network("ABC.ONION") == NetworkType.TOR
        assert Relay._detect_network("RELAY.I2P") == NetworkType.I2P

    def test_local_detection(self):
        assert Relay._detect_network("localhost") == NetworkType.LOCAL
        assert Relay._detect_network("127.0.0.1") == NetworkType.LOCAL
        assert Relay._detect_network("192.168.1.1") == NetworkType.LOCAL

    def test_unknown_detection(self):
        assert Relay._detect_network("") == NetworkType.UNKNOWN
        assert Relay._detect_network("invalid-host-") == NetworkType.UNKNOWN
        assert Relay._detect_network("nodots") == NetworkType.UNKNOWN


class TestRejection:
    """Invalid URLs are rejected."""

    @pytest.mark.parametrize(
        "url",
        [
            "wss://localhost",
            "wss://127.0.0.1",
            "wss://10.0.0.1",
            "wss://172.16.0.1",
            "wss://192.168.1.1",
            "wss://169.254.0.1",
            "wss://192.88.99.1",
            "wss://255.255.255.255",
            "wss://[::1]",
            "wss://[2001::1]",
            "wss://[2001:2::1]",
            "wss://[2001:10::1]",
        ],
    )
    def test_local_addresses(self, url):
        with pytest.raises(InvalidRelayUrlError, match="Local addresses"):
            Relay(url)

    @pytest.mark.parametrize(
        "url",
        [
            "http://relay.example.com",
            "https://relay.example.com",
        ],
    )
    def test_invalid_scheme(self, url):
        with pytest.raises(InvalidRelayUrlError, match="Invalid scheme"):
            Relay(url)

    @pytest.mark.parametrize("url", ["relay.example.com", ""])
    def test_missing_scheme(self, url):
        with pytest.raises(InvalidRelayUrlError):
            Relay(url)

    def test_invalid_host(self):
        with pytest.raises(InvalidRelayUrlError, match="Invalid host"):
            Relay("wss://invalid_host")

    def test_query_rejected(self):
        with pytest.raises(InvalidRelayUrlError, match="query string"):
            Relay("wss://relay.example.com/?token=1")

    def test_fragment_rejected(self):
        with pytest.raises(InvalidRelayUrlError, match="fragment"):
            Relay("wss://relay.example.com/#top")

    def test_null_bytes(self):
        with pytest.raises(InvalidRelayUrlError, match="null bytes"):
            Relay("wss://relay.example.com\x00")

    def test_non_str(self):
        with pytest.raises(InvalidRelayUrlError, match="must be a str"):
            Relay(42)  # type: ignore[arg-type]

    def test_error_hierarchy(self):
        """Relay errors are input errors and plain ValueErrors."""
        with pytest.raises(InvalidInputError):
            Relay("https://relay.example.com")
        with pytest.raises(ValueError):
            Relay("https://relay.example.com")


class TestAllowLocal:
    """allow_local policy."""

    def test_localhost_allowed(self):
        r = Relay("ws://localhost:7777", allow_local=True)
        assert r.network == NetworkType.LOCAL
        assert r.url == "ws://localhost:7777"

    def test_private_ip_allowed(self):
        r = Relay("wss://192.168.1.10", allow_local=True)
        assert r.scheme == "ws"

    def test_unknown_host_still_rejected(self):
        with pytest.raises(InvalidRelayUrlError, match="Invalid host"):
            Relay("wss://invalid_host", allow_local=True)


class TestValidateRelayUrl:
    """validate_relay_url() helper."""

    def test_from_string(self):
        assert validate_relay_url("wss://relay.example.com/").url == "wss://relay.example.com"

    def test_relay_passthrough(self):
        relay = Relay("wss://relay.example.com")
        assert validate_relay_url(relay) is relay

    def test_invalid_string(self):
        with pytest.raises(InvalidRelayUrlError):
            validate_relay_url("https://relay.example.com")

    def test_local_relay_rechecked(self):
        relay = Relay("ws://localhost", allow_local=True)
        with pytest.raises(InvalidRelayUrlError, match="Local addresses"):
            validate_relay_url(relay)
        assert validate_relay_url(relay, allow_local=True) is relay

    def test_local_string_allowed(self):
        assert validate_relay_url("ws://127.0.0.1:7777", allow_local=True).port == 7777


class TestImmutability:
    """Frozen dataclass behavior."""

    def test_attribute_mutation_blocked(self):
        r = Relay("wss://relay.example.com")
        with pytest.raises(AttributeError):
            r.network = "tor"

    def test_new_attribute_blocked(self):
        r = Relay("wss://relay.example.com")
        with pytest.raises((AttributeError, TypeError)):
            r.new_attr = "value"


class TestEquality:
    """Equality and hashing over the normalized URL."""

    def test_equal(self):
        assert Relay("wss://relay.example.com") == Relay("wss://relay.example.com")

    def test_equal_after_normalization(self):
        assert Relay("ws://relay.example.com/") == Relay("wss://relay.example.com:443")

    def test_different(self):
        assert Relay("wss://relay1.example.com") != Relay("wss://relay2.example.com")

    def test_hashable(self):
        r1 = Relay("wss://relay.example.com")
        r2 = Relay("wss://relay.example.com/")
        assert len({r1, r2}) == 1
