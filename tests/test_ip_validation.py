import pytest

from src.errors import InvalidIpError, ReservedIpError
from src.ip_validation import RESERVED_RANGES, find_reserved_range, parse_ipv4, validate_public_ipv4


@pytest.mark.parametrize(
    "candidate",
    [
        "",
        "qwerty",
        "1.2.3",
        "1.2.3.4.5",
        "256.1.1.1",
        "1.2.3.999",
        "1.2.3.-4",
        "1..2.3",
        "1.2.3.4 ",
        "1.2.3.4\n",
        "1234.1.1.1",
        "2001:4860:4860::8888",
        "١.٢.٣.٤",
    ],
)
def test_parse_ipv4_rejects_non_dotted_quads(candidate: str) -> None:
    assert parse_ipv4(candidate) is None


def test_parse_ipv4_returns_octets() -> None:
    assert parse_ipv4("8.8.4.4") == (8, 8, 4, 4)
    assert parse_ipv4("255.255.255.255") == (255, 255, 255, 255)


@pytest.mark.parametrize(
    ("address", "expected_cidr"),
    [
        ("10.1.2.3", "10.0.0.0/8"),
        ("172.16.0.1", "172.16.0.0/12"),
        ("172.20.0.1", "172.16.0.0/12"),
        ("172.31.255.255", "172.16.0.0/12"),
        ("192.168.1.1", "192.168.0.0/16"),
        ("169.254.10.10", "169.254.0.0/16"),
        ("127.0.0.1", "127.0.0.0/8"),
        ("0.0.0.0", "0.0.0.0/8"),
        ("100.64.0.1", "100.64.0.0/10"),
        ("100.70.0.1", "100.64.0.0/10"),
        ("100.127.255.254", "100.64.0.0/10"),
        ("192.0.0.8", "192.0.0.0/24"),
        ("192.0.2.15", "192.0.2.0/24"),
        ("198.51.100.7", "198.51.100.0/24"),
        ("203.0.113.9", "203.0.113.0/24"),
        ("224.0.0.1", "224.0.0.0/4"),
        ("239.255.255.250", "224.0.0.0/4"),
        ("240.0.0.1", "240.0.0.0/4"),
        ("255.255.255.255", "240.0.0.0/4"),
    ],
)
def test_find_reserved_range_matches_reserved_addresses(address: str, expected_cidr: str) -> None:
    octets = parse_ipv4(address)
    assert octets is not None

    reserved_range = find_reserved_range(octets)

    assert reserved_range is not None
    assert reserved_range.cidr == expected_cidr


@pytest.mark.parametrize(
    "address",
    [
        "8.8.8.8",
        "114.114.114.114",
        "172.15.255.255",
        "172.32.0.1",
        "100.63.255.255",
        "100.128.0.1",
        "192.0.1.1",
        "192.0.3.1",
        "198.51.101.1",
        "203.0.114.1",
        "223.255.255.255",
        "1.1.1.1",
    ],
)
def test_find_reserved_range_ignores_public_addresses(address: str) -> None:
    octets = parse_ipv4(address)
    assert octets is not None
    assert find_reserved_range(octets) is None


def test_reserved_ranges_table_is_immutable() -> None:
    assert isinstance(RESERVED_RANGES, tuple)
    with pytest.raises(AttributeError):
        RESERVED_RANGES[0].name = "public"  # type: ignore[misc]


def test_validate_public_ipv4_returns_candidate() -> None:
    assert validate_public_ipv4("8.8.8.8") == "8.8.8.8"


def test_validate_public_ipv4_invalid_format() -> None:
    with pytest.raises(InvalidIpError, match="invalid IP address format"):
        validate_public_ipv4("999.1.1.1")


def test_validate_public_ipv4_reserved_address() -> None:
    with pytest.raises(ReservedIpError, match="reserved/private address not supported"):
        validate_public_ipv4("192.168.0.1")
