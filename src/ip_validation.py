import re
from dataclasses import dataclass

from src.errors import InvalidIpError, ReservedIpError

IPV4_PATTERN = re.compile(r"([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})")

Octets = tuple[int, int, int, int]


@dataclass(frozen=True)
class ReservedRange:
    """A reserved IPv4 block described by octet constraints.

    `first_octet` and `second_octet` are inclusive (low, high) bounds,
    `third_octet` is an exact value. A `None` constraint matches anything.
    """

    name: str
    cidr: str
    first_octet: tuple[int, int]
    second_octet: tuple[int, int] | None = None
    third_octet: int | None = None

    def matches(self, octets: Octets) -> bool:
        first, second, third, _ = octets
        if not self.first_octet[0] <= first <= self.first_octet[1]:
            return False
        if self.second_octet is not None and not self.second_octet[0] <= second <= self.second_octet[1]:
            return False
        if self.third_octet is not None and third != self.third_octet:
            return False
        return True


RESERVED_RANGES: tuple[ReservedRange, ...] = (
    ReservedRange("private-use", "10.0.0.0/8", (10, 10)),
    ReservedRange("private-use", "172.16.0.0/12", (172, 172), (16, 31)),
    ReservedRange("private-use", "192.168.0.0/16", (192, 192), (168, 168)),
    ReservedRange("link-local", "169.254.0.0/16", (169, 169), (254, 254)),
    ReservedRange("loopback", "127.0.0.0/8", (127, 127)),
    ReservedRange("this-network", "0.0.0.0/8", (0, 0)),
    ReservedRange("carrier-grade-nat", "100.64.0.0/10", (100, 100), (64, 127)),
    ReservedRange("ietf-protocol-assignments", "192.0.0.0/24", (192, 192), (0, 0), 0),
    ReservedRange("documentation", "192.0.2.0/24", (192, 192), (0, 0), 2),
    ReservedRange("documentation", "198.51.100.0/24", (198, 198), (51, 51), 100),
    ReservedRange("documentation", "203.0.113.0/24", (203, 203), (0, 0), 113),
    ReservedRange("multicast", "224.0.0.0/4", (224, 239)),
    # Includes the limited broadcast address 255.255.255.255.
    ReservedRange("reserved", "240.0.0.0/4", (240, 255)),
)


def parse_ipv4(candidate: str) -> Octets | None:
    """Split a dotted-quad string into four octets, or return None if it is not one."""
    match = IPV4_PATTERN.fullmatch(candidate)
    if match is None:
        return None
    octets = tuple(int(group) for group in match.groups())
    if any(octet > 255 for octet in octets):
        return None
    return octets  # type: ignore[return-value]


def find_reserved_range(octets: Octets) -> ReservedRange | None:
    """Return the first reserved range containing the address, if any."""
    for reserved_range in RESERVED_RANGES:
        if reserved_range.matches(octets):
            return reserved_range
    return None


def validate_public_ipv4(candidate: str) -> str:
    """Ensure the candidate is a syntactically valid, publicly routable IPv4 address.

    Raises InvalidIpError for anything that is not a dotted quad of 0-255 integers
    and ReservedIpError for addresses in RESERVED_RANGES. Returns the candidate unchanged.
    """
    octets = parse_ipv4(candidate)
    if octets is None:
        raise InvalidIpError("invalid IP address format")

    reserved_range = find_reserved_range(octets)
    if reserved_range is not None:
        raise ReservedIpError(
            "reserved/private address not supported",
            range_name=reserved_range.name,
            cidr=reserved_range.cidr,
        )

    return candidate
