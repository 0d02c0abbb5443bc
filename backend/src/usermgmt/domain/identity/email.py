"""Address-format checks for the email value objects.

Two validators live here on purpose. ``is_valid_email`` backs ``Email`` and
``UnverifiedEmail``; ``is_valid_email_address`` backs ``EmailAddress``. They
agree on the common cases but differ on quoted local parts, top-level labels
and domain literals, and callers rely on either behaviour, so they are not
merged.
"""
import ipaddress
import re

MAX_ADDRESS_LENGTH = 254
MAX_LOCAL_PART_LENGTH = 64

_ATEXT = r"[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]"
_DOT_ATOM = re.compile(rf"{_ATEXT}+(?:\.{_ATEXT}+)*")

# quoted-string, whitespace allowed inside the quotes
_QUOTED_WITH_SPACE = re.compile(r'"(?:[\x20\x21\x23-\x5b\x5d-\x7e]|\\[\x20-\x7e])*"')
# quoted-string, printable characters only
_QUOTED_NO_SPACE = re.compile(r'"(?:[\x21\x23-\x5b\x5d-\x7e]|\\[\x21-\x7e])+"')

_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
# Top-level label may carry digits after a leading letter: "com123", not "123com"
_HOSTNAME = re.compile(rf"(?:{_LABEL}\.)+[A-Za-z](?:[A-Za-z0-9-]{{0,61}}[A-Za-z0-9])?")
_HOSTNAME_ALPHA_TLD = re.compile(rf"(?:{_LABEL}\.)+[A-Za-z]{{1,63}}")

_DOMAIN_LITERAL = re.compile(r"\[(?P<address>[^\[\]\\]+)\]")


def _split(address: str) -> tuple[str, str] | None:
    if len(address) > MAX_ADDRESS_LENGTH:
        return None
    local, at, domain = address.rpartition("@")
    if not at or not local or not domain:
        return None
    if len(local) > MAX_LOCAL_PART_LENGTH:
        return None
    return local, domain


def _is_domain_literal(domain: str) -> bool:
    match = _DOMAIN_LITERAL.fullmatch(domain)
    if match is None:
        return False
    address = match.group("address")
    try:
        if address.startswith("IPv6:"):
            ipaddress.IPv6Address(address.removeprefix("IPv6:"))
        else:
            ipaddress.IPv4Address(address)
    except ValueError:
        return False
    return True


def is_valid_email(address: str) -> bool:
    """Format check used by ``Email`` and ``UnverifiedEmail``."""
    parts = _split(address)
    if parts is None:
        return False
    local, domain = parts
    if not (_DOT_ATOM.fullmatch(local) or _QUOTED_WITH_SPACE.fullmatch(local)):
        return False
    return bool(_HOSTNAME.fullmatch(domain)) or _is_domain_literal(domain)


def is_valid_email_address(address: str) -> bool:
    """Format check used by ``EmailAddress``."""
    parts = _split(address)
    if parts is None:
        return False
    local, domain = parts
    if not (_DOT_ATOM.fullmatch(local) or _QUOTED_NO_SPACE.fullmatch(local)):
        return False
    return bool(_HOSTNAME_ALPHA_TLD.fullmatch(domain))
