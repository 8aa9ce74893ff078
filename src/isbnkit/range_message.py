"""RangeMessage XML loader.

Reads the range table published by the International ISBN Agency
(``RangeMessage.xml``) into a ``MappedRangeTable``. Up-to-date copies are
distributed at https://www.isbn-international.org/range_file_generation;
fetching them is left to the caller.

Document shape::

    ISBNRangeMessage
      MessageSource?  MessageSerialNumber?  MessageDate
      EAN.UCCPrefixes
        EAN.UCC      Prefix "978"     Agency  Rules/Rule{Range, Length}*
      RegistrationGroups
        Group        Prefix "978-89"  Agency  Rules/Rule{Range, Length}*

Ranges are published inclusive (``"0000000-5999999"``) and stored half-open.
A Length of 0 marks a reserved range.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from bs4 import BeautifulSoup
from bs4.element import Tag

from isbnkit.errors import RangeTableError
from isbnkit.range_table import MAX_SEGMENT_LENGTH, GroupRecord, MappedRangeTable, Rule

logger = logging.getLogger(__name__)

_RANGE_BOUND_RE = re.compile(r"[0-9]{7}")


@dataclass(frozen=True, slots=True)
class RangeMessage:
    """Parsed RangeMessage document, before indexing."""

    date: str
    source: str | None
    serial_number: str | None
    ean_ucc: tuple[GroupRecord, ...]
    registration_groups: tuple[GroupRecord, ...]

    def to_table(self, *, strict: bool = True) -> MappedRangeTable:
        return MappedRangeTable.from_records(
            self.ean_ucc,
            self.registration_groups,
            date=self.date,
            source=self.source,
            serial_number=self.serial_number,
            strict=strict,
        )


# ---------------------------------------------------------------------------
# Element helpers
# ---------------------------------------------------------------------------

def _child(node: Tag, name: str) -> Tag | None:
    found = node.find(name, recursive=False)
    return found if isinstance(found, Tag) else None


def _optional_text(node: Tag, name: str) -> str | None:
    child = _child(node, name)
    return child.get_text(strip=True) if child is not None else None


def _required_text(node: Tag, name: str) -> str:
    text = _optional_text(node, name)
    if text is None:
        raise RangeTableError("missing_tag", f"<{name}> in <{node.name}>")
    return text


# ---------------------------------------------------------------------------
# Rules and groups
# ---------------------------------------------------------------------------

def parse_range(text: str) -> tuple[int, int]:
    """Parse an inclusive ``"0000000-5999999"`` range into half-open bounds."""
    low, sep, high = text.partition("-")
    if not sep:
        raise RangeTableError("no_dash_in_range", text)
    if not (_RANGE_BOUND_RE.fullmatch(low) and _RANGE_BOUND_RE.fullmatch(high)):
        raise RangeTableError("bad_range", text)
    start, stop = int(low), int(high) + 1
    if start >= stop:
        raise RangeTableError("bad_range", text)
    return start, stop


def parse_length(text: str) -> int | None:
    """Parse a one-digit Length; 0 means the range is reserved."""
    if len(text) != 1 or text not in "0123456789":
        raise RangeTableError("bad_length_string", text)
    length = int(text)
    if length > MAX_SEGMENT_LENGTH:
        raise RangeTableError("length_too_large", text)
    return length or None


def _parse_rules(node: Tag) -> tuple[Rule, ...]:
    rules_node = _child(node, "Rules")
    if rules_node is None:
        raise RangeTableError("missing_tag", f"<Rules> in <{node.name}>")
    rules: list[Rule] = []
    for rule_node in rules_node.find_all("Rule", recursive=False):
        start, stop = parse_range(_required_text(rule_node, "Range"))
        rules.append(
            Rule(min=start, max=stop, length=parse_length(_required_text(rule_node, "Length")))
        )
    return tuple(rules)


def _parse_group(node: Tag) -> GroupRecord:
    return GroupRecord(
        prefix=_required_text(node, "Prefix"),
        agency=_required_text(node, "Agency"),
        rules=_parse_rules(node),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def read_group_records(markup: str | bytes) -> RangeMessage:
    """Parse RangeMessage markup into group records and metadata."""
    soup = BeautifulSoup(markup, "xml")
    root = soup.find("ISBNRangeMessage")
    if not isinstance(root, Tag):
        raise RangeTableError("no_range_message_tag")

    date = _optional_text(root, "MessageDate")
    if not date:
        raise RangeTableError("no_message_date")

    prefixes = _child(root, "EAN.UCCPrefixes")
    if prefixes is None:
        raise RangeTableError("no_ean_ucc_prefixes")
    ean_ucc = tuple(_parse_group(n) for n in prefixes.find_all("EAN.UCC", recursive=False))
    if not ean_ucc:
        raise RangeTableError("no_ean_ucc_prefix")

    groups_node = _child(root, "RegistrationGroups")
    if groups_node is None:
        raise RangeTableError("no_registration_groups")
    groups = tuple(_parse_group(n) for n in groups_node.find_all("Group", recursive=False))
    if not groups:
        raise RangeTableError("no_group")

    message = RangeMessage(
        date=date,
        source=_optional_text(root, "MessageSource"),
        serial_number=_optional_text(root, "MessageSerialNumber"),
        ean_ucc=ean_ucc,
        registration_groups=groups,
    )
    logger.debug(
        "Parsed range message dated %s: %d prefixes, %d registration groups",
        message.date,
        len(message.ean_ucc),
        len(message.registration_groups),
    )
    return message


def parse_range_message(markup: str | bytes, *, strict: bool = True) -> MappedRangeTable:
    """Build a range table from RangeMessage markup."""
    return read_group_records(markup).to_table(strict=strict)


def load_range_message(path: Path | str, *, strict: bool = True) -> MappedRangeTable:
    """Build a range table from a RangeMessage XML file.

    Raises RangeTableError(file_error) when the file cannot be read.
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise RangeTableError("file_error", str(path)) from exc
    logger.debug("Loading range message from %s", path)
    return parse_range_message(raw, strict=strict)
