"""
Unicode code point substitutions for ADIF fields.

ADIF is US-ASCII only. A field holding other characters is exported with a
placeholder at each non-ASCII position, followed by a list that maps each
placeholder back to its code point:

    <COMMENT:13>Caf? Fran?ois {{3=69,9=67}}

Stored values are offset by -0x80 so that US-ASCII characters can never be
encoded. Parsers that ignore the list still read correct ASCII text with one
wrong glyph per substituted character.
"""

import logging
import re
from collections.abc import Callable, Sequence
from typing import NamedTuple

from adifsub.fields import DEFAULT_POLICY, FieldPolicy
from adifsub.unicode import ASCII_LIMIT, MAX_CODE_POINT, is_ascii, iter_code_points

_LOGGER = logging.getLogger(__name__)

# --- config ---
CODE_POINT_OFFSET = -0x80
PLACEHOLDER = "?"

# Except for '<' these can be any printable US-ASCII that applications are
# unlikely to export between field definitions.
START_SUBSTITUTIONS = "{{"
END_SUBSTITUTIONS = "}}"

_DECIMAL = re.compile(r"[0-9]+")
_HEX = re.compile(r"[0-9A-Fa-f]+")


class Substitution(NamedTuple):
    """A placeholder position and the offset code point it stands for"""

    position: int
    value: int

    @classmethod
    def from_code_point(cls, position: int, code_point: int) -> "Substitution":
        """Create an entry for a code point, applying the offset"""
        return cls(position, code_point + CODE_POINT_OFFSET)

    @property
    def code_point(self) -> int:
        """The original code point"""
        return self.value - CODE_POINT_OFFSET

    def format(self) -> str:
        """Render as it appears in a substitution list e.g. 3=69"""
        return f"{self.position}={self.value:X}"


Validator = Callable[[str, list[Substitution]], bool]


class ExportedField(NamedTuple):
    """Result of exporting a field value"""

    field_data: str
    substitutions: str
    combined: str


def format_substitutions(entries: Sequence[Substitution]) -> str:
    """Render entries as a delimited substitution list, empty if there are none"""
    if not entries:
        return ""
    body = ",".join(entry.format() for entry in entries)
    return f"{START_SUBSTITUTIONS}{body}{END_SUBSTITUTIONS}"


def format_field(field_name: str, field_data: str, substitutions: str = "") -> str:
    """Build an ADIF field definition followed by its substitution list, if any"""
    combined = f"<{field_name}:{len(field_data)}>{field_data} "
    if substitutions:
        combined += f"{substitutions} "
    return combined


def encode(
    field_name: str,
    text: str,
    policy: FieldPolicy = DEFAULT_POLICY,
) -> ExportedField:
    """
    Export a field value as US-ASCII field data plus a substitution list.

    Fields outside the policy are exported verbatim without a list.
    """
    if not policy.is_eligible(field_name):
        if not is_ascii(text):
            _LOGGER.debug("Exporting non-US-ASCII text in %s as is", field_name)
        return ExportedField(text, "", format_field(field_name, text))

    out: list[str] = []
    entries: list[Substitution] = []

    for cp in iter_code_points(text):
        if cp < ASCII_LIMIT:
            out.append(chr(cp))
        else:
            entries.append(Substitution.from_code_point(len(out), cp))
            out.append(PLACEHOLDER)

    field_data = "".join(out)
    substitutions = format_substitutions(entries)

    return ExportedField(
        field_data,
        substitutions,
        format_field(field_name, field_data, substitutions),
    )


def _strip_markers(substitutions: str) -> str | None:
    """Remove the list delimiters, None if they are missing"""
    text = substitutions.strip()
    if len(text) <= len(START_SUBSTITUTIONS) + len(END_SUBSTITUTIONS):
        return None
    if not (
        text.startswith(START_SUBSTITUTIONS) and text.endswith(END_SUBSTITUTIONS)
    ):
        return None
    return text[len(START_SUBSTITUTIONS) : -len(END_SUBSTITUTIONS)]


def parse_substitutions(substitutions: str) -> list[Substitution]:
    """
    Parse a substitution list into entries, in list order.

    Entries that do not split into a decimal position and a hex value are
    skipped so that one damaged entry does not lose the rest of the field.
    """
    body = _strip_markers(substitutions)
    if body is None:
        return []

    entries: list[Substitution] = []

    for item in body.split(","):
        if not item:
            continue

        parts = [p.strip() for p in item.split("=") if p]
        if len(parts) != 2:
            _LOGGER.debug("Skipping malformed substitution %r", item)
            continue

        position, value = parts
        if not _DECIMAL.fullmatch(position) or not _HEX.fullmatch(value):
            _LOGGER.debug("Skipping malformed substitution %r", item)
            continue

        entry = Substitution(int(position), int(value, 16))
        if entry.code_point > MAX_CODE_POINT:
            _LOGGER.debug("Skipping out of range substitution %r", item)
            continue

        entries.append(entry)

    return entries


def _splice(field_data: str, entries: list[Substitution]) -> str:
    """Put the code points back in place of their placeholders"""
    out: list[str] = []
    cursor = 0

    for entry in entries:
        if entry.position < cursor:
            raise IndexError(
                f"Substitution position {entry.position} is before {cursor}"
            )
        if entry.position >= len(field_data):
            raise IndexError(
                f"Substitution position {entry.position} is past the field data"
            )

        out.append(field_data[cursor : entry.position])
        out.append(chr(entry.code_point))
        cursor = entry.position + 1

    out.append(field_data[cursor:])
    return "".join(out)


def decode(
    field_name: str,
    field_data: str,
    substitutions: str | None,
    policy: FieldPolicy = DEFAULT_POLICY,
    validator: Validator | None = None,
) -> str:
    """
    Recreate a field value from imported field data and its substitution list.

    If anything goes wrong the field data is returned without substitutions.
    `validator` is called with the field data and the parsed entries before
    they are applied; returning False rejects the whole list.
    """
    if not substitutions or not policy.is_eligible(field_name):
        return field_data

    entries = parse_substitutions(substitutions)
    if not entries:
        return field_data

    try:
        if validator is not None and not validator(field_data, entries):
            raise ValueError("Substitution list failed validation")
        return _splice(field_data, entries)
    except Exception as e:  # pylint: disable=broad-except
        _LOGGER.warning("Ignoring substitutions for %s: %s", field_name, e)
        return field_data
