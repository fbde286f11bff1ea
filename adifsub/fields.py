"""ADIF field eligibility"""

from collections.abc import Iterable

# Fields that may carry non-US-ASCII text. APP_ and USERDEF fields are not
# covered since their data types would need checking first.
DEFAULT_UNICODE_FIELDS = (
    "ADDRESS",
    "COMMENT",
    "COUNTRY",
    "MY_ANTENNA",
    "MY_CITY",
    "MY_COUNTRY",
    "MY_NAME",
    "MY_POSTAL_CODE",
    "MY_RIG",
    "MY_SIG",
    "MY_SIG_INFO",
    "MY_STREET",
    "NAME",
    "NOTES",
    "QSLMSG",
    "QTH",
    "RIG",
    "SIG",
    "SIG_INFO",
)


class FieldPolicy:
    """Closed allow-list of field names that take part in Unicode substitution"""

    __slots__ = ("_fields",)

    def __init__(self, fields: Iterable[str]) -> None:
        self._fields = frozenset(f.strip().upper() for f in fields if f.strip())

    @property
    def fields(self) -> list[str]:
        """Eligible field names, upper case and sorted"""
        return sorted(self._fields)

    def is_eligible(self, field_name: str) -> bool:
        """Check if a field is allowed to contain non-US-ASCII characters"""
        return field_name.upper() in self._fields

    def extend(self, fields: Iterable[str]) -> "FieldPolicy":
        """Return a new policy that also allows the given fields"""
        return FieldPolicy([*self._fields, *fields])

    def __contains__(self, field_name: object) -> bool:
        return isinstance(field_name, str) and self.is_eligible(field_name)

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldPolicy):
            return NotImplemented
        return self._fields == other._fields

    def __hash__(self) -> int:
        return hash(self._fields)

    def __repr__(self) -> str:
        return f"FieldPolicy({self.fields!r})"


DEFAULT_POLICY = FieldPolicy(DEFAULT_UNICODE_FIELDS)


def is_eligible(field_name: str, policy: FieldPolicy = DEFAULT_POLICY) -> bool:
    """Check a field name against a policy, the default allow-list if none is given"""
    return policy.is_eligible(field_name)
