"""
Drug Record Entities

Results of the drug-record collaborator: the confirmed medicine name and
the structured regulatory label record.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any, List


@dataclass(frozen=True)
class ConfirmedMedicine:
    """
    Canonical medicine identity returned by the confirmation step.

    Attributes:
        brand_name: Canonical brand name used for the label lookup
        generic_name: Generic (non-proprietary) name, if known
        manufacturer: Manufacturer name, if known
    """

    brand_name: str
    generic_name: Optional[str] = None
    manufacturer: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.brand_name or not self.brand_name.strip():
            raise ValueError("Brand name cannot be empty")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "brand_name": self.brand_name,
            "generic_name": self.generic_name,
            "manufacturer_name": self.manufacturer,
        }


class FdaRecord:
    """
    Structured label record from the drug database.

    The raw response is kept unmodified and handed as-is to the client and
    to the prompt builder; the accessors only read the first result.
    """

    def __init__(self, raw: Dict[str, Any]):
        self._raw = raw

    def to_dict(self) -> Dict[str, Any]:
        return self._raw

    @property
    def label(self) -> Dict[str, Any]:
        results = self._raw.get("results") or []
        return results[0] if results else {}

    def section(self, name: str) -> str:
        """Return a label section joined into one string ("" if absent)."""
        value = self.label.get(name)
        if isinstance(value, list):
            return " ".join(str(v) for v in value if v)
        return str(value) if value else ""

    def openfda_field(self, name: str) -> List[str]:
        value = (self.label.get("openfda") or {}).get(name) or []
        return [value] if isinstance(value, str) else list(value)

    @property
    def brand_name(self) -> str:
        names = self.openfda_field("brand_name")
        return names[0] if names else ""

    @property
    def generic_name(self) -> str:
        names = self.openfda_field("generic_name")
        return names[0] if names else ""

    @property
    def purpose(self) -> str:
        return self.section("purpose") or self.section("indications_and_usage")

    @property
    def active_ingredient(self) -> str:
        return self.section("active_ingredient")

    @property
    def inactive_ingredient(self) -> str:
        return self.section("inactive_ingredient")

    @property
    def adverse_reactions(self) -> str:
        return self.section("adverse_reactions")

    @property
    def warnings(self) -> str:
        return self.section("warnings")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, FdaRecord) and other._raw == self._raw

    def __repr__(self) -> str:
        return f"FdaRecord(brand_name={self.brand_name!r})"
