"""
Drug Record Lookup Factory

Factory for creating drug-record collaborator instances.
"""

from typing import Dict, Any
from enum import Enum

from ...domain.ports.drug_record_lookup import DrugRecordLookupPort
from .openfda_client import OpenFDADrugRecordLookup, DummyDrugRecordLookup, OPENFDA_BASE_URL


class DrugRecordLookupType(Enum):
    """Available drug record lookup implementations."""

    OPENFDA = "openfda"
    DUMMY = "dummy"


class DrugRecordLookupFactory:
    """
    Factory for creating drug record lookups.

    Usage:
        lookup = DrugRecordLookupFactory.create(DrugRecordLookupType.OPENFDA, timeout=10)
    """

    @staticmethod
    def create(
        lookup_type: DrugRecordLookupType,
        **kwargs
    ) -> DrugRecordLookupPort:
        if lookup_type == DrugRecordLookupType.OPENFDA:
            return OpenFDADrugRecordLookup(
                base_url=kwargs.get("base_url", OPENFDA_BASE_URL),
                api_key=kwargs.get("api_key"),
                timeout=kwargs.get("timeout", 30.0)
            )

        elif lookup_type == DrugRecordLookupType.DUMMY:
            return DummyDrugRecordLookup()

        else:
            raise ValueError(f"Unknown drug record lookup type: {lookup_type}")

    @staticmethod
    def create_from_config(config: Dict[str, Any]) -> DrugRecordLookupPort:
        """Create lookup from configuration dictionary."""
        lookup_type = DrugRecordLookupType(config.get("type", "openfda"))
        return DrugRecordLookupFactory.create(lookup_type, **config)
