"""
Drug Record Adapters

Implementations of DrugRecordLookupPort.
"""

from .openfda_client import OpenFDADrugRecordLookup, DummyDrugRecordLookup, sample_label
from .factory import DrugRecordLookupFactory, DrugRecordLookupType

__all__ = [
    "OpenFDADrugRecordLookup",
    "DummyDrugRecordLookup",
    "sample_label",
    "DrugRecordLookupFactory",
    "DrugRecordLookupType",
]
