"""
Drug Record Lookup Port

Abstract interface for the drug database collaborator.
"""

from abc import ABC, abstractmethod

from ..entities.drug_record import ConfirmedMedicine, FdaRecord


class DrugRecordLookupPort(ABC):
    """
    Port (interface) for drug database implementations.

    Lookup happens in two steps:
    1. confirm: resolve a free-text name to a canonical brand name
    2. fetch_label: load the structured label record for that brand
    """

    @abstractmethod
    def confirm(self, name: str) -> ConfirmedMedicine:
        """
        Resolve a candidate medicine name.

        Raises:
            MedicineNotFoundError: If no record matches the name
            DrugRecordLookupError: If the collaborator call fails
            MalformedUpstreamResponseError: If the response has an unexpected shape
        """
        pass

    @abstractmethod
    def fetch_label(self, brand_name: str) -> FdaRecord:
        """
        Load the label record for a confirmed brand name.

        Raises:
            MedicineNotFoundError: If no label exists for the brand
            DrugRecordLookupError: If the collaborator call fails
            MalformedUpstreamResponseError: If the response has an unexpected shape
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass
