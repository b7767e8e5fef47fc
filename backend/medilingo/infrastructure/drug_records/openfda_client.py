"""
openFDA Drug Record Lookup

Drug-record collaborator backed by the public openFDA drug label API
(https://api.fda.gov/drug/label.json).

- confirm: brand-name search, then generic-name search
- fetch_label: brand-name search returning the full label document

openFDA answers 404 when a search matches nothing.
"""

from typing import Optional, Dict, Any
import logging
import time

import requests
from pydantic import ValidationError as SchemaValidationError

from .schemas import OpenFdaLabelResponse
from ...domain.ports.drug_record_lookup import DrugRecordLookupPort
from ...domain.entities.drug_record import ConfirmedMedicine, FdaRecord
from ...domain.exceptions import (
    DrugRecordLookupError,
    MalformedUpstreamResponseError,
    MedicineNotFoundError,
)


logger = logging.getLogger(__name__)


OPENFDA_BASE_URL = "https://api.fda.gov/drug/label.json"

COLLABORATOR_NAME = "openFDA"


def _quote_term(term: str) -> str:
    """Quote a search term as an openFDA exact phrase."""
    return '"' + term.replace('"', "").strip() + '"'


class OpenFDADrugRecordLookup(DrugRecordLookupPort):
    """
    Drug record lookup using the openFDA label endpoint.

    Attributes:
        base_url: Label endpoint URL
        api_key: Optional openFDA API key (raises the rate limit)
        timeout: Per-request timeout in seconds
    """

    def __init__(
        self,
        base_url: str = OPENFDA_BASE_URL,
        api_key: Optional[str] = None,
        timeout: float = 30.0,
        session: Optional[requests.Session] = None
    ):
        self._base_url = base_url
        self._api_key = api_key
        self._timeout = timeout
        self._session = session

        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def _init_session(self) -> None:
        """Initialize HTTP session."""
        self._session = requests.Session()
        self._session.headers.update({
            "Accept": "application/json",
        })

    def _search(self, field: str, term: str) -> Optional[Dict[str, Any]]:
        """
        Run one label search.

        Returns:
            Parsed JSON body, or None if openFDA found nothing
        """
        if not self._session:
            self._init_session()

        params = {"search": f"openfda.{field}:{_quote_term(term)}", "limit": 1}
        if self._api_key:
            params["api_key"] = self._api_key

        start_time = time.time()
        try:
            response = self._session.get(self._base_url, params=params, timeout=self._timeout)
        except requests.RequestException as e:
            raise DrugRecordLookupError(
                f"openFDA request failed: {e}",
                details={"field": field, "term": term}
            )

        elapsed = (time.time() - start_time) * 1000
        self.logger.debug(f"openFDA {field}={term!r} -> HTTP {response.status_code} in {elapsed:.0f}ms")

        if response.status_code == 404:
            return None
        if response.status_code != 200:
            raise DrugRecordLookupError(
                f"openFDA returned HTTP {response.status_code}",
                details={"field": field, "term": term, "status": response.status_code}
            )

        try:
            payload = response.json()
        except ValueError:
            raise MalformedUpstreamResponseError(COLLABORATOR_NAME, "response is not JSON")

        if isinstance(payload, dict) and payload.get("results") == []:
            return None
        return payload

    @staticmethod
    def _validate(payload: Any) -> OpenFdaLabelResponse:
        try:
            return OpenFdaLabelResponse.model_validate(payload)
        except SchemaValidationError as e:
            raise MalformedUpstreamResponseError(
                COLLABORATOR_NAME,
                "label response is missing results or openfda.brand_name",
                details={"errors": e.errors(include_url=False)}
            )

    def confirm(self, name: str) -> ConfirmedMedicine:
        """Resolve a name by brand first, then by generic name."""
        for field in ("brand_name", "generic_name"):
            payload = self._search(field, name)
            if payload is None:
                continue

            label = self._validate(payload).results[0].openfda
            confirmed = ConfirmedMedicine(
                brand_name=label.brand_name[0],
                generic_name=label.generic_name[0] if label.generic_name else None,
                manufacturer=label.manufacturer_name[0] if label.manufacturer_name else None,
            )
            self.logger.info(f"Confirmed {name!r} as {confirmed.brand_name!r} (by {field})")
            return confirmed

        raise MedicineNotFoundError(name)

    def fetch_label(self, brand_name: str) -> FdaRecord:
        payload = self._search("brand_name", brand_name)
        if payload is None:
            raise MedicineNotFoundError(brand_name, message=f"No label found for '{brand_name}'")

        self._validate(payload)
        return FdaRecord(payload)

    @property
    def name(self) -> str:
        return COLLABORATOR_NAME


def sample_label(brand_name: str = "Tylenol", generic_name: str = "ACETAMINOPHEN") -> Dict[str, Any]:
    """Minimal label response in the openFDA shape."""
    return {
        "meta": {"results": {"skip": 0, "limit": 1, "total": 1}},
        "results": [
            {
                "openfda": {
                    "brand_name": [brand_name],
                    "generic_name": [generic_name],
                    "manufacturer_name": ["Kenvue Brands LLC"],
                },
                "purpose": ["Pain reliever/fever reducer"],
                "active_ingredient": ["Acetaminophen 500 mg (in each caplet)"],
                "inactive_ingredient": ["corn starch, magnesium stearate, sodium starch glycolate"],
                "adverse_reactions": ["Rarely, allergic skin reactions may occur."],
                "warnings": ["Liver warning: this product contains acetaminophen."],
            }
        ],
    }


class DummyDrugRecordLookup(DrugRecordLookupPort):
    """
    Dummy drug record lookup for testing and offline runs.

    Records are keyed by lower-cased brand name.
    """

    def __init__(self, records: Optional[Dict[str, Dict[str, Any]]] = None):
        if records is None:
            records = {"tylenol": sample_label()}
        self._records = {key.lower(): value for key, value in records.items()}

    def _find(self, name: str) -> Optional[Dict[str, Any]]:
        key = name.strip().lower()
        if key in self._records:
            return self._records[key]
        for record in self._records.values():
            generic = FdaRecord(record).generic_name
            if generic and generic.lower() == key:
                return record
        return None

    def confirm(self, name: str) -> ConfirmedMedicine:
        raw = self._find(name)
        if raw is None:
            raise MedicineNotFoundError(name)
        record = FdaRecord(raw)
        manufacturers = record.openfda_field("manufacturer_name")
        return ConfirmedMedicine(
            brand_name=record.brand_name,
            generic_name=record.generic_name or None,
            manufacturer=manufacturers[0] if manufacturers else None,
        )

    def fetch_label(self, brand_name: str) -> FdaRecord:
        raw = self._find(brand_name)
        if raw is None:
            raise MedicineNotFoundError(brand_name)
        return FdaRecord(raw)

    @property
    def name(self) -> str:
        return "DummyDrugRecords"
