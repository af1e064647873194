"""Update system data models.

``ListingRecord`` is the catalog's metadata for one application, decoded from
the lookup endpoint's JSON. ``UpdateVerdict`` is the tagged outcome of a
check; ``UpdateChecker.has_update`` collapses it to a bool.
"""

from dataclasses import dataclass
from enum import Enum


class CatalogDecodeError(ValueError):
    """Lookup payload did not match the expected shape."""


def _optional_str(data: dict, key: str) -> str | None:
    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    raise CatalogDecodeError(f"'{key}' must be a string, got {type(value).__name__}")


@dataclass(frozen=True)
class ListingRecord:
    """Catalog listing for one application.

    A record with every field absent is the "not found" sentinel: the catalog
    answered, but has no listing for the identifier.
    """

    latest_version: str | None = None
    display_name: str | None = None       # trackName, informational only
    destination_url: str | None = None    # trackViewUrl
    minimum_os_version: str | None = None

    @classmethod
    def not_found(cls) -> 'ListingRecord':
        return cls()

    @property
    def is_empty(self) -> bool:
        return (self.latest_version is None and self.display_name is None
                and self.destination_url is None
                and self.minimum_os_version is None)

    @classmethod
    def from_json(cls, data: dict) -> 'ListingRecord':
        if not isinstance(data, dict):
            raise CatalogDecodeError("listing entry is not an object")
        return cls(
            latest_version=_optional_str(data, 'version'),
            display_name=_optional_str(data, 'trackName'),
            destination_url=_optional_str(data, 'trackViewUrl'),
            minimum_os_version=_optional_str(data, 'minimumOsVersion'),
        )


@dataclass(frozen=True)
class LookupResponse:
    """Envelope returned by the lookup endpoint."""

    result_count: int
    results: list[ListingRecord]

    @classmethod
    def from_json(cls, data) -> 'LookupResponse':
        if not isinstance(data, dict):
            raise CatalogDecodeError("lookup response is not an object")

        count = data.get('resultCount')
        # bool is an int subclass but not a valid count
        if not isinstance(count, int) or isinstance(count, bool):
            raise CatalogDecodeError("'resultCount' missing or not an integer")

        results = data.get('results')
        if not isinstance(results, list):
            raise CatalogDecodeError("'results' missing or not a list")

        return cls(
            result_count=count,
            results=[ListingRecord.from_json(item) for item in results],
        )

    def first_listing(self) -> ListingRecord:
        """First listing, or the not-found sentinel when there are none."""
        if self.results:
            return self.results[0]
        return ListingRecord.not_found()


class UpdateStatus(Enum):
    UP_TO_DATE = "up_to_date"
    UPDATE_AVAILABLE = "update_available"
    INCOMPATIBLE = "incompatible"     # Release needs a newer OS than the device
    CHECK_FAILED = "check_failed"


class FailureReason(Enum):
    NO_IDENTIFIER = "no_identifier"
    FETCH_FAILED = "fetch_failed"
    NO_LATEST_VERSION = "no_latest_version"
    NO_CURRENT_VERSION = "no_current_version"


@dataclass(frozen=True)
class UpdateVerdict:
    """Outcome of a single update check."""

    status: UpdateStatus
    listing: ListingRecord | None = None
    reason: FailureReason | None = None

    @property
    def update_available(self) -> bool:
        return self.status is UpdateStatus.UPDATE_AVAILABLE

    @classmethod
    def failed(cls, reason: FailureReason,
               listing: ListingRecord | None = None) -> 'UpdateVerdict':
        return cls(UpdateStatus.CHECK_FAILED, listing=listing, reason=reason)
