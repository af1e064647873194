"""App-catalog lookup client.

Issues one GET against the catalog's lookup endpoint and decodes the first
listing in the response. Every failure is logged and reported as ``None``;
an empty result set is a valid answer and yields the not-found sentinel.
"""

import json
import logging
from http.client import HTTPException
from urllib.error import URLError
from urllib.parse import quote
from urllib.request import Request, urlopen

from appfresh.branding import AppBranding
from appfresh.core.models import CatalogDecodeError, ListingRecord, LookupResponse

logger = logging.getLogger(__name__)

DEFAULT_LOOKUP_URL = "https://itunes.apple.com/{country}/lookup?bundleId={bundle_id}"


class CatalogClient:
    """Fetches listing records from the catalog lookup endpoint."""

    def __init__(self, lookup_url: str = DEFAULT_LOOKUP_URL,
                 timeout: float | None = None):
        self.lookup_url = lookup_url
        self.timeout = timeout  # None = transport default

    def build_url(self, bundle_id: str, country_code: str) -> str:
        return self.lookup_url.format(
            country=quote(country_code, safe=''),
            bundle_id=quote(bundle_id, safe=''),
        )

    def fetch_listing(self, bundle_id: str, country_code: str) -> ListingRecord | None:
        """Look up ``bundle_id`` in the ``country_code`` storefront.

        Returns the first listing, the not-found sentinel when the catalog
        has none, or None when the request or decoding failed.
        """
        url = self.build_url(bundle_id, country_code)
        req = Request(url, headers={
            'User-Agent': AppBranding.user_agent(),
            'Accept': 'application/json',
        })

        try:
            if self.timeout is None:
                resp = urlopen(req)
            else:
                resp = urlopen(req, timeout=self.timeout)
            with resp:
                body = resp.read()
        except (URLError, HTTPException, OSError) as e:
            logger.warning("Could not fetch app info from %s: %s", url, e)
            return None

        try:
            payload = json.loads(body.decode('utf-8'))
            lookup = LookupResponse.from_json(payload)
        except (UnicodeDecodeError, json.JSONDecodeError, CatalogDecodeError) as e:
            logger.warning("Could not parse app info from JSON: %s", e)
            return None

        listing = lookup.first_listing()
        if listing.is_empty:
            logger.info("No catalog listing for %s in '%s'", bundle_id, country_code)
        return listing
