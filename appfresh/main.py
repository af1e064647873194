"""AppFresh — command-line entry point."""

import argparse
import logging
import os
import sys

from appfresh.config.settings import AppSettings
from appfresh.core.cache import ListingCache
from appfresh.core.catalog import CatalogClient
from appfresh.core.launcher import BrowserOpener, UpdateLauncher
from appfresh.core.models import UpdateStatus
from appfresh.core.platform_info import current_os_version
from appfresh.core.update_checker import UpdateChecker


def setup_logging(data_dir: str, verbose: bool = False):
    """Configure logging to file and console."""
    log_dir = os.path.join(data_dir, 'logs')
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, 'appfresh.log')

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        handlers=[
            logging.FileHandler(log_file, encoding='utf-8'),
            logging.StreamHandler(),
        ],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='appfresh',
        description="Check the app catalog for a newer, installable release.",
    )
    parser.add_argument('--bundle-id', help="Catalog identifier of the app")
    parser.add_argument('--country', help="Storefront country code (default: us)")
    parser.add_argument('--app-version', help="Currently installed app version")
    parser.add_argument('--os-version', help="Device OS version (default: detected)")
    parser.add_argument('--config', help="Path to settings.json")
    parser.add_argument('--open', action='store_true',
                        help="Open the catalog page when an update is available")
    parser.add_argument('--verbose', '-v', action='store_true')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    settings = AppSettings.load(args.config)
    setup_logging(settings.data_dir, args.verbose)
    logger = logging.getLogger(__name__)

    cache = ListingCache()
    checker = UpdateChecker(
        CatalogClient(settings.lookup_url, timeout=settings.timeout),
        cache,
        default_identifier=lambda: settings.bundle_id or None,
    )
    verdict = checker.check(
        args.app_version or settings.app_version or None,
        args.os_version or current_os_version(),
        bundle_id=args.bundle_id,
        country_code=args.country or settings.country_code,
    )
    logger.debug("Verdict: %s", verdict)

    listing = verdict.listing
    if verdict.status is UpdateStatus.UPDATE_AVAILABLE:
        print(f"Update available: v{listing.latest_version}")
        if listing.destination_url:
            print(listing.destination_url)
        if args.open:
            UpdateLauncher(cache, BrowserOpener()).open_listing_destination()
    elif verdict.status is UpdateStatus.INCOMPATIBLE:
        print(f"v{listing.latest_version} requires OS {listing.minimum_os_version} or newer")
    elif verdict.status is UpdateStatus.UP_TO_DATE:
        print("Up to date")
    else:
        print(f"Update check failed: {verdict.reason.value}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
