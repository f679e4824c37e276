#!/usr/bin/env python3
"""
Verification script for the account API client setup.

This script checks:
1. Base URL configuration resolves to an absolute http(s) URL
2. Request timeout is configured
3. The account service answers a one-item list request (optional)
"""

import sys
from urllib.parse import urlparse

from accountapi.domains.accounts import Pagination
from accountapi.domains.errors import AccountAPIError, TransportError
from accountapi.infrastructure.http.client import HTTPClient
from accountapi.infrastructure.http.context import RequestContext
from accountapi.services.accounts import AccountClient
from accountapi.utils.config import account_api_base_url, account_api_timeout, log_level
from accountapi.utils.logger import setup_logger


def check_base_url() -> tuple[bool, str]:
    """Check ACCOUNT_API_BASE_URL is an absolute http(s) URL."""
    url = account_api_base_url()
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return False, f"[X] ACCOUNT_API_BASE_URL is not an absolute http(s) URL: {url}"
    return True, f"[OK] Base URL: {url}"


def check_timeout() -> tuple[bool, str]:
    return True, f"[OK] Request timeout: {account_api_timeout():.1f}s"


def check_connectivity() -> tuple[bool, str]:
    """List a single account to prove the service is reachable."""
    api = AccountClient(HTTPClient())
    ctx = RequestContext.with_timeout(account_api_timeout())
    try:
        page = api.list(Pagination(page=0, size=1), ctx)
    except TransportError as e:
        return False, f"[X] Could not reach the account service: {e}"
    except AccountAPIError as e:
        return False, f"[X] Account service returned status {e.status_code}: {e}"
    return True, f"[OK] Account service is accessible ({len(page.accounts)} account(s) on first page)"


def main():
    """Run all verification checks."""
    setup_logger(level=log_level())

    print("Verifying account API client setup\n")
    print("=" * 60)

    all_checks_passed = True

    print("\n1. Checking base URL...")
    ok, msg = check_base_url()
    print(f"   {msg}")
    if not ok:
        all_checks_passed = False

    print("\n2. Checking request timeout...")
    ok, msg = check_timeout()
    print(f"   {msg}")

    if all_checks_passed:
        print("\n3. Testing account service connectivity...")
        ok, msg = check_connectivity()
        print(f"   {msg}")
        if not ok:
            all_checks_passed = False

    print("\n" + "=" * 60)

    if all_checks_passed:
        print("\n[OK] All checks passed!")
        return 0
    print("\n[X] Some checks failed. Please fix the issues above.")
    print("\nSet ACCOUNT_API_BASE_URL in .env or export it.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
