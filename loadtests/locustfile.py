"""Printeez Load Testing: Locust entry point.

Run specific scenarios with Locust's class selection.

Usage:
    # All scenarios (web UI):
    locust -f loadtests/locustfile.py

    # Shopper journeys only:
    locust -f loadtests/locustfile.py ShopperUser BrowsingUser

    # Limited-drop contention (needs PRINTEEZ_ADMIN_ID):
    PRINTEEZ_ADMIN_ID=<admin user id> locust -f loadtests/locustfile.py StockRushUser

    # Headless (CI mode):
    locust -f loadtests/locustfile.py ShopperUser --headless \
           -u 50 -r 5 -t 300s --csv=results/loadtest
"""

import logging
import time

import requests
from locust import events

# Import all user classes so Locust discovers them
from loadtests.helpers.response import extract_error_detail
from loadtests.scenarios.shopping import BrowsingUser, ShopperUser  # noqa: F401
from loadtests.scenarios.stress import RUSH_SIZE, StockRushUser, _rush  # noqa: F401

logger = logging.getLogger("loadtest")


@events.request.add_listener
def on_request(request_type, name, response, exception, **_kw):
    """Log error details for every failed request.

    Extracts the API error body so you see "Insufficient stock for ..."
    instead of just "400".
    """
    if exception:
        logger.error("[EXCEPTION] %s %s: %s", request_type, name, exception)
    elif response is not None and response.status_code >= 400:
        detail = extract_error_detail(response)
        logger.error("[%s] %s %s: %s", response.status_code, request_type, name, detail)


@events.test_start.add_listener
def on_test_start(environment, **_kwargs):
    print(f"\n[LOADTEST] Started at {time.strftime('%H:%M:%S')}")
    print(f"[LOADTEST] Target host: {environment.host}")
    print()


@events.test_stop.add_listener
def on_test_stop(environment, **_kwargs):
    """Print final stock and sales counters for the rush product, if any."""
    print(f"\n[LOADTEST] Stopped at {time.strftime('%H:%M:%S')}")
    if not _rush["product_id"]:
        return
    try:
        resp = requests.get(f"{environment.host}/products/{_rush['product_id']}", timeout=5)
        product = resp.json()
        stock = next((s["stock"] for s in product["sizes"] if s["size"] == RUSH_SIZE), None)
        print(f"[LOADTEST] Rush product sold {product['sales_count']}, {stock} x {RUSH_SIZE} left\n")
    except (requests.RequestException, ValueError, KeyError) as e:
        print(f"[LOADTEST] Could not fetch rush product: {e}\n")
