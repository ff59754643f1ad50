"""Stock contention stress scenario.

StockRushUser models a limited drop: every simulated shopper hammers the
same product and size. Each unit may be sold exactly once, so once the
size is exhausted every further order must be rejected with an
insufficient-stock error. Compare the product's sales_count against the
number of 201 responses after the run to verify nothing was oversold.

The hot product is created on test start through an admin account whose
id is read from PRINTEEZ_ADMIN_ID (create one with
``python src/manage.py create-admin``).
"""

import os

import requests
from locust import HttpUser, constant_pacing, events, task

from loadtests.data_generators import delivery_address, product_data, register_user_data
from loadtests.helpers.response import extract_error_detail, is_stock_rejection
from loadtests.helpers.state import RushState

RUSH_SIZE = "Large"
RUSH_STOCK = int(os.getenv("RUSH_STOCK", "100"))

_rush = {"product_id": None}


@events.test_start.add_listener
def create_rush_product(environment, **_kwargs):
    admin_id = os.getenv("PRINTEEZ_ADMIN_ID")
    if not admin_id or not environment.host:
        return
    resp = requests.post(
        f"{environment.host}/products",
        json=product_data(stock_per_size=RUSH_STOCK, sizes=[RUSH_SIZE]),
        headers={"X-User-Id": admin_id},
        timeout=10,
    )
    if resp.status_code == 201:
        _rush["product_id"] = resp.json()["product_id"]
        print(f"[LOADTEST] Rush product {_rush['product_id']} with {RUSH_STOCK} x {RUSH_SIZE}")
    else:
        print(f"[LOADTEST] Could not create rush product: {extract_error_detail(resp)}")


class StockRushUser(HttpUser):
    """Many shoppers, one size, few units."""

    wait_time = constant_pacing(0.2)

    def on_start(self):
        self.state = RushState()
        resp = self.client.post("/users", json=register_user_data(), name="[RUSH] POST /users")
        if resp.status_code == 201:
            self.state.user_id = resp.json()["user_id"]

    @task
    def grab_one(self):
        if not (self.state.user_id and _rush["product_id"]):
            return
        with self.client.post(
            "/orders",
            json={
                "items": [{"product_id": _rush["product_id"], "size": RUSH_SIZE, "quantity": 1}],
                "address": delivery_address(),
            },
            headers={"X-User-Id": self.state.user_id},
            catch_response=True,
            name="[RUSH] POST /orders",
        ) as resp:
            if resp.status_code == 201:
                self.state.orders_placed += 1
            elif is_stock_rejection(resp):
                self.state.orders_rejected += 1
                resp.success()
            else:
                resp.failure(f"Rush order failed: {resp.status_code} - {extract_error_detail(resp)}")
