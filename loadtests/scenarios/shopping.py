"""Shopper load test scenarios.

ShopperJourney walks the common path through the store: register, browse
the catalogue, open a product, place a COD order and check order history.
CartCheckoutJourney buys through the cart instead, saving the product to the
wishlist on the way.
BrowsingUser only reads, modelling the much larger window-shopping crowd.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import CATEGORIES, order_data, register_user_data
from loadtests.helpers.response import extract_error_detail, is_stock_rejection
from loadtests.helpers.state import ShopperState


class ShopperJourney(SequentialTaskSet):
    """Register -> Browse -> View Product -> Place Order -> My Orders -> View Order.

    Generates events: UserRegistered, OrderPlaced (plus a confirmation email).
    """

    def on_start(self):
        self.state = ShopperState()

    def _headers(self):
        return {"X-User-Id": self.state.user_id}

    @task
    def register(self):
        with self.client.post(
            "/users",
            json=register_user_data(),
            catch_response=True,
            name="POST /users",
        ) as resp:
            if resp.status_code == 201:
                self.state.user_id = resp.json()["user_id"]
            else:
                resp.failure(f"Register failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def browse(self):
        with self.client.get(
            "/products",
            params={"category": random.choice(CATEGORIES), "limit": 20},
            catch_response=True,
            name="GET /products?category",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Browse failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()
                return
            products = resp.json()["products"] or []
            if not products:
                # Nothing seeded in this category yet; fall back to the full listing
                products = self.client.get("/products", name="GET /products").json().get("products", [])
            if not products:
                self.interrupt()
                return
            self.state.product = random.choice(products)

    @task
    def view_product(self):
        with self.client.get(
            f"/products/{self.state.product['product_id']}",
            catch_response=True,
            name="GET /products/{id}",
        ) as resp:
            if resp.status_code == 200:
                self.state.product = resp.json()
            else:
                resp.failure(f"View product failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def place_order(self):
        with self.client.post(
            "/orders",
            json=order_data(self.state.product),
            headers=self._headers(),
            catch_response=True,
            name="POST /orders",
        ) as resp:
            if resp.status_code == 201:
                self.state.order_ids.append(resp.json()["order_id"])
            elif is_stock_rejection(resp):
                resp.success()
            else:
                resp.failure(f"Place order failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def my_orders(self):
        with self.client.get(
            "/orders",
            headers=self._headers(),
            catch_response=True,
            name="GET /orders",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"List orders failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def view_order(self):
        if not self.state.order_ids:
            return
        with self.client.get(
            f"/orders/{self.state.order_ids[-1]}",
            headers=self._headers(),
            catch_response=True,
            name="GET /orders/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"View order failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class CartCheckoutJourney(SequentialTaskSet):
    """Register -> Browse -> Save to Wishlist -> Add to Cart -> View Cart -> Checkout.

    Generates events: UserRegistered, WishlistProductAdded, CartItemAdded,
    OrderPlaced and CartCleared.
    """

    on_start = ShopperJourney.on_start
    _headers = ShopperJourney._headers
    register = ShopperJourney.register
    browse = ShopperJourney.browse

    @task
    def save_for_later(self):
        with self.client.post(
            "/wishlist",
            json={"product_id": self.state.product["product_id"]},
            headers=self._headers(),
            catch_response=True,
            name="POST /wishlist",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Wishlist add failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def add_to_cart(self):
        line = order_data(self.state.product, max_quantity=2)["items"][0]
        with self.client.post(
            "/cart",
            json={"product_id": line["product_id"], "size": line["size"], "quantity": line["quantity"]},
            headers=self._headers(),
            catch_response=True,
            name="POST /cart",
        ) as resp:
            if resp.status_code == 200:
                return
            if is_stock_rejection(resp):
                resp.success()
            else:
                resp.failure(f"Add to cart failed: {resp.status_code} - {extract_error_detail(resp)}")
            self.interrupt()

    @task
    def view_cart(self):
        with self.client.get("/cart", headers=self._headers(), catch_response=True, name="GET /cart") as resp:
            if resp.status_code != 200:
                resp.failure(f"View cart failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def checkout(self):
        with self.client.post(
            "/cart/checkout",
            json={"address": order_data(self.state.product)["address"]},
            headers=self._headers(),
            catch_response=True,
            name="POST /cart/checkout",
        ) as resp:
            if resp.status_code == 201:
                self.state.order_ids.append(resp.json()["order_id"])
            elif is_stock_rejection(resp):
                resp.success()
            else:
                resp.failure(f"Checkout failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class ShopperUser(HttpUser):
    wait_time = between(1, 3)
    tasks = {ShopperJourney: 3, CartCheckoutJourney: 1}


class BrowsingUser(HttpUser):
    """Read-only traffic against the catalogue."""

    wait_time = between(0.5, 2)

    @task(5)
    def list_products(self):
        self.client.get("/products", params={"page": random.randint(1, 3)}, name="GET /products")

    @task(3)
    def list_by_category(self):
        self.client.get("/products", params={"category": random.choice(CATEGORIES)}, name="GET /products?category")

    @task(2)
    def top_selling(self):
        self.client.get("/products/top-selling", name="GET /products/top-selling")
