"""Customer-facing load test scenarios.

Browsing is read-only traffic against the catalogue. The negotiated checkout
journey exercises the full write path: offer, counter-offer, cart, order.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import cart_item_data, checkout_data, opening_offer, shopper_id
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import ShopperState


class BrowsingUser(HttpUser):
    """Window shopper: categories, nearby stores, deals and product pages."""

    wait_time = between(0.5, 2)

    @task(3)
    def hot_deals(self):
        self.client.get("/api/products/hot-deals", name="GET /api/products/hot-deals")

    @task(2)
    def nearby_stores(self):
        self.client.get("/api/stores/nearby", name="GET /api/stores/nearby")

    @task(1)
    def categories(self):
        self.client.get("/api/categories", name="GET /api/categories")

    @task(2)
    def product_page(self):
        resp = self.client.get("/api/products", name="GET /api/products")
        if resp.status_code == 200 and resp.json():
            product = random.choice(resp.json())
            self.client.get(f"/api/products/{product['id']}", name="GET /api/products/{id}")

    @task(1)
    def services(self):
        self.client.get("/api/services", params={"type": random.choice(["beauty", "tailoring"])}, name="GET /api/services")


class NegotiatedCheckoutJourney(SequentialTaskSet):
    """Pick Product -> Lowball Offer -> Accept Counter -> Add To Cart -> Checkout -> Track."""

    def on_start(self):
        self.state = ShopperState(user_id=shopper_id())
        self.headers = {"X-User-Id": str(self.state.user_id)}
        self.final_price = None

    @task
    def pick_product(self):
        with self.client.get("/api/products/hot-deals", catch_response=True, name="GET /api/products/hot-deals") as resp:
            if resp.status_code == 200 and resp.json():
                product = random.choice(resp.json())
                self.state.product_id = product["id"]
                self.state.store_id = product["storeId"]
                self.final_price = product["finalPrice"]
            else:
                resp.failure(f"No products to buy: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def lowball_offer(self):
        with self.client.post(
            f"/api/products/{self.state.product_id}/negotiate",
            json={"offerPrice": opening_offer(self.final_price)},
            catch_response=True,
            name="POST /api/products/{id}/negotiate",
        ) as resp:
            if resp.status_code == 200:
                body = resp.json()
                self.state.agreed_price = body["finalPrice"]
            else:
                resp.failure(f"Negotiate failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def accept_counter_offer(self):
        with self.client.post(
            f"/api/products/{self.state.product_id}/negotiate",
            json={"offerPrice": self.state.agreed_price},
            catch_response=True,
            name="POST /api/products/{id}/negotiate",
        ) as resp:
            if resp.status_code != 200 or not resp.json()["accepted"]:
                resp.failure(f"Counter offer not accepted: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def add_to_cart(self):
        with self.client.post(
            "/api/cart/items",
            json=cart_item_data(self.state.product_id, self.state.agreed_price),
            headers=self.headers,
            catch_response=True,
            name="POST /api/cart/items",
        ) as resp:
            if resp.status_code == 200:
                self.state.cart_item_ids.append(resp.json()["id"])
            else:
                resp.failure(f"Add to cart failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def view_cart(self):
        self.client.get("/api/cart", headers=self.headers, name="GET /api/cart")

    @task
    def checkout(self):
        with self.client.post(
            "/api/orders",
            json=checkout_data(self.state.store_id),
            headers=self.headers,
            catch_response=True,
            name="POST /api/orders",
        ) as resp:
            if resp.status_code == 200:
                self.state.order_id = resp.json()["id"]
            else:
                resp.failure(f"Checkout failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def track_order(self):
        self.client.get(f"/api/orders/{self.state.order_id}", headers=self.headers, name="GET /api/orders/{id}")

    @task
    def done(self):
        self.interrupt()


class ShopperUser(HttpUser):
    """Customer who negotiates and buys."""

    wait_time = between(1, 3)
    tasks = [NegotiatedCheckoutJourney]
