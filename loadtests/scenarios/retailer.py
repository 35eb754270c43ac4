"""Retailer dashboard load test scenario."""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import SAMPLE_STORE_IDS, product_data
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import RetailerState

_NEXT_STATUS = {
    "confirmed": "packed",
    "packed": "on_the_way",
    "on_the_way": "delivered",
}


class StoreDashboardJourney(SequentialTaskSet):
    """List Inventory -> Add Product -> Advance Open Orders -> Withdraw Product."""

    def on_start(self):
        self.state = RetailerState(store_id=random.choice(SAMPLE_STORE_IDS))
        self.headers = {"X-Store-Id": str(self.state.store_id)}

    @task
    def list_inventory(self):
        self.client.get("/api/retailer/products", headers=self.headers, name="GET /api/retailer/products")

    @task
    def add_product(self):
        with self.client.post(
            "/api/retailer/products",
            json=product_data(),
            headers=self.headers,
            catch_response=True,
            name="POST /api/retailer/products",
        ) as resp:
            if resp.status_code == 201:
                self.state.product_ids.append(resp.json()["id"])
            else:
                resp.failure(f"Add product failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def advance_orders(self):
        resp = self.client.get("/api/retailer/orders", headers=self.headers, name="GET /api/retailer/orders")
        if resp.status_code != 200:
            return
        for order in resp.json()[:5]:
            target = _NEXT_STATUS.get(order["status"])
            if target is None:
                continue
            with self.client.put(
                f"/api/retailer/orders/{order['id']}/status",
                json={"status": target},
                headers=self.headers,
                catch_response=True,
                name="PUT /api/retailer/orders/{id}/status",
            ) as update:
                # Another retailer user may have advanced it first
                if update.status_code in (200, 400):
                    update.success()
                else:
                    update.failure(f"Status update failed: {update.status_code}: {extract_error_detail(update)}")

    @task
    def withdraw_product(self):
        if not self.state.product_ids:
            return
        product_id = self.state.product_ids.pop()
        with self.client.delete(
            f"/api/retailer/products/{product_id}",
            headers=self.headers,
            catch_response=True,
            name="DELETE /api/retailer/products/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Withdraw failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class RetailerUser(HttpUser):
    """Store owner working the dashboard."""

    wait_time = between(2, 5)
    tasks = [StoreDashboardJourney]
