"""Faker-based data generators for Locust load test scenarios.

Payloads use the camelCase keys of the storefront API and pass its validation
rules (positive offers, non-blank delivery address, quantities of at least 1).
"""

import random

from faker import Faker

fake = Faker()

# The sample catalogue loaded at startup has three stores
SAMPLE_STORE_IDS = [1, 2, 3]


def shopper_id() -> int:
    """A user id well clear of the demo customer (1) and retailer (2)."""
    return random.randint(1_000, 9_999_999)


def delivery_address() -> str:
    return fake.address().replace("\n", ", ")


def opening_offer(final_price: float) -> float:
    """A lowball first offer, usually below the store's floor."""
    return round(final_price * random.uniform(0.5, 0.85))


def cart_item_data(product_id: int, agreed_price: float | None = None) -> dict:
    payload = {"productId": product_id, "quantity": random.randint(1, 3)}
    if agreed_price is not None:
        payload["negotiatedPrice"] = agreed_price
    return payload


def checkout_data(store_id: int) -> dict:
    return {
        "storeId": store_id,
        "paymentMethod": random.choice(["cod", "upi", "card"]),
        "deliveryAddress": delivery_address(),
    }


def product_data() -> dict:
    original = random.randint(499, 4999)
    discount = random.choice([0, 5, 10, 15, 20, 25])
    final = round(original * (100 - discount) / 100)
    return {
        "name": fake.catch_phrase()[:255],
        "description": fake.sentence(),
        "originalPrice": original,
        "discountPercentage": discount,
        "minAcceptablePrice": round(final * 0.85),
        "stock": random.randint(1, 50),
    }
