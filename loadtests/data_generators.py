"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the domain's validation rules
(EmailAddress VO, name and address lengths, product sizes) and match the
field names expected by the API's Pydantic request schemas.
"""

import random
import uuid

from faker import Faker

fake = Faker()

SIZES = ["Small", "Medium", "Large", "Extra Large"]
CATEGORIES = ["urban", "typography", "abstract", "anime"]

# ---------- Identity ----------


def valid_email() -> str:
    """Generate emails that pass EmailAddress VO validation.

    Rules: exactly one @, no spaces, valid domain with dot, no leading,
    trailing or consecutive dots.
    """
    local = fake.user_name()[:20]
    domain = fake.free_email_domain()
    return f"{local}.{uuid.uuid4().hex[:4]}@{domain}"


def user_name() -> str:
    """Generate a display name within the 2-50 character bounds."""
    return fake.name()[:50]


def delivery_address() -> str:
    """Generate a single-line delivery address under 200 characters."""
    return f"{fake.street_address()}, {fake.city()}"[:200]


def register_user_data() -> dict:
    """Generate RegisterUserRequest payload."""
    return {
        "name": user_name(),
        "email": valid_email(),
        "password": fake.password(length=10),
        "address": delivery_address(),
    }


# ---------- Catalogue ----------


def product_data(stock_per_size: int | None = None, sizes: list[str] | None = None) -> dict:
    """Generate AddProductRequest payload with a stock-count per size."""
    sizes = sizes or random.sample(SIZES, k=random.randint(1, len(SIZES)))
    word = fake.word().capitalize()
    return {
        "name": f"{word} {random.choice(['Tee', 'Hoodie', 'Crewneck', 'Tank'])}",
        "description": fake.sentence(nb_words=12)[:500],
        "category": random.choice(CATEGORIES),
        "price": round(random.uniform(999, 4999), 2),
        "image_url": f"https://cdn.printeez.com/designs/{uuid.uuid4().hex[:12]}.png",
        "sizes": {size: stock_per_size if stock_per_size is not None else random.randint(5, 200) for size in sizes},
    }


# ---------- Ordering ----------


def order_data(product: dict, max_quantity: int = 3) -> dict:
    """Generate PlaceOrderRequest payload for one of ``product``'s sizes.

    ``product`` is a ProductResponse body as returned by GET /products/{id}.
    """
    in_stock = [entry["size"] for entry in product["sizes"] if entry["stock"] > 0]
    size = random.choice(in_stock or [entry["size"] for entry in product["sizes"]])
    return {
        "items": [
            {
                "product_id": product["product_id"],
                "size": size,
                "quantity": random.randint(1, max_quantity),
            }
        ],
        "address": delivery_address(),
    }
