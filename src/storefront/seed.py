"""Sample storefront data: categories, three nearby stores owned by the demo
retailer, their products and services, and one in-flight order for the demo
customer.

Everything goes through the regular commands, so seeded records obey the same
rules as ones created through the API. Loading is skipped when the catalogue
already has categories.
"""

import structlog
from protean.utils.globals import current_domain

from storefront.cart.items import AddToCart
from storefront.catalogue.category import Category
from storefront.catalogue.management import AddProduct, AddService, CreateCategory, RegisterStore
from storefront.order.placement import PlaceOrder
from storefront.order.status import UpdateOrderStatus

logger = structlog.get_logger(__name__)

DEMO_CUSTOMER_ID = 1
DEMO_RETAILER_ID = 2

_UNSPLASH = "https://images.unsplash.com/"

CATEGORIES = [
    ("clothing", "Clothing", "fa-tshirt"),
    ("footwear", "Footwear", "fa-shoe-prints"),
    ("accessories", "Accessories", "fa-gem"),
    ("beauty", "Beauty", "fa-spray-can"),
    ("tailoring", "Tailoring", "fa-cut"),
    ("menswear", "Men's Fashion", "fa-male"),
    ("womenswear", "Women's Fashion", "fa-female"),
]

STORES = [
    {
        "key": "trendy",
        "name": "Trendy Fashion Hub",
        "description": "Latest fashion trends for all occasions",
        "address": "123 Fashion St, City",
        "rating": 4.7,
        "review_count": 156,
        "latitude": 12.9716,
        "longitude": 77.5946,
        "distance": 0.4,
        "delivery_time": 25,
        "image_url": _UNSPLASH + "photo-1441984904996-e0b6ba687e04",
    },
    {
        "key": "boutique",
        "name": "Fashion Boutique",
        "description": "Premium fashion with personalized service",
        "address": "456 Style Ave, City",
        "rating": 4.5,
        "review_count": 124,
        "latitude": 12.9769,
        "longitude": 77.6014,
        "distance": 0.8,
        "delivery_time": 30,
        "image_url": _UNSPLASH + "photo-1567401893414-76b7b1e5a7a5",
    },
    {
        "key": "avenue",
        "name": "Style Avenue",
        "description": "Affordable and trendy fashion for everyone",
        "address": "789 Fashion Blvd, City",
        "rating": 4.2,
        "review_count": 98,
        "latitude": 12.9780,
        "longitude": 77.6108,
        "distance": 1.2,
        "delivery_time": 35,
        "image_url": _UNSPLASH + "photo-1555529669-e69e7aa0ba9a",
    },
]

# (store, category, name, description, original, discount %, final, floor, stock, rating, reviews, image)
PRODUCTS = [
    ("trendy", "clothing", "Summer Floral Dress", "Light and airy floral dress perfect for summer outings",
     1999, 20, 1599, 1299, 15, 4.5, 28, "photo-1525507119028-ed4c629a60a3"),
    ("boutique", "clothing", "Premium Denim Jacket", "High-quality denim jacket with comfortable fit",
     2499, 15, 2124, 1899, 10, 4.6, 36, "photo-1543076447-215ad9ba6923"),
    ("avenue", "footwear", "Canvas Sneakers", "Comfortable canvas sneakers for everyday wear",
     1299, 25, 974, 799, 20, 4.3, 42, "photo-1603344797033-f0f4f587ab60"),
    ("trendy", "accessories", "Leather Crossbody Bag", "Stylish leather crossbody bag with multiple compartments",
     3499, 10, 3149, 2799, 8, 4.7, 19, "photo-1591047139829-d91aecb6caea"),
    ("boutique", "clothing", "Floral Maxi Dress", "Elegant floral maxi dress for special occasions",
     1899, 20, 1519, 1299, 12, 4.5, 31, "photo-1595777457583-95e059d581b8"),
    ("avenue", "clothing", "Summer Wrap Dress", "Comfortable wrap dress for summer days",
     1699, 15, 1444, 1199, 14, 4.3, 27, "photo-1562572159-4efc207f5aff"),
    ("trendy", "clothing", "Floral Print Midi Dress", "Beautiful floral midi dress for casual wear",
     1499, 10, 1349, 1099, 18, 4.7, 34, "photo-1617019114583-affb34d1b3cd"),
    ("boutique", "clothing", "Embroidered Sundress", "Beautiful embroidered sundress with adjustable straps",
     1999, 25, 1499, 1199, 10, 4.6, 22, "photo-1623609163859-ca93d401e835"),
    ("trendy", "menswear", "Crisp White Formal Shirt", "Premium cotton white formal shirt for a polished look",
     1799, 15, 1529, 1299, 25, 4.7, 48, "photo-1603252109303-2751441dd157"),
    ("boutique", "menswear", "Blue Striped Formal Shirt",
     "Elegant blue striped formal shirt for office and special occasions",
     1899, 10, 1709, 1499, 18, 4.5, 32, "photo-1607345366928-199ea26cfe3e"),
    ("avenue", "menswear", "Classic Black Trousers", "Tailored black formal trousers with perfect fit and comfort",
     2499, 20, 1999, 1799, 15, 4.8, 37, "photo-1473966968600-fa801b869a1a"),
    ("trendy", "menswear", "Navy Blue Slim Fit Pants", "Modern navy blue slim fit formal pants for a stylish look",
     2299, 15, 1954, 1699, 12, 4.6, 29, "photo-1584865288642-42078afe6942"),
    ("boutique", "womenswear", "Pearl Necklace Set", "Elegant pearl necklace and earring set for special occasions",
     3499, 10, 3149, 2899, 8, 4.9, 26, "photo-1599643478518-a784e5dc4c8f"),
    ("avenue", "womenswear", "Designer Silk Scarf", "Luxury silk scarf with beautiful prints for a touch of elegance",
     1999, 5, 1899, 1699, 10, 4.7, 18, "photo-1584917865442-de89df76afd3"),
    ("trendy", "footwear", "Urban White Sneakers", "Trendy white sneakers for casual everyday wear",
     2499, 20, 1999, 1799, 20, 4.6, 52, "photo-1525966222134-fcfa99b8ae77"),
    ("boutique", "footwear", "Sports Performance Sneakers",
     "High-performance sports sneakers with advanced comfort technology",
     3499, 15, 2974, 2699, 15, 4.8, 64, "photo-1542291026-7eec264c27ff"),
    ("avenue", "accessories", "Classic Leather Wallet", "Premium genuine leather wallet with multiple compartments",
     1299, 10, 1169, 999, 25, 4.5, 38, "photo-1627123424574-724758594e93"),
    ("trendy", "accessories", "Stainless Steel Watch", "Elegant stainless steel watch for a sophisticated look",
     4999, 20, 3999, 3599, 8, 4.8, 45, "photo-1542496658-e33a6d0d50f6"),
]

# (store, name, description, type, price, duration, rating, reviews, image)
SERVICES = [
    ("trendy", "Glamour Beauty Parlour", "Specialized in haircuts, facials, and makeup",
     "beauty", 499, 60, 4.8, 112, "photo-1470259078422-826894b933aa"),
    ("boutique", "Radiance Beauty Studio", "Premium beauty services with experienced professionals",
     "beauty", 699, 90, 4.6, 98, "photo-1560066984-138dadb4c035"),
    ("avenue", "Fashion Tailors", "Expert tailoring for all your clothing alterations",
     "tailoring", 299, 45, 4.7, 87, "photo-1597633125097-5a9961e1f03d"),
    ("trendy", "Perfect Fit Tailoring", "Personalized tailoring services for the perfect fit",
     "tailoring", 399, 60, 4.5, 76, "photo-1597633244018-0201d0158951"),
]

SAMPLE_ORDER_PRODUCT = "Embroidered Sundress"
SAMPLE_ORDER_NEGOTIATED_PRICE = 1299
SAMPLE_ORDER_ADDRESS = "123 Main St, City"


def _process(command):
    return current_domain.process(command, asynchronous=False)


def load_sample_data() -> bool:
    """Load the sample catalogue and demo order. Returns False if data already exists."""
    if current_domain.repository_for(Category).list_all():
        logger.info("sample_data_skipped", reason="catalogue_not_empty")
        return False

    categories = {key: _process(CreateCategory(name=name, icon=icon)) for key, name, icon in CATEGORIES}

    stores = {}
    for store in STORES:
        fields = {k: v for k, v in store.items() if k != "key"}
        stores[store["key"]] = _process(RegisterStore(owner_id=DEMO_RETAILER_ID, **fields))

    products = {}
    for (store, category, name, description, original, discount, final, floor, stock, rating, reviews,
         image) in PRODUCTS:
        products[name] = _process(
            AddProduct(
                store_id=stores[store],
                category_id=categories[category],
                name=name,
                description=description,
                original_price=original,
                discount_percentage=discount,
                final_price=final,
                min_acceptable_price=floor,
                stock=stock,
                rating=rating,
                review_count=reviews,
                image_url=_UNSPLASH + image,
            )
        )

    for store, name, description, service_type, price, duration, rating, reviews, image in SERVICES:
        _process(
            AddService(
                store_id=stores[store],
                name=name,
                description=description,
                service_type=service_type,
                price=price,
                duration=duration,
                rating=rating,
                review_count=reviews,
                image_url=_UNSPLASH + image,
            )
        )

    # One negotiated purchase already on its way through packing
    _process(
        AddToCart(
            user_id=DEMO_CUSTOMER_ID,
            product_id=products[SAMPLE_ORDER_PRODUCT],
            negotiated_price=SAMPLE_ORDER_NEGOTIATED_PRICE,
        )
    )
    order_id = _process(
        PlaceOrder(
            user_id=DEMO_CUSTOMER_ID,
            store_id=stores["boutique"],
            delivery_address=SAMPLE_ORDER_ADDRESS,
        )
    )
    _process(UpdateOrderStatus(order_id=order_id, status="packed"))

    logger.info(
        "sample_data_loaded",
        categories=len(categories),
        stores=len(stores),
        products=len(products),
        services=len(SERVICES),
    )
    return True
