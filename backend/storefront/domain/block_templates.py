# storefront/domain/block_templates.py
import copy
import uuid
from typing import Any, Dict, List, Optional
from storefront.domain.exceptions import TemplateNotFound

TEMPLATE_CATEGORIES = ("hero", "content", "ecommerce", "social", "marketing")

BLOCK_TEMPLATES: List[Dict[str, Any]] = [
    {
        "id": "hero-with-features",
        "name": "Hero + Features",
        "description": "Full-width hero section followed by a features grid",
        "category": "hero",
        "blocks": [
            {
                "type": "hero",
                "content": {
                    "slides": [{
                        "title": "Welcome to Our Store",
                        "subtitle": "Discover amazing products crafted with care",
                        "button1Text": "Shop Now",
                        "button1Link": "/products",
                        "image": "https://images.unsplash.com/photo-1441986300917-64674bd600d8?w=1600",
                    }],
                    "autoPlay": True,
                },
            },
            {
                "type": "features",
                "content": {
                    "title": "Why Choose Us",
                    "subtitle": "We stand out from the crowd",
                    "items": [
                        {"icon": "Truck", "title": "Free Shipping", "description": "On orders over $50"},
                        {"icon": "Shield", "title": "Secure Payment", "description": "100% protected transactions"},
                        {"icon": "Check", "title": "Easy Returns", "description": "30-day return policy"},
                    ],
                },
            },
        ],
    },
    {
        "id": "product-showcase",
        "name": "Product Showcase",
        "description": "Featured products with a call-to-action banner",
        "category": "ecommerce",
        "blocks": [
            {
                "type": "product-grid",
                "content": {
                    "title": "Featured Products",
                    "subtitle": "Hand-picked just for you",
                    "featuredOnly": True,
                    "limit": 4,
                },
            },
            {
                "type": "cta",
                "content": {
                    "title": "Ready to Shop?",
                    "description": "Explore our full collection and find your perfect item",
                    "buttonText": "View All Products",
                    "buttonLink": "/products",
                    "variant": "gradient",
                },
            },
        ],
    },
    {
        "id": "testimonials-section",
        "name": "Social Proof",
        "description": "Customer testimonials with stats counter",
        "category": "social",
        "blocks": [
            {
                "type": "stats",
                "content": {
                    "title": "Trusted by Thousands",
                    "items": [
                        {"value": 10000, "suffix": "+", "label": "Happy Customers"},
                        {"value": 500, "suffix": "+", "label": "Products Sold"},
                        {"value": 99, "suffix": "%", "label": "Satisfaction Rate"},
                        {"value": 24, "suffix": "/7", "label": "Support"},
                    ],
                    "variant": "cards",
                    "animateNumbers": True,
                },
            },
            {
                "type": "testimonials",
                "content": {
                    "title": "What Our Customers Say",
                    "items": [
                        {"name": "Sarah J.", "role": "Verified Buyer", "quote": "Amazing quality and fast shipping! Highly recommend."},
                        {"name": "Mike R.", "role": "Regular Customer", "quote": "Best online shopping experience I've had."},
                        {"name": "Emily T.", "role": "First-time Buyer", "quote": "The product exceeded my expectations. Will buy again!"},
                    ],
                },
            },
        ],
    },
    {
        "id": "newsletter-cta",
        "name": "Newsletter Signup",
        "description": "Newsletter form with countdown timer for urgency",
        "category": "marketing",
        "blocks": [
            {
                # targetDate left out so each insert counts down a fresh week
                "type": "countdown",
                "content": {
                    "title": "Limited Time Offer Ends In",
                    "variant": "default",
                    "showDays": True,
                    "showHours": True,
                    "showMinutes": True,
                    "showSeconds": True,
                },
            },
            {
                "type": "newsletter",
                "content": {
                    "title": "Subscribe & Save 20%",
                    "description": "Join our newsletter and get exclusive discounts",
                    "buttonText": "Subscribe Now",
                    "placeholder": "Enter your email",
                },
            },
        ],
    },
    {
        "id": "about-section",
        "name": "About Us",
        "description": "Text content with logo carousel of partners",
        "category": "content",
        "blocks": [
            {
                "type": "text",
                "content": {
                    "text": (
                        '<h2 style="text-align: center;">About Our Brand</h2>'
                        '<p style="text-align: center;">We believe in quality, sustainability, and making a '
                        "difference. Every product is crafted with care, using ethically sourced materials.</p>"
                    ),
                },
            },
            {
                "type": "logo-carousel",
                "content": {
                    "title": "As Featured In",
                    "speed": "normal",
                    "grayscale": True,
                    "logos": [
                        {"url": f"https://placehold.co/200x80/f8f8f8/666?text=Brand+{n}", "alt": f"Brand {n}"}
                        for n in range(1, 5)
                    ],
                },
            },
        ],
    },
    {
        "id": "contact-section",
        "name": "Contact & Location",
        "description": "Map with FAQ accordion",
        "category": "content",
        "blocks": [
            {
                "type": "map",
                "content": {
                    "title": "Visit Our Store",
                    "address": "123 Main Street, New York, NY 10001",
                    "showAddressCard": True,
                    "buttonText": "Get Directions",
                },
            },
            {
                "type": "faq",
                "content": {
                    "title": "Frequently Asked Questions",
                    "subtitle": "Got questions? We have answers",
                    "items": [
                        {"question": "What are your store hours?", "answer": "We are open Monday-Saturday, 9am-8pm."},
                        {"question": "Do you offer international shipping?", "answer": "Yes! We ship to over 50 countries worldwide."},
                        {"question": "What is your return policy?", "answer": "We offer hassle-free 30-day returns on all items."},
                    ],
                },
            },
        ],
    },
]


def list_templates(category: Optional[str] = None) -> List[Dict[str, Any]]:
    """Copies of the catalog entries, optionally filtered by category."""
    return [
        copy.deepcopy(t)
        for t in BLOCK_TEMPLATES
        if category is None or t["category"] == category
    ]


def get_template(template_id: str) -> Dict[str, Any]:
    for template in BLOCK_TEMPLATES:
        if template["id"] == template_id:
            return copy.deepcopy(template)
    raise TemplateNotFound(template_id)


def instantiate_template(template_id: str) -> List[Dict[str, Any]]:
    """Fresh blocks for insertion: new ids, content copied."""
    template = get_template(template_id)
    return [
        {
            "id": str(uuid.uuid4()),
            "type": block["type"],
            "content": copy.deepcopy(block["content"]),
        }
        for block in template["blocks"]
    ]
