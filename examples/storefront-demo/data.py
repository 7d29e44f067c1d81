"""Seed data for the storefront demo."""

CATEGORIES = ["Steam Keys", "Streaming", "Software"]

PRODUCTS = [
    {
        "title": "Elden Ring Key",
        "price": "2999",
        "category": "Steam Keys",
        "image_urls": "https://picsum.photos/seed/elden/400/300",
        "features": "Instant Delivery\nGlobal Key",
        "system_requirements": "OS: Windows 10\nProcessor: Intel Core i5\nMemory: 8GB RAM",
        "description": "Action RPG from FromSoftware.",
    },
    {
        "title": "Netflix Premium, 1 month",
        "price": "899.5",
        "category": "Streaming",
        "image_urls": "",
        "features": "Instant Delivery\nSecure Payment\nGlobal Activation",
        "system_requirements": "",
        "description": "",
    },
    {
        "title": "Office 2021 Professional",
        "price": "4990",
        "category": "Software",
        "image_urls": "https://picsum.photos/seed/office/400/300\n\n",
        "features": "Lifetime license\n  \nEmail delivery",
        "system_requirements": "",
        "description": "Word, Excel, PowerPoint and Outlook.",
    },
]

REVIEWS = [
    ("gamer42", 5, "Key worked instantly."),
    ("", 3, "Took a while to arrive."),
    ("mira", 4, "Good price."),
]
