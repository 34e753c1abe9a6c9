"""The AETHER house catalog.

Used by the static catalog variant and by `flask seed` to populate the
products table of the database-backed variant.
"""

from __future__ import annotations

from aether.modules.catalog.product import Product

PLACEHOLDER = "https://placehold.co/800x1000/{bg}/333?text={text}"

CATALOG_ROWS = [
    {
        "id": 1,
        "name": "Étoile Silk Blouse",
        "designer": "Atelier Garance",
        "price": 850,
        "category": "Tops",
        "image": PLACEHOLDER.format(bg="f0f0f0", text="Étoile+Silk+Blouse"),
        "description": "A timeless silk blouse with a fluid drape and mother-of-pearl buttons. The epitome of Parisian chic.",
        "sizes": ["XS", "S", "M", "L"],
        "colors": ["Ivory", "Black"],
    },
    {
        "id": 2,
        "name": "Ventura Tailored Trousers",
        "designer": "Bastion",
        "price": 1200,
        "category": "Bottoms",
        "image": PLACEHOLDER.format(bg="e9e9e9", text="Ventura+Trousers"),
        "description": "Expertly tailored from Italian wool, these trousers feature a flattering high-waist and wide-leg silhouette.",
        "sizes": ["S", "M", "L", "XL"],
        "colors": ["Charcoal", "Navy"],
    },
    {
        "id": 3,
        "name": "Riviera Linen Dress",
        "designer": "Solstice",
        "price": 1550,
        "category": "Dresses",
        "image": PLACEHOLDER.format(bg="f5f5f5", text="Riviera+Linen+Dress"),
        "description": "An effortless midi dress crafted from breathable organic linen, perfect for sun-drenched days.",
        "sizes": ["XS", "S", "M"],
        "colors": ["Sand", "Terracotta"],
    },
    {
        "id": 4,
        "name": "Apex Cashmere Sweater",
        "designer": "Aura",
        "price": 1800,
        "category": "Knitwear",
        "image": PLACEHOLDER.format(bg="e0e0e0", text="Apex+Cashmere"),
        "description": "A sumptuously soft oversized cashmere sweater, sourced from sustainable Mongolian farms.",
        "sizes": ["S", "M", "L"],
        "colors": ["Heather Grey", "Oatmeal"],
    },
    {
        "id": 5,
        "name": "Orion Trench Coat",
        "designer": "Bastion",
        "price": 2950,
        "category": "Outerwear",
        "image": PLACEHOLDER.format(bg="dcdcdc", text="Orion+Trench"),
        "description": "The definitive trench coat, reimagined with modern proportions and water-resistant gabardine.",
        "sizes": ["S", "M", "L"],
        "colors": ["Beige", "Olive"],
    },
    {
        "id": 6,
        "name": "Luna Slip Skirt",
        "designer": "Atelier Garance",
        "price": 750,
        "category": "Bottoms",
        "image": PLACEHOLDER.format(bg="fafafa", text="Luna+Slip+Skirt"),
        "description": "A bias-cut silk satin skirt that moves beautifully with every step. A versatile wardrobe essential.",
        "sizes": ["XS", "S", "M", "L"],
        "colors": ["Champagne", "Espresso"],
    },
    {
        "id": 7,
        "name": "Helios Sunglasses",
        "designer": "Solstice",
        "price": 450,
        "category": "Accessories",
        "image": PLACEHOLDER.format(bg="f8f8f8", text="Helios+Sunglasses"),
        "description": "Handcrafted in Italy, these oversized sunglasses feature a bold acetate frame and UV-protective lenses.",
        "sizes": ["One Size"],
        "colors": ["Tortoise", "Black"],
    },
    {
        "id": 8,
        "name": "Cresta Leather Belt",
        "designer": "Bastion",
        "price": 350,
        "category": "Accessories",
        "image": PLACEHOLDER.format(bg="e5e5e5", text="Cresta+Belt"),
        "description": "A minimalist leather belt with a sculptural gold-tone buckle. Made from vegetable-tanned leather.",
        "sizes": ["S", "M", "L"],
        "colors": ["Black", "Cognac"],
    },
]


def house_catalog() -> list[Product]:
    return [Product.from_dict(row) for row in CATALOG_ROWS]
