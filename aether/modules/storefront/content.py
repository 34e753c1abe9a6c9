from __future__ import annotations

from aether.modules.storefront.router import InfoSlug

INFO_PAGES = {
    InfoSlug.CONTACT: {
        "title": "Contact Us",
        "group": "Customer Service",
        "paragraphs": [
            "Our client advisors are available Monday to Saturday, 9am to 7pm.",
            "Write to care@aether.example and we will reply within one business day.",
        ],
    },
    InfoSlug.SHIPPING_RETURNS: {
        "title": "Shipping & Returns",
        "group": "Customer Service",
        "paragraphs": [
            "Complimentary express shipping on every order.",
            "Unworn pieces may be returned within 30 days of delivery in their original packaging.",
        ],
    },
    InfoSlug.FAQ: {
        "title": "FAQ",
        "group": "Customer Service",
        "paragraphs": [
            "Your bag is kept for the current browsing session only.",
            "Prices are shown before taxes and duties.",
        ],
    },
    InfoSlug.SIZE_GUIDE: {
        "title": "Size Guide",
        "group": "Customer Service",
        "paragraphs": [
            "AETHER garments follow European sizing; XS corresponds to a 34 and each step adds one size.",
            "Accessories marked One Size fit all.",
        ],
    },
    InfoSlug.OUR_STORY: {
        "title": "Our Story",
        "group": "About Aether",
        "paragraphs": [
            "AETHER brings together independent ateliers around a single idea: pieces made to be kept.",
            "Each collection is a study in silhouette and texture, produced in small runs.",
        ],
    },
}
