"""
Static product catalogs.

Two interchangeable catalogs ship with the service:

    premo  - THC dispensary menu (flower, vapes, edibles, tinctures)
    hemp   - Three-product hemp/CBD wellness catalog used by the widget demo

The active catalog is chosen with ``SAGE_CATALOG``. Both are tuples of
frozen dataclasses so nothing can mutate them between requests.
"""

from __future__ import annotations

from sage.core.models import Product


PREMO_PRODUCTS: tuple[Product, ...] = (
    Product(
        id=1,
        name="Purple Punch (Indica)",
        description="22.5% THC. Sweet grape and blueberry notes. Perfect for deep sleep and relaxation. Lab tested.",
        price="$55/eighth",
        category="Flower",
        thc_percentage=22.5,
        strain_type="indica",
        effects=("sleep", "relaxation", "pain relief", "appetite"),
        terpenes=(("myrcene", 0.9), ("caryophyllene", 0.4), ("limonene", 0.2)),
    ),
    Product(
        id=2,
        name="Sour Diesel (Sativa)",
        description="24.8% THC. Energizing diesel aroma. Great for daytime focus and creativity.",
        price="$60/eighth",
        category="Flower",
        thc_percentage=24.8,
        strain_type="sativa",
        effects=("energy", "focus", "creativity", "uplifted"),
        terpenes=(("limonene", 0.7), ("caryophyllene", 0.5), ("pinene", 0.3)),
    ),
    Product(
        id=3,
        name="Watermelon THC Gummies",
        description="10mg THC per piece. 10 gummies per pack. Perfect for precise dosing.",
        price="$25",
        category="Edibles",
        thc_mg=100,
        effects=("relaxation", "euphoria", "happy"),
    ),
    Product(
        id=4,
        name="Blue Dream Cartridge",
        description="85.3% THC distillate. Balanced hybrid for smooth, uplifting effects.",
        price="$45",
        category="Vapes",
        thc_percentage=85.3,
        strain_type="hybrid",
        effects=("balanced", "creative", "relaxed"),
        terpenes=(("myrcene", 0.6), ("pinene", 0.4)),
    ),
    Product(
        id=5,
        name="Wedding Cake Live Resin",
        description="78.5% THC concentrate. Premium indica extract for maximum relief.",
        price="$70",
        category="Concentrates",
        thc_percentage=78.5,
        strain_type="indica",
        effects=("relaxation", "euphoria", "sleep"),
        terpenes=(("limonene", 1.1), ("caryophyllene", 0.8), ("linalool", 0.3)),
    ),
    Product(
        id=6,
        name="GSC Pre-Roll Pack",
        description="21.2% THC. Pack of 5 mini pre-rolls, 0.5g each.",
        price="$35",
        category="Pre-rolls",
        thc_percentage=21.2,
        strain_type="hybrid",
        effects=("happy", "relaxed", "creative"),
        terpenes=(("caryophyllene", 0.6), ("limonene", 0.4)),
    ),
    Product(
        id=7,
        name="1:1 THC:CBD Tincture",
        description="Balanced 10mg THC / 10mg CBD per ml. Gentle relief.",
        price="$65",
        category="Tinctures",
        thc_mg=300,
        cbd_mg=300,
        effects=("balanced", "calm", "pain relief"),
    ),
    Product(
        id=8,
        name="Nighttime THC Gummies",
        description="10mg THC + 5mg CBN per gummy. Enhanced sleep formula.",
        price="$30",
        category="Edibles",
        thc_mg=100,
        cbn_mg=50,
        effects=("sleep", "relaxation", "sedating"),
    ),
)


HEMP_PRODUCTS: tuple[Product, ...] = (
    Product(
        id=1,
        name="Night Time CBD Gummies",
        description="5mg CBD + 2mg CBN per gummy. Infused with lavender for peaceful sleep.",
        price="$28",
        category="Sleep",
        cbd_mg=150,
        cbn_mg=60,
        effects=("sleep", "relaxation"),
        terpenes=(("linalool", 0.4), ("myrcene", 0.3)),
    ),
    Product(
        id=2,
        name="Calm Tincture",
        description="Full spectrum CBD oil with chamomile. Start with 0.5ml under tongue.",
        price="$45",
        category="Tinctures",
        cbd_mg=1000,
        cbg_mg=100,
        effects=("calm", "stress relief", "focus"),
        terpenes=(("limonene", 0.5), ("linalool", 0.2)),
    ),
    Product(
        id=3,
        name="Dream Tea Blend",
        description="Hemp flower tea with passionflower and lemon balm. Caffeine-free.",
        price="$18",
        category="Tea",
        cbd_mg=20,
        effects=("relaxation", "calm"),
        terpenes=(("myrcene", 0.2),),
    ),
)


CATALOGS: dict[str, tuple[Product, ...]] = {
    "premo": PREMO_PRODUCTS,
    "hemp": HEMP_PRODUCTS,
}


def get_catalog(name: str) -> tuple[Product, ...]:
    """Look up a catalog by name.

    Raises:
        ValueError: If no catalog is registered under ``name``.
    """
    try:
        return CATALOGS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown catalog: {name!r} (expected one of {sorted(CATALOGS)})"
        ) from None
