from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List

import pandas as pd

from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig

logger = logging.getLogger(__name__)

CATALOG_COLUMNS: List[str] = [
    "name",
    "type",
    "flavour_notes",
    "region",
    "abv",
    "recommended_foods",
    "affiliate_link",
    "description",
    "image_url",
]

# British drinks seed set. Add rows here to expand the catalogue; ids follow
# row order when the CSV is loaded.
SEED_DRINKS: List[dict[str, Any]] = [
    {
        "name": "Timothy Taylor's Landlord",
        "type": "ale",
        "flavour_notes": "Full-bodied with a hoppy, slightly floral aroma and a biscuity malt backbone",
        "region": "Yorkshire",
        "abv": "4.3%",
        "recommended_foods": "Roast beef, Steak pie, Cheese ploughman's",
        "affiliate_link": "https://example.com/buy/timothy-taylors-landlord",
        "description": "A classic Yorkshire pale ale, winner of multiple CAMRA awards. Known for its perfect balance of hop bitterness and malt sweetness.",
    },
    {
        "name": "Fuller's London Pride",
        "type": "ale",
        "flavour_notes": "Marmalade citrus, rich malt with a dry, biscuity finish",
        "region": "London",
        "abv": "4.7%",
        "recommended_foods": "Fish and chips, Bangers and mash, Sunday roast",
        "affiliate_link": "https://example.com/buy/fullers-london-pride",
        "description": "London's iconic amber ale with over 175 years of brewing heritage. A perfectly balanced pint with distinctive marmalade notes.",
    },
    {
        "name": "Aspall Suffolk Cyder",
        "type": "cider",
        "flavour_notes": "Crisp apple with honeyed sweetness and a dry, refreshing finish",
        "region": "East Anglia",
        "abv": "5.5%",
        "recommended_foods": "Pork dishes, Cheese, Light salads",
        "affiliate_link": "https://example.com/buy/aspall-cyder",
        "description": "A premium English cider crafted in Suffolk since 1728. Made from a blend of bittersweet and culinary apples.",
    },
    {
        "name": "Sipsmith London Dry Gin",
        "type": "gin",
        "flavour_notes": "Juniper-forward with bright citrus, floral notes and a peppery warmth",
        "region": "London",
        "abv": "41.6%",
        "recommended_foods": "Seafood, Light poultry, Cucumber dishes",
        "affiliate_link": "https://example.com/buy/sipsmith-gin",
        "description": "Handcrafted in London's first copper pot still for nearly 200 years. A perfectly balanced London Dry Gin.",
    },
    {
        "name": "Glenfiddich 12 Year Old",
        "type": "whisky",
        "flavour_notes": "Fresh pear, subtle oak, butterscotch with a long smooth finish",
        "region": "Speyside",
        "abv": "40%",
        "recommended_foods": "Smoked salmon, Dark chocolate, Aged cheese",
        "affiliate_link": "https://example.com/buy/glenfiddich-12",
        "description": "The world's most awarded single malt Scotch whisky. Matured in American and European oak casks.",
    },
    {
        "name": "Laphroaig 10 Year Old",
        "type": "whisky",
        "flavour_notes": "Intensely peaty, smoky seaweed with hints of iodine and a long sweet finish",
        "region": "Islay",
        "abv": "40%",
        "recommended_foods": "Oysters, Blue cheese, Smoked meats",
        "affiliate_link": "https://example.com/buy/laphroaig-10",
        "description": "A bold, smoky Islay single malt. The most richly flavoured of all Scotch whiskies.",
    },
    {
        "name": "Westons Vintage Cider",
        "type": "cider",
        "flavour_notes": "Rich, oaky with toffee apple notes and a smooth, medium-dry finish",
        "region": "Herefordshire",
        "abv": "8.2%",
        "recommended_foods": "Cheese board, Pork pie, Apple desserts",
        "affiliate_link": "https://example.com/buy/westons-vintage",
        "description": "A premium oak-aged cider from Herefordshire's finest apples. Aged for two years for exceptional depth.",
    },
    {
        "name": "Pusser's British Navy Rum",
        "type": "rum",
        "flavour_notes": "Rich molasses, butterscotch, vanilla with warming spice notes",
        "region": "London",
        "abv": "54.5%",
        "recommended_foods": "Jerk chicken, Spicy curries, Chocolate desserts",
        "affiliate_link": "https://example.com/buy/pussers-rum",
        "description": "The original British Royal Navy rum, blended to the Admiralty's specifications since 1655.",
    },
    {
        "name": "Nyetimber Classic Cuvée",
        "type": "wine",
        "flavour_notes": "Toasted brioche, honey, citrus blossom with fine bubbles",
        "region": "Sussex",
        "abv": "12%",
        "recommended_foods": "Oysters, Canapés, Celebration dishes",
        "affiliate_link": "https://example.com/buy/nyetimber-classic",
        "description": "England's finest sparkling wine, rivalling the best Champagnes. Grown on the chalk downs of Sussex.",
    },
    {
        "name": "Adnams Broadside",
        "type": "ale",
        "flavour_notes": "Rich fruitcake, blackcurrant with a bittersweet malt finish",
        "region": "East Anglia",
        "abv": "6.3%",
        "recommended_foods": "Game pie, Venison, Christmas pudding",
        "affiliate_link": "https://example.com/buy/adnams-broadside",
        "description": "A dark, rich ruby ale from the Suffolk coast. Named after the 1672 Battle of Sole Bay.",
    },
    {
        "name": "Cotswolds Dry Gin",
        "type": "gin",
        "flavour_notes": "Fresh lavender, bay leaf, grapefruit with subtle spice",
        "region": "Cotswolds",
        "abv": "46%",
        "recommended_foods": "Garden salads, Grilled fish, Mediterranean dishes",
        "affiliate_link": "https://example.com/buy/cotswolds-gin",
        "description": "An aromatic gin distilled with nine carefully considered botanicals from the heart of the Cotswolds.",
    },
    {
        "name": "Chapel Down Bacchus",
        "type": "wine",
        "flavour_notes": "Elderflower, gooseberry, crisp green apple with mineral notes",
        "region": "Kent",
        "abv": "12.5%",
        "recommended_foods": "Fresh seafood, Asparagus, Goat's cheese",
        "affiliate_link": "https://example.com/buy/chapel-down-bacchus",
        "description": "England's signature white grape, producing wines with distinctive aromatic character.",
    },
    {
        "name": "Black Sheep Best Bitter",
        "type": "ale",
        "flavour_notes": "Dry and bitter with fruity esters, crisp hoppy character",
        "region": "Yorkshire",
        "abv": "3.8%",
        "recommended_foods": "Yorkshire pudding, Shepherd's pie, Cheese",
        "affiliate_link": "https://example.com/buy/black-sheep-bitter",
        "description": "A traditional Yorkshire bitter brewed in Masham using the Yorkshire Square fermentation system.",
    },
    {
        "name": "Thatchers Gold",
        "type": "cider",
        "flavour_notes": "Golden and smooth with a crisp, refreshing apple taste",
        "region": "Somerset",
        "abv": "4.8%",
        "recommended_foods": "Ploughman's lunch, Pork chops, Light cheese",
        "affiliate_link": "https://example.com/buy/thatchers-gold",
        "description": "A refreshing medium-dry Somerset cider made from a blend of British apples by a family cider maker.",
    },
    {
        "name": "Hendrick's Gin",
        "type": "gin",
        "flavour_notes": "Cucumber, rose petal, citrus with a smooth, rounded finish",
        "region": "Scotland",
        "abv": "41.4%",
        "recommended_foods": "Cucumber sandwiches, Smoked salmon, Light appetizers",
        "affiliate_link": "https://example.com/buy/hendricks-gin",
        "description": "A distinctively delicious gin made with curious, yet perfectly balanced infusions of cucumber and rose.",
    },
    # Non-alcoholic
    {
        "name": "Yorkshire Tea",
        "type": "tea",
        "flavour_notes": "Robust malty black tea, brisk and full with a smooth finish",
        "region": "Yorkshire",
        "abv": "0%",
        "recommended_foods": "Full English breakfast, Bacon sandwiches, Sunday roast",
        "affiliate_link": "https://example.com/buy/yorkshire-tea",
        "description": "A proper brew blended by a family tea merchant in Harrogate since 1886.",
    },
    {
        "name": "Twinings Earl Grey",
        "type": "tea",
        "flavour_notes": "Fragrant bergamot, citrus and a light, floral black tea base",
        "region": "London",
        "abv": "0%",
        "recommended_foods": "Afternoon tea, Scones, Lemon drizzle cake",
        "affiliate_link": "https://example.com/buy/twinings-earl-grey",
        "description": "The classic bergamot-scented blend from London's oldest tea house on the Strand.",
    },
    {
        "name": "Fever-Tree Indian Tonic Water",
        "type": "soft drink",
        "flavour_notes": "Crisp quinine bitterness, bright citrus and clean, lively bubbles",
        "region": "London",
        "abv": "0%",
        "recommended_foods": "Fish and chips, Seafood, Salt and vinegar snacks",
        "affiliate_link": "https://example.com/buy/fever-tree-tonic",
        "description": "A premium tonic water made with natural quinine and botanical oils.",
    },
    {
        "name": "Fentimans Ginger Beer",
        "type": "soft drink",
        "flavour_notes": "Fiery ginger, warming spice and a sweet, botanically brewed finish",
        "region": "Northumberland",
        "abv": "0%",
        "recommended_foods": "Spicy curries, Jerk chicken, Thai dishes",
        "affiliate_link": "https://example.com/buy/fentimans-ginger-beer",
        "description": "Botanically brewed and fermented with ginger root, made by an independent family business since 1905.",
    },
    {
        "name": "Belvoir Elderflower Pressé",
        "type": "soft drink",
        "flavour_notes": "Fragrant elderflower, fresh lemon with delicate sweetness",
        "region": "Leicestershire",
        "abv": "0%",
        "recommended_foods": "Chicken salads, Summer dishes, Light fish",
        "affiliate_link": "https://example.com/buy/belvoir-elderflower",
        "description": "Made with elderflowers hand-picked on the family farm in the Vale of Belvoir.",
    },
    {
        "name": "Luscombe Sicilian Lemonade",
        "type": "soft drink",
        "flavour_notes": "Sharp lemon, zesty and refreshing with a gentle sweetness",
        "region": "Devon",
        "abv": "0%",
        "recommended_foods": "Cheese ploughman's, Picnic food, Grilled halloumi",
        "affiliate_link": "https://example.com/buy/luscombe-lemonade",
        "description": "Pressed from organic Sicilian lemons at a craft drinks maker in the Devon countryside.",
    },
    {
        "name": "Fentimans Curiosity Cola",
        "type": "soft drink",
        "flavour_notes": "Herbal cola, ginger and a caramel sweetness",
        "region": "Northumberland",
        "abv": "0%",
        "recommended_foods": "Burgers, BBQ ribs, Pizza",
        "affiliate_link": "https://example.com/buy/fentimans-cola",
        "description": "A botanically brewed cola with a hint of ginger and a grown-up edge.",
    },
]


def seed_catalog(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> Path:
    """
    Write the seed drinks to the catalogue CSV when it does not exist yet.

    An existing file is left untouched so local edits survive restarts.
    """
    path = config.path
    if path.is_file():
        logger.info("Drink catalogue already present at %s", path)
        return path

    config.data_dir.mkdir(parents=True, exist_ok=True)

    df = pd.DataFrame(SEED_DRINKS).reindex(columns=CATALOG_COLUMNS)
    df.to_csv(path, index=False)

    logger.info("Seeded %d British drinks into %s", len(df), path)
    return path
