"""Product listing example - Books catalogue page.

This example demonstrates:
- Parsing an HTML page with ElementFinder
- Splitting the page into per-product sub-documents
- XPath and CSS expressions side by side
- Regex post-processing of extracted strings

Usage:
    python -m examples.product_listing.run
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from element_finder import CssExpression, ElementFinder
from element_finder.monitoring.logger import get_logger, setup_logging

logger = get_logger(__name__)

CATALOGUE_PAGE = """
<html>
<head><title>All products | Books to Scrape</title></head>
<body>
  <ol class="row">
    <li><article class="product_pod">
      <p class="star-rating Three"></p>
      <h3><a href="a-light-in-the-attic_1000/index.html" title="A Light in the Attic">A Light in the ...</a></h3>
      <div class="product_price">
        <p class="price_color">£51.77</p>
        <p class="instock availability">In stock</p>
      </div>
    </article></li>
    <li><article class="product_pod">
      <p class="star-rating One"></p>
      <h3><a href="tipping-the-velvet_999/index.html" title="Tipping the Velvet">Tipping the Velvet</a></h3>
      <div class="product_price">
        <p class="price_color">£53.74</p>
        <p class="instock availability">In stock</p>
      </div>
    </article></li>
    <li><article class="product_pod">
      <p class="star-rating Five"></p>
      <h3><a href="soumission_998/index.html" title="Soumission">Soumission</a></h3>
      <div class="product_price">
        <p class="price_color">£50.10</p>
      </div>
    </article></li>
  </ol>
  <table class="stats">
    <tr><th>Category</th><td>Poetry</td></tr>
    <tr><th>Results</th><td>1000</td></tr>
  </table>
</body>
</html>
"""

RATING_MAP = {"one": 1, "two": 2, "three": 3, "four": 4, "five": 5}


def extract_rating(class_attr: str | None) -> int:
    """Extract star rating from CSS class like "star-rating Three"."""
    if not class_attr:
        return 0

    for word in class_attr.lower().split():
        if word in RATING_MAP:
            return RATING_MAP[word]
    return 0


def extract_products(page: ElementFinder) -> list[dict]:
    """Extract one record per product article."""
    products = []

    for product in page.object("//article[@class='product_pod']", outer=True):
        prices = product.value("//p[@class='price_color']").match(r"([0-9]+\.[0-9]{2})")
        products.append(
            {
                "title": product.value("//h3/a/@title").get_first(),
                "link": product.value("//h3/a/@href").get_first(),
                "price": float(prices.get_first() or 0),
                "rating": extract_rating(product.value("//p[contains(@class, 'star-rating')]/@class").get_first()),
                "available": len(product.query("//p[contains(@class, 'availability')]")) > 0,
            }
        )

    return products


def run_example() -> None:
    """Run the product listing example."""
    setup_logging()

    logger.info("=" * 60)
    logger.info("Starting Product Listing Example")
    logger.info("=" * 60)

    page = ElementFinder(CATALOGUE_PAGE)
    logger.info(f"Page title: {page.value('//title').get_first()}")

    products = extract_products(page)
    for item in products:
        logger.info(
            f"{item['title']} | £{item['price']:.2f} | rating={item['rating']} | "
            f"available={item['available']}"
        )

    stats = page.key_value("//table[@class='stats']//th", "//table[@class='stats']//td")
    logger.info(f"Stats: {stats}")

    # Same page queried with CSS selectors
    css_page = ElementFinder(CATALOGUE_PAGE, translator=CssExpression())
    links = css_page.value("article.product_pod h3 a::attr(href)")
    slugs = links.replace(r"_[0-9]+/index\.html$", "").unique()
    logger.info(f"Slugs: {', '.join(slugs)}")

    logger.info("=" * 60)
    logger.info(f"Extracted {len(products)} products")
    logger.info("=" * 60)


if __name__ == "__main__":
    run_example()
