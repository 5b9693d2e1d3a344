"""Product Catalog

Read-only product lookup used by the draft editor.
"""

from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from invoicing.domain.aggregate import Product

DEFAULT_PRODUCTS = [
    Product(id=1, name="Laptop Dell XPS 13", description="13-inch, 16GB RAM, 512GB SSD", price=Decimal("1299.99")),
    Product(id=2, name="MacBook Pro 14", description="14-inch Apple laptop, M3 chip, 16GB RAM", price=Decimal("1999.99")),
    Product(id=3, name="Gaming PC", description="Intel i7, RTX 4070, 32GB RAM, 1TB SSD", price=Decimal("1599.99")),
    Product(id=4, name="Wireless Mouse", description="Ergonomic wireless mouse with RGB lighting", price=Decimal("29.99")),
    Product(id=5, name="Mechanical Keyboard", description="RGB mechanical keyboard with blue switches", price=Decimal("89.99")),
]


class ProductCatalog:
    def __init__(self, products: Optional[Iterable[Product]] = None):
        if products is None:
            products = DEFAULT_PRODUCTS
        self._products: Dict[int, Product] = {product.id: product for product in products}

    def all(self) -> List[Product]:
        return list(self._products.values())

    def get(self, product_id: int) -> Optional[Product]:
        return self._products.get(product_id)
