import json
import logging
import os
from typing import List, Optional, Union

from storeqa.ui.data.models import Categories, Product, ProductsData

PRODUCTS_FILE = os.path.join(os.path.dirname(__file__), "products.json")


class TestDataLoader:
    """Read-once access to the static product catalogue."""

    # keep pytest from collecting this class
    __test__ = False

    _products_data: Optional[ProductsData] = None
    _file_path: str = PRODUCTS_FILE

    @classmethod
    def load_products(cls) -> ProductsData:
        if cls._products_data is None:
            logging.debug(f"Loading product catalogue from {cls._file_path}")
            with open(cls._file_path, "r", encoding="utf-8") as f:
                cls._products_data = ProductsData.model_validate(json.load(f))
        return cls._products_data

    @classmethod
    def clear_cache(cls):
        cls._products_data = None

    @classmethod
    def get_phones(cls) -> List[Product]:
        return cls.load_products().phones

    @classmethod
    def get_laptops(cls) -> List[Product]:
        return cls.load_products().laptops

    @classmethod
    def get_monitors(cls) -> List[Product]:
        return cls.load_products().monitors

    @classmethod
    def get_all_products(cls) -> List[Product]:
        data = cls.load_products()
        return [*data.phones, *data.laptops, *data.monitors]

    @classmethod
    def get_products_by_category(cls, category: Union[Categories, str]) -> List[Product]:
        data = cls.load_products()
        by_category = {
            Categories.PHONES.value: data.phones,
            Categories.LAPTOPS.value: data.laptops,
            Categories.MONITORS.value: data.monitors,
        }
        key = category.value if isinstance(category, Categories) else category
        return by_category.get(key, [])

    @classmethod
    def get_product(cls, name: str) -> Product:
        """Look a product up by name, ignoring case and surrounding whitespace."""
        wanted = name.strip().lower()
        for product in cls.get_all_products():
            if product.name.lower() == wanted:
                return product
        raise KeyError(f"Unknown product: {name}")
