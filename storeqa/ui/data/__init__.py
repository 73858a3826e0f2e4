from .loader import TestDataLoader
from .models import CUSTOMERS, Categories, CustomerData, MenuOptions, Product, ProductsData, UserCredentials

__all__ = [
    "TestDataLoader",
    "CUSTOMERS",
    "Categories",
    "CustomerData",
    "MenuOptions",
    "Product",
    "ProductsData",
    "UserCredentials",
]
