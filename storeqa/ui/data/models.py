from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Categories(str, Enum):
    PHONES = "Phones"
    LAPTOPS = "Laptops"
    MONITORS = "Monitors"


class MenuOptions(str, Enum):
    HOME = "Home"
    CONTACT = "Contact"
    ABOUT_US = "About us"
    CART = "Cart"
    SIGN_UP = "Sign up"
    LOG_IN = "Log in"
    LOG_OUT = "Log out"


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    price: int
    category: Categories
    description: str


class ProductsData(BaseModel):
    phones: List[Product] = Field(default_factory=list)
    laptops: List[Product] = Field(default_factory=list)
    monitors: List[Product] = Field(default_factory=list)


class CustomerData(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    country: str
    city: str
    card: str
    month: str
    year: str


class UserCredentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str
    password: str


CUSTOMERS: List[CustomerData] = [
    CustomerData(
        name="John Doe",
        country="USA",
        city="New York",
        card="1234567890123456",
        month="12",
        year="2025",
    ),
]
