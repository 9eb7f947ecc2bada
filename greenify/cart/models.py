from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    price: float
    category: str
    image: str = ""


@dataclass(frozen=True)
class LineItem:
    product: Product  # snapshot taken when the product was added
    quantity: int
