"""Catalogue items: a plain product and its clothing, electronics and furniture kinds."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Product:
    """An item for sale with a name, unit price, category and free-text details."""

    name: str = ""
    price: float = 0.0
    category: str = ""
    details: str = ""

    def describe(self) -> str:
        """Return the text shown on the product information panel."""
        return self.details

    def __str__(self) -> str:
        return (
            f"Name: {self.name}\n"
            f"Price: {self.price:g}\n"
            f"Category: {self.category}\n"
            f"Details: {self.details}\n"
        )


@dataclass
class Clothes(Product):
    """A garment, described by size, material, kind and brand."""

    category: str = "Clothes"
    size: str = ""
    material: str = ""
    kind: str = ""
    brand: str = ""

    def describe(self) -> str:
        return (
            f"{self.details}"
            f"\nSize : {self.size}"
            f"\nMaterial : {self.material}"
            f"\nType : {self.kind}"
            f"\nBrand : {self.brand}"
        )


@dataclass
class Electronics(Product):
    """An electronic device, described by maker, kind and specifications."""

    category: str = "Electronics"
    company: str = ""
    kind: str = ""
    specifications: str = ""

    def describe(self) -> str:
        return (
            f"{self.details}"
            f"\nCompany : {self.company}"
            f"\nType : {self.kind}"
            f"\nSpecifications : {self.specifications}"
        )


@dataclass
class Furniture(Product):
    """A piece of furniture, described by wood, kind and specifications."""

    category: str = "Furniture"
    wood_type: str = ""
    kind: str = ""
    specifications: str = ""

    def describe(self) -> str:
        return (
            f"{self.details}"
            f"\nWoodType : {self.wood_type}"
            f"\nType : {self.kind}"
            f"\nSpecifications : {self.specifications}"
        )