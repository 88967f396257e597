"""A small shop: products, a name index, an inventory, carts and users."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class Product:
    """An item for sale; products compare and hash by identity."""

    id: int
    name: str
    type: str
    price: int
    amount: int

    @property
    def is_available(self) -> bool:
        return self.amount > 0


@dataclass
class TrieNode:
    """One node of a :class:`Trie`."""

    children: dict[str, TrieNode] = field(default_factory=dict)
    is_end: bool = False


class Trie:
    """A prefix tree of whole words."""

    def __init__(self) -> None:
        self.root = TrieNode()

    def add_word(self, word: str) -> None:
        node = self.root
        for char in word:
            node = node.children.setdefault(char, TrieNode())
        node.is_end = True

    def search_word(self, word: str) -> bool:
        """Whether ``word`` was added as a whole word."""
        node: TrieNode | None = self.root
        for char in word:
            node = node.children.get(char)
            if node is None:
                return False
        return node.is_end


class Inventory:
    """Products on offer, with their names indexed for search."""

    def __init__(self) -> None:
        self._products: dict[Product, None] = {}
        self.trie = Trie()

    def __contains__(self, product: object) -> bool:
        return product in self._products

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def add_product(self, product: Product) -> None:
        self._products[product] = None
        self.trie.add_word(product.name)

    def remove_product(self, product: Product) -> None:
        """Take ``product`` off the inventory; its name stays searchable."""
        self._products.pop(product, None)

    def display(self) -> list[str]:
        """Print one line per product and return the lines."""
        lines = [f"{product.name}( {product.price})" for product in self._products]
        for line in lines:
            print(line)
        return lines

    def search_product(self, word: str) -> bool:
        return self.trie.search_word(word)


class Admin:
    """Manages the products of an inventory."""

    def __init__(self, inventory: Inventory) -> None:
        self.inventory = inventory

    def add_product(self, product: Product) -> None:
        self.inventory.add_product(product)

    def remove_product(self, product: Product) -> None:
        self.inventory.remove_product(product)


class Cart:
    """Quantities of products chosen by a user."""

    def __init__(self) -> None:
        self.items: dict[Product, int] = {}

    def add_item(self, product: Product) -> None:
        self.items[product] = self.items.get(product, 0) + 1

    def remove_item(self, product: Product) -> None:
        """Lower the quantity by one, keeping the entry even at zero."""
        self.items[product] = self.items.get(product, 0) - 1

    def increase_counter(self, product: Product) -> None:
        self.items[product] = self.items.get(product, 0) + 1

    def decrease_counter(self, product: Product) -> None:
        """Lower the quantity by one, dropping the entry when it reaches zero."""
        count = self.items.get(product, 0) - 1
        if count == 0:
            self.items.pop(product, None)
        else:
            self.items[product] = count

    @property
    def total(self) -> int:
        return sum(product.price * count for product, count in self.items.items())

    def clear(self) -> None:
        self.items.clear()


class User:
    """A shopper with a cart of their own."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        self.cart = Cart()

    def add_to_cart(self, product: Product) -> None:
        self.cart.add_item(product)

    def remove_from_cart(self, product: Product) -> None:
        self.cart.remove_item(product)

    def increase_product_number(self, product: Product) -> None:
        self.cart.increase_counter(product)

    def decrease_product_number(self, product: Product) -> None:
        self.cart.decrease_counter(product)

    def checkout(self) -> int:
        """Announce and return the amount due, then empty the cart."""
        amount = self.cart.total
        print(f"Pay Total Amount {amount}")
        self.cart.clear()
        return amount


def main(argv: list[str] | None = None) -> int:
    """Stock a shop, check out a cart and search for products."""
    argparse.ArgumentParser(description="Product catalog demonstration.").parse_args(argv)
    inventory = Inventory()
    admin = Admin(inventory)
    phone = Product(1, "iphone", "Electronics", 100000, 10)
    shirt = Product(2, "tshirt", "Clothing", 1500, 20)
    notebook = Product(3, "notebook", "Stationery", 100, 50)
    charger = Product(4, "charger", "Electronics", 1200, 15)
    for product in (phone, shirt, notebook, charger):
        admin.add_product(product)

    print("\nInventory:")
    inventory.display()

    user = User(101)
    for product in (phone, shirt, shirt, charger):
        user.add_to_cart(product)

    print("\n--- Checkout ---")
    user.checkout()
    inventory.display()

    print("\n--- Product Search ---")
    for word in ("tshirt", "shoes"):
        found = "Found" if inventory.search_product(word) else "Not Found"
        print(f"Searching for '{word}': {found}")
    return 0