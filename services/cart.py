import logging

from pydantic import ValidationError

from exceptions.cart import InvalidCartItemException
from models.cartItem import CartItemDTO


class CartService:

    @staticmethod
    def parse_cart_items(raw_items: list[dict] | None) -> list[CartItemDTO]:
        """
        Convert raw cart payload lines into CartItemDTOs.

        Accepts both the storefront field names (no, price) and the DTO
        field names (item_id, unit_price). A missing item id is allowed:
        the line is priced but never matched against combos.

        Example:
            >>> CartService.parse_cart_items([{"no": 1, "name": "Tea", "price": 120, "quantity": 2}])
            [CartItemDTO(item_id=1, name='Tea', unit_price=120.0, quantity=2)]

        Raises:
            InvalidCartItemException: If a line is not a mapping or fails validation
        """
        if not raw_items:
            return []

        cart_items = []
        for index, raw in enumerate(raw_items):
            if not isinstance(raw, dict):
                raise InvalidCartItemException(index, f"expected an object, got {type(raw).__name__}")

            item_id = raw.get("item_id", raw.get("no"))
            try:
                cart_items.append(CartItemDTO(
                    item_id=item_id if item_id else None,
                    name=raw.get("name") or "",
                    unit_price=raw.get("unit_price", raw.get("price")),
                    quantity=raw.get("quantity")
                ))
            except ValidationError as e:
                errors = "; ".join(
                    f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
                )
                raise InvalidCartItemException(index, errors) from e

        logging.debug(f"Parsed {len(cart_items)} cart items")
        return cart_items
