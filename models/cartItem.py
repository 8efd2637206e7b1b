from pydantic import BaseModel, Field


class CartItemDTO(BaseModel):
    """
    One line of a shopping cart.

    item_id may be missing: such lines are still price-counted but never
    take part in combo matching or the gift promotion.
    """
    item_id: int | None = None
    name: str = ""
    unit_price: float = Field(ge=0)
    quantity: int = Field(gt=0)

    @property
    def line_total(self) -> float:
        return self.unit_price * self.quantity
