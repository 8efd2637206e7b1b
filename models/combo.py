from collections import Counter
from functools import cached_property

from pydantic import BaseModel, ConfigDict, Field, computed_field


class ComboDefinitionDTO(BaseModel):
    """
    Static combo promotion from the catalog.

    required_items lists item IDs with repeats, so [3, 3, 5] means
    "two of item 3 and one of item 5" for a flat discount.
    """
    model_config = ConfigDict(frozen=True)

    combo_id: str
    name: str
    required_items: tuple[int, ...] = Field(min_length=1)
    discount: float = Field(ge=0)

    @cached_property
    def required_quantities(self) -> dict[int, int]:
        """Multiplicity of each item ID within required_items."""
        return dict(Counter(self.required_items))


class AppliedComboDTO(BaseModel):
    """How many times one combo was applied in the winning solution."""
    combo_id: str
    name: str
    discount: float
    applicable_count: int = Field(ge=1)

    @computed_field
    @property
    def line_discount(self) -> float:
        return self.discount * self.applicable_count


class ComboResolutionDTO(BaseModel):
    """Best combo assignment for a cart."""
    applied_combos: list[AppliedComboDTO] = []
    remaining_items: dict[int, int] = {}
    total_discount: float = 0.0

    def get_applied(self, combo_id: str) -> AppliedComboDTO | None:
        for applied in self.applied_combos:
            if applied.combo_id == combo_id:
                return applied
        return None
