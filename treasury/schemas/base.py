from decimal import Decimal
from typing import Annotated, ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Amount as accepted at the API boundary; parsed once into Decimal here.
Money = Annotated[Decimal, Field(gt=0, max_digits=12, decimal_places=2)]


class BaseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class PatchSchema(BaseModel):
    """
    Partial update payload. Omitted keys leave the stored value alone;
    keys named in `required_fields` back NOT NULL columns and may be
    omitted but never sent as null.
    """

    required_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_cleared_required_fields(self):
        cleared = sorted(
            name for name in self.model_fields_set & self.required_fields if getattr(self, name) is None
        )
        if cleared:
            raise ValueError(f"Field(s) cannot be null: {', '.join(cleared)}.")
        return self
