"""
Shared schema bases
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


class ReadSchema(BaseModel):
    """Response schema built from ORM objects"""

    model_config = ConfigDict(from_attributes=True)


class UpdateSchema(BaseModel):
    """Partial update schema

    Every field is optional. Omitted keys are left untouched; an explicit
    ``null`` is only accepted for names listed in ``nullable_fields``.
    """

    nullable_fields: ClassVar[tuple[str, ...]] = ()

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value, info: ValidationInfo):
        if value is None and info.field_name not in cls.nullable_fields:
            label = info.field_name.replace("_", " ").capitalize()
            raise ValueError(f"{label} cannot be null")
        return value

    def changes(self) -> dict:
        """Only the fields the client actually sent"""
        return self.model_dump(exclude_unset=True)
