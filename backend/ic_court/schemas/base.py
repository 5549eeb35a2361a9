import datetime
from typing import Annotated, Any, ClassVar, Dict, FrozenSet

from pydantic import AfterValidator, BaseModel, model_validator


def as_utc(value: datetime.datetime) -> datetime.datetime:
    """Normalise to an aware UTC datetime; naive input is read as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value.astimezone(datetime.timezone.utc)


UTCDatetime = Annotated[datetime.datetime, AfterValidator(as_utc)]


class PartialUpdate(BaseModel):
    """
    Update payload where every field except `id` is optional.

    A field left out of the payload is absent from `changes()`; a field sent
    as null is present with value None, which clears it. Fields listed in
    `non_nullable` may be omitted but never sent as null.
    """
    id: int

    non_nullable: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_for_required_columns(self):
        for name in self.non_nullable & self.model_fields_set:
            if getattr(self, name) is None:
                raise ValueError(f"{name} may be omitted but not set to null")
        return self

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True, exclude={"id"})
