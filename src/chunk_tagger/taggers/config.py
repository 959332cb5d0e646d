# src/chunk_tagger/taggers/config.py

from pydantic import BaseModel, field_validator


class TaggerConfig(BaseModel):
    """Declarative tagger definition, as produced by an external rule loader.

    `type` names an entry in a `TaggerRegistry`; `args` is handed to the
    registered constructor unchanged.
    """

    type: str
    name: str
    args: list[str]

    class Config:
        extra = "forbid"
        frozen = True

    @field_validator("args", mode="before")
    @classmethod
    def _coerce_args(cls, value: object) -> object:
        # numeric keywords from rule loaders; anything else is left to validation
        if isinstance(value, (list, tuple)):
            return [
                str(item)
                if isinstance(item, (int, float)) and not isinstance(item, bool)
                else item
                for item in value
            ]
        return value
