from pydantic import BaseModel, ConfigDict, Field


class Item(BaseModel):
    id: int = Field(
        ...,
        description="Position of the item in the catalogue, starting at 1"
    )
    name: str = Field(
        ...,
        description="Display name"
    )

    model_config = ConfigDict(from_attributes=True)
