from pydantic import BaseModel, ConfigDict, Field


class VehicleResponseDTO(BaseModel):
    """Catalog vehicle."""

    id: str
    brand: str
    reference: str
    price: str = Field(description="List price as decimal string", examples=["8490000"])
    displacement: int | None = Field(description="Displacement in cc, if known")
    categories: list[str]
    special_adjustment: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "7b0c1d2e-3f40-4a5b-8c6d-7e8f9a0b1c2d",
                "brand": "Victory",
                "reference": "Advance R 125",
                "price": "5990000",
                "displacement": 125,
                "categories": ["URBANA Y/O TRABAJO"],
                "special_adjustment": "0",
            }
        }
    )
