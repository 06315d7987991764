from pydantic import BaseModel, Field


class UsuryRateRequestDTO(BaseModel):
    effective_annual_rate: str = Field(
        description="Published usury rate, effective annual percent (E.A.)",
        examples=["24.36"],
        pattern=r"^\d+(\.\d{1,4})?$",
    )


class UsuryRateResponseDTO(BaseModel):
    monthly_rate: str = Field(description="Equivalent monthly rate, percent (M.V.)")
    updated_entity_ids: list[str]
