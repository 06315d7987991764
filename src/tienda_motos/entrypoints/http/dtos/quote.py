from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


MONEY_PATTERN = r"^\d+(\.\d{1,2})?$"


class QuoteRequestDTO(BaseModel):
    """Request payload for a cash or credit quote."""

    vehicle_id: str = Field(
        description="Catalog vehicle identifier",
        examples=["7b0c1d2e-3f40-4a5b-8c6d-7e8f9a0b1c2d"],
        min_length=1,
    )
    scenario_id: str = Field(
        description="City/financing scenario identifier",
        examples=["credit-santa-marta"],
        min_length=1,
    )
    payment_method: Literal["cash", "credit"] = Field(
        description="Payment method",
        examples=["credit"],
    )
    financial_entity_id: str | None = Field(
        default=None,
        description="Lender identifier (credit only; defaults apply when omitted)",
        examples=["crediorbe"],
    )
    term_months: int = Field(
        default=48,
        description="Loan term in months (ignored for cash)",
        examples=[48],
        ge=0,
    )
    down_payment: str = Field(
        default="0",
        description="Down payment as decimal string (credit only; cash ignores it)",
        examples=["1500000"],
        pattern=MONEY_PATTERN,
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "vehicle_id": "7b0c1d2e-3f40-4a5b-8c6d-7e8f9a0b1c2d",
                "scenario_id": "credit-santa-marta",
                "payment_method": "credit",
                "financial_entity_id": "crediorbe",
                "term_months": 48,
                "down_payment": "1500000",
            }
        }
    )


class QuoteResponseDTO(BaseModel):
    """Quote breakdown. Monetary values are decimal strings."""

    vehicle_price: str
    soat_price: str
    registration_price: str
    documentation_fee: str
    special_adjustment: str
    subtotal: str
    total: str
    down_payment: str
    loan_amount: str
    guarantee_fund_cost: str
    life_insurance: str
    unemployment_insurance: str
    management_fee: str
    coverage_fee: str
    coverage_monthly_component: str = Field(
        description="Coverage fee share included in installments 1-12",
    )
    monthly_payment: str = Field(
        description="Installment for months 1-12",
    )
    monthly_payment_after_coverage: str = Field(
        description="Installment from month 13 on",
    )
    term_months: int
    interest_rate: str = Field(description="Monthly nominal rate, percent")
    financial_entity: str | None
    is_credit: bool


class PurchasingPowerRequestDTO(BaseModel):
    """Request payload for the budget-based purchasing power estimate."""

    daily_budget: str = Field(
        description="Daily budget as decimal string",
        examples=["10000"],
        pattern=MONEY_PATTERN,
    )
    initial_payment: str = Field(
        default="0",
        description="Available down payment as decimal string",
        examples=["800000"],
        pattern=MONEY_PATTERN,
    )
    term_months: int = Field(default=48, ge=1, examples=[48])
    financial_entity_id: str | None = Field(
        default=None,
        description="Lender whose terms are used (default budget profile when omitted)",
        examples=["crediorbe"],
    )


class AffordableVehicleDTO(BaseModel):
    id: str
    brand: str
    reference: str
    price: str
    registration_cost: str = Field(description="General credit registration cost")
    required_initial_payment: str = Field(
        description="Lender minimum down payment plus registration cost",
    )


class PurchasingPowerResponseDTO(BaseModel):
    monthly_budget: str
    max_loan_amount: str
    max_vehicle_price: str
    guarantee_fund_cost: str
    financial_entity: str | None = None
    vehicles: list[AffordableVehicleDTO] = Field(
        default_factory=list,
        description="Catalog vehicles the budget can finance, priciest first",
    )
