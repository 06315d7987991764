from decimal import Decimal

from tienda_motos.domain.financing import (
    DEFAULT_FINANCIAL_ENTITIES,
    DEFAULT_LIFE_INSURANCE_RATE,
    FinancialEntity,
)
from tienda_motos.domain.pricing import DEFAULT_REGISTRATION_MATRIX
from tienda_motos.domain.purchasing_power import (
    DEFAULT_BUDGET_PROFILE,
    affordable_vehicles,
    annuity_factor,
    budget_profile,
    estimate_purchasing_power,
)
from tienda_motos.domain.vehicle import Vehicle


BRILLA = next(e for e in DEFAULT_FINANCIAL_ENTITIES if e.id == "brilla")


def make_vehicle(vehicle_id: str, price: str, displacement: int = 110) -> Vehicle:
    return Vehicle(
        id=vehicle_id,
        brand="AKT",
        reference=f"Ref {vehicle_id}",
        price=Decimal(price),
        displacement=displacement,
    )


def test_annuity_factor_with_zero_rate() -> None:
    assert annuity_factor(Decimal("0"), 4) == Decimal("0.25")


def test_zero_rate_budget_without_fees() -> None:
    result = estimate_purchasing_power(
        daily_budget=Decimal("10000"),
        initial_payment=Decimal("500000"),
        term_months=12,
        interest_rate=Decimal("0"),
        guarantee_fund_rate=Decimal("0"),
        life_insurance_rate=Decimal("0"),
    )

    assert result.monthly_budget == Decimal("300000")
    assert result.max_loan_amount == Decimal("3600000")
    assert result.max_vehicle_price == Decimal("4100000")
    assert result.guarantee_fund_cost == Decimal("0")


def test_guarantee_fund_is_taken_out_of_the_financed_amount() -> None:
    result = estimate_purchasing_power(
        daily_budget=Decimal("10000"),
        initial_payment=Decimal("0"),
        term_months=12,
        interest_rate=Decimal("0"),
        guarantee_fund_rate=Decimal("20"),
        life_insurance_rate=Decimal("0"),
    )

    assert result.max_loan_amount == Decimal("3000000")
    assert result.guarantee_fund_cost == Decimal("600000")


def test_larger_budget_affords_a_pricier_vehicle() -> None:
    small = estimate_purchasing_power(Decimal("8000"), Decimal("400000"))
    large = estimate_purchasing_power(Decimal("15000"), Decimal("400000"))

    assert large.max_vehicle_price > small.max_vehicle_price
    assert small.max_vehicle_price > Decimal("400000")


def test_defaults_cost_more_than_an_interest_free_loan() -> None:
    with_defaults = estimate_purchasing_power(Decimal("10000"), Decimal("0"))
    interest_free = estimate_purchasing_power(
        Decimal("10000"),
        Decimal("0"),
        interest_rate=Decimal("0"),
        guarantee_fund_rate=Decimal("0"),
        life_insurance_rate=Decimal("0"),
    )

    assert with_defaults.max_loan_amount < interest_free.max_loan_amount


def test_non_positive_term_only_affords_the_initial_payment() -> None:
    result = estimate_purchasing_power(Decimal("10000"), Decimal("750000"), term_months=0)

    assert result.max_loan_amount == Decimal("0")
    assert result.max_vehicle_price == Decimal("750000")
    assert result.monthly_budget == Decimal("300000")


# ==============================================================================
# Budget profile
# ==============================================================================


def test_profile_without_lender_uses_defaults() -> None:
    profile = budget_profile(None)

    assert profile is DEFAULT_BUDGET_PROFILE
    assert profile.interest_rate == Decimal("2.3")
    assert profile.guarantee_fund_rate == Decimal("20.66")
    assert profile.life_insurance_rate == DEFAULT_LIFE_INSURANCE_RATE
    assert profile.min_down_payment_percentage == Decimal("10")


def test_profile_uses_lender_terms() -> None:
    profile = budget_profile(BRILLA)

    assert profile.interest_rate == Decimal("1.85")
    assert profile.guarantee_fund_rate == Decimal("0")
    # 800 per million is 0.08 % of principal
    assert profile.life_insurance_rate == Decimal("0.08")
    assert profile.min_down_payment_percentage == Decimal("0")


def test_profile_falls_back_on_unset_lender_rates() -> None:
    entity = FinancialEntity(
        id="bare",
        name="Bare",
        interest_rate=Decimal("0"),
        min_down_payment_percentage=Decimal("15"),
    )

    profile = budget_profile(entity)

    assert profile.interest_rate == Decimal("2.3")
    assert profile.guarantee_fund_rate == Decimal("0")
    assert profile.life_insurance_rate == DEFAULT_LIFE_INSURANCE_RATE
    assert profile.min_down_payment_percentage == Decimal("15")


def test_lender_without_guarantee_fund_affords_more() -> None:
    default = budget_profile(None)
    brilla = budget_profile(BRILLA)

    with_default = estimate_purchasing_power(
        Decimal("10000"),
        Decimal("0"),
        interest_rate=default.interest_rate,
        guarantee_fund_rate=default.guarantee_fund_rate,
        life_insurance_rate=default.life_insurance_rate,
    )
    with_brilla = estimate_purchasing_power(
        Decimal("10000"),
        Decimal("0"),
        interest_rate=brilla.interest_rate,
        guarantee_fund_rate=brilla.guarantee_fund_rate,
        life_insurance_rate=brilla.life_insurance_rate,
    )

    assert with_brilla.guarantee_fund_cost == Decimal("0")
    assert with_brilla.max_loan_amount > with_default.max_loan_amount


# ==============================================================================
# Affordable vehicles
# ==============================================================================


def test_vehicle_at_exact_limit_is_affordable() -> None:
    # 10 % of 5,000,000 plus 740,000 registration (100-124 cc, credit general)
    vehicle = make_vehicle("v-110", "5000000")

    result = affordable_vehicles(
        [vehicle], Decimal("3760000"), Decimal("10"), DEFAULT_REGISTRATION_MATRIX
    )

    assert len(result) == 1
    assert result[0].vehicle is vehicle
    assert result[0].registration_cost == Decimal("740000")
    assert result[0].required_initial_payment == Decimal("1240000")


def test_vehicle_one_peso_over_limit_is_excluded() -> None:
    vehicle = make_vehicle("v-110", "5000000")

    result = affordable_vehicles(
        [vehicle], Decimal("3759999"), Decimal("10"), DEFAULT_REGISTRATION_MATRIX
    )

    assert result == []


def test_affordable_vehicles_are_sorted_by_price_descending() -> None:
    vehicles = [
        make_vehicle("cheap", "3000000"),
        make_vehicle("mid", "4500000"),
        make_vehicle("too-expensive", "20000000", displacement=300),
        make_vehicle("upper", "4800000"),
    ]

    result = affordable_vehicles(
        vehicles, Decimal("3760000"), Decimal("10"), DEFAULT_REGISTRATION_MATRIX
    )

    assert [item.vehicle.id for item in result] == ["upper", "mid", "cheap"]


def test_empty_matrix_uses_flat_registration_fee() -> None:
    vehicle = make_vehicle("v-110", "5000000")

    result = affordable_vehicles([vehicle], Decimal("4000000"), Decimal("10"), ())

    assert result[0].registration_cost == Decimal("750000")
    assert result[0].required_initial_payment == Decimal("1250000")
