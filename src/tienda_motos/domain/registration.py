from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Sequence

from tienda_motos.domain.money import round_units
from tienda_motos.domain.pricing import (
    STAMP_TAX_ANNUAL_RATE,
    STAMP_TAX_DISPLACEMENT_CC,
    STAMP_TAX_FIXED_SURCHARGE,
    MatrixRow,
    PaymentMethod,
    RegistrationColumn,
    Scenario,
)
from tienda_motos.domain.vehicle import Vehicle, normalize_category, normalize_text


CREDIT_NAMED_CITY = "SANTA MARTA"

# Checked in order; the first city found in the scenario name wins
CASH_CITY_COLUMNS: tuple[tuple[str, RegistrationColumn], ...] = (
    ("ENVIGADO", RegistrationColumn.CASH_ENVIGADO),
    ("CIENAGA", RegistrationColumn.CASH_CIENAGA),
    ("ZONA BANANERA", RegistrationColumn.CASH_ZONA_BANANERA),
    ("SANTA MARTA", RegistrationColumn.CASH_SANTA_MARTA),
)


def select_registration_column(
    scenario_name: str, payment_method: PaymentMethod | str
) -> RegistrationColumn:
    """
    Pick the matrix column for a scenario and payment method.

    Cash scenarios outside the known cities read the general credit
    column; the matrix has no general cash column.
    """
    name = normalize_text(scenario_name)

    if PaymentMethod(payment_method) is PaymentMethod.CREDIT:
        if CREDIT_NAMED_CITY in name:
            return RegistrationColumn.CREDIT_SANTA_MARTA
        return RegistrationColumn.CREDIT_GENERAL

    for city, column in CASH_CITY_COLUMNS:
        if city in name:
            return column
    return RegistrationColumn.CREDIT_GENERAL


def months_remaining_in_year(as_of: date) -> int:
    """Whole months left in the calendar year after the current one."""
    return 12 - as_of.month


def stamp_tax(price: Decimal, as_of: date) -> Decimal:
    """Pro-rated stamp tax plus the fixed administrative surcharge."""
    prorated = price * STAMP_TAX_ANNUAL_RATE / Decimal("12") * months_remaining_in_year(as_of)
    return round_units(prorated + STAMP_TAX_FIXED_SURCHARGE)


def _specific_row(matrix: Sequence[MatrixRow], category: str) -> MatrixRow | None:
    for row in matrix:
        if row.category and normalize_category(row.category) == category:
            return row
    return None


def _generic_rows(matrix: Sequence[MatrixRow], displacement: int) -> list[MatrixRow]:
    return [row for row in matrix if not row.category and row.covers_displacement(displacement)]


def _lookup_matrix(
    matrix: Sequence[MatrixRow], vehicle: Vehicle, column: RegistrationColumn
) -> Decimal | None:
    best: Decimal | None = None
    displacement = vehicle.effective_displacement

    for candidate in vehicle.candidate_categories():
        # Pass 1: a row dedicated to the category
        row = _specific_row(matrix, candidate)
        if row is not None:
            rows = [row]
        else:
            # Pass 2: displacement bands
            rows = _generic_rows(matrix, displacement)

        for match in rows:
            value = match.value_for(column)
            if best is None or value >= best:
                best = value

    return best


def resolve_registration_cost(
    vehicle: Vehicle,
    scenario: Scenario,
    payment_method: PaymentMethod | str,
    matrix: Sequence[MatrixRow] | None = None,
    as_of: date | None = None,
) -> Decimal:
    """
    Registration (documents) cost for a vehicle in a scenario.

    Reads one column of the matrix, preferring category rows over
    displacement bands and keeping the highest value across the
    vehicle's categories. Falls back to the scenario's legacy flat fee
    when there is no matrix or no row applies. Cash sales above 125 cc
    also pay the stamp tax.
    """
    if not matrix:
        return scenario.legacy_registration_cost

    method = PaymentMethod(payment_method)
    column = select_registration_column(scenario.name, method)

    cost = _lookup_matrix(matrix, vehicle, column)
    if cost is None:
        cost = scenario.legacy_registration_cost

    if method is PaymentMethod.CASH and vehicle.effective_displacement > STAMP_TAX_DISPLACEMENT_CC:
        cost += stamp_tax(vehicle.price, as_of or date.today())

    return cost
