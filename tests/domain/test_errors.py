"""Tests for domain error classes."""

from tienda_motos.domain.errors import DomainError, NotFoundError, ValidationError
from tienda_motos.domain.quote import InvalidQuoteInput


class TestDomainError:
    def test_stores_message_and_context(self) -> None:
        error = DomainError("Quote failed", scenario_id="cash-envigado")

        assert error.message == "Quote failed"
        assert error.error_code == "DOMAIN_ERROR"
        assert error.context == {"scenario_id": "cash-envigado"}
        assert str(error) == "Quote failed"

    def test_to_dict_flattens_context(self) -> None:
        error = DomainError("Quote failed", vehicle_id="v-1")

        assert error.to_dict() == {
            "message": "Quote failed",
            "code": "DOMAIN_ERROR",
            "vehicle_id": "v-1",
        }


class TestValidationError:
    def test_default_message(self) -> None:
        error = ValidationError()

        assert error.message == "Validation error"
        assert error.error_code == "VALIDATION_ERROR"
        assert error.errors is None

    def test_field_errors(self) -> None:
        errors = [{"field": "down_payment", "message": "Must be >= 0"}]

        error = ValidationError(errors=errors)

        assert error.message == "Validation failed"
        assert error.to_dict() == {
            "message": "Validation failed",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }

    def test_to_dict_keeps_context_next_to_field_errors(self) -> None:
        errors = [{"field": "vehicle_id", "message": "Must not be blank", "code": "REQUIRED"}]

        error = ValidationError(errors=errors, vehicle_id=" ")

        assert error.to_dict() == {
            "message": "Validation failed",
            "code": "VALIDATION_ERROR",
            "vehicle_id": " ",
            "errors": errors,
        }

    def test_empty_field_error_list_is_dropped(self) -> None:
        error = ValidationError("down_payment must be >= 0", errors=[])

        assert error.errors is None
        assert "errors" not in error.to_dict()

    def test_to_dict_without_field_errors(self) -> None:
        error = ValidationError("term_months must be >= 0")

        assert error.to_dict() == {
            "message": "term_months must be >= 0",
            "code": "VALIDATION_ERROR",
        }

    def test_invalid_quote_input_is_a_validation_error(self) -> None:
        error = InvalidQuoteInput("down_payment must be >= 0")

        assert isinstance(error, ValidationError)
        assert error.error_code == "VALIDATION_ERROR"


class TestNotFoundError:
    def test_message_with_identifier(self) -> None:
        error = NotFoundError("Vehicle", "abc-123")

        assert error.message == "Vehicle with identifier 'abc-123' not found"
        assert error.to_dict() == {
            "message": "Vehicle with identifier 'abc-123' not found",
            "code": "NOT_FOUND",
            "resource": "Vehicle",
            "identifier": "abc-123",
        }
