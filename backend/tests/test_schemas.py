"""
RecordBook Backend — Validator and Envelope Tests
===================================================

What:  Tests for validate_payload and the output/envelope serialization.
"""

import pytest

from recordbook.exceptions import ErrorKind, ValidationError
from recordbook.schemas.records import (
    AssociatedHistoryIn,
    Envelope,
    FinancialHistoryIn,
    FinancialHistoryOut,
    error_envelope,
    validate_payload,
)


class TestValidatePayload:

    def test_accepts_camel_case_fields(self):
        payload = validate_payload(FinancialHistoryIn, {"financialId": 7, "document": "abc"})

        assert payload.financial_id == 7
        assert payload.document == "abc"

    def test_coerces_numeric_string_id(self):
        payload = validate_payload(AssociatedHistoryIn, {"historyId": "12", "document": "x"})
        assert payload.history_id == 12

    def test_strips_document_whitespace(self):
        payload = validate_payload(FinancialHistoryIn, {"financialId": 1, "document": "  abc  "})
        assert payload.document == "abc"

    def test_missing_fields_are_listed(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(FinancialHistoryIn, {})

        err = exc_info.value
        assert err.kind is ErrorKind.VALIDATION
        assert err.status_code == 422
        assert err.message == "Dados inválidos: document, financialId"
        assert {e["field"] for e in err.errors} == {"document", "financialId"}

    @pytest.mark.parametrize("document", ["", "   "])
    def test_blank_document_rejected(self, document):
        with pytest.raises(ValidationError, match="document"):
            validate_payload(FinancialHistoryIn, {"financialId": 1, "document": document})

    def test_non_positive_id_rejected(self):
        with pytest.raises(ValidationError, match="financialId"):
            validate_payload(FinancialHistoryIn, {"financialId": 0, "document": "abc"})

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError, match="createdBy"):
            validate_payload(
                FinancialHistoryIn,
                {"financialId": 1, "document": "abc", "createdBy": "Mallory"},
            )

    @pytest.mark.parametrize("flag", [True, False])
    def test_boolean_id_rejected(self, flag):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(FinancialHistoryIn, {"financialId": flag, "document": "abc"})

        assert exc_info.value.message == "Dados inválidos: financialId"

    def test_boolean_document_rejected(self):
        with pytest.raises(ValidationError, match="document"):
            validate_payload(AssociatedHistoryIn, {"historyId": 1, "document": True})

    def test_snake_case_field_name_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(FinancialHistoryIn, {"financial_id": 7, "document": "abc"})

        fields = {e["field"] for e in exc_info.value.errors}
        assert fields == {"financialId", "financial_id"}

    def test_non_object_body_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(FinancialHistoryIn, ["financialId", 1])

        assert exc_info.value.errors[0]["field"] == "body"


class TestEnvelope:

    def test_record_serializes_with_camel_case_keys(self, sample_record):
        envelope = Envelope[FinancialHistoryOut](
            status=True,
            message="Registro retornado com sucesso",
            data=FinancialHistoryOut.model_validate(sample_record),
        )

        body = envelope.model_dump(by_alias=True, mode="json")

        assert body["status"] is True
        assert body["data"]["financialId"] == 7
        assert body["data"]["createdBy"] == "Ana"
        assert body["data"]["updatedBy"] is None
        assert "financial_id" not in body["data"]

    def test_error_envelope_omits_empty_data(self):
        assert error_envelope("Nenhum registro encontrado") == {
            "status": False,
            "message": "Nenhum registro encontrado",
        }

    def test_error_envelope_keeps_field_errors(self):
        errors = [{"field": "document", "message": "Field required"}]
        assert error_envelope("Dados inválidos: document", errors)["data"] == errors
