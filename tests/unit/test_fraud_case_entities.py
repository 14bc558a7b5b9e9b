from __future__ import annotations

import pytest

from fraud_sync.domain.entities.fraud_case import DestinationRecord, FraudCase, FraudCasePage


def test_page_from_dict_maps_nested_bank_account():
    page = FraudCasePage.from_dict(
        {
            "page": 1,
            "numberOfPages": 3,
            "fraudCases": [
                {
                    "cdlId": "abc",
                    "dateOfAttack": 1690000000,
                    "type": "CEO_FRAUD",
                    "businessPartnerCountryCode": "FR",
                    "bankAccount": {"bankCountryCode": "DE"},
                }
            ],
        }
    )

    assert page.page == 1
    assert page.number_of_pages == 3
    case = page.fraud_cases[0]
    assert case.cdl_id == "abc"
    assert case.date_of_attack == 1690000000
    assert case.business_partner_country_code == "FR"
    assert case.bank_account.bank_country_code == "DE"


def test_missing_fields_default_to_zero_values():
    case = FraudCase.from_dict({"cdlId": "x", "bankAccount": None})

    assert case.date_of_attack == 0
    assert case.type == ""
    assert case.business_partner_country_code == ""
    assert case.bank_account.bank_country_code == ""


def test_page_without_fraud_cases_is_empty():
    page = FraudCasePage.from_dict({"page": 0, "numberOfPages": 0})
    assert page.fraud_cases == []


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"page": "uno", "numberOfPages": 1},
        {"page": 0, "numberOfPages": 1, "fraudCases": {"cdlId": "x"}},
        {"page": 0, "numberOfPages": 1, "fraudCases": [{"cdlId": "x", "dateOfAttack": "ayer"}]},
        {"page": 0, "numberOfPages": 1, "fraudCases": [{"cdlId": 12}]},
    ],
)
def test_malformed_payload_raises_value_error(payload):
    with pytest.raises(ValueError):
        FraudCasePage.from_dict(payload)


def test_destination_record_payload_uses_api_field_names():
    record = DestinationRecord(cdl_id="abc", date_of_attack=1, type="T", country_code="DE")
    assert record.to_payload() == {
        "cdlId": "abc",
        "dateOfAttack": 1,
        "type": "T",
        "countryCode": "DE",
    }
