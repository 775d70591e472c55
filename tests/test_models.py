"""Tests for listing payload validation and model helpers."""

import pytest
from pydantic import ValidationError

from conftest import make_property
from models.property import PropertyCreate, PropertyUpdate
from services.errors import FilterValidationError, ListingsError, PropertyNotFoundError, StoreUnavailableError


class TestPropertyCreate:
    def test_defaults(self) -> None:
        payload = PropertyCreate(title="Flat", price=0, location="Sinza")
        assert payload.utilities == {"electricity": False, "water": False}
        assert payload.nearby_services == []
        assert payload.images == []

    def test_negative_price_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PropertyCreate(title="Flat", price=-1, location="Sinza")

    def test_services_deduplicated_and_normalized(self) -> None:
        payload = PropertyCreate(title="Flat", price=1, location="Sinza", nearby_services=["School", "school", "market"])
        assert payload.nearby_services == ["school", "market"]

    def test_unknown_service_rejected(self) -> None:
        with pytest.raises(ValidationError, match="airport"):
            PropertyCreate(title="Flat", price=1, location="Sinza", nearby_services=["airport"])

    def test_unknown_utility_rejected(self) -> None:
        with pytest.raises(ValidationError, match="gas"):
            PropertyCreate(title="Flat", price=1, location="Sinza", utilities={"gas": True})

    def test_blank_title_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PropertyCreate(title="", price=1, location="Sinza")


class TestPropertyUpdate:
    def test_only_sent_fields_are_set(self) -> None:
        changes = PropertyUpdate(price=10)
        assert changes.model_dump(exclude_unset=True) == {"price": 10}

    def test_validation_applies(self) -> None:
        with pytest.raises(ValidationError):
            PropertyUpdate(price=-5)

    @pytest.mark.parametrize("field", ["title", "price", "location", "status", "utilities", "nearby_services"])
    def test_null_for_required_field_rejected(self, field: str) -> None:
        with pytest.raises(ValidationError, match="cannot be null"):
            PropertyUpdate(**{field: None})

    def test_address_can_be_cleared(self) -> None:
        changes = PropertyUpdate(full_address=None)
        assert changes.model_dump(exclude_unset=True) == {"full_address": None}


class TestLandlordContact:
    def test_no_contact(self) -> None:
        assert make_property().landlord_contact is None

    def test_contact(self) -> None:
        contact = make_property(landlord_name="Juma", landlord_email="juma@example.com").landlord_contact
        assert contact.name == "Juma"
        assert contact.phone is None
        assert contact.email == "juma@example.com"


class TestErrors:
    def test_hierarchy(self) -> None:
        assert isinstance(FilterValidationError("x"), ListingsError)
        assert isinstance(FilterValidationError("x"), ValueError)
        assert isinstance(StoreUnavailableError("x"), ListingsError)

    def test_not_found_message(self) -> None:
        err = PropertyNotFoundError("p-9")
        assert str(err) == "Property p-9 not found"
        assert err.property_id == "p-9"

    def test_unavailable_is_retryable(self) -> None:
        assert StoreUnavailableError.retryable is True
