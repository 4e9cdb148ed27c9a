# =============================================================================
# tests/test_models.py - Person Model Tests
# =============================================================================
# Unit tests for the Person model:
# - Request bodies decode with defaults for missing fields
# - Wrong JSON types are rejected
# - Conversion to and from MongoDB documents
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

import pytest
from bson import ObjectId
from pydantic import ValidationError

from core.models import Person


class TestPersonDecoding:
    """Tests for decoding request bodies into Person."""

    def test_valid_person(self, sample_person_dict):
        """Test creating a Person from a full body."""
        person = Person(**sample_person_dict)

        assert person.id is None
        assert person.name == "Ann"
        assert person.age == 30
        assert person.address == "1 Main St"

    def test_missing_fields_default_to_empty(self):
        """Missing fields fall back to empty values instead of failing."""
        person = Person.model_validate({})

        assert person.name == ""
        assert person.age == 0
        assert person.address == ""

    def test_unknown_fields_ignored(self):
        person = Person.model_validate({"name": "Bo", "email": "bo@example.com"})

        assert person.name == "Bo"
        assert "email" not in person.model_dump()

    def test_age_must_be_integer(self):
        """A string or float age is a decode error, not coerced."""
        with pytest.raises(ValidationError):
            Person.model_validate({"age": "30"})

        with pytest.raises(ValidationError):
            Person.model_validate({"age": 30.5})

    def test_name_must_be_string(self):
        with pytest.raises(ValidationError):
            Person.model_validate({"name": 42})


class TestPersonSerialization:
    """Tests for the JSON shape sent to clients."""

    def test_id_omitted_when_unset(self, sample_person_dict):
        person = Person(**sample_person_dict)

        assert person.model_dump(exclude_none=True) == sample_person_dict

    def test_field_order(self):
        person = Person(id="65a1f0c2e4b0a1b2c3d4e5f6", name="Ann", age=30, address="x")

        assert list(person.model_dump().keys()) == ["id", "name", "age", "address"]


class TestPersonDocuments:
    """Tests for conversion to and from MongoDB documents."""

    def test_to_document_excludes_id(self):
        person = Person(id="65a1f0c2e4b0a1b2c3d4e5f6", name="Ann", age=30, address="1 Main St")

        assert person.to_document() == {"name": "Ann", "age": 30, "address": "1 Main St"}

    def test_from_document(self):
        oid = ObjectId()
        person = Person.from_document(
            {"_id": oid, "name": "Ann", "age": 30, "address": "1 Main St"}
        )

        assert person.id == str(oid)
        assert len(person.id) == 24
        assert person.name == "Ann"

    def test_from_document_missing_fields(self):
        person = Person.from_document({"_id": ObjectId()})

        assert person.name == ""
        assert person.age == 0
        assert person.address == ""

    def test_from_document_bad_type_fails(self):
        """A stored document with the wrong field type can't be decoded."""
        with pytest.raises(ValidationError):
            Person.from_document({"_id": ObjectId(), "age": "old"})


class TestPersonEdgeValues:
    """Tests for null fields and the int64 range of age."""

    def test_null_fields_become_defaults(self):
        person = Person.model_validate_json('{"name": null, "age": null, "address": null}')

        assert person.name == ""
        assert person.age == 0
        assert person.address == ""

    def test_age_int64_bounds_accepted(self):
        assert Person(age=2**63 - 1).age == 2**63 - 1
        assert Person(age=-(2**63)).age == -(2**63)

    @pytest.mark.parametrize("age", [2**63, -(2**63) - 1, 2**70])
    def test_age_beyond_int64_rejected(self, age):
        with pytest.raises(ValidationError):
            Person.model_validate_json(f'{{"age": {age}}}')
