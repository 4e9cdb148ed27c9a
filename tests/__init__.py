# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the People API:
# - test_models.py: Person model decoding and document conversion
# - test_person_store.py: Store operations against a mocked collection
# - test_connect.py: MongoDB bootstrap with a mocked client
# - test_people_api.py: HTTP behavior end to end over an in-memory MongoDB
#
# Run tests with: pytest
# =============================================================================
