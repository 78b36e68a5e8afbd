"""Shared pytest configuration and fixtures for business id testing."""

from typing import List

import pytest

from business_id.validation import BusinessIdSpecification

# Real, correctly formed business ids
VALID_BUSINESS_IDS: List[str] = [
    "0204819-8",
    "2542362-4",
    "0112038-9",
    "0000000-0",
]

LENGTH_REASON = "BusinessId length is not 9 characters"
SEPARATOR_REASON = "Separator character '-' not found in correct position"
NULL_REASON = "BusinessId should not be null"
CHECKSUM_ONE_REASON = "Checksum cannot be 1"


@pytest.fixture
def spec() -> BusinessIdSpecification:
    """A fresh specification instance."""
    return BusinessIdSpecification()


@pytest.fixture(params=VALID_BUSINESS_IDS)
def valid_business_id(request) -> str:
    """Each known valid business id in turn."""
    return request.param
