"""
Status enumerations shared by models, schemas and views.
"""

import enum


class CarStatus(str, enum.Enum):
    """Listing status of a car."""
    AVAILABLE = "AVAILABLE"
    SOLD = "SOLD"
    PENDING = "PENDING"


class InquiryStatus(str, enum.Enum):
    """Lifecycle of a buyer inquiry: NEW -> RESPONDED -> CLOSED."""
    NEW = "NEW"
    RESPONDED = "RESPONDED"
    CLOSED = "CLOSED"
