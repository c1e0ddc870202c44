"""
Form validation for the inquiry form and the sell wizard.
Validation runs before any backend call; failures block submission.
"""

import re
from datetime import datetime
from typing import Dict, Optional

from carmarket.schemas.forms import SellerForm, CarForm, InquiryForm


class ValidationUtils:
    """
    Reusable field checks shared by the forms.
    """

    # Basic local@domain.tld shape, matched anywhere in the value
    EMAIL_PATTERN = re.compile(r'\S+@\S+\.\S+')

    MIN_YEAR = 1900

    @staticmethod
    def is_blank(value: Optional[str]) -> bool:
        return value is None or not str(value).strip()

    @staticmethod
    def is_valid_email(value: Optional[str]) -> bool:
        """
        Check the basic email shape.

        Args:
            value: Candidate email address

        Returns:
            True if the value looks like local@domain.tld
        """
        if not value:
            return False
        return ValidationUtils.EMAIL_PATTERN.search(value) is not None

    @staticmethod
    def max_year(today: Optional[datetime] = None) -> int:
        """Latest model year accepted for a listing (next year's models included)."""
        return (today or datetime.now()).year + 1


def validate_seller_form(form: SellerForm) -> Optional[str]:
    """
    Validate step 1 of the sell wizard.

    Returns:
        The first failing message, or None when the form is valid
    """
    if ValidationUtils.is_blank(form.name):
        return "Name is required"
    if ValidationUtils.is_blank(form.email):
        return "Email is required"
    if not ValidationUtils.is_valid_email(form.email):
        return "Email is invalid"
    if ValidationUtils.is_blank(form.phone):
        return "Phone number is required"
    return None


def validate_car_form(form: CarForm, today: Optional[datetime] = None) -> Optional[str]:
    """
    Validate step 2 of the sell wizard.

    Args:
        form: Car details
        today: Reference date for the year range, defaults to now

    Returns:
        The first failing message, or None when the form is valid
    """
    if ValidationUtils.is_blank(form.make):
        return "Make is required"
    if ValidationUtils.is_blank(form.model):
        return "Model is required"
    if form.year < ValidationUtils.MIN_YEAR or form.year > ValidationUtils.max_year(today):
        return "Invalid year"
    if form.price <= 0:
        return "Price must be greater than 0"
    if form.mileage < 0:
        return "Mileage cannot be negative"
    return None


def validate_inquiry_form(form: InquiryForm) -> Dict[str, str]:
    """
    Validate the inquiry form field by field.

    Returns:
        Mapping of field name to message; empty when the form is valid
    """
    errors: Dict[str, str] = {}

    if ValidationUtils.is_blank(form.buyer_name):
        errors["buyer_name"] = "Name is required"

    if ValidationUtils.is_blank(form.buyer_email):
        errors["buyer_email"] = "Email is required"
    elif not ValidationUtils.is_valid_email(form.buyer_email):
        errors["buyer_email"] = "Email is invalid"

    if ValidationUtils.is_blank(form.message):
        errors["message"] = "Message is required"

    return errors
