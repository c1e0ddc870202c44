"""
Form payloads for the inquiry form and the two-step sell wizard.

Fields default to empty values so entered data can be echoed back unchanged;
the rules live in carmarket.utils.validators.
Wizard forms are kept in the session cookie, so their sizes are capped here.
"""

from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import BaseModel, Field


MAX_IMAGES = 4
MAX_IMAGE_URL_LENGTH = 255
MAX_DESCRIPTION_LENGTH = 500

ImageUrl = Annotated[str, Field(max_length=MAX_IMAGE_URL_LENGTH)]


def _current_year() -> int:
    return datetime.now().year


class SellerForm(BaseModel):
    """Step 1 of the sell wizard."""

    name: str = Field("", max_length=100)
    email: str = Field("", max_length=100)
    phone: str = Field("", max_length=30)


class CarForm(BaseModel):
    """Step 2 of the sell wizard."""

    make: str = Field("", max_length=100)
    model: str = Field("", max_length=100)
    year: int = Field(default_factory=_current_year)
    price: float = 0
    mileage: int = 0
    description: str = Field("", max_length=MAX_DESCRIPTION_LENGTH)
    images: List[ImageUrl] = Field(default_factory=lambda: [""], max_length=MAX_IMAGES)

    def image_urls(self) -> Optional[List[str]]:
        """Non-blank image URLs in entry order, or None when there are none."""
        urls = [url for url in self.images if url.strip() != ""]
        return urls or None


class InquiryForm(BaseModel):
    """Buyer inquiry form on the car detail page."""

    buyer_name: str = ""
    buyer_email: str = ""
    buyer_phone: str = ""
    message: str = ""
