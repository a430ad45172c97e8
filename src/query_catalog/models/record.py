"""Book record model."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class Book(BaseModel):
    """A document from the books collection.

    Every recognized field is optional since projections return partial
    documents. Unrecognized fields, including ``_id``, are dropped.
    """

    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = Field(None, description="Book title")
    author: Optional[str] = Field(None, description="Author name")
    genre: Optional[str] = Field(None, description="Genre label")
    published_year: Optional[int] = Field(None, description="Year of publication")
    price: Optional[float] = Field(None, description="Price in dollars")
    in_stock: Optional[bool] = Field(None, description="Whether the book is in stock")

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Book":
        """Validate a raw database document."""
        return cls.model_validate(document)

    def to_row(self) -> dict[str, Any]:
        """Return only the fields present on the source document."""
        return self.model_dump(exclude_unset=True)
