"""Product catalog models."""

from typing import List, Optional
from typing_extensions import Annotated
from pydantic import BaseModel, BeforeValidator, Field

from brhygiene.utils.helper_functions import parse_json_list


class Product(BaseModel):
    """A catalog entry shown on the website.

    Attributes:
        id: Catalog identifier
        name: Product name
        description: Short marketing description
        features: Feature tags (storage may return them JSON-encoded)
        usage_text: Suggested usage
        image_path: Path of the product image on the website
        badge: Optional badge label, e.g. "Best Seller"
    """
    id: int
    name: str
    description: str
    features: Annotated[List[str], Field(default_factory=list), BeforeValidator(parse_json_list)]
    usage_text: Annotated[Optional[str], Field(None, description="Suggested usage")]
    image_path: Annotated[Optional[str], Field(None, description="Image path or URL")]
    badge: Annotated[Optional[str], Field(None, description="Optional badge label")]
