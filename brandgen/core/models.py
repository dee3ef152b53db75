"""Domain records produced by the orchestrators.

Both records are immutable. A new `Brand` replaces the previous one wholesale;
nothing mutates a field in place.
"""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Brand:
    """Generated brand identity.

    Attributes:
        name: Brand name from the text service.
        tagline: Tagline from the text service.
        description: Business description the brand was generated from.
        logo_url: URL of the generated logo image.
    """

    name: str
    tagline: str
    description: str
    logo_url: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Product:
    """Flagship product concept for a brand.

    Attributes:
        description: Visual description, used as the image prompt subject.
        pitch: One-sentence display copy.
        image_url: URL of the rendered product photo.
    """

    description: str
    pitch: str
    image_url: str = ""

    def to_dict(self) -> dict:
        return asdict(self)
