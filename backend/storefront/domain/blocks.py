# storefront/domain/blocks.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class BlockType(str, Enum):
    HERO = "hero"
    TEXT = "text"
    IMAGE = "image"
    GALLERY = "gallery"
    PRODUCT_GRID = "product-grid"
    FEATURES = "features"
    NEWSLETTER = "newsletter"
    FAQ = "faq"
    TESTIMONIALS = "testimonials"
    VIDEO = "video"
    CTA = "cta"
    COLUMNS = "columns"
    SPACER = "spacer"
    COUNTDOWN = "countdown"
    CATEGORY_GRID = "category-grid"
    STATS = "stats"
    LOGO_CAROUSEL = "logo-carousel"
    MAP = "map"
    SOCIAL_FEED = "social-feed"


class Block(BaseModel):
    """
    A persisted block record.

    `type` stays a plain string so kinds this build does not know about
    survive a load/save cycle unchanged.
    """
    id: str
    type: str
    content: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _null_content(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("content") is None:
            return {**data, "content": {}}
        return data

    @property
    def kind(self) -> Optional[BlockType]:
        try:
            return BlockType(self.type)
        except ValueError:
            return None


class BlockContent(BaseModel):
    """
    Base for per-kind payloads.

    Keys are camelCase on the wire. Null and empty-string values fall back
    to the field default, lists are kept as given.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_empty(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None and v != ""}
        return data


# -------------------------------------------------
# Item types
# -------------------------------------------------

class HeroSlide(BlockContent):
    image: Optional[str] = None
    title: str = "Hero Title"
    subtitle: str = "Subtitle goes here"
    button1_text: Optional[str] = None
    button1_link: str = "#"
    button2_text: Optional[str] = None
    button2_link: str = "#"


class ImageItem(BlockContent):
    url: str
    alt: Optional[str] = None
    link: Optional[str] = None


class FeatureItem(BlockContent):
    title: str = ""
    description: str = ""
    icon: str = "Star"


class FAQItem(BlockContent):
    question: str
    answer: str = ""


class Testimonial(BlockContent):
    name: str
    role: Optional[str] = None
    quote: str = ""
    avatar: Optional[str] = None


class ColumnItem(BlockContent):
    title: str = ""
    content: str = ""
    icon: Optional[str] = None


class StatItem(BlockContent):
    value: float = 0
    label: str = ""
    prefix: str = ""
    suffix: str = ""
    icon: Optional[str] = None


# -------------------------------------------------
# Kind payloads
# -------------------------------------------------

class HeroContent(BlockContent):
    slides: List[HeroSlide] = Field(default_factory=lambda: [HeroSlide()])
    auto_play: bool = False
    auto_play_interval: int = 5000
    show_dots: bool = True
    show_arrows: bool = True
    overlay_opacity: float = 0.5


class TextContent(BlockContent):
    text: str = "<p>Rich text content...</p>"


class ImageContent(BlockContent):
    url: str = "https://placehold.co/800x400"
    alt: str = "Block image"


DEFAULT_GALLERY_IMAGES = [
    {"url": "https://images.unsplash.com/photo-1441986300917-64674bd600d8?w=600", "alt": "Gallery image 1"},
    {"url": "https://images.unsplash.com/photo-1523381210434-271e8be1f52b?w=600", "alt": "Gallery image 2"},
    {"url": "https://images.unsplash.com/photo-1556905055-8f358a7a47b2?w=600", "alt": "Gallery image 3"},
    {"url": "https://images.unsplash.com/photo-1489987707025-afc232f7ea0f?w=600", "alt": "Gallery image 4"},
    {"url": "https://images.unsplash.com/photo-1558171813-4c088753af8f?w=600", "alt": "Gallery image 5"},
    {"url": "https://images.unsplash.com/photo-1434389677669-e08b4cac3105?w=600", "alt": "Gallery image 6"},
]


class GalleryContent(BlockContent):
    title: Optional[str] = None
    columns: int = 3
    images: List[ImageItem] = Field(
        default_factory=lambda: [ImageItem(**image) for image in DEFAULT_GALLERY_IMAGES]
    )

    @field_validator("columns", mode="before")
    @classmethod
    def _zero_columns(cls, value: Any) -> Any:
        return value or 3


class ProductGridContent(BlockContent):
    title: Optional[str] = None
    subtitle: str = "Curated Selection"
    description: Optional[str] = None
    limit: int = 4
    featured_only: bool = True


class FeaturesContent(BlockContent):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    items: List[FeatureItem] = Field(default_factory=lambda: [
        FeatureItem(title="Quality", description="Best materials", icon="Star"),
        FeatureItem(title="Shipping", description="Fast delivery", icon="Truck"),
        FeatureItem(title="Secure", description="Safe payments", icon="Shield"),
    ])


class NewsletterContent(BlockContent):
    title: str = "Join Our Newsletter"
    description: str = "Subscribe to receive updates, access to exclusive deals, and more."
    button_text: str = "Subscribe"
    placeholder: str = "Enter your email"


class FAQContent(BlockContent):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    items: List[FAQItem] = Field(default_factory=lambda: [
        FAQItem(
            question="What is your return policy?",
            answer="We offer a 30-day return policy for all unworn items with tags attached.",
        ),
        FAQItem(
            question="How long does shipping take?",
            answer="Standard shipping takes 3-5 business days. Express shipping is available for 1-2 day delivery.",
        ),
        FAQItem(
            question="Do you ship internationally?",
            answer="Yes, we ship to over 50 countries worldwide. Shipping rates and times vary by location.",
        ),
    ])


class TestimonialsContent(BlockContent):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    items: List[Testimonial] = Field(default_factory=lambda: [
        Testimonial(
            name="Sarah Johnson",
            role="Fashion Blogger",
            quote="The quality of their products is exceptional. I've been a loyal customer for years!",
        ),
        Testimonial(
            name="Michael Chen",
            role="Photographer",
            quote="Fast shipping and the clothes fit perfectly. Highly recommend to everyone.",
        ),
    ])


class VideoContent(BlockContent):
    url: Optional[str] = None
    title: Optional[str] = None
    autoplay: bool = False


class CTAContent(BlockContent):
    title: str = "Ready to get started?"
    description: Optional[str] = None
    button_text: str = "Get Started"
    button_link: Optional[str] = None
    variant: str = "default"


class ColumnsContent(BlockContent):
    section_title: Optional[str] = None
    section_subtitle: Optional[str] = None
    columns: int = 2
    gap: str = "medium"
    text_align: str = "left"
    show_titles: bool = True
    show_icons: bool = False
    show_dividers: bool = False
    items: List[ColumnItem] = Field(default_factory=lambda: [
        ColumnItem(title="Column 1", content="Add your content here.", icon="Star"),
        ColumnItem(title="Column 2", content="Each column can have its own content.", icon="Heart"),
    ])

    @field_validator("columns", mode="before")
    @classmethod
    def _zero_columns(cls, value: Any) -> Any:
        return value or 2

    def display_items(self) -> List[ColumnItem]:
        """Exactly `columns` items, padding with empty columns."""
        items = list(self.items[: self.columns])
        while len(items) < self.columns:
            items.append(ColumnItem(title=f"Column {len(items) + 1}"))
        return items


class SpacerContent(BlockContent):
    height: str = "medium"
    custom_height: Optional[int] = None
    show_divider: bool = False
    divider_style: str = "solid"
    divider_color: str = "currentColor"


def _one_week_from_now() -> str:
    return (datetime.now(timezone.utc) + timedelta(days=7)).isoformat()


class CountdownContent(BlockContent):
    title: Optional[str] = None
    target_date: str = Field(default_factory=_one_week_from_now)
    show_days: bool = True
    show_hours: bool = True
    show_minutes: bool = True
    show_seconds: bool = True
    variant: str = "default"


class CategoryGridContent(BlockContent):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    limit: int = 6
    columns: int = 3
    aspect_ratio: str = "landscape"
    show_product_count: bool = False
    show_description: bool = False


class StatsContent(BlockContent):
    title: Optional[str] = None
    variant: str = "default"
    animate_numbers: bool = True
    items: List[StatItem] = Field(default_factory=lambda: [
        StatItem(value=10000, suffix="+", label="Happy Customers"),
        StatItem(value=500, suffix="+", label="Products"),
        StatItem(value=50, suffix="+", label="Countries"),
        StatItem(value=99, suffix="%", label="Satisfaction"),
    ])


class LogoCarouselContent(BlockContent):
    title: Optional[str] = None
    speed: str = "normal"
    grayscale: bool = True
    logos: List[ImageItem] = Field(default_factory=lambda: [
        ImageItem(url=f"https://placehold.co/200x80/f8f8f8/666?text=Brand+{n}", alt=f"Brand {n}")
        for n in range(1, 6)
    ])


class MapContent(BlockContent):
    title: Optional[str] = None
    address: str = "123 Main St, City, Country"
    embed_url: Optional[str] = None
    map_image: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    zoom: int = 14
    show_address_card: bool = True
    button_text: str = "Get Directions"
    button_link: Optional[str] = None


class SocialFeedContent(BlockContent):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    columns: int = 6
    instagram_handle: str = "yourbrand"
    show_follow_button: bool = True
    images: List[ImageItem] = Field(default_factory=lambda: [
        ImageItem(url=f"https://placehold.co/400x400/f0f0f0/999?text={n}") for n in range(1, 7)
    ])


CONTENT_MODELS: Dict[BlockType, Type[BlockContent]] = {
    BlockType.HERO: HeroContent,
    BlockType.TEXT: TextContent,
    BlockType.IMAGE: ImageContent,
    BlockType.GALLERY: GalleryContent,
    BlockType.PRODUCT_GRID: ProductGridContent,
    BlockType.FEATURES: FeaturesContent,
    BlockType.NEWSLETTER: NewsletterContent,
    BlockType.FAQ: FAQContent,
    BlockType.TESTIMONIALS: TestimonialsContent,
    BlockType.VIDEO: VideoContent,
    BlockType.CTA: CTAContent,
    BlockType.COLUMNS: ColumnsContent,
    BlockType.SPACER: SpacerContent,
    BlockType.COUNTDOWN: CountdownContent,
    BlockType.CATEGORY_GRID: CategoryGridContent,
    BlockType.STATS: StatsContent,
    BlockType.LOGO_CAROUSEL: LogoCarouselContent,
    BlockType.MAP: MapContent,
    BlockType.SOCIAL_FEED: SocialFeedContent,
}


def content_model_for(block_type: str) -> Optional[Type[BlockContent]]:
    """None means an unknown kind."""
    try:
        return CONTENT_MODELS.get(BlockType(block_type))
    except ValueError:
        return None


def parse_content(block: Block) -> Optional[BlockContent]:
    model = content_model_for(block.type)
    if model is None:
        return None
    return model.model_validate(block.content)
