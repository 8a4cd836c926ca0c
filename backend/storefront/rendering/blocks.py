# storefront/rendering/blocks.py
import logging
from functools import lru_cache
from typing import Any, Callable, Dict, Iterable, Mapping, Union

from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup
from pydantic import ValidationError

from storefront.domain.blocks import (
    Block,
    BlockType,
    MapContent,
    VideoContent,
    parse_content,
)
from .embeds import map_directions_url, map_embed_url, video_embed_url

logger = logging.getLogger(__name__)

BlockLike = Union[Block, Mapping[str, Any]]

# One template per kind; a kind only ever sees its own content model
BLOCK_RENDERERS: Dict[BlockType, str] = {
    BlockType.HERO: "blocks/hero.html",
    BlockType.TEXT: "blocks/text.html",
    BlockType.IMAGE: "blocks/image.html",
    BlockType.GALLERY: "blocks/gallery.html",
    BlockType.PRODUCT_GRID: "blocks/product_grid.html",
    BlockType.FEATURES: "blocks/features.html",
    BlockType.NEWSLETTER: "blocks/newsletter.html",
    BlockType.FAQ: "blocks/faq.html",
    BlockType.TESTIMONIALS: "blocks/testimonials.html",
    BlockType.VIDEO: "blocks/video.html",
    BlockType.CTA: "blocks/cta.html",
    BlockType.COLUMNS: "blocks/columns.html",
    BlockType.SPACER: "blocks/spacer.html",
    BlockType.COUNTDOWN: "blocks/countdown.html",
    BlockType.CATEGORY_GRID: "blocks/category_grid.html",
    BlockType.STATS: "blocks/stats.html",
    BlockType.LOGO_CAROUSEL: "blocks/logo_carousel.html",
    BlockType.MAP: "blocks/map.html",
    BlockType.SOCIAL_FEED: "blocks/social_feed.html",
}


def _video_context(content: VideoContent) -> Dict[str, Any]:
    return {"embed_url": video_embed_url(content.url) if content.url else None}


def _map_context(content: MapContent) -> Dict[str, Any]:
    return {
        "embed_url": map_embed_url(
            embed_url=content.embed_url,
            lat=content.lat,
            lng=content.lng,
            zoom=content.zoom,
        ),
        "directions_url": map_directions_url(
            address=content.address,
            button_link=content.button_link,
            lat=content.lat,
            lng=content.lng,
        ),
    }


CONTEXT_BUILDERS: Dict[BlockType, Callable[[Any], Dict[str, Any]]] = {
    BlockType.VIDEO: _video_context,
    BlockType.MAP: _map_context,
}


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    return Environment(
        loader=PackageLoader("storefront", "templates"),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_block(block: BlockLike) -> Markup:
    """
    Render one block with the template registered for its type.

    Unknown types, malformed records and content that fails its kind's
    validation all render as an empty string so the rest of the page
    still renders.
    """
    if not isinstance(block, Block):
        try:
            block = Block.model_validate(block)
        except ValidationError as exc:
            logger.warning("Skipping malformed block record: %s", exc)
            return Markup("")

    kind = block.kind
    template_name = BLOCK_RENDERERS.get(kind) if kind else None

    if template_name is None:
        logger.debug("Skipping unrecognized block type %r (id=%s)", block.type, block.id)
        return Markup("")

    try:
        content = parse_content(block)
    except ValidationError as exc:
        logger.warning("Skipping %s block %s with invalid content: %s", block.type, block.id, exc)
        return Markup("")

    context: Dict[str, Any] = {"block": block, "content": content}

    builder = CONTEXT_BUILDERS.get(kind)
    if builder:
        context.update(builder(content))

    template = get_environment().get_template(template_name)
    return Markup(template.render(**context))


def render_blocks(blocks: Iterable[BlockLike]) -> Markup:
    rendered = [render_block(block) for block in blocks or []]
    return Markup("\n").join(html for html in rendered if html)
