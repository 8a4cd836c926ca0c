import pytest
from storefront.domain.blocks import (
    DEFAULT_GALLERY_IMAGES,
    Block,
    BlockType,
    ColumnsContent,
    GalleryContent,
    HeroContent,
    content_model_for,
    parse_content,
)
from storefront.domain.block_templates import (
    BLOCK_TEMPLATES,
    instantiate_template,
    list_templates,
)
from storefront.domain.exceptions import InvariantViolation, TemplateNotFound
from storefront.domain.invariants.block import assert_block_list


def test_every_block_type_has_a_content_model():
    for kind in BlockType:
        assert content_model_for(kind.value) is not None


def test_unknown_type_has_no_content_model():
    block = Block(id="x", type="carousel-3d")

    assert block.kind is None
    assert content_model_for("carousel-3d") is None
    assert parse_content(block) is None


def test_unknown_type_survives_round_trip():
    raw = {"id": "x", "type": "carousel-3d", "content": {"speed": 3}}

    assert Block.model_validate(raw).model_dump() == raw


def test_null_content_becomes_empty_mapping():
    assert Block.model_validate({"id": "x", "type": "text", "content": None}).content == {}


def test_missing_gallery_images_fall_back_to_placeholders():
    content = GalleryContent.model_validate({"title": "Lookbook"})

    assert [image.url for image in content.images] == [i["url"] for i in DEFAULT_GALLERY_IMAGES]
    assert content.columns == 3


def test_camel_case_keys_and_empty_values():
    content = HeroContent.model_validate({
        "autoPlay": True,
        "overlayOpacity": None,
        "slides": [{"title": "", "button1Text": "Shop", "button1Link": "/products"}],
    })

    assert content.auto_play is True
    assert content.overlay_opacity == 0.5
    assert content.slides[0].title == "Hero Title"
    assert content.slides[0].button1_text == "Shop"


def test_empty_item_list_is_kept():
    content = parse_content(Block(id="f", type="faq", content={"items": []}))

    assert content.items == []


def test_columns_are_padded_to_column_count():
    content = ColumnsContent.model_validate({"columns": 3, "items": [{"title": "Only"}]})

    titles = [item.title for item in content.display_items()]
    assert titles == ["Only", "Column 2", "Column 3"]


def test_block_list_accepts_id_and_type_only():
    assert_block_list([{"id": "a", "type": "hero"}, {"id": "b", "type": "whatever", "content": {}}])
    assert_block_list([])


@pytest.mark.parametrize("blocks", [
    {"id": "a", "type": "hero"},
    [{"type": "hero"}],
    [{"id": "a", "type": ""}],
    [{"id": 1, "type": "hero"}],
    [{"id": "a", "type": "hero", "content": ["not", "a", "map"]}],
    ["hero"],
    [{"id": "a", "type": "hero"}, {"id": "a", "type": "faq"}],
])
def test_block_list_rejects_malformed_shapes(blocks):
    with pytest.raises(InvariantViolation):
        assert_block_list(blocks)


def test_instantiated_templates_get_fresh_ids_and_copied_content():
    first = instantiate_template("contact-section")
    second = instantiate_template("contact-section")

    assert [b["type"] for b in first] == ["map", "faq"]
    assert {b["id"] for b in first}.isdisjoint({b["id"] for b in second})

    first[1]["content"]["items"].clear()
    assert second[1]["content"]["items"]
    assert BLOCK_TEMPLATES[-1]["blocks"][1]["content"]["items"]


def test_template_blocks_parse_with_their_content_models():
    for template in BLOCK_TEMPLATES:
        for block in instantiate_template(template["id"]):
            assert parse_content(Block.model_validate(block)) is not None


def test_templates_filter_by_category():
    assert {t["id"] for t in list_templates("content")} == {"about-section", "contact-section"}
    assert len(list_templates()) == len(BLOCK_TEMPLATES)


def test_unknown_template_id():
    with pytest.raises(TemplateNotFound):
        instantiate_template("nope")


def test_listed_templates_are_copies():
    listed = list_templates()
    listed[0]["blocks"].clear()
    listed[0]["name"] = "Renamed"

    assert BLOCK_TEMPLATES[0]["blocks"]
    assert list_templates()[0]["name"] != "Renamed"


def test_zero_column_counts_fall_back_to_defaults():
    gallery = GalleryContent.model_validate({"columns": 0})
    columns = ColumnsContent.model_validate({"columns": 0})

    assert gallery.columns == 3
    assert columns.columns == 2
    assert len(columns.display_items()) == 2
