from collections.abc import Mapping
from storefront.domain.exceptions import InvariantViolation

def assert_block(block, position=None):
    where = f" at position {position}" if position is not None else ""

    if not isinstance(block, Mapping):
        raise InvariantViolation(f"Block{where} must be an object.")

    for field in ("id", "type"):
        value = block.get(field)
        if not isinstance(value, str) or not value:
            raise InvariantViolation(
                f"Block{where} must have a non-empty string '{field}'."
            )

    content = block.get("content")
    if content is not None and not isinstance(content, Mapping):
        raise InvariantViolation(
            f"{block['type']} block{where} content must be an object."
        )

def assert_block_list(blocks):
    """
    Shape check for a persisted block list.
    Content payloads stay opaque; only id/type are inspected.
    """
    if not isinstance(blocks, (list, tuple)):
        raise InvariantViolation("Page content must be a list of blocks.")

    seen = set()
    for position, block in enumerate(blocks):
        assert_block(block, position)

        if block["id"] in seen:
            raise InvariantViolation(
                f"Duplicate block id '{block['id']}' in page content."
            )
        seen.add(block["id"])
