import copy
from storefront.extensions import db


def snapshot_blocks(blocks):
    """Detached copy of a block list, safe to persist or keep in memory."""
    return copy.deepcopy(list(blocks or []))


def next_version(page_id):
    from storefront.models.page_version import PageVersion

    last = (
        db.session.query(db.func.max(PageVersion.version_number))
        .filter(PageVersion.page_id == page_id)
        .scalar()
    )
    return (last + 1) if last else 1
