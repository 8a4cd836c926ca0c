def normalize_version(version, include_content=False):
    data = {
        "id": version.id,
        "page_id": version.page_id,
        "version_number": version.version_number,
        "meta_title": version.meta_title,
        "description": version.description,
        "meta_image": version.meta_image,
        "created_at": version.created_at.isoformat() if version.created_at else None,
        "created_by": version.created_by,
    }

    if include_content:
        data["content"] = version.content or []

    return data
