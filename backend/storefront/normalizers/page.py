def normalize_page(page, admin=False):
    data = {
        "id": page.id,
        "title": page.title,
        "slug": page.slug,
        "is_home": bool(page.is_home),
        "content": page.content or [],
        "meta": {
            "title": page.meta_title,
            "description": page.meta_description,
            "image": page.meta_image,
        },
    }

    if admin:
        data["status"] = page.status
        data["created_at"] = page.created_at.isoformat() if page.created_at else None
        data["updated_at"] = page.updated_at.isoformat() if page.updated_at else None

    return data
