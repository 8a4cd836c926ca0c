class CmsError(Exception):
    """Base class for page builder failures surfaced to callers."""


class InvariantViolation(CmsError):
    pass


class PageNotFound(CmsError):
    def __init__(self, slug=None, page_id=None):
        self.slug = slug
        self.page_id = page_id
        key = f"slug '{slug}'" if slug is not None else f"id '{page_id}'"
        super().__init__(f"Page not found for {key}")


class TemplateNotAccessible(CmsError):
    """Reserved authoring-only slug requested through public resolution."""

    def __init__(self, slug):
        self.slug = slug
        super().__init__(f"Template page '{slug}' is not publicly accessible")


class PageNotSelected(CmsError):
    def __init__(self):
        super().__init__("Page ID is required")


class VersionNotFound(CmsError):
    def __init__(self, version_id):
        self.version_id = version_id
        super().__init__(f"Version '{version_id}' not found")


class TemplateNotFound(CmsError):
    def __init__(self, template_id):
        self.template_id = template_id
        super().__init__(f"Unknown block template: {template_id}")
