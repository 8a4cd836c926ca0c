import logging
from contextlib import contextmanager
from storefront.extensions import db

logger = logging.getLogger(__name__)


@contextmanager
def transactional(session=None):
    """
    Commit the page store session on success, roll back and re-raise
    on any failure. Nothing is partially written.
    """
    session = session or db.session
    try:
        yield session
        session.commit()
    except Exception as error:
        session.rollback()
        logger.debug("Rolled back page store transaction: %r", error)
        raise
