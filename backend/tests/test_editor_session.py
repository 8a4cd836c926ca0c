import pytest
from storefront.application.cms.editor_session import EditorSession, array_move
from storefront.domain.exceptions import PageNotFound
from storefront.extensions import db
from storefront.models.page import Page


@pytest.fixture
def session(make_page, hero_block, faq_block):
    page = make_page(content=[hero_block, faq_block])
    editor = EditorSession(page.id)
    editor.load()
    return editor


def _ids(blocks):
    return [block["id"] for block in blocks]


def test_load_starts_with_clean_history(session, hero_block, faq_block):
    assert session.blocks == [hero_block, faq_block]
    assert not session.can_undo
    assert not session.can_redo


def test_first_edit_after_load_is_undoable(session):
    session.add_block("spacer")

    assert session.can_undo
    session.undo()
    assert _ids(session.blocks) == ["a", "b"]


def test_load_unknown_page(app):
    with pytest.raises(PageNotFound):
        EditorSession("missing").load()


def test_add_block_appends_with_default_content(session):
    block_id = session.add_block("newsletter", {"title": "Join"})

    assert _ids(session.blocks) == ["a", "b", block_id]
    assert session.blocks[-1] == {"id": block_id, "type": "newsletter", "content": {"title": "Join"}}


def test_move_block(session):
    session.move_block("b", 0)

    assert _ids(session.blocks) == ["b", "a"]
    session.undo()
    assert _ids(session.blocks) == ["a", "b"]


def test_update_block_content(session):
    session.update_block("a", {"slides": [{"title": "New"}]})

    assert session.blocks[0]["content"] == {"slides": [{"title": "New"}]}
    assert session.blocks[1]["content"] == {}


def test_unknown_block_ids_are_no_ops(session):
    session.move_block("zzz", 0)
    session.update_block("zzz", {"x": 1})
    session.remove_block("zzz")

    assert _ids(session.blocks) == ["a", "b"]
    assert not session.can_undo


def test_remove_then_redo(session):
    session.remove_block("a")
    session.undo()
    assert _ids(session.blocks) == ["a", "b"]

    session.redo()
    assert _ids(session.blocks) == ["b"]


def test_insert_template_at_index(session):
    ids = session.insert_template("newsletter-cta", index=1)

    assert [b["type"] for b in session.blocks] == ["hero", "countdown", "newsletter", "faq"]
    assert _ids(session.blocks)[1:3] == ids

    session.undo()
    assert _ids(session.blocks) == ["a", "b"]


def test_edits_are_not_persisted_until_save(session):
    session.remove_block("a")
    assert _ids(db.session.get(Page, session.page_id).content) == ["a", "b"]

    session.save({"meta_title": "Saved"})

    page = db.session.get(Page, session.page_id)
    assert _ids(page.content) == ["b"]
    assert page.meta_title == "Saved"


def test_save_version_uses_current_blocks(session):
    session.add_block("text")

    version = session.save_version(meta_title="Draft one")

    assert version.version_number == 1
    assert version.content == session.blocks
    assert session.version_store.versions[0].id == version.id


def test_restore_version_keeps_in_memory_history(session, faq_block):
    version = session.save_version()
    session.remove_block("a")
    session.save()

    page = session.restore_version(version.id)

    assert _ids(page.content) == ["a", "b"]
    assert _ids(session.blocks) == ["b"]
    assert session.can_undo


def test_array_move():
    assert array_move([1, 2, 3], 0, 2) == [2, 3, 1]
    assert array_move([1, 2, 3], 2, 0) == [3, 1, 2]
