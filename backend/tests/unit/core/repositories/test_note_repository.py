"""Tests for NoteRepository against a SQLite database."""

import uuid

import pytest

from noteful.core.models import Tag
from noteful.core.repositories import FolderRepository, NoteRepository, TagRepository
from noteful.core.repositories.note_repository import escape_like


@pytest.fixture
def owner():
    return uuid.uuid4()


async def _tag(session, owner, name):
    return await TagRepository(session).create({"name": name, "owner_id": owner})


def stored_tag_ids(note):
    """Tag references as persisted, dangling ones included."""
    return [note_tag.tag_id for note_tag in note.note_tags]


def test_escape_like():
    assert escape_like("50%_off\\") == "50\\%\\_off\\\\"
    assert escape_like("plain") == "plain"


async def test_create_note_keeps_tag_order(session, owner):
    repo = NoteRepository(session)
    b = await _tag(session, owner, "b")
    a = await _tag(session, owner, "a")

    note = await repo.create_note({"title": "t", "owner_id": owner}, [b.id, a.id])

    assert stored_tag_ids(note) == [b.id, a.id]
    assert [tag.name for tag in note.owned_tags()] == ["b", "a"]


async def test_owned_tags_hide_dangling_and_foreign(session, owner):
    repo = NoteRepository(session)
    mine = await _tag(session, owner, "mine")
    theirs = await _tag(session, uuid.uuid4(), "theirs")
    missing = uuid.uuid4()

    note = await repo.create_note(
        {"title": "t", "owner_id": owner}, [missing, theirs.id, mine.id]
    )

    assert stored_tag_ids(note) == [missing, theirs.id, mine.id]
    assert [tag.id for tag in note.owned_tags()] == [mine.id]


async def test_search_filters(session, owner):
    repo = NoteRepository(session)
    folder = await FolderRepository(session).create({"name": "f", "owner_id": owner})
    tag = await _tag(session, owner, "t")

    first = await repo.create_note({"title": "Shopping list", "owner_id": owner})
    second = await repo.create_note(
        {"title": "shopping receipts", "owner_id": owner, "folder_id": folder.id}, [tag.id]
    )
    await repo.create_note({"title": "Other", "owner_id": owner, "folder_id": folder.id})
    await repo.create_note({"title": "shopping", "owner_id": uuid.uuid4()})

    by_term = await repo.search(owner, search_term="SHOP")
    assert [n.id for n in by_term] == [first.id, second.id]

    by_folder = await repo.search(owner, folder_id=folder.id)
    assert {n.title for n in by_folder} == {"shopping receipts", "Other"}

    by_tag = await repo.search(owner, tag_id=tag.id)
    assert [n.id for n in by_tag] == [second.id]

    combined = await repo.search(owner, search_term="other", tag_id=tag.id)
    assert combined == []


async def test_search_term_is_literal(session, owner):
    repo = NoteRepository(session)
    await repo.create_note({"title": "100% done", "owner_id": owner})
    await repo.create_note({"title": "1000 things", "owner_id": owner})
    await repo.create_note({"title": "a_b", "owner_id": owner})
    await repo.create_note({"title": "axb", "owner_id": owner})

    assert [n.title for n in await repo.search(owner, search_term="0%")] == ["100% done"]
    assert [n.title for n in await repo.search(owner, search_term="_")] == ["a_b"]


async def test_update_owned_does_not_insert(session, owner):
    repo = NoteRepository(session)
    assert await repo.update_owned(uuid.uuid4(), owner, {"title": "x"}) is None
    assert await repo.list_owned(owner) == []


async def test_update_owned_scoped_to_owner(session, owner):
    repo = NoteRepository(session)
    note = await repo.create_note({"title": "mine", "owner_id": owner})

    assert await repo.update_owned(note.id, uuid.uuid4(), {"title": "stolen"}) is None
    updated = await repo.update_owned(note.id, owner, {"title": "renamed"})
    assert updated.title == "renamed"


async def test_replace_tags(session, owner):
    repo = NoteRepository(session)
    a = await _tag(session, owner, "a")
    b = await _tag(session, owner, "b")
    note = await repo.create_note({"title": "t", "owner_id": owner}, [a.id])

    await repo.replace_tags(note.id, [b.id, a.id])
    await session.commit()

    reloaded = await repo.get_owned(note.id, owner)
    assert stored_tag_ids(reloaded) == [b.id, a.id]


async def test_delete_owned_removes_tag_links(session, owner, query_db):
    repo = NoteRepository(session)
    tag = await _tag(session, owner, "a")
    note = await repo.create_note({"title": "t", "owner_id": owner}, [tag.id])

    assert await repo.delete_owned(note.id, uuid.uuid4()) is False
    assert await repo.delete_owned(note.id, owner) is True
    assert await repo.delete_owned(note.id, owner) is False
    assert query_db("SELECT COUNT(*) FROM note_tags") == 0


async def test_detach_folder_only_touches_owner(session, owner):
    repo = NoteRepository(session)
    folder_id = uuid.uuid4()
    other_owner = uuid.uuid4()
    mine = await repo.create_note({"title": "a", "owner_id": owner, "folder_id": folder_id})
    theirs = await repo.create_note(
        {"title": "b", "owner_id": other_owner, "folder_id": folder_id}
    )

    assert await repo.detach_folder(folder_id, owner) == 1
    await session.commit()

    assert (await repo.get_owned(mine.id, owner)).folder_id is None
    assert (await repo.get_owned(theirs.id, other_owner)).folder_id == folder_id


async def test_detach_tag(session, owner):
    repo = NoteRepository(session)
    keep = await _tag(session, owner, "keep")
    drop = await _tag(session, owner, "drop")
    note = await repo.create_note({"title": "t", "owner_id": owner}, [drop.id, keep.id])

    assert await repo.detach_tag(drop.id, owner) == 1
    await session.commit()

    assert stored_tag_ids(await repo.get_owned(note.id, owner)) == [keep.id]


async def test_tag_name_unique_per_owner(session, owner):
    from sqlalchemy.exc import IntegrityError

    await _tag(session, owner, "work")
    await _tag(session, uuid.uuid4(), "work")

    with pytest.raises(IntegrityError):
        await _tag(session, owner, "work")
    await session.rollback()

    assert len(await TagRepository(session).list_owned(owner, Tag.name)) == 1
