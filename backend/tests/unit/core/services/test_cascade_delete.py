"""Deleting a folder or tag detaches it from notes in the same transaction."""

import uuid

import pytest
from sqlalchemy.exc import OperationalError

from noteful.core.errors import CascadeDeleteError, NotFoundError
from noteful.core.repositories.note_repository import NoteRepository
from noteful.core.schemas.folders import FolderPayload
from noteful.core.schemas.notes import NotePayload
from noteful.core.schemas.tags import TagPayload
from noteful.core.services import FolderService, NoteService, TagService


@pytest.fixture
def owner():
    return uuid.uuid4()


async def _boom(*args, **kwargs):
    raise OperationalError("UPDATE notes", {}, Exception("disk I/O error"))


async def test_folder_delete_detaches_notes(session, owner):
    folder = await FolderService(session).create(owner, FolderPayload(name="f"))
    note = await NoteService(session).create(
        owner, NotePayload(title="t", folder_id=str(folder.id))
    )

    await FolderService(session).delete(str(folder.id), owner)

    # the note survives, only the reference is cleared
    kept = await NoteService(session).get(str(note.id), owner)
    assert kept.folder_id is None


async def test_folder_delete_rolls_back_when_detach_fails(session, owner, monkeypatch):
    folder = await FolderService(session).create(owner, FolderPayload(name="f"))
    await NoteService(session).create(owner, NotePayload(title="t", folder_id=str(folder.id)))
    monkeypatch.setattr(NoteRepository, "detach_folder", _boom)

    with pytest.raises(CascadeDeleteError):
        await FolderService(session).delete(str(folder.id), owner)

    assert (await FolderService(session).get(str(folder.id), owner)).name == "f"


async def test_tag_delete_detaches_notes(session, owner):
    tags = TagService(session)
    keep = await tags.create(owner, TagPayload(name="keep"))
    drop = await tags.create(owner, TagPayload(name="drop"))
    note = await NoteService(session).create(
        owner, NotePayload(title="t", tags=[str(drop.id), str(keep.id)])
    )

    await tags.delete(str(drop.id), owner)

    kept = await NoteService(session).get(str(note.id), owner)
    assert [t.name for t in kept.tags] == ["keep"]


async def test_tag_delete_rolls_back_when_detach_fails(session, owner, monkeypatch):
    tag = await TagService(session).create(owner, TagPayload(name="t"))
    monkeypatch.setattr(NoteRepository, "detach_tag", _boom)

    with pytest.raises(CascadeDeleteError):
        await TagService(session).delete(str(tag.id), owner)

    assert (await TagService(session).get(str(tag.id), owner)).name == "t"


async def test_delete_of_unknown_folder_is_not_found(session, owner):
    with pytest.raises(NotFoundError):
        await FolderService(session).delete(str(uuid.uuid4()), owner)


async def test_other_owners_notes_untouched(session, owner):
    other = uuid.uuid4()
    folder = await FolderService(session).create(owner, FolderPayload(name="f"))
    # another owner may hold a note pointing at the same id
    theirs = await NoteService(session).create(
        other, NotePayload(title="t", folder_id=str(folder.id))
    )

    await FolderService(session).delete(str(folder.id), owner)

    assert (await NoteService(session).get(str(theirs.id), other)).folder_id == folder.id
