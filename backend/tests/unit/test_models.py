"""Column definitions for user supplied text."""

import pytest
from sqlalchemy import Text

from noteful.core.models import Folder, Note, Tag, User


@pytest.mark.parametrize(
    "model, column",
    [
        (Folder, "name"),
        (Tag, "name"),
        (Note, "title"),
        (Note, "content"),
        (User, "username"),
        (User, "fullname"),
    ],
)
def test_text_columns_are_unbounded(model, column):
    # the field rules put no upper bound on these, so neither may the store
    column_type = model.__table__.c[column].type
    assert isinstance(column_type, Text) or column_type.length is None
