from sqlalchemy import CheckConstraint, UniqueConstraint

from backend.app.db.base import Base
from backend.app.db import models


def test_tables_registered():
    tables = Base.metadata.tables
    expected = {"posts", "people", "emails"}
    assert expected.issubset(set(tables.keys()))


def test_people_check_constraints_cover_enums():
    constraints = {
        c.name: str(c.sqltext)
        for c in models.Person.__table__.constraints
        if isinstance(c, CheckConstraint)
    }
    assert constraints["ck_people_role"] == "role IN ('user', 'admin')"
    assert "'female'" in constraints["ck_people_gender"]


def test_unique_columns_get_conventional_names():
    def unique_names(table):
        return {c.name for c in table.constraints if isinstance(c, UniqueConstraint)}

    assert "uq_people_username" in unique_names(models.Person.__table__)
    assert "uq_emails_address" in unique_names(models.Email.__table__)
