"""
Point the app at a throwaway SQLite file (unless DB_URL is already set, e.g.
to a Postgres test database) and create the schema before any test module
imports the app.
"""
import os
import tempfile

_tmp = tempfile.mkdtemp(prefix="gymtracker-tests-")
os.environ.setdefault("DB_URL", f"sqlite:///{os.path.join(_tmp, 'test.db')}")

from gymtracker.db import Base, engine  # noqa: E402
from gymtracker import models  # noqa: E402,F401

Base.metadata.create_all(engine)
