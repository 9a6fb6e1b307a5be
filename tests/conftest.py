# tests/conftest.py
import os
import sys
import tempfile

_db_dir = None


def pytest_configure(config):
    global _db_dir
    # must run before ticket_portal.core.config caches its settings
    _db_dir = tempfile.TemporaryDirectory(ignore_cleanup_errors=True)
    os.environ["DATABASE_URL"] = f"sqlite:///{_db_dir.name}/tickets.db"
    os.environ["TICKETS_API_URL"] = "http://backend.test/api/tickets"


def pytest_unconfigure(config):
    database = sys.modules.get("ticket_portal.backend.database")
    if database is not None:
        database.engine.dispose()
    if _db_dir is not None:
        _db_dir.cleanup()
