import re
import sqlite3

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event, text
from sqlalchemy.engine import Engine


db = SQLAlchemy()

_POSITIONAL_PARAM = re.compile(r"\$(\d+)")


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless this is set per connection.
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def run_query(session, sql: str, params=()):
    """Execute ``sql`` written with ``$1, $2, ...`` placeholders.

    ``params[i - 1]`` is bound to ``$i``. Placeholders are rewritten to
    SQLAlchemy named binds, so values never reach the SQL text.
    """
    params = list(params)

    def _bind_name(match):
        position = int(match.group(1))
        if position < 1 or position > len(params):
            raise IndexError(f"No value for placeholder ${position}")
        return f":p{position}"

    statement = _POSITIONAL_PARAM.sub(_bind_name, sql)
    bindings = {f"p{idx}": value for idx, value in enumerate(params, start=1)}
    return session.execute(text(statement), bindings)
