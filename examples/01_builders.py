"""Example: Building and running INSERT / UPDATE / DELETE statements.

This example demonstrates:
- Single-row statements with the default ``?`` placeholders
- ``$N`` placeholders for PostgreSQL-style drivers
- Multi-row inserts with missing values
- Running statements through SQLAlchemy, inside and outside a transaction
"""

from sqlalchemy import create_engine

from dmlkit import DELETE, INSERT, UPDATE, Builder, MultiBuilder, NumericProcessor, SQLAlchemyExecutor

engine = create_engine("sqlite:///:memory:")
with engine.begin() as conn:
    conn.exec_driver_sql("CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT, age INTEGER)")

executor = SQLAlchemyExecutor(engine)

# ============================================================================
# Rendering
# ============================================================================

b = Builder("users").add("name", "Alice").add("age", 30).where("id = ? and name <> 'who?'", 1)
print(b.output_all(UPDATE))
# ("UPDATE users SET name=?, age=? WHERE id = ? and name <> 'who?'", ['Alice', 30, 1])

pg = Builder("users", NumericProcessor()).add("name", "Alice").where("id = ?", 1)
print(pg.output(UPDATE))
# UPDATE users SET name=$1 WHERE id = $2

# Without a WHERE fragment UPDATE and DELETE render nothing
print(repr(Builder("users").output(DELETE)))
# ''

# ============================================================================
# Execution
# ============================================================================

Builder("users").add("id", 1).add("name", "Alice").add("age", 30).execute(executor, INSERT)

mb = MultiBuilder("users", ["id", "name", "age"])
mb.create_data().add("id", 2).add("name", "Bob").add("age", 25)
mb.create_data().add("id", 3).add("name", "Carol")  # age is sent as NULL
print(mb.output())
mb.execute(executor)

with engine.connect() as conn:
    with conn.begin():
        tx = SQLAlchemyExecutor(conn)
        Builder("users").add("age", 26).where("id = ?", 2).execute_tx(tx, UPDATE)
        Builder("users").where("age IS NULL").execute_tx(tx, DELETE)

with engine.connect() as conn:
    for row in conn.exec_driver_sql("SELECT * FROM users ORDER BY id"):
        print(tuple(row))
# (1, 'Alice', 30)
# (2, 'Bob', 26)
