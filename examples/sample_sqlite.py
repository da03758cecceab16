import os
import sqlite3

from dotenv import load_dotenv

from sqlfragment import FragmentSettings, PlaceholderCompiler, build, identifier, join, sql


def main():
    load_dotenv()

    # Database path (defaults to an in-memory database)
    db_path = os.getenv("SQLITE_DB_PATH", ":memory:")

    # SQLite accepts ?NNN numbered parameters
    compiler = PlaceholderCompiler(FragmentSettings(placeholder_prefix="?"))
    connection = sqlite3.connect(db_path)

    def run(fragment):
        compiled = compiler.compile(fragment)
        return connection.execute(compiled.sql, compiled.params).fetchall()

    users = identifier("sample_users")

    try:
        print("Creating table 'sample_users'...")
        run(sql(["CREATE TABLE IF NOT EXISTS ", " (id INTEGER PRIMARY KEY, name TEXT NOT NULL, age INTEGER)"], users))

        print("Inserting sample data...")
        users_data = [
            ("Alice", 30),
            ("Bob", 25),
            ("Charlie", 35),
        ]
        for name, age in users_data:
            run(build("INSERT INTO ", users, " (name, age) VALUES (", join([name, age], ", "), ")"))

        print("Querying users older than 26...")
        rows = run(sql(["SELECT name, age FROM ", " WHERE age > ", " ORDER BY age"], users, 26))
        for row in rows:
            print(row)

        run(sql(["DROP TABLE ", ""], users))
    finally:
        connection.close()

if __name__ == "__main__":
    main()
