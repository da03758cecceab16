from sqlfragment.fragment import Fragment, build, identifier, join, join_queries, sql

# ==============================================================================
# 1. Basic Lifecycle (CRUD)
# ==============================================================================


def test_basic_crud_lifecycle(run_fragment, create_table):
    people = create_table("integration_people", "id INTEGER PRIMARY KEY, name TEXT NOT NULL, age INTEGER")

    run_fragment(sql(["INSERT INTO ", " (name, age) VALUES (", ", ", ")"], people, "Alice", 30))
    run_fragment(build("INSERT INTO ", people, " (name, age) VALUES (", "Bob", ", ", 25, ")"))

    rows = run_fragment(sql(["SELECT name, age FROM ", " ORDER BY age"], people))
    assert rows == [("Bob", 25), ("Alice", 30)]

    run_fragment(sql(["UPDATE ", " SET age = ", " WHERE name = ", ""], people, 31, "Alice"))
    rows = run_fragment(sql(["SELECT age FROM ", " WHERE name = ", ""], people, "Alice"))
    assert rows == [(31,)]

    run_fragment(sql(["DELETE FROM ", " WHERE age < ", ""], people, 30))
    rows = run_fragment(sql(["SELECT name FROM ", ""], people))
    assert rows == [("Alice",)]


# ==============================================================================
# 2. Composition
# ==============================================================================


def test_composed_conditions(run_fragment, create_table):
    people = create_table("integration_person", "first_name TEXT, last_name TEXT, birthday TEXT")
    for first_name, last_name, birthday in [
        ("Bob", "Smith", "1990-01-01"),
        ("Bob", "Jones", None),
        ("Ann", "Smith", "1985-05-05"),
    ]:
        run_fragment(
            sql(
                ["INSERT INTO ", " VALUES (", ")"],
                people,
                join([first_name, last_name, birthday], ", "),
            )
        )

    conditions = [
        sql(["first_name = ", ""], "Bob"),
        sql(["last_name = ", ""], "Smith"),
        "birthday IS NOT NULL",
    ]
    query = sql(
        ["\n        SELECT first_name, last_name\n        FROM ", "\n        WHERE ", "\n        ORDER BY last_name\n    "],
        people,
        join_queries(conditions, " AND "),
    )

    assert run_fragment(query) == [("Bob", "Smith")]


def test_in_list_from_joined_values(run_fragment, create_table):
    numbers = create_table("integration_numbers", "id INTEGER PRIMARY KEY")
    for value in range(1, 6):
        run_fragment(sql(["INSERT INTO ", " (id) VALUES (", ")"], numbers, value))

    query = sql(["SELECT id FROM ", " WHERE id IN (", ") ORDER BY id"], numbers, join([2, 4, 5], ", "))

    assert run_fragment(query) == [(2,), (4,), (5,)]


def test_multi_row_insert(run_fragment, create_table):
    letters = create_table("integration_letters", "letter TEXT")
    rows = join_queries([sql(["(", ")"], letter) for letter in "abc"], ", ")

    run_fragment(sql(["INSERT INTO ", " (letter) VALUES ", ""], letters, rows))

    assert run_fragment(sql(["SELECT letter FROM ", " ORDER BY letter"], letters)) == [("a",), ("b",), ("c",)]


# ==============================================================================
# 3. Injection Safety & Identifiers
# ==============================================================================


def test_bound_values_are_not_interpreted_as_sql(run_fragment, create_table):
    notes = create_table("integration_notes", "body TEXT")
    payload = "x'); DROP TABLE integration_notes; --"

    run_fragment(sql(["INSERT INTO ", " (body) VALUES (", ")"], notes, payload))

    assert run_fragment(sql(["SELECT body FROM ", ""], notes)) == [(payload,)]


def test_quoted_identifiers_with_embedded_quotes(run_fragment, create_table):
    odd = create_table('odd"table', '"weird""column" INTEGER')

    run_fragment(sql(["INSERT INTO ", " (", ") VALUES (", ")"], odd, identifier('weird"column'), 7))
    rows = run_fragment(sql(["SELECT ", " FROM ", ""], identifier('odd"table', 'weird"column'), odd))

    assert rows == [(7,)]


# ==============================================================================
# 4. Split Pieces Execute Independently
# ==============================================================================


def test_split_statements_run_with_their_own_parameters(run_fragment, create_table):
    events = create_table("integration_events", "name TEXT, weight INTEGER")
    script = sql(
        ["INSERT INTO ", " VALUES (", ", ", "); INSERT INTO ", " VALUES (", ", ", ")"],
        events,
        "first",
        1,
        events,
        "second",
        2,
    )

    statements = [statement for statement in script.split(";") if not statement.is_whitespace_only()]
    assert len(statements) == 2
    assert all(isinstance(statement, Fragment) for statement in statements)

    for statement in statements:
        run_fragment(statement)

    rows = run_fragment(sql(["SELECT name, weight FROM ", " ORDER BY weight"], events))
    assert rows == [("first", 1), ("second", 2)]
