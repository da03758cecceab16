from sqlfragment import FragmentSettings, PlaceholderCompiler, identifier, join, join_queries, sql


def main() -> None:
    # Syntax-only example: compose fragments and compile them with two prefixes.
    table_name = "person"
    conditions = [
        sql(["first_name = ", ""], "Bob"),
        sql(["last_name = ", ""], "Smith"),
        "birthday IS NOT NULL",
    ]
    query = sql(
        ["\n    SELECT name\n    FROM ", "\n    WHERE ", "\n      OR id IN (", ")\n    ORDER BY birthday ASC\n"],
        identifier(table_name),
        join_queries(conditions, " AND "),
        join([31, 45, 22], ", "),
    )

    dollar_compiled = PlaceholderCompiler(FragmentSettings(pretty=True)).compile(query)
    question_compiled = PlaceholderCompiler(FragmentSettings(placeholder_prefix="?")).compile(query)

    print("Dollar SQL:\n" + dollar_compiled.sql)
    print("Dollar params:", dollar_compiled.params)
    print("Numbered ? SQL:", question_compiled.sql)
    print("Numbered ? params:", question_compiled.params)

    # Split a WHERE clause back into its conditions.
    for piece in sql("WHERE a = ", 1, " AND b = ", 2).split("AND"):
        print(repr(piece.text), piece.values)


if __name__ == "__main__":
    main()
