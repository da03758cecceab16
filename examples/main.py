from sqlfragment import sql


def main():
    """
    Example usage of the fragment builder.
    """
    person_id = 42
    query = sql(["SELECT name FROM person WHERE id = ", ""], person_id)
    print(query.text)
    print(query.values)

if __name__ == "__main__":
    main()
