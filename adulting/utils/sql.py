from adulting.errors import BadRequestError


def _quote_identifier(name: str) -> str:
    return '"' + str(name).replace('"', '""') + '"'


def sql_for_partial_update(data_to_update: dict, js_to_sql: dict):
    """Build the SET clause of a partial UPDATE.

    ``data_to_update`` maps request field names to new values, and
    ``js_to_sql`` maps request field names to column names where the two
    differ, e.g. ``{"firstName": "first_name"}``.

    Returns ``(set_cols, values)``::

        >>> sql_for_partial_update({"firstName": "Jess"}, {"firstName": "first_name"})
        ('"first_name"=$1', ['Jess'])

    ``values[i - 1]`` is the value for placeholder ``$i``.
    """
    keys = list(data_to_update.keys())
    if not keys:
        raise BadRequestError("No data")

    cols = [
        f"{_quote_identifier(js_to_sql.get(col_name, col_name))}=${idx}"
        for idx, col_name in enumerate(keys, start=1)
    ]

    return ", ".join(cols), [data_to_update[key] for key in keys]
