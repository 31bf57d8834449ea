"""Row-window selection and prompt construction for sheet questions."""

MAX_ROWS_TO_SEND = 150
INSUFFICIENT_DATA = "INSUFFICIENT_DATA"

SYSTEM_PROMPT = (
    "You are an assistant that answers questions only from the provided dataset "
    "about a café's sales. Return concise, accurate answers. If you cannot answer "
    f'from the data, say "{INSUFFICIENT_DATA}". Do not hallucinate.'
)


def select_row_window(rows, max_rows=MAX_ROWS_TO_SEND):
    """
    Keep the header plus the last (max_rows - 1) rows when the table is too big.

    This is positional: it assumes later rows are more recent, even when the
    first column holds dates in some other order.
    """
    rows = list(rows or [])
    if len(rows) <= max_rows:
        return rows
    return [rows[0]] + rows[len(rows) - (max_rows - 1):]


def rows_to_csv(rows):
    # No quoting: a cell containing "," or "\n" bleeds into its neighbours.
    return "\n".join(
        ",".join("" if cell is None else str(cell) for cell in (row or []))
        for row in rows
    )


def build_user_prompt(csv_text, question):
    return f"Dataset (CSV with header on first row):\n{csv_text}\n\nQuestion: {question}\nAnswer:"


def build_messages(csv_text, question):
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": build_user_prompt(csv_text, question)},
    ]
