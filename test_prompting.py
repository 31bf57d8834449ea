from prompting import (
    INSUFFICIENT_DATA,
    MAX_ROWS_TO_SEND,
    SYSTEM_PROMPT,
    build_messages,
    rows_to_csv,
    select_row_window,
)


def test_window_keeps_short_tables():
    rows = [["h"], ["1"], ["2"]]
    assert select_row_window(rows) == rows


def test_window_at_threshold_is_untouched():
    rows = [[str(i)] for i in range(MAX_ROWS_TO_SEND)]
    assert select_row_window(rows) == rows


def test_window_one_over_threshold_drops_first_data_row():
    rows = [["h"]] + [[str(i)] for i in range(MAX_ROWS_TO_SEND)]

    window = select_row_window(rows)

    assert len(window) == MAX_ROWS_TO_SEND
    assert window[0] == ["h"]
    assert window[1] == ["1"]
    assert window[-1] == [str(MAX_ROWS_TO_SEND - 1)]


def test_window_is_positional_not_by_date():
    # Dates out of order stay out of order; only the tail is kept.
    rows = [["Date"], ["2024-12-31"], ["2024-01-01"], ["2024-06-01"]]
    assert select_row_window(rows, max_rows=3) == [["Date"], ["2024-01-01"], ["2024-06-01"]]


def test_window_handles_none():
    assert select_row_window(None) == []


def test_csv_rendering():
    assert rows_to_csv([["a", "b"], ["1", None], [None, 2]]) == "a,b\n1,\n,2"


def test_csv_does_not_quote_delimiters():
    assert rows_to_csv([["x,y", "line\nbreak"]]) == "x,y,line\nbreak"


def test_csv_ragged_and_empty_rows():
    assert rows_to_csv([["a", "b", "c"], ["1"], []]) == "a,b,c\n1\n"
    assert rows_to_csv([]) == ""


def test_messages():
    messages = build_messages("a,b\n1,2", "What is b?")

    assert [m["role"] for m in messages] == ["system", "user"]
    assert messages[0]["content"] == SYSTEM_PROMPT
    assert f'"{INSUFFICIENT_DATA}"' in SYSTEM_PROMPT
    assert messages[1]["content"].endswith("a,b\n1,2\n\nQuestion: What is b?\nAnswer:")
