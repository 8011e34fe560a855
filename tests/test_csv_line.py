from poi_clean.csv_line import parse_csv_line


def test_plain_fields():
    assert parse_csv_line("way,1,Cafe,10.0,20.0") == ["way", "1", "Cafe", "10.0", "20.0"]


def test_trailing_separator_emits_empty_field():
    assert parse_csv_line("a,b,") == ["a", "b", ""]
    assert parse_csv_line("") == [""]


def test_quoted_separator_and_escaped_quote():
    assert parse_csv_line('node,5,"Bar, ""The"" Pub",1,2') == ["node", "5", 'Bar, "The" Pub', "1", "2"]


def test_line_endings_dropped_outside_quotes():
    assert parse_csv_line("a,b\r\n") == ["a", "b"]


def test_unterminated_quote_runs_to_end_of_line():
    assert parse_csv_line('a,"b,c') == ["a", "b,c"]


def test_carriage_return_kept_inside_quotes():
    assert parse_csv_line('way,"A\rB",1\r') == ["way", "A\rB", "1"]
