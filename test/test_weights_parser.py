import pytest

from boundary import WeightTriple, load_weight_sequence, parse_weight_sequence, weights_to_csv


def test_header_skipped_and_malformed_row_dropped():
    text = "w0,w1,w2\n1,2,3\nbad,row\n4,5,6"
    assert parse_weight_sequence(text) == (WeightTriple(1, 2, 3), WeightTriple(4, 5, 6))


@pytest.mark.parametrize("text", ["", "   ", "\n\n\r\n", "w0,w1,w2"])
def test_empty_input_gives_empty_sequence(text):
    assert parse_weight_sequence(text) == ()


def test_header_detection_is_case_insensitive():
    text = "Bias W0 ; W1 ; W2\n0.5,-1,2"
    assert parse_weight_sequence(text) == (WeightTriple(0.5, -1.0, 2.0),)


def test_first_line_without_all_names_is_data():
    assert parse_weight_sequence("1,2,3\n4,5,6") == (WeightTriple(1, 2, 3), WeightTriple(4, 5, 6))


def test_mixed_line_endings_and_whitespace():
    text = "  w0 , w1 , w2 \r\n\r\n 1 , 2 ,3\r4,  5,6  \n\n"
    assert parse_weight_sequence(text) == (WeightTriple(1, 2, 3), WeightTriple(4, 5, 6))


def test_extra_fields_are_ignored():
    assert parse_weight_sequence("1,2,3,99,foo") == (WeightTriple(1, 2, 3),)


@pytest.mark.parametrize(
    "row",
    ["1,2", "1,,3", "1,x,3", "nan,1,2", "1,inf,2", "1,2,-Infinity", ",,"],
)
def test_bad_rows_are_dropped(row):
    assert parse_weight_sequence(f"{row}\n7,8,9") == (WeightTriple(7, 8, 9),)


def test_scientific_notation():
    assert parse_weight_sequence("1e-3,-2.5E2,+4") == (WeightTriple(0.001, -250.0, 4.0),)


def test_non_string_input_is_a_caller_error():
    with pytest.raises(TypeError):
        parse_weight_sequence(None)


def test_csv_round_trip_is_exact():
    weights = (
        WeightTriple(0.1, -0.2, 0.30000000000000004),
        WeightTriple(-1e-300, 123456789.123, 0.0),
        WeightTriple(2.0, 1 / 3, -7.5),
    )
    text = weights_to_csv(weights)

    assert text.splitlines()[0] == "w0,w1,w2"
    assert parse_weight_sequence(text) == weights


def test_load_weight_sequence_from_file(tmp_path):
    path = tmp_path / "weights.csv"
    path.write_text("w0,w1,w2\n0,1,1\n0,1,0.5\n")
    assert load_weight_sequence(path) == (WeightTriple(0, 1, 1), WeightTriple(0, 1, 0.5))


def test_load_weight_sequence_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_weight_sequence(tmp_path / "missing.csv")
