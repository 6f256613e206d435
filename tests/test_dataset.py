import pytest

from knnlite.dataset import Dataset, DatasetError, euclidean_distance, load_csv


@pytest.fixture
def sample():
    return Dataset(
        ["label", "a", "b", "c"],
        [[1, 10, 11, 12], [2, 20, 21, 22], [3, 30, 31, 32]],
    )


def test_load_csv_reads_header_and_rows(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("label,p1,p2\n1,5,6\n0,7,8\n")
    data = load_csv(path)
    assert data.columns == ["label", "p1", "p2"]
    assert data.rows == [[1, 5, 6], [0, 7, 8]]


def test_load_csv_stops_at_non_integer(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("a,b,c\n1,x,3\n4,5,6\n")
    data = load_csv(path)
    assert data.rows == [[1], [4, 5, 6]]


def test_load_csv_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_csv(tmp_path / "absent.csv")


def test_len_iter_and_shape(sample):
    assert len(sample) == 3
    assert list(sample) == sample.rows
    assert sample.shape() == (3, 4)


def test_shape_of_empty_raises():
    with pytest.raises(DatasetError):
        Dataset().shape()


def test_head_limits_rows_and_columns(sample):
    assert sample.head(2, 2) == "label a\n1 10\n2 20"


def test_head_nonpositive_is_empty(sample):
    assert sample.head(0, 3) == ""
    assert sample.tail(3, 0) == ""


def test_tail_more_than_available(sample):
    lines = sample.tail(10, 10).splitlines()
    assert lines[0] == "label a b c"
    assert len(lines) == 1 + len(sample)


def test_drop_row(sample):
    assert sample.drop(0, 1) is True
    assert sample.rows == [[1, 10, 11, 12], [3, 30, 31, 32]]
    assert sample.drop(0, 5) is False


def test_drop_column(sample):
    assert sample.drop(1, column="a") is True
    assert sample.columns == ["label", "b", "c"]
    assert sample.rows[0] == [1, 11, 12]
    assert sample.drop(1, column="missing") is False


def test_drop_bad_axis_and_empty(sample):
    assert sample.drop(2) is False
    assert Dataset(["x"], []).drop(0, 0) is False


def test_drop_last_column_clears_rows():
    data = Dataset(["only"], [[1], [2]])
    assert data.drop(1, column="only") is True
    assert data.rows == []
    assert data.columns == []


def test_extract_slices(sample):
    part = sample.extract(1, 2, 1, 2)
    assert part.columns == ["a", "b"]
    assert part.rows == [[20, 21], [30, 31]]


def test_extract_defaults_copy(sample):
    copy = sample.extract()
    assert copy == sample
    copy.rows[0][0] = 99
    assert sample.rows[0][0] == 1


def test_extract_of_empty_is_empty():
    assert Dataset().extract(3, 1) == Dataset()


@pytest.mark.parametrize(
    "args",
    [(5, -1, 0, -1), (0, -1, 9, -1), (2, 1, 0, -1), (-1, -1, 0, -1), (0, -1, 3, 1)],
)
def test_extract_bad_ranges(sample, args):
    with pytest.raises(DatasetError):
        sample.extract(*args)


def test_score(sample):
    predicted = Dataset(["label"], [[1], [0], [3]])
    assert sample.score(predicted) == pytest.approx(2 / 3)
    assert sample.score(sample) == 1.0


def test_score_mismatched_is_minus_one(sample):
    assert sample.score(Dataset(["label"], [[1]])) == -1
    assert Dataset().score(sample) == -1


def test_euclidean_distance():
    assert euclidean_distance([0, 0], [3, 4]) == pytest.approx(5.0)
    assert euclidean_distance([], []) == 0
    assert euclidean_distance([3, 4], []) == euclidean_distance([0, 0], [3, 4])
    assert euclidean_distance([1, 2], [1, 2, 0]) == 0