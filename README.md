# knnlite

A small k-nearest-neighbours classifier for datasets of whole numbers,
such as the MNIST digits in CSV form: a header line of column names,
followed by one comma-separated row of integers per sample.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Command line

```
knnlite [path] [-k K] [--test-size FRACTION]
```

- `path` is the CSV file to load. It defaults to `mnist.csv`.
- `-k`, `--k` sets the number of neighbours. The default is 5.
- `--test-size` sets the fraction of rows held back for testing. The
  default is 0.2.

The command loads the file and prints a preview of its first rows and
columns and of its last rows and columns. It then prints the shape as
`Shape: <rows>x<cols>`. It takes the first column as the label and the
remaining columns as features, and holds back the last part of the rows
for testing. It fits a classifier and prints `Accuracy: <value>`.

If the file cannot be read, the dataset is empty, `k` is larger than the
number of training rows, or the test size is not strictly between 0 and
1, the command prints a message to standard error and exits with
status 1.

## Library

```python
from knnlite.dataset import load_csv
from knnlite.knn import KNN, train_test_split

data = load_csv("mnist.csv")
print(data.shape())

features = data.extract(0, -1, 1, -1)
labels = data.extract(0, -1, 0, 0)

x_train, x_test, y_train, y_test = train_test_split(features, labels, 0.2)

model = KNN(5)
model.fit(x_train, y_train)
y_pred = model.predict(x_test)
print("Accuracy:", model.score(y_test, y_pred))
```

### Loading

`load_csv(path)` reads the file as whitespace-separated tokens. The
first token is the header, and its comma-separated parts become the
column names. Each later token becomes one row. A row is read value by
value, and reading stops at the first value that is not a whole number.
Lines must therefore not contain spaces. An empty file gives an empty
dataset.

### Datasets

`Dataset(columns, rows)` holds a list of column names and a list of rows
of integers. Both arguments are copied.

- `len(dataset)` is the number of rows. Iterating over a dataset yields
  its rows.
- `shape()` returns `(rows, values in the first row)`. It raises
  `DatasetError` if there are no rows.
- `head(n_rows=5, n_cols=5)` returns the column names and the first
  rows, cut to the first columns, as text with one line per row.
- `tail(n_rows=5, n_cols=5)` does the same for the last rows and the
  last columns. If `n_cols` is larger than the number of column names,
  it shows the first columns instead. Both methods return an empty
  string when either count is not positive.
- `extract(start_row=0, end_row=-1, start_col=0, end_col=-1)` returns a
  new dataset holding a block of rows and columns. The end bounds are
  inclusive. An end of `-1`, or one past the data, means up to the last
  row or column. A start that is negative, lies past the data, or comes
  after its end raises `DatasetError`. An empty dataset extracts to an
  empty dataset.
- `drop(axis=0, index=0, column="")` removes a row by index (axis 0) or
  a column by name (axis 1). Dropping the only column also removes
  every row. It returns whether anything was dropped.
- `score(predicted)` returns the share of rows whose first value equals
  the first value of the same row in `predicted`. It returns `-1.0` if
  either dataset is empty or they differ in length.

`DatasetError` is a subclass of `IndexError`.

`euclidean_distance(a, b)` measures the distance between two rows. When
one row is shorter than the other, its missing values count as zero.

### Classifier

`KNN(k=5)` keeps copies of the training data given to
`fit(x_train, y_train)`. `predict(x_test)` labels each test row by
majority vote among its `k` nearest training rows, using the first value
of each label row. A tie in the vote goes to the smallest label. The
result is a dataset with one single-value row per test row. Its column
name is the first column name of the training labels.
`score(y_test, y_pred)` is `y_test.score(y_pred)`.

`predict_labels(x_test, x_train, y_train, k)` does the same work without
a model object. It returns an empty dataset when any input is empty or
`k` is not positive. It raises `DatasetError` when `k` is larger than the
number of training rows.

`train_test_split(x, y, test_size)` returns
`(x_train, x_test, y_train, y_test)`. It splits in order, without
shuffling. The first `1 - test_size` share of rows goes to training and
the rest goes to testing. It raises `ValueError` if `x` and `y` differ in
length or `test_size` is not strictly between 0 and 1.

## What it does not do

knnlite works only with whole-number values and plain Euclidean
distance. It does not shuffle, scale or normalise data. It does not
save trained models, and it does not write datasets back to files.