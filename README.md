# tinkerworks

`tinkerworks` holds three small, independent tools:

- **Linear algebra**: BLAS-style routines written in plain Python. Level 1
  (vectors) is in `tinkerworks.vector_ops`, level 2 (matrix-vector) in
  `tinkerworks.matrix_vector_ops` and level 3 (matrix-matrix) in
  `tinkerworks.matrix_ops`. Operands are `Matrix` and `BandMatrix` objects
  from `tinkerworks.matrix` and ordinary Python sequences. The
  operator-friendly `Mat`, `Vector`, `Trans` and `Marker` types in
  `tinkerworks.algebra` are built on top of these routines. The layout and
  operation flags (`Order`, `Transpose`, `Symmetry`, `Diagonal`, `Side`) are
  in `tinkerworks.attribute`.
- **Snake**: a snake game played in a pygame window. The rules are in
  `tinkerworks.snake` (`Snake`, `Direction`) and `tinkerworks.snake_game`
  (`Game`, `Key`). The drawing code and the window loop are in
  `tinkerworks.snake_app`.
- **Web API**: a small Flask service that keeps posts in memory and serves
  them as JSON. It is made of `tinkerworks.models`, `tinkerworks.database`
  and `tinkerworks.webapi`.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Vector operations

```python
from tinkerworks.vector_ops import axpy, dot, nrm2, iamax

x = [1.0, -2.0, 3.0, 4.0]
ones = [1.0, 1.0, 1.0, 1.0]
dot(x, ones)        # 6.0

y = [3.0, 7.0, -2.0, 2.0]
axpy(1.0, x, y)     # y is now [4.0, 5.0, 1.0, 6.0]

nrm2([3.0, -4.0])   # 5.0
iamax(x)            # 3
```

The other level-1 routines are `copy`, `copy_mat`, `axpy_mat`, `scal`,
`scal_mat`, `swap`, `dotc`, `asum` and `rot`. Routines that take two vectors
use the shorter of the two lengths. Complex values are handled with Python's
built-in `complex`. `dotc` conjugates its first argument. For complex vectors,
`asum` and `nrm2` return a `complex` whose imaginary part is zero, and `asum`
and `iamax` measure each element as `|Re| + |Im|`.

## Matrices and level 2 / 3 routines

A `Matrix` stores its elements as a single flat list. The `order` field sets
the layout: `Order.ROW_MAJOR`, which is the default, or `Order.COL_MAJOR`. A
`BandMatrix` uses packed band storage, and each of its stored lines holds
`sub_diagonals + sup_diagonals + 1` elements. Packed triangular routines
(`spmv`, `tpmv`, `spr`, and the rest) read the first `n * (n + 1) // 2`
elements of `a.data`.

```python
from tinkerworks.attribute import Transpose
from tinkerworks.matrix import Matrix
from tinkerworks.matrix_ops import gemm
from tinkerworks.matrix_vector_ops import gemv

a = Matrix(2, 2, [1.0, 2.0, 3.0, 4.0])
b = Matrix(2, 2, [-1.0, 3.0, 1.0, 1.0])
c = Matrix(2, 2, [0.0] * 4)
gemm(1.0, Transpose.NO_TRANS, a, Transpose.NO_TRANS, b, 0.0, c)
c.data              # [1.0, 5.0, 1.0, 13.0]

y = [1.0, 2.0]
gemv(Transpose.NO_TRANS, 1.0, Matrix(2, 2, [1.0, -2.0, 2.0, -4.0]), [2.0, 1.0], 0.0, y)
y                   # [0.0, 0.0]
```

Every routine writes its result into its output operand in place. When
`beta` is zero, the output is overwritten without being read. A triangular
solve (`tbsv`, `tpsv`, `trsm`) on a singular matrix raises
`ZeroDivisionError`, and shape mismatches in the level-3 routines raise
`ValueError`.

## Matrix algebra with operators

```python
from tinkerworks.algebra import Marker, Vector, mat

a = mat([1.0, 2.0], [3.0, 4.0])
b = mat([-1.0, 3.0], [1.0, 1.0])

a + b               # mat([0.0, 5.0], [4.0, 5.0])
a * b               # mat([1.0, 5.0], [1.0, 13.0])
3.0 * a             # every element scaled
(a ^ Marker.T) * b  # transpose of a times b
a * Vector([2.0, 1.0])

x = Vector([2.0, 1.0, 4.0])
x * (Vector([3.0, 6.0, -1.0]) ^ Marker.T)   # outer product, a 3x3 Mat
(x ^ Marker.T) * [1.0, 1.0, 1.0]            # dot product, 7.0
```

`Mat` is always stored row-major. `m[i]` returns row `i` as a list.
`Mat.fill(value, n, m)` and `Mat.from_matrix(matrix)` create new matrices.
`Vector` is a `list` that also has the methods `update`, `scale`, `dot`,
`abs_sum`, `norm` and `max_index`. `^ Marker.H` marks a conjugate transpose:
with vectors it gives `dotc` and `gerc` in place of `dot` and `ger`. Adding or
multiplying matrices whose shapes do not match raises `ValueError`.

## Snake

```
tinkerworks-snake
```

This opens a 750x750 window with a 30x30 grid. Steer with the arrow keys, and
press Escape or close the window to quit. A key that would turn the snake
straight back onto itself does nothing. Each time the snake eats food it grows
by one block. Running into the border or into the snake's own body ends the
round. About one second later a new round begins.

`Game(width, height, rng=None)` can be driven without a window through
`key_pressed(key)` and `update(delta_time)`. `draw_game(surface, game)` paints
a game onto any pygame surface.

## Web API

```
tinkerworks-webapi [--host HOST] [--port PORT]
```

By default this serves on `localhost:8811`. The database starts with one
sample post and one sample device. The routes are:

| Method | Path          | Result                                                        |
|--------|---------------|---------------------------------------------------------------|
| GET    | `/post_feed`  | every stored post, as a JSON list                             |
| POST   | `/post`       | stores the JSON post in the body and echoes it back with 201; 400 if the body is not a valid post |
| GET    | `/post/<id>`  | the post with that UUID; 400 on a malformed id, 404 if there is no such post |

Every response has the content type `application/json`, and each request is
logged with its status and timing. A post is a JSON object with the string
fields `title`, `body`, `author`, `_datetime` (RFC 3339) and `uuid`. The
`to_dict` and `from_dict` methods of `Post`, `Device` and `Config` convert
records to and from this form.

To use the application inside your own code, call
`tinkerworks.webapi.create_app(database)` with a
`tinkerworks.database.Database`. `seed_database()` returns a database that
already holds the sample data.

## What it does not do

- The web API keeps everything in memory, so all posts are lost when the
  server stops. Posts cannot be edited or deleted.
- Devices can be stored in a `Database`, but no route serves them. The
  `Config` record exists only as a model, and nothing stores or serves it.

## Tests

```
pytest
```