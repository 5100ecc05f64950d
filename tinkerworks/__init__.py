"""BLAS-style linear algebra in plain Python, a pygame snake game and a small Flask posts API."""

__version__ = "0.1.0"