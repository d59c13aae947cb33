"""Shared constants for the Tuple data model."""

import os

import numpy as np

EPSILON = 1e-5
# Machine epsilon of a float32; stricter alternative threshold for equal().
FLOAT32_EPSILON = float(np.finfo(np.float32).eps)

POINT_W = 1.0
VECTOR_W = 0.0

SKIP_VALIDATION = os.getenv("SKIP_VALIDATION", "0") == "1"
