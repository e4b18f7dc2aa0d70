import math
import re
import numpy as np
from typing import Tuple

from .errors import UnsupportedTransformError, MalformedTransformError

# name(args) with args separated by commas and/or whitespace
_FUNCTION = re.compile(r'([A-Za-z]+)\s*\(([^()]*)\)')
_SEPARATOR = re.compile(r'[\s,]*')
# SVG number grammar: no nan, inf or digit separators
_NUMBER = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')


def _frozen(mat: np.ndarray) -> np.ndarray:
    mat.setflags(write=False)
    return mat


def identity() -> np.ndarray:
    return _frozen(np.identity(3))


def parse_number(tok: str) -> float:
    """float() restricted to finite numbers written the way SVG writes them."""
    if _NUMBER.fullmatch(tok) is None:
        raise ValueError(f"not an SVG number: {tok!r}")
    value = float(tok)
    if not math.isfinite(value):
        raise ValueError(f"number out of range: {tok!r}")
    return value


def _parse_args(args_str, attr):
    nums = []
    for tok in re.split(r'[,\s]+', args_str.strip()):
        if not tok: continue
        try:
            nums.append(parse_number(tok))
        except ValueError:
            raise MalformedTransformError(
                f"bad number {tok!r} in transform {attr!r}", token=tok) from None
    return nums


def _function_matrix(name, nums, attr):
    """Builds the 3x3 matrix of a single transform function."""
    if name == 'matrix':
        if len(nums) != 6:
            raise MalformedTransformError(
                f"matrix() takes 6 numbers, got {len(nums)} in {attr!r}", token=name)
        # SVG matrix: a c e / b d f / 0 0 1
        return np.array([
            [nums[0], nums[2], nums[4]],
            [nums[1], nums[3], nums[5]],
            [0.0,     0.0,     1.0]
        ])
    if name == 'translate':
        if len(nums) not in (1, 2):
            raise MalformedTransformError(
                f"translate() takes 1 or 2 numbers, got {len(nums)} in {attr!r}", token=name)
        t_mat = np.identity(3)
        t_mat[0, 2] = nums[0]
        t_mat[1, 2] = nums[1] if len(nums) > 1 else 0.0
        return t_mat
    raise UnsupportedTransformError(f"unsupported transform attr {name!r}", token=name)


def parse_transform(attr: str) -> np.ndarray:
    """
    Parses an SVG transform attribute into a 3x3 matrix.

    Only matrix() and translate() are understood; rotate, scale, skewX and
    skewY raise UnsupportedTransformError instead of being dropped. A
    transform list is composed left to right.
    """
    mat = np.identity(3)
    pos = 0
    found = False
    for match in _FUNCTION.finditer(attr):
        gap = attr[pos:match.start()]
        if _SEPARATOR.fullmatch(gap) is None:
            raise MalformedTransformError(f"cannot parse transform {attr!r}", token=gap.strip())
        name, args_str = match.group(1), match.group(2)
        nums = _parse_args(args_str, attr)
        mat = mat @ _function_matrix(name, nums, attr)
        pos = match.end()
        found = True

    rest = attr[pos:]
    if _SEPARATOR.fullmatch(rest) is None:
        # e.g. "rotate" with no parentheses, or a dangling "matrix(1,0"
        head = re.match(r'[A-Za-z]+', rest.strip())
        if head and head.group(0) not in ('matrix', 'translate'):
            raise UnsupportedTransformError(f"unsupported transform attr {head.group(0)!r}",
                                            token=head.group(0))
        raise MalformedTransformError(f"cannot parse transform {attr!r}", token=rest.strip())
    if not found:
        raise UnsupportedTransformError(f"unsupported transform attr {attr!r}", token=attr)
    return _frozen(mat)


def compose(parent: np.ndarray, local: np.ndarray) -> np.ndarray:
    """parent x local: local is applied first, then parent."""
    return _frozen(parent @ local)


def apply(xform: np.ndarray, point: Tuple[float, float]) -> Tuple[float, float]:
    vec = np.array([point[0], point[1], 1.0])
    res = xform @ vec
    return float(res[0]), float(res[1])


def apply_all(xform: np.ndarray, points) -> np.ndarray:
    """Vectorized apply() over an (N, 2) array of points."""
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    homogeneous = np.column_stack([pts, np.ones(len(pts))])
    return (homogeneous @ xform.T)[:, :2]
