"""
Generic strided traversal engine.

`walk(shape, *arrays)` visits every multi-index of `shape` in row-major order
and yields, for each visit, the flat buffer position of that index in *each*
participating array, computed from that array's own strides and offset. This
lets one loop drive fused elementwise work over arrays that share a shape but
not a layout (e.g. a packed array and a transposed view).

Rank 0, 1 and 2 use hand-specialised loops. Rank N uses an index odometer:
the last axis is incremented and overflow carries into the previous axis,
with every array's position advanced or rewound by its stride at the same
time.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, Sequence, Tuple

from ...domain._ndarray import INDArray


def walk(shape: Sequence[int], *arrays: INDArray) -> Iterator[Tuple[int, ...]]:
    """
    Yield per-array flat positions for every index of `shape`.

    Parameters
    ----------
    shape : Sequence[int]
        The common logical shape of all participating arrays.
    *arrays : INDArray
        Headers whose `strides` and `offset` define the positions.

    Yields
    ------
    tuple[int, ...]
        One flat position per array, in argument order.
    """
    rank = len(shape)
    m = len(arrays)
    pos = [int(a.offset) for a in arrays]

    if rank == 0:
        yield tuple(pos)
        return

    for d in shape:
        if d == 0:
            return

    if rank == 1:
        n = shape[0]
        steps = [a.strides[0] for a in arrays]
        if m == 1:
            p, s = pos[0], steps[0]
            for _ in range(n):
                yield (p,)
                p += s
            return
        for _ in range(n):
            yield tuple(pos)
            for k in range(m):
                pos[k] += steps[k]
        return

    if rank == 2:
        rows, cols = shape
        row_steps = [a.strides[0] for a in arrays]
        col_steps = [a.strides[1] for a in arrays]
        row_start = pos
        for _ in range(rows):
            cur = list(row_start)
            for _ in range(cols):
                yield tuple(cur)
                for k in range(m):
                    cur[k] += col_steps[k]
            row_start = [row_start[k] + row_steps[k] for k in range(m)]
        return

    strides = [a.strides for a in arrays]
    idx = [0] * rank
    while True:
        yield tuple(pos)
        dim = rank - 1
        while dim >= 0:
            if idx[dim] < shape[dim] - 1:
                idx[dim] += 1
                for k in range(m):
                    pos[k] += strides[k][dim]
                break
            # carry: rewind this axis to 0 and move to the previous one
            back = idx[dim]
            idx[dim] = 0
            for k in range(m):
                pos[k] -= back * strides[k][dim]
            dim -= 1
        if dim < 0:
            return


def walk_indices(shape: Sequence[int]) -> Iterator[Tuple[int, ...]]:
    """Yield every multi-index of `shape` in row-major order."""
    rank = len(shape)
    if rank == 0:
        yield ()
        return
    for d in shape:
        if d == 0:
            return
    idx = [0] * rank
    while True:
        yield tuple(idx)
        dim = rank - 1
        while dim >= 0:
            if idx[dim] < shape[dim] - 1:
                idx[dim] += 1
                break
            idx[dim] = 0
            dim -= 1
        if dim < 0:
            return


def map_into(target: INDArray, fn: Callable[..., Any], *sources: INDArray) -> None:
    """
    Write `fn(target[i], sources[0][i], ...)` into `target` for every index.

    All sources must already share `target.shape`; no allocation is made.
    """
    t_data = target.data
    if not sources:
        for (ti,) in walk(target.shape, target):
            t_data[ti] = fn(t_data[ti])
        return
    if len(sources) == 1:
        s_data = sources[0].data
        for ti, si in walk(target.shape, target, sources[0]):
            t_data[ti] = fn(t_data[ti], s_data[si])
        return
    datas = [s.data for s in sources]
    for positions in walk(target.shape, target, *sources):
        ti = positions[0]
        args = [d[p] for d, p in zip(datas, positions[1:])]
        t_data[ti] = fn(t_data[ti], *args)


def fold_over(array: INDArray, init: Any, fn: Callable[[Any, Any], Any]) -> Any:
    """Left-fold `fn(acc, element)` over every logical element of `array`."""
    data = array.data
    acc = init
    for (i,) in walk(array.shape, array):
        acc = fn(acc, data[i])
    return acc
