"""
Wrapper around creating a parallel function call
"""

import itertools
from typing import Any, Callable, List, Optional, Sequence

import gevent.pool


def parallel_call(
    function: Callable,
    args: Sequence[Any],
    repeatable_args: Optional[Sequence[Any]] = None,
    fold_list: bool = False,
    pool_size: int = 32,
) -> List[Any]:
    """
    Execute a function in parallel. Results come back in the
    same order as args, regardless of completion order.
    :param function: Function to execute
    :param args: Args to pass to the function
    :param repeatable_args: Repeatable args to pass with the original args
    :param fold_list: Compress the results into a 1D list
    :param pool_size: How large the gevent pool should be
    :return: Results from execution, with modifications if desired
    """
    pool = gevent.pool.Pool(pool_size)

    if repeatable_args:
        extra_args_rep = [itertools.repeat(arg) for arg in repeatable_args]
        results = pool.map(lambda g_args: function(*g_args), zip(args, *extra_args_rep))
    else:
        results = pool.map(function, args)

    if fold_list:
        return list(itertools.chain.from_iterable(results))

    return list(results)
