"""
normalisation of the callable-or-text arguments accepted by the operators.
every to_* helper returns a callable with a fixed calling convention,
falling back to the documented default when nothing was supplied.
"""
from __future__ import annotations
import inspect
import math
import re
from .types import *
from .lambdas import compile_lambda, is_lambda_text
from .config import get_config
from .errors import InvalidExpressionError

_NUMERIC_PREFIX = re.compile(r'^[+-]?(?:inf(?:inity)?|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)', re.IGNORECASE)

_PASS_ALL = -1


def _positional_arity(func: Callable) -> int:
    """number of positional parameters func accepts, _PASS_ALL for *args"""
    if isinstance(func, type):
        # classes used as converters (int, str, float, ...) get the item only
        return 1
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # builtins such as int or str expose no signature, treat them as unary
        return 1
    count = 0
    for param in signature.parameters.values():
        if param.kind == inspect.Parameter.VAR_POSITIONAL:
            return _PASS_ALL
        if param.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            count += 1
    return count


def fit_arity(func: Callable, max_args: int) -> Callable:
    """wrap func so it can always be called with max_args positional arguments"""
    arity = _positional_arity(func)
    if arity == _PASS_ALL or arity >= max_args:
        return func
    return lambda *args: func(*args[:arity])


def as_func(value: Any, owner: Any = None) -> Optional[Callable]:
    """callable as is, text compiled as lambda, falsy values as None"""
    if callable(value):
        return value
    if not value:
        return None
    if isinstance(value, str):
        return compile_lambda(value, owner)
    raise InvalidExpressionError(repr(value), "neither a callable nor a lambda expression")


def to_predicate(value: Any = None, owner: Any = None) -> Callable[[T, Any], bool]:
    func = as_func(value, owner)
    if func is None:
        return lambda item, ctx: True
    func = fit_arity(func, 2)
    return lambda item, ctx: bool(func(item, ctx))


def to_selector(value: Any = None, owner: Any = None) -> Callable[[T, Any], Any]:
    func = as_func(value, owner)
    if func is None:
        return lambda item, ctx: item
    return fit_arity(func, 2)


def to_many_selector(value: Any = None, owner: Any = None) -> Callable[[T, Any], Iterable[Any]]:
    func = as_func(value, owner)
    if func is None:
        return lambda item, ctx: [item]
    return fit_arity(func, 2)


def to_action(value: Any = None, owner: Any = None) -> Callable[[T, Any], Any]:
    func = as_func(value, owner)
    if func is None:
        return lambda item, ctx: None
    return fit_arity(func, 2)


def to_aggregator(value: Any = None, owner: Any = None) -> Callable[[Any, T, Any], Any]:
    func = as_func(value, owner)
    if func is None:
        return lambda result, item, ctx: to_number(result) + to_number(item)
    return fit_arity(func, 3)


def to_zipper(value: Any = None, owner: Any = None) -> Callable[[Any, Any, Any, Any], Any]:
    func = as_func(value, owner)
    if func is None:
        return lambda first, second, ctx1, ctx2: first + second
    return fit_arity(func, 4)


def to_key_selector(value: Any = None, owner: Any = None) -> Optional[Callable[[int, T, Any], int]]:
    """selector for to_array(): (key, item, ctx) -> target index; True means the cursor position"""
    if value is True:
        return lambda key, item, ctx: int(str(key).strip())
    func = as_func(value, owner)
    return fit_arity(func, 3) if func is not None else None


def default_compare(x: Any, y: Any) -> int:
    if x < y: return -1
    if x > y: return 1
    return 0


def to_comparer(value: Any = None, owner: Any = None) -> Comparer:
    """comparer normalised to -1 / 0 / 1"""
    func = as_func(value, owner)
    if func is None:
        return default_compare
    func = fit_arity(func, 2)

    def compare(x, y):
        result = func(x, y)
        if result > 0: return 1
        if result < 0: return -1
        return 0
    return compare


def loose_equals(x: Any, y: Any) -> bool:
    return x == y


def strict_equals(x: Any, y: Any) -> bool:
    return x is y or (type(x) is type(y) and x == y)


def to_equality_comparer(value: EqualityArg = None, owner: Any = None) -> EqualityComparer:
    if value is True:
        return strict_equals
    func = as_func(value, owner)
    if func is None:
        return strict_equals if get_config().strict_equality else loose_equals
    func = fit_arity(func, 2)
    return lambda x, y: bool(func(x, y))


def reversed_comparer(comparer: Comparer) -> Comparer:
    return lambda x, y: comparer(y, x)


def or_default_args(args: Tuple[Any, ...], owner: Any = None) -> Tuple[Callable[[T, Any], bool], Any]:
    """
    resolves the (predicate_or_default, default) overload of the *_or_default family.
    a single argument that is neither callable nor lambda text is the default value.
    """
    if not args:
        return to_predicate(None, owner), None
    if len(args) == 1:
        candidate = args[0]
        if callable(candidate) or is_lambda_text(candidate):
            return to_predicate(candidate, owner), None
        return to_predicate(None, owner), candidate
    return to_predicate(args[0], owner), args[1]


def to_number(value: Any) -> Union[int, float]:
    """
    permissive numeric coercion: numbers pass through, falsy values are 0,
    anything else is parsed from the numeric prefix of its text (nan if none).
    """
    if isinstance(value, (int, float)):
        return value
    if not value:
        return 0
    match = _NUMERIC_PREFIX.match(str(value).strip())
    if match is None:
        return math.nan
    return float(match.group(0))
