"""
compiles textual lambda expressions of the form "(a, b) => expression" or
"a => expression" into python callables. the expression part is python.
inside the expression `self` refers to the owning sequence.
"""
from __future__ import annotations
import keyword
import logging
import re
from functools import lru_cache
from .types import *
from .errors import InvalidExpressionError
from .config import get_config

logger = logging.getLogger(__name__)

_LAMBDA_HEAD = re.compile(r'^(\s*)(\(?)([^)]*?)(\)?)(\s*)=>')


def is_lambda_text(value: Any) -> bool:
    """cheap check whether a string looks like a textual lambda"""
    return isinstance(value, str) and _LAMBDA_HEAD.match(value) is not None


@lru_cache(maxsize=256)
def _compile(text: str):
    match = _LAMBDA_HEAD.match(text)
    if match is None:
        raise InvalidExpressionError(text)

    open_paren, params_text, close_paren = match.group(2), match.group(3), match.group(4)
    if bool(open_paren) != bool(close_paren):
        raise InvalidExpressionError(text, "unbalanced parameter list")

    params = [p.strip() for p in params_text.split(',')] if params_text.strip() else []
    for name in params:
        if not name.isidentifier() or keyword.iskeyword(name):
            raise InvalidExpressionError(text, f"invalid parameter name '{name}'")
    if not open_paren and len(params) > 1:
        raise InvalidExpressionError(text, "multiple parameters need parentheses")

    body = text[match.end():].strip()
    if not body:
        raise InvalidExpressionError(text, "empty expression body")

    source = f"lambda {', '.join(params)}: ({body})"
    try:
        code = compile(source, '<enumy-lambda>', 'eval')
    except SyntaxError as e:
        raise InvalidExpressionError(text, f"syntax error: {e.msg}") from e

    logger.debug(f"compiled lambda expression {text!r}")
    return code


def compile_lambda(text: str, owner: Any = None) -> Callable[..., Any]:
    """compile a textual lambda, binding `self` to owner"""
    if not get_config().text_lambdas:
        raise InvalidExpressionError(text, "textual lambda expressions are disabled")
    code = _compile(text.strip())
    return eval(code, {'self': owner})
