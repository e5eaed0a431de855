from typing import Any, Callable

from promise import is_thenable, Promise


def after_settled(value, continuation: Callable[[Any], Any]):
    """
    Run the continuation with the settled value.

    Plain values are handed to the continuation straight away and its
    result is returned as is. Promises (and other thenables) are chained,
    so the continuation only sees the resolved value and the caller gets
    back a promise. Rejections skip the continuation and stay rejections.
    """
    if is_thenable(value):
        return Promise.resolve(value).then(continuation)
    return continuation(value)
