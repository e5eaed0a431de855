import logging
from collections.abc import Mapping
from functools import wraps
from typing import Any, Callable, Optional

from .constants import CLIENT_MUTATION_ID, INPUT_ARGUMENT
from .deferred import after_settled
from .results import classify_result, Failure, ResultClassifier, Success

logger = logging.getLogger(__name__)

_UNSETTLED = object()


class ClientMutationIdContinuation:
    """Puts the client mutation id back on the settled payload.

    The id captured from the input travels with the continuation, the
    business logic never sees it. Only the first call stamps the payload,
    later calls return the first output.
    """

    def __init__(
        self,
        client_mutation_id: Optional[str],
        classify: ResultClassifier = classify_result,
    ):
        self.client_mutation_id = client_mutation_id
        self.classify = classify
        self._output = _UNSETTLED

    @property
    def settled(self) -> bool:
        return self._output is not _UNSETTLED

    def __call__(self, value):
        if not self.settled:
            self._output = self.stamp(self.classify(value))
        return self._output

    def stamp(self, result):
        if isinstance(result, Success):
            logger.debug("Stamping client mutation id on %s", type(result.record))
            return stamp_client_mutation_id(result.record, self.client_mutation_id)
        elif isinstance(result, Failure):
            logger.debug("Passing through %s", type(result.value))
            return result.value
        raise TypeError(f"Unknown mutation result {result!r}")


def stamp_client_mutation_id(record, client_mutation_id: Optional[str]):
    if isinstance(record, Mapping):
        return {**record, CLIENT_MUTATION_ID: client_mutation_id}
    setattr(record, CLIENT_MUTATION_ID, client_mutation_id)
    return record


def intercept(
    resolve: Callable[..., Any], classify: ResultClassifier = classify_result
) -> Callable[..., Any]:
    """
    Wrap a resolver taking the relay "input" argument.

    The clientMutationId is removed from a copy of the input before calling
    the resolver, and set on the payload once the result has settled.
    A missing or null input is passed through and the result is returned
    as the resolver gave it.

    Errors raised by the resolver, or rejected promises, are not handled here.
    """

    @wraps(resolve)
    def wrapper(*args, **inputs):
        container = inputs.get(INPUT_ARGUMENT)
        if container is None:
            return resolve(*args, **inputs)

        unwrapped = dict(container)
        client_mutation_id = unwrapped.pop(CLIENT_MUTATION_ID, None)
        inputs[INPUT_ARGUMENT] = unwrapped

        return_value = resolve(*args, **inputs)

        return after_settled(
            return_value, ClientMutationIdContinuation(client_mutation_id, classify)
        )

    return wrapper
