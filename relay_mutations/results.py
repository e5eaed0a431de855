from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Union

import graphene


@dataclass(frozen=True)
class Success:
    """A successful payload: a mapping or a graphene object"""

    record: Any


@dataclass(frozen=True)
class Failure:
    """Anything that is not a payload, passed on untouched"""

    value: Any


Result = Union[Success, Failure]
ResultClassifier = Callable[[Any], Result]


def is_record(value) -> bool:
    if isinstance(value, Exception):
        return False
    return isinstance(value, (Mapping, graphene.ObjectType))


def classify_result(value) -> Result:
    """
    Default error convention for mutation results.

    1. Exceptions returned as values are failures, graphql-core reports
       them as errors on the mutation field.
    2. Mappings and graphene objects are payload records.
    3. Everything else (None, scalars, lists) is a failure.
    """
    if is_record(value):
        return Success(value)
    return Failure(value)
