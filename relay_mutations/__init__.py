from .arguments import declare_arguments, declare_output_fields
from .config import get_config
from .constants import CLIENT_MUTATION_ID
from .deferred import after_settled
from .exceptions import (
    ImproperlyConfiguredMutation,
    MutationError,
    RelayMutationException,
    ReservedFieldNameError,
)
from .logging import configure_logging
from .mutation import RelayClassicMutation
from .resolution import ClientMutationIdContinuation, intercept
from .results import classify_result, Failure, Success

__all__ = [
    "after_settled",
    "classify_result",
    "CLIENT_MUTATION_ID",
    "ClientMutationIdContinuation",
    "configure_logging",
    "declare_arguments",
    "declare_output_fields",
    "Failure",
    "get_config",
    "ImproperlyConfiguredMutation",
    "intercept",
    "MutationError",
    "RelayClassicMutation",
    "RelayMutationException",
    "ReservedFieldNameError",
    "Success",
]
