from typing import Any, Dict, Optional

from graphql import GraphQLError


class RelayMutationException(Exception):
    """Base exception for errors in the declaration of a relay mutation"""

    def __init__(self, msg=None, *args):
        super().__init__(msg or self.__doc__, *args)


class ReservedFieldNameError(RelayMutationException):
    """The field name is reserved for the client mutation id"""

    def __init__(self, name, *args):
        self.name = name
        super().__init__(*args)


class ImproperlyConfiguredMutation(RelayMutationException):
    """The mutation is improperly configured"""

    pass


class MutationError(GraphQLError):
    """Failure of the business logic of a mutation.

    Can be raised, or returned as the (possibly deferred) result of
    mutate_and_get_payload, in which case it is reported without a payload.
    """

    def __init__(self, message: str, extensions: Optional[Dict[str, Any]] = None):
        if type(extensions) is dict:
            extensions = {**extensions, "type": "MUTATION_ERROR"}
        else:
            extensions = {"type": "MUTATION_ERROR"}
        super().__init__(message, extensions=extensions)
