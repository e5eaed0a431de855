import logging
from collections import OrderedDict
from typing import Mapping, Optional

import graphene

from .config import get_config
from .constants import (
    CLIENT_MUTATION_ID,
    CLIENT_MUTATION_ID_DESCRIPTION,
    CLIENT_MUTATION_ID_FIELD_NAME,
    RESERVED_NAME_POLICY_OVERRIDE,
)
from .exceptions import ReservedFieldNameError

logger = logging.getLogger(__name__)


def _uses_reserved_name(attname: str, field) -> bool:
    if attname == CLIENT_MUTATION_ID:
        return True
    # Unmounted types (graphene.String(name=...)) keep the name in kwargs
    name = getattr(field, "name", None) or getattr(field, "kwargs", {}).get("name")
    return name == CLIENT_MUTATION_ID_FIELD_NAME


def _check_reserved_name(fields: Mapping, policy: Optional[str]) -> OrderedDict:
    if policy is None:
        policy = get_config()["RELAY_MUTATIONS_RESERVED_NAME_POLICY"]

    checked = OrderedDict()
    for attname, field in fields.items():
        if _uses_reserved_name(attname, field):
            if policy != RESERVED_NAME_POLICY_OVERRIDE:
                raise ReservedFieldNameError(
                    attname,
                    f'"{attname}" is reserved for the client mutation id',
                )
            logger.warning(
                "Overriding field %s with the client mutation id", attname
            )
            continue
        checked[attname] = field
    return checked


def declare_arguments(
    base_arguments: Mapping, policy: Optional[str] = None
) -> OrderedDict:
    """Add the optional clientMutationId argument to the mutation input"""
    arguments = _check_reserved_name(base_arguments, policy)
    arguments[CLIENT_MUTATION_ID] = graphene.String(
        name=CLIENT_MUTATION_ID_FIELD_NAME, description=CLIENT_MUTATION_ID_DESCRIPTION
    )
    return arguments


def declare_output_fields(
    base_fields: Mapping, policy: Optional[str] = None
) -> OrderedDict:
    """Add the nullable clientMutationId field to the mutation payload"""
    fields = _check_reserved_name(base_fields, policy)
    fields[CLIENT_MUTATION_ID] = graphene.Field(
        graphene.String,
        name=CLIENT_MUTATION_ID_FIELD_NAME,
        description=CLIENT_MUTATION_ID_DESCRIPTION,
    )
    return fields
