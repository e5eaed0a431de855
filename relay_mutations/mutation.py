import re
from collections import OrderedDict

import graphene
from graphene.types.utils import yank_fields_from_attrs
from graphene.utils.props import props

from .arguments import declare_arguments, declare_output_fields
from .constants import CLIENT_MUTATION_ID, INPUT_ARGUMENT
from .exceptions import ImproperlyConfiguredMutation
from .resolution import intercept
from .results import classify_result


class RelayClassicMutation(graphene.Mutation):
    """
    Mutation following the Relay classic conventions.

    - All the fields of the inner ``Input`` class (and ``Meta.input_fields``)
      are wrapped in one ``input`` argument, which also accepts an optional
      ``clientMutationId``.
    - ``mutate_and_get_payload`` receives the input fields as keyword
      arguments, without the ``clientMutationId``.
    - The payload always has a ``clientMutationId`` field, set to the value
      sent by the client once the payload is available.

    ``Meta.result_classifier`` decides which results are payloads that get
    the ``clientMutationId``, see relay_mutations.results.classify_result.
    """

    class Meta:
        abstract = True

    @classmethod
    def __init_subclass_with_meta__(
        cls,
        output=None,
        input_fields=None,
        arguments=None,
        name=None,
        result_classifier=None,
        reserved_name_policy=None,
        **options,
    ):
        if output:
            raise ImproperlyConfiguredMutation(
                f"{cls.__name__} can't specify an output, the payload is the mutation"
            )
        if arguments:
            raise ImproperlyConfiguredMutation(
                f"{cls.__name__} can't specify arguments, use the Input class"
            )
        if not getattr(cls, "mutate_and_get_payload", None):
            raise ImproperlyConfiguredMutation(
                f"{cls.__name__}.mutate_and_get_payload method is required"
            )

        base_name = re.sub("Payload$", "", name or cls.__name__)

        declared = OrderedDict()
        input_class = getattr(cls, "Input", None)
        if isinstance(input_class, type) and issubclass(
            input_class, graphene.InputObjectType
        ):
            # Input generated for a parent mutation, its clientMutationId
            # is added again below
            declared.update(
                (attname, field)
                for attname, field in input_class._meta.fields.items()
                if attname != CLIENT_MUTATION_ID
            )
        elif input_class:
            declared.update(
                yank_fields_from_attrs(props(input_class), _as=graphene.InputField)
            )
        if input_fields:
            declared.update(input_fields)

        cls.Input = type(
            f"{base_name}Input",
            (graphene.InputObjectType,),
            declare_arguments(declared, reserved_name_policy),
        )

        # A null input is only valid when every input field is optional
        input_required = any(
            isinstance(field.type, graphene.NonNull)
            for field in cls.Input._meta.fields.values()
        )
        arguments = OrderedDict(
            [(INPUT_ARGUMENT, cls.Input(required=input_required))]
        )

        super().__init_subclass_with_meta__(
            output=None,
            arguments=arguments,
            name=name or f"{base_name}Payload",
            resolver=intercept(cls.mutate, result_classifier or classify_result),
            **options,
        )

        # _meta is frozen by now, update the fields in place
        fields = declare_output_fields(cls._meta.fields, reserved_name_policy)
        cls._meta.fields.clear()
        cls._meta.fields.update(fields)

    @classmethod
    def mutate(cls, root, info, input=None):
        return cls.mutate_and_get_payload(root, info, **(input or {}))
