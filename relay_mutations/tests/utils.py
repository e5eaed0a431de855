from graphene.test import Client as GrapheneClient
from promise import Promise


class ApiClient(GrapheneClient):
    def execute(self, *args, **kwargs):
        """
        Custom wrapper on the execute method, that allows passing
        "input" as a keyword argument, which get passed to
        kwargs["variables"]["input"] to comply with the relay
        spec for mutations.
        """

        input = kwargs.pop("input", {})
        if input:
            assert (
                "variables" not in kwargs
            ), 'Do not pass both "variables" and "input" at the same time'
            kwargs["variables"] = {"input": input}
        return super().execute(*args, **kwargs)


def create_api_client(schema):
    return ApiClient(schema)


def pending_promise():
    """Promise that stays pending until resolve or reject is called"""
    handles = {}

    def executor(resolve, reject):
        handles["resolve"] = resolve
        handles["reject"] = reject

    return Promise(executor), handles


def assert_in_errors(message, executed):
    errors = str(executed["errors"])
    assert str(message) in errors


def assert_field_missing(field_name, executed):
    errors = str(executed["errors"])
    assert field_name in errors
    assert "found null" in errors
