from collections.abc import Mapping


def request_body(request) -> dict:
    """The parsed JSON body as a dict; anything that is not an object counts as empty."""
    data = request.data
    if isinstance(data, Mapping):
        return dict(data)
    return {}
