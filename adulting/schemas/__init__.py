from marshmallow import ValidationError

from adulting.errors import BadRequestError


def load_or_400(schema, data):
    """Validate a request body, turning marshmallow errors into BadRequestError."""
    if not isinstance(data, dict):
        raise BadRequestError("Invalid JSON body")
    try:
        return schema.load(data)
    except ValidationError as e:
        raise BadRequestError(e.messages)
