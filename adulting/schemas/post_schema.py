from marshmallow import validate

from adulting.extensions.extensions import ma


class PostCreateSchema(ma.Schema):
    title = ma.Str(required=True, validate=validate.Length(min=1, max=100))
    description = ma.Str(required=True, validate=validate.Length(min=1))
    type = ma.Str(load_default=None, validate=validate.Length(min=1, max=50))


class CommentCreateSchema(ma.Schema):
    text = ma.Str(required=True, validate=validate.Length(min=1))
