from marshmallow import validate

from adulting.extensions.extensions import ma


class UserRegisterSchema(ma.Schema):
    username = ma.Str(required=True, validate=validate.Length(min=1, max=25))
    password = ma.Str(required=True, validate=validate.Length(min=5, max=50))
    first_name = ma.Str(
        required=True, data_key="firstName", validate=validate.Length(min=1, max=30)
    )
    last_name = ma.Str(
        required=True, data_key="lastName", validate=validate.Length(min=1, max=30)
    )
    email = ma.Email(required=True)


class UserAuthSchema(ma.Schema):
    username = ma.Str(required=True, validate=validate.Length(min=1))
    password = ma.Str(required=True, validate=validate.Length(min=1))


class UserUpdateSchema(ma.Schema):
    # Keys stay in request form; the repository maps them to columns.
    firstName = ma.Str(validate=validate.Length(min=1, max=30))
    lastName = ma.Str(validate=validate.Length(min=1, max=30))
    password = ma.Str(validate=validate.Length(min=5, max=50))
    email = ma.Email()
    bio = ma.Str(allow_none=True)
    imageUrl = ma.Url(allow_none=True)


class FollowSchema(ma.Schema):
    username = ma.Str(required=True, validate=validate.Length(min=1))
