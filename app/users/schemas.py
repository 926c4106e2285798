from marshmallow import Schema, fields

class UserOut(Schema):
    username = fields.String(required=True)
    name = fields.String(allow_none=True)
