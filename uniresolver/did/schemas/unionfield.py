"""Marshmallow fields accepting more than one JSON shape."""

from marshmallow import fields


class ListOrStringField(fields.Field):
    """A string, or a list of strings."""

    default_error_messages = {"invalid": "Not a string or a list of strings."}

    def _serialize(self, value, attr, obj, **kwargs):
        if value is None:
            return None
        if isinstance(value, (list, tuple)):
            return list(value)
        return value

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, str):
            return value
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            return list(value)
        raise self.make_error("invalid")


class ListOrStringOrDictField(fields.Field):
    """A string, a list, or a dict."""

    default_error_messages = {"invalid": "Not a string, a list or a dict."}

    def _serialize(self, value, attr, obj, **kwargs):
        return value

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, (str, list, dict)):
            return value
        raise self.make_error("invalid")
