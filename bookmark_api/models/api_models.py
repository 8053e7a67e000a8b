from flask_restx import fields


def create_models(api):
    bookmark_input = api.model('BookmarkInput', {
        'url': fields.String(required=True, description='The bookmark URL', example='https://example.com'),
        'title': fields.String(required=True, description='The bookmark title', example='Example'),
        'description': fields.String(description='Optional description', allow_null=True)
    })

    bookmark_update = api.model('BookmarkUpdate', {
        'url': fields.String(description='New URL'),
        'title': fields.String(description='New title'),
        'description': fields.String(description='New description')
    })

    bookmark_record = api.model('Bookmark', {
        'id': fields.String(description='The bookmark ID'),
        'url': fields.String(description='The bookmark URL'),
        'title': fields.String(description='The bookmark title'),
        'description': fields.String(description='The bookmark description'),
        'created_at': fields.String(description='Creation time, ISO-8601 UTC')
    })

    field_error = api.model('FieldError', {
        'field': fields.String(description='Name of the offending field'),
        'message': fields.String(description='What is wrong with it')
    })

    validation_error = api.model('ValidationError', {
        'message': fields.String(description='Summary message'),
        'errors': fields.List(fields.Nested(field_error), description='Per-field errors')
    })

    return bookmark_input, bookmark_update, bookmark_record, validation_error
