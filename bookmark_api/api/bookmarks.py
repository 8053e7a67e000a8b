from flask import Response, current_app, request
from flask_restx import Namespace, Resource

from ..models.api_models import create_models

bookmarks_ns = Namespace('bookmarks', description='Bookmark operations')

bookmark_input, bookmark_update, bookmark_record, validation_error = create_models(bookmarks_ns)


def _service():
    return current_app.bookmark_service


def _json_body():
    # An empty body counts as {}, a malformed one is a 400 from Flask.
    if not request.get_data():
        return None
    return request.get_json(force=True)


@bookmarks_ns.route('')
class BookmarkList(Resource):
    @bookmarks_ns.doc('list_bookmarks',
        description='Retrieve every stored bookmark.',
        responses={
            200: 'Success. Returns a list of all bookmarks.',
            500: 'Server error. An error occurred while fetching bookmarks.'
        })
    @bookmarks_ns.marshal_list_with(bookmark_record)
    def get(self):
        """List all bookmarks"""
        return _service().get_bookmarks(), 200

    @bookmarks_ns.doc('add_bookmark',
        description='Add a new bookmark to the database.',
        responses={
            400: ('Bad request. One or more fields are invalid.', validation_error),
            500: 'Server error. An error occurred while adding the bookmark.'
        })
    @bookmarks_ns.expect(bookmark_input)
    @bookmarks_ns.marshal_with(bookmark_record, code=201)
    def post(self):
        """Add a new bookmark"""
        data = _json_body()
        return _service().add_bookmark(data), 201


@bookmarks_ns.route('/<string:bookmark_id>')
@bookmarks_ns.param('bookmark_id', 'The bookmark ID')
class BookmarkItem(Resource):
    @bookmarks_ns.doc('get_bookmark',
        responses={
            404: 'Bookmark not found.',
            500: 'Server error. An error occurred while fetching the bookmark.'
        })
    @bookmarks_ns.marshal_with(bookmark_record)
    def get(self, bookmark_id):
        """Get a single bookmark"""
        return _service().get_bookmark(bookmark_id), 200

    @bookmarks_ns.doc('update_bookmark',
        description='Update a bookmark. Fields left out of the body keep their current value.',
        responses={
            400: ('Bad request. One or more fields are invalid.', validation_error),
            404: 'Bookmark not found.',
            500: 'Server error. An error occurred while updating the bookmark.'
        })
    @bookmarks_ns.expect(bookmark_update)
    @bookmarks_ns.marshal_with(bookmark_record)
    def put(self, bookmark_id):
        """Update a bookmark"""
        data = _json_body()
        return _service().update_bookmark(bookmark_id, data), 200

    @bookmarks_ns.doc('delete_bookmark',
        responses={
            204: 'Bookmark deleted.',
            404: 'Bookmark not found.',
            500: 'Server error. An error occurred while deleting the bookmark.'
        })
    def delete(self, bookmark_id):
        """Delete a bookmark"""
        _service().delete_bookmark(bookmark_id)
        return Response(status=204)
