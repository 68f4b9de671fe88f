"""OpenAPI 3.0 document for the JSON API, generated from the pydantic schemas."""

from flask import Blueprint, jsonify, current_app

from trivia.schemas import (
    AnswerRequest,
    AnswerResponse,
    CategoriesResponse,
    Credentials,
    ErrorResponse,
    LeaderboardResponse,
    LoginCredentials,
    OkResponse,
    RoundResponse,
    StartGameRequest,
    StatsResponse,
    UserResponse,
)

doc = Blueprint('doc', __name__)

REF_TEMPLATE = '#/components/schemas/{model}'

# (method, path, summary, request model, auth required, {status: (model, description)})
ROUTES = [
    ('post', '/api/auth/register', 'Register a new user', Credentials, False, {
        200: (UserResponse, 'User registered successfully'),
        400: (ErrorResponse, 'Invalid username or password'),
        409: (ErrorResponse, 'Username already taken'),
    }),
    ('post', '/api/auth/login', 'Log in', LoginCredentials, False, {
        200: (UserResponse, 'Logged in successfully'),
        401: (ErrorResponse, 'Invalid credentials'),
    }),
    ('post', '/api/auth/logout', 'Log out', None, False, {
        200: (OkResponse, 'Logged out successfully'),
    }),
    ('get', '/api/auth/me', 'Current user', None, True, {
        200: (UserResponse, 'Current user'),
        401: (ErrorResponse, 'Not authenticated'),
    }),
    ('get', '/api/categories', 'List categories', None, False, {
        200: (CategoriesResponse, 'List of categories with question counts'),
    }),
    ('post', '/api/game/start', 'Start a game round', StartGameRequest, True, {
        200: (RoundResponse, 'Game round started'),
        400: (ErrorResponse, 'Invalid wager or no questions available'),
        401: (ErrorResponse, 'Not authenticated'),
    }),
    ('post', '/api/game/answer', 'Answer a game round', AnswerRequest, True, {
        200: (AnswerResponse, 'Answer evaluated'),
        400: (ErrorResponse, 'Round not found or already answered'),
        401: (ErrorResponse, 'Not authenticated'),
    }),
    ('get', '/api/stats', 'Current user stats', None, True, {
        200: (StatsResponse, 'User stats'),
        401: (ErrorResponse, 'Not authenticated'),
    }),
    ('get', '/api/leaderboard', 'Leaderboard', None, False, {
        200: (LeaderboardResponse, 'Top users by points'),
    }),
]


def _schema_ref(model, components):
    schema = model.model_json_schema(by_alias=True, ref_template=REF_TEMPLATE)
    components.update(schema.pop('$defs', {}))
    components[model.__name__] = schema
    return {'$ref': REF_TEMPLATE.format(model=model.__name__)}


def build_document(cookie_name):
    components = {}
    paths = {}
    for method, path, summary, request_model, needs_auth, responses in ROUTES:
        operation = {
            'summary': summary,
            'responses': {
                str(status): {
                    'description': description,
                    'content': {'application/json': {'schema': _schema_ref(model, components)}},
                }
                for status, (model, description) in responses.items()
            },
        }
        if request_model is not None:
            operation['requestBody'] = {
                'required': True,
                'content': {'application/json': {'schema': _schema_ref(request_model, components)}},
            }
        if needs_auth:
            operation['security'] = [{'sessionCookie': []}]
        paths.setdefault(path, {})[method] = operation

    return {
        'openapi': '3.0.0',
        'info': {'title': 'Trivia Game API', 'version': '1.0.0'},
        'paths': paths,
        'components': {
            'schemas': components,
            'securitySchemes': {
                'sessionCookie': {'type': 'apiKey', 'in': 'cookie', 'name': cookie_name},
            },
        },
    }


@doc.route('/doc', methods=['GET'])
def openapi_document():
    return jsonify(build_document(current_app.config['GAME_SESSION_COOKIE']))
