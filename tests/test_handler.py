import json

from mangum import Mangum

from app.handlers.todo_handler import app, build_handler, handler


def http_api_event(method, path, body=None):
    return {
        "version": "2.0",
        "routeKey": "$default",
        "rawPath": path,
        "rawQueryString": "",
        "headers": {
            "host": "todo.example.com",
            "content-type": "application/json",
        },
        "requestContext": {
            "accountId": "123456789012",
            "apiId": "api-id",
            "domainName": "todo.example.com",
            "http": {
                "method": method,
                "path": path,
                "protocol": "HTTP/1.1",
                "sourceIp": "127.0.0.1",
                "userAgent": "pytest",
            },
            "requestId": "request-id",
            "routeKey": "$default",
            "stage": "$default",
        },
        "body": body,
        "isBase64Encoded": False,
    }


def test_lambda_handler_wraps_app():
    assert isinstance(handler, Mangum)
    paths = {route.path for route in app.routes}
    assert {"/todos", "/todos/{todo_id}", "/users", "/"} <= paths


def test_lambda_list_todos_on_empty_database(database_url):
    lambda_handler = build_handler(database_url)
    response = lambda_handler(http_api_event("GET", "/todos"), {})
    assert response["statusCode"] == 200
    assert json.loads(response["body"]) == []


def test_lambda_create_then_list(database_url):
    lambda_handler = build_handler(database_url)
    response = lambda_handler(
        http_api_event("POST", "/todos", json.dumps({"title": "buy milk"})), {},
    )
    assert response["statusCode"] == 201
    assert json.loads(response["body"])["id"] == 1

    # a later invocation starts a fresh lifespan against the same file
    response = lambda_handler(http_api_event("GET", "/todos"), {})
    assert [t["title"] for t in json.loads(response["body"])] == ["buy milk"]
