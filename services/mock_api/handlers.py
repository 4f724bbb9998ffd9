import time
from datetime import datetime, timezone

from .dispatch import Reply
from .messages import message

users = [
    {"id": 1, "name": "Juan", "role": "admin"},
    {"id": 2, "name": "María", "role": "user"},
    {"id": 3, "name": "Carlos", "role": "user"},
]

products = [
    {"id": 1, "name": "Product A", "price": 100},
    {"id": 2, "name": "Product B", "price": 200},
    {"id": 3, "name": "Product C", "price": 300},
]


def current_millis():
    return int(time.time() * 1000)


def root_info(config, request):
    return Reply(200, {
        "message": message(config, 'greeting', environment=config.environment_name),
        "version": config.version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "hostname": config.hostname,
        "status": "active"
    })


def health(config, request):
    return Reply(200, {
        "status": "OK",
        "environment": config.environment_name,
        "uptime": max(time.monotonic() - config.started_at, 0.0)
    })


def list_users(config, request):
    return Reply(200, {
        "users": [dict(u) for u in users],
        "count": len(users),
        "environment": config.environment_name
    })


def _present(value):
    return isinstance(value, str) and value != ''


def create_user(config, request, clock=current_millis):
    data = request.body if isinstance(request.body, dict) else {}
    name = data.get('name')
    role = data.get('role')

    if not _present(name) or not _present(role):
        return Reply(400, {"error": message(config, 'name_and_role_required')})

    # Millisecond ids are not unique under concurrent creation
    return Reply(201, {
        "message": message(config, 'user_created'),
        "user": {"id": clock(), "name": name, "role": role},
        "environment": config.environment_name
    })


def list_products(config, request):
    return Reply(200, {
        "products": [dict(p) for p in products],
        "environment": config.environment_name
    })


def ping(config, request):
    return Reply(200, {"pong": True})


# Tried in this order; anything unmatched falls through to the 404 handler
ROUTES = [
    ('GET', '/', root_info),
    ('GET', '/health', health),
    ('GET', '/api/users', list_users),
    ('POST', '/api/users', create_user),
    ('GET', '/api/products', list_products),
    ('GET', '/api/ping', ping),
]
