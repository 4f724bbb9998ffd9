MESSAGES = {
    'en': {
        'greeting': 'Hello from the {environment} environment!',
        'user_created': 'User created successfully',
        'name_and_role_required': 'Name and role are required',
        'route_not_found': 'Route not found',
        'internal_error': 'Internal server error',
        'server_started': 'Server started on port {port}, environment: {environment}, version: {version}',
    },
    'es': {
        'greeting': '¡Hola desde el ambiente {environment}!',
        'user_created': 'Usuario creado exitosamente',
        'name_and_role_required': 'Nombre y rol son requeridos',
        'route_not_found': 'Ruta no encontrada',
        'internal_error': 'Error interno del servidor',
        'server_started': 'Servidor iniciado en puerto {port}, ambiente: {environment}, versión: {version}',
    },
}


def message(config, key, **params):
    catalog = MESSAGES.get(config.language, MESSAGES['en'])
    return catalog[key].format(**params)
