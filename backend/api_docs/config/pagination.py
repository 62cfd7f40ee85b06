DEFAULT_LIMIT = 10
MAX_LIMIT = 20


def limit_schema():
    return {'type': 'integer', 'minimum': 1, 'maximum': MAX_LIMIT, 'default': DEFAULT_LIMIT}


def offset_schema():
    return {'type': 'integer', 'minimum': 0, 'default': 0}
