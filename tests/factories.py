def project_payload(**overrides):
    data = {
        'title': 'Demo',
        'description': 'A demo project',
        'category': 'web',
        'imageUrl': 'https://x/y.png',
        'tags': 'react,ts',
        'featured': False,
    }
    data.update(overrides)
    return data


ADMIN_EMAIL = 'admin@example.com'
ADMIN_PASSWORD = 'correct-horse-battery'
