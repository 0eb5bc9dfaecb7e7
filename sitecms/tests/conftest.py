import os
import tempfile

import pytest

# Must run before any sitecms import: the logger and Firebase client read these at import time
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='sitecms-logs-'))
os.environ['ENVIRONMENT'] = 'test'
os.environ['RATE_LIMIT_STORAGE_URI'] = 'memory://'
for _key in ('FIREBASE_PROJECT_ID', 'FIREBASE_CLIENT_EMAIL', 'FIREBASE_PRIVATE_KEY',
             'FIREBASE_STORAGE_BUCKET', 'GOOGLE_APPLICATION_CREDENTIALS',
             'IMGBB_API_KEY', 'CLOUDINARY_URL', 'CLOUDINARY_PRESET'):
    os.environ.pop(_key, None)


@pytest.fixture
def app():
    from sitecms.app import app as flask_app
    from sitecms.services.system.security import limiter

    flask_app.config['TESTING'] = True
    limiter.enabled = False
    yield flask_app
    limiter.enabled = True


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_claims():
    return {'uid': 'admin-1', 'email': 'admin@willsther.com', 'admin': True}


@pytest.fixture
def super_admin_claims():
    return {'uid': 'root-1', 'email': 'owner@willsther.com', 'superAdmin': True}


@pytest.fixture
def visitor_claims():
    """A signed-in account without admin claims."""
    return {'uid': 'visitor-1', 'email': 'someone@gmail.com'}


@pytest.fixture
def auth_as():
    """Patch token verification so `Authorization: Bearer test` yields the given claims."""
    from unittest.mock import patch

    patchers = []

    def _auth_as(claims):
        patcher = patch('sitecms.services.system.auth_middleware.verify_firebase_token',
                        return_value=claims)
        patcher.start()
        patchers.append(patcher)
        return {'Authorization': 'Bearer test'}

    yield _auth_as
    for patcher in patchers:
        patcher.stop()
