"""
Main Flask application for the marketing site CMS backend.
Organized with modular route blueprints for better maintainability.
"""
import time
import uuid
from dotenv import load_dotenv
from flask import Flask, request, g, jsonify
from flask_cors import CORS
from flask_compress import Compress
from flask_talisman import Talisman
from sitecms.config.env_config import get_app_config
from sitecms.services.system.security import configure_limiter

# Load environment variables from .env file
load_dotenv()

# Initialize logging service FIRST (before other imports)
from sitecms.services.system.logger_service import get_logger
logger = get_logger(__name__)

# Import service initialization
from sitecms.services.system.initialization import initialize_all_services

# Import authentication middleware
from sitecms.services.system.auth_middleware import global_auth_middleware

# Import all route blueprints
from sitecms.features.uploads.index import uploads_bp
from sitecms.features.posts.index import posts_bp
from sitecms.features.site_services.index import services_bp
from sitecms.features.service_categories.index import service_categories_bp
from sitecms.features.categories.index import categories_bp
from sitecms.features.slides.index import slides_bp
from sitecms.features.site_config.index import site_config_bp
from sitecms.features.products.index import product_bp
from sitecms.features.contacts.index import contacts_bp
from sitecms.features.users.index import user_bp as users_feature_bp
from sitecms.features.system.index import system_bp as system_feature_bp

# Multipart uploads above this size are rejected with 413
MAX_UPLOAD_BYTES = 16 * 1024 * 1024

app_config = get_app_config()

# Create Flask app
app = Flask(__name__)
app.config['MAX_CONTENT_LENGTH'] = MAX_UPLOAD_BYTES


def _resolve_service(path: str) -> str:
    parts = [segment for segment in (path or '').split('/') if segment]
    if not parts:
        return 'root'

    if parts[0] == 'api':
        return parts[1] if len(parts) > 1 else 'api'

    return parts[0]


def _resolve_audit_risk(path: str) -> str:
    high_risk_paths = (
        '/api/users',
        '/api/products',
        '/api/migrate-categories',
        '/api/services/migrate',
        '/api/config/save',
    )
    if any(path.startswith(prefix) for prefix in high_risk_paths):
        return 'high'
    return 'medium'


@app.before_request
def _check_authentication():
    """Global authentication check for all API endpoints"""
    return global_auth_middleware()


@app.before_request
def _log_request_start():
    g.request_start = time.time()
    g.request_id = uuid.uuid4().hex
    g.request_service = _resolve_service(request.path)


@app.after_request
def _log_request_end(response):
    duration_ms = None
    if hasattr(g, 'request_start'):
        duration_ms = round((time.time() - g.request_start) * 1000, 2)

    request_id = getattr(g, 'request_id', None)
    service = getattr(g, 'request_service', None) or _resolve_service(request.path)
    # Set by the auth middleware on protected routes only
    user_email = getattr(g, 'user_email', None)
    user_id = getattr(g, 'user_id', None)

    logger.info(
        f"{request.method} {request.path}",
        extra={
            'request_id': request_id,
            'request_method': request.method,
            'request_path': request.path,
            'request_query': request.query_string.decode('utf-8', errors='ignore') if request.query_string else '',
            'request_service': service,
            'request_status': response.status_code,
            'request_duration_ms': duration_ms,
            'user_email': user_email,
            'user_id': user_id,
            'remote_addr': request.headers.get('X-Forwarded-For', request.remote_addr),
        }
    )

    if request.method in ('POST', 'PUT', 'PATCH', 'DELETE') and user_id:
        logger.info(
            "AUDIT_EVENT",
            extra={
                'audit_action': 'API_CALL',
                'audit_resource': request.path,
                'audit_user_email': user_email or 'unknown',
                'audit_user_id': user_id,
                'audit_success': response.status_code < 400,
                'audit_risk_level': _resolve_audit_risk(request.path),
                'audit_timestamp': time.strftime('%Y-%m-%dT%H:%M:%SZ', time.gmtime()),
                'audit_source': 'backend',
                'audit_notes': {
                    'method': request.method,
                    'service': service,
                    'status': response.status_code,
                    'request_id': request_id,
                }
            }
        )

    return response


@app.errorhandler(413)
def _payload_too_large(error):
    return jsonify({
        'success': False,
        'error': f'File too large (max {MAX_UPLOAD_BYTES // (1024 * 1024)}MB)'
    }), 413


# Initialize Security Headers (Talisman)
# Force HTTPS in production, set strict content security policy
is_production = app_config['is_production']

# For a JSON API, block framing and foreign form targets
csp = {
    'default-src': ["'self'"],
    'frame-ancestors': ["'none'"],
    'form-action': ["'self'"],
}

Talisman(
    app,
    force_https=is_production,
    content_security_policy=csp,
    strict_transport_security=is_production,
    session_cookie_secure=is_production,
    session_cookie_http_only=True
)

# Initialize Rate Limiter
configure_limiter(app)

# Enable Gzip compression for all responses
Compress(app)


# Configure CORS to allow the Next.js site on a different origin
def _resolve_allowed_origins():
    raw_origins = app_config['frontend_origin']
    if not raw_origins or raw_origins.strip() == '*':
        return '*'

    origins = [origin.strip() for origin in raw_origins.split(',') if origin.strip()]
    return origins or '*'


CORS(
    app,
    resources={r"/*": {"origins": _resolve_allowed_origins()}},
    expose_headers='*',
    allow_headers='*',
    methods=['GET', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']
)

# Initialize all services
initialize_all_services()

# Register all blueprints
app.register_blueprint(uploads_bp)
app.register_blueprint(posts_bp)
app.register_blueprint(services_bp)
app.register_blueprint(service_categories_bp)
app.register_blueprint(categories_bp)
app.register_blueprint(slides_bp)
app.register_blueprint(site_config_bp)
app.register_blueprint(product_bp)
app.register_blueprint(contacts_bp)
app.register_blueprint(users_feature_bp)
app.register_blueprint(system_feature_bp)

if __name__ == '__main__':
    # Use production mode to avoid auto-reload socket issues
    logger.info(
        "Starting Flask server",
        extra={
            'host': app_config['host'],
            'port': app_config['port'],
            'environment': app_config['environment'],
            'frontend_origin': app_config['frontend_origin']
        }
    )

    app.run(debug=False, host=app_config['host'], port=app_config['port'], threaded=True)
