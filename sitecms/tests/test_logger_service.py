import json
import logging

from flask import Flask, g

from sitecms.services.system.logger_service import ConsoleFormatter, JSONFormatter


def _record(name='sitecms.features.posts.service.post_service', **extra):
    record = logging.LogRecord(name, logging.INFO, __file__, 10, 'Post CREATE', None, None)
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_extras_and_service():
    payload = json.loads(JSONFormatter().format(_record(resource_id='p1', blob=object())))

    assert payload['message'] == 'Post CREATE'
    assert payload['service'] == 'posts'
    assert payload['resource_id'] == 'p1'
    assert payload['blob'].startswith('<object object')
    assert 'request_id' not in payload


def test_json_formatter_infers_service_for_system_modules():
    payload = json.loads(JSONFormatter().format(_record('sitecms.services.firebase.firebase_client')))
    assert payload['service'] == 'firebase'


def test_json_formatter_tags_request_id():
    app = Flask(__name__)
    with app.test_request_context('/api/posts'):
        g.request_id = 'abc123'
        payload = json.loads(JSONFormatter().format(_record()))
    assert payload['request_id'] == 'abc123'


def test_console_formatter_appends_extras():
    line = ConsoleFormatter().format(_record(resource_id='p1'))
    assert 'Post CREATE | resource_id=p1' in line
