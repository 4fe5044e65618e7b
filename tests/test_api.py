import logging

import index
from config import Config
from index import create_app

TRIP = [
    {'name': 'A', 'expenses': [{'amountPaid': 300, 'description': 'villa'}]},
    {'name': 'B', 'expenses': [{'amountPaid': 100, 'description': ''}, {'amountPaid': 0}]},
    {'name': 'C', 'amountPaid': 50},
]


def test_health_check(client):
    resp = client.get('/api')

    assert resp.status_code == 200
    assert resp.get_json()['status'] == 'healthy'


def test_calculate(client):
    resp = client.post('/api/calculate', json=TRIP)

    assert resp.status_code == 200
    data = resp.get_json()
    assert data['totalExpense'] == 450
    assert data['perPersonShare'] == 150
    assert data['transactions'] == [
        {'from': 'B', 'to': 'A', 'amount': 50},
        {'from': 'C', 'to': 'A', 'amount': 100},
    ]
    # zero-amount records are dropped before splitting
    assert data['balances'][1]['expenses'] == [{'amountPaid': 100, 'description': ''}]


def test_calculate_rejects_invalid_groups(client):
    resp = client.post('/api/calculate', json=[{'name': 'A', 'amountPaid': 10}])

    assert resp.status_code == 400
    data = resp.get_json()
    assert data['error'] == 'validation_error'
    assert data['details'] == ['At least 2 people are required']


def test_calculate_rejects_malformed_json(client):
    resp = client.post('/api/calculate', data='not json', content_type='application/json')

    assert resp.status_code == 400
    assert resp.get_json()['error'] == 'validation_error'


def test_unexpected_errors_become_500(client, monkeypatch):
    def boom(participants):
        raise RuntimeError('boom')

    monkeypatch.setattr(index, 'compute_split', boom)

    resp = client.post('/api/calculate', json=TRIP)

    assert resp.status_code == 500
    assert resp.get_json() == {'error': 'boom'}


def test_share(client):
    resp = client.post('/api/share', json={'participants': TRIP})

    assert resp.status_code == 200
    data = resp.get_json()
    assert '• B should pay ₹50.00 to A' in data['message']
    assert data['message'].endswith('https://split.example\n')
    assert data['url'].startswith('https://wa.me/?text=')
    assert data['result']['totalExpense'] == 450


def test_cors_headers(client):
    resp = client.get('/api', headers={'Origin': 'https://frontend.example'})

    assert resp.headers.get('Access-Control-Allow-Origin') == '*'


def test_calculate_rejects_nan_literal(client):
    body = '[{"name": "A", "expenses": [{"amountPaid": 10}, {"amountPaid": NaN}]}, {"name": "B", "amountPaid": 5}]'

    resp = client.post('/api/calculate', data=body, content_type='application/json')

    assert resp.status_code == 400
    assert resp.get_json()['details'] == ['Amount for A expense 2 must be a number']


def test_calculate_rejects_infinite_strings(client):
    resp = client.post('/api/calculate', json=[
        {'name': 'A', 'amountPaid': 'Infinity'},
        {'name': 'B', 'amountPaid': 5},
    ])

    assert resp.status_code == 400
    assert resp.get_json()['details'] == ['Amount for A expense 1 must be a number']


def test_create_app_sets_only_its_own_logger_level():
    root_level = logging.getLogger().level
    try:
        create_app(Config({'SPLITTER_LOG_LEVEL': 'debug'}))

        assert index.logger.level == logging.DEBUG
        assert logging.getLogger().level == root_level
    finally:
        index.logger.setLevel(logging.NOTSET)


def test_cors_echoes_configured_origin():
    client = create_app(Config({'CORS_ORIGINS': 'https://frontend.example'})).test_client()

    allowed = client.get('/api', headers={'Origin': 'https://frontend.example'})
    other = client.get('/api', headers={'Origin': 'https://elsewhere.example'})

    assert allowed.headers.get('Access-Control-Allow-Origin') == 'https://frontend.example'
    assert 'Access-Control-Allow-Origin' not in other.headers
