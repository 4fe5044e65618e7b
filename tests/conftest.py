import pytest

from config import Config
from index import create_app
from settlement import ExpenseRecord, Participant


@pytest.fixture
def client():
    app = create_app(Config({'SPLITTER_APP_URL': 'https://split.example'}))
    app.config['TESTING'] = True
    return app.test_client()


@pytest.fixture
def trip():
    return [
        Participant.from_amount('A', 300),
        Participant.from_amount('B', 100),
        Participant.from_amount('C', 50),
    ]


def people(*amounts):
    """Participants named P1, P2, ... each with one payment."""
    return [Participant.from_amount(f'P{i + 1}', amount) for i, amount in enumerate(amounts)]


def hotel_and_cab():
    return Participant('A', [ExpenseRecord(80, 'hotel'), ExpenseRecord(20, 'cab')])
