"""
Integration tests for the HTTP surface

Drives the FastAPI app through TestClient with the real container wiring.
"""

from fastapi.testclient import TestClient
import pytest

from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.service.stage.driving_adapter.http_controller.viewer_controller import (
    router as viewer_router,
)


@pytest.mark.integration
class TestControlSurface:
    def test_missing_type(self, client):
        response = client.post('/broadcast', json={'payload': {'scene': 'pulse'}})

        assert response.status_code == 400
        assert response.json() == {'detail': 'Missing type'}

    def test_malformed_body_counts_as_empty(self, client):
        response = client.post(
            '/broadcast', content=b'{not json', headers={'Content-Type': 'application/json'}
        )

        assert response.status_code == 400
        assert response.json() == {'detail': 'Missing type'}

    def test_join_updates_state(self, client):
        response = client.post(
            '/broadcast',
            json={'type': 'join', 'payload': {'role': 'student', 'interests': ['arts']}},
        )

        assert response.status_code == 200
        body = response.json()
        assert body['ok'] is True
        assert body['payload'] == {
            'audienceCounts': {'total': 1, 'students': 1, 'parents': 0},
            'interests': {'arts': 1},
        }
        assert body['state']['audienceCounts'] == {'total': 1, 'students': 1, 'parents': 0}

    def test_poll_round_trip(self, client):
        client.post(
            '/broadcast',
            json={
                'type': 'poll:start',
                'payload': {
                    'question': 'Pick one',
                    'options': [{'label': 'A'}, {'label': 'B'}],
                    'answerText': 'A',
                },
            },
        )
        client.post('/broadcast', json={'type': 'poll:vote', 'payload': {'optionId': 1}})

        response = client.post('/broadcast', json={'type': 'poll:reveal', 'payload': {}})

        assert response.json()['payload'] == {
            'answerText': 'A',
            'options': [
                {'id': 1, 'label': 'A', 'count': 1},
                {'id': 2, 'label': 'B', 'count': 0},
            ],
        }

    def test_unknown_type_passthrough(self, client):
        response = client.post('/broadcast', json={'type': 'confetti', 'payload': {'n': 3}})

        assert response.status_code == 200
        assert response.json()['payload'] == {'n': 3}

    def test_timeline_start_and_stop(self, client):
        started = client.post(
            '/broadcast', json={'type': 'timeline', 'payload': {'action': 'start'}}
        ).json()
        assert started['state']['timeline']['active'] is True

        stopped = client.post(
            '/broadcast', json={'type': 'timeline', 'payload': {'action': 'stop'}}
        ).json()
        assert stopped['state']['timeline'] == {'active': False, 'label': 'Stopped by host'}


@pytest.mark.integration
class TestViewerEndpoints:
    def test_state(self, client):
        client.post('/broadcast', json={'type': 'scene', 'payload': {'scene': 'tracks'}})

        response = client.get('/state')

        assert response.status_code == 200
        assert response.json()['scene'] == 'tracks'

    def test_presets(self, client):
        response = client.get('/presets')

        assert response.status_code == 200
        assert [preset['key'] for preset in response.json()] == [
            'cca', 'g3jc', 'g3poly', 'g2pfp', 'nexus',
        ]

    def test_personas(self, client):
        response = client.get('/personas')

        assert [persona['id'] for persona in response.json()] == [
            'explorer', 'creator', 'guardian', 'trailblazer',
        ]

    def test_every_viewer_endpoint_is_logged(self):
        endpoints = {route.path: route.endpoint for route in viewer_router.routes}

        assert set(endpoints) == {'/events', '/state', '/presets', '/personas'}
        assert all(hasattr(endpoint, '__wrapped__') for endpoint in endpoints.values())


@pytest.mark.integration
class TestJourneyEndpoints:
    def test_submit_list_and_clear(self, client):
        assert client.post('/journey/clear').json() == {'ok': True}

        response = client.post(
            '/journey', json={'name': 'Ana', 'email': 'ana@example.com', 'interests': ['arts']}
        )
        assert response.json() == {'ok': True}
        client.post('/journey', content=b'oops')

        entries = client.get('/journey').json()
        assert len(entries) == 2
        assert entries[0]['name'] == 'Ana'
        assert entries[1]['name'] == ''
        assert client.get('/state').json()['journeyCount'] == 2

        assert client.post('/journey/clear').json() == {'ok': True}
        assert client.get('/journey').json() == []
        assert client.get('/state').json()['journeyCount'] == 0

    def test_journey_count_seeded_from_log(self, stage_app):
        settings.JOURNEY_FILE.parent.mkdir(parents=True, exist_ok=True)
        settings.JOURNEY_FILE.write_text('{"name":"a"}\n{"name":"b"}\n')
        container.reset_singletons()

        with TestClient(stage_app) as fresh_client:
            assert fresh_client.get('/state').json()['journeyCount'] == 2
            fresh_client.post('/journey/clear')

        container.reset_singletons()


@pytest.mark.integration
class TestPlatformEndpoints:
    def test_health(self, client):
        assert client.get('/health').json() == {
            'status': 'healthy',
            'service': settings.PROJECT_NAME,
        }

    def test_metrics(self, client):
        client.post('/broadcast', json={'type': 'ops:ping'})

        response = client.get('/metrics')

        assert response.status_code == 200
        assert 'stage_actions_applied_total' in response.text

    def test_missing_page(self, client):
        response = client.get('/admin')

        assert response.status_code == 404

    def test_pages(self, client):
        settings.PUBLIC_DIR.mkdir(parents=True, exist_ok=True)
        (settings.PUBLIC_DIR / 'index.html').write_text('<h1>stage</h1>')
        (settings.PUBLIC_DIR / 'app.js').write_text('// viewer')

        assert client.get('/').text == '<h1>stage</h1>'
        assert client.get('/stage').text == '<h1>stage</h1>'
        assert client.get('/app.js').text == '// viewer'
