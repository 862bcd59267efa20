"""End-to-end CRUD flows through the HTTP layer and the real database."""
import pytest


BARCELONA = {
    'city': 'Barcelona',
    'temperature': 24.5,
    'humidity': 65,
    'pressure': 1015.2,
    'description': 'Sunny',
    'wind_speed': 12.3,
    'visibility': 15.0,
}


def _count(client):
    return client.get('/api/weather').json['count']


class TestLifecycle:
    def test_full_lifecycle(self, client):
        created = client.post('/api/weather', json={
            'city': 'Integration Test City',
            'temperature': 24.5,
            'humidity': 55,
            'pressure': 1016.2,
            'description': 'Clear sky',
            'wind_speed': 8.7,
            'visibility': 18.5,
        })
        assert created.status_code == 201
        record_id = created.json['data']['id']

        read = client.get('/api/weather/Integration Test City')
        assert read.status_code == 200
        assert read.json['data']['humidity'] == 55

        updated = client.put(f'/api/weather/{record_id}', json={
            'city': 'Integration Test City',
            'temperature': 28.0,
            'humidity': 48,
            'pressure': 1019.5,
            'description': 'Hot and sunny',
            'wind_speed': 12.3,
            'visibility': 22.0,
        })
        assert updated.status_code == 200

        reread = client.get('/api/weather/integration test city')
        assert reread.json['data']['temperature'] == 28.0
        assert reread.json['data']['description'] == 'Hot and sunny'

        deleted = client.delete(f'/api/weather/{record_id}')
        assert deleted.status_code == 200

        gone = client.get('/api/weather/Integration Test City')
        assert gone.status_code == 404
        assert gone.json['success'] is False

    def test_barcelona_example(self, client):
        resp = client.post('/api/weather', json=BARCELONA)
        assert resp.status_code == 201
        assert 'id' in resp.json['data']

        resp = client.get('/api/weather/BARCELONA')
        assert resp.status_code == 200
        assert resp.json['data']['city'] == 'Barcelona'

    @pytest.mark.parametrize('variant', ['Barcelona', 'barcelona', 'BARCELONA', 'bArCeLoNa'])
    def test_create_then_get_returns_same_values(self, client, variant):
        client.post('/api/weather', json=BARCELONA)
        data = client.get(f'/api/weather/{variant}').json['data']
        for key, value in BARCELONA.items():
            assert data[key] == value


class TestInvariants:
    def test_duplicate_leaves_existing_record(self, client):
        client.post('/api/weather', json=BARCELONA)
        resp = client.post('/api/weather', json={**BARCELONA, 'city': 'barcelona', 'temperature': -5.0})
        assert resp.status_code == 409

        data = client.get('/api/weather/Barcelona').json['data']
        assert data['city'] == 'Barcelona'
        assert data['temperature'] == 24.5
        assert _count(client) == 1

    def test_update_unknown_id_keeps_count(self, client, sample_records):
        before = _count(client)
        resp = client.put('/api/weather/424242', json=BARCELONA)
        assert resp.status_code == 404
        assert _count(client) == before

    def test_failed_create_keeps_count(self, client, sample_records):
        before = _count(client)
        resp = client.post('/api/weather', json={'city': 'Invalid City'})
        assert resp.status_code == 400
        assert _count(client) == before

    def test_create_and_delete_change_count_by_one(self, client, sample_records):
        before = _count(client)
        record_id = client.post('/api/weather', json=BARCELONA).json['data']['id']
        assert _count(client) == before + 1

        client.delete(f'/api/weather/{record_id}')
        assert _count(client) == before

    def test_several_creates_then_cleanup(self, client):
        cities = ['Integration City A', 'Integration City B', 'Integration City C']
        ids = []
        for i, city in enumerate(cities):
            resp = client.post('/api/weather', json={
                **BARCELONA,
                'city': city,
                'temperature': 20 + i,
            })
            assert resp.status_code == 201
            ids.append(resp.json['data']['id'])

        listed = [r['city'] for r in client.get('/api/weather').json['data']]
        assert listed == cities

        for record_id in ids:
            assert client.delete(f'/api/weather/{record_id}').status_code == 200
        assert _count(client) == 0


class TestSearchConsistency:
    def test_search_empty_returns_everything(self, client, sample_records):
        everything = client.get('/api/weather').json['data']
        searched = client.get('/api/weather/search/').json['data']
        assert searched == everything

    @pytest.mark.parametrize('fragment', ['o', 'ON', 'york', 'k', 'zzz'])
    def test_search_is_filter_of_list(self, client, sample_records, fragment):
        everything = client.get('/api/weather').json['data']
        expected = [r for r in everything if fragment.lower() in r['city'].lower()]
        assert client.get(f'/api/weather/search/{fragment}').json['data'] == expected
