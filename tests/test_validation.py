import pytest

from utils.errors import ValidationError
from utils.validation import is_valid_url, validate_project_payload
from tests.factories import project_payload


def test_valid_payload_maps_to_model_attributes():
    cleaned = validate_project_payload(project_payload(demoUrl='https://demo.example.com'))
    assert cleaned == {
        'title': 'Demo',
        'description': 'A demo project',
        'image_url': 'https://x/y.png',
        'demo_url': 'https://demo.example.com',
        'category': 'web',
        'tags': 'react,ts',
        'featured': False,
    }


def test_featured_defaults_to_false_on_create():
    payload = project_payload()
    del payload['featured']
    assert validate_project_payload(payload)['featured'] is False


def test_empty_optional_urls_are_treated_as_not_provided():
    cleaned = validate_project_payload(project_payload(demoUrl='', repoUrl=''))
    assert cleaned['demo_url'] is None
    assert cleaned['repo_url'] is None


def test_missing_required_fields_are_all_reported():
    with pytest.raises(ValidationError) as exc:
        validate_project_payload({'title': 'Demo'})
    assert set(exc.value.fields) == {'description', 'imageUrl', 'category', 'tags'}
    assert exc.value.status_code == 400


@pytest.mark.parametrize('overrides, field', [
    ({'title': ''}, 'title'),
    ({'title': 'A'}, 'title'),
    ({'description': 'too short'}, 'description'),
    ({'imageUrl': 'not a url'}, 'imageUrl'),
    ({'imageUrl': 'ftp://host/file.png'}, 'imageUrl'),
    ({'demoUrl': 'example.com'}, 'demoUrl'),
    ({'repoUrl': 'github'}, 'repoUrl'),
    ({'category': 'games'}, 'category'),
    ({'category': ''}, 'category'),
    ({'tags': '   '}, 'tags'),
    ({'featured': 'yes'}, 'featured'),
    ({'title': 'x' * 256}, 'title'),
    ({'imageUrl': 'https://example.com/' + 'a' * 500}, 'imageUrl'),
    ({'repoUrl': 'https://github.com/' + 'a' * 500}, 'repoUrl'),
])
def test_invalid_field_is_rejected(overrides, field):
    with pytest.raises(ValidationError) as exc:
        validate_project_payload(project_payload(**overrides))
    assert field in exc.value.fields


def test_non_object_body_is_rejected():
    with pytest.raises(ValidationError) as exc:
        validate_project_payload(['title'])
    assert exc.value.message == 'Request body must be a JSON object'


def test_partial_checks_only_supplied_fields():
    assert validate_project_payload({'featured': True}, partial=True) == {'featured': True}
    assert validate_project_payload({}, partial=True) == {}


def test_partial_cannot_blank_required_field():
    with pytest.raises(ValidationError) as exc:
        validate_project_payload({'title': ''}, partial=True)
    assert list(exc.value.fields) == ['title']


def test_unknown_and_readonly_keys_are_ignored():
    cleaned = validate_project_payload({'id': 'abc', 'createdAt': 'x', 'tags': 'a'}, partial=True)
    assert cleaned == {'tags': 'a'}


def test_url_check():
    assert is_valid_url('https://example.com/a.png')
    assert is_valid_url('http://localhost:3000')
    assert not is_valid_url('/placeholder.svg')
    assert not is_valid_url('https://exa mple.com')
    assert not is_valid_url(None)
    assert not is_valid_url('http://:80')
    assert not is_valid_url('https://@')


def test_title_at_column_limit_is_accepted():
    cleaned = validate_project_payload(project_payload(title='x' * 255))
    assert len(cleaned['title']) == 255
