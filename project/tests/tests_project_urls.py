import pytest
from django.urls import reverse, resolve

@pytest.mark.parametrize("url_name, expected_status", [
    ("generator", 200),
    ("generator-download", 200),
    ("robots_txt", 200),
])
def test_project_urls(client, url_name, expected_status):
    """
    Test that each project-level named URL can be reversed, resolved, and returns a valid response.
    """
    url = reverse(url_name)
    match = resolve(url)
    assert match.view_name == url_name

    response = client.get(url)
    assert response.status_code == expected_status

def test_sitemap_url_resolves(client):
    url = reverse("sitemap")
    assert url == "/sitemap.xml"
    response = client.get(url)
    # INDEXABLE is off in the test settings
    assert response.status_code == 404
