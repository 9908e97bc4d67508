from django.urls import reverse

def test_robots_txt_indexable_true(settings, client):
    settings.INDEXABLE = True
    url = reverse("robots_txt")
    response = client.get(url)
    assert response.status_code == 200
    assert response["Content-Type"].startswith("text/plain")
    lines = response.content.decode().split("\n")
    assert "Allow: /" in lines
    assert "Disallow: /" not in lines
    assert "Disallow: /download/" in lines
    assert "Sitemap: http://testserver/sitemap.xml" in lines

def test_robots_txt_indexable_false(settings, client):
    settings.INDEXABLE = False
    url = reverse("robots_txt")
    response = client.get(url)
    assert response.status_code == 200
    assert response["Content-Type"].startswith("text/plain")
    assert response.content.decode().split("\n") == ["User-agent: *", "Disallow: /"]
